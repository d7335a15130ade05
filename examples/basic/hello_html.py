"""Write an indented HTML page call by call — no tree, no deps."""

from prettytags import FormatConfig, MarkupWriter

writer = MarkupWriter(config=FormatConfig.html_defaults())
writer.open("html")
writer.open("head")
writer.element("title", "New Website")
writer.close()
writer.open("body")
writer.element("div", "Hello")
writer.self_closing("img")
writer.properties(("src", "image.jpg"), ("alt", "A picture"))
writer.close_all()
writer.finalize()

print(writer.getvalue())
