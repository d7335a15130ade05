"""Describe your own markup language with a SyntaxConfig."""

from prettytags import (
    AutoIndent,
    FmtRule,
    MarkupWriter,
    SelfClosingTagConfig,
    SyntaxConfig,
    TagPairConfig,
)

bbcode = SyntaxConfig(
    self_closing=SelfClosingTagConfig(before="[", after="]"),
    tag_pairs=TagPairConfig(
        opener_before="[", opener_after="]", closer_before="[/", closer_after="]"
    ),
)

fmtr = AutoIndent(step_size=2)
fmtr.register(["list"], FmtRule.INDENT_ALWAYS)

writer = MarkupWriter(language=bbcode, formatter=fmtr)
writer.open("list")
for i, item in enumerate(("one", "two")):
    if i:
        writer.new_line()
    writer.self_closing("*")
    writer.text(item)
writer.close()
writer.finalize()

print(writer.getvalue())
