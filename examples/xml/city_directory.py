"""Stream an XML directory straight into a file."""

import sys
from pathlib import Path

from prettytags import AutoIndent, FileDocument, FmtRule, Language, MarkupWriter

CITIES = {
    "Hamburg": "Hamburg is the residence of ...",
    "Munich": "Munich is the residence of ...",
}

fmtr = AutoIndent()
fmtr.register(["directory", "entry"], FmtRule.INDENT_ALWAYS)
fmtr.register(["title", "keyword", "entrystext"], FmtRule.LF_CLOSING)

target = Path(sys.argv[1] if len(sys.argv) > 1 else "cities.xml")
with FileDocument(target) as doc:
    writer = MarkupWriter(doc, language=Language.XML, formatter=fmtr)
    writer.open("directory")
    writer.element("title", "Wikipedia List of Cities")
    for city, description in CITIES.items():
        writer.open("entry")
        writer.element("keyword", city)
        writer.element("entrystext", description)
        writer.close()
    writer.close_all()
    writer.finalize()

print(target.read_text(encoding="utf-8"))
