"""Tests for output documents."""

from pathlib import Path

from prettytags import Document, FileDocument, StringDocument


class TestStringDocument:
    """In-memory document."""

    def test_build(self) -> None:
        doc = StringDocument()
        doc.write("<h1>")
        doc.write("Hello")
        doc.write("</h1>")
        assert doc.build() == "<h1>Hello</h1>"
        assert str(doc) == "<h1>Hello</h1>"

    def test_build_is_repeatable(self) -> None:
        doc = StringDocument()
        doc.write("a")
        doc.write("b")
        assert doc.build() == "ab"
        doc.write("c")
        assert doc.build() == "abc"
        assert doc.build() == "abc"

    def test_length_and_truthiness(self) -> None:
        doc = StringDocument()
        assert len(doc) == 0
        assert not doc
        doc.write("")
        assert not doc
        doc.write("abc")
        doc.write("de")
        assert len(doc) == 5
        assert doc

    def test_clear(self) -> None:
        doc = StringDocument()
        doc.write("abc")
        doc.clear()
        assert doc.build() == ""
        assert len(doc) == 0

    def test_is_document(self) -> None:
        assert isinstance(StringDocument(), Document)


class TestFileDocument:
    """Document backed by a file."""

    def test_writes_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.xml"
        with FileDocument(target) as doc:
            doc.write("<a>\n")
            doc.write("</a>")
            assert doc.path == str(target)
            assert not doc.closed
        assert doc.closed
        assert target.read_bytes() == b"<a>\n</a>"

    def test_flush(self, tmp_path: Path) -> None:
        target = tmp_path / "out.html"
        doc = FileDocument(target)
        try:
            doc.write("<p>")
            doc.flush()
            assert target.read_text(encoding="utf-8") == "<p>"
        finally:
            doc.close()

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.html"
        target.write_text("old content", encoding="utf-8")
        with FileDocument(target) as doc:
            doc.write("new")
        assert target.read_text(encoding="utf-8") == "new"

    def test_encoding(self, tmp_path: Path) -> None:
        target = tmp_path / "out.html"
        with FileDocument(target, encoding="latin-1") as doc:
            doc.write("Café")
        assert target.read_bytes() == "Café".encode("latin-1")

    def test_is_document(self, tmp_path: Path) -> None:
        with FileDocument(tmp_path / "x") as doc:
            assert isinstance(doc, Document)
            assert "x" in repr(doc)
