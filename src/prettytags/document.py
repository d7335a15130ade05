"""Documents the writer streams its output into.

Any object with a ``write(s: str)`` method can serve as a document.
Two implementations are provided:

- StringDocument: in-memory, appends to a list and joins once at the end,
  O(n) total vs O(n²) for repeated string concatenation
- FileDocument: buffered text file on disk

Thread Safety:
Documents are owned by a single writer. No shared mutable state.

"""

from __future__ import annotations

import os
from types import TracebackType
from typing import IO, Protocol, runtime_checkable


@runtime_checkable
class Document(Protocol):
    """Protocol for output targets.

    ``write`` may raise (e.g. OSError for files); the writer lets such
    errors propagate and leaves the partial output as it is.
    """

    def write(self, s: str) -> None: ...


class StringDocument:
    """In-memory document.

    Usage:
            >>> doc = StringDocument()
            >>> doc.write("<h1>")
            >>> doc.write("Hello")
            >>> doc.write("</h1>")
            >>> doc.build()
            '<h1>Hello</h1>'

    """

    __slots__ = ("_parts", "_size")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._size = 0

    def write(self, s: str) -> None:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
            self._size += len(s)

    def build(self) -> str:
        """Join all parts into the final string."""
        if len(self._parts) > 1:
            # Collapse so repeated build() calls stay cheap
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def clear(self) -> None:
        self._parts.clear()
        self._size = 0

    def __str__(self) -> str:
        return self.build()

    def __len__(self) -> int:
        """Return the number of characters written."""
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0


class FileDocument:
    """Document writing to a text file through a buffered stream.

    Usage:
        >>> with FileDocument("index.html") as doc:
        ...     writer = MarkupWriter(doc)
        ...     writer.element("p", "Hello")
        ...     writer.finalize()

    """

    __slots__ = ("_path", "_stream")

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        encoding: str = "utf-8",
        newline: str | None = "",
    ) -> None:
        """Open (and truncate) the target file.

        Args:
            path: File to write
            encoding: Text encoding
            newline: Newline translation; "" writes linefeeds unchanged
        """
        self._path = os.fspath(path)
        self._stream: IO[str] = open(self._path, "w", encoding=encoding, newline=newline)  # noqa: SIM115

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def write(self, s: str) -> None:
        self._stream.write(s)

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> FileDocument:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileDocument({self._path!r})"


__all__ = ["Document", "FileDocument", "StringDocument"]
