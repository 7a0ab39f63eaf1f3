"""Append-only plain-text sink with CRLF line breaks."""

from typing import List


class PlainTextWriter:
    """In-memory text accumulator.

    A soft space requested with :meth:`request_space` is written before the
    next :meth:`write`, and only when the output so far is non-empty and does
    not already end in whitespace. A line break cancels it.
    """

    newline = "\r\n"

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._space_pending = False

    def write(self, text: str) -> None:
        if not text:
            return
        if self._space_pending and self._parts and not self._parts[-1][-1].isspace():
            self._parts.append(" ")
        self._space_pending = False
        self._parts.append(text)

    def write_attached(self, text: str) -> None:
        """Write *text* directly after the previous output, leaving any soft space pending."""
        if text:
            self._parts.append(text)

    def write_line(self, text: str = "") -> None:
        self._space_pending = False
        self._parts.append(text + self.newline)

    def request_space(self) -> None:
        self._space_pending = True

    def getvalue(self) -> str:
        return "".join(self._parts)
