"""Buffer access — the read side of the host editor."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

# Form feeds are not line breaks.
_EOL_RE = re.compile(r"\r\n|\r|\n")


def _split_lines(text: str) -> list[str]:
    lines = _EOL_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Buffer(Protocol):
    """Every buffer must expose 1-based line access and its size in bytes."""

    def get_line(self, n: int) -> str:
        """Return line *n* (1-based) without its line terminator."""
        ...

    def line_count(self) -> int:
        ...

    def file_size(self) -> int:
        ...

    def has_final_newline(self) -> bool:
        """True when the last line is followed by a line terminator."""
        ...


class TextBuffer:
    """In-memory buffer over a decoded text.

    ``file_size`` is the encoded byte length of the original text, so the
    footer window matches what an editor would report for the file on disk.
    """

    def __init__(self, text: str, *, encoding: str = "utf-8", name: str = "<text>") -> None:
        self.name = name
        self._lines = _split_lines(text)
        self._final_newline = text.endswith(("\n", "\r"))
        self._size = len(text.encode(encoding, errors="replace"))

    @classmethod
    def from_text(cls, text: str, *, encoding: str = "utf-8") -> "TextBuffer":
        return cls(text, encoding=encoding)

    @classmethod
    def from_path(cls, path: Path, *, encoding: str = "utf-8") -> "TextBuffer":
        data = path.read_bytes()
        text = data.decode(encoding, errors="replace")
        buf = cls(text, encoding=encoding, name=path.as_posix())
        buf._size = len(data)
        return buf

    def get_line(self, n: int) -> str:
        if n < 1 or n > len(self._lines):
            raise IndexError(f"line {n} out of range 1..{len(self._lines)}")
        return self._lines[n - 1]

    def line_count(self) -> int:
        return len(self._lines)

    def file_size(self) -> int:
        return self._size

    def has_final_newline(self) -> bool:
        return self._final_newline
