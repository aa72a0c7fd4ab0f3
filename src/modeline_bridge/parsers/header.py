"""Header scanner — ``-*- ... -*-`` mode lines on the first lines of a buffer."""

from __future__ import annotations

import re
from typing import Iterator

from modeline_bridge.core.buffer import Buffer

HEADER_MAX_LINES = 2

_HEADER_RE = re.compile(r"-\*-(.*?)-\*-")


def header_modeline(line: str) -> str | None:
    """Return the text between the first two ``-*-`` markers of *line*."""
    m = _HEADER_RE.search(line)
    if m is None:
        return None
    return m.group(1)


def scan_header(buffer: Buffer) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, modeline)`` for lines 1..``HEADER_MAX_LINES`` only."""
    last = min(HEADER_MAX_LINES, buffer.line_count())
    for lnum in range(1, last + 1):
        modeline = header_modeline(buffer.get_line(lnum))
        if modeline is not None:
            yield lnum, modeline
