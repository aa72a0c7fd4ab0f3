"""Footer scanner — the ``Local Variables:`` block at the end of a buffer.

Only the trailing ``FOOTER_MAX_BYTES`` of the file are considered, so the
scan does a bounded amount of work however large the buffer is.

The block is located by a single backward pass driven by a small state
machine::

    SEEKING_END  --"End:"-------------->  SEEKING_OPEN
    SEEKING_END  --"Local Variables:"-->  DONE   (block runs to the last line)
    SEEKING_OPEN --"End:"-------------->  SEEKING_OPEN  (nearer terminator)
    SEEKING_OPEN --"Local Variables:"-->  DONE

The first opening line met going backwards (the last one in the file) wins.
Every line of the block has the opening line's prefix and suffix stripped
to recover the directive text, e.g.::

    /* Local Variables: */
    /* tab-width: 4 */
    /* End: */
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from modeline_bridge.core.buffer import Buffer

FOOTER_MAX_BYTES = 3000

_END_MARKER = "End:"
_OPEN_RE = re.compile(r"^(?P<prefix>.*?)(?i:local variables):(?P<suffix>.*)$")


class FooterState(Enum):
    SEEKING_END = "seeking_end"
    SEEKING_OPEN = "seeking_open"
    DONE = "done"


@dataclass(frozen=True)
class FooterBlock:
    """Boundaries and comment decoration of a Local Variables block."""

    open_line: int
    close_line: int
    prefix: str
    suffix: str

    def strip(self, line: str) -> str:
        """Remove the literal prefix and suffix; a missing one is left alone."""
        if self.prefix and line.startswith(self.prefix):
            line = line[len(self.prefix):]
        if self.suffix and line.endswith(self.suffix):
            line = line[: -len(self.suffix)]
        return line


def footer_start_line(
    buffer: Buffer, *, encoding: str = "utf-8"
) -> int:
    """Return the first line that overlaps the trailing ``FOOTER_MAX_BYTES``.

    Walks backwards from the last line summing encoded line lengths until the
    window start at ``file_size - FOOTER_MAX_BYTES`` is reached.  Every
    terminator counts as one byte; the last line's only when it has one.
    A ``\\r\\n`` terminator is two bytes, so CRLF files can only start earlier.
    """
    count = buffer.line_count()
    threshold = buffer.file_size() - FOOTER_MAX_BYTES
    if threshold <= 0 or count == 0:
        return 1
    offset = buffer.file_size()
    terminator = 1 if buffer.has_final_newline() else 0
    for lnum in range(count, 0, -1):
        offset -= len(buffer.get_line(lnum).encode(encoding, errors="replace")) + terminator
        terminator = 1
        if offset <= threshold:
            return lnum
    return 1


def find_footer_block(
    buffer: Buffer, *, encoding: str = "utf-8"
) -> FooterBlock | None:
    """Locate the Local Variables block, or return None when there is none."""
    last = buffer.line_count()
    start = footer_start_line(buffer, encoding=encoding)

    state = FooterState.SEEKING_END
    close_line = last
    block: FooterBlock | None = None
    lnum = last
    while state is not FooterState.DONE and lnum >= start:
        line = buffer.get_line(lnum)
        if _END_MARKER in line:
            close_line = lnum - 1
            state = FooterState.SEEKING_OPEN
        m = _OPEN_RE.match(line)
        if m is not None:
            block = FooterBlock(
                open_line=lnum,
                close_line=close_line,
                prefix=m.group("prefix"),
                suffix=m.group("suffix"),
            )
            state = FooterState.DONE
        lnum -= 1
    return block


def scan_footer(
    buffer: Buffer, *, encoding: str = "utf-8"
) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, modeline)`` for every line inside the block."""
    block = find_footer_block(buffer, encoding=encoding)
    if block is None:
        return
    for lnum in range(block.open_line + 1, block.close_line + 1):
        yield lnum, block.strip(buffer.get_line(lnum))
