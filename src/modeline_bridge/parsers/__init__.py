"""Parsers locate mode lines in a buffer and read directive values.

- ``header``: ``-*- ... -*-`` markers on the first two lines
- ``footer``: the ``Local Variables:`` block near the end of the file
- ``directive``: bounded value extraction from one mode line
"""

from __future__ import annotations

from .directive import UnboundedGrammarError, ValueGrammar, extract
from .footer import FooterBlock, find_footer_block, scan_footer
from .header import scan_header

__all__ = [
    "FooterBlock",
    "UnboundedGrammarError",
    "ValueGrammar",
    "extract",
    "find_footer_block",
    "scan_footer",
    "scan_header",
]
