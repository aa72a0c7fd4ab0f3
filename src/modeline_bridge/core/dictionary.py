"""Mode dictionary — Emacs major-mode aliases to native language identifiers."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Mapping

DEFAULT_MODE_ALIASES: Mapping[str, str] = MappingProxyType({
    "c++": "cpp",
    "shell-script": "sh",
    "makefile": "make",
    "js": "javascript",
    "protobuf": "proto",
})


class ModeDictionary:
    """Case-insensitive alias table.

    Merges are additive: a key that is already present is never replaced,
    so merging user overrides before the defaults lets the user win.
    Lookups read an immutable snapshot; merges are serialised by a lock.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._table: Mapping[str, str] = MappingProxyType({})
        if entries:
            self.merge(entries)

    @classmethod
    def with_defaults(
        cls, user_overrides: Mapping[str, str] | None = None
    ) -> "ModeDictionary":
        """Build the startup table: user entries first, then built-ins."""
        return cls(user_overrides).merge(DEFAULT_MODE_ALIASES)

    def merge(self, entries: Mapping[str, str]) -> "ModeDictionary":
        with self._lock:
            table = dict(self._table)
            for alias, canonical in entries.items():
                table.setdefault(alias.lower(), canonical)
            self._table = MappingProxyType(table)
        return self

    def lookup(self, name: str) -> str | None:
        return self._table.get(name.lower())

    def as_dict(self) -> dict[str, str]:
        return dict(sorted(self._table.items()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ModeDictionary({len(self)} aliases)"
