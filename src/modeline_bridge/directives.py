"""Canonical directive registry.

Single source of truth for the Emacs file-variable names the engine knows.

Structure:
  SUPPORTED_DIRECTIVES - translated to a native setting by core.applier
  IGNORED_DIRECTIVES   - recognised but never applied (would run file content)
  IGNORED_SUFFIXES     - name suffixes that mark a variable as executable
"""

from __future__ import annotations

# ── Supported ───────────────────────────────────────────────────────
MODE = "mode"
FILL_COLUMN = "fill-column"
TAB_WIDTH = "tab-width"
C_BASIC_OFFSET = "c-basic-offset"
BUFFER_READ_ONLY = "buffer-read-only"
INDENT_TABS_MODE = "indent-tabs-mode"
CODING = "coding"

# ── Never honoured ──────────────────────────────────────────────────
COMPILE_COMMAND = "compile-command"
EVAL = "eval"

SUPPORTED_DIRECTIVES: list[str] = sorted([
    MODE,
    FILL_COLUMN,
    TAB_WIDTH,
    C_BASIC_OFFSET,
    BUFFER_READ_ONLY,
    INDENT_TABS_MODE,
    CODING,
])

IGNORED_DIRECTIVES: list[str] = sorted([
    COMPILE_COMMAND,
    EVAL,
])

IGNORED_SUFFIXES: tuple[str, ...] = ("-command", "-function", "-functions", "-hook")


def is_supported(name: str) -> bool:
    return name.lower() in SUPPORTED_DIRECTIVES


def is_ignored(name: str) -> bool:
    """Return True for directives that would execute code if honoured."""
    lowered = name.lower()
    if lowered in IGNORED_DIRECTIVES:
        return True
    return lowered.endswith(IGNORED_SUFFIXES)


def _assert_registry_invariants() -> None:
    """Fail fast on invariant violations.

    Called at import time so test runs catch issues immediately.
    """
    import re

    name_re = re.compile(r"^[a-z][a-z0-9+-]*$")

    def _check_bucket(name: str, ids: list[str]) -> None:
        if ids != sorted(ids):
            raise AssertionError(f"{name} must be sorted")
        if len(ids) != len(set(ids)):
            raise AssertionError(f"{name} must contain unique names")
        bad = [x for x in ids if not name_re.match(x)]
        if bad:
            raise AssertionError(f"{name} contains invalid directive names: {bad}")

    _check_bucket("SUPPORTED_DIRECTIVES", SUPPORTED_DIRECTIVES)
    _check_bucket("IGNORED_DIRECTIVES", IGNORED_DIRECTIVES)

    overlap = set(SUPPORTED_DIRECTIVES) & set(IGNORED_DIRECTIVES)
    if overlap:
        raise AssertionError(
            f"Directive buckets must be disjoint; overlaps: {sorted(overlap)}"
        )
    executable = [x for x in SUPPORTED_DIRECTIVES if x.endswith(IGNORED_SUFFIXES)]
    if executable:
        raise AssertionError(f"Supported directives look executable: {executable}")


_assert_registry_invariants()
