"""AppliedSetting — one typed call issued on the settings sink."""

from __future__ import annotations

from dataclasses import dataclass

from . import Origin, SettingKind


@dataclass(frozen=True, slots=True)
class AppliedSetting:
    """Immutable record of a setting applied from a mode line.

    Corresponds to ``applied[]`` in ``modeline_result.schema.json``.
    """

    kind: SettingKind
    option: str
    value: str | int | bool
    directive: str             # source directive name, "" for whole-line fallback
    origin: Origin
    line: int                  # 1-based buffer line

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "option": self.option,
            "value": self.value,
            "directive": self.directive,
            "origin": self.origin.value,
            "line": self.line,
        }
