"""ModelineResult — top-level output of one buffer resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import NativeOption
from .setting import AppliedSetting

SCHEMA_VERSION = "modeline_result_v1"


@dataclass(frozen=True)
class ModelineResult:
    """Every setting applied for one buffer, in application order.

    ``settings`` holds the final value per native option: later calls
    overwrite earlier ones, so footer directives win over the header.
    """

    source: str
    applied: list[AppliedSetting] = field(default_factory=list)

    @property
    def language(self) -> str | None:
        value = self.settings.get(NativeOption.FILETYPE.value)
        return value if isinstance(value, str) else None

    @property
    def settings(self) -> dict[str, Any]:
        resolved: dict[str, Any] = {}
        for item in self.applied:
            resolved[item.option] = item.value
        return resolved

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "source": self.source,
            "language": self.language,
            "settings": self.settings,
            "applied": [a.to_dict() for a in self.applied],
        }
