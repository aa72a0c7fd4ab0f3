"""Shared utilities for modeline_bridge."""

from modeline_bridge.utils.exit_codes import ExitCode
from modeline_bridge.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
