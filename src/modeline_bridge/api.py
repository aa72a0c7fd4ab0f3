"""
modeline_bridge.api
===================

Programmatic entrypoints for hosts that want resolved settings rather than
live sink calls.

Goals:
  - No argparse / CLI dependencies
  - JSON-friendly output validated against ``modeline_result.schema.json``

Non-goals:
  - Applying settings to a real editor — hosts pass their own sink to
    :func:`modeline_bridge.core.runner.apply_modelines` for that

Usage::

    from modeline_bridge.api import resolve_file, resolve_text

    result = resolve_text("// -*- mode: c++; tab-width: 4 -*-\\n")
    result["language"]          # "cpp"
    result["settings"]["tabstop"]  # 4
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from modeline_bridge.contracts.load import validate_instance
from modeline_bridge.core.buffer import Buffer, TextBuffer
from modeline_bridge.core.config import BridgeConfig
from modeline_bridge.core.dictionary import DEFAULT_MODE_ALIASES, ModeDictionary
from modeline_bridge.core.host import RecordingSink
from modeline_bridge.core.runner import apply_modelines
from modeline_bridge.model.result import ModelineResult

RESULT_SCHEMA = "modeline_result.schema.json"


def load_config(path: Path | str | None = None) -> BridgeConfig:
    """Load configuration from *path*, ``$MODELINE_BRIDGE_CONFIG``, or defaults."""
    return BridgeConfig.discover(Path(path) if path is not None else None)


def build_dictionary(
    config: BridgeConfig | None = None,
    extra_aliases: Mapping[str, str] | None = None,
) -> ModeDictionary:
    """Startup alias table: *extra_aliases*, then config aliases, then built-ins."""
    cfg = config or BridgeConfig()
    dictionary = ModeDictionary(extra_aliases)
    dictionary.merge(cfg.aliases)
    return dictionary.merge(DEFAULT_MODE_ALIASES)


def resolve_buffer(
    buffer: Buffer,
    *,
    source: str = "<text>",
    config: BridgeConfig | None = None,
    dictionary: ModeDictionary | None = None,
) -> dict[str, Any]:
    """Run the engine on *buffer* and return the validated result dict."""
    cfg = config or BridgeConfig()
    if dictionary is None:
        dictionary = build_dictionary(cfg)
    applied = apply_modelines(buffer, RecordingSink(), dictionary=dictionary, config=cfg)
    result_dict = ModelineResult(source=source, applied=applied).to_dict()
    validate_instance(result_dict, RESULT_SCHEMA)
    return result_dict


def resolve_text(
    text: str,
    *,
    config: BridgeConfig | None = None,
    dictionary: ModeDictionary | None = None,
    source: str = "<text>",
) -> dict[str, Any]:
    cfg = config or BridgeConfig()
    buffer = TextBuffer.from_text(text, encoding=cfg.encoding)
    return resolve_buffer(buffer, source=source, config=cfg, dictionary=dictionary)


def resolve_file(
    path: Path | str,
    *,
    config: BridgeConfig | None = None,
    dictionary: ModeDictionary | None = None,
) -> dict[str, Any]:
    """Resolve the mode lines of a file on disk.

    Raises ``OSError`` when the file cannot be read.
    """
    cfg = config or BridgeConfig()
    p = Path(path)
    buffer = TextBuffer.from_path(p, encoding=cfg.encoding)
    return resolve_buffer(buffer, source=p.as_posix(), config=cfg, dictionary=dictionary)
