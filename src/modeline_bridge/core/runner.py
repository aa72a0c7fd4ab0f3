"""Runner — orchestrates the header and footer scans for one buffer."""

from __future__ import annotations

import logging

from modeline_bridge.core.applier import OptionApplier
from modeline_bridge.core.buffer import Buffer
from modeline_bridge.core.config import BridgeConfig
from modeline_bridge.core.dictionary import ModeDictionary
from modeline_bridge.core.host import SettingsSink
from modeline_bridge.model import Origin
from modeline_bridge.model.setting import AppliedSetting
from modeline_bridge.parsers.footer import scan_footer
from modeline_bridge.parsers.header import scan_header

_logger = logging.getLogger(__name__)


def apply_modelines(
    buffer: Buffer,
    sink: SettingsSink,
    *,
    dictionary: ModeDictionary,
    config: BridgeConfig | None = None,
) -> list[AppliedSetting]:
    """Apply the header mode line, then the footer block, to *sink*.

    This ordering is part of the contract: when both set the same option
    the footer's value is applied last and wins.
    """
    cfg = config or BridgeConfig()
    applier = OptionApplier(sink, dictionary)
    applied: list[AppliedSetting] = []

    # ── 1. header (-*- ... -*-) ─────────────────────────────────────
    for lnum, modeline in scan_header(buffer):
        applied.extend(applier.apply(modeline, origin=Origin.HEADER, line=lnum))

    # ── 2. footer (Local Variables: ... End:) ──────────────────────
    for lnum, modeline in scan_footer(buffer, encoding=cfg.encoding):
        applied.extend(applier.apply(modeline, origin=Origin.FOOTER, line=lnum))

    _logger.debug("applied %d setting(s)", len(applied))
    return applied


class ModelineEngine:
    """Binds the alias table and configuration once, at startup.

    Hosts call :meth:`on_buffer_loaded` from their buffer-loaded event.
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        dictionary: ModeDictionary | None = None,
    ) -> None:
        self.config = config or BridgeConfig()
        if dictionary is None:
            dictionary = ModeDictionary.with_defaults(self.config.aliases)
        self.dictionary = dictionary

    def on_buffer_loaded(self, buffer: Buffer, sink: SettingsSink) -> list[AppliedSetting]:
        return apply_modelines(
            buffer, sink, dictionary=self.dictionary, config=self.config
        )
