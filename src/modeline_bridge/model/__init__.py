"""Enums shared across the scanners, the applier and the output layer."""

from __future__ import annotations

from enum import Enum


class SettingKind(str, Enum):
    """Typed call made on the settings sink."""

    LANGUAGE = "language"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    STRING = "string"


class Origin(str, Enum):
    """Where in the buffer a mode line was found."""

    HEADER = "header"
    FOOTER = "footer"


class NativeOption(str, Enum):
    """Native editor option names targeted by the applier."""

    FILETYPE = "filetype"
    TEXT_WIDTH = "textwidth"
    TAB_STOP = "tabstop"
    SHIFT_WIDTH = "shiftwidth"
    SOFT_TAB_STOP = "softtabstop"
    READ_ONLY = "readonly"
    EXPAND_TAB = "expandtab"
    ENCODING = "fileencoding"
    FILE_FORMAT = "fileformat"


# shiftwidth=0 follows tabstop, softtabstop=-1 follows shiftwidth.
DERIVE_FROM_TAB_STOP = 0
DERIVE_FROM_SHIFT_WIDTH = -1
