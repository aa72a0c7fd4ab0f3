"""Option applier — turns mode-line directives into typed settings calls.

Dispatch table (directive → value grammar → native option):

  mode              MODE_NAME  filetype (alias-resolved, lowercased)
  fill-column       DIGITS     textwidth
  tab-width         DIGITS     tabstop; shiftwidth=0, softtabstop=-1
  c-basic-offset    DIGITS     softtabstop, shiftwidth
  buffer-read-only  FLAG       readonly   (nil → off)
  indent-tabs-mode  FLAG       expandtab  (nil → on)
  coding            WORD       fileencoding [+ fileformat for -unix/-dos/-mac]

``indent-tabs-mode`` is inverted on purpose: Emacs says "use tabs" where
the native option says "expand tabs to spaces".

Directives that would execute file content (``compile-command``, ``eval``,
hooks) are never applied; see ``modeline_bridge.directives``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from modeline_bridge import directives
from modeline_bridge.core.dictionary import ModeDictionary
from modeline_bridge.core.host import SettingsSink
from modeline_bridge.model import (
    DERIVE_FROM_SHIFT_WIDTH,
    DERIVE_FROM_TAB_STOP,
    NativeOption,
    Origin,
    SettingKind,
)
from modeline_bridge.model.setting import AppliedSetting
from modeline_bridge.parsers.directive import (
    DIGITS,
    FLAG,
    MODE_NAME,
    WORD,
    ValueGrammar,
    directive_names,
    extract,
)

_logger = logging.getLogger(__name__)

SettingValue = Union[str, int, bool]
_Call = tuple[SettingKind, NativeOption, SettingValue]

_EMACS_FALSE = "nil"
_EOL_FORMATS = frozenset({"unix", "dos", "mac"})


# ── Handlers: raw value → typed calls ──────────────────────────────


def _mode(value: str, dictionary: ModeDictionary) -> list[_Call]:
    name = value.lower()
    return [(SettingKind.LANGUAGE, NativeOption.FILETYPE, dictionary.lookup(name) or name)]


def _fill_column(value: str, dictionary: ModeDictionary) -> list[_Call]:
    return [(SettingKind.NUMERIC, NativeOption.TEXT_WIDTH, int(value))]


def _tab_width(value: str, dictionary: ModeDictionary) -> list[_Call]:
    return [
        (SettingKind.NUMERIC, NativeOption.TAB_STOP, int(value)),
        (SettingKind.NUMERIC, NativeOption.SHIFT_WIDTH, DERIVE_FROM_TAB_STOP),
        (SettingKind.NUMERIC, NativeOption.SOFT_TAB_STOP, DERIVE_FROM_SHIFT_WIDTH),
    ]


def _c_basic_offset(value: str, dictionary: ModeDictionary) -> list[_Call]:
    return [
        (SettingKind.NUMERIC, NativeOption.SOFT_TAB_STOP, int(value)),
        (SettingKind.NUMERIC, NativeOption.SHIFT_WIDTH, int(value)),
    ]


def _buffer_read_only(value: str, dictionary: ModeDictionary) -> list[_Call]:
    return [(SettingKind.BOOLEAN, NativeOption.READ_ONLY, value != _EMACS_FALSE)]


def _indent_tabs_mode(value: str, dictionary: ModeDictionary) -> list[_Call]:
    return [(SettingKind.BOOLEAN, NativeOption.EXPAND_TAB, value == _EMACS_FALSE)]


def _coding(value: str, dictionary: ModeDictionary) -> list[_Call]:
    base, _, eol = value.rpartition("-")
    if eol.lower() not in _EOL_FORMATS:
        return [(SettingKind.STRING, NativeOption.ENCODING, value)]
    calls: list[_Call] = []
    if base:
        calls.append((SettingKind.STRING, NativeOption.ENCODING, base))
    calls.append((SettingKind.STRING, NativeOption.FILE_FORMAT, eol.lower()))
    return calls


@dataclass(frozen=True)
class DirectiveRule:
    """One row of the dispatch table."""

    directive: str
    grammar: ValueGrammar
    handler: Callable[[str, ModeDictionary], list[_Call]]


RULES: tuple[DirectiveRule, ...] = (
    DirectiveRule(directives.MODE, MODE_NAME, _mode),
    DirectiveRule(directives.FILL_COLUMN, DIGITS, _fill_column),
    DirectiveRule(directives.TAB_WIDTH, DIGITS, _tab_width),
    DirectiveRule(directives.C_BASIC_OFFSET, DIGITS, _c_basic_offset),
    DirectiveRule(directives.BUFFER_READ_ONLY, FLAG, _buffer_read_only),
    DirectiveRule(directives.INDENT_TABS_MODE, FLAG, _indent_tabs_mode),
    DirectiveRule(directives.CODING, WORD, _coding),
)


class OptionApplier:
    """Applies one mode line at a time to a settings sink."""

    def __init__(self, sink: SettingsSink, dictionary: ModeDictionary) -> None:
        self.sink = sink
        self.dictionary = dictionary

    def apply(
        self,
        modeline: str,
        *,
        origin: Origin = Origin.HEADER,
        line: int = 1,
    ) -> list[AppliedSetting]:
        """Apply every recognised directive in *modeline*.

        Returns the settings issued, in call order.  Unknown, malformed and
        unsafe directives are skipped.
        """
        applied: list[AppliedSetting] = []

        # Whole-line form: "-*- Makefile -*-"
        bare = modeline.strip()
        canonical = self.dictionary.lookup(bare) if bare else None
        if canonical is not None:
            self._issue(SettingKind.LANGUAGE, NativeOption.FILETYPE, canonical)
            applied.append(
                AppliedSetting(
                    kind=SettingKind.LANGUAGE,
                    option=NativeOption.FILETYPE.value,
                    value=canonical,
                    directive="",
                    origin=origin,
                    line=line,
                )
            )
            return applied

        for rule in RULES:
            value = extract(modeline, rule.directive, rule.grammar)
            if value is None:
                continue
            for kind, option, setting in rule.handler(value, self.dictionary):
                self._issue(kind, option, setting)
                applied.append(
                    AppliedSetting(
                        kind=kind,
                        option=option.value,
                        value=setting,
                        directive=rule.directive,
                        origin=origin,
                        line=line,
                    )
                )

        for name in directive_names(modeline):
            if directives.is_ignored(name):
                _logger.debug("%s line %d: never applying %r", origin.value, line, name)
            elif not directives.is_supported(name):
                _logger.debug("%s line %d: unsupported directive %r", origin.value, line, name)

        return applied

    def _issue(self, kind: SettingKind, option: NativeOption, value: SettingValue) -> None:
        _logger.debug("set %s=%r (%s)", option.value, value, kind.value)
        if kind is SettingKind.LANGUAGE:
            self.sink.set_language(str(value))
        elif kind is SettingKind.NUMERIC:
            self.sink.set_numeric_option(option.value, int(value))
        elif kind is SettingKind.BOOLEAN:
            self.sink.set_boolean_option(option.value, bool(value))
        else:
            self.sink.set_string_option(option.value, str(value))
