"""Settings sink — the write side of the host editor.

Each setting kind has its own typed call.  Nothing here (or anywhere in the
engine) assembles an editor command string from buffer content.
"""

from __future__ import annotations

from typing import Any, Protocol


class SettingsSink(Protocol):
    """Typed settings-apply API offered by the host editor."""

    def set_language(self, language_id: str) -> None: ...

    def set_numeric_option(self, name: str, value: int) -> None: ...

    def set_boolean_option(self, name: str, value: bool) -> None: ...

    def set_string_option(self, name: str, value: str) -> None: ...


class RecordingSink:
    """Sink that keeps the final value of every option it receives.

    Used by the CLI, the web API and tests in place of a live editor.
    """

    def __init__(self) -> None:
        self.language: str | None = None
        self.options: dict[str, Any] = {}
        self.calls: list[tuple[str, str, Any]] = []

    def set_language(self, language_id: str) -> None:
        self.language = language_id
        self.calls.append(("language", "filetype", language_id))

    def set_numeric_option(self, name: str, value: int) -> None:
        self.options[name] = value
        self.calls.append(("numeric", name, value))

    def set_boolean_option(self, name: str, value: bool) -> None:
        self.options[name] = value
        self.calls.append(("boolean", name, value))

    def set_string_option(self, name: str, value: str) -> None:
        self.options[name] = value
        self.calls.append(("string", name, value))
