"""Engine configuration dataclass and its YAML loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from modeline_bridge.contracts.load import validate_instance

CONFIG_ENV_VAR = "MODELINE_BRIDGE_CONFIG"
CONFIG_SCHEMA = "modeline_config.schema.json"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""


@dataclass(frozen=True)
class BridgeConfig:
    """Immutable engine configuration.

    ``aliases`` is merged into the mode dictionary ahead of the built-ins,
    so an entry here replaces a default alias of the same name.  The header
    and footer scan bounds are fixed and cannot be configured.
    """

    encoding: str = "utf-8"
    aliases: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BridgeConfig":
        try:
            validate_instance(data, CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ConfigError(f"invalid configuration: {e.message}") from e
        aliases = {str(k).lower(): str(v) for k, v in (data.get("aliases") or {}).items()}
        return cls(
            encoding=data.get("encoding", cls.encoding),
            aliases=aliases,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "BridgeConfig":
        """Load configuration from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"cannot read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        return cls.from_dict(data)

    @classmethod
    def discover(cls, path: Path | None = None) -> "BridgeConfig":
        """Load *path*, else the file named by ``$MODELINE_BRIDGE_CONFIG``, else defaults."""
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR, "")
            if not env_path:
                return cls()
            path = Path(env_path)
        return cls.from_yaml(path)
