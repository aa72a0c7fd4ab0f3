"""Load and validate JSON instances against the bundled schemas.

Usage::

    from modeline_bridge.contracts.load import validate_instance

    validate_instance(result_dict, "modeline_result.schema.json")
    validate_instance(config_dict, "modeline_config.schema.json")
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/modeline_bridge/data/schemas/`` (relative to this file)
    2. package data via importlib.resources (wheel / zip installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(
        resources.files("modeline_bridge") / SCHEMA_DIR / name
    ) as p:
        return p


@lru_cache(maxsize=None)
def _load_schema_text(name: str) -> str:
    return _schema_path(name).read_text(encoding="utf-8")


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    return json.loads(_load_schema_text(name))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)
