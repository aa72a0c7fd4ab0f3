"""modeline_bridge — applies Emacs file-local mode lines as native editor settings."""

__all__ = [
    "__version__",
    "resolve_text",
    "resolve_file",
    "load_config",
    # Engine
    "BridgeConfig",
    "ModeDictionary",
    "ModelineEngine",
    "apply_modelines",
]
__version__ = "0.1.0"

# Programmatic entrypoints (backend use).
from modeline_bridge.api import (  # noqa: E402, F401
    load_config,
    resolve_file,
    resolve_text,
)

# Engine exports
from modeline_bridge.core.config import BridgeConfig  # noqa: E402, F401
from modeline_bridge.core.dictionary import ModeDictionary  # noqa: E402, F401
from modeline_bridge.core.runner import (  # noqa: E402, F401
    ModelineEngine,
    apply_modelines,
)
