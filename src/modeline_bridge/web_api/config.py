"""
Configuration settings for the API.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Requests
    MAX_TEXT_BYTES: int = 1_000_000

    # Engine configuration file (YAML); empty = built-in defaults
    MODELINE_BRIDGE_CONFIG: str = ""

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, env_value.split(","))
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
