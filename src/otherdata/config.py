"""
Codec settings.

Settings only tune how the codec reports and post-processes data. The wire
constants (delimiters, escape marker, content type) are fixed and are NOT
configurable: changing them would make stored payloads unreadable.

The codec itself never reads these settings implicitly. decode() uses
defaults unless the caller passes a CodecSettings; callers that want the
environment-driven settings pass get_settings() explicitly.

Sources:
    - Environment variables (CodecSettings.from_env)
    - A YAML mapping, as a file path or literal text (CodecSettings.from_yaml)

Environment variables:
    OTHERDATA_PROMOTE_NUMERIC       "true"/"false" (default false)
    OTHERDATA_WARN_TRAILING_ESCAPE  "true"/"false" (default false)
    OTHERDATA_LOG_LEVEL             DEBUG, INFO, WARNING, ERROR, CRITICAL
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "OTHERDATA_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_KEYS = {
    "promote_numeric": f"{ENV_PREFIX}PROMOTE_NUMERIC",
    "warn_on_trailing_escape": f"{ENV_PREFIX}WARN_TRAILING_ESCAPE",
    "log_level": f"{ENV_PREFIX}LOG_LEVEL",
}


class CodecSettings(BaseModel):
    """Runtime settings for decode/encode helpers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    promote_numeric: bool = Field(
        default=False, description="Run the numeric pass by default in decode()"
    )
    warn_on_trailing_escape: bool = Field(
        default=False,
        description="Emit a UserWarning when a payload ends with a lone escape marker",
    )
    log_level: str = Field(
        default="WARNING", description="Level applied to the package logger"
    )

    @field_validator("log_level")
    def validate_log_level(cls, v):
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v!r}")
        return level

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "CodecSettings":
        """
        Build settings from a plain mapping.

        Raises:
            ValueError: On unknown keys or invalid values (pydantic's
                ValidationError is a ValueError)
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"Settings must be a mapping, got {type(data).__name__}")
        return cls.model_validate(dict(data))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CodecSettings":
        """Build settings from OTHERDATA_* environment variables."""
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {
            name: env[key] for name, key in _ENV_KEYS.items() if key in env
        }
        return cls.from_mapping(data)

    @classmethod
    def from_yaml(cls, source: Union[str, Path]) -> "CodecSettings":
        """
        Build settings from YAML.

        Args:
            source: Path to a YAML file, or YAML text

        Raises:
            ValueError: If the document is not a mapping or has unknown keys
        """
        if isinstance(source, Path) or os.path.isfile(source):
            with open(source, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        else:
            data = yaml.safe_load(source)
        return cls.from_mapping(data)


@lru_cache(maxsize=1)
def get_settings() -> CodecSettings:
    """Process-wide settings built from the environment (cached)."""
    return CodecSettings.from_env()


def configure_logging(settings: Optional[CodecSettings] = None) -> logging.Logger:
    """Apply settings.log_level to the package logger and return it."""
    if settings is None:
        settings = get_settings()
    package_logger = logging.getLogger("otherdata")
    package_logger.setLevel(settings.log_level)
    return package_logger


__all__ = [
    "CodecSettings",
    "get_settings",
    "configure_logging",
]
