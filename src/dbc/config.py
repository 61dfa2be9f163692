from __future__ import annotations

import logging
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from dbc.verbose import setup_logger

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: str = "WARNING"
    debug_file: str | None = None
    verbose: bool = False

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        normalized = v.upper()
        if normalized not in _LEVELS:
            raise ValueError(f"Unknown log level '{v}', expected one of {', '.join(_LEVELS)}")
        return normalized

    @field_validator("debug_file")
    @classmethod
    def expand_debug_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} references; a missing variable without default is an error."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"debug_file '{v}' references a missing environment variable: {e}") from e


class EnsureConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    logging: LoggingSettings = LoggingSettings()


def load_config(path: Path) -> EnsureConfig:
    """Load and validate a config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = EnsureConfig(**(raw or {}))

    # Resolve a relative debug_file relative to the config file location
    debug_file = config.logging.debug_file
    if debug_file is not None and not Path(debug_file).is_absolute():
        config.logging.debug_file = str((config_dir / debug_file).resolve())

    return config


def configure(path: Path) -> logging.Logger:
    """Load ``path`` and install the logging handlers it describes."""
    settings = load_config(path).logging
    return setup_logger(
        debug_file=Path(settings.debug_file) if settings.debug_file else None,
        verbose=settings.verbose,
        level=settings.level,
    )
