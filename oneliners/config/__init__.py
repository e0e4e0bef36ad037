"""Configuration loading and schema.

- YAML-first configuration under configs/*.yaml
- Strict ${ENV_VAR} expansion (missing/empty env vars are errors)
"""

from __future__ import annotations

from oneliners.config.loader import load_config, profile_paths
from oneliners.config.model import AppConfig, LoggingConfig, OutputConfig, TextConfig
from oneliners.core.errors import ConfigError

__all__ = [
    "AppConfig",
    "ConfigError",
    "LoggingConfig",
    "OutputConfig",
    "TextConfig",
    "load_config",
    "profile_paths",
]
