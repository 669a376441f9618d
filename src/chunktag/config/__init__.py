"""
Summary: Configuration loading and path resolution.
Why: Keep reader settings in one TOML file resolved the same way everywhere.
"""

from .config import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    ReaderConfig,
    load_config,
)
from .paths import CONFIG_PATH_ENV, default_config_path, resolve_overridable_path

__all__ = [
    "CONFIG_PATH_ENV",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "ReaderConfig",
    "default_config_path",
    "load_config",
    "resolve_overridable_path",
]
