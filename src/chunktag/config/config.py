"""Reader configuration loaded from TOML.

Where: src/chunktag/config/config.py
What: ``ReaderConfig`` plus ``load_config``, which reads it with ``tomllib``, and the logging hookup.
Why: Text encodings and store creation policy vary by library; keep them out of code.
"""

from __future__ import annotations

import codecs
import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Final

from rich.console import Console

from chunktag.platform.logging import logger, setup_logger

from .paths import CONFIG_PATH_ENV, default_config_path, resolve_overridable_path

_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


@dataclass(slots=True)
class ReaderConfig:
    """Settings for ``AudioFileReader``."""

    # Optional log file; console logging is always on
    log_file: Path | None = field(default=None, metadata={"path": True})
    log_level: str = "INFO"

    # Codec for LIST-INFO and AIFF text chunks
    info_text_encoding: str = "latin-1"
    # Encoding for ID3 frames created after reading
    id3_text_encoding: str = "utf-8"

    create_missing_native_tag: bool = True
    create_missing_id3_tag: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file).expanduser() if self.log_file.strip() else None
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigValidationError(f"Unknown log_level: {self.log_level!r}")
        for name in ("info_text_encoding", "id3_text_encoding"):
            value: str = getattr(self, name)
            try:
                _ = codecs.lookup(value)
            except LookupError as exc:
                raise ConfigValidationError(f"{name} is not a known codec: {value!r}") from exc

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    def configure_logging(self, console: Console | None = None) -> logging.Logger:
        """Install the package log handlers using ``log_level`` and ``log_file``."""
        return setup_logger(
            log_file=self.log_file,
            console_level=self.log_level_number,
            console=console,
        )


def _coerce(document: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name: f for f in fields(ReaderConfig)}
    values: dict[str, Any] = {}
    for key, value in document.items():
        known_field = known.get(key)
        if known_field is None:
            logger.warning("Ignoring unknown configuration key: %s", key)
            continue
        if known_field.metadata.get("path", False):
            if not isinstance(value, str):
                raise ConfigValidationError(f"{key} must be a string path")
        elif isinstance(known_field.default, bool):
            if not isinstance(value, bool):
                raise ConfigValidationError(f"{key} must be true or false")
        elif not isinstance(value, str):
            raise ConfigValidationError(f"{key} must be a string")
        values[key] = value
    return values


def load_config(
    path: Path | str | None = None, *, env: Mapping[str, str] | None = None
) -> ReaderConfig:
    """Load reader configuration.

    Args:
        path: Optional explicit config file. Otherwise ``CHUNKTAG_CONFIG_PATH``
            or ``<repo_root>/config/config.toml`` is used.
        env: Optional environment mapping to read the override from.

    Returns:
        ReaderConfig: Loaded settings, or defaults when the file does not exist.

    Raises:
        ConfigParseError: The file is not valid TOML.
        ConfigValidationError: A value has the wrong type or is unknown.
    """
    resolved_path = resolve_overridable_path(
        explicit_path=path,
        env=env,
        env_var=CONFIG_PATH_ENV,
        default_factory=default_config_path,
    )
    if not resolved_path.exists():
        logger.debug("No configuration at %s; using defaults", resolved_path)
        return ReaderConfig()

    try:
        with resolved_path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(f"Invalid TOML in configuration file: {resolved_path}") from exc
    except OSError as exc:  # pragma: no cover - rare filesystem failure
        raise ConfigError(f"Failed to read configuration file: {resolved_path}") from exc

    config = ReaderConfig(**_coerce(document))
    logger.info("Configuration loaded from %s", resolved_path)
    return config


__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "ReaderConfig",
    "load_config",
]
