"""Where the reader configuration file lives.

Lookup order: explicit path, then ``CHUNKTAG_CONFIG_PATH``, then
``<repo_root>/config/config.toml``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_PATH_ENV: Final[str] = "CHUNKTAG_CONFIG_PATH"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a root marker, else the cwd."""
    origin = (start or Path(__file__).resolve()).parent
    candidates = (origin, *origin.parents)
    return next(
        (c for c in candidates if any((c / marker).exists() for marker in _ROOT_MARKERS)),
        Path.cwd(),
    )


def default_config_path() -> Path:
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    env_var: str | None = CONFIG_PATH_ENV,
    default_factory: Callable[[], Path] = default_config_path,
) -> Path:
    """Pick the first of explicit path, non-blank environment value, or default."""
    environment = os.environ if env is None else env
    override = (environment.get(env_var) or "").strip() if env_var else ""
    if explicit_path is not None:
        chosen: Path | str = explicit_path
    elif override:
        chosen = override
    else:
        chosen = default_factory()
    return Path(chosen).expanduser().resolve()


__all__ = [
    "CONFIG_PATH_ENV",
    "default_config_path",
    "resolve_overridable_path",
]
