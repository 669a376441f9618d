"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper, and the chunk-aware Rich handler.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import ChunkRichHandler

__all__ = [
    "LOGGER_NAME",
    "ChunkRichHandler",
    "logger",
    "setup_logger",
]
