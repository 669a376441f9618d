"""Shared cross-cutting errors exposed at the package level."""

from .errors import (
    ChunkTagError,
    DecodeError,
    InvalidChunkError,
    InvalidFrameError,
    KeyNotFoundError,
    TruncatedError,
    UnsupportedFormatError,
    UnsupportedOperationError,
)

__all__ = [
    "ChunkTagError",
    "DecodeError",
    "InvalidChunkError",
    "InvalidFrameError",
    "KeyNotFoundError",
    "TruncatedError",
    "UnsupportedFormatError",
    "UnsupportedOperationError",
]
