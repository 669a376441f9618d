"""
Summary: Exception hierarchy shared by chunk decoders and tag stores.
Why: Let callers tell recoverable decode failures apart from rejected requests.
"""

from __future__ import annotations


class ChunkTagError(Exception):
    """Base exception for all chunktag failures."""


class TruncatedError(ChunkTagError):
    """Raised when declared or required bytes are absent from a buffer."""

    def __init__(self, wanted: int, available: int, what: str = "read") -> None:
        super().__init__(f"Truncated {what}: wanted {wanted} bytes, {available} available")
        self.wanted = wanted
        self.available = available


class DecodeError(ChunkTagError):
    """Raised when bytes are present but cannot be interpreted."""


class InvalidChunkError(DecodeError):
    """Raised when a chunk payload holds values that cannot be used."""


class InvalidFrameError(DecodeError):
    """Raised when an ID3v2 frame body cannot be decoded."""


class UnsupportedFormatError(ChunkTagError):
    """Raised when a buffer is not a recognised IFF container."""


class UnsupportedOperationError(ChunkTagError):
    """Raised when a store cannot represent the requested mutation."""


class KeyNotFoundError(ChunkTagError, KeyError):
    """Raised when a field key has no mapping in the addressed store."""

    def __str__(self) -> str:
        return Exception.__str__(self)


__all__ = [
    "ChunkTagError",
    "TruncatedError",
    "DecodeError",
    "InvalidChunkError",
    "InvalidFrameError",
    "UnsupportedFormatError",
    "UnsupportedOperationError",
    "KeyNotFoundError",
]
