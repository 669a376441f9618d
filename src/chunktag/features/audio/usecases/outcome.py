"""
Summary: Result type and decoder contract shared by every chunk decoder.
Why: Keep the decoder signature importable without pulling in the dispatch tables.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from ..domain.audio_properties import AudioPropertiesBuilder
from ..domain.byte_cursor import ByteCursor


class DecodeOutcome(Enum):
    """How far a decoder got through a structurally valid chunk."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


class ChunkDecoder(Protocol):
    """Capability implemented by every entry of a dispatch table."""

    def __call__(self, cursor: ByteCursor, target: AudioPropertiesBuilder) -> DecodeOutcome:
        ...


__all__ = ["ChunkDecoder", "DecodeOutcome"]
