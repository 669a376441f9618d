"""
Summary: Audio property accumulator populated by chunk decoders and its frozen snapshot.
Why: Keep decode-phase mutation inside one builder that never escapes the scan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Endianness(Enum):
    """Byte order of the sample data."""

    BIG = "big"
    LITTLE = "little"


class ContainerType(Enum):
    """IFF container variants understood by the scanner."""

    AIFF = "AIFF"
    AIFC = "AIFC"
    WAV = "WAVE"

    @property
    def supports_compression(self) -> bool:
        """Whether the common chunk carries a compression descriptor."""
        return self is ContainerType.AIFC


@dataclass(frozen=True, slots=True)
class AudioProperties:
    """Read-only audio header exposed once the chunk scan has finished."""

    channel_count: int = 0
    sample_frame_count: int = 0
    bits_per_sample: int = 0
    sample_rate: float = 0.0
    duration_seconds: float = 0.0
    bitrate: int = 0
    lossless: bool = False
    encoding_name: str = ""
    endianness: Endianness = Endianness.BIG

    @property
    def sample_rate_hz(self) -> int:
        """Sample rate truncated to whole hertz."""
        return int(self.sample_rate)

    @property
    def track_length(self) -> int:
        """Duration truncated to whole seconds."""
        return int(self.duration_seconds)


@dataclass(slots=True)
class AudioPropertiesBuilder:
    """Mutable accumulator handed to one decoder call at a time."""

    channel_count: int = 0
    sample_frame_count: int = 0
    bits_per_sample: int = 0
    sample_rate: float = 0.0
    duration_seconds: float = 0.0
    bitrate: int = 0
    lossless: bool = False
    encoding_name: str = ""
    endianness: Endianness = Endianness.BIG
    block_align: int = 0
    decoded_chunks: set[str] = field(default_factory=set)

    def has_decoded(self, identifier: str) -> bool:
        """Return whether a chunk of this type already populated the builder."""
        return identifier in self.decoded_chunks

    def mark_decoded(self, identifier: str) -> None:
        self.decoded_chunks.add(identifier)

    def build(self) -> AudioProperties:
        """Freeze the accumulated values."""
        return AudioProperties(
            channel_count=self.channel_count,
            sample_frame_count=self.sample_frame_count,
            bits_per_sample=self.bits_per_sample,
            sample_rate=self.sample_rate,
            duration_seconds=self.duration_seconds,
            bitrate=self.bitrate,
            lossless=self.lossless,
            encoding_name=self.encoding_name,
            endianness=self.endianness,
        )


__all__ = ["AudioProperties", "AudioPropertiesBuilder", "ContainerType", "Endianness"]
