"""WAV format and data chunk decoders.

Where: src/chunktag/features/audio/usecases/wav_format.py
What: Decode the little-endian ``fmt `` chunk and derive frame count and duration from ``data``.
Why: RIFF files carry their sample geometry outside any common chunk.
"""

from __future__ import annotations

from typing import Final

from chunktag.platform.logging import logger
from chunktag.shared.errors import InvalidChunkError

from ..domain.audio_properties import AudioPropertiesBuilder, Endianness
from ..domain.byte_cursor import ByteCursor
from .outcome import DecodeOutcome

FORMAT_CHUNK_ID: Final[str] = "fmt "
DATA_CHUNK_ID: Final[str] = "data"

WAVE_FORMAT_EXTENSIBLE: Final[int] = 0xFFFE
_EXTENSIBLE_EXTRA_LENGTH: Final[int] = 22

# format tag -> (encoding name, lossless)
WAVE_FORMATS: Final[dict[int, tuple[str, bool]]] = {
    0x0001: ("PCM", True),
    0x0002: ("Microsoft ADPCM", False),
    0x0003: ("IEEE Float", True),
    0x0006: ("A-Law", False),
    0x0007: ("µ-Law", False),
    0x0011: ("IMA ADPCM", False),
    0x0031: ("GSM 6.10", False),
    0x0050: ("MPEG", False),
    0x0055: ("MPEG Layer 3", False),
}


def describe_format(format_tag: int) -> tuple[str, bool]:
    """Return the encoding name and losslessness for a WAVE format tag."""
    return WAVE_FORMATS.get(format_tag, (f"Unknown (0x{format_tag:04X})", False))


def decode_fmt_chunk(cursor: ByteCursor, target: AudioPropertiesBuilder) -> DecodeOutcome:
    """Decode a ``fmt `` chunk into ``target``."""
    format_tag = cursor.read_uint16()
    channel_count = cursor.read_uint16()
    sample_rate = cursor.read_uint32()
    byte_rate = cursor.read_uint32()
    block_align = cursor.read_uint16()
    bits_per_sample = cursor.read_uint16()

    if format_tag == WAVE_FORMAT_EXTENSIBLE and cursor.remaining() >= 2 + _EXTENSIBLE_EXTRA_LENGTH:
        extra_size = cursor.read_uint16()
        if extra_size >= _EXTENSIBLE_EXTRA_LENGTH:
            _valid_bits = cursor.read_uint16()
            _channel_mask = cursor.read_uint32()
            # first two bytes of the sub-format GUID repeat the real format tag
            format_tag = cursor.read_uint16()

    if sample_rate == 0:
        raise InvalidChunkError("Format chunk declares a sample rate of 0")

    encoding_name, lossless = describe_format(format_tag)
    target.channel_count = channel_count
    target.sample_rate = float(sample_rate)
    target.bits_per_sample = bits_per_sample
    target.block_align = block_align
    target.bitrate = byte_rate * 8
    target.lossless = lossless
    target.encoding_name = encoding_name
    target.endianness = Endianness.LITTLE

    logger.debug(
        "Decoded %s, %d channels at %d Hz",
        encoding_name,
        channel_count,
        sample_rate,
        extra={"chunk_id": FORMAT_CHUNK_ID},
    )
    return DecodeOutcome.COMPLETE


def decode_data_chunk(cursor: ByteCursor, target: AudioPropertiesBuilder) -> DecodeOutcome:
    """Derive frame count and duration from the size of the ``data`` chunk.

    Needs the ``fmt `` chunk to have been decoded first; otherwise nothing is
    changed and INCOMPLETE is returned.
    """
    if not target.has_decoded(FORMAT_CHUNK_ID) or target.block_align == 0:
        logger.warning(
            "Data chunk precedes a usable format chunk",
            extra={"chunk_id": DATA_CHUNK_ID},
        )
        return DecodeOutcome.INCOMPLETE

    target.sample_frame_count = len(cursor) // target.block_align
    target.duration_seconds = target.sample_frame_count / target.sample_rate
    return DecodeOutcome.COMPLETE


__all__ = [
    "DATA_CHUNK_ID",
    "FORMAT_CHUNK_ID",
    "WAVE_FORMATS",
    "decode_data_chunk",
    "decode_fmt_chunk",
    "describe_format",
]
