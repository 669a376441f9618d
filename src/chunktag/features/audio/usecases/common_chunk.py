"""AIFF common chunk decoder.

Where: src/chunktag/features/audio/usecases/common_chunk.py
What: Decode the COMM chunk into sample geometry, compression and derived rates.
Why: The COMM chunk is the only source of channel, rate and depth for AIFF and AIFF-C files.
"""

from __future__ import annotations

import math
from typing import Final

from chunktag.platform.logging import logger
from chunktag.shared.errors import InvalidChunkError

from ..domain.audio_properties import AudioPropertiesBuilder, ContainerType, Endianness
from ..domain.byte_cursor import ByteCursor
from ..domain.compression import LITTLE_ENDIAN_PCM_CODE, lookup_compression
from .outcome import DecodeOutcome

COMMON_CHUNK_ID: Final[str] = "COMM"
COMPRESSION_TYPE_LENGTH: Final[int] = 4
UNCOMPRESSED_ENCODING: Final[str] = "Not Compressed"


def decode_common_chunk(
    cursor: ByteCursor,
    target: AudioPropertiesBuilder,
    container: ContainerType,
) -> DecodeOutcome:
    """Decode a common chunk into ``target``.

    Args:
        cursor: Cursor bounded to the chunk's declared size.
        target: Builder receiving the decoded properties.
        container: Which FORM variant is being read; only AIFF-C carries a
            compression descriptor.

    Returns:
        DecodeOutcome.INCOMPLETE when an AIFF-C chunk stops right after the
        fixed fields (``target`` is left untouched), COMPLETE otherwise.

    Raises:
        TruncatedError: The fixed fields or the compression descriptor are cut short.
        InvalidChunkError: The sample rate is zero or not finite.
    """
    channel_count = cursor.read_uint16()
    sample_frame_count = cursor.read_uint32()
    bits_per_sample = cursor.read_uint16()
    sample_rate = cursor.read_extended_float80()

    endianness = Endianness.BIG
    if container.supports_compression:
        # Observed in the wild: AIFC files whose COMM stops after the fixed fields.
        if cursor.remaining() == 0:
            logger.warning(
                "AIFC common chunk has no compression descriptor",
                extra={"chunk_id": COMMON_CHUNK_ID},
            )
            return DecodeOutcome.INCOMPLETE

        compression_code = cursor.read_fixed_chars(COMPRESSION_TYPE_LENGTH)
        if compression_code == LITTLE_ENDIAN_PCM_CODE:
            endianness = Endianness.LITTLE
        compression_name = cursor.read_pascal_string()

        # Unverified quirk: some producers leave one extra byte here, and the
        # next chunk only lines up once it is consumed.
        if cursor.remaining() > 0:
            cursor.skip(1)

        entry = lookup_compression(compression_code)
        if entry is not None:
            compression_name = entry.display_name
            lossless = entry.is_lossless
        else:
            logger.debug(
                "Unknown compression code %r, assuming lossy",
                compression_code,
                extra={"chunk_id": COMMON_CHUNK_ID},
            )
            lossless = False
        encoding_name = compression_name or compression_code
    else:
        lossless = True
        encoding_name = UNCOMPRESSED_ENCODING

    if not math.isfinite(sample_rate) or sample_rate <= 0:
        raise InvalidChunkError(f"Common chunk declares a sample rate of {sample_rate}")

    target.channel_count = channel_count
    target.sample_frame_count = sample_frame_count
    target.bits_per_sample = bits_per_sample
    target.sample_rate = sample_rate
    target.endianness = endianness
    target.lossless = lossless
    target.encoding_name = encoding_name
    target.duration_seconds = sample_frame_count / sample_rate
    # Raw PCM rate even for lossy codecs; the compressed byte rate is not in this chunk.
    target.bitrate = int(sample_rate * bits_per_sample * channel_count)

    logger.debug(
        "Decoded %d channels, %d frames, %d bits at %.2f Hz (%s)",
        channel_count,
        sample_frame_count,
        bits_per_sample,
        sample_rate,
        encoding_name,
        extra={"chunk_id": COMMON_CHUNK_ID},
    )
    return DecodeOutcome.COMPLETE


__all__ = ["COMMON_CHUNK_ID", "UNCOMPRESSED_ENCODING", "decode_common_chunk"]
