"""Chunk decoder dispatch.

Where: src/chunktag/features/audio/usecases/decoders.py
What: Map chunk identifiers to decoder callables and run one decoder without aborting the scan.
Why: Adding a chunk type means adding a table entry, not a subclass.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from types import MappingProxyType
from typing import Final

from chunktag.platform.logging import logger
from chunktag.shared.errors import ChunkTagError

from ..domain.audio_properties import AudioPropertiesBuilder, ContainerType
from ..domain.byte_cursor import ByteCursor
from ..domain.chunk_header import ChunkHeader
from .common_chunk import COMMON_CHUNK_ID, decode_common_chunk
from .outcome import ChunkDecoder, DecodeOutcome
from .wav_format import DATA_CHUNK_ID, FORMAT_CHUNK_ID, decode_data_chunk, decode_fmt_chunk

DecoderTable = Mapping[str, ChunkDecoder]

WAV_DECODERS: Final[DecoderTable] = MappingProxyType(
    {
        FORMAT_CHUNK_ID: decode_fmt_chunk,
        DATA_CHUNK_ID: decode_data_chunk,
    }
)


def aiff_decoders(container: ContainerType) -> DecoderTable:
    """Return the decoder table for a FORM container variant."""
    return MappingProxyType(
        {COMMON_CHUNK_ID: partial(decode_common_chunk, container=container)}
    )


def decoders_for(container: ContainerType) -> DecoderTable:
    """Return the decoder table matching ``container``."""
    if container is ContainerType.WAV:
        return WAV_DECODERS
    return aiff_decoders(container)


def decode_chunk(
    header: ChunkHeader,
    payload: ByteCursor,
    target: AudioPropertiesBuilder,
    table: DecoderTable,
    offset: int | None = None,
) -> DecodeOutcome | None:
    """Run the decoder registered for ``header`` against ``payload``.

    Returns:
        The decoder outcome, or None when no decoder is registered, the chunk
        type was already decoded, or decoding failed. Failures are logged and
        never propagate, so the caller can move on to the next chunk.
    """
    decoder = table.get(header.identifier)
    if decoder is None:
        return None

    log_extra = {"chunk_id": header.identifier, "chunk_offset": offset}
    if target.has_decoded(header.identifier):
        logger.warning("Ignoring duplicate %s chunk", header.identifier, extra=log_extra)
        return None

    try:
        outcome = decoder(payload, target)
    except ChunkTagError as exc:
        logger.warning("Skipping unusable %s chunk: %s", header, exc, extra=log_extra)
        return None

    if outcome is DecodeOutcome.COMPLETE:
        target.mark_decoded(header.identifier)
    return outcome


__all__ = ["DecoderTable", "WAV_DECODERS", "aiff_decoders", "decode_chunk", "decoders_for"]
