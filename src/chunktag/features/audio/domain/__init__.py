"""
Summary: Domain types for the chunk decoding engine.
Why: Offer one import path for cursors, headers, properties and the codec catalogue.
"""

from .audio_properties import AudioProperties, AudioPropertiesBuilder, ContainerType, Endianness
from .byte_cursor import ByteCursor
from .chunk_header import CHUNK_HEADER_LENGTH, ChunkHeader
from .compression import (
    COMPRESSION_CATALOGUE,
    LITTLE_ENDIAN_PCM_CODE,
    CompressionEntry,
    lookup_compression,
)

__all__ = [
    "AudioProperties",
    "AudioPropertiesBuilder",
    "ByteCursor",
    "CHUNK_HEADER_LENGTH",
    "COMPRESSION_CATALOGUE",
    "ChunkHeader",
    "CompressionEntry",
    "ContainerType",
    "Endianness",
    "LITTLE_ENDIAN_PCM_CODE",
    "lookup_compression",
]
