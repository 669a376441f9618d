"""
Summary: Public surface for chunk scanning and decoding.
Why: Provide a stable import path for the reader service and tests.
"""

from .chunk_scanner import Container, ScannedChunk, iter_chunks, read_container
from .common_chunk import COMMON_CHUNK_ID, decode_common_chunk
from .decoders import WAV_DECODERS, DecoderTable, aiff_decoders, decode_chunk, decoders_for
from .outcome import ChunkDecoder, DecodeOutcome
from .wav_format import DATA_CHUNK_ID, FORMAT_CHUNK_ID, decode_data_chunk, decode_fmt_chunk

__all__ = [
    "COMMON_CHUNK_ID",
    "ChunkDecoder",
    "Container",
    "DATA_CHUNK_ID",
    "DecodeOutcome",
    "DecoderTable",
    "FORMAT_CHUNK_ID",
    "ScannedChunk",
    "WAV_DECODERS",
    "aiff_decoders",
    "decode_chunk",
    "decode_common_chunk",
    "decode_data_chunk",
    "decode_fmt_chunk",
    "decoders_for",
    "iter_chunks",
    "read_container",
]
