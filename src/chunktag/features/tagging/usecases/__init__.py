"""
Summary: Public surface for tag chunk and frame decoders.
Why: Provide a stable import path for the reader service and tests.
"""

from .id3_chunk import ID3_CHUNK_IDS, decode_id3_chunk
from .info_chunk import (
    INFO_LIST_TYPE,
    LIST_CHUNK_ID,
    decode_aiff_text_chunk,
    decode_info_list,
    decode_text_value,
)
from .text_frame import add_raw_text_frame, decode_text_frame_body, split_terminated

__all__ = [
    "ID3_CHUNK_IDS",
    "INFO_LIST_TYPE",
    "LIST_CHUNK_ID",
    "add_raw_text_frame",
    "decode_aiff_text_chunk",
    "decode_id3_chunk",
    "decode_info_list",
    "decode_text_frame_body",
    "decode_text_value",
    "split_terminated",
]
