"""Embedded ID3v2 chunk decoder.

Where: src/chunktag/features/tagging/usecases/id3_chunk.py
What: Parse an ``ID3 ``/``id3 `` chunk payload with mutagen into an Id3Tag store.
Why: AIFF and WAV embed a complete ID3v2 tag as an ordinary chunk.
"""

from __future__ import annotations

import io
from typing import Final

from mutagen import MutagenError
from mutagen.id3 import ID3, Encoding

from chunktag.features.audio.domain import ByteCursor
from chunktag.platform.logging import logger
from chunktag.shared.errors import InvalidChunkError

from ..domain.id3_tag import Id3Tag

ID3_CHUNK_IDS: Final[frozenset[str]] = frozenset({"ID3 ", "id3 "})


def decode_id3_chunk(cursor: ByteCursor, encoding: Encoding = Encoding.UTF8) -> Id3Tag:
    """Parse the remaining bytes of ``cursor`` as an ID3v2 tag.

    Args:
        cursor: Cursor bounded to the chunk payload.
        encoding: Text encoding for frames created later through the store.

    Raises:
        InvalidChunkError: mutagen rejected the payload.
    """
    data = cursor.read_bytes(cursor.remaining())
    try:
        id3 = ID3(io.BytesIO(data))
    except MutagenError as exc:
        raise InvalidChunkError(f"Embedded ID3 tag could not be read: {exc}") from exc

    logger.debug(
        "Read ID3v2.%d tag with %d frames",
        id3.version[1],
        len(id3),
        extra={"chunk_id": "ID3"},
    )
    return Id3Tag(id3, encoding=encoding)


__all__ = ["ID3_CHUNK_IDS", "decode_id3_chunk"]
