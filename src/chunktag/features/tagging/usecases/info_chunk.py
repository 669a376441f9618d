"""Native text chunk decoders.

Where: src/chunktag/features/tagging/usecases/info_chunk.py
What: Turn a RIFF ``LIST``/``INFO`` payload or an AIFF text chunk into native tag fields.
Why: These chunks are the format-intrinsic metadata store the composite tag falls back to.
"""

from __future__ import annotations

from typing import Final

from chunktag.features.audio.domain import CHUNK_HEADER_LENGTH, ByteCursor, ChunkHeader
from chunktag.platform.logging import logger

from ..domain.info_tag import DEFAULT_INFO_ENCODING, AiffTextTag, InfoTag
from ..domain.tag_field import TagField

LIST_CHUNK_ID: Final[str] = "LIST"
INFO_LIST_TYPE: Final[str] = "INFO"
LIST_TYPE_LENGTH: Final[int] = 4


def decode_text_value(raw: bytes, encoding: str) -> str:
    """Decode a NUL-terminated text value, dropping anything after the terminator."""
    text = raw.split(b"\x00", 1)[0]
    return text.decode(encoding, errors="replace")


def decode_info_list(cursor: ByteCursor, encoding: str = DEFAULT_INFO_ENCODING) -> InfoTag | None:
    """Decode the payload of a ``LIST`` chunk.

    Returns:
        The INFO fields, or None when the list is of another type (``adtl``
        and friends). A sub-chunk that overruns the list ends decoding and the
        fields read so far are kept.

    Raises:
        TruncatedError: The payload is too short to hold a list type.
    """
    list_type = cursor.read_fixed_chars(LIST_TYPE_LENGTH)
    if list_type != INFO_LIST_TYPE:
        logger.debug("Skipping LIST of type %r", list_type, extra={"chunk_id": LIST_CHUNK_ID})
        return None

    tag = InfoTag(encoding=encoding)
    while cursor.remaining() >= CHUNK_HEADER_LENGTH:
        header = ChunkHeader.read(cursor)
        if not header.fits(cursor.remaining()):
            logger.warning(
                "INFO field %s overruns its list; keeping %d fields",
                header,
                tag.field_count(),
                extra={"chunk_id": LIST_CHUNK_ID},
            )
            break
        raw = cursor.read_bytes(header.size)
        if header.padded_size != header.size and cursor.remaining() > 0:
            cursor.skip(1)

        value = decode_text_value(raw, tag.encoding)
        if not value:
            continue
        tag.add_field(TagField(header.identifier, [value], common=tag.is_common_id(header.identifier)))

    logger.debug("Decoded %d INFO fields", tag.field_count(), extra={"chunk_id": LIST_CHUNK_ID})
    return tag


def decode_aiff_text_chunk(header: ChunkHeader, cursor: ByteCursor, tag: AiffTextTag) -> None:
    """Add the text of a ``NAME``/``AUTH``/``(c) ``/``ANNO`` chunk to ``tag``."""
    value = decode_text_value(cursor.read_bytes(cursor.remaining()), tag.encoding)
    if value:
        tag.add_field(TagField(header.identifier, [value], common=tag.is_common_id(header.identifier)))


__all__ = [
    "INFO_LIST_TYPE",
    "LIST_CHUNK_ID",
    "decode_aiff_text_chunk",
    "decode_info_list",
    "decode_text_value",
]
