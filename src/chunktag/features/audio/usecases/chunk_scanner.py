"""
Summary: Walk the chunks of a FORM or RIFF container in file order.
Why: Keep chunk alignment independent of whether any individual chunk decodes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from chunktag.platform.logging import logger
from chunktag.shared.errors import TruncatedError, UnsupportedFormatError

from ..domain.audio_properties import ContainerType
from ..domain.byte_cursor import ByteCursor, ByteOrder
from ..domain.chunk_header import CHUNK_HEADER_LENGTH, CHUNK_ID_LENGTH, ChunkHeader

# container magic -> byte order of every header inside it
_CONTAINER_MAGIC: Final[dict[str, ByteOrder]] = {"FORM": ">", "RIFF": "<"}
_FORM_TYPES: Final[dict[tuple[str, str], ContainerType]] = {
    ("FORM", "AIFF"): ContainerType.AIFF,
    ("FORM", "AIFC"): ContainerType.AIFC,
    ("RIFF", "WAVE"): ContainerType.WAV,
}
CONTAINER_HEADER_LENGTH: Final[int] = CHUNK_HEADER_LENGTH + CHUNK_ID_LENGTH


@dataclass(frozen=True, slots=True)
class ScannedChunk:
    """One chunk located by the scanner; ``offset`` is the header's file offset."""

    header: ChunkHeader
    payload: ByteCursor
    offset: int


@dataclass(frozen=True, slots=True)
class Container:
    """The outer FORM/RIFF chunk of a file."""

    container_type: ContainerType
    body: ByteCursor
    body_offset: int = CONTAINER_HEADER_LENGTH


def read_container(data: bytes | bytearray | memoryview) -> Container:
    """Identify the outer container and bound a cursor to its chunks.

    Raises:
        UnsupportedFormatError: ``data`` is not an AIFF, AIFF-C or WAVE file.
    """
    cursor = ByteCursor(data)
    try:
        magic = cursor.read_fixed_chars(CHUNK_ID_LENGTH)
        byteorder = _CONTAINER_MAGIC.get(magic)
        if byteorder is None:
            raise UnsupportedFormatError(f"Unrecognised container magic {magic!r}")
        cursor.byteorder = byteorder
        declared_size = cursor.read_uint32()
        form_type = cursor.read_fixed_chars(CHUNK_ID_LENGTH)
    except TruncatedError as exc:
        raise UnsupportedFormatError(f"File too short for a container header: {exc}") from exc

    container_type = _FORM_TYPES.get((magic, form_type))
    if container_type is None:
        raise UnsupportedFormatError(f"Unsupported {magic} form type {form_type!r}")

    body_size = max(declared_size - CHUNK_ID_LENGTH, 0)
    if body_size > cursor.remaining():
        logger.warning(
            "%s container declares %d bytes but only %d remain; scanning what is present",
            magic,
            body_size,
            cursor.remaining(),
        )
        body_size = cursor.remaining()

    return Container(container_type=container_type, body=cursor.sub_cursor(body_size))


def iter_chunks(cursor: ByteCursor, base_offset: int = CONTAINER_HEADER_LENGTH) -> Iterator[ScannedChunk]:
    """Yield the chunks under ``cursor`` in file order.

    The cursor is advanced past each chunk (and its pad byte) before the chunk
    is yielded, so whatever the caller does with a payload cannot disturb the
    position of the next header. A header claiming more bytes than remain
    ends the scan, since nothing after it can be located.
    """
    while cursor.remaining() >= CHUNK_HEADER_LENGTH:
        offset = base_offset + cursor.offset
        header = ChunkHeader.read(cursor)
        if not header.fits(cursor.remaining()):
            logger.warning(
                "Chunk %s overruns its container (%d bytes remain); stopping scan",
                header,
                cursor.remaining(),
                extra={"chunk_id": header.identifier, "chunk_offset": offset},
            )
            return

        payload = cursor.sub_cursor(header.size)
        if header.padded_size != header.size and cursor.remaining() > 0:
            cursor.skip(1)
        yield ScannedChunk(header=header, payload=payload, offset=offset)

    if cursor.remaining():
        logger.debug("Ignoring %d trailing bytes after last chunk", cursor.remaining())


__all__ = ["CONTAINER_HEADER_LENGTH", "Container", "ScannedChunk", "iter_chunks", "read_container"]
