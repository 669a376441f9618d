"""Native text tag stores for WAV and AIFF.

Where: src/chunktag/features/tagging/domain/info_tag.py
What: Dict-backed stores for LIST-INFO sub-chunks and AIFF text chunks.
Why: Both formats keep a small set of plain-text fields keyed by 4-character ids.
"""

from __future__ import annotations

import codecs
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import ClassVar, Final, override

from chunktag.platform.logging import logger

from .field_key import FieldKey
from .field_store import FieldStore
from .tag_field import TagField

DEFAULT_INFO_ENCODING: Final[str] = "latin-1"

__all__ = ["AiffTextTag", "DEFAULT_INFO_ENCODING", "InfoTag"]


class InfoTag(FieldStore):
    """Fields of a RIFF ``LIST``/``INFO`` chunk, in the order they were added."""

    FIELD_MAP: ClassVar[Mapping[FieldKey, str]] = MappingProxyType(
        {
            FieldKey.TITLE: "INAM",
            FieldKey.ARTIST: "IART",
            FieldKey.ALBUM: "IPRD",
            FieldKey.ALBUM_ARTIST: "IAAR",
            FieldKey.COMMENT: "ICMT",
            FieldKey.COMPOSER: "IMUS",
            FieldKey.COPYRIGHT: "ICOP",
            FieldKey.YEAR: "ICRD",
            FieldKey.ENCODER: "ISFT",
            FieldKey.ENGINEER: "IENG",
            FieldKey.GENRE: "IGNR",
            FieldKey.TRACK: "ITRK",
            FieldKey.TRACK_TOTAL: "IFRM",
            FieldKey.LANGUAGE: "ILNG",
            FieldKey.ISRC: "ISRC",
            FieldKey.LYRICIST: "IWRI",
            FieldKey.RATING: "IRTD",
        }
    )

    def __init__(self, encoding: str = DEFAULT_INFO_ENCODING) -> None:
        self._fields: dict[str, list[TagField]] = {}
        self.encoding: str = encoding

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={self.field_count()}, encoding={self.encoding!r})"

    @override
    def _load(self, native_id: str) -> list[TagField]:
        return list(self._fields.get(native_id, ()))

    @override
    def _store(self, native_id: str, fields: list[TagField]) -> None:
        if fields:
            self._fields[native_id] = list(fields)
        else:
            _ = self._fields.pop(native_id, None)

    @override
    def __iter__(self) -> Iterator[TagField]:
        for fields in self._fields.values():
            yield from fields

    @override
    def set_encoding(self, encoding: str) -> bool:
        """Set the codec used to decode and encode field text.

        Returns False, leaving the encoding unchanged, if Python has no such codec.
        """
        try:
            _ = codecs.lookup(encoding)
        except LookupError:
            logger.warning("Unknown text encoding %r for %s", encoding, type(self).__name__)
            return False
        self.encoding = encoding
        return True


class AiffTextTag(InfoTag):
    """Fields from the AIFF ``NAME``, ``AUTH``, ``(c) `` and ``ANNO`` chunks."""

    FIELD_MAP: ClassVar[Mapping[FieldKey, str]] = MappingProxyType(
        {
            FieldKey.TITLE: "NAME",
            FieldKey.ARTIST: "AUTH",
            FieldKey.COPYRIGHT: "(c) ",
            FieldKey.COMMENT: "ANNO",
        }
    )

    TEXT_CHUNK_IDS: ClassVar[frozenset[str]] = frozenset(FIELD_MAP.values())
