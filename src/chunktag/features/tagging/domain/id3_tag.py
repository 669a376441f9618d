"""ID3v2 tag store.

Where: src/chunktag/features/tagging/domain/id3_tag.py
What: Expose a mutagen ``ID3`` instance through the TagStore contract using text-information frames.
Why: Embedded ID3 chunks carry richer metadata than INFO, and mutagen already models their frames.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import ClassVar, Final, override

from mutagen.id3 import COMM, ID3, Encoding, Frame, Frames, TextFrame

from chunktag.platform.logging import logger
from chunktag.shared.errors import UnsupportedOperationError

from .field_key import FieldKey
from .field_store import FieldStore
from .tag_field import TagField

__all__ = ["ID3_ENCODINGS", "Id3Tag", "id3_encoding_for"]

# Python codec names accepted by ``set_encoding`` -> ID3v2 encoding byte.
ID3_ENCODINGS: Final[Mapping[str, Encoding]] = MappingProxyType(
    {
        "latin-1": Encoding.LATIN1,
        "iso-8859-1": Encoding.LATIN1,
        "utf-16": Encoding.UTF16,
        "utf-16-be": Encoding.UTF16BE,
        "utf-8": Encoding.UTF8,
    }
)


def id3_encoding_for(name: str) -> Encoding | None:
    """Return the ID3 encoding for a Python codec name, or None."""
    return ID3_ENCODINGS.get(name.strip().lower().replace("_", "-"))


class Id3Tag(FieldStore):
    """Text-information view over a mutagen ``ID3`` tag."""

    FIELD_MAP: ClassVar[Mapping[FieldKey, str]] = MappingProxyType(
        {
            FieldKey.TITLE: "TIT2",
            FieldKey.ARTIST: "TPE1",
            FieldKey.ALBUM: "TALB",
            FieldKey.ALBUM_ARTIST: "TPE2",
            FieldKey.COMMENT: "COMM",
            FieldKey.COMPOSER: "TCOM",
            FieldKey.COPYRIGHT: "TCOP",
            FieldKey.YEAR: "TDRC",
            FieldKey.ENCODER: "TENC",
            FieldKey.GENRE: "TCON",
            FieldKey.TRACK: "TRCK",
            FieldKey.DISC_NO: "TPOS",
            FieldKey.LANGUAGE: "TLAN",
            FieldKey.ISRC: "TSRC",
            FieldKey.LYRICIST: "TEXT",
            FieldKey.BPM: "TBPM",
            FieldKey.IS_COMPILATION: "TCMP",
        }
    )

    def __init__(self, id3: ID3 | None = None, encoding: Encoding = Encoding.UTF8) -> None:
        self._id3: ID3 = id3 if id3 is not None else ID3()
        self._encoding: Encoding = encoding

    def __repr__(self) -> str:
        return f"Id3Tag(version={self.version}, frames={len(self._id3)})"

    @property
    def id3(self) -> ID3:
        """The underlying mutagen tag."""
        return self._id3

    @property
    def version(self) -> tuple[int, int, int]:
        return tuple(self._id3.version)

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    @staticmethod
    def _to_field(frame: Frame) -> TagField:
        text: list[object] = list(getattr(frame, "text", []))
        return TagField(id=frame.FrameID, values=[str(value) for value in text])

    def _build_frame(self, native_id: str, values: list[str]) -> Frame:
        frame_cls = Frames.get(native_id)
        if frame_cls is None or not issubclass(frame_cls, (TextFrame, COMM)):
            raise UnsupportedOperationError(f"{native_id} is not a text frame")
        return frame_cls(encoding=self._encoding, text=values)

    @override
    def _load(self, native_id: str) -> list[TagField]:
        fields = [self._to_field(frame) for frame in self._id3.getall(native_id)]
        common = self.is_common_id(native_id)
        for tag_field in fields:
            tag_field.common = common
        return fields

    @override
    def _store(self, native_id: str, fields: list[TagField]) -> None:
        values = [value for tag_field in fields for value in tag_field.values]
        frame = self._build_frame(native_id, values) if values else None
        self._id3.delall(native_id)
        if frame is not None:
            self._id3.add(frame)

    @override
    def __iter__(self) -> Iterator[TagField]:
        for frame in list(self._id3.values()):
            yield self._to_field(frame)

    def add_frame(self, frame: Frame) -> None:
        """Store a decoded mutagen frame, replacing any frame with the same hash key."""
        logger.debug("Adding ID3 frame %s", frame.HashKey)
        self._id3.add(frame)

    @override
    def set_encoding(self, encoding: str) -> bool:
        """Set the text encoding used for frames created from now on."""
        resolved = id3_encoding_for(encoding)
        if resolved is None:
            logger.warning("ID3v2 cannot store text as %r", encoding)
            return False
        self._encoding = resolved
        return True
