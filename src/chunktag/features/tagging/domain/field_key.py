"""
Summary: Format-agnostic metadata keys mapped by each tag store to native identifiers.
Why: Let callers ask for "the artist" without knowing INFO or ID3 frame names.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class FieldKey(Enum):
    """Generic semantic metadata concepts."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    ALBUM_ARTIST = "album_artist"
    COMMENT = "comment"
    COMPOSER = "composer"
    COPYRIGHT = "copyright"
    YEAR = "year"
    ENCODER = "encoder"
    ENGINEER = "engineer"
    GENRE = "genre"
    TRACK = "track"
    TRACK_TOTAL = "track_total"
    DISC_NO = "disc_no"
    LANGUAGE = "language"
    ISRC = "isrc"
    LYRICIST = "lyricist"
    BPM = "bpm"
    IS_COMPILATION = "is_compilation"
    RATING = "rating"


# Keys whose presence makes a tag worth showing in a summary view.
COMMON_FIELD_KEYS: Final[frozenset[FieldKey]] = frozenset(
    {
        FieldKey.TITLE,
        FieldKey.ARTIST,
        FieldKey.ALBUM,
        FieldKey.YEAR,
        FieldKey.COMMENT,
        FieldKey.TRACK,
        FieldKey.GENRE,
    }
)


__all__ = ["COMMON_FIELD_KEYS", "FieldKey"]
