"""Tests for LIST-INFO and AIFF text chunk decoding."""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

import pytest

from chunktag.features.audio.domain import ByteCursor, ChunkHeader
from chunktag.features.tagging.domain import AiffTextTag, FieldKey
from chunktag.features.tagging.usecases import decode_aiff_text_chunk, decode_info_list, decode_text_value
from chunktag.shared.errors import TruncatedError

if TYPE_CHECKING:
    from conftest import IffBuilder


def _list_body(iff: IffBuilder, fields: dict[bytes, bytes]) -> ByteCursor:
    # strip the outer LIST header
    return ByteCursor(iff.info_list(fields)[8:], "<")


def test_decodes_info_fields(iff: IffBuilder) -> None:
    tag = decode_info_list(_list_body(iff, {b"INAM": b"Song", b"IART": b"Band", b"ICMT": b"odd"}))

    assert tag is not None
    assert tag.get_first(FieldKey.TITLE) == "Song"
    assert tag.get_first(FieldKey.ARTIST) == "Band"
    assert tag.get_first(FieldKey.COMMENT) == "odd"
    assert tag.field_count() == 3
    first = tag.get_first_field(FieldKey.TITLE)
    assert first is not None and first.is_common()


def test_other_list_types_are_skipped() -> None:
    assert decode_info_list(ByteCursor(b"adtl", "<")) is None


def test_empty_values_are_dropped(iff: IffBuilder) -> None:
    tag = decode_info_list(_list_body(iff, {b"INAM": b"", b"IART": b"Band"}))
    assert tag is not None
    assert not tag.has_field(FieldKey.TITLE)
    assert tag.field_count() == 1


def test_overrunning_field_keeps_earlier_fields(iff: IffBuilder) -> None:
    body = iff.info_list({b"INAM": b"Song"})[8:] + b"IART" + struct.pack("<I", 500) + b"Ba"
    tag = decode_info_list(ByteCursor(body, "<"))

    assert tag is not None
    assert tag.get_first(FieldKey.TITLE) == "Song"
    assert not tag.has_field(FieldKey.ARTIST)


def test_configured_encoding_is_used(iff: IffBuilder) -> None:
    tag = decode_info_list(_list_body(iff, {b"INAM": "Café".encode("utf-8")}), "utf-8")
    assert tag is not None
    assert tag.get_first(FieldKey.TITLE) == "Café"
    assert tag.encoding == "utf-8"


def test_missing_list_type_is_truncated() -> None:
    with pytest.raises(TruncatedError):
        _ = decode_info_list(ByteCursor(b"IN", "<"))


def test_aiff_text_chunks_add_fields() -> None:
    tag = AiffTextTag()

    decode_aiff_text_chunk(ChunkHeader("NAME", 5), ByteCursor(b"Title"), tag)
    decode_aiff_text_chunk(ChunkHeader("ANNO", 4), ByteCursor(b"one\x00"), tag)
    decode_aiff_text_chunk(ChunkHeader("ANNO", 3), ByteCursor(b"two"), tag)
    decode_aiff_text_chunk(ChunkHeader("AUTH", 0), ByteCursor(b""), tag)

    assert tag.get_first(FieldKey.TITLE) == "Title"
    assert tag.get_all(FieldKey.COMMENT) == ["one", "two"]
    assert not tag.has_field(FieldKey.ARTIST)


def test_surrounding_spaces_are_kept(iff: IffBuilder) -> None:
    """Only the NUL terminator and padding are removed from text values."""
    info = decode_info_list(_list_body(iff, {b"INAM": b"  Song  "}))
    assert info is not None
    assert info.get_first(FieldKey.TITLE) == "  Song  "

    aiff = AiffTextTag()
    decode_aiff_text_chunk(ChunkHeader("ANNO", 8), ByteCursor(b" note \x00\x00"), aiff)
    assert aiff.get_first(FieldKey.COMMENT) == " note "


def test_decode_text_value_stops_at_first_nul() -> None:
    assert decode_text_value(b"A\x00B\x00", "latin-1") == "A"
    assert decode_text_value(b" \t", "latin-1") == " \t"
