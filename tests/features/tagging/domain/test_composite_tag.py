"""Tests for the composite tag facade.

Where: tests/features/tagging/domain/test_composite_tag.py
What: Pin read precedence, native-only queries, write routing and artwork behaviour.
Why: Callers depend on a deterministic answer when both stores disagree.
"""

from __future__ import annotations

import pytest
from mutagen.id3 import ID3, TIT2, Encoding

from chunktag.features.tagging.domain import (
    Artwork,
    CompositeTag,
    FieldKey,
    Id3Tag,
    InfoTag,
    TagField,
)
from chunktag.shared.errors import KeyNotFoundError, UnsupportedOperationError


@pytest.fixture
def native() -> InfoTag:
    tag = InfoTag()
    tag.set_field(tag.create_field(FieldKey.TITLE, "Native Title"))
    tag.set_field(tag.create_field(FieldKey.ALBUM, "Native Album"))
    return tag


@pytest.fixture
def id3() -> Id3Tag:
    raw = ID3()
    raw.add(TIT2(encoding=Encoding.UTF8, text=["ID3 Title"]))
    return Id3Tag(raw)


def test_id3_store_wins_key_reads_when_attached(native: InfoTag, id3: Id3Tag) -> None:
    tag = CompositeTag(native, id3)

    assert tag.get_first(FieldKey.TITLE) == "ID3 Title"
    assert tag.get_all(FieldKey.TITLE) == ["ID3 Title"]
    first = tag.get_first_field(FieldKey.TITLE)
    assert first is not None and first.id == "TIT2"


def test_id3_store_wins_even_when_it_lacks_the_field(native: InfoTag, id3: Id3Tag) -> None:
    """No per-field fallback: an attached ID3 store answers every key read."""
    tag = CompositeTag(native, id3)
    assert tag.get_first(FieldKey.ALBUM) == ""


def test_native_store_answers_without_id3(native: InfoTag) -> None:
    tag = CompositeTag(native)
    assert tag.get_first(FieldKey.TITLE) == "Native Title"
    assert tag.get_value(FieldKey.ALBUM, 0) == "Native Album"


def test_reads_without_any_store_return_empty_results() -> None:
    tag = CompositeTag()

    assert tag.get_first(FieldKey.TITLE) == ""
    assert tag.get_all(FieldKey.TITLE) == []
    assert tag.get_fields(FieldKey.TITLE) == []
    assert tag.get_first_field(FieldKey.TITLE) is None
    assert tag.is_empty()
    assert tag.field_count() == 0
    assert list(tag) == []


def test_native_identifier_reads_and_presence_use_native_store(native: InfoTag, id3: Id3Tag) -> None:
    tag = CompositeTag(native, id3)

    assert tag.get_first("INAM") == "Native Title"
    assert tag.has_field(FieldKey.ALBUM)
    assert tag.field_count() == 2
    assert tag.field_count_including_sub_values() == 2
    assert tag.has_common_fields()
    assert [field.id for field in tag] == ["INAM", "IPRD"]


@pytest.mark.parametrize("key", list(FieldKey))
def test_create_field_without_native_store_is_unsupported(id3: Id3Tag, key: FieldKey) -> None:
    tag = CompositeTag(id3_tag=id3)
    with pytest.raises(UnsupportedOperationError):
        _ = tag.create_field(key, "value")


def test_writes_go_to_native_store(native: InfoTag, id3: Id3Tag) -> None:
    tag = CompositeTag(native, id3)

    tag.set_field(FieldKey.ARTIST, "Writer")
    tag.add_field(TagField("ICMT", ["note"]))
    tag.delete_field(FieldKey.ALBUM)

    assert native.get_first(FieldKey.ARTIST) == "Writer"
    assert native.get_first(FieldKey.COMMENT) == "note"
    assert not native.has_field(FieldKey.ALBUM)
    assert id3.get_all(FieldKey.ARTIST) == []


def test_set_field_with_key_requires_value(native: InfoTag) -> None:
    with pytest.raises(ValueError):
        CompositeTag(native).set_field(FieldKey.TITLE)


def test_unmapped_native_key_raises_key_not_found(native: InfoTag) -> None:
    tag = CompositeTag(native)
    with pytest.raises(KeyNotFoundError):
        _ = tag.create_compilation_field(True)
    with pytest.raises(KeyNotFoundError):
        _ = tag.get_first_field(None)


def test_set_encoding_delegates_to_native_store(native: InfoTag) -> None:
    tag = CompositeTag(native)
    assert tag.set_encoding("utf-8")
    assert native.encoding == "utf-8"
    with pytest.raises(UnsupportedOperationError):
        _ = CompositeTag().set_encoding("utf-8")


def test_stores_and_preexisting_flags(native: InfoTag, id3: Id3Tag) -> None:
    tag = CompositeTag(native, native_tag_preexisting=True)

    assert tag.has_native_tag() and not tag.has_id3_tag()
    assert tag.native_tag_preexisting and not tag.id3_tag_preexisting
    assert tag.primary is native

    tag.id3_tag = id3
    assert tag.has_id3_tag()
    assert tag.primary is id3
    assert not tag.id3_tag_preexisting


def test_artwork_is_not_supported(native: InfoTag) -> None:
    tag = CompositeTag(native)
    artwork = Artwork("image/png", b"\x89PNG")

    with pytest.raises(UnsupportedOperationError):
        _ = tag.create_artwork_field(artwork)
    with pytest.raises(UnsupportedOperationError):
        tag.set_artwork(artwork)
    with pytest.raises(UnsupportedOperationError):
        tag.add_artwork(artwork)
    assert tag.artwork_list() == []
    assert tag.first_artwork() is None
    tag.delete_artwork_field()
    assert tag.field_count() == 2
