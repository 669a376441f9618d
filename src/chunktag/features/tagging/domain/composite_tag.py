"""
Summary: Facade presenting a native tag store and an ID3v2 store as one tag.
Why: Files often carry both stores with diverging values; callers need one deterministic answer.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from chunktag.shared.errors import KeyNotFoundError, UnsupportedOperationError

from .field_key import FieldKey
from .tag_field import Artwork, TagField
from .tag_store import FieldRef, TagStore

COMPILATION_TRUE: Final[str] = "true"
COMPILATION_FALSE: Final[str] = "false"


class CompositeTag:
    """One logical tag over an optional native store and an optional ID3 store.

    Reads by ``FieldKey`` come from the ID3 store when one is attached and
    from the native store otherwise. Reads by native identifier, field
    presence, counting and iteration address the native store. Every write
    targets the native store. The facade never creates a store itself;
    attaching one is the reader's job.
    """

    def __init__(
        self,
        native_tag: TagStore | None = None,
        id3_tag: TagStore | None = None,
        *,
        native_tag_preexisting: bool = False,
        id3_tag_preexisting: bool = False,
    ) -> None:
        self._native_tag = native_tag
        self._id3_tag = id3_tag
        self._native_tag_preexisting = native_tag_preexisting
        self._id3_tag_preexisting = id3_tag_preexisting

    def __repr__(self) -> str:
        return (
            f"CompositeTag(native={self._native_tag!r}, id3={self._id3_tag!r}, "
            f"native_preexisting={self._native_tag_preexisting}, "
            f"id3_preexisting={self._id3_tag_preexisting})"
        )

    # Stores -----------------------------------------------------------------

    @property
    def native_tag(self) -> TagStore | None:
        return self._native_tag

    @native_tag.setter
    def native_tag(self, store: TagStore | None) -> None:
        self._native_tag = store

    @property
    def id3_tag(self) -> TagStore | None:
        return self._id3_tag

    @id3_tag.setter
    def id3_tag(self, store: TagStore | None) -> None:
        self._id3_tag = store

    @property
    def native_tag_preexisting(self) -> bool:
        """Whether the native store was read from the file rather than created empty."""
        return self._native_tag_preexisting

    @property
    def id3_tag_preexisting(self) -> bool:
        """Whether the ID3 store was read from the file rather than created empty."""
        return self._id3_tag_preexisting

    def has_native_tag(self) -> bool:
        return self._native_tag is not None

    def has_id3_tag(self) -> bool:
        return self._id3_tag is not None

    @property
    def primary(self) -> TagStore | None:
        """The store answering FieldKey reads."""
        if self._id3_tag is not None:
            return self._id3_tag
        return self._native_tag

    def _read_store(self, key: FieldRef) -> TagStore | None:
        if isinstance(key, FieldKey):
            return self.primary
        return self._native_tag

    def _write_store(self) -> TagStore:
        if self._native_tag is None:
            raise UnsupportedOperationError("No native tag is attached to write to")
        return self._native_tag

    # Reads ------------------------------------------------------------------

    def get_value(self, key: FieldRef, index: int) -> str:
        store = self._read_store(key)
        if store is None:
            return ""
        return store.get_value(key, index)

    def get_first(self, key: FieldRef) -> str:
        return self.get_value(key, 0)

    def get_all(self, key: FieldRef) -> list[str]:
        store = self._read_store(key)
        if store is None:
            return []
        return store.get_all(key)

    def get_fields(self, key: FieldRef) -> list[TagField]:
        store = self._read_store(key)
        if store is None:
            return []
        return store.get_fields(key)

    def get_first_field(self, key: FieldRef | None) -> TagField | None:
        if key is None:
            raise KeyNotFoundError("Field key must not be None")
        store = self._read_store(key)
        if store is None:
            return None
        return store.get_first_field(key)

    def has_field(self, key: FieldRef) -> bool:
        return self._native_tag is not None and self._native_tag.has_field(key)

    def field_count(self) -> int:
        return self._native_tag.field_count() if self._native_tag is not None else 0

    def field_count_including_sub_values(self) -> int:
        return self.field_count()

    def is_empty(self) -> bool:
        return self._native_tag is None or self._native_tag.is_empty()

    def has_common_fields(self) -> bool:
        return self._native_tag is not None and self._native_tag.has_common_fields()

    def __iter__(self) -> Iterator[TagField]:
        if self._native_tag is not None:
            yield from self._native_tag

    # Writes -----------------------------------------------------------------

    def create_field(self, key: FieldKey, value: str) -> TagField:
        """Build a native field for ``key``.

        Raises:
            UnsupportedOperationError: No native store is attached.
            KeyNotFoundError: The native format has no identifier for ``key``.
        """
        return self._write_store().create_field(key, value)

    def create_compilation_field(self, value: bool) -> TagField:
        return self.create_field(
            FieldKey.IS_COMPILATION, COMPILATION_TRUE if value else COMPILATION_FALSE
        )

    def set_field(self, key_or_field: FieldKey | TagField, value: str | None = None) -> None:
        """Replace the native field, either from a prepared field or a key and value."""
        self._write_store().set_field(self._as_field(key_or_field, value))

    def add_field(self, key_or_field: FieldKey | TagField, value: str | None = None) -> None:
        """Add a native field alongside existing ones."""
        self._write_store().add_field(self._as_field(key_or_field, value))

    def delete_field(self, key: FieldRef) -> None:
        self._write_store().delete_field(key)

    def set_encoding(self, encoding: str) -> bool:
        return self._write_store().set_encoding(encoding)

    def _as_field(self, key_or_field: FieldKey | TagField, value: str | None) -> TagField:
        if isinstance(key_or_field, TagField):
            return key_or_field
        if value is None:
            raise ValueError(f"A value is required to set {key_or_field.name}")
        return self.create_field(key_or_field, value)

    # Artwork ----------------------------------------------------------------

    def create_artwork_field(self, artwork: Artwork) -> TagField:
        raise UnsupportedOperationError("Artwork cannot be stored in a native chunk tag")

    def set_artwork(self, artwork: Artwork) -> None:
        self.set_field(self.create_artwork_field(artwork))

    def add_artwork(self, artwork: Artwork) -> None:
        self.add_field(self.create_artwork_field(artwork))

    def artwork_list(self) -> list[Artwork]:
        return []

    def first_artwork(self) -> Artwork | None:
        return None

    def delete_artwork_field(self) -> None:
        """Nothing to delete: the native store never holds artwork."""


__all__ = ["COMPILATION_FALSE", "COMPILATION_TRUE", "CompositeTag"]
