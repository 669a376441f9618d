"""Summary: Port implemented by every metadata store a CompositeTag can hold.
Why: Keep the facade independent of how INFO chunks or ID3 frames are stored."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from .field_key import FieldKey
from .tag_field import TagField

FieldRef = FieldKey | str


@runtime_checkable
class TagStore(Protocol):
    """Read/write contract shared by native and ID3 stores."""

    def get_fields(self, key: FieldRef) -> list[TagField]:
        """Return every field stored under ``key``."""
        ...

    def get_first_field(self, key: FieldRef) -> TagField | None:
        """Return the first field stored under ``key``, if any."""
        ...

    def get_value(self, key: FieldRef, index: int) -> str:
        """Return the value at ``index`` across the fields for ``key``."""
        ...

    def get_first(self, key: FieldRef) -> str:
        """Return the first value for ``key`` or an empty string."""
        ...

    def get_all(self, key: FieldRef) -> list[str]:
        """Return every value for ``key``."""
        ...

    def has_field(self, key: FieldRef) -> bool:
        """Return whether a field exists for ``key``."""
        ...

    def create_field(self, key: FieldKey, value: str) -> TagField:
        """Build a field for ``key`` without storing it."""
        ...

    def set_field(self, field: TagField) -> None:
        """Replace every field with the same identifier."""
        ...

    def add_field(self, field: TagField) -> None:
        """Store a field alongside any existing ones."""
        ...

    def delete_field(self, key: FieldRef) -> None:
        """Remove every field stored under ``key``."""
        ...

    def field_count(self) -> int:
        """Return the number of stored fields."""
        ...

    def is_empty(self) -> bool:
        """Return whether no fields are stored."""
        ...

    def has_common_fields(self) -> bool:
        """Return whether any commonly displayed field is present."""
        ...

    def set_encoding(self, encoding: str) -> bool:
        """Change the text encoding used for new fields."""
        ...

    def __iter__(self) -> Iterator[TagField]:
        ...


__all__ = ["FieldRef", "TagStore"]
