"""Shared base class for tag stores.

Where: src/chunktag/features/tagging/domain/field_store.py
What: Implement the TagStore contract on top of a per-format FieldKey mapping and storage hooks.
Why: INFO and ID3 stores differ only in their identifiers and where fields live.
"""

from __future__ import annotations

import abc
from collections.abc import Iterator, Mapping
from typing import ClassVar

from chunktag.platform.logging import logger
from chunktag.shared.errors import KeyNotFoundError

from .field_key import COMMON_FIELD_KEYS, FieldKey
from .tag_field import TagField
from .tag_store import FieldRef

__all__ = ["FieldStore"]


class FieldStore(abc.ABC):
    """Base class for stores keyed by format-native identifiers.

    Structural operations (``get_fields``, ``create_field``, ``delete_field``)
    raise ``KeyNotFoundError`` for keys the format cannot represent. Value
    reads return empty results instead, so multi-field reads never abort.
    """

    FIELD_MAP: ClassVar[Mapping[FieldKey, str]] = {}

    @abc.abstractmethod
    def _load(self, native_id: str) -> list[TagField]:
        """Return the stored fields for ``native_id``."""
        raise NotImplementedError

    @abc.abstractmethod
    def _store(self, native_id: str, fields: list[TagField]) -> None:
        """Replace the fields for ``native_id``; an empty list removes them."""
        raise NotImplementedError

    @abc.abstractmethod
    def __iter__(self) -> Iterator[TagField]:
        raise NotImplementedError

    @abc.abstractmethod
    def set_encoding(self, encoding: str) -> bool:
        raise NotImplementedError

    def native_id(self, key: FieldKey) -> str:
        """Map a generic key to this format's identifier."""
        try:
            return self.FIELD_MAP[key]
        except KeyError:
            raise KeyNotFoundError(
                f"{key.name} is not supported by {type(self).__name__}"
            ) from None

    def _resolve(self, key: FieldRef | None) -> str:
        if key is None:
            raise KeyNotFoundError("Field key must not be None")
        if isinstance(key, FieldKey):
            return self.native_id(key)
        return key

    def is_common_id(self, native_id: str) -> bool:
        """Return whether ``native_id`` stores one of the commonly displayed keys."""
        return any(self.FIELD_MAP.get(key) == native_id for key in COMMON_FIELD_KEYS)

    def get_fields(self, key: FieldRef) -> list[TagField]:
        return self._load(self._resolve(key))

    def get_first_field(self, key: FieldRef) -> TagField | None:
        fields = self.get_fields(key)
        return fields[0] if fields else None

    def get_all(self, key: FieldRef) -> list[str]:
        try:
            fields = self.get_fields(key)
        except KeyNotFoundError as exc:
            logger.debug("No values for unmapped key: %s", exc)
            return []
        return [value for tag_field in fields for value in tag_field.values]

    def get_value(self, key: FieldRef, index: int) -> str:
        values = self.get_all(key)
        return values[index] if 0 <= index < len(values) else ""

    def get_first(self, key: FieldRef) -> str:
        return self.get_value(key, 0)

    def has_field(self, key: FieldRef) -> bool:
        try:
            return bool(self.get_fields(key))
        except KeyNotFoundError:
            return False

    def create_field(self, key: FieldKey, value: str) -> TagField:
        native_id = self.native_id(key)
        return TagField(id=native_id, values=[value], common=key in COMMON_FIELD_KEYS)

    def set_field(self, field: TagField) -> None:
        self._store(field.id, [field])

    def add_field(self, field: TagField) -> None:
        self._store(field.id, [*self._load(field.id), field])

    def delete_field(self, key: FieldRef) -> None:
        self._store(self._resolve(key), [])

    def field_count(self) -> int:
        return sum(1 for _ in self)

    def is_empty(self) -> bool:
        return self.field_count() == 0

    def has_common_fields(self) -> bool:
        return any(self.has_field(key) for key in COMMON_FIELD_KEYS if key in self.FIELD_MAP)
