"""
Summary: Field record owned by a tag store and the artwork value type.
Why: Carry a native identifier with its ordered values across store boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class TagField:
    """One field: a format-native identifier and its ordered values."""

    id: str
    values: list[str] = field(default_factory=list)
    common: bool = False

    @property
    def first(self) -> str:
        """First value, or an empty string for a field without values."""
        return self.values[0] if self.values else ""

    def is_empty(self) -> bool:
        return not any(self.values)

    def is_common(self) -> bool:
        return self.common

    def __str__(self) -> str:
        return "\x00".join(self.values)


@dataclass(frozen=True, slots=True)
class Artwork:
    """Embedded picture data."""

    mime_type: str
    data: bytes
    description: str = ""


__all__ = ["Artwork", "TagField"]
