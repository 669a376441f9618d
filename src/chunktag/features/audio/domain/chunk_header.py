"""
Summary: Chunk identifier and declared length parsed ahead of every chunk payload.
Why: Bound each decoder's cursor and keep the scanner aligned on declared sizes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .byte_cursor import ByteCursor

CHUNK_HEADER_LENGTH: Final[int] = 8
CHUNK_ID_LENGTH: Final[int] = 4


@dataclass(frozen=True, slots=True)
class ChunkHeader:
    """A chunk's 4-character identifier and declared byte count."""

    identifier: str
    size: int

    @classmethod
    def read(cls, cursor: ByteCursor) -> ChunkHeader:
        """Parse a header in the cursor's byte order."""
        identifier = cursor.read_fixed_chars(CHUNK_ID_LENGTH)
        size = cursor.read_uint32()
        return cls(identifier=identifier, size=size)

    @property
    def padded_size(self) -> int:
        """Declared size rounded up to the even IFF boundary."""
        return self.size + (self.size & 1)

    def fits(self, remaining: int) -> bool:
        """Return whether the declared payload fits in ``remaining`` bytes."""
        return self.size <= remaining

    def __str__(self) -> str:
        return f"{self.identifier!r} ({self.size} bytes)"


__all__ = ["ChunkHeader", "CHUNK_HEADER_LENGTH", "CHUNK_ID_LENGTH"]
