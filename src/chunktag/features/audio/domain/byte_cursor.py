"""
Summary: Bounds-checked forward-only reader over a fixed byte buffer.
Why: Give every chunk decoder typed primitives that fail loudly instead of reading garbage.
"""

from __future__ import annotations

import math
import struct
from typing import Final, Literal

from chunktag.shared.errors import TruncatedError

ByteOrder = Literal[">", "<"]

EXTENDED_FLOAT_LENGTH: Final[int] = 10
_EXPONENT_BIAS: Final[int] = 16383
_MANTISSA_BITS: Final[int] = 63
_FRACTION_MASK: Final[int] = (1 << _MANTISSA_BITS) - 1


class ByteCursor:
    """Sequential reader over ``data``.

    Every read advances the offset by exactly the width consumed. A read that
    would run past the end raises ``TruncatedError`` and leaves the offset
    where it was.
    """

    __slots__ = ("_view", "_offset", "byteorder")

    def __init__(self, data: bytes | bytearray | memoryview, byteorder: ByteOrder = ">") -> None:
        self._view = memoryview(data)
        self._offset = 0
        self.byteorder: ByteOrder = byteorder

    def __len__(self) -> int:
        return len(self._view)

    def __repr__(self) -> str:
        return f"ByteCursor(offset={self._offset}, size={len(self._view)}, byteorder={self.byteorder!r})"

    @property
    def offset(self) -> int:
        return self._offset

    def remaining(self) -> int:
        """Return the number of unread bytes in this view."""
        return len(self._view) - self._offset

    def _take(self, length: int, what: str) -> memoryview:
        if length < 0:
            raise ValueError(f"Cannot read a negative length ({length})")
        available = self.remaining()
        if length > available:
            raise TruncatedError(length, available, what)
        start = self._offset
        self._offset += length
        return self._view[start : self._offset]

    def _unpack(self, fmt: str, what: str) -> int:
        size = struct.calcsize(fmt)
        value: int = struct.unpack(self.byteorder + fmt, self._take(size, what))[0]
        return value

    def read_uint8(self) -> int:
        return self._unpack("B", "uint8")

    def read_uint16(self) -> int:
        return self._unpack("H", "uint16")

    def read_uint32(self) -> int:
        return self._unpack("I", "uint32")

    def read_bytes(self, length: int) -> bytes:
        return bytes(self._take(length, "bytes"))

    def skip(self, length: int) -> None:
        _ = self._take(length, "skip")

    def read_fixed_chars(self, length: int) -> str:
        """Read ``length`` bytes as ISO-8859-1 characters (chunk and codec ids)."""
        return bytes(self._take(length, "characters")).decode("latin-1")

    def read_pascal_string(self) -> str:
        """Read a one-byte length prefix followed by that many characters.

        The length byte and the characters come from this cursor; a short
        buffer raises ``TruncatedError`` with the offset left before the
        length byte. No pad byte is consumed.
        """
        start = self._offset
        length = self.read_uint8()
        try:
            return self.read_fixed_chars(length)
        except TruncatedError:
            self._offset = start
            raise

    def read_extended_float80(self) -> float:
        """Read a 10-byte IEEE-754 extended precision float (always big-endian)."""
        raw = self._take(EXTENDED_FLOAT_LENGTH, "extended float")
        sign_exponent, mantissa = struct.unpack(">HQ", raw)
        exponent = sign_exponent & 0x7FFF
        sign = -1.0 if sign_exponent & 0x8000 else 1.0
        if exponent == 0:
            # denormal or zero: exponent field 0 encodes 1 - bias
            return sign * math.ldexp(mantissa, 1 - _EXPONENT_BIAS - _MANTISSA_BITS)
        if exponent == 0x7FFF:
            if mantissa & _FRACTION_MASK:
                return math.nan
            return math.inf * sign
        # explicit integer bit: value = mantissa / 2**63 * 2**(exponent - bias)
        return sign * math.ldexp(mantissa, exponent - _EXPONENT_BIAS - _MANTISSA_BITS)

    def sub_cursor(self, length: int) -> ByteCursor:
        """Return a bounded child view of ``length`` bytes and advance past it."""
        return ByteCursor(self._take(length, "sub view"), self.byteorder)


__all__ = ["ByteCursor", "ByteOrder", "EXTENDED_FLOAT_LENGTH"]
