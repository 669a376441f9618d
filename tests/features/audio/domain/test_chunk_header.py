"""Tests for chunk header parsing."""

from __future__ import annotations

import pytest

from chunktag.features.audio.domain import ByteCursor, ChunkHeader
from chunktag.shared.errors import TruncatedError


def test_read_parses_identifier_and_size_in_byte_order() -> None:
    big = ChunkHeader.read(ByteCursor(b"COMM\x00\x00\x00\x12"))
    little = ChunkHeader.read(ByteCursor(b"fmt \x10\x00\x00\x00", "<"))

    assert big == ChunkHeader("COMM", 18)
    assert little == ChunkHeader("fmt ", 16)


def test_padded_size_rounds_odd_sizes_up() -> None:
    assert ChunkHeader("NAME", 5).padded_size == 6
    assert ChunkHeader("NAME", 6).padded_size == 6
    assert ChunkHeader("NAME", 0).padded_size == 0


def test_fits_compares_against_remaining_bytes() -> None:
    header = ChunkHeader("data", 100)
    assert header.fits(100)
    assert not header.fits(99)


def test_read_raises_on_short_header() -> None:
    with pytest.raises(TruncatedError):
        _ = ChunkHeader.read(ByteCursor(b"COM"))
