"""Tests for the AIFF-C compression catalogue.

Where: tests/features/audio/domain/test_compression.py
What: Validate lookups, losslessness flags and immutability of the catalogue.
Why: Common chunk decoding trusts these flags for every AIFF-C file.
"""

from __future__ import annotations

import pytest

from chunktag.features.audio.domain import (
    COMPRESSION_CATALOGUE,
    LITTLE_ENDIAN_PCM_CODE,
    lookup_compression,
)


@pytest.mark.parametrize("code", ["NONE", "raw ", "twos", "sowt", "in24", "in32", "fl32", "FL64"])
def test_pcm_codes_are_lossless(code: str) -> None:
    entry = lookup_compression(code)
    assert entry is not None
    assert entry.is_lossless
    assert entry.code == code


@pytest.mark.parametrize("code", ["ulaw", "ALAW", "GSM ", "ima4", "MAC6", "QDM2", "Qclp"])
def test_codec_codes_are_lossy(code: str) -> None:
    entry = lookup_compression(code)
    assert entry is not None
    assert not entry.is_lossless


def test_unknown_and_case_mismatched_codes_are_absent() -> None:
    """Codes are case-sensitive four-character identifiers."""
    assert lookup_compression("zzzz") is None
    assert lookup_compression("SOWT") is None


def test_catalogue_is_read_only() -> None:
    assert COMPRESSION_CATALOGUE[LITTLE_ENDIAN_PCM_CODE].display_name.endswith("little-endian")
    with pytest.raises(TypeError):
        COMPRESSION_CATALOGUE["zzzz"] = COMPRESSION_CATALOGUE["NONE"]  # pyright: ignore[reportIndexIssue]
