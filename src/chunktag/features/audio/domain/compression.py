"""Known AIFF-C compression codes.

Where: src/chunktag/features/audio/domain/compression.py
What: Static lookup from 4-character compression codes to display name and losslessness.
Why: Resolve the codec declared in an AIFF-C common chunk without treating unknown codes as errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final


@dataclass(frozen=True, slots=True)
class CompressionEntry:
    """A compression type declared by an AIFF-C common chunk."""

    code: str
    display_name: str
    is_lossless: bool


LITTLE_ENDIAN_PCM_CODE: Final[str] = "sowt"

_ENTRIES: Final[tuple[CompressionEntry, ...]] = (
    # Uncompressed PCM
    CompressionEntry("NONE", "Not Compressed", True),
    CompressionEntry("raw ", "PCM 8-bit offset-binary", True),
    CompressionEntry("twos", "PCM 16-bit twos-complement big-endian", True),
    CompressionEntry(LITTLE_ENDIAN_PCM_CODE, "PCM 16-bit twos-complement little-endian", True),
    CompressionEntry("in24", "PCM 24-bit integer", True),
    CompressionEntry("in32", "PCM 32-bit integer", True),
    CompressionEntry("fl32", "PCM 32-bit floating point", True),
    CompressionEntry("FL32", "Float 32", True),
    CompressionEntry("fl64", "PCM 64-bit floating point", True),
    CompressionEntry("FL64", "Float 64", True),
    # Telephony
    CompressionEntry("alaw", "ALaw 2:1", False),
    CompressionEntry("ALAW", "CCITT G.711 ALaw", False),
    CompressionEntry("ulaw", "µLaw 2:1", False),
    CompressionEntry("ULAW", "CCITT G.711 µLaw", False),
    CompressionEntry("GSM ", "GSM", False),
    CompressionEntry("G722", "G722", False),
    CompressionEntry("G726", "G726", False),
    CompressionEntry("G728", "G728", False),
    # ADPCM and vendor codecs
    CompressionEntry("ima4", "IMA 4:1", False),
    CompressionEntry("ADP4", "4:1 Intel/DVI ADPCM", False),
    CompressionEntry("MAC3", "MACE 3-to-1", False),
    CompressionEntry("MAC6", "MACE 6-to-1", False),
    CompressionEntry("ACE2", "ACE 2-to-1", False),
    CompressionEntry("ACE8", "ACE 8-to-3", False),
    CompressionEntry("QDMC", "QDesign Music", False),
    CompressionEntry("QDM2", "QDesign Music 2", False),
    CompressionEntry("Qclp", "Qualcomm PureVoice", False),
    CompressionEntry("SDX2", "SDX2 2:1", False),
    CompressionEntry("DWVW", "TX16W 12-bit", False),
    CompressionEntry("rt24", "Voxware RT24", False),
    CompressionEntry("rt29", "Voxware RT29", False),
)

COMPRESSION_CATALOGUE: Final[MappingProxyType[str, CompressionEntry]] = MappingProxyType(
    {entry.code: entry for entry in _ENTRIES}
)


def lookup_compression(code: str) -> CompressionEntry | None:
    """Return the catalogue entry for ``code``, or None for unknown codes."""

    return COMPRESSION_CATALOGUE.get(code)


__all__ = [
    "CompressionEntry",
    "COMPRESSION_CATALOGUE",
    "LITTLE_ENDIAN_PCM_CODE",
    "lookup_compression",
]
