"""Tests for the WAV ``fmt `` and ``data`` chunk decoders."""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

import pytest

from chunktag.features.audio.domain import AudioPropertiesBuilder, ByteCursor, Endianness
from chunktag.features.audio.usecases import (
    FORMAT_CHUNK_ID,
    DecodeOutcome,
    decode_data_chunk,
    decode_fmt_chunk,
)
from chunktag.features.audio.usecases.wav_format import WAVE_FORMAT_EXTENSIBLE, describe_format
from chunktag.shared.errors import InvalidChunkError

if TYPE_CHECKING:
    from conftest import IffBuilder


def test_pcm_format_chunk(iff: IffBuilder) -> None:
    builder = AudioPropertiesBuilder()
    outcome = decode_fmt_chunk(ByteCursor(iff.fmt_payload(), "<"), builder)

    assert outcome is DecodeOutcome.COMPLETE
    assert builder.channel_count == 2
    assert builder.sample_rate == 44100.0
    assert builder.bits_per_sample == 16
    assert builder.block_align == 4
    assert builder.bitrate == 1411200
    assert builder.lossless is True
    assert builder.encoding_name == "PCM"
    assert builder.endianness is Endianness.LITTLE


def test_extensible_format_uses_sub_format_tag(iff: IffBuilder) -> None:
    extension = struct.pack("<HHI", 22, 24, 0x3) + struct.pack("<H", 3) + b"\x00" * 14
    payload = iff.fmt_payload(bits=24, format_tag=WAVE_FORMAT_EXTENSIBLE) + extension
    builder = AudioPropertiesBuilder()

    _ = decode_fmt_chunk(ByteCursor(payload, "<"), builder)

    assert builder.encoding_name == "IEEE Float"
    assert builder.lossless is True


def test_unknown_format_tag_is_lossy() -> None:
    assert describe_format(0x1234) == ("Unknown (0x1234)", False)
    assert describe_format(0x0055) == ("MPEG Layer 3", False)


def test_zero_rate_is_invalid(iff: IffBuilder) -> None:
    with pytest.raises(InvalidChunkError):
        _ = decode_fmt_chunk(ByteCursor(iff.fmt_payload(rate=0), "<"), AudioPropertiesBuilder())


def test_data_chunk_derives_frames_and_duration(iff: IffBuilder) -> None:
    builder = AudioPropertiesBuilder()
    _ = decode_fmt_chunk(ByteCursor(iff.fmt_payload(rate=8000, channels=1), "<"), builder)
    builder.mark_decoded(FORMAT_CHUNK_ID)

    outcome = decode_data_chunk(ByteCursor(b"\x00" * 4000, "<"), builder)

    assert outcome is DecodeOutcome.COMPLETE
    assert builder.sample_frame_count == 2000
    assert builder.duration_seconds == 0.25


def test_data_before_format_is_incomplete() -> None:
    builder = AudioPropertiesBuilder()
    assert decode_data_chunk(ByteCursor(b"\x00" * 16, "<"), builder) is DecodeOutcome.INCOMPLETE
    assert builder.sample_frame_count == 0
