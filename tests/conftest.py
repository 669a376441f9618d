"""Shared pytest fixtures for building chunked audio files in memory."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable, Mapping

import pytest


def pack_extended(value: float) -> bytes:
    """Pack ``value`` as a big-endian 80-bit IEEE-754 extended float."""

    if value == 0:
        return b"\x00" * 10
    sign = 0x8000 if value < 0 else 0
    fraction, exponent = math.frexp(abs(value))
    return struct.pack(">HQ", sign | (exponent - 1 + 16383), int(fraction * 2**64))


def syncsafe(value: int) -> bytes:
    """Encode ``value`` as a 4-byte ID3v2 synchsafe integer."""

    return bytes((value >> shift) & 0x7F for shift in (21, 14, 7, 0))


class IffBuilder:
    """Assemble chunks and containers for decoder tests."""

    pack_extended = staticmethod(pack_extended)

    def chunk(self, identifier: bytes, payload: bytes, byteorder: str = ">") -> bytes:
        data = identifier + struct.pack(byteorder + "I", len(payload)) + payload
        if len(payload) % 2:
            data += b"\x00"
        return data

    def container(self, magic: bytes, form_type: bytes, chunks: Iterable[bytes]) -> bytes:
        byteorder = "<" if magic == b"RIFF" else ">"
        body = form_type + b"".join(chunks)
        return magic + struct.pack(byteorder + "I", len(body)) + body

    def comm_payload(
        self,
        channels: int,
        frames: int,
        bits: int,
        rate: float,
        compression: bytes | None = None,
        name: bytes = b"",
        quirk_byte: bool = True,
    ) -> bytes:
        payload = struct.pack(">HIH", channels, frames, bits) + pack_extended(rate)
        if compression is not None:
            payload += compression + bytes([len(name)]) + name
            if quirk_byte:
                payload += b"\x00"
        return payload

    def fmt_payload(
        self,
        channels: int = 2,
        rate: int = 44100,
        bits: int = 16,
        format_tag: int = 1,
    ) -> bytes:
        block_align = channels * bits // 8
        return struct.pack(
            "<HHIIHH", format_tag, channels, rate, rate * block_align, block_align, bits
        )

    def info_list(self, fields: Mapping[bytes, bytes]) -> bytes:
        body = b"INFO" + b"".join(
            self.chunk(identifier, value + b"\x00", "<") for identifier, value in fields.items()
        )
        return self.chunk(b"LIST", body, "<")

    def id3_tag(self, frames: Mapping[str, str]) -> bytes:
        """Build a minimal ID3v2.4 tag of UTF-8 text frames."""

        body = b""
        for frame_id, text in frames.items():
            frame_body = b"\x03" + text.encode("utf-8")
            body += frame_id.encode("ascii") + syncsafe(len(frame_body)) + b"\x00\x00" + frame_body
        return b"ID3\x04\x00\x00" + syncsafe(len(body)) + body


@pytest.fixture
def iff() -> IffBuilder:
    """Provide the in-memory chunk builder."""

    return IffBuilder()
