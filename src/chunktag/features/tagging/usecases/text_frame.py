"""ID3v2 text-information frame bodies.

Where: src/chunktag/features/tagging/usecases/text_frame.py
What: Decode the generic text frame body (encoding byte + encoded text) into a mutagen frame.
Why: Every T*** frame, TENC included, shares this body layout, so one decoder covers them all.
"""

from __future__ import annotations

from typing import Final

from mutagen.id3 import Encoding, Frames, TextFrame

from chunktag.shared.errors import InvalidFrameError, TruncatedError

from ..domain.id3_tag import Id3Tag

# ID3v2 encoding byte -> (Python codec, string terminator)
_TEXT_CODECS: Final[dict[int, tuple[str, bytes]]] = {
    Encoding.LATIN1: ("latin-1", b"\x00"),
    Encoding.UTF16: ("utf-16", b"\x00\x00"),
    Encoding.UTF16BE: ("utf-16-be", b"\x00\x00"),
    Encoding.UTF8: ("utf-8", b"\x00"),
}


def split_terminated(data: bytes, terminator: bytes) -> list[bytes]:
    """Split ``data`` on ``terminator`` aligned to the terminator's width.

    Trailing empty segments (a final terminator, padding) are dropped.
    """
    width = len(terminator)
    parts: list[bytes] = []
    start = index = 0
    while index + width <= len(data):
        if data[index : index + width] == terminator:
            parts.append(data[start:index])
            start = index = index + width
        else:
            index += width
    parts.append(data[start:])
    while parts and not parts[-1]:
        _ = parts.pop()
    return parts


def decode_text_frame_body(frame_id: str, body: bytes) -> TextFrame:
    """Decode a text-information frame body into its mutagen frame.

    Args:
        frame_id: Four-character frame identifier, e.g. ``TENC``.
        body: Frame body without the frame header.

    Raises:
        TruncatedError: ``body`` is empty, so even the encoding byte is missing.
        InvalidFrameError: Unknown frame id, not a text frame, unknown
            encoding byte, or text that does not decode.
    """
    frame_cls = Frames.get(frame_id)
    if frame_cls is None or not issubclass(frame_cls, TextFrame):
        raise InvalidFrameError(f"{frame_id!r} is not a text-information frame")
    if not body:
        raise TruncatedError(1, 0, f"{frame_id} encoding byte")

    codec_entry = _TEXT_CODECS.get(body[0])
    if codec_entry is None:
        raise InvalidFrameError(f"{frame_id} declares unknown text encoding {body[0]}")
    encoding = Encoding(body[0])
    codec, terminator = codec_entry
    try:
        values = [part.decode(codec) for part in split_terminated(body[1:], terminator)]
    except UnicodeDecodeError as exc:
        raise InvalidFrameError(f"{frame_id} text is not valid {codec}: {exc}") from exc

    return frame_cls(encoding=encoding, text=values)


def add_raw_text_frame(tag: Id3Tag, frame_id: str, body: bytes) -> TextFrame:
    """Decode ``body`` and store the frame on ``tag``."""
    frame = decode_text_frame_body(frame_id, body)
    tag.add_frame(frame)
    return frame


__all__ = ["add_raw_text_frame", "decode_text_frame_body", "split_terminated"]
