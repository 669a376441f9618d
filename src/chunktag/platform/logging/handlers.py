"""Rich console handler aware of chunk context.

Where: platform/logging/handlers.py
What: Prefix console log lines with the chunk identifier and offset carried in record extras.
Why: Make skipped or malformed chunks easy to locate when scanning a file by eye.
"""

from __future__ import annotations

import logging
from typing import Final, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

CHUNK_STYLE: Final[str] = "bold cyan"
OFFSET_STYLE: Final[str] = "dim"


class ChunkRichHandler(RichHandler):
    """``RichHandler`` that renders ``chunk_id``/``chunk_offset`` extras as a prefix."""

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = super().render_message(record, message)
        chunk_id: object = getattr(record, "chunk_id", None)
        if chunk_id is None or not isinstance(rendered, Text):
            return rendered

        prefix = Text()
        _ = prefix.append(f"[{chunk_id!s}", style=CHUNK_STYLE)
        chunk_offset: object = getattr(record, "chunk_offset", None)
        if chunk_offset is not None:
            _ = prefix.append(f" @{chunk_offset}", style=OFFSET_STYLE)
        _ = prefix.append("] ", style=CHUNK_STYLE)
        return Text.assemble(prefix, rendered)


__all__ = ["ChunkRichHandler"]
