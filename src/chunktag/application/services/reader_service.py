"""Application service for reading audio properties and tags from AIFF and WAV files.

This layer wires the chunk scanner, the property decoders and the tag chunk
readers together so callers get one ``AudioFileMetadata`` per file.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import final

from mutagen.id3 import Encoding

from chunktag.config import ReaderConfig, load_config
from chunktag.features.audio.domain import AudioProperties, AudioPropertiesBuilder, ContainerType
from chunktag.features.audio.usecases import (
    ScannedChunk,
    decode_chunk,
    decoders_for,
    iter_chunks,
    read_container,
)
from chunktag.features.tagging.domain import (
    AiffTextTag,
    CompositeTag,
    Id3Tag,
    InfoTag,
    id3_encoding_for,
)
from chunktag.features.tagging.usecases import (
    ID3_CHUNK_IDS,
    LIST_CHUNK_ID,
    decode_aiff_text_chunk,
    decode_id3_chunk,
    decode_info_list,
)
from chunktag.platform.logging import logger
from chunktag.shared.errors import ChunkTagError

MEMORY_SOURCE_NAME = "<memory>"


@dataclass(frozen=True)
class AudioFileMetadata:
    """Everything read from one file.

    Attributes:
        name: File name, or ``<memory>`` for raw bytes.
        container: Detected container variant.
        properties: Decoded audio header; zeroed when no header chunk decoded.
        tag: Facade over the native and ID3 tag stores.
    """

    name: str
    container: ContainerType
    properties: AudioProperties
    tag: CompositeTag


@dataclass
class _TagState:
    native: InfoTag | None = None
    id3: Id3Tag | None = None


@final
class AudioFileReader:
    """Read AIFF, AIFF-C and WAV files into properties plus a composite tag."""

    def __init__(
        self,
        config: ReaderConfig | None = None,
        *,
        read_file: Callable[[Path], bytes] | None = None,
    ) -> None:
        """Create a reader.

        Args:
            config: Reader settings; defaults apply when omitted.
            read_file: File loader, ``Path.read_bytes`` unless a test injects one.
        """
        self._config = config or ReaderConfig()
        self._read_file = read_file or Path.read_bytes

    @classmethod
    def from_config(
        cls,
        path: Path | str | None = None,
        *,
        env: Mapping[str, str] | None = None,
        read_file: Callable[[Path], bytes] | None = None,
    ) -> AudioFileReader:
        """Load the TOML configuration, set up logging from it and build a reader.

        Raises:
            ConfigError: The configuration file is unreadable or invalid.
        """
        config = load_config(path, env=env)
        _ = config.configure_logging()
        return cls(config, read_file=read_file)

    @property
    def config(self) -> ReaderConfig:
        return self._config

    def read_path(self, path: Path | str) -> AudioFileMetadata:
        """Read and decode the file at ``path``.

        Raises:
            OSError: The file could not be read.
            UnsupportedFormatError: The file is not an AIFF, AIFF-C or WAVE file.
        """
        file_path = Path(path)
        logger.debug("Reading %s", file_path)
        return self.read_bytes(self._read_file(file_path), name=file_path.name)

    def read_bytes(
        self, data: bytes | bytearray | memoryview, name: str = MEMORY_SOURCE_NAME
    ) -> AudioFileMetadata:
        """Decode an in-memory file image.

        Individual chunks that fail to decode are logged and skipped; only an
        unrecognisable container raises.

        Raises:
            UnsupportedFormatError: ``data`` is not an AIFF, AIFF-C or WAVE file.
        """
        container = read_container(data)
        table = decoders_for(container.container_type)
        builder = AudioPropertiesBuilder()
        tags = _TagState()

        for chunk in iter_chunks(container.body, base_offset=container.body_offset):
            if chunk.header.identifier in table:
                _ = decode_chunk(chunk.header, chunk.payload, builder, table, offset=chunk.offset)
                continue
            try:
                self._read_tag_chunk(chunk, container.container_type, tags)
            except ChunkTagError as exc:
                logger.warning(
                    "Skipping unreadable %s chunk: %s",
                    chunk.header,
                    exc,
                    extra={"chunk_id": chunk.header.identifier, "chunk_offset": chunk.offset},
                )

        if not builder.decoded_chunks:
            logger.warning("%s: no audio header chunk decoded", name)

        tag = self._compose_tag(tags, container.container_type)
        logger.info(
            "%s: %s, %d native fields, ID3 %s",
            name,
            container.container_type.value,
            tags.native.field_count() if tags.native is not None else 0,
            "present" if tags.id3 is not None else "absent",
        )
        return AudioFileMetadata(
            name=name,
            container=container.container_type,
            properties=builder.build(),
            tag=tag,
        )

    def _read_tag_chunk(self, chunk: ScannedChunk, container: ContainerType, tags: _TagState) -> None:
        identifier = chunk.header.identifier
        log_extra = {"chunk_id": identifier, "chunk_offset": chunk.offset}

        if identifier in ID3_CHUNK_IDS:
            if tags.id3 is not None:
                logger.warning("Ignoring additional ID3 chunk", extra=log_extra)
                return
            tags.id3 = decode_id3_chunk(chunk.payload, self._id3_encoding())
            return

        if container is ContainerType.WAV and identifier == LIST_CHUNK_ID:
            info = decode_info_list(chunk.payload, self._config.info_text_encoding)
            if info is None:
                return
            if tags.native is None:
                tags.native = info
                return
            for tag_field in info:
                tags.native.add_field(tag_field)
            return

        if container is not ContainerType.WAV and identifier in AiffTextTag.TEXT_CHUNK_IDS:
            if not isinstance(tags.native, AiffTextTag):
                tags.native = AiffTextTag(encoding=self._config.info_text_encoding)
            decode_aiff_text_chunk(chunk.header, chunk.payload, tags.native)
            return

        logger.debug("No reader for %s chunk", chunk.header, extra=log_extra)

    def _id3_encoding(self) -> Encoding:
        encoding = id3_encoding_for(self._config.id3_text_encoding)
        if encoding is None:
            logger.warning(
                "ID3v2 cannot store %r; falling back to utf-8", self._config.id3_text_encoding
            )
            return Encoding.UTF8
        return encoding

    def _compose_tag(self, tags: _TagState, container: ContainerType) -> CompositeTag:
        tag = CompositeTag(
            tags.native,
            tags.id3,
            native_tag_preexisting=tags.native is not None,
            id3_tag_preexisting=tags.id3 is not None,
        )
        if tags.native is None and self._config.create_missing_native_tag:
            store_cls = InfoTag if container is ContainerType.WAV else AiffTextTag
            tag.native_tag = store_cls(encoding=self._config.info_text_encoding)
        if tags.id3 is None and self._config.create_missing_id3_tag:
            tag.id3_tag = Id3Tag(encoding=self._id3_encoding())
        return tag


__all__ = ["AudioFileMetadata", "AudioFileReader", "MEMORY_SOURCE_NAME"]
