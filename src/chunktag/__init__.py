# Where: chunktag.__init__
# What: Top-level exports for reading AIFF/WAV properties and tags.
# Why: Most callers only need the reader, the facade and the field keys.

from chunktag.application.services import AudioFileMetadata, AudioFileReader
from chunktag.config import ReaderConfig, load_config
from chunktag.features.audio.domain import AudioProperties, ContainerType, Endianness
from chunktag.features.tagging.domain import CompositeTag, FieldKey, TagField
from chunktag.platform.logging import setup_logger
from chunktag.shared.errors import ChunkTagError

__version__ = "0.1.0"

__all__ = [
    "AudioFileMetadata",
    "AudioFileReader",
    "AudioProperties",
    "ChunkTagError",
    "CompositeTag",
    "ContainerType",
    "Endianness",
    "FieldKey",
    "ReaderConfig",
    "TagField",
    "__version__",
    "load_config",
    "setup_logger",
]
