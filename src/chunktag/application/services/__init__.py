# Where: chunktag.application.services.__init__
# What: Expose the file reader service and its result type.
# Why: Give callers one import path that does not depend on module layout.

from .reader_service import MEMORY_SOURCE_NAME, AudioFileMetadata, AudioFileReader

__all__ = ["AudioFileMetadata", "AudioFileReader", "MEMORY_SOURCE_NAME"]
