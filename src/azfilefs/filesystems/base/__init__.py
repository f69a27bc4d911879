"""Base filesystem classes."""

from __future__ import annotations

from azfilefs.filesystems.base.basefilesystem import BaseFileSystem
from azfilefs.filesystems.base.baseupath import BaseUPath, to_async
from azfilefs.filesystems.base.file_objects import (
    DEFAULT_SPOOL_SIZE,
    BufferedWriter,
    FileInfo,
    StreamUploader,
    spooled_buffer,
)

__all__ = [
    "DEFAULT_SPOOL_SIZE",
    "BaseFileSystem",
    "BaseUPath",
    "BufferedWriter",
    "FileInfo",
    "StreamUploader",
    "spooled_buffer",
    "to_async",
]
