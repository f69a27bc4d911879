"""Base File objects."""

from __future__ import annotations

import io
import tempfile
from typing import TYPE_CHECKING, Any, Literal, Protocol, Required, TypedDict


if TYPE_CHECKING:
    from collections.abc import Buffer


DEFAULT_SPOOL_SIZE = 8 * 2**20


class FileInfo(TypedDict):
    """Common info dict keys for all paths."""

    name: Required[str]
    type: Required[Literal["file", "directory"]]


class StreamUploader(Protocol):
    """A filesystem that can upload the contents of a readable stream."""

    def upload(self, path: str, data: bytes | io.IOBase, **options: Any) -> Any: ...


def spooled_buffer(max_size: int = DEFAULT_SPOOL_SIZE) -> tempfile.SpooledTemporaryFile[bytes]:
    """Binary buffer that stays in memory up to ``max_size`` bytes, then moves to disk."""
    return tempfile.SpooledTemporaryFile(max_size=max_size, mode="w+b")


class BufferedWriter(io.BufferedIOBase):
    """Buffered writer for filesystems that upload when closed.

    Written data is spooled locally (in memory first, on disk once it grows
    past the spool size) and handed to the filesystem's ``upload`` as a
    stream when the writer is closed or committed.
    """

    def __init__(
        self,
        fs: StreamUploader,
        path: str,
        *,
        autocommit: bool = True,
        spool_max_size: int = DEFAULT_SPOOL_SIZE,
        **kwargs: Any,
    ) -> None:
        """Initialize the writer.

        Args:
            fs: Filesystem instance with an upload method
            path: Path to write to
            autocommit: Whether to upload on close. If False, ``commit()``
                must be called (fsspec transactions do this).
            spool_max_size: Bytes kept in memory before spilling to disk
            **kwargs: Write options passed on to upload
        """
        super().__init__()
        self.buffer = spooled_buffer(spool_max_size)
        self.fs = fs
        self.path = path
        self.autocommit = autocommit
        self.kwargs = kwargs

    def write(self, data: Buffer) -> int:
        """Write data to the buffer.

        Args:
            data: Data to write

        Returns:
            Number of bytes written
        """
        return self.buffer.write(data)

    def commit(self) -> None:
        """Upload the buffered content."""
        self.buffer.seek(0)
        self.fs.upload(self.path, self.buffer, **self.kwargs)
        self.buffer.close()

    def discard(self) -> None:
        """Drop the buffered content without uploading."""
        self.buffer.close()

    def close(self) -> None:
        """Close the writer, uploading the content when autocommitting."""
        if not self.closed:
            if self.autocommit:
                self.commit()
            super().close()

    def readable(self) -> bool:
        """Whether the writer is readable."""
        return False

    def writable(self) -> bool:
        """Whether the writer is writable."""
        return True
