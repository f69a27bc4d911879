"""Exceptions raised by the Azure file share filesystem.

Remote errors are mapped onto the builtin ``OSError`` family so that generic
fsspec callers keep working:

- a missing resource becomes :class:`FileDoesNotExist` or
  :class:`DirectoryDoesNotExist` (both ``FileNotFoundError``),
- every other remote failure becomes :class:`FilesystemOperationFailed`.
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import StrEnum
from typing import TYPE_CHECKING

from azure.core.exceptions import AzureError, HttpResponseError, ResourceNotFoundError


if TYPE_CHECKING:
    from collections.abc import Iterator


class Operation(StrEnum):
    """Filesystem operations an error can be attributed to."""

    READ = "read"
    WRITE = "write"
    FILE_EXISTS = "file_exists"
    DIRECTORY_EXISTS = "directory_exists"
    RETRIEVE_METADATA = "retrieve_metadata"
    LIST_CONTENTS = "list_contents"
    COPY = "copy"
    MOVE = "move"
    DELETE = "delete"
    DELETE_DIRECTORY = "delete_directory"
    CREATE_DIRECTORY = "create_directory"


class FilesystemOperationFailed(OSError):
    """A remote operation failed for a reason other than a missing resource."""

    def __init__(self, message: str, location: str = "", operation: Operation | None = None):
        super().__init__(message)
        self.location = location
        self.operation = operation

    @classmethod
    def for_location(
        cls,
        location: str,
        operation: Operation,
        reason: str = "",
    ) -> FilesystemOperationFailed:
        msg = f"Unable to {operation.value.replace('_', ' ')} at location: {location}."
        if reason:
            msg = f"{msg} {reason}"
        return cls(msg, location=location, operation=operation)


class FileDoesNotExist(FileNotFoundError):
    """The file at the location does not exist."""

    def __init__(self, location: str, operation: Operation = Operation.FILE_EXISTS):
        super().__init__(f"File does not exist at location: {location}.")
        self.location = location
        self.operation = operation


class DirectoryDoesNotExist(FileNotFoundError):
    """The directory at the location does not exist."""

    def __init__(self, location: str, operation: Operation = Operation.DIRECTORY_EXISTS):
        super().__init__(f"Directory does not exist at location: {location}.")
        self.location = location
        self.operation = operation


class UnableToCopyFile(FilesystemOperationFailed):
    """Copying a file failed; the source is left untouched.

    Also raised by moves, which copy first, with ``operation`` set to move.
    """

    def __init__(
        self,
        source: str,
        destination: str,
        reason: str = "",
        operation: Operation = Operation.COPY,
    ):
        msg = f"Unable to {operation.value} file from {source} to {destination}."
        if reason:
            msg = f"{msg} {reason}"
        super().__init__(msg, location=source, operation=operation)
        self.source = source
        self.destination = destination
        self.reason = reason


def is_not_found(exc: BaseException) -> bool:
    """Whether a remote error means the resource does not exist."""
    if isinstance(exc, ResourceNotFoundError):
        return True
    return isinstance(exc, HttpResponseError) and exc.status_code == 404  # noqa: PLR2004


@contextmanager
def translate_errors(
    location: str,
    operation: Operation,
    not_found: type[FileDoesNotExist | DirectoryDoesNotExist] | None = FileDoesNotExist,
) -> Iterator[None]:
    """Map Azure SDK errors raised inside the block onto filesystem errors.

    Args:
        location: Unprefixed path the operation works on
        operation: Operation being performed
        not_found: Exception raised for a 404. ``None`` treats a 404 like any
            other failure.
    """
    try:
        yield
    except AzureError as e:
        if not_found is not None and is_not_found(e):
            raise not_found(location, operation) from e
        reason = getattr(e, "message", None) or str(e)
        raise FilesystemOperationFailed.for_location(location, operation, reason) from e
