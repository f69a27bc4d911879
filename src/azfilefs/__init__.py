"""azfilefs: Azure file shares as fsspec filesystems."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from azfilefs.exceptions import (
    DirectoryDoesNotExist,
    FileDoesNotExist,
    FilesystemOperationFailed,
    Operation,
    UnableToCopyFile,
)
from azfilefs.filesystems import AzureFileFileSystem, AzureFilePath
from azfilefs.prefixer import PathPrefixer

try:
    __version__ = version("azfilefs")
except PackageNotFoundError:
    __version__ = "0.0.0"


def register_all_filesystems() -> None:
    """Register the filesystems with fsspec and the path classes with UPath."""
    from fsspec import register_implementation as register_fs
    from upath.registry import register_implementation as register_path

    register_fs(AzureFileFileSystem.protocol, AzureFileFileSystem, clobber=True)
    register_path(AzureFileFileSystem.protocol, AzureFilePath, clobber=True)


__all__ = [
    "AzureFileFileSystem",
    "AzureFilePath",
    "DirectoryDoesNotExist",
    "FileDoesNotExist",
    "FilesystemOperationFailed",
    "Operation",
    "PathPrefixer",
    "UnableToCopyFile",
    "__version__",
    "register_all_filesystems",
]
