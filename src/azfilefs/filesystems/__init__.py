"""Filesystem implementations for azfilefs."""

from .azure_file_fs import AzureFileFileSystem, AzureFilePath
from .metadata import AzureDirectoryInfo, AzureFileInfo

__all__ = [
    "AzureDirectoryInfo",
    "AzureFileFileSystem",
    "AzureFileInfo",
    "AzureFilePath",
]
