"""Configuration models for filesystem implementations."""

from __future__ import annotations

from azfilefs.configs.azure_file_config import AzureFileFilesystemConfig
from azfilefs.configs.base import FileSystemConfig, PathConfig

__all__ = [
    "AzureFileFilesystemConfig",
    "FileSystemConfig",
    "PathConfig",
]
