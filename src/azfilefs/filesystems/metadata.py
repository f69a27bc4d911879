"""Conversion between Azure file share properties and fsspec info dicts."""

from __future__ import annotations

import base64
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Literal, Required

from azure.storage.fileshare import ContentSettings

from azfilefs.filesystems.base import FileInfo


if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from azure.storage.fileshare import DirectoryProperties, FileProperties


Visibility = Literal["public", "private"]

# Azure file shares have no per-file ACL we could map, so every path reports this.
VISIBILITY: Final[Visibility] = "private"

# Write option name -> ContentSettings field.
CONTENT_SETTINGS_OPTIONS: Final[Mapping[str, str]] = MappingProxyType({
    "cache_control": "cache_control",
    "content_type": "content_type",
    "content_language": "content_language",
    "content_encoding": "content_encoding",
    "content_disposition": "content_disposition",
})


class AzureFileInfo(FileInfo, total=False):
    """Info dict for files on an Azure file share."""

    size: Required[int]
    mtime: Required[float]
    last_modified: datetime
    content_type: str | None
    visibility: Visibility
    etag: str | None
    extra_metadata: dict[str, Any]


class AzureDirectoryInfo(FileInfo, total=False):
    """Info dict for directories on an Azure file share."""

    mtime: Required[float]
    last_modified: datetime
    visibility: Visibility
    etag: str | None
    extra_metadata: dict[str, Any]


def _etag(value: str | None) -> str | None:
    return value.strip('"') if value else value


def _md5(value: bytes | bytearray | None) -> str | None:
    if not value:
        return None
    return base64.b64encode(bytes(value)).decode()


def normalize_file_properties(path: str, properties: FileProperties) -> AzureFileInfo:
    """Build the info dict for a file.

    Args:
        path: Unprefixed path of the file
        properties: Properties as returned by ``ShareFileClient.get_file_properties``
    """
    settings = properties.content_settings
    copy = properties.copy
    etag = _etag(properties.etag)
    return AzureFileInfo(
        name=path,
        type="file",
        size=properties.size,
        mtime=properties.last_modified.timestamp(),
        last_modified=properties.last_modified,
        content_type=settings.content_type,
        visibility=VISIBILITY,
        etag=etag,
        extra_metadata={
            "etag": etag,
            "content_md5": _md5(settings.content_md5),
            "content_encoding": settings.content_encoding,
            "content_language": settings.content_language,
            "cache_control": settings.cache_control,
            "content_disposition": settings.content_disposition,
            "content_range": properties.content_range,
            "copy_id": copy.id,
            "copy_progress": copy.progress,
            "copy_source": copy.source,
            "copy_status": copy.status,
            "copy_completion_time": copy.completion_time,
            "copy_status_description": copy.status_description,
            "metadata": dict(properties.metadata or {}),
        },
    )


def normalize_directory_properties(
    path: str, properties: DirectoryProperties
) -> AzureDirectoryInfo:
    """Build the info dict for a directory. Directories carry no size.

    Args:
        path: Unprefixed path of the directory
        properties: Properties as returned by
            ``ShareDirectoryClient.get_directory_properties``
    """
    etag = _etag(properties.etag)
    return AzureDirectoryInfo(
        name=path,
        type="directory",
        mtime=properties.last_modified.timestamp(),
        last_modified=properties.last_modified,
        visibility=VISIBILITY,
        etag=etag,
        extra_metadata={
            "etag": etag,
            "last_modified": properties.last_modified,
            "metadata": dict(properties.metadata or {}),
        },
    )


def upload_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Translate write options into ``ShareFileClient.upload_file`` arguments.

    Recognized options are the keys of ``CONTENT_SETTINGS_OPTIONS``,
    ``metadata`` (custom key/value pairs) and ``mimetype``, which overrides
    ``content_type``. Unset and unknown options are ignored.
    """
    settings = {
        field: options[name]
        for name, field in CONTENT_SETTINGS_OPTIONS.items()
        if options.get(name) is not None
    }
    if mimetype := options.get("mimetype"):
        settings["content_type"] = mimetype

    kwargs: dict[str, Any] = {}
    if settings:
        kwargs["content_settings"] = ContentSettings(**settings)
    if (metadata := options.get("metadata")) is not None:
        kwargs["metadata"] = {str(k): str(v) for k, v in metadata.items()}
    return kwargs
