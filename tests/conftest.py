"""Shared fixtures: an in-memory stand-in for the Azure file share SDK clients."""

from __future__ import annotations

from datetime import UTC, datetime
import itertools
from types import SimpleNamespace
from typing import Any
from urllib.parse import unquote

from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from azure.storage.fileshare import ContentSettings
import pytest

from azfilefs import AzureFileFileSystem, register_all_filesystems


# Path flavours are cached per protocol on first use
register_all_filesystems()


SHARE_URL = "https://acct.file.core.windows.net/share"

PREFIXES = {
    "no-prefix": "",
    "single-prefix": "test-prefix",
    "double-prefix": "test-prefix-level1/test-prefix-level2",
}


def _parent(path: str) -> str:
    return path.rsplit("/", 1)[0] if "/" in path else ""


def _set_copy_status(copy: SimpleNamespace, status: str) -> None:
    if status == "replaced":
        # Another copy onto the same destination took over
        copy.id, status = "copy-2", "pending"
    copy.status = status
    failed = status not in {"pending", "success"}
    copy.status_description = "The copy source was modified." if failed else None


class FakeShareClient:
    """Minimal in-memory ShareClient.

    Directories are explicit nodes, files need an existing parent directory and
    missing resources raise ``ResourceNotFoundError`` like the real service.
    Every call is recorded in ``calls`` as ``(operation, path)``; errors can be
    injected per call through ``fail_on``. ``copy_states`` scripts the status of
    the next copy: the first state is returned when the copy starts, the rest
    are reported by successive property fetches of the destination. The state
    ``"replaced"`` reports a pending copy with a different copy id.
    """

    def __init__(self, url: str = SHARE_URL) -> None:
        self.url = url
        self.share_name = url.rsplit("/", 1)[-1]
        self._etags = itertools.count(1)
        self.directories: dict[str, SimpleNamespace] = {"": self._directory_properties("")}
        self.files: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_on: dict[tuple[str, str], Exception] = {}
        self.copy_states: list[str] = ["success"]
        self.downloads: list[tuple[str, int | None, int | None]] = []

    def _etag(self) -> str:
        return f'"0x8DC{next(self._etags):08X}"'

    def _directory_properties(self, path: str) -> SimpleNamespace:
        return SimpleNamespace(
            name=path.rsplit("/", 1)[-1],
            last_modified=datetime.now(UTC),
            etag=self._etag(),
            metadata={},
            is_directory=True,
        )

    def check(self, operation: str, path: str) -> None:
        self.calls.append((operation, path))
        if error := self.fail_on.get((operation, path)):
            raise error

    def children(self, path: str) -> list[str]:
        entries = [*self.directories, *self.files]
        return [p for p in entries if p and _parent(p) == path]

    def get_directory_client(self, directory_path: str = "") -> FakeDirectoryClient:
        return FakeDirectoryClient(self, directory_path.strip("/"))

    def get_file_client(self, file_path: str) -> FakeFileClient:
        return FakeFileClient(self, file_path.strip("/"))


class FakeDirectoryClient:
    def __init__(self, share: FakeShareClient, path: str) -> None:
        self.share = share
        self.path = path

    def get_directory_properties(self) -> SimpleNamespace:
        self.share.check("get_directory_properties", self.path)
        if self.path not in self.share.directories:
            raise ResourceNotFoundError(message="The specified resource does not exist.")
        return self.share.directories[self.path]

    def create_directory(self) -> None:
        self.share.check("create_directory", self.path)
        if self.path in self.share.directories:
            raise ResourceExistsError(message="The specified resource already exists.")
        if _parent(self.path) not in self.share.directories:
            raise ResourceNotFoundError(message="The specified parent path does not exist.")
        self.share.directories[self.path] = self.share._directory_properties(self.path)

    def delete_directory(self) -> None:
        self.share.check("delete_directory", self.path)
        if self.path not in self.share.directories:
            raise ResourceNotFoundError(message="The specified resource does not exist.")
        if self.share.children(self.path):
            raise ResourceExistsError(message="The specified directory is not empty.")
        del self.share.directories[self.path]

    def list_directories_and_files(self):
        # Lazy like the SDK's ItemPaged: errors surface on iteration
        self.share.check("list_directories_and_files", self.path)
        if self.path not in self.share.directories:
            raise ResourceNotFoundError(message="The specified resource does not exist.")
        for child in sorted(self.share.children(self.path)):
            name = child.rsplit("/", 1)[-1]
            if child in self.share.directories:
                yield SimpleNamespace(name=name, is_directory=True)
            else:
                size = len(self.share.files[child]["content"])
                yield SimpleNamespace(name=name, is_directory=False, size=size)


class FakeDownloader:
    def __init__(self, content: bytes) -> None:
        self.content = content

    def readall(self) -> bytes:
        return self.content

    def readinto(self, stream) -> int:
        return stream.write(self.content)


class FakeFileClient:
    def __init__(self, share: FakeShareClient, path: str) -> None:
        self.share = share
        self.path = path

    def _get(self) -> dict[str, Any]:
        if self.path not in self.share.files:
            raise ResourceNotFoundError(message="The specified resource does not exist.")
        return self.share.files[self.path]

    def _store(self, content: bytes, settings: ContentSettings, metadata: dict, copy) -> None:
        if _parent(self.path) not in self.share.directories:
            raise ResourceNotFoundError(message="The specified parent path does not exist.")
        self.share.files[self.path] = {
            "content": content,
            "content_settings": settings,
            "metadata": metadata,
            "last_modified": datetime.now(UTC),
            "etag": self.share._etag(),
            "copy": copy,
        }

    def get_file_properties(self) -> SimpleNamespace:
        self.share.check("get_file_properties", self.path)
        stored = self._get()
        if stored.get("pending_states"):
            _set_copy_status(stored["copy"], stored["pending_states"].pop(0))
        return SimpleNamespace(
            name=self.path.rsplit("/", 1)[-1],
            size=len(stored["content"]),
            last_modified=stored["last_modified"],
            etag=stored["etag"],
            content_settings=stored["content_settings"],
            copy=stored["copy"],
            metadata=stored["metadata"],
            content_range=None,
        )

    def upload_file(
        self,
        data: bytes | Any,
        content_settings: ContentSettings | None = None,
        metadata: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        self.share.check("upload_file", self.path)
        content = data if isinstance(data, bytes) else data.read()
        settings = content_settings or ContentSettings(content_type="application/octet-stream")
        copy = SimpleNamespace(
            id=None,
            source=None,
            status=None,
            progress=None,
            completion_time=None,
            status_description=None,
        )
        self._store(content, settings, metadata or {}, copy)
        return {"etag": self.share.files[self.path]["etag"]}

    def download_file(self, offset: int | None = None, length: int | None = None):
        self.share.check("download_file", self.path)
        self.share.downloads.append((self.path, offset, length))
        content = self._get()["content"]
        if offset is not None:
            content = content[offset : None if length is None else offset + length]
        return FakeDownloader(content)

    def start_copy_from_url(self, source_url: str, **kwargs: Any) -> dict[str, Any]:
        self.share.check("start_copy_from_url", self.path)
        head = f"{self.share.url}/"
        if not source_url.startswith(head):
            raise ResourceNotFoundError(message="The specified copy source does not exist.")
        source_path = "/".join(unquote(part) for part in source_url[len(head) :].split("/"))
        source = self.share.files.get(source_path)
        if source is None:
            raise ResourceNotFoundError(message="The specified copy source does not exist.")
        first, *pending = self.share.copy_states
        copy = SimpleNamespace(
            id="copy-1",
            source=source_url,
            status=None,
            progress=f"{len(source['content'])}/{len(source['content'])}",
            completion_time=datetime.now(UTC),
            status_description=None,
        )
        _set_copy_status(copy, first)
        self._store(source["content"], source["content_settings"], dict(source["metadata"]), copy)
        self.share.files[self.path]["pending_states"] = pending
        return {"copy_id": copy.id, "copy_status": copy.status}

    def delete_file(self) -> None:
        self.share.check("delete_file", self.path)
        self._get()
        del self.share.files[self.path]


@pytest.fixture
def share() -> FakeShareClient:
    """Empty in-memory share."""
    return FakeShareClient()


@pytest.fixture
def azure_fs(share: FakeShareClient) -> AzureFileFileSystem:
    """Filesystem on the share root."""
    return AzureFileFileSystem(share_client=share)


@pytest.fixture(params=list(PREFIXES.values()), ids=list(PREFIXES))
def prefixed_fs(request, share: FakeShareClient) -> AzureFileFileSystem:
    """Filesystem without prefix, with a one-level and with a two-level prefix."""
    return AzureFileFileSystem(share_client=share, prefix=request.param)
