"""UPath base class with awaitable helpers for sync filesystems."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fsspec.asyn import AsyncFileSystem
from fsspec.implementations.asyn_wrapper import AsyncFileSystemWrapper
from fsspec.registry import get_filesystem_class
from upath import UPath


if TYPE_CHECKING:
    from fsspec.spec import AbstractFileSystem


def to_async(filesystem: AbstractFileSystem) -> AsyncFileSystem:
    """Return an awaitable view of a filesystem.

    Sync filesystems are wrapped so each call runs in a worker thread.
    """
    if isinstance(filesystem, AsyncFileSystem):
        return filesystem
    return AsyncFileSystemWrapper(filesystem)


class BaseUPath[TInfoDict = dict[str, Any]](UPath):
    """UPath whose blocking filesystem calls can also be awaited."""

    @classmethod
    def _fs_factory(cls, urlpath: str, protocol: str, storage_options):
        # Options parsed from the URL (the share name) must reach the filesystem
        fs_cls = get_filesystem_class(protocol)
        options = {**fs_cls._get_kwargs_from_urls(urlpath), **storage_options}
        return fs_cls(**options)

    async def afs(self) -> AsyncFileSystem:
        """Awaitable view of this path's filesystem."""
        return to_async(self.fs)

    async def aread_bytes(self) -> bytes:
        fs = await self.afs()
        return await fs._cat_file(self.path)

    async def aread_text(self, encoding: str = "utf-8") -> str:
        return (await self.aread_bytes()).decode(encoding)

    async def awrite_bytes(self, data: bytes) -> int:
        """Upload ``data`` as the file's content, replacing any existing file."""
        fs = await self.afs()
        await fs._pipe_file(self.path, data)
        return len(data)

    async def awrite_text(self, data: str, encoding: str = "utf-8") -> int:
        await self.awrite_bytes(data.encode(encoding))
        return len(data)

    async def aexists(self) -> bool:
        fs = await self.afs()
        return await fs._exists(self.path)

    async def ais_file(self) -> bool:
        fs = await self.afs()
        return await fs._isfile(self.path)

    async def ais_dir(self) -> bool:
        fs = await self.afs()
        return await fs._isdir(self.path)

    async def astat(self) -> TInfoDict:
        """Info dict of the file or directory."""
        fs = await self.afs()
        return await fs._info(self.path)

    async def aiterdir(self) -> list[str]:
        """Paths of the immediate children of this directory."""
        fs = await self.afs()
        return await fs._ls(self.path, detail=False)

    async def amkdir(
        self, mode: int = 0o777, parents: bool = False, exist_ok: bool = False
    ) -> None:
        """Create this directory. ``mode`` is ignored by remote shares.

        Raises:
            FileExistsError: If the directory exists and ``exist_ok`` is False
            FileNotFoundError: If the parent is missing and ``parents`` is False
        """
        fs = await self.afs()
        if not exist_ok and await fs._isdir(self.path):
            raise FileExistsError(self.path)
        await fs._mkdir(self.path, create_parents=parents)

    async def aunlink(self, missing_ok: bool = False) -> None:
        """Delete this file.

        Raises:
            FileNotFoundError: If the file is missing and ``missing_ok`` is False
        """
        fs = await self.afs()
        if not missing_ok and not await fs._isfile(self.path):
            raise FileNotFoundError(self.path)
        await fs._rm_file(self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r}, protocol={self.protocol!r})"
