"""The filesystem base classes."""

from __future__ import annotations

from typing import Any

from fsspec.spec import AbstractFileSystem
from upath import UPath


class BaseFileSystem[TPath: UPath, TInfoDict = dict[str, Any]](AbstractFileSystem):
    """Sync fsspec filesystem with UPath integration."""

    upath_cls: type[TPath]

    def get_upath(self, path: str | None = None, **storage_options: Any) -> TPath:
        """Get a UPath object for the given path.

        Args:
            path: The path to the file or directory. If None, the root path is returned.
            **storage_options: Options stored on the path object
        """
        protocol = self.protocol if isinstance(self.protocol, str) else self.protocol[0]
        path_obj = self.upath_cls(
            path if path is not None else self.root_marker,
            protocol=protocol,
            **storage_options,
        )
        path_obj._fs_cached = self  # pyright: ignore[reportAttributeAccessIssue]
        return path_obj
