"""Pydantic models describing how to build a filesystem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, get_args, overload

import fsspec
from pydantic import AnyUrl, BaseModel, ConfigDict, SecretStr
from upath import UPath

from azfilefs.filesystems.base import to_async


if TYPE_CHECKING:
    from fsspec import AbstractFileSystem
    from fsspec.asyn import AsyncFileSystem


def _plain(value: Any) -> Any:
    """Unwrap pydantic wrapper types so fsspec receives builtins."""
    if isinstance(value, SecretStr):
        return value.get_secret_value()
    if isinstance(value, AnyUrl):
        return str(value)
    return value


class FileSystemConfig(BaseModel):
    """Settings for one fsspec filesystem, keyed by its protocol in ``type``."""

    model_config = ConfigDict(extra="allow", use_attribute_docstrings=True)

    type: str
    """Protocol the filesystem is registered under"""

    @classmethod
    def get_available_configs(cls) -> dict[str, type[FileSystemConfig]]:
        """Map each protocol to the config subclass declaring it as its literal ``type``."""
        configs: dict[str, type[FileSystemConfig]] = {}
        for subclass in cls.__subclasses__():
            configs |= subclass.get_available_configs()
            if literal := get_args(subclass.model_fields["type"].annotation):
                configs[literal[0]] = subclass
        return configs

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileSystemConfig:
        """Validate raw settings with the config class matching their ``type``.

        Unknown protocols fall back to the generic config, which keeps any
        extra keys as filesystem arguments.

        Raises:
            ValueError: If ``type`` is missing
        """
        if not (fs_type := data.get("type")):
            msg = "type must be specified"
            raise ValueError(msg)
        config_cls = cls.get_available_configs().get(fs_type, cls)
        return config_cls(**data)

    def get_fs_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the filesystem class, with secrets unwrapped."""
        dumped = self.model_dump(exclude={"type"}, exclude_none=True)
        return {key: _plain(value) for key, value in dumped.items()}

    @overload
    def create_fs(self, ensure_async: Literal[False] = ...) -> AbstractFileSystem: ...

    @overload
    def create_fs(self, ensure_async: Literal[True]) -> AsyncFileSystem: ...

    def create_fs(self, ensure_async: bool = False) -> AbstractFileSystem:
        """Instantiate the configured filesystem through the fsspec registry.

        Args:
            ensure_async: Wrap a sync filesystem so its methods can be awaited.
        """
        fs = fsspec.filesystem(self.type, **self.get_fs_kwargs())
        return to_async(fs) if ensure_async else fs

    def create_upath(self, path: str | None = None) -> UPath:
        """Path object on a freshly created filesystem.

        Args:
            path: Path relative to the filesystem root, the root when omitted
        """
        fs = self.create_fs()
        if hasattr(fs, "get_upath"):
            return fs.get_upath(path)
        return UPath(path or fs.root_marker, fs=fs)


class PathConfig(BaseModel):
    """A location: filesystem settings plus a path on that filesystem."""

    model_config = ConfigDict(extra="forbid", use_attribute_docstrings=True)

    filesystem: FileSystemConfig
    """Settings of the filesystem the path lives on"""

    path: str = ""
    """Path relative to the filesystem root"""

    def create_upath(self) -> UPath:
        """Path object for this location."""
        return self.filesystem.create_upath(self.path)
