"""Azure file share filesystem.

Exposes an Azure Storage file share through the fsspec interface. The share
models directories as real nodes, so directory chains are created explicitly
before writing and removed bottom-up when deleting. An optional path prefix
scopes the filesystem to a subtree of the share.
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path
import time
from typing import TYPE_CHECKING, Any, Literal, overload
from urllib.parse import quote

from azure.core.exceptions import AzureError, ResourceExistsError
from azure.storage.fileshare import ShareClient
from fsspec.callbacks import DEFAULT_CALLBACK
from fsspec.utils import infer_storage_options, stringify_path

from azfilefs.exceptions import (
    DirectoryDoesNotExist,
    FileDoesNotExist,
    FilesystemOperationFailed,
    Operation,
    UnableToCopyFile,
    translate_errors,
)
from azfilefs.filesystems.base import (
    DEFAULT_SPOOL_SIZE,
    BaseFileSystem,
    BaseUPath,
    BufferedWriter,
    spooled_buffer,
)
from azfilefs.filesystems.metadata import (
    AzureDirectoryInfo,
    AzureFileInfo,
    normalize_directory_properties,
    normalize_file_properties,
    upload_options,
)
from azfilefs.prefixer import PathPrefixer


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import datetime
    import io
    import tempfile

    from azure.core.credentials import TokenCredential
    from azure.storage.fileshare import ShareDirectoryClient, ShareFileClient
    from fsspec.callbacks import Callback

    from azfilefs.filesystems.metadata import Visibility


logger = logging.getLogger(__name__)

type AzureInfo = AzureFileInfo | AzureDirectoryInfo


def _partial_paths(segments: list[str]) -> Iterator[str]:
    """Yield a, a/b, a/b/c for segments [a, b, c]."""
    for i in range(1, len(segments) + 1):
        yield "/".join(segments[:i])


def _join(path: str, name: str) -> str:
    return f"{path}/{name}" if path else name


COPY_POLL_INTERVAL = 0.5
"""Seconds between status checks of a pending server-side copy."""


class AzureFilePath(BaseUPath[AzureFileInfo]):
    """UPath implementation for Azure file shares.

    The share is the host of the URL (``azfile://<share>/<path>``). The
    filesystem works on share-relative paths, so the share travels in the
    ``share_name`` storage option and is put back when rendering the URL.
    """

    __slots__ = ()

    def __str__(self) -> str:
        share = self.storage_options.get("share_name")
        if not share or self._relative_base is not None:
            return super().__str__()
        return f"{self.protocol}://{share}/{self.path}"


class AzureFileFileSystem(BaseFileSystem[AzureFilePath, AzureFileInfo]):
    """Filesystem for an Azure Storage file share.

    Paths are relative to the share root, or to ``prefix`` when one is given.
    All operations are blocking calls against the share; nothing is cached.

    Examples:
        >>> fs = AzureFileFileSystem(
        ...     share_name="reports",
        ...     connection_string="DefaultEndpointsProtocol=https;AccountName=...",
        ...     prefix="tenants/acme",
        ... )
        >>> fs.pipe_file("2024/q1.csv", b"a,b\\n1,2\\n", content_type="text/csv")
        >>> fs.cat_file("2024/q1.csv")
        >>> fs.list_contents("", recursive=True)
    """

    protocol = "azfile"
    upath_cls = AzureFilePath
    root_marker = ""
    cachable = False

    def __init__(
        self,
        share_name: str | None = None,
        connection_string: str | None = None,
        account_url: str | None = None,
        credential: str | dict[str, str] | TokenCredential | None = None,
        prefix: str = "",
        disable_recursive_delete: bool = False,
        share_client: ShareClient | None = None,
        spool_max_size: int = DEFAULT_SPOOL_SIZE,
        **kwargs: Any,
    ) -> None:
        """Initialize the filesystem.

        Args:
            share_name: Name of the file share
            connection_string: Storage account connection string
            account_url: File service endpoint, used when no connection string is given
            credential: Credential for ``account_url`` (account key, SAS token, ...)
            prefix: Path prefix scoping every operation to a subtree of the share
            disable_recursive_delete: Only delete empty directories; callers must
                remove the contents themselves
            share_client: Preconfigured share client. Takes precedence over the
                connection arguments.
            spool_max_size: Bytes of a download or upload kept in memory before
                the local buffer moves to disk
            **kwargs: Additional filesystem options

        Raises:
            ValueError: If no share client can be built from the arguments
        """
        super().__init__(**kwargs)
        if share_client is None:
            share_client = self._create_share_client(
                share_name, connection_string, account_url, credential
            )
        self.share_client = share_client
        self.prefixer = PathPrefixer(prefix)
        self.disable_recursive_delete = disable_recursive_delete
        self.spool_max_size = spool_max_size
        self.copy_poll_interval = COPY_POLL_INTERVAL

    @staticmethod
    def _create_share_client(
        share_name: str | None,
        connection_string: str | None,
        account_url: str | None,
        credential: Any,
    ) -> ShareClient:
        if not share_name:
            msg = "share_name must be provided"
            raise ValueError(msg)
        if connection_string:
            return ShareClient.from_connection_string(connection_string, share_name=share_name)
        if account_url:
            return ShareClient(account_url, share_name=share_name, credential=credential)
        msg = "Either connection_string or account_url must be provided"
        raise ValueError(msg)

    @property
    def fsid(self) -> str:
        """Filesystem ID."""
        return f"azfile-{self.share_client.url}/{self.prefixer.prefix}"

    @classmethod
    def _strip_protocol(cls, path):
        """Strip the protocol and share name, returning a share-relative path."""
        if isinstance(path, list):
            return [cls._strip_protocol(p) for p in path]
        path = stringify_path(path)
        if path.startswith(f"{cls.protocol}://"):
            path = infer_storage_options(path).get("path", "")
        path = path.strip("/")
        return "" if path == "." else path

    @staticmethod
    def _get_kwargs_from_urls(path: str) -> dict[str, Any]:
        so = infer_storage_options(path)
        return {"share_name": so["host"]} if so.get("host") else {}

    def get_upath(self, path: str | None = None, **storage_options: Any) -> AzureFilePath:
        """Path object on this filesystem, rendered with the share as URL host."""
        storage_options.setdefault("share_name", self.share_client.share_name)
        return super().get_upath(path, **storage_options)

    def _file_client(self, path: str) -> ShareFileClient:
        if not path:
            msg = "The root of the filesystem is a directory"
            raise IsADirectoryError(msg)
        return self.share_client.get_file_client(self.prefixer.prefix_path(path))

    def _directory_client(self, path: str) -> ShareDirectoryClient:
        return self.share_client.get_directory_client(self.prefixer.prefix_path(path))

    def get_url(self, path: str) -> str:
        """Absolute URL of a file, as needed for server-side copies.

        Each path segment is percent-encoded on its own so the separators survive.
        """
        remote_path = self.prefixer.prefix_path(self._strip_protocol(path))
        encoded = "/".join(quote(segment, safe="") for segment in remote_path.split("/"))
        return f"{self.share_client.url.rstrip('/')}/{encoded}"

    # Metadata

    def file_info(
        self, path: str, operation: Operation = Operation.RETRIEVE_METADATA
    ) -> AzureFileInfo:
        """Fetch and normalize the properties of a file.

        Args:
            path: Path to the file
            operation: Operation reported when fetching the properties fails

        Raises:
            FileDoesNotExist: If there is no file at the path
            FilesystemOperationFailed: If the properties could not be fetched
        """
        path = self._strip_protocol(path)
        if not path:
            raise FileDoesNotExist(path, operation)
        logger.debug("Getting file properties: %s", path)
        with translate_errors(path, operation):
            properties = self._file_client(path).get_file_properties()
        return normalize_file_properties(path, properties)

    def directory_info(self, path: str) -> AzureDirectoryInfo:
        """Fetch and normalize the properties of a directory.

        Raises:
            DirectoryDoesNotExist: If there is no directory at the path
            FilesystemOperationFailed: If the properties could not be fetched
        """
        path = self._strip_protocol(path)
        logger.debug("Getting directory properties: %s", path)
        with translate_errors(path, Operation.DIRECTORY_EXISTS, not_found=DirectoryDoesNotExist):
            properties = self._directory_client(path).get_directory_properties()
        return normalize_directory_properties(path, properties)

    def info(self, path: str, **kwargs: Any) -> AzureInfo:
        """Get info about a file or directory."""
        path = self._strip_protocol(path)
        with contextlib.suppress(FileDoesNotExist):
            return self.file_info(path)
        try:
            return self.directory_info(path)
        except DirectoryDoesNotExist:
            msg = f"Path not found: {path}"
            raise FileNotFoundError(msg) from None

    def isfile(self, path: str) -> bool:
        """Check if a file exists at the path."""
        try:
            self.file_info(path, Operation.FILE_EXISTS)
        except FileDoesNotExist:
            return False
        else:
            return True

    def isdir(self, path: str) -> bool:
        """Check if a directory exists at the path."""
        try:
            self.directory_info(path)
        except DirectoryDoesNotExist:
            return False
        else:
            return True

    def exists(self, path: str, **kwargs: Any) -> bool:
        """Check if a file or directory exists at the path."""
        return self.isfile(path) or self.isdir(path)

    def modified(self, path: str) -> datetime:
        """Last modification time of a file or directory."""
        return self.info(path)["last_modified"]

    def mime_type(self, path: str) -> str | None:
        """Content type stored with a file."""
        return self.file_info(path)["content_type"]

    def visibility(self, path: str) -> Visibility:
        """Visibility of a file. Always private, but the file must exist."""
        return self.file_info(path)["visibility"]

    def set_visibility(self, path: str, visibility: Visibility) -> None:
        """Accept and ignore a visibility change; file shares have no per-file ACL."""
        logger.debug("Ignoring visibility %r for %s", visibility, path)

    def ukey(self, path: str) -> str | None:
        """Unique identifier of the current file version (its ETag)."""
        return self.info(path)["etag"]

    # Listing

    def _list_children(self, path: str) -> list[tuple[str, bool]]:
        """List immediate children as (path, is_directory), directories first."""
        remote_path = self.prefixer.prefix_path(path)
        logger.debug("Listing directory: %s", remote_path)
        with translate_errors(path, Operation.LIST_CONTENTS, not_found=DirectoryDoesNotExist):
            items = list(
                self.share_client.get_directory_client(remote_path).list_directories_and_files()
            )
        entries = [
            (self.prefixer.strip_prefix(_join(remote_path, item.name)), item.is_directory)
            for item in items
        ]
        return [e for e in entries if e[1]] + [e for e in entries if not e[1]]

    def _walk_entries(self, path: str, recursive: bool) -> list[tuple[str, bool]]:
        """Collect entries below path, root-first.

        A directory's own entry precedes its descendants; reversing the result
        gives a depth-first order where children come before their parent.
        Subdirectories deleted while walking are skipped with their entry.

        Raises:
            DirectoryDoesNotExist: If path itself is not a directory
        """
        entries: list[tuple[str, bool]] = []
        for child, is_dir in self._list_children(path):
            if not (is_dir and recursive):
                entries.append((child, is_dir))
                continue
            try:
                descendants = self._walk_entries(child, recursive=True)
            except DirectoryDoesNotExist:
                logger.debug("Directory vanished while listing: %s", child)
                continue
            entries.append((child, is_dir))
            entries.extend(descendants)
        return entries

    def _entry_info(self, path: str, is_dir: bool) -> AzureInfo | None:
        try:
            return self.directory_info(path) if is_dir else self.file_info(path)
        except FileNotFoundError:
            # Entry may have been deleted between listing and fetching properties
            logger.debug("Entry vanished while listing: %s", path)
            return None

    def list_contents(self, path: str = "", recursive: bool = False) -> list[AzureInfo]:
        """List the files and directories below a path, root-first.

        Listing the root of a prefixed filesystem whose prefix does not exist
        yet returns an empty list.

        Args:
            path: Directory to list
            recursive: Whether to include all descendants

        Raises:
            DirectoryDoesNotExist: If a non-root path is not a directory
        """
        path = self._strip_protocol(path)
        try:
            entries = self._walk_entries(path, recursive)
        except DirectoryDoesNotExist:
            if path:
                raise
            return []
        infos = (self._entry_info(entry, is_dir) for entry, is_dir in entries)
        return [info for info in infos if info is not None]

    @overload
    def ls(self, path: str, detail: Literal[True] = ..., **kwargs: Any) -> list[AzureInfo]: ...

    @overload
    def ls(self, path: str, detail: Literal[False], **kwargs: Any) -> list[str]: ...

    def ls(self, path: str, detail: bool = True, **kwargs: Any) -> list[AzureInfo] | list[str]:
        """List the immediate contents of a directory.

        Args:
            path: Path to list
            detail: Whether to fetch the properties of every entry
            **kwargs: Additional arguments

        Raises:
            FileNotFoundError: If the path doesn't exist
        """
        path = self._strip_protocol(path)
        try:
            entries = self._list_children(path)
        except DirectoryDoesNotExist:
            if not path:
                return []
            info = self.file_info(path)
            return [info] if detail else [info["name"]]
        if not detail:
            return [entry for entry, _ in entries]
        infos = (self._entry_info(entry, is_dir) for entry, is_dir in entries)
        return [info for info in infos if info is not None]

    def invalidate_cache(self, path: str | None = None) -> None:
        """Clear the cache."""
        # Listings are never cached

    # Directories

    def _remote_directory_exists(self, remote_path: str, location: str) -> bool:
        try:
            with translate_errors(
                location, Operation.DIRECTORY_EXISTS, not_found=DirectoryDoesNotExist
            ):
                self.share_client.get_directory_client(remote_path).get_directory_properties()
        except DirectoryDoesNotExist:
            return False
        else:
            return True

    def _create_remote_directory(self, remote_path: str, location: str) -> None:
        logger.debug("Creating directory: %s", remote_path)
        client = self.share_client.get_directory_client(remote_path)
        with translate_errors(
            location, Operation.CREATE_DIRECTORY, not_found=DirectoryDoesNotExist
        ):
            try:
                client.create_directory()
            except ResourceExistsError:
                # Created concurrently, or created earlier in this chain
                logger.debug("Directory already exists: %s", remote_path)

    def _ensure_directories(self, remote_paths: Iterable[str], location: str) -> None:
        """Create each remote directory that is missing, in the given order."""
        for remote_path in remote_paths:
            if not self._remote_directory_exists(remote_path, location):
                self._create_remote_directory(remote_path, location)

    def create_directory(self, path: str) -> None:
        """Create a directory and all missing parents.

        The prefix directories are created first when the prefixed root does not
        exist yet. Creating an existing directory is a no-op.
        """
        path = self._strip_protocol(path)
        if self.prefixer.prefix and not self._remote_directory_exists(self.prefixer.prefix, ""):
            self._ensure_directories(_partial_paths(self.prefixer.segments()), location="")
        if not path:
            return
        remote_paths = (self.prefixer.prefix_path(p) for p in _partial_paths(path.split("/")))
        self._ensure_directories(remote_paths, location=path)

    def mkdir(self, path: str, create_parents: bool = True, **kwargs: Any) -> None:
        """Create a directory.

        Args:
            path: Directory to create
            create_parents: Whether to create missing parent directories
            **kwargs: Additional arguments

        Raises:
            FileNotFoundError: If the parent is missing and create_parents is False
        """
        path = self._strip_protocol(path)
        if create_parents:
            self.create_directory(path)
            return
        self._create_remote_directory(self.prefixer.prefix_path(path), self._parent(path))

    def makedirs(self, path: str, exist_ok: bool = False) -> None:
        """Create a directory and its parents. Existing directories are tolerated."""
        self.create_directory(path)

    def rmdir(self, path: str) -> bool:
        """Delete a single empty directory.

        Returns:
            True if the directory was deleted, False if it did not exist
        """
        path = self._strip_protocol(path)
        logger.debug("Deleting directory: %s", path)
        try:
            with translate_errors(
                path, Operation.DELETE_DIRECTORY, not_found=DirectoryDoesNotExist
            ):
                self._directory_client(path).delete_directory()
        except DirectoryDoesNotExist:
            logger.debug("Directory already absent: %s", path)
            return False
        return True

    def delete_directory(self, path: str) -> None:
        """Delete a directory together with everything below it.

        Descendants are removed depth-first so no directory is deleted while it
        still has children. With ``disable_recursive_delete`` only the (empty)
        directory itself is deleted. Deleting a missing directory is a no-op.
        A failure part way leaves the already deleted entries deleted.
        """
        path = self._strip_protocol(path)
        if not self.disable_recursive_delete:
            try:
                entries = self._walk_entries(path, recursive=True)
            except DirectoryDoesNotExist:
                logger.debug("Directory already absent: %s", path)
                return
            for entry, is_dir in reversed(entries):
                if is_dir:
                    self.rmdir(entry)
                else:
                    self.rm_file(entry)
        self.rmdir(path)

    # Files

    def read_stream(
        self, path: str, offset: int | None = None, length: int | None = None
    ) -> tempfile.SpooledTemporaryFile[bytes]:
        """Download a file, or a byte range of it, into a local, rewound buffer.

        The buffer stays in memory up to ``spool_max_size`` bytes, then spills to disk.

        Args:
            path: Path to the file
            offset: First byte to download
            length: Number of bytes to download, up to the end of the file when omitted

        Raises:
            FileDoesNotExist: If there is no file at the path
        """
        path = self._strip_protocol(path)
        logger.debug("Downloading file: %s (offset=%s, length=%s)", path, offset, length)
        buffer = spooled_buffer(self.spool_max_size)
        try:
            with translate_errors(path, Operation.READ):
                downloader = self._file_client(path).download_file(offset=offset, length=length)
                downloader.readinto(buffer)
        except BaseException:
            buffer.close()
            raise
        buffer.seek(0)
        return buffer

    def cat_file(
        self, path: str, start: int | None = None, end: int | None = None, **kwargs: Any
    ) -> bytes:
        """Get contents of a file.

        Non-negative ranges are downloaded as a range request. Negative bounds
        count from the end of the file and need the whole file.
        """
        offset: int | None = start or 0
        if offset < 0 or (end is not None and end < 0):
            with self.read_stream(path) as stream:
                return stream.read()[start:end]
        if end is not None and end <= offset:
            self.file_info(path, Operation.READ)
            return b""
        length = None if end is None else end - offset
        if start is None and length is None:
            offset = None
        with self.read_stream(path, offset=offset, length=length) as stream:
            return stream.read()

    def upload(self, path: str, data: bytes | io.IOBase, **options: Any) -> AzureFileInfo:
        """Write a file, creating missing parent directories.

        Args:
            path: Path to write to. Existing files are overwritten.
            data: Content as bytes or a readable binary stream
            **options: Write options (``content_type``, ``mimetype``,
                ``cache_control``, ``content_language``, ``content_encoding``,
                ``content_disposition``, ``metadata``)

        Returns:
            Properties of the written file, fetched after the upload
        """
        path = self._strip_protocol(path)
        self.create_directory(self._parent(path))
        kwargs = upload_options(options)
        logger.debug("Uploading file: %s (%s)", path, sorted(kwargs))
        with translate_errors(path, Operation.WRITE, not_found=None):
            self._file_client(path).upload_file(data, **kwargs)
        return self.file_info(path)

    def pipe_file(
        self, path: str, value: bytes, mode: str = "overwrite", **kwargs: Any
    ) -> AzureFileInfo:
        """Write bytes to a file.

        Args:
            path: Path to the file
            value: Content to write
            mode: "overwrite" or "create" (fail if the file exists)
            **kwargs: Write options, see ``upload``
        """
        if mode == "create" and self.isfile(path):
            raise FileExistsError(path)
        return self.upload(path, value, **kwargs)

    def put_file(
        self,
        lpath: str,
        rpath: str,
        callback: Callback = DEFAULT_CALLBACK,
        mode: str = "overwrite",
        **kwargs: Any,
    ) -> None:
        """Upload a local file by streaming it to the share."""
        local = Path(lpath)
        if local.is_dir():
            self.makedirs(rpath, exist_ok=True)
            return
        if mode == "create" and self.isfile(rpath):
            raise FileExistsError(rpath)
        size = local.stat().st_size
        callback.set_size(size)
        with local.open("rb") as f:
            self.upload(rpath, f, **kwargs)
        callback.relative_update(size)

    def _open(
        self,
        path: str,
        mode: str = "rb",
        block_size: int | None = None,
        autocommit: bool = True,
        cache_options: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> tempfile.SpooledTemporaryFile[bytes] | BufferedWriter:
        """Open a file.

        Reading downloads the whole file into a local buffer first. Writing
        buffers locally and uploads on close.

        Args:
            path: Path to the file
            mode: File mode ('rb' for reading, 'wb' for writing)
            block_size: Unused
            autocommit: Whether to upload on close
            cache_options: Unused
            **kwargs: Write options, see ``upload``

        Raises:
            NotImplementedError: If mode is not supported
        """
        if "r" in mode:
            return self.read_stream(path)
        if "w" in mode:
            return BufferedWriter(
                self,
                self._strip_protocol(path),
                autocommit=autocommit,
                spool_max_size=self.spool_max_size,
                **kwargs,
            )
        msg = f"Mode {mode} not supported"
        raise NotImplementedError(msg)

    def _is_directory_source(self, path: str) -> bool:
        with contextlib.suppress(FilesystemOperationFailed):
            return self.isdir(path)
        return False

    def cp_file(self, path1: str, path2: str, **kwargs: Any) -> None:
        """Copy a file on the server side.

        The destination's parent directory must already exist. A copy the
        service runs asynchronously is polled until it finishes.

        Raises:
            UnableToCopyFile: If the copy could not be started or did not succeed
        """
        path1 = self._strip_protocol(path1)
        path2 = self._strip_protocol(path2)
        source_url = self.get_url(path1)
        logger.debug("Copying file: %s -> %s", path1, path2)
        client = self._file_client(path2)
        try:
            started = client.start_copy_from_url(source_url)
        except AzureError as e:
            if self._is_directory_source(path1):
                # Recursive copies hand directories to cp_file as well
                self.makedirs(path2, exist_ok=True)
                return
            raise UnableToCopyFile(path1, path2, getattr(e, "message", None) or str(e)) from e
        self._wait_for_copy(client, path1, path2, started)

    def _wait_for_copy(
        self, client: ShareFileClient, path1: str, path2: str, started: dict[str, Any]
    ) -> None:
        copy_id, status = started.get("copy_id"), started.get("copy_status")
        description = None
        try:
            while status == "pending":
                logger.debug("Copy pending: %s -> %s", path1, path2)
                time.sleep(self.copy_poll_interval)
                copy = client.get_file_properties().copy
                if copy.id != copy_id:
                    raise UnableToCopyFile(path1, path2, "Copy was replaced by another copy.")
                status, description = copy.status, copy.status_description
        except AzureError as e:
            raise UnableToCopyFile(path1, path2, getattr(e, "message", None) or str(e)) from e
        if status not in (None, "success"):
            reason = f"Copy {status}" + (f": {description}" if description else ".")
            raise UnableToCopyFile(path1, path2, reason)

    def mv(
        self,
        path1: str | list[str],
        path2: str | list[str],
        recursive: bool = False,
        maxdepth: int | None = None,
        **kwargs: Any,
    ) -> None:
        """Move a file by copying it and deleting the source.

        The source is only deleted once the copy succeeded. Moving a path onto
        itself is a no-op. Directories are moved with all their contents.

        Raises:
            UnableToCopyFile: If the copy failed; the source is left in place
        """
        if isinstance(path1, list) or isinstance(path2, list) or recursive:
            super().mv(path1, path2, recursive=recursive, maxdepth=maxdepth, **kwargs)
            return
        path1 = self._strip_protocol(path1)
        path2 = self._strip_protocol(path2)
        if path1 == path2:
            logger.debug("Source and destination are the same: %s", path1)
            return
        if self.isdir(path1):
            super().mv(path1, path2, recursive=True, maxdepth=maxdepth, **kwargs)
            return
        try:
            self.cp_file(path1, path2)
        except UnableToCopyFile as e:
            raise UnableToCopyFile(path1, path2, e.reason, operation=Operation.MOVE) from e
        self.rm_file(path1)

    def rm_file(self, path: str) -> None:
        """Delete a file. Deleting a missing file is a no-op."""
        path = self._strip_protocol(path)
        logger.debug("Deleting file: %s", path)
        try:
            with translate_errors(path, Operation.DELETE):
                self._file_client(path).delete_file()
        except FileDoesNotExist:
            logger.debug("File already absent: %s", path)

    def rm(
        self, path: str | list[str], recursive: bool = False, maxdepth: int | None = None
    ) -> None:
        """Delete files or directories.

        Args:
            path: Path or list of paths to delete
            recursive: Whether to delete directories with their contents
            maxdepth: Unused
        """
        paths = path if isinstance(path, list) else [path]
        for p in paths:
            if not self.isdir(p):
                self.rm_file(p)
            elif recursive:
                self.delete_directory(p)
            else:
                self.rmdir(p)


if __name__ == "__main__":
    from azfilefs.configs import AzureFileFilesystemConfig

    logging.basicConfig(level=logging.DEBUG)

    config = AzureFileFilesystemConfig.from_env()
    fs = AzureFileFileSystem(**config.get_fs_kwargs())
    fs.pipe_file("nested/dir/hello.txt", b"Hello, Azure!", content_type="text/plain")
    print(fs.cat_file("nested/dir/hello.txt"))
    for entry in fs.list_contents("", recursive=True):
        print(entry["type"], entry["name"])
    fs.delete_directory("nested")
