"""Tests for the path objects of the Azure file share filesystem."""

from __future__ import annotations

import pytest
from upath import UPath

from azfilefs import AzureFileFileSystem, AzureFilePath


CONNECTION_STRING = (
    "DefaultEndpointsProtocol=https;AccountName=acct;AccountKey=c2VjcmV0;"
    "EndpointSuffix=core.windows.net"
)


def test_url_keeps_the_share():
    path = UPath("azfile://reports/2024/q1.csv", connection_string=CONNECTION_STRING)

    assert isinstance(path, AzureFilePath)
    assert path.path == "2024/q1.csv"
    assert path.storage_options["share_name"] == "reports"
    assert str(path) == "azfile://reports/2024/q1.csv"
    assert str(path.parent) == "azfile://reports/2024"
    assert str(path.with_name("q2.csv")) == "azfile://reports/2024/q2.csv"


def test_url_round_trip():
    path = UPath("azfile://reports/2024/q1.csv", connection_string=CONNECTION_STRING)

    reparsed = UPath(str(path.parent / "q3.csv"), connection_string=CONNECTION_STRING)

    assert reparsed.path == "2024/q3.csv"
    assert reparsed.storage_options["share_name"] == "reports"
    assert isinstance(reparsed.fs, AzureFileFileSystem)
    assert reparsed.fs.share_client.share_name == "reports"


def test_get_upath(azure_fs: AzureFileFileSystem):
    path = azure_fs.get_upath("docs/readme.md")

    assert isinstance(path, AzureFilePath)
    assert path.fs is azure_fs
    assert path.path == "docs/readme.md"
    assert str(path) == "azfile://share/docs/readme.md"
    assert str(path.parent) == "azfile://share/docs"


async def test_async_read_and_write(azure_fs: AzureFileFileSystem):
    path = azure_fs.get_upath("docs/notes.txt")

    assert await path.awrite_text("hello") == 5  # noqa: PLR2004
    assert await path.aread_text() == "hello"
    assert await path.aread_bytes() == b"hello"
    assert await path.aexists()
    assert await path.ais_file()
    assert not await path.ais_dir()
    assert await path.parent.ais_dir()


async def test_async_stat_and_iterdir(azure_fs: AzureFileFileSystem):
    azure_fs.pipe_file("dir/a.txt", b"abc")
    azure_fs.pipe_file("dir/sub/b.txt", b"b")
    path = azure_fs.get_upath("dir")

    assert (await path.astat())["type"] == "directory"
    assert (await (path / "a.txt").astat())["size"] == 3  # noqa: PLR2004
    assert await path.aiterdir() == ["dir/sub", "dir/a.txt"]


async def test_async_mkdir(azure_fs: AzureFileFileSystem):
    path = azure_fs.get_upath("a/b")

    with pytest.raises(FileNotFoundError):
        await path.amkdir()
    await path.amkdir(parents=True)
    assert azure_fs.isdir("a/b")
    with pytest.raises(FileExistsError):
        await path.amkdir(parents=True)
    await path.amkdir(exist_ok=True)


async def test_async_unlink(azure_fs: AzureFileFileSystem):
    path = azure_fs.get_upath("file.txt")

    with pytest.raises(FileNotFoundError):
        await path.aunlink()
    await path.aunlink(missing_ok=True)
    await path.awrite_bytes(b"x")
    await path.aunlink()
    assert not azure_fs.isfile("file.txt")
