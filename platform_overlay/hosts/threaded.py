"""
Async adapter for synchronous hosts.

Async interface with sync host calls wrapped via asyncio.to_thread().
"""

from __future__ import annotations

import asyncio
from dataclasses import replace

from platform_overlay.hosts.stream import WatchStream
from platform_overlay.models import FileStats, HostCapabilities, WatchOptions
from platform_overlay.ports import FileSystemHostPort, PathLike


class ThreadedAsyncHost:
    """
    Runs a synchronous host's operations in worker threads.

    Usage:
        host = ThreadedAsyncHost(LocalFileSystemHost("/project"))
        content = await host.read("app/main.ts")
    """

    def __init__(self, host: FileSystemHostPort):
        self._host = host

    @property
    def host(self) -> FileSystemHostPort:
        return self._host

    @property
    def capabilities(self) -> HostCapabilities:
        return replace(self._host.capabilities, synchronous=False)

    async def read(self, path: PathLike) -> bytes:
        return await asyncio.to_thread(self._host.read, path)

    async def write(self, path: PathLike, content: bytes) -> None:
        await asyncio.to_thread(self._host.write, path, content)

    async def delete(self, path: PathLike) -> None:
        await asyncio.to_thread(self._host.delete, path)

    async def rename(self, src: PathLike, dst: PathLike) -> None:
        await asyncio.to_thread(self._host.rename, src, dst)

    async def exists(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self._host.exists, path)

    async def is_directory(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self._host.is_directory, path)

    async def is_file(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self._host.is_file, path)

    async def stat(self, path: PathLike) -> FileStats:
        return await asyncio.to_thread(self._host.stat, path)

    async def watch(self, path: PathLike, options: WatchOptions | None = None) -> WatchStream:
        return await asyncio.to_thread(self._host.watch, path, options)

    async def list(self, path: PathLike) -> list[str]:
        return await asyncio.to_thread(self._host.list, path)

    def __repr__(self):
        return f"ThreadedAsyncHost({self._host!r})"
