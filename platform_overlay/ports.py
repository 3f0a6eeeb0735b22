"""
Filesystem Host Ports

파일시스템 호스트 포트 인터페이스.
기본 호스트(Local, Memory 등)와 플랫폼 오버레이가 모두 구현하는 공통 기능 집합.

Note:
- 경로 인자는 str 또는 os.PathLike
- 선택 기능(stat, watch) 지원 여부는 capabilities로 확인
"""

from __future__ import annotations

import os
from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

from platform_overlay.models import FileStats, HostCapabilities, WatchOptions

if TYPE_CHECKING:
    from platform_overlay.hosts.stream import WatchStream

PathLike = Union[str, "os.PathLike[str]"]


@runtime_checkable
class FileSystemHostPort(Protocol):
    """
    Synchronous filesystem host.

    Every operation completes (or raises) before returning.
    """

    @property
    @abstractmethod
    def capabilities(self) -> HostCapabilities:
        """Capabilities this host supports."""
        ...

    @abstractmethod
    def read(self, path: PathLike) -> bytes:
        """Read file content."""
        ...

    @abstractmethod
    def write(self, path: PathLike, content: bytes) -> None:
        """Write file content, replacing any existing content."""
        ...

    @abstractmethod
    def delete(self, path: PathLike) -> None:
        """Delete a file or directory."""
        ...

    @abstractmethod
    def rename(self, src: PathLike, dst: PathLike) -> None:
        """Move `src` to `dst`."""
        ...

    @abstractmethod
    def list(self, path: PathLike) -> list[str]:
        """
        List directory entries.

        Returns:
            Entry names (not full paths)
        """
        ...

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        ...

    @abstractmethod
    def is_directory(self, path: PathLike) -> bool:
        ...

    @abstractmethod
    def is_file(self, path: PathLike) -> bool:
        ...

    @abstractmethod
    def stat(self, path: PathLike) -> FileStats:
        """File metadata (optional capability)."""
        ...

    @abstractmethod
    def watch(self, path: PathLike, options: WatchOptions | None = None) -> WatchStream:
        """Stream of change events below `path` (optional capability)."""
        ...


@runtime_checkable
class AsyncFileSystemHostPort(Protocol):
    """
    Asynchronous filesystem host.

    Same operations as FileSystemHostPort, as coroutines.
    """

    @property
    @abstractmethod
    def capabilities(self) -> HostCapabilities:
        ...

    @abstractmethod
    async def read(self, path: PathLike) -> bytes:
        ...

    @abstractmethod
    async def write(self, path: PathLike, content: bytes) -> None:
        ...

    @abstractmethod
    async def delete(self, path: PathLike) -> None:
        ...

    @abstractmethod
    async def rename(self, src: PathLike, dst: PathLike) -> None:
        ...

    @abstractmethod
    async def list(self, path: PathLike) -> list[str]:
        ...

    @abstractmethod
    async def exists(self, path: PathLike) -> bool:
        ...

    @abstractmethod
    async def is_directory(self, path: PathLike) -> bool:
        ...

    @abstractmethod
    async def is_file(self, path: PathLike) -> bool:
        ...

    @abstractmethod
    async def stat(self, path: PathLike) -> FileStats:
        ...

    @abstractmethod
    async def watch(self, path: PathLike, options: WatchOptions | None = None) -> WatchStream:
        ...
