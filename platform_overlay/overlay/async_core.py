"""AsyncPlatformOverlayFS

비동기 호스트용 플랫폼 오버레이.
각 요청은 해석(프로브)을 먼저 await한 뒤 위임 호출을 수행합니다.
"""

from __future__ import annotations

from collections.abc import Iterable

from platform_overlay.hosts.stream import WatchStream
from platform_overlay.models import FileStats, HostCapabilities, WatchOptions
from platform_overlay.overlay.resolver import PlatformResolver, ProbeErrorPolicy
from platform_overlay.ports import AsyncFileSystemHostPort, PathLike


class AsyncPlatformOverlayFS:
    """
    Platform overlay over an asynchronous filesystem host.

    Example:
        >>> fs = AsyncPlatformOverlayFS(ThreadedAsyncHost(LocalFileSystemHost()), ["ios"])
        >>> content = await fs.read("app/app.css")
    """

    def __init__(
        self,
        host: AsyncFileSystemHostPort,
        qualifiers: Iterable[str],
        *,
        probe_error_policy: ProbeErrorPolicy | str = ProbeErrorPolicy.STOP,
    ):
        self._host = host
        self._resolver = PlatformResolver(qualifiers, probe_error_policy)

    @property
    def host(self) -> AsyncFileSystemHostPort:
        return self._host

    @property
    def qualifiers(self) -> tuple[str, ...]:
        return self._resolver.qualifiers

    @property
    def probe_error_policy(self) -> ProbeErrorPolicy:
        return self._resolver.probe_error_policy

    @property
    def capabilities(self) -> HostCapabilities:
        return self._host.capabilities

    async def resolve(self, path: PathLike) -> str:
        return await self._resolver.aresolve(self._host, path)

    async def read(self, path: PathLike) -> bytes:
        return await self._host.read(await self.resolve(path))

    async def write(self, path: PathLike, content: bytes) -> None:
        return await self._host.write(await self.resolve(path), content)

    async def delete(self, path: PathLike) -> None:
        return await self._host.delete(await self.resolve(path))

    async def rename(self, src: PathLike, dst: PathLike) -> None:
        resolved_src = await self.resolve(src)
        resolved_dst = await self.resolve(dst)
        return await self._host.rename(resolved_src, resolved_dst)

    async def exists(self, path: PathLike) -> bool:
        return await self._host.exists(await self.resolve(path))

    async def is_directory(self, path: PathLike) -> bool:
        return await self._host.is_directory(await self.resolve(path))

    async def is_file(self, path: PathLike) -> bool:
        return await self._host.is_file(await self.resolve(path))

    async def stat(self, path: PathLike) -> FileStats:
        return await self._host.stat(await self.resolve(path))

    async def watch(self, path: PathLike, options: WatchOptions | None = None) -> WatchStream:
        return await self._host.watch(await self.resolve(path), options)

    async def list(self, path: PathLike) -> list[str]:
        return await self._host.list(await self.resolve(path))

    def __repr__(self):
        return f"AsyncPlatformOverlayFS({self._host!r}, qualifiers={list(self.qualifiers)})"
