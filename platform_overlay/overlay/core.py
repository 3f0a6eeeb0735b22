"""PlatformOverlayFS Core

플랫폼 오버레이 파일시스템 (동기)

특징:
- 기본 호스트와 동일한 기능 집합 제공 (drop-in)
- 호출마다 경로를 한 번 해석한 뒤 그대로 위임
- 캐시/백그라운드 작업 없음
- 위임된 호출의 오류는 래핑 없이 전파
"""

from __future__ import annotations

from collections.abc import Iterable

from platform_overlay.hosts.stream import WatchStream
from platform_overlay.models import FileStats, HostCapabilities, WatchOptions
from platform_overlay.overlay.resolver import PlatformResolver, ProbeErrorPolicy
from platform_overlay.ports import FileSystemHostPort, PathLike


class PlatformOverlayFS:
    """
    Platform overlay over a synchronous filesystem host.

    Example:
        >>> fs = PlatformOverlayFS(LocalFileSystemHost("/project/app"), ["tns", "ios"])
        >>> fs.resolve("app.component.ts")
        'app.component.tns.ts'
        >>> fs.read("app.component.ts")  # reads app.component.tns.ts
    """

    def __init__(
        self,
        host: FileSystemHostPort,
        qualifiers: Iterable[str],
        *,
        probe_error_policy: ProbeErrorPolicy | str = ProbeErrorPolicy.STOP,
    ):
        """
        Args:
            host: Underlying store that performs the real I/O
            qualifiers: Platform qualifiers, most specific first
            probe_error_policy: Behavior when an existence probe raises
        """
        self._host = host
        self._resolver = PlatformResolver(qualifiers, probe_error_policy)

    @property
    def host(self) -> FileSystemHostPort:
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

    def resolve(self, path: PathLike) -> str:
        """Resolved path for `path` at call time."""
        return self._resolver.resolve(self._host, path)

    def read(self, path: PathLike) -> bytes:
        return self._host.read(self.resolve(path))

    def write(self, path: PathLike, content: bytes) -> None:
        return self._host.write(self.resolve(path), content)

    def delete(self, path: PathLike) -> None:
        return self._host.delete(self.resolve(path))

    def rename(self, src: PathLike, dst: PathLike) -> None:
        return self._host.rename(self.resolve(src), self.resolve(dst))

    def exists(self, path: PathLike) -> bool:
        return self._host.exists(self.resolve(path))

    def is_directory(self, path: PathLike) -> bool:
        return self._host.is_directory(self.resolve(path))

    def is_file(self, path: PathLike) -> bool:
        return self._host.is_file(self.resolve(path))

    # Some hosts may not support stat.
    def stat(self, path: PathLike) -> FileStats:
        return self._host.stat(self.resolve(path))

    # Some hosts may not support watching.
    def watch(self, path: PathLike, options: WatchOptions | None = None) -> WatchStream:
        return self._host.watch(self.resolve(path), options)

    def list(self, path: PathLike) -> list[str]:
        return self._host.list(self.resolve(path))

    def __repr__(self):
        return f"PlatformOverlayFS({self._host!r}, qualifiers={list(self.qualifiers)})"
