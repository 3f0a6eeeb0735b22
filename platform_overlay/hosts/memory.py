"""
In-memory filesystem host.

Dict-backed store keyed by normalized posix paths. Directories are implied by
the files below them. Raises the same OSError subclasses the OS would, so
callers cannot tell it apart from a disk host.
"""

from __future__ import annotations

import errno
import os
import posixpath
import stat as stat_module
import threading
import time
from collections.abc import Mapping

from platform_overlay.common.observability import get_logger
from platform_overlay.hosts.stream import WatchStream
from platform_overlay.models import (
    FileStats,
    HostCapabilities,
    WatchEvent,
    WatchEventType,
    WatchOptions,
)
from platform_overlay.ports import PathLike

logger = get_logger(__name__)

_ROOT = "."


def normalize_key(path: PathLike) -> str:
    """`./app//main.ts` -> `app/main.ts`; empty path -> `.`"""
    raw = os.fspath(path).replace("\\", "/")
    return posixpath.normpath(raw) if raw else _ROOT


def _not_found(key: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)


class MemoryFileSystemHost:
    """
    In-memory filesystem host.

    Usage:
        host = MemoryFileSystemHost({"app/main.ts": b"...", "app/main.ios.ts": b"..."})
        host.read("app/main.ts")
    """

    def __init__(self, files: Mapping[str, bytes] | None = None):
        self._files: dict[str, bytes] = {}
        self._mtimes: dict[str, float] = {}
        self._streams: set[WatchStream] = set()
        self._lock = threading.RLock()

        for path, content in (files or {}).items():
            key = normalize_key(path)
            self._files[key] = bytes(content)
            self._mtimes[key] = time.time()

    @property
    def capabilities(self) -> HostCapabilities:
        return HostCapabilities(synchronous=True, stat=True, watch=True)

    @property
    def files(self) -> dict[str, bytes]:
        """Snapshot of stored files."""
        with self._lock:
            return dict(self._files)

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------

    def exists(self, path: PathLike) -> bool:
        key = normalize_key(path)
        with self._lock:
            return key in self._files or self._is_dir_key(key)

    def is_file(self, path: PathLike) -> bool:
        with self._lock:
            return normalize_key(path) in self._files

    def is_directory(self, path: PathLike) -> bool:
        with self._lock:
            return self._is_dir_key(normalize_key(path))

    def read(self, path: PathLike) -> bytes:
        key = normalize_key(path)
        with self._lock:
            if key in self._files:
                return self._files[key]
            if self._is_dir_key(key):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), key)
            raise _not_found(key)

    def list(self, path: PathLike) -> list[str]:
        key = normalize_key(path)
        with self._lock:
            if key in self._files:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), key)
            if not self._is_dir_key(key):
                raise _not_found(key)

            names = set()
            for file_key in self._children(key):
                relative = file_key if key == _ROOT else file_key[len(key) + 1 :]
                names.add(relative.split("/", 1)[0])
            return sorted(names)

    def stat(self, path: PathLike) -> FileStats:
        key = normalize_key(path)
        with self._lock:
            if key in self._files:
                return FileStats(
                    path=key,
                    size=len(self._files[key]),
                    mtime=self._mtimes[key],
                    mode=stat_module.S_IFREG | 0o644,
                    is_file=True,
                    is_directory=False,
                )
            if self._is_dir_key(key):
                mtimes = [self._mtimes[k] for k in self._children(key)]
                return FileStats(
                    path=key,
                    size=0,
                    mtime=max(mtimes, default=0.0),
                    mode=stat_module.S_IFDIR | 0o755,
                    is_file=False,
                    is_directory=True,
                )
            raise _not_found(key)

    # ------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------

    def write(self, path: PathLike, content: bytes) -> None:
        key = normalize_key(path)
        with self._lock:
            if self._is_dir_key(key):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), key)
            self._check_parents(key)

            existed = key in self._files
            self._files[key] = bytes(content)
            self._mtimes[key] = time.time()

        event_type = WatchEventType.MODIFIED if existed else WatchEventType.CREATED
        self._emit(WatchEvent(event_type, key))

    def delete(self, path: PathLike) -> None:
        key = normalize_key(path)
        with self._lock:
            if key in self._files:
                removed = [key]
            elif self._is_dir_key(key):
                removed = list(self._children(key))
            else:
                raise _not_found(key)

            for removed_key in removed:
                del self._files[removed_key]
                del self._mtimes[removed_key]

        for removed_key in removed:
            self._emit(WatchEvent(WatchEventType.DELETED, removed_key))

    def rename(self, src: PathLike, dst: PathLike) -> None:
        src_key = normalize_key(src)
        dst_key = normalize_key(dst)
        with self._lock:
            if src_key in self._files:
                if self._is_dir_key(dst_key):
                    raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), dst_key)
                moves = [(src_key, dst_key)]
            elif self._is_dir_key(src_key):
                if dst_key == src_key:
                    return
                if dst_key in self._files:
                    raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), dst_key)
                if dst_key.startswith(src_key + "/") or src_key == _ROOT:
                    raise OSError(errno.EINVAL, os.strerror(errno.EINVAL), dst_key)
                if self._is_dir_key(dst_key):
                    raise OSError(errno.ENOTEMPTY, os.strerror(errno.ENOTEMPTY), dst_key)
                moves = [(k, dst_key + k[len(src_key) :]) for k in self._children(src_key)]
            else:
                raise _not_found(src_key)

            self._check_parents(dst_key)
            # Pop everything first so no target overwrites a pending source
            moved = [(new, self._files.pop(old), self._mtimes.pop(old)) for old, new in moves]
            for new, content, mtime in moved:
                self._files[new] = content
                self._mtimes[new] = mtime

        for old, new in moves:
            self._emit(WatchEvent(WatchEventType.MOVED, old, new))

    # ------------------------------------------------------------
    # Watching
    # ------------------------------------------------------------

    def watch(self, path: PathLike, options: WatchOptions | None = None) -> WatchStream:
        key = normalize_key(path)
        stream = WatchStream(key, options, on_close=lambda: self._discard_stream(stream))

        with self._lock:
            self._streams.add(stream)

        logger.debug("memory_watch_started", path=key)
        return stream

    def _discard_stream(self, stream: WatchStream) -> None:
        with self._lock:
            self._streams.discard(stream)

    def _emit(self, event: WatchEvent) -> None:
        with self._lock:
            streams = [s for s in self._streams]
        for stream in streams:
            stream.push(event)

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _children(self, key: str):
        if key == _ROOT:
            return [k for k in self._files]
        prefix = key + "/"
        return [k for k in self._files if k.startswith(prefix)]

    def _is_dir_key(self, key: str) -> bool:
        if key == _ROOT:
            return True
        prefix = key + "/"
        return any(k.startswith(prefix) for k in self._files)

    def _check_parents(self, key: str) -> None:
        parent = posixpath.dirname(key)
        while parent and parent not in (_ROOT, "/"):
            if parent in self._files:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), parent)
            parent = posixpath.dirname(parent)

    def __repr__(self):
        return f"MemoryFileSystemHost({len(self._files)} files)"
