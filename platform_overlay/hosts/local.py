"""
Local filesystem host - pathlib 기반 디스크 I/O.

watch()는 Watchdog Observer로 변경 이벤트를 WatchStream에 전달합니다.
"""

from __future__ import annotations

import os
import shutil
import stat as stat_module
from pathlib import Path

from watchdog.events import (
    DirCreatedEvent,
    DirDeletedEvent,
    DirModifiedEvent,
    DirMovedEvent,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

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


class _StreamEventHandler(FileSystemEventHandler):
    """
    Watchdog 이벤트 핸들러.

    파일 이벤트를 WatchStream으로 전달합니다 (디렉토리 이벤트는 무시).
    """

    def __init__(self, host: LocalFileSystemHost, stream: WatchStream):
        super().__init__()
        self._host = host
        self._stream = stream

    def _push(self, event_type: WatchEventType, path: str, dest_path: str | None = None):
        display_dest = self._host.display_path(dest_path) if dest_path else None
        self._stream.push(WatchEvent(event_type, self._host.display_path(path), display_dest))

    def on_created(self, event: FileSystemEvent):
        if isinstance(event, DirCreatedEvent):
            return
        self._push(WatchEventType.CREATED, os.fsdecode(event.src_path))

    def on_modified(self, event: FileSystemEvent):
        if isinstance(event, DirModifiedEvent):
            return
        self._push(WatchEventType.MODIFIED, os.fsdecode(event.src_path))

    def on_deleted(self, event: FileSystemEvent):
        if isinstance(event, DirDeletedEvent):
            return
        self._push(WatchEventType.DELETED, os.fsdecode(event.src_path))

    def on_moved(self, event: FileSystemEvent):
        if isinstance(event, DirMovedEvent):
            return
        self._push(WatchEventType.MOVED, os.fsdecode(event.src_path), os.fsdecode(event.dest_path))


class LocalFileSystemHost:
    """
    Disk-backed filesystem host.

    Relative paths are anchored at `root` when one is given, otherwise at the
    process working directory.

    Usage:
        host = LocalFileSystemHost("/path/to/project")
        host.write("app/app.ios.css", b"...")
        host.read("app/app.ios.css")
    """

    def __init__(self, root: PathLike | None = None):
        self.root = Path(root) if root is not None else None

    @property
    def capabilities(self) -> HostCapabilities:
        return HostCapabilities(synchronous=True, stat=True, watch=True)

    def _path(self, path: PathLike) -> Path:
        p = Path(os.fspath(path))
        if self.root is not None and not p.is_absolute():
            return self.root / p
        return p

    def display_path(self, path: str) -> str:
        """Absolute event path -> path as callers address it (root-relative when possible)."""
        if self.root is None:
            return path
        root = os.path.abspath(self.root)
        absolute = os.path.abspath(path)
        if os.path.commonpath([root, absolute]) != root:
            return absolute
        return os.path.relpath(absolute, root)

    def read(self, path: PathLike) -> bytes:
        return self._path(path).read_bytes()

    def write(self, path: PathLike, content: bytes) -> None:
        target = self._path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    def delete(self, path: PathLike) -> None:
        target = self._path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()

    def rename(self, src: PathLike, dst: PathLike) -> None:
        target = self._path(dst)
        target.parent.mkdir(parents=True, exist_ok=True)
        self._path(src).replace(target)

    def exists(self, path: PathLike) -> bool:
        return self._path(path).exists()

    def is_directory(self, path: PathLike) -> bool:
        return self._path(path).is_dir()

    def is_file(self, path: PathLike) -> bool:
        return self._path(path).is_file()

    def stat(self, path: PathLike) -> FileStats:
        st = self._path(path).stat()
        return FileStats(
            path=os.fspath(path),
            size=st.st_size,
            mtime=st.st_mtime,
            mode=st.st_mode,
            is_file=stat_module.S_ISREG(st.st_mode),
            is_directory=stat_module.S_ISDIR(st.st_mode),
        )

    def watch(self, path: PathLike, options: WatchOptions | None = None) -> WatchStream:
        """
        Watch a file or directory.

        A file is watched through its parent directory; the stream only
        accepts events for that file.
        """
        options = options or WatchOptions()
        target = os.path.abspath(self._path(path))
        if not os.path.exists(target):
            raise FileNotFoundError(f"Watch target does not exist: {target}")

        is_dir = os.path.isdir(target)
        watch_dir = target if is_dir else os.path.dirname(target)

        observer = Observer()

        def _stop():
            observer.stop()
            observer.join(timeout=5)
            logger.debug("watch_stopped", path=target)

        stream = WatchStream(self.display_path(target), options, on_close=_stop)
        observer.schedule(
            _StreamEventHandler(self, stream),
            watch_dir,
            recursive=options.recursive and is_dir,
        )
        observer.start()

        logger.debug("watch_started", path=target, recursive=options.recursive)
        return stream

    def list(self, path: PathLike) -> list[str]:
        return sorted(os.listdir(self._path(path)))

    def __repr__(self):
        return f"LocalFileSystemHost({self.root or os.getcwd()})"
