"""
Fake Hosts for Testing

Call-recording and probe-failing hosts built on MemoryFileSystemHost.
"""

import os
from collections.abc import Iterable

from platform_overlay.hosts import MemoryFileSystemHost


class RecordingHost(MemoryFileSystemHost):
    """
    MemoryFileSystemHost that records every call as (operation, *args).

    Usage:
        host = RecordingHost({"app.ts": b"..."})
        overlay.read("app.ts")
        assert host.calls_to("read") == [("read", "app.ts")]
    """

    def __init__(self, files=None):
        super().__init__(files)
        self.calls: list[tuple] = []

    def _record(self, operation: str, *args):
        self.calls.append((operation, *[os.fspath(a) if isinstance(a, (str, os.PathLike)) else a for a in args]))

    def calls_to(self, operation: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == operation]

    def read(self, path):
        self._record("read", path)
        return super().read(path)

    def write(self, path, content):
        self._record("write", path, content)
        return super().write(path, content)

    def delete(self, path):
        self._record("delete", path)
        return super().delete(path)

    def rename(self, src, dst):
        self._record("rename", src, dst)
        return super().rename(src, dst)

    def exists(self, path):
        self._record("exists", path)
        return super().exists(path)

    def is_directory(self, path):
        self._record("is_directory", path)
        return super().is_directory(path)

    def is_file(self, path):
        self._record("is_file", path)
        return super().is_file(path)

    def stat(self, path):
        self._record("stat", path)
        return super().stat(path)

    def watch(self, path, options=None):
        self._record("watch", path, options)
        return super().watch(path, options)

    def list(self, path):
        self._record("list", path)
        return super().list(path)


class FailingProbeHost(MemoryFileSystemHost):
    """
    MemoryFileSystemHost whose existence checks raise for selected paths.

    Args:
        files: Initial files
        failing_paths: Paths for which exists() raises
        error: Exception raised by the failing probe
    """

    def __init__(
        self,
        files=None,
        failing_paths: Iterable[str] = (),
        error: Exception | None = None,
    ):
        super().__init__(files)
        self.failing_paths = set(failing_paths)
        self.error = error or PermissionError("permission denied")
        self.probed: list[str] = []

    def exists(self, path):
        self.probed.append(os.fspath(path))
        if os.fspath(path) in self.failing_paths:
            raise self.error
        return super().exists(path)
