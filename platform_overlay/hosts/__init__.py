"""
Filesystem hosts.

- LocalFileSystemHost: disk (pathlib + watchdog)
- MemoryFileSystemHost: in-memory dict store
- ThreadedAsyncHost: sync host -> async host adapter
"""

from .local import LocalFileSystemHost
from .memory import MemoryFileSystemHost
from .stream import WatchStream
from .threaded import ThreadedAsyncHost

__all__ = [
    "LocalFileSystemHost",
    "MemoryFileSystemHost",
    "ThreadedAsyncHost",
    "WatchStream",
]
