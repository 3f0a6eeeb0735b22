"""
Watch event stream.

Hosts push WatchEvents from whichever thread observes the change; consumers
iterate synchronously or with `async for`.
"""

import asyncio
import queue
import threading
from collections.abc import Callable
from pathlib import PurePosixPath

from platform_overlay.models import WatchEvent, WatchOptions

_CLOSED = object()


class WatchStream:
    """
    Stream of change events for one watched path.

    Usage:
        with host.watch("app") as stream:
            for event in stream:
                print(event)

        async for event in stream:
            ...
    """

    def __init__(
        self,
        path: str,
        options: WatchOptions | None = None,
        on_close: Callable[[], None] | None = None,
    ):
        self.path = path
        self.options = options or WatchOptions()
        self._on_close = on_close
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def accepts(self, path: str) -> bool:
        """Whether an event for `path` belongs to this stream."""
        relative = _relative_to(path, self.path)
        if relative is None:
            return False
        # The watched target itself is never filtered
        if not relative:
            return True
        if not self.options.recursive and len(PurePosixPath(relative).parts) > 1:
            return False
        if self.options.is_ignored(path, components=False):
            return False
        return not self.options.is_ignored(relative)

    def push(self, event: WatchEvent) -> bool:
        """Queue an event; returns False when it was filtered out or the stream is closed."""
        if self._closed:
            return False
        if not (self.accepts(event.path) or (event.dest_path and self.accepts(event.dest_path))):
            return False
        self._queue.put(event)
        return True

    def get(self, timeout: float | None = None) -> WatchEvent | None:
        """
        Next event, or None when the stream is closed or the timeout expires.
        """
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _CLOSED:
            # Keep the sentinel for other consumers
            self._queue.put(_CLOSED)
            return None
        return item

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._queue.put(_CLOSED)
        if self._on_close is not None:
            self._on_close()

    def __iter__(self):
        return self

    def __next__(self) -> WatchEvent:
        event = self.get()
        if event is None:
            raise StopIteration
        return event

    def __aiter__(self):
        return self

    async def __anext__(self) -> WatchEvent:
        event = await asyncio.to_thread(self.get)
        if event is None:
            raise StopAsyncIteration
        return event

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        self.close()
        return False

    def __repr__(self):
        state = "closed" if self._closed else "open"
        return f"WatchStream({self.path}, {state})"


def _relative_to(path: str, root: str) -> str | None:
    """`path` relative to `root` ("" when equal), or None when outside it."""
    path_parts = PurePosixPath(path.replace("\\", "/")).parts
    root_parts = PurePosixPath(root.replace("\\", "/")).parts
    if root_parts in ((), (".",)):
        return str(PurePosixPath(*path_parts)) if path_parts else ""
    if path_parts[: len(root_parts)] != root_parts:
        return None
    rest = path_parts[len(root_parts) :]
    return str(PurePosixPath(*rest)) if rest else ""
