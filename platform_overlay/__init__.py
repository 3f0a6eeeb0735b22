"""
Platform Overlay FS - platform-variant file resolution for build pipelines.

This package contains:
- overlay/: PlatformOverlayFS (sync) and AsyncPlatformOverlayFS (async)
- hosts/: underlying stores (disk, in-memory, async adapter)
- platforms: target platform selection and overlay factory
- infra/: configuration and structured logging
"""

from platform_overlay.common.exceptions import (
    InvalidConfigurationError,
    InvalidQualifierError,
    PlatformOverlayError,
    ProbeError,
    UnknownPlatformError,
)
from platform_overlay.hosts import (
    LocalFileSystemHost,
    MemoryFileSystemHost,
    ThreadedAsyncHost,
    WatchStream,
)
from platform_overlay.models import (
    FileStats,
    HostCapabilities,
    WatchEvent,
    WatchEventType,
    WatchOptions,
)
from platform_overlay.overlay import (
    AsyncPlatformOverlayFS,
    PlatformOverlayFS,
    PlatformResolver,
    ProbeErrorPolicy,
)
from platform_overlay.platforms import (
    SUPPORTED_PLATFORMS,
    create_platform_overlay,
    qualifiers_for,
    resolve_target_platform,
)
from platform_overlay.ports import AsyncFileSystemHostPort, FileSystemHostPort

__version__ = "0.1.0"

__all__ = [
    "AsyncFileSystemHostPort",
    "AsyncPlatformOverlayFS",
    "FileStats",
    "FileSystemHostPort",
    "HostCapabilities",
    "InvalidConfigurationError",
    "InvalidQualifierError",
    "LocalFileSystemHost",
    "MemoryFileSystemHost",
    "PlatformOverlayError",
    "PlatformOverlayFS",
    "PlatformResolver",
    "ProbeError",
    "ProbeErrorPolicy",
    "SUPPORTED_PLATFORMS",
    "ThreadedAsyncHost",
    "UnknownPlatformError",
    "WatchEvent",
    "WatchEventType",
    "WatchOptions",
    "WatchStream",
    "create_platform_overlay",
    "qualifiers_for",
    "resolve_target_platform",
]
