"""Platform Overlay Package

플랫폼 한정 파일 선택 오버레이
"""

from .async_core import AsyncPlatformOverlayFS
from .core import PlatformOverlayFS
from .resolver import PlatformResolver, ProbeErrorPolicy, validate_qualifiers

__all__ = [
    "AsyncPlatformOverlayFS",
    "PlatformOverlayFS",
    "PlatformResolver",
    "ProbeErrorPolicy",
    "validate_qualifiers",
]
