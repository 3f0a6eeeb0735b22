"""Platform Overlay Models

호스트/오버레이가 주고받는 데이터 모델
"""

import fnmatch
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Any


@dataclass(frozen=True)
class HostCapabilities:
    """호스트가 지원하는 기능"""

    synchronous: bool = True
    stat: bool = True
    watch: bool = True

    def to_dict(self) -> dict[str, bool]:
        """딕셔너리로 변환"""
        return {"synchronous": self.synchronous, "stat": self.stat, "watch": self.watch}


@dataclass(frozen=True)
class FileStats:
    """파일 메타데이터"""

    path: str
    size: int
    mtime: float
    mode: int
    is_file: bool
    is_directory: bool

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "path": self.path,
            "size": self.size,
            "mtime": self.mtime,
            "mode": self.mode,
            "is_file": self.is_file,
            "is_directory": self.is_directory,
        }


class WatchEventType(str, Enum):
    """파일 변경 이벤트 타입"""

    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"
    MOVED = "moved"


@dataclass(frozen=True)
class WatchEvent:
    """파일 변경 이벤트"""

    event_type: WatchEventType
    path: str
    dest_path: str | None = None

    def __str__(self):
        if self.dest_path:
            return f"{self.event_type.value}: {self.path} -> {self.dest_path}"
        return f"{self.event_type.value}: {self.path}"


@dataclass(frozen=True)
class WatchOptions:
    """
    Watch options.

    Attributes:
        recursive: Report changes below direct children of the watched path
        ignored: Glob patterns; matched against the whole path and each component
    """

    recursive: bool = True
    ignored: tuple[str, ...] = ()

    def is_ignored(self, path: str, components: bool = True) -> bool:
        """경로가 제외 대상인지 확인."""
        for pattern in self.ignored:
            if fnmatch.fnmatch(path, pattern):
                return True
            if not components:
                continue
            for part in PurePath(path).parts:
                if fnmatch.fnmatch(part, pattern):
                    return True
        return False
