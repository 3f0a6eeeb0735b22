"""Configuration (pydantic-settings)."""

from platform_overlay.infra.config.groups import (
    ObservabilityConfig,
    OverlayConfig,
    ProjectConfig,
    WatchConfig,
)
from platform_overlay.infra.config.settings import Settings, settings

__all__ = [
    "ObservabilityConfig",
    "OverlayConfig",
    "ProjectConfig",
    "Settings",
    "WatchConfig",
    "settings",
]
