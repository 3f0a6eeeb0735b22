"""
Application Configuration

Re-export of the unified settings.

Usage:
    from platform_overlay.config import settings
"""

from platform_overlay.infra.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
