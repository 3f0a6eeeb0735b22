"""
Target platform selection.

Derives the qualifier list and watch options for a mobile build from the
target platform, and builds the overlay for it.

    platform = resolve_target_platform({"ios": True})    # "ios"
    qualifiers_for(platform)                             # ("tns", "ios")
    overlay = create_platform_overlay(host, platform)
"""

from collections.abc import Iterable, Mapping
from typing import Any

from platform_overlay.common.exceptions import InvalidConfigurationError, UnknownPlatformError
from platform_overlay.common.observability import get_logger
from platform_overlay.infra.config.settings import Settings
from platform_overlay.models import WatchOptions
from platform_overlay.overlay import PlatformOverlayFS, ProbeErrorPolicy
from platform_overlay.ports import FileSystemHostPort

logger = get_logger(__name__)

SUPPORTED_PLATFORMS = ("android", "ios")
DEFAULT_BASE_QUALIFIERS = ("tns",)

# App_Resources/<dir> per platform
_APP_RESOURCES_DIRS = {
    "android": "Android",
    "ios": "iOS",
}


def normalize_platform(name: str) -> str:
    """
    Validate a platform name.

    Raises:
        UnknownPlatformError: not one of SUPPORTED_PLATFORMS
    """
    platform = name.strip().lower()
    if platform not in SUPPORTED_PLATFORMS:
        raise UnknownPlatformError(
            f"Unsupported platform: {name!r}",
            details={"supported": list(SUPPORTED_PLATFORMS)},
        )
    return platform


def resolve_target_platform(env: Mapping[str, Any] | None) -> str:
    """
    Pick the target platform from build flags.

    `android` wins when both flags are set. An explicit `platform` entry is
    used when no flag is set.

    Raises:
        InvalidConfigurationError: no target platform given
    """
    env = env or {}

    if env.get("android"):
        return "android"
    if env.get("ios"):
        return "ios"
    if env.get("platform"):
        return normalize_platform(str(env["platform"]))

    raise InvalidConfigurationError("You need to provide a target platform!")


def qualifiers_for(platform: str, base_qualifiers: Iterable[str] = DEFAULT_BASE_QUALIFIERS) -> tuple[str, ...]:
    """Qualifier list tried for `platform`: base qualifiers first, then the platform."""
    return (*base_qualifiers, normalize_platform(platform))


def app_resources_platform_dir(platform: str) -> str:
    """Directory under App_Resources holding the platform's native resources."""
    return _APP_RESOURCES_DIRS[normalize_platform(platform)]


def default_watch_options(
    app_resources_path: str = "app/App_Resources",
    extra_ignored: Iterable[str] = (),
    recursive: bool = True,
) -> WatchOptions:
    """Watch options that skip app resources and hidden files."""
    resources = app_resources_path.rstrip("/")
    ignored = (f"*{resources}", f"*{resources}/*", ".*", *extra_ignored)
    return WatchOptions(recursive=recursive, ignored=tuple(dict.fromkeys(ignored)))


def create_platform_overlay(
    host: FileSystemHostPort,
    platform: str,
    *,
    base_qualifiers: Iterable[str] = DEFAULT_BASE_QUALIFIERS,
    probe_error_policy: ProbeErrorPolicy | str = ProbeErrorPolicy.STOP,
) -> PlatformOverlayFS:
    """Overlay selecting `platform` variants over `host`."""
    qualifiers = qualifiers_for(platform, base_qualifiers)
    logger.info("platform_overlay_created", platform=platform, qualifiers=list(qualifiers))
    return PlatformOverlayFS(host, qualifiers, probe_error_policy=probe_error_policy)


def overlay_from_settings(
    host: FileSystemHostPort,
    settings: Settings,
    platform: str | None = None,
    *,
    base_qualifiers: Iterable[str] | None = None,
    probe_error_policy: ProbeErrorPolicy | str | None = None,
) -> PlatformOverlayFS:
    """
    Overlay configured from Settings.

    Args:
        host: Underlying store
        settings: Application settings
        platform: Overrides settings.overlay.platform
        base_qualifiers: Overrides settings.overlay.base_qualifiers (empty means unset)
        probe_error_policy: Overrides settings.overlay.probe_error_policy

    Raises:
        InvalidConfigurationError: neither argument nor settings name a platform
    """
    config = settings.overlay
    target = resolve_target_platform({"platform": platform or config.platform})
    return create_platform_overlay(
        host,
        target,
        base_qualifiers=base_qualifiers or config.base_qualifiers,
        probe_error_policy=probe_error_policy or config.probe_error_policy,
    )
