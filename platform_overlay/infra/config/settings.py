"""
Platform Overlay Settings

Environment variables use the PLATFORM_OVERLAY_ prefix.
Example: PLATFORM_OVERLAY_PLATFORM=ios, PLATFORM_OVERLAY_BASE_QUALIFIERS=tns,mobile
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from platform_overlay.infra.config.groups import (
    ObservabilityConfig,
    OverlayConfig,
    ProjectConfig,
    WatchConfig,
)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """
    Platform Overlay Settings

    그룹화된 설정 접근:
        settings.overlay        # OverlayConfig
        settings.project        # ProjectConfig
        settings.watch          # WatchConfig
        settings.observability  # ObservabilityConfig
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLATFORM_OVERLAY_",
        extra="ignore",
    )

    # ========================================================================
    # Grouped Config Accessors
    # ========================================================================

    @cached_property
    def overlay(self) -> OverlayConfig:
        """오버레이 설정 그룹."""
        return OverlayConfig(
            platform=self.platform,
            base_qualifiers=_split_csv(self.base_qualifiers),
            probe_error_policy=self.probe_error_policy,
        )

    @cached_property
    def project(self) -> ProjectConfig:
        """프로젝트 경로 설정 그룹."""
        return ProjectConfig(
            root=self.project_root,
            app_path=self.app_path,
            app_resources_path=self.app_resources_path,
        )

    @cached_property
    def watch(self) -> WatchConfig:
        """파일 감시 설정 그룹."""
        return WatchConfig(
            recursive=self.watch_recursive,
            ignored=_split_csv(self.watch_ignored),
        )

    @cached_property
    def observability(self) -> ObservabilityConfig:
        """로깅 설정 그룹."""
        return ObservabilityConfig(log_level=self.log_level, log_format=self.log_format)

    # ========================================================================
    # Overlay
    # ========================================================================
    platform: str | None = None
    base_qualifiers: str = "tns"  # comma separated
    probe_error_policy: str = "stop"

    # ========================================================================
    # Project
    # ========================================================================
    project_root: str = "."
    app_path: str = "app"
    app_resources_path: str = "app/App_Resources"

    # ========================================================================
    # Watch
    # ========================================================================
    watch_recursive: bool = True
    watch_ignored: str = ".*"  # comma separated glob patterns

    # ========================================================================
    # Observability
    # ========================================================================
    log_level: str = "INFO"
    log_format: str = "console"


settings = Settings()
