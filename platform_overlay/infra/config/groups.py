"""
설정 그룹 정의.

Settings를 논리적 그룹으로 분리하여 관리합니다.
각 그룹은 독립적으로 사용 가능하며, Settings에서 통합됩니다.
"""

from pydantic import BaseModel, Field, field_validator


class OverlayConfig(BaseModel):
    """플랫폼 오버레이 설정."""

    platform: str | None = Field(default=None, description="대상 플랫폼 (android, ios)")
    base_qualifiers: list[str] = Field(default_factory=lambda: ["tns"], description="플랫폼 앞에 시도할 한정자")
    probe_error_policy: str = Field(default="stop", description="프로브 오류 시 동작 (stop, continue)")

    @field_validator("probe_error_policy")
    @classmethod
    def _check_policy(cls, value: str) -> str:
        value = value.lower()
        if value not in ("stop", "continue"):
            raise ValueError(f"probe_error_policy must be 'stop' or 'continue', got {value!r}")
        return value


class ProjectConfig(BaseModel):
    """프로젝트 경로 설정."""

    root: str = Field(default=".", description="프로젝트 루트")
    app_path: str = Field(default="app", description="앱 소스 경로 (루트 기준)")
    app_resources_path: str = Field(default="app/App_Resources", description="앱 리소스 경로 (루트 기준)")


class WatchConfig(BaseModel):
    """파일 감시 설정."""

    recursive: bool = Field(default=True, description="하위 디렉토리 감시")
    ignored: list[str] = Field(default_factory=lambda: [".*"], description="제외 패턴 (glob)")


class ObservabilityConfig(BaseModel):
    """로깅 설정."""

    log_level: str = Field(default="INFO", description="로그 레벨")
    log_format: str = Field(default="console", description="로그 포맷 (console, json)")
