"""
Platform Overlay Exception Hierarchy

표준화된 예외 계층.

사용 가이드:
    1. 설정 오류 → 생성 시점에 즉시 실패 (InvalidConfigurationError)
    2. 프로브 오류 → 해석 단계에서 로컬 복구 (ProbeError)
    3. 위임된 호스트 오류 → 래핑 없이 그대로 전파

예시:
    try:
        overlay = PlatformOverlayFS(host, ["tns", "ios/"])
    except InvalidQualifierError as e:
        logger.error("bad_qualifiers", error=str(e))
"""

from typing import Any


class PlatformOverlayError(Exception):
    """Base exception for all platform overlay errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize platform overlay error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Configuration Errors
# ============================================================


class InvalidConfigurationError(PlatformOverlayError):
    """Invalid configuration."""

    pass


class InvalidQualifierError(InvalidConfigurationError):
    """Qualifier list contains an empty value or a path separator."""

    pass


class UnknownPlatformError(InvalidConfigurationError):
    """Target platform is not supported."""

    pass


# ============================================================
# Resolution Errors
# ============================================================


class ProbeError(PlatformOverlayError):
    """
    Existence probe for a qualified candidate failed.

    Raised inside resolution only; the resolver recovers from it and never
    lets it reach callers.
    """

    def __init__(self, path: str, cause: BaseException):
        super().__init__(
            f"Probe failed for {path}",
            details={"error_type": type(cause).__name__, "error_message": str(cause)},
        )
        self.path = path
        self.cause = cause
