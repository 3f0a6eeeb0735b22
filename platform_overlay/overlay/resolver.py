"""
Platform Resolver

논리 경로를 플랫폼 한정 경로로 해석합니다.

    app.module.ts  --(ios)-->  app.module.ios.ts   (존재할 때만)

해석 규칙:
- 한정자 목록 순서대로 후보를 확인, 첫 번째 일치가 승리
- 후보가 없으면 논리 경로 그대로 반환
- 프로브 실패는 "오버라이드 없음"으로 취급 (빌드를 중단시키지 않음)
- 캐시 없음: 호출마다 새로 프로브
"""

import os
from collections.abc import Iterable, Iterator
from enum import Enum

from platform_overlay.common.exceptions import InvalidQualifierError, ProbeError
from platform_overlay.common.observability import get_logger
from platform_overlay.ports import AsyncFileSystemHostPort, FileSystemHostPort, PathLike

logger = get_logger(__name__)

_SEPARATORS = "/" + os.sep + (os.altsep or "")


class ProbeErrorPolicy(str, Enum):
    """What resolution does when probing a candidate raises."""

    # Fall back to the logical path without trying later qualifiers
    STOP = "stop"
    # Skip the failing qualifier and keep trying
    CONTINUE = "continue"


def validate_qualifiers(qualifiers: Iterable[str]) -> tuple[str, ...]:
    """
    Validate a qualifier list.

    Raises:
        InvalidQualifierError: empty value, non-string, dot segment or path separator
    """
    if isinstance(qualifiers, str):
        raise InvalidQualifierError(
            "Qualifiers must be a sequence of strings, not a single string",
            details={"qualifiers": qualifiers},
        )

    validated = tuple(qualifiers)
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())

    for qualifier in validated:
        if not isinstance(qualifier, str) or not qualifier:
            raise InvalidQualifierError(
                "Qualifiers must be non-empty strings",
                details={"qualifier": qualifier},
            )
        if qualifier in (".", "..") or any(sep in qualifier for sep in separators):
            raise InvalidQualifierError(
                f"Qualifier must not contain path separators: {qualifier!r}",
                details={"qualifiers": list(validated)},
            )

    return validated


class PlatformResolver:
    """
    Resolves logical paths against an ordered qualifier list.

    Example:
        >>> resolver = PlatformResolver(["ios", "android"])
        >>> resolver.candidate("src/app.module.ts", "ios")
        'src/app.module.ios.ts'
        >>> resolver.resolve(host, "src/app.module.ts")  # if the sibling exists
        'src/app.module.ios.ts'
    """

    def __init__(
        self,
        qualifiers: Iterable[str],
        probe_error_policy: ProbeErrorPolicy | str = ProbeErrorPolicy.STOP,
    ):
        self._qualifiers = validate_qualifiers(qualifiers)
        self._policy = ProbeErrorPolicy(probe_error_policy)

    @property
    def qualifiers(self) -> tuple[str, ...]:
        return self._qualifiers

    @property
    def probe_error_policy(self) -> ProbeErrorPolicy:
        return self._policy

    @staticmethod
    def candidate(path: PathLike, qualifier: str) -> str:
        """`dir/stem.ext` -> `dir/stem.<qualifier>.ext`; a trailing separator is dropped"""
        raw = os.fspath(path)
        directory, filename = os.path.split(raw.rstrip(_SEPARATORS) or raw)
        stem, extension = os.path.splitext(filename)
        return os.path.join(directory, f"{stem}.{qualifier}{extension}")

    def candidates(self, path: PathLike) -> Iterator[str]:
        for qualifier in self._qualifiers:
            yield self.candidate(path, qualifier)

    def resolve(self, host: FileSystemHostPort, path: PathLike) -> str:
        """
        Resolve `path` against a synchronous host.

        Returns:
            First existing qualified sibling, otherwise the logical path
        """
        logical = os.fspath(path)

        for candidate in self.candidates(logical):
            try:
                matched = self._probe(host, candidate)
            except ProbeError as e:
                if self._on_probe_error(logical, e):
                    continue
                return logical

            if matched:
                logger.debug("platform_override_resolved", path=logical, resolved=candidate)
                return candidate

        return logical

    async def aresolve(self, host: AsyncFileSystemHostPort, path: PathLike) -> str:
        """Resolve `path` against an asynchronous host."""
        logical = os.fspath(path)

        for candidate in self.candidates(logical):
            try:
                matched = await self._aprobe(host, candidate)
            except ProbeError as e:
                if self._on_probe_error(logical, e):
                    continue
                return logical

            if matched:
                logger.debug("platform_override_resolved", path=logical, resolved=candidate)
                return candidate

        return logical

    @staticmethod
    def _probe(host: FileSystemHostPort, candidate: str) -> bool:
        try:
            return bool(host.exists(candidate) and host.is_file(candidate))
        except Exception as e:
            raise ProbeError(candidate, e) from e

    @staticmethod
    async def _aprobe(host: AsyncFileSystemHostPort, candidate: str) -> bool:
        try:
            return bool(await host.exists(candidate) and await host.is_file(candidate))
        except Exception as e:
            raise ProbeError(candidate, e) from e

    def _on_probe_error(self, logical: str, error: ProbeError) -> bool:
        """Log a recovered probe failure; True when resolution should keep going."""
        keep_going = self._policy is ProbeErrorPolicy.CONTINUE
        logger.debug(
            "platform_probe_failed",
            path=logical,
            candidate=error.path,
            policy=self._policy.value,
            **error.details,
        )
        return keep_going

    def __repr__(self):
        return f"PlatformResolver({list(self._qualifiers)}, policy={self._policy.value})"
