"""
Global test configuration and fixtures
"""

import functools
import logging
import os
import time

import pytest
import structlog

from platform_overlay.hosts import LocalFileSystemHost, MemoryFileSystemHost
from platform_overlay.infra.observability import clear_context, setup_logging

# 느린 테스트 임계값 (초)
SLOW_TEST_THRESHOLD = 5.0


@pytest.fixture(autouse=True)
def track_test_duration(request):
    """모든 테스트의 실행 시간을 추적하고 느린 테스트 경고"""
    start_time = time.time()

    yield

    duration = time.time() - start_time
    if duration > SLOW_TEST_THRESHOLD:
        print(f"\n⚠️  SLOW TEST ({duration:.2f}s): {request.node.nodeid}")


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    """PLATFORM_OVERLAY_* 환경 변수와 .env 파일 격리"""
    for key in list(os.environ):
        if key.startswith("PLATFORM_OVERLAY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PLATFORM_OVERLAY_LOG_LEVEL", "WARNING")
    yield
    clear_context()


@pytest.fixture(autouse=True)
def reset_structlog(monkeypatch):
    """CLI가 설정한 structlog 구성을 테스트마다 초기화 (로거 캐시 비활성화)"""
    monkeypatch.setattr("platform_overlay.cli.setup_logging", functools.partial(setup_logging, cache_loggers=False))
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def memory_host() -> MemoryFileSystemHost:
    """샘플 모바일 앱 파일을 담은 메모리 호스트"""
    return MemoryFileSystemHost(
        {
            "app/app.module.ts": b"export class AppModule {}",
            "app/app.module.ios.ts": b"export class AppModule { ios = true }",
            "app/app.component.ts": b"@Component({})",
            "app/app.component.tns.ts": b"@Component({ tns: true })",
            "app/styles.css": b".page {}",
            "app/main.ts": b"platformNativeScript()",
        }
    )


@pytest.fixture
def project_dir(tmp_path):
    """디스크 위 샘플 프로젝트"""
    root = tmp_path / "project"
    app = root / "app"
    (app / "App_Resources" / "iOS").mkdir(parents=True)
    (app / "app.module.ts").write_text("export class AppModule {}")
    (app / "app.module.ios.ts").write_text("export class AppModule { ios = true }")
    (app / "app.module.android.ts").write_text("export class AppModule { android = true }")
    (app / "main.ts").write_text("platformNativeScript()")
    (app / "App_Resources" / "iOS" / "Info.plist").write_text("<plist/>")
    return root


@pytest.fixture
def local_host(project_dir) -> LocalFileSystemHost:
    return LocalFileSystemHost(project_dir)


def pytest_collection_modifyitems(config, items):
    """경로 기반 자동 마커 추가"""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
