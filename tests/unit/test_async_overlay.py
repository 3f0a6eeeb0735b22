"""
AsyncPlatformOverlayFS Tests

Tests the async overlay over ThreadedAsyncHost and over a mocked async host:
- Resolution completes before the delegated call
- Round trips, rename endpoints
- Probe errors recovered, host errors propagated
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from platform_overlay import (
    AsyncFileSystemHostPort,
    AsyncPlatformOverlayFS,
    HostCapabilities,
    MemoryFileSystemHost,
    ThreadedAsyncHost,
)
from tests.fakes import FailingProbeHost

# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def async_host(memory_host):
    return ThreadedAsyncHost(memory_host)


@pytest.fixture
def overlay(async_host):
    return AsyncPlatformOverlayFS(async_host, ["tns", "ios"])


# ============================================================
# ThreadedAsyncHost
# ============================================================


class TestThreadedAsyncHost:
    def test_implements_async_port(self, async_host):
        assert isinstance(async_host, AsyncFileSystemHostPort)

    def test_capabilities_mark_async(self, async_host, memory_host):
        caps = async_host.capabilities

        assert caps.synchronous is False
        assert caps.stat == memory_host.capabilities.stat
        assert caps.watch == memory_host.capabilities.watch

    @pytest.mark.asyncio
    async def test_operations_delegate_to_wrapped_host(self, async_host, memory_host):
        await async_host.write("app/new.ts", b"new")

        assert memory_host.read("app/new.ts") == b"new"
        assert await async_host.read("app/new.ts") == b"new"
        assert await async_host.exists("app/new.ts")
        assert await async_host.is_file("app/new.ts")
        assert await async_host.is_directory("app")
        assert "new.ts" in await async_host.list("app")
        assert (await async_host.stat("app/new.ts")).size == 3

        await async_host.rename("app/new.ts", "app/newer.ts")
        await async_host.delete("app/newer.ts")

        assert not memory_host.exists("app/newer.ts")


# ============================================================
# Async Overlay
# ============================================================


class TestAsyncOverlay:
    @pytest.mark.asyncio
    async def test_resolve(self, overlay):
        assert await overlay.resolve("app/app.component.ts") == "app/app.component.tns.ts"
        assert await overlay.resolve("app/app.module.ts") == "app/app.module.ios.ts"
        assert await overlay.resolve("app/main.ts") == "app/main.ts"

    @pytest.mark.asyncio
    async def test_read_resolved(self, overlay):
        assert await overlay.read("app/app.module.ts") == b"export class AppModule { ios = true }"

    @pytest.mark.asyncio
    async def test_write_round_trip(self, overlay, memory_host):
        memory_host.write("app/styles.ios.css", b".page { ios }")

        await overlay.write("app/styles.css", b".page { new }")

        assert memory_host.read("app/styles.ios.css") == b".page { new }"
        assert await overlay.read("app/styles.css") == b".page { new }"
        assert memory_host.read("app/styles.css") == b".page {}"

    @pytest.mark.asyncio
    async def test_rename_resolves_both_endpoints(self, overlay, memory_host):
        await overlay.rename("app/app.module.ts", "app/module.ts")

        assert memory_host.read("app/module.ts") == b"export class AppModule { ios = true }"
        assert memory_host.exists("app/app.module.ts")
        assert not memory_host.exists("app/app.module.ios.ts")

    @pytest.mark.asyncio
    async def test_queries(self, overlay):
        assert await overlay.exists("app/app.component.ts")
        assert await overlay.is_file("app/app.component.ts")
        assert await overlay.is_directory("app")
        assert await overlay.list("app") == [
            "app.component.tns.ts",
            "app.component.ts",
            "app.module.ios.ts",
            "app.module.ts",
            "main.ts",
            "styles.css",
        ]
        assert (await overlay.stat("app/app.component.ts")).path == "app/app.component.tns.ts"

    @pytest.mark.asyncio
    async def test_delete(self, overlay, memory_host):
        await overlay.delete("app/app.component.ts")

        assert not memory_host.exists("app/app.component.tns.ts")
        assert memory_host.exists("app/app.component.ts")

    @pytest.mark.asyncio
    async def test_watch(self, overlay, memory_host):
        stream = await overlay.watch("app/app.module.ts")
        try:
            memory_host.write("app/app.module.ios.ts", b"changed")
            event = await stream.__anext__()
        finally:
            stream.close()

        assert stream.path == "app/app.module.ios.ts"
        assert event.path == "app/app.module.ios.ts"

    @pytest.mark.asyncio
    async def test_probe_error_recovered(self):
        host = FailingProbeHost(
            {"a.ts": b"common", "a.ios.ts": b"ios"},
            failing_paths={"a.tns.ts"},
        )
        fs = AsyncPlatformOverlayFS(ThreadedAsyncHost(host), ["tns", "ios"])

        assert await fs.read("a.ts") == b"common"

    @pytest.mark.asyncio
    async def test_continue_policy(self):
        host = FailingProbeHost(
            {"a.ts": b"common", "a.ios.ts": b"ios"},
            failing_paths={"a.tns.ts"},
        )
        fs = AsyncPlatformOverlayFS(ThreadedAsyncHost(host), ["tns", "ios"], probe_error_policy="continue")

        assert await fs.read("a.ts") == b"ios"

    @pytest.mark.asyncio
    async def test_host_error_propagates(self, overlay):
        with pytest.raises(FileNotFoundError):
            await overlay.read("app/missing.ts")

    def test_capabilities_forwarded(self):
        caps = HostCapabilities(synchronous=False, stat=True, watch=False)
        host = MagicMock()
        host.capabilities = caps

        assert AsyncPlatformOverlayFS(host, ["ios"]).capabilities is caps


# ============================================================
# Ordering
# ============================================================


class TestOrdering:
    """Resolution probes complete before the delegated call is issued."""

    @pytest.mark.asyncio
    async def test_probe_before_delegate(self):
        order: list[str] = []

        async def exists(path):
            order.append(f"exists:{path}")
            return path == "a.ios.ts"

        async def is_file(path):
            order.append(f"is_file:{path}")
            return True

        async def read(path):
            order.append(f"read:{path}")
            return b"ios"

        host = MagicMock()
        host.exists = AsyncMock(side_effect=exists)
        host.is_file = AsyncMock(side_effect=is_file)
        host.read = AsyncMock(side_effect=read)

        fs = AsyncPlatformOverlayFS(host, ["tns", "ios"])

        assert await fs.read("a.ts") == b"ios"
        assert order == ["exists:a.tns.ts", "exists:a.ios.ts", "is_file:a.ios.ts", "read:a.ios.ts"]
        host.read.assert_awaited_once_with("a.ios.ts")

    @pytest.mark.asyncio
    async def test_no_memoization_between_calls(self):
        memory = MemoryFileSystemHost({"a.ts": b"common"})
        fs = AsyncPlatformOverlayFS(ThreadedAsyncHost(memory), ["ios"])

        assert await fs.read("a.ts") == b"common"
        memory.write("a.ios.ts", b"ios")
        assert await fs.read("a.ts") == b"ios"
