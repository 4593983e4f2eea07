"""
Test suite for KeepAliveService.

Uses httpx.MockTransport instead of a live server.

System role: Verification of the background pinger
"""

import asyncio

import httpx
import pytest

from diaspora_assist.application.services.keep_alive_service import USER_AGENT, KeepAliveService
from diaspora_assist.configs.keep_alive import KeepAliveSettings


def make_service(handler, **overrides) -> KeepAliveService:
    settings = KeepAliveSettings(**{"enabled": True, "server_url": "http://assist.test", **overrides})
    return KeepAliveService(settings, transport=httpx.MockTransport(handler))


class TestKeepAlivePing:
    """Test suite for KeepAliveService.ping."""

    @pytest.mark.asyncio
    async def test_ping_should_request_health_with_user_agent(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "ok"})

        service = make_service(handler)

        assert await service.ping() is True
        assert str(seen[0].url) == "http://assist.test/health"
        assert seen[0].headers["User-Agent"] == USER_AGENT

    @pytest.mark.asyncio
    async def test_ping_should_report_non_success_status(self) -> None:
        service = make_service(lambda request: httpx.Response(503))

        assert await service.ping() is False
        assert service.status()["failure_count"] == 1

    @pytest.mark.asyncio
    async def test_ping_should_not_raise_on_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        service = make_service(handler)

        assert await service.ping() is False
        assert service.status()["ping_count"] == 1


class TestKeepAliveSettings:
    """Test suite for server URL resolution from the environment."""

    @pytest.fixture(autouse=True)
    def clear_url_env(self, monkeypatch) -> None:
        for name in ("KEEP_ALIVE_SERVER_URL", "RENDER_EXTERNAL_URL", "SERVER_URL"):
            monkeypatch.delenv(name, raising=False)

    def test_should_ping_render_external_url_in_production(self, monkeypatch) -> None:
        monkeypatch.setenv("RENDER_EXTERNAL_URL", "https://app.onrender.com")

        service = KeepAliveService(KeepAliveSettings(), environment="production")

        assert service.enabled
        assert service.health_url == "https://app.onrender.com/health"

    def test_should_fall_back_to_server_url(self, monkeypatch) -> None:
        monkeypatch.setenv("SERVER_URL", "https://assist.example.com/")

        assert KeepAliveSettings().server_url == "https://assist.example.com/"

    def test_prefixed_variable_should_take_precedence(self, monkeypatch) -> None:
        monkeypatch.setenv("KEEP_ALIVE_SERVER_URL", "https://primary.example.com")
        monkeypatch.setenv("RENDER_EXTERNAL_URL", "https://app.onrender.com")
        monkeypatch.setenv("SERVER_URL", "https://other.example.com")

        assert KeepAliveSettings().server_url == "https://primary.example.com"


class TestKeepAliveLifecycle:
    """Test suite for start/stop."""

    def test_health_url_should_default_to_local_port(self) -> None:
        service = KeepAliveService(KeepAliveSettings(server_url=None), port=8080)

        assert service.health_url == "http://localhost:8080/health"

    def test_production_should_enable_pinger(self) -> None:
        assert KeepAliveService(KeepAliveSettings(enabled=False), environment="production").enabled

    @pytest.mark.asyncio
    async def test_start_should_do_nothing_when_disabled(self) -> None:
        service = KeepAliveService(KeepAliveSettings(enabled=False), environment="development")

        assert service.start() is False
        assert not service.is_running

    @pytest.mark.asyncio
    async def test_loop_should_ping_until_stopped(self) -> None:
        """Test the loop pings repeatedly and stops cleanly."""
        pinged = asyncio.Event()
        count = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal count
            count += 1
            if count >= 2:
                pinged.set()
            return httpx.Response(200)

        service = make_service(handler, interval_minutes=0.0001, initial_delay_seconds=0)

        assert service.start() is True
        assert service.start() is False
        await asyncio.wait_for(pinged.wait(), timeout=5)
        await service.stop()

        assert not service.is_running
        assert count >= 2
