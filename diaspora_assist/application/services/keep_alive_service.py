"""
Keep-alive pinger.

Periodically requests this service's own health endpoint so hosts that spin
down idle instances keep it warm. Runs as an independent asyncio task owned
by the application lifespan and shares no state with request handling. Ping
failures are logged and the loop keeps going.

Dependencies: httpx, asyncio, diaspora_assist.configs
System role: Background scheduled task
"""

import asyncio
import contextlib
import logging
from typing import Any

import httpx

from diaspora_assist.configs.keep_alive import KeepAliveSettings

logger = logging.getLogger(__name__)

USER_AGENT = "KeepAlive-Service/1.0"


class KeepAliveService:
    """Scheduled health pinger with explicit start/stop lifecycle."""

    def __init__(
        self,
        settings: KeepAliveSettings,
        environment: str = "development",
        port: int = 5000,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            settings: Keep-alive settings
            environment: Application environment; production enables the pinger
            port: Local port used when no server_url is configured
            transport: Optional httpx transport (tests)
        """
        self._settings = settings
        self._environment = environment
        self._port = port
        self._transport = transport
        self._task: asyncio.Task | None = None
        self._ping_count = 0
        self._failure_count = 0

    @property
    def enabled(self) -> bool:
        return self._settings.enabled or self._environment.lower() == "production"

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def health_url(self) -> str:
        base = self._settings.server_url or f"http://localhost:{self._port}"
        return f"{base.rstrip('/')}{self._settings.health_endpoint}"

    def start(self) -> bool:
        """
        Schedule the ping loop on the running event loop.

        Returns:
            bool: True if a new loop was started
        """
        if not self.enabled:
            logger.info(f"{__name__}:start - Keep-alive service is disabled")
            return False
        if self.is_running:
            logger.info(f"{__name__}:start - Keep-alive service is already running")
            return False

        logger.info(
            f"{__name__}:start - Pinging {self.health_url} every "
            f"{self._settings.interval_minutes} minutes"
        )
        self._task = asyncio.create_task(self._run(), name="keep-alive")
        return True

    async def stop(self) -> None:
        """Cancel the ping loop and wait for it to finish."""
        if self._task is None:
            return

        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info(f"{__name__}:stop - Keep-alive service stopped")

    async def _run(self) -> None:
        await asyncio.sleep(self._settings.initial_delay_seconds)
        while True:
            await self.ping()
            await asyncio.sleep(self._settings.interval_minutes * 60)

    async def ping(self) -> bool:
        """
        Request the health endpoint once.

        Returns:
            bool: True on a 2xx response; never raises
        """
        url = self.health_url
        self._ping_count += 1
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers={"User-Agent": USER_AGENT})
        except Exception as e:
            self._failure_count += 1
            logger.error(f"{__name__}:ping - Keep-alive ping error: {type(e).__name__}: {e}")
            return False

        if response.is_success:
            logger.info(f"{__name__}:ping - Keep-alive ping successful: {response.status_code}")
            return True

        self._failure_count += 1
        logger.warning(
            f"{__name__}:ping - Keep-alive ping failed with status: {response.status_code}"
        )
        return False

    def status(self) -> dict[str, Any]:
        return {
            "running": self.is_running,
            "enabled": self.enabled,
            "health_url": self.health_url,
            "interval_minutes": self._settings.interval_minutes,
            "ping_count": self._ping_count,
            "failure_count": self._failure_count,
        }
