"""Pacing for outgoing API requests.

Public geocoders and trip planners throttle aggressive clients, so every
request to a given API is serialized and followed by a short pause before
the next one may start.
"""

from __future__ import annotations

import asyncio
import logging
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Serializes requests to one API and pauses after each of them.

    Use as an async context manager around a request::

        async with limiter:
            await session.get(...)
    """

    # Class-level registry of limiters by API name
    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}

    def __init__(self, api_name: str, pause_seconds: float = 0.0) -> None:
        """Initialize the limiter.

        Args:
            api_name: Name of the API (for logging).
            pause_seconds: Pause after each request before the next may start.
        """
        self.api_name = api_name
        self.pause_seconds = pause_seconds
        self.request_count = 0
        self._lock = asyncio.Lock()

    @classmethod
    def get_instance(cls, api_name: str, pause_seconds: float = 0.0) -> ApiRateLimiter:
        """Get or create the shared limiter for an API.

        The pause of an existing limiter is not changed.
        """
        if api_name not in cls._instances:
            cls._instances[api_name] = cls(api_name, pause_seconds)
            logger.info(f"Pacing {api_name} requests with a {pause_seconds}s pause")
        return cls._instances[api_name]

    async def pause(self) -> None:
        """Sleep for the configured pause."""
        if self.pause_seconds > 0:
            logger.debug(f"{self.api_name}: pausing {self.pause_seconds:.2f}s")
            await asyncio.sleep(self.pause_seconds)

    async def __aenter__(self) -> ApiRateLimiter:
        """Wait for any in-flight request to this API to finish its pause."""
        await self._lock.acquire()
        self.request_count += 1
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: BaseException | None, _exc_tb: object
    ) -> None:
        """Pause, then let the next request through, also when the request failed."""
        try:
            await self.pause()
        finally:
            self._lock.release()
