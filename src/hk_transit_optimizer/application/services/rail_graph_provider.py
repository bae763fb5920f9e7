"""Lazy, memoized access to the rail graph."""

import asyncio
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from hk_transit_optimizer.application.routing.rail_graph_builder import build_rail_graph
from hk_transit_optimizer.domain.exceptions import FeedLoadError
from hk_transit_optimizer.domain.models.policy import RailGraphSettings
from hk_transit_optimizer.domain.models.rail_graph import RailGraph

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from hk_transit_optimizer.domain.ports import FeedSource


class RailGraphProvider:
    """Builds the rail graph on first use and keeps it for the process lifetime.

    With ``single_flight`` enabled, callers arriving while the first load is in
    progress wait for it instead of starting their own load. A failed load is
    not retried until ``retry_seconds`` have passed.
    """

    def __init__(
        self,
        feed_source: "FeedSource",
        settings: RailGraphSettings | None = None,
        single_flight: bool = True,
        retry_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._feed_source = feed_source
        self._settings = settings or RailGraphSettings()
        self._single_flight = single_flight
        self._retry_seconds = retry_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        self._graph: RailGraph | None = None
        self._last_error: FeedLoadError | None = None
        self._failed_at: float | None = None
        self.load_count = 0

    @property
    def is_loaded(self) -> bool:
        return self._graph is not None

    def _raise_if_backing_off(self) -> None:
        if self._last_error is None or self._failed_at is None:
            return
        if self._clock() - self._failed_at < self._retry_seconds:
            raise self._last_error

    async def _load(self) -> RailGraph:
        self.load_count += 1
        logger.info("Loading rail feed")
        try:
            tables = await self._feed_source.load()
        except FeedLoadError as e:
            self._last_error = e
            self._failed_at = self._clock()
            raise
        graph = await asyncio.to_thread(build_rail_graph, tables, self._settings)
        self._graph = graph
        self._last_error = None
        self._failed_at = None
        return graph

    async def get_graph(self) -> RailGraph:
        """Return the rail graph, loading it if needed. Raises FeedLoadError."""
        if self._graph is not None:
            return self._graph
        self._raise_if_backing_off()

        if not self._single_flight:
            return await self._load()

        async with self._lock:
            if self._graph is not None:
                return self._graph
            self._raise_if_backing_off()
            return await self._load()

    async def try_get_graph(self) -> RailGraph | None:
        """Return the rail graph, or None when it cannot be loaded."""
        try:
            return await self.get_graph()
        except FeedLoadError as e:
            logger.warning(f"Rail graph unavailable: {e.message}")
            return None
