"""GTFS feed source reading a zip archive from a URL or a local path."""

import asyncio
import io
import logging
import zipfile
import zlib
from pathlib import Path
from typing import TYPE_CHECKING

import aiohttp

from hk_transit_optimizer.adapters.api_request_logger import log_api_request
from hk_transit_optimizer.adapters.gtfs.record_mapper import (
    map_routes,
    map_stop_times,
    map_stops,
    map_trips,
)
from hk_transit_optimizer.adapters.gtfs.table_parser import parse_table
from hk_transit_optimizer.domain.exceptions import FeedLoadError
from hk_transit_optimizer.domain.models.feed_records import FeedTables
from hk_transit_optimizer.domain.ports.feed_source import FeedSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

REQUIRED_TABLES = ("stops.txt", "routes.txt", "trips.txt", "stop_times.txt")


def read_feed_archive(payload: bytes) -> FeedTables:
    """Parse the required tables out of a GTFS zip."""
    try:
        archive = zipfile.ZipFile(io.BytesIO(payload))
    except zipfile.BadZipFile as e:
        raise FeedLoadError(f"GTFS archive is not a zip file: {e}") from e

    with archive:
        names = set(archive.namelist())
        texts: dict[str, str] = {}
        for table in REQUIRED_TABLES:
            if table not in names:
                raise FeedLoadError(f"GTFS archive missing {table}")
            try:
                texts[table] = archive.read(table).decode("utf-8-sig", errors="replace")
            except (zipfile.BadZipFile, zlib.error, OSError, NotImplementedError) as e:
                raise FeedLoadError(f"GTFS archive member {table} is unreadable: {e}") from e

    tables = FeedTables(
        stops=map_stops(parse_table(texts["stops.txt"])),
        routes=map_routes(parse_table(texts["routes.txt"])),
        trips=map_trips(parse_table(texts["trips.txt"])),
        stop_times=map_stop_times(parse_table(texts["stop_times.txt"])),
    )
    logger.info(
        f"Read GTFS feed: {len(tables.stops)} stops, {len(tables.routes)} routes, "
        f"{len(tables.trips)} trips, {len(tables.stop_times)} stop times"
    )
    return tables


class GtfsFeedSource(FeedSource):
    """Loads the rail feed, preferring a local file over a download."""

    def __init__(
        self,
        url: str | None = None,
        path: str | None = None,
        session: "ClientSession | None" = None,
        user_agent: str = "hk-transit-optimizer/0.1 (contact: local)",
        timeout_seconds: float = 120.0,
    ) -> None:
        self._url = url
        self._path = path
        self._session = session
        self._user_agent = user_agent
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _download(self) -> bytes:
        if not self._url:
            raise FeedLoadError("MTR GTFS URL not configured")
        if self._session is None:
            raise FeedLoadError("No HTTP session available to download the GTFS feed")

        headers = {"User-Agent": self._user_agent}
        log_api_request("gtfs", self._url, headers=headers)
        try:
            async with self._session.get(
                self._url, headers=headers, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    raise FeedLoadError(f"MTR GTFS download failed: {response.status}")
                return await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FeedLoadError(f"MTR GTFS download failed: {e}") from e

    def _read_local(self) -> bytes:
        path = Path(self._path or "")
        try:
            return path.read_bytes()
        except OSError as e:
            raise FeedLoadError(f"Cannot read GTFS archive {path}: {e}") from e

    async def load(self) -> FeedTables:
        """Fetch and parse the feed. Raises FeedLoadError."""
        payload = self._read_local() if self._path else await self._download()
        logger.info(f"Fetched GTFS archive ({len(payload) / 1_000_000:.1f} MB)")
        return await asyncio.to_thread(read_feed_archive, payload)
