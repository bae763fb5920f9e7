"""Nominatim geocoder adapter."""

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

from hk_transit_optimizer.adapters.api_rate_limiter import ApiRateLimiter
from hk_transit_optimizer.adapters.api_request_logger import log_api_request, log_api_response
from hk_transit_optimizer.adapters.nominatim.constants import (
    DEFAULT_HEADERS,
    NOMINATIM_SEARCH_PATH,
)
from hk_transit_optimizer.domain.exceptions import GeocodingError
from hk_transit_optimizer.domain.models.geocode_result import GeocodeResult
from hk_transit_optimizer.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class NominatimGeocoder(Geocoder):
    """Geocodes free text with Nominatim's /search endpoint."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "hk-transit-optimizer/0.1 (contact: local)",
        pause_seconds: float = 0.35,
    ) -> None:
        self._session = session
        self._url = base_url.rstrip("/") + NOMINATIM_SEARCH_PATH
        self._headers = {**DEFAULT_HEADERS, "User-Agent": user_agent}
        self._rate_limiter = ApiRateLimiter.get_instance("nominatim", pause_seconds)

    @staticmethod
    def _parse_result(results: Any, query: str) -> GeocodeResult:
        if not isinstance(results, list) or not results:
            raise GeocodingError(f"geocode no results for: {query}")
        first = results[0]
        try:
            latitude = float(first["lat"])
            longitude = float(first["lon"])
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError(f"geocode returned no coordinates for: {query}") from e
        return GeocodeResult(latitude, longitude, str(first.get("display_name", "")))

    async def geocode(self, query: str) -> GeocodeResult:
        """Resolve ``query`` to the first Nominatim match."""
        params = {"format": "json", "limit": "1", "q": query}
        log_api_request("nominatim", self._url, params=params)

        async with self._rate_limiter:
            started = time.monotonic()
            try:
                async with self._session.get(
                    self._url, params=params, headers=self._headers
                ) as response:
                    log_api_response("nominatim", response.status, time.monotonic() - started)
                    if response.status != 200:
                        raise GeocodingError(f"geocode failed: {response.status}")
                    results = await response.json(content_type=None)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise GeocodingError(f"geocode failed for {query}: {e}") from e

        result = self._parse_result(results, query)
        logger.debug(f"Geocoded {query!r} to {result.latitude}, {result.longitude}")
        return result
