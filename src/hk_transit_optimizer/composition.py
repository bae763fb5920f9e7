"""Wiring of adapters and services shared by the server and the CLI."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hk_transit_optimizer.adapters.config import AliasTableLoader, AppConfig
from hk_transit_optimizer.adapters.gtfs import GtfsFeedSource
from hk_transit_optimizer.adapters.nominatim import NominatimGeocoder
from hk_transit_optimizer.adapters.otp import OtpTripPlanner
from hk_transit_optimizer.application.services import (
    CostMatrixBuilder,
    HybridLegSelector,
    ItineraryService,
    RailGraphProvider,
    RailRouter,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


@dataclass(frozen=True)
class Services:
    """Long-lived objects of one process."""

    itinerary_service: ItineraryService
    rail_graph_provider: RailGraphProvider
    rail_router: RailRouter


def build_services(config: AppConfig, session: "ClientSession") -> Services:
    """Create all adapters and services from configuration."""
    aliases = AliasTableLoader.load(config)
    logger.info(f"Loaded {len(aliases)} place alias(es)")
    policy = config.leg_selection_policy()

    feed_source = GtfsFeedSource(
        url=config.mtr_gtfs_url,
        path=config.mtr_gtfs_path,
        session=session,
        user_agent=config.user_agent,
        timeout_seconds=config.feed_timeout_seconds,
    )
    rail_graph_provider = RailGraphProvider(
        feed_source,
        settings=config.rail_graph_settings(),
        single_flight=config.rail_graph_single_flight,
        retry_seconds=config.rail_graph_retry_seconds,
    )
    rail_router = RailRouter(rail_graph_provider, policy)

    geocoder = NominatimGeocoder(
        session,
        base_url=config.nominatim_base_url,
        user_agent=config.user_agent,
        pause_seconds=config.geocode_pause_ms / 1000,
    )
    trip_planner = OtpTripPlanner(
        session,
        base_url=config.otp_base_url,
        timeout_seconds=config.otp_timeout_seconds,
        pause_seconds=config.planner_pause_ms / 1000,
    )

    leg_selector = HybridLegSelector(trip_planner, rail_router, policy)
    itinerary_service = ItineraryService(
        geocoder,
        CostMatrixBuilder(leg_selector),
        aliases=aliases,
        timezone=config.timezone,
    )
    return Services(itinerary_service, rail_graph_provider, rail_router)
