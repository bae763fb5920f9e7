"""Shared pytest fixtures."""

import pytest

from hk_transit_optimizer.adapters.api_rate_limiter import ApiRateLimiter
from hk_transit_optimizer.application.routing import build_rail_graph
from hk_transit_optimizer.domain.models import RailGraph, RailGraphSettings
from tests.helpers import sample_feed_tables


@pytest.fixture(autouse=True)
def reset_rate_limiters() -> None:
    """Limiters are shared per API name; start every test without any."""
    ApiRateLimiter._instances.clear()


@pytest.fixture
def rail_graph() -> RailGraph:
    """Rail graph of the sample feed with default settings."""
    return build_rail_graph(sample_feed_tables(), RailGraphSettings())
