"""Tests for CLI functions."""

from datetime import datetime

import pytest

from hk_transit_optimizer.application.services import (
    CostMatrixBuilder,
    HybridLegSelector,
    ItineraryService,
    RailGraphProvider,
    RailRouter,
)
from hk_transit_optimizer.cli import itinerary_as_dict, list_stations, optimize, rail_time
from hk_transit_optimizer.composition import Services
from tests.helpers import FakeGeocoder, FakeTripPlanner, StaticFeedSource, sample_feed_tables

PLACES = {
    "Origin": (22.3000, 114.1700),
    "A": (22.3040, 114.1700),
    "B": (22.3010, 114.1700),
    "C": (22.3030, 114.1700),
    "D": (22.3020, 114.1700),
    "E": (22.3050, 114.1700),
}


@pytest.fixture
def services() -> Services:
    provider = RailGraphProvider(StaticFeedSource(sample_feed_tables()))
    router = RailRouter(provider)
    builder = CostMatrixBuilder(HybridLegSelector(FakeTripPlanner(), router))
    return Services(ItineraryService(FakeGeocoder(PLACES), builder), provider, router)


class TestCliFunctions:
    """Tests for the CLI subcommand functions."""

    @pytest.mark.asyncio
    async def test_optimize_prints_order(
        self, services: Services, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given five destinations, when optimizing, then the order is printed."""
        await optimize(services, "Origin", ["A", "B", "C", "D", "E"], as_json=False)

        output = capsys.readouterr().out
        assert "Origin -> B -> D -> C -> A -> E" in output
        assert "WALK" in output

    @pytest.mark.asyncio
    async def test_optimize_json_output(
        self, services: Services, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given --json, when optimizing, then the output is the JSON itinerary."""
        import json

        await optimize(services, "Origin", ["A", "B", "C", "D", "E"], as_json=True)

        data = json.loads(capsys.readouterr().out)
        assert data["order"][0] == "Origin"
        assert len(data["segments"]) == 5

    @pytest.mark.asyncio
    async def test_rail_time_prints_station_seconds(
        self, services: Services, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given two station codes, when timing, then the ride time is printed."""
        await rail_time(services, "wts", "kat")

        assert "WTS -> KAT: 420s (7 min)" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_rail_time_unknown_code_exits(self, services: Services) -> None:
        """Given an unknown code, when timing, then the CLI exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            await rail_time(services, "WTS", "XYZ")

        assert exc_info.value.code == 1

    @pytest.mark.asyncio
    async def test_list_stations(
        self, services: Services, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given the sample feed, when listing, then every station code is printed."""
        await list_stations(services, as_json=False)

        output = capsys.readouterr().out
        assert "6 station(s)" in output
        assert "DIH  Diamond Hill  (2 platform(s))" in output

    @pytest.mark.asyncio
    async def test_itinerary_as_dict_carries_sources(self, services: Services) -> None:
        """Given an itinerary, when converting, then each segment names its source."""
        itinerary = await services.itinerary_service.optimize(
            "Origin", ["A", "B", "C", "D", "E"], datetime(2026, 3, 2, 9, 0)
        )

        data = itinerary_as_dict(itinerary)

        assert {segment["source"] for segment in data["segments"]} == {"walk"}
        assert data["totalMin"] == round(itinerary.total_seconds / 60)
