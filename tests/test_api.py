"""Tests for the HTTP API."""

from unittest.mock import AsyncMock

import pytest
from starlette.testclient import TestClient

from hk_transit_optimizer.adapters.web import create_app
from hk_transit_optimizer.application.services import (
    CostMatrixBuilder,
    HybridLegSelector,
    ItineraryService,
)
from hk_transit_optimizer.domain.exceptions import GeocodingError
from tests.helpers import FakeGeocoder, FakeTripPlanner

PLACES = {
    "Origin": (22.3000, 114.1700),
    "A": (22.3040, 114.1700),
    "B": (22.3010, 114.1700),
    "C": (22.3030, 114.1700),
    "D": (22.3020, 114.1700),
    "E": (22.3050, 114.1700),
}

VALID_BODY = {"origin": "Origin", "destinations": ["A", "B", "C", "D", "E"]}


def _service() -> ItineraryService:
    builder = CostMatrixBuilder(HybridLegSelector(FakeTripPlanner()))
    return ItineraryService(FakeGeocoder(PLACES), builder)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(_service()))


class TestOptimizeEndpoint:
    """Tests for POST /api/optimize."""

    def test_valid_request_returns_order_and_segments(self, client: TestClient) -> None:
        """Given a valid body, when posting, then the best order and breakdown are returned."""
        response = client.post("/api/optimize", json=VALID_BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["order"] == ["Origin", "B", "D", "C", "A", "E"]
        assert data["origin"]["label"] == "Origin"
        assert len(data["destinations"]) == 5
        assert len(data["segments"]) == 5
        first = data["segments"][0]
        assert (first["from"], first["to"], first["source"]) == ("Origin", "B", "walk")
        assert first["legs"][0]["mode"] == "WALK"
        assert "durationSec" in first["legs"][0]
        assert isinstance(data["totalMin"], int)
        assert data["notes"]

    @pytest.mark.parametrize(
        "body",
        [
            {"origin": "Origin", "destinations": ["A", "B"]},
            {"origin": "Origin"},
            {"destinations": ["A", "B", "C", "D", "E"]},
            ["Origin", "A"],
        ],
    )
    def test_wrong_shape_returns_400(self, client: TestClient, body: object) -> None:
        """Given a malformed body, when posting, then 400 with the usage message is returned."""
        response = client.post("/api/optimize", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Need origin + exactly 5 destinations"

    def test_invalid_json_returns_400(self, client: TestClient) -> None:
        """Given a body that is not JSON, when posting, then 400 is returned."""
        response = client.post(
            "/api/optimize", content=b"origin=A", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400

    def test_duplicate_destinations_return_400(self, client: TestClient) -> None:
        """Given repeated destinations, when posting, then 400 names the duplicate."""
        body = {"origin": "Origin", "destinations": ["A", "B", "C", "D", "A"]}

        response = client.post("/api/optimize", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Duplicate destinations: A", "code": "INVALID_REQUEST"}

    def test_geocoding_failure_returns_500(self, client: TestClient) -> None:
        """Given an unknown place, when posting, then 500 carries the geocoder message."""
        body = {"origin": "Origin", "destinations": ["A", "B", "C", "D", "Nowhere"]}

        response = client.post("/api/optimize", json=body)

        assert response.status_code == 500
        assert response.json() == {
            "error": "geocode no results for: Nowhere",
            "code": "GEOCODING_FAILED",
        }

    def test_unexpected_error_returns_500(self) -> None:
        """Given a service crashing with an unexpected error, when posting, then 500 is returned."""
        service = AsyncMock()
        service.optimize.side_effect = RuntimeError("kaboom")
        client = TestClient(create_app(service))

        response = client.post("/api/optimize", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "kaboom", "code": "INTERNAL_ERROR"}

    def test_domain_error_code_is_kept(self) -> None:
        """Given a domain error, when posting, then its code is returned."""
        service = AsyncMock()
        service.optimize.side_effect = GeocodingError("geocode failed: 503")
        client = TestClient(create_app(service))

        response = client.post("/api/optimize", json=VALID_BODY)

        assert response.json()["code"] == "GEOCODING_FAILED"


class TestHealthAndRateLimit:
    """Tests for /health and per-IP limiting."""

    def test_health(self, client: TestClient) -> None:
        """GET /health should report ok."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_rate_limit_applies_to_api_only(self) -> None:
        """With one request per minute, the second optimize call gets 429 but health stays up."""
        client = TestClient(create_app(_service(), rate_limit_per_minute=1))

        first = client.post("/api/optimize", json=VALID_BODY)
        second = client.post("/api/optimize", json=VALID_BODY)

        assert first.status_code == 200
        assert second.status_code == 429
        assert second.json()["code"] == "RATE_LIMITED"
        assert "Retry-After" in second.headers
        assert client.get("/health").status_code == 200
        assert client.get("/health").status_code == 200
