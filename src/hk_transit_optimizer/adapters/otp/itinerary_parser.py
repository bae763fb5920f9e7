"""Parse OpenTripPlanner /plan responses into travel plans."""

from typing import Any

from hk_transit_optimizer.domain.models.travel_plan import Leg, PlanSource, TravelPlan


def _place_name(place: Any) -> str | None:
    if isinstance(place, dict):
        name = place.get("name")
        return str(name) if name else None
    return None


def parse_leg(leg: dict[str, Any]) -> Leg:
    route = leg.get("routeShortName") or leg.get("routeLongName") or None
    return Leg(
        mode=str(leg.get("mode", "")),
        route=str(route) if route else None,
        from_name=_place_name(leg.get("from")),
        to_name=_place_name(leg.get("to")),
        duration_seconds=round(float(leg.get("duration", 0))),
    )


def parse_plan(data: Any) -> TravelPlan | None:
    """First itinerary of a /plan response, or None when there is none."""
    if not isinstance(data, dict):
        return None
    plan = data.get("plan")
    itineraries = plan.get("itineraries") if isinstance(plan, dict) else None
    if not itineraries:
        return None

    itinerary = itineraries[0]
    if not isinstance(itinerary, dict) or "duration" not in itinerary:
        return None
    legs = tuple(parse_leg(leg) for leg in itinerary.get("legs") or [] if isinstance(leg, dict))
    return TravelPlan(round(float(itinerary["duration"])), legs, PlanSource.TRANSIT)
