"""Application services (use cases)."""

from hk_transit_optimizer.application.services.cost_matrix_builder import CostMatrixBuilder
from hk_transit_optimizer.application.services.hybrid_leg_selector import HybridLegSelector
from hk_transit_optimizer.application.services.itinerary_service import (
    DESTINATION_COUNT,
    ItineraryService,
    validate_request,
)
from hk_transit_optimizer.application.services.order_optimizer import (
    build_itinerary,
    find_best_order,
    heap_permutations,
)
from hk_transit_optimizer.application.services.rail_graph_provider import RailGraphProvider
from hk_transit_optimizer.application.services.rail_router import RailRouter

__all__ = [
    "DESTINATION_COUNT",
    "CostMatrixBuilder",
    "HybridLegSelector",
    "ItineraryService",
    "RailGraphProvider",
    "RailRouter",
    "build_itinerary",
    "find_best_order",
    "heap_permutations",
    "validate_request",
]
