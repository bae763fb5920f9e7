"""Build the pairwise cost matrix for a set of points."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from hk_transit_optimizer.domain.models.cost_matrix import CostMatrix
from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.travel_plan import Leg, PlanSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from hk_transit_optimizer.application.services.hybrid_leg_selector import HybridLegSelector


class CostMatrixBuilder:
    """Fills an n x n matrix one OD pair at a time.

    Pairs are evaluated sequentially so external services see at most one
    request from us at a time.
    """

    def __init__(self, leg_selector: "HybridLegSelector") -> None:
        self._leg_selector = leg_selector

    async def build(self, points: list[Point], departure: datetime) -> CostMatrix:
        size = len(points)
        durations = [[0] * size for _ in range(size)]
        legs: dict[tuple[int, int], tuple[Leg, ...]] = {}
        sources: dict[tuple[int, int], PlanSource] = {}

        for i in range(size):
            for j in range(size):
                if i == j:
                    continue
                plan = await self._leg_selector.select(points[i], points[j], departure)
                durations[i][j] = round(plan.duration_seconds)
                legs[(i, j)] = plan.legs
                sources[(i, j)] = plan.source
                logger.debug(
                    f"{points[i].label} -> {points[j].label}: "
                    f"{plan.duration_seconds}s via {plan.source.value}"
                )

        return CostMatrix(
            durations=tuple(tuple(row) for row in durations),
            legs=legs,
            sources=sources,
        )
