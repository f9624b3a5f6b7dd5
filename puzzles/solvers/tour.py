"""
Nearest-neighbour tour construction -- the reference for the tour puzzle.

Starts at the first listed city, keeps hopping to the closest city not yet
visited and finally closes the loop back to the start.  This is a greedy
heuristic, not the true TSP optimum: players are scored against this same
baseline so that both games share one 1000-point scale.
"""

from __future__ import annotations

import logging

import numpy as np

from puzzles.config import TOUR
from puzzles.distance import build_distance_matrix, coordinates, nearest_index
from puzzles.errors import InvalidInstance
from puzzles.models import City, TourInstance, TourResult
from puzzles.solvers.base import BaseSolver

_log = logging.getLogger(__name__)


class TourSolver(BaseSolver):
    name = "nearest_neighbour"
    game = TOUR

    def validate(self, instance: TourInstance) -> None:
        seen: set[str] = set()
        for c in instance.cities:
            if c.city_id in seen:
                raise InvalidInstance(f"Duplicate city id: '{c.city_id}'")
            seen.add(c.city_id)
        pts = coordinates(instance.cities)
        if not np.isfinite(pts).all():
            bad = [c.city_id for c, ok in zip(instance.cities, np.isfinite(pts).all(axis=1)) if not ok]
            raise InvalidInstance(f"Non-finite coordinates for cities: {bad}")

    def solve(self, instance: TourInstance) -> TourResult:
        self.validate(instance)
        cities = instance.cities
        if len(cities) <= 1:
            return TourResult(distance=0.0, order=tuple(cities))

        distances = build_distance_matrix(cities)

        # nearest-neighbour construction from the first city
        remaining = list(range(1, len(cities)))
        tour = [0]
        total = 0.0
        cur = 0
        while remaining:
            pos = nearest_index(cur, remaining, distances)
            nxt = remaining.pop(pos)
            total += float(distances[cur, nxt])
            tour.append(nxt)
            cur = nxt

        # close the loop
        total += float(distances[cur, 0])

        order = tuple(cities[i] for i in tour)
        _log.debug(
            "%s solved tour: n=%d distance=%.3f order=%s",
            self.name, len(cities), total, [c.city_id for c in order],
        )
        return TourResult(distance=total, order=order)


def solve_tour(cities: list[City] | tuple[City, ...]) -> TourResult:
    """Nearest-neighbour closed tour starting at ``cities[0]``."""
    return TourSolver().solve(TourInstance(cities=tuple(cities)))
