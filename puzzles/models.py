"""
Domain models shared across the puzzle core.

Every domain concept (Item, City, the two instance types, solver results,
the explanation payload and the score report) lives here so that solvers,
the score engine, sessions and the review figures all speak the same
language.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from puzzles.config import RATING_BANDS


# -- knapsack item -------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Item:
    item_id: str
    name: str
    value: int
    weight: int

    @property
    def ratio(self) -> float:
        """Value per unit weight; weightless items with value rank first."""
        if self.weight == 0:
            return float("inf") if self.value > 0 else 0.0
        return self.value / self.weight


# -- tour city -----------------------------------------------------------
@dataclass(frozen=True, slots=True)
class City:
    city_id: str
    name: str
    x: float
    y: float

    @property
    def coords(self) -> tuple[float, float]:
        return (self.x, self.y)


# -- problem instances ---------------------------------------------------
@dataclass(frozen=True)
class KnapsackInstance:
    items: tuple[Item, ...]
    capacity: int

    @property
    def num_items(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class TourInstance:
    cities: tuple[City, ...]

    @property
    def num_cities(self) -> int:
        return len(self.cities)

    @property
    def start(self) -> City | None:
        return self.cities[0] if self.cities else None


# -- solver results ------------------------------------------------------
@dataclass(frozen=True)
class KnapsackResult:
    """Optimal value plus one subset that achieves it.

    ``table`` is the filled DP table viewed as ``(n + 1, capacity + 1)``;
    it is kept for review output and ignored by equality.
    """

    max_value: int
    items: tuple[Item, ...]
    table: np.ndarray | None = field(default=None, repr=False, compare=False)

    def __iter__(self) -> Iterator:
        yield self.max_value
        yield list(self.items)

    @property
    def total_weight(self) -> int:
        return sum(it.weight for it in self.items)

    @property
    def item_ids(self) -> list[str]:
        return [it.item_id for it in self.items]


@dataclass(frozen=True)
class TourResult:
    """Closed tour length (return edge included) and the visiting order."""

    distance: float
    order: tuple[City, ...]

    def __iter__(self) -> Iterator:
        yield self.distance
        yield list(self.order)

    @property
    def city_sequence(self) -> list[str]:
        return [c.name for c in self.order]


# -- explanation payload -------------------------------------------------
@dataclass(frozen=True)
class Explanation:
    title: str
    algorithm: str
    steps: tuple[str, ...]
    complexity: str
    tips: tuple[str, ...]


# -- score report --------------------------------------------------------
@dataclass(frozen=True)
class ScoreReport:
    """Everything the results screen needs after a submission."""

    game: str
    score: int
    efficiency: float
    mistakes: int
    hints_used: int
    user_value: float
    optimal_value: float
    explanation: Explanation
    user_solution: tuple = ()
    optimal_solution: tuple = ()

    @property
    def efficiency_pct(self) -> float:
        return self.efficiency * 100.0

    @property
    def rating(self) -> tuple[str, int]:
        """(label, stars) for the first rating band the score reaches."""
        for threshold, label, stars in RATING_BANDS:
            if self.score >= threshold:
                return label, stars
        _, label, stars = RATING_BANDS[-1]
        return label, stars
