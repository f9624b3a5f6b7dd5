"""
Play sessions -- the caller-side state of one puzzle attempt.

A session tracks what the player has picked so far together with the hint
and mistake counters, and turns the attempt into a ScoreReport on submit.
Sessions are mutable and owned by a single player; the solvers and the
score engine they call stay pure.

Mistake rules
-------------
  - knapsack: every addition that pushes the bag above capacity counts one
    mistake.  The item is still added so players can explore.
  - tour: every attempt to revisit a city counts one mistake.  The attempt
    is rejected and the path is not extended.

Items and cities that are not part of the session's instance are refused
with InvalidInstance, and submitting before ``can_submit`` holds raises
SubmitNotAllowed.  Neither counts as a mistake.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from puzzles.config import KNAPSACK, TOUR
from puzzles.distance import euclidean
from puzzles.errors import DuplicateCityInPath, InvalidInstance, SubmitNotAllowed
from puzzles.hints import knapsack_hint, knapsack_hint_message, tour_hint, tour_hint_message
from puzzles.models import City, Item, KnapsackInstance, ScoreReport, TourInstance
from puzzles.scoring import live_score, score
from puzzles.solvers import solve_knapsack, solve_tour

_log = logging.getLogger(__name__)


# -- tour path -----------------------------------------------------------
@dataclass
class TourPath:
    """Append-only sequence of distinct cities with its running length."""

    cities: list[City] = field(default_factory=list)
    length: float = 0.0

    def __len__(self) -> int:
        return len(self.cities)

    def __contains__(self, city: City) -> bool:
        return any(c.city_id == city.city_id for c in self.cities)

    @property
    def last(self) -> City | None:
        return self.cities[-1] if self.cities else None

    def append(self, city: City) -> None:
        if city in self:
            raise DuplicateCityInPath(f"City '{city.name}' ({city.city_id}) is already on the path")
        if self.cities:
            self.length += euclidean(self.cities[-1].coords, city.coords)
        self.cities.append(city)

    def closed_length(self) -> float:
        """Running length plus the edge back to the start (needs 2+ cities)."""
        if len(self.cities) < 2:
            return self.length
        return self.length + euclidean(self.cities[-1].coords, self.cities[0].coords)

    def clear(self) -> None:
        self.cities.clear()
        self.length = 0.0


# -- knapsack session ----------------------------------------------------
@dataclass
class KnapsackSession:
    instance: KnapsackInstance
    selected: list[Item] = field(default_factory=list)
    mistakes: int = 0
    hints_used: int = 0
    hint_message: str = ""

    @property
    def current_weight(self) -> int:
        return sum(it.weight for it in self.selected)

    @property
    def current_value(self) -> int:
        return sum(it.value for it in self.selected)

    @property
    def over_capacity(self) -> bool:
        return self.current_weight > self.instance.capacity

    @property
    def can_submit(self) -> bool:
        return bool(self.selected)

    @property
    def live_score(self) -> int:
        return live_score(self.hints_used, self.mistakes)

    def is_selected(self, item: Item) -> bool:
        return any(s.item_id == item.item_id for s in self.selected)

    def toggle(self, item: Item) -> bool:
        """Add or remove ``item``; returns True when it ends up in the bag."""
        if item not in self.instance.items:
            raise InvalidInstance(f"Item '{item.name}' ({item.item_id}) is not part of this level")
        if self.is_selected(item):
            self.selected = [s for s in self.selected if s.item_id != item.item_id]
            return False

        if self.current_weight + item.weight > self.instance.capacity:
            self.mistakes += 1
            _log.info(
                "over capacity: adding %s brings weight to %d (limit %d)",
                item.item_id, self.current_weight + item.weight, self.instance.capacity,
            )
        self.selected.append(item)
        return True

    def hint(self) -> Item | None:
        self.hints_used += 1
        item = knapsack_hint(self.instance.items, self.selected)
        self.hint_message = knapsack_hint_message(item)
        _log.debug("knapsack hint #%d: %s", self.hints_used, self.hint_message)
        return item

    def reset(self) -> None:
        self.selected = []
        self.mistakes = 0
        self.hints_used = 0
        self.hint_message = ""

    def submit(self) -> ScoreReport:
        if not self.can_submit:
            raise SubmitNotAllowed("Pick at least one item before submitting")
        ref = solve_knapsack(self.instance.items, self.instance.capacity)
        report = score(
            KNAPSACK,
            self.current_value,
            ref.max_value,
            self.hints_used,
            self.mistakes,
            user_solution=self.selected,
            optimal_solution=ref.items,
        )
        _log.info(
            "knapsack submitted: value=%d optimal=%d score=%d",
            self.current_value, ref.max_value, report.score,
        )
        return report


# -- tour session --------------------------------------------------------
@dataclass
class TourSession:
    instance: TourInstance
    path: TourPath = field(default_factory=TourPath)
    mistakes: int = 0
    hints_used: int = 0
    hint_message: str = ""

    @property
    def visited(self) -> list[City]:
        return list(self.path.cities)

    @property
    def current_distance(self) -> float:
        return self.path.length

    @property
    def is_complete(self) -> bool:
        visited = {c.city_id for c in self.path.cities}
        return visited == {c.city_id for c in self.instance.cities}

    @property
    def can_submit(self) -> bool:
        return self.is_complete

    @property
    def live_score(self) -> int:
        return live_score(self.hints_used, self.mistakes)

    def visit(self, city: City) -> bool:
        """Extend the path with ``city``; a revisit is rejected as a mistake."""
        if city not in self.instance.cities:
            raise InvalidInstance(f"City '{city.name}' ({city.city_id}) is not part of this level")
        try:
            self.path.append(city)
        except DuplicateCityInPath as exc:
            self.mistakes += 1
            _log.warning("revisit rejected: %s", exc)
            return False
        return True

    def hint(self) -> City | None:
        self.hints_used += 1
        city = tour_hint(self.instance.cities, self.path.cities)
        self.hint_message = tour_hint_message(city, started=bool(self.path))
        _log.debug("tour hint #%d: %s", self.hints_used, self.hint_message)
        return city

    def reset(self) -> None:
        self.path.clear()
        self.mistakes = 0
        self.hints_used = 0
        self.hint_message = ""

    def submit(self) -> ScoreReport:
        if not self.can_submit:
            raise SubmitNotAllowed(
                f"Visit every city before submitting ({len(self.path)} of "
                f"{self.instance.num_cities} so far)"
            )
        ref = solve_tour(self.instance.cities)
        final_distance = self.path.closed_length()
        report = score(
            TOUR,
            final_distance,
            ref.distance,
            self.hints_used,
            self.mistakes,
            user_solution=self.path.cities,
            optimal_solution=ref.order,
        )
        _log.info(
            "tour submitted: distance=%.2f reference=%.2f score=%d",
            final_distance, ref.distance, report.score,
        )
        return report
