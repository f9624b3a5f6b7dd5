"""
Level catalogue: turns the raw difficulty tables in ``config`` into
immutable puzzle instances.

Exposes one loader per game, the easy -> medium -> hard progression and a
pandas summary of every bundled level with its reference solution.
"""

from __future__ import annotations

import pandas as pd

from puzzles.config import DIFFICULTIES, KNAPSACK, KNAPSACK_LEVELS, TOUR, TOUR_LEVELS
from puzzles.errors import UnknownLevel
from puzzles.models import City, Item, KnapsackInstance, TourInstance
from puzzles.solvers import solve_knapsack, solve_tour

# -- helpers -------------------------------------------------------------


def _check(difficulty: str) -> str:
    key = str(difficulty).strip().lower()
    if key not in DIFFICULTIES:
        raise UnknownLevel(
            f"Unknown difficulty: {difficulty!r}. Expected one of: {', '.join(DIFFICULTIES)}."
        )
    return key


# -- loaders -------------------------------------------------------------


def knapsack_level(difficulty: str) -> KnapsackInstance:
    raw = KNAPSACK_LEVELS[_check(difficulty)]
    items = tuple(
        Item(item_id=iid, name=name, value=value, weight=weight)
        for iid, name, value, weight in raw["items"]
    )
    return KnapsackInstance(items=items, capacity=raw["capacity"])


def tour_level(difficulty: str) -> TourInstance:
    rows = TOUR_LEVELS[_check(difficulty)]
    cities = tuple(City(city_id=cid, name=name, x=x, y=y) for cid, name, x, y in rows)
    return TourInstance(cities=cities)


def next_difficulty(difficulty: str) -> str | None:
    """The tier after ``difficulty``, or None once the hardest is reached."""
    idx = DIFFICULTIES.index(_check(difficulty))
    return DIFFICULTIES[idx + 1] if idx + 1 < len(DIFFICULTIES) else None


# -- summary table -------------------------------------------------------


def catalogue_frame() -> pd.DataFrame:
    """One row per (game, difficulty) with its size and reference result."""
    rows = []
    for difficulty in DIFFICULTIES:
        ks = knapsack_level(difficulty)
        ks_ref = solve_knapsack(ks.items, ks.capacity)
        rows.append(
            {
                "game": KNAPSACK,
                "difficulty": difficulty,
                "elements": ks.num_items,
                "capacity": ks.capacity,
                "reference": float(ks_ref.max_value),
                "reference_solution": ", ".join(it.name for it in ks_ref.items),
            }
        )
    for difficulty in DIFFICULTIES:
        tr = tour_level(difficulty)
        tr_ref = solve_tour(tr.cities)
        rows.append(
            {
                "game": TOUR,
                "difficulty": difficulty,
                "elements": tr.num_cities,
                "capacity": pd.NA,
                "reference": round(tr_ref.distance, 2),
                "reference_solution": " -> ".join(tr_ref.city_sequence),
            }
        )
    return pd.DataFrame(rows).set_index(["game", "difficulty"])
