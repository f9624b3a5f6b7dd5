"""Instance generators and a brute-force reference shared by the solver tests."""

from __future__ import annotations

import random
from itertools import combinations

from puzzles.models import City, Item


def brute_force_knapsack(items, capacity):
    """Best value over every subset whose weight fits ``capacity``."""
    best = 0
    for r in range(len(items) + 1):
        for combo in combinations(items, r):
            if sum(it.weight for it in combo) <= capacity:
                best = max(best, sum(it.value for it in combo))
    return best


def random_items(rng: random.Random, n: int) -> list[Item]:
    return [
        Item(item_id=str(i), name=f"item-{i}", value=rng.randint(0, 100), weight=rng.randint(0, 10))
        for i in range(n)
    ]


def random_cities(rng: random.Random, n: int) -> list[City]:
    return [
        City(city_id=str(i), name=f"city-{i}", x=rng.uniform(0, 100), y=rng.uniform(0, 100))
        for i in range(n)
    ]
