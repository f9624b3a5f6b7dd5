from __future__ import annotations

import random

import pytest

from puzzles.levels import knapsack_level, tour_level


@pytest.fixture
def rng():
    return random.Random(20240611)


@pytest.fixture
def easy_knapsack():
    return knapsack_level("easy")


@pytest.fixture
def easy_tour():
    return tour_level("easy")


@pytest.fixture
def cities_by_name(easy_tour):
    return {c.name: c for c in easy_tour.cities}
