import math

import numpy as np
import pytest

from puzzles.distance import build_distance_matrix, euclidean, nearest_index, path_length
from puzzles.errors import InvalidInstance
from puzzles.levels import tour_level
from puzzles.models import City
from puzzles.solvers import solve_tour
from tests.helpers import random_cities


def _manual_length(order):
    legs = [euclidean(a.coords, b.coords) for a, b in zip(order, order[1:])]
    return sum(legs) + euclidean(order[-1].coords, order[0].coords)


def test_easy_level_tour(easy_tour):
    distance, order = solve_tour(easy_tour.cities)

    # nearest to Startholm is Westport (28.28), then Nordheim, then Midgarde
    assert [c.name for c in order] == ["Startholm", "Westport", "Nordheim", "Midgarde"]
    assert round(distance, 2) == 156.56
    expected = math.sqrt(800) + math.sqrt(1700) + math.sqrt(2600) + math.sqrt(1300)
    assert distance == pytest.approx(expected)


def test_every_level_returns_a_permutation_with_matching_length():
    for difficulty in ("easy", "medium", "hard"):
        cities = tour_level(difficulty).cities

        result = solve_tour(cities)

        assert sorted(c.city_id for c in result.order) == sorted(c.city_id for c in cities)
        assert result.order[0] == cities[0]
        assert result.distance == pytest.approx(_manual_length(result.order))


def test_random_instances_are_permutations(rng):
    for _ in range(50):
        cities = random_cities(rng, rng.randint(2, 9))

        result = solve_tour(cities)

        assert len(result.order) == len(cities)
        assert len({c.city_id for c in result.order}) == len(cities)
        assert result.distance == pytest.approx(path_length(result.order))


def test_each_hop_goes_to_the_nearest_remaining_city(rng):
    cities = random_cities(rng, 8)

    order = solve_tour(cities).order

    for k in range(len(order) - 1):
        here = order[k]
        rest = order[k + 1:]
        nearest = min(euclidean(here.coords, c.coords) for c in rest)
        assert euclidean(here.coords, order[k + 1].coords) == pytest.approx(nearest)


def test_ties_go_to_the_first_listed_city():
    start = City(city_id="s", name="Start", x=0.0, y=0.0)
    east = City(city_id="e", name="East", x=1.0, y=0.0)
    north = City(city_id="n", name="North", x=0.0, y=1.0)

    assert solve_tour([start, east, north]).order == (start, east, north)
    assert solve_tour([start, north, east]).order == (start, north, east)
    assert solve_tour([start, east, north]).distance == pytest.approx(2 + math.sqrt(2))


def test_repeated_solves_are_identical(rng):
    cities = random_cities(rng, 7)

    first = solve_tour(cities)
    second = solve_tour(cities)

    assert first.order == second.order
    assert first.distance == second.distance


def test_trivial_instances():
    solo = City(city_id="1", name="Solo", x=3.0, y=4.0)

    assert tuple(solve_tour([])) == (0.0, [])
    distance, order = solve_tour([solo])
    assert distance == 0.0
    assert order == [solo]


def test_two_cities_go_there_and_back():
    a = City(city_id="a", name="A", x=0.0, y=0.0)
    b = City(city_id="b", name="B", x=3.0, y=4.0)

    assert solve_tour([a, b]).distance == pytest.approx(10.0)


def test_input_list_is_not_mutated(easy_tour):
    cities = list(easy_tour.cities)
    before = list(cities)

    solve_tour(cities)

    assert cities == before


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_coordinates_are_rejected(bad):
    cities = [
        City(city_id="1", name="Ok", x=0.0, y=0.0),
        City(city_id="2", name="Broken", x=bad, y=1.0),
    ]

    with pytest.raises(InvalidInstance, match="'2'"):
        solve_tour(cities)


def test_duplicate_city_ids_are_rejected():
    twin = City(city_id="1", name="Twin", x=0.0, y=0.0)

    with pytest.raises(InvalidInstance):
        solve_tour([twin, City(city_id="1", name="Twin", x=5.0, y=5.0)])


def test_distance_matrix_is_symmetric(easy_tour):
    m = build_distance_matrix(easy_tour.cities)

    assert m.shape == (4, 4)
    assert np.allclose(m, m.T)
    assert np.allclose(np.diag(m), 0.0)
    assert m[0, 3] == pytest.approx(math.sqrt(800))


def test_nearest_index_prefers_first_candidate_on_tie(easy_tour):
    m = build_distance_matrix(easy_tour.cities)

    # Midgarde and Nordheim are both sqrt(1300) from Startholm
    assert nearest_index(0, [1, 2], m) == 0
    assert nearest_index(0, [2, 1], m) == 0
    assert nearest_index(0, [1, 2, 3], m) == 2


def test_open_path_length(easy_tour):
    start, midgarde = easy_tour.cities[0], easy_tour.cities[1]

    assert path_length([start, midgarde], closed=False) == pytest.approx(math.sqrt(1300))
    assert path_length([start]) == 0.0
