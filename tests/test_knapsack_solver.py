import numpy as np
import pytest

from puzzles.errors import InvalidInstance
from puzzles.levels import knapsack_level
from puzzles.models import Item, KnapsackInstance
from puzzles.solvers import KnapsackSolver, solve_knapsack
from tests.helpers import brute_force_knapsack, random_items


def test_single_item_fits_exactly():
    gem = Item(item_id="1", name="Gem", value=100, weight=1)

    value, chosen = solve_knapsack([gem], 1)

    assert value == 100
    assert chosen == [gem]


def test_easy_level_takes_every_item(easy_knapsack):
    result = solve_knapsack(easy_knapsack.items, easy_knapsack.capacity)

    # all four treasures weigh 10 <= 15, so the optimum is unique
    assert result.max_value == 360
    assert result.total_weight == 10
    assert result.item_ids == ["1", "2", "3", "4"]


def test_medium_and_hard_levels_match_brute_force():
    for difficulty, expected in (("medium", 900), ("hard", 1320)):
        level = knapsack_level(difficulty)
        result = solve_knapsack(level.items, level.capacity)
        assert result.max_value == expected
        assert result.max_value == brute_force_knapsack(level.items, level.capacity)
        assert result.total_weight <= level.capacity


def test_random_instances_match_brute_force(rng):
    for _ in range(150):
        items = random_items(rng, rng.randint(0, 9))
        capacity = rng.randint(0, 25)

        result = solve_knapsack(items, capacity)

        assert result.max_value == brute_force_knapsack(items, capacity)
        assert result.total_weight <= capacity
        assert sum(it.value for it in result.items) == result.max_value
        assert len(set(result.item_ids)) == len(result.items)


def test_twelve_items_match_brute_force(rng):
    items = random_items(rng, 12)

    result = solve_knapsack(items, 30)

    assert result.max_value == brute_force_knapsack(items, 30)


def test_zero_capacity_returns_empty_selection(easy_knapsack):
    value, chosen = solve_knapsack(easy_knapsack.items, 0)

    assert value == 0
    assert chosen == []


def test_weightless_items_are_always_taken():
    feather = Item(item_id="f", name="Feather", value=50, weight=0)
    anvil = Item(item_id="a", name="Anvil", value=10, weight=3)

    for capacity in (0, 2, 5):
        result = solve_knapsack([feather, anvil], capacity)
        assert feather in result.items
    assert solve_knapsack([feather, anvil], 0).max_value == 50
    assert solve_knapsack([feather, anvil], 5).max_value == 60


def test_empty_item_list():
    result = solve_knapsack([], 10)

    assert result.max_value == 0
    assert result.items == ()
    assert result.table.shape == (1, 11)


def test_table_has_item_rows_and_weight_columns(easy_knapsack):
    result = solve_knapsack(easy_knapsack.items, easy_knapsack.capacity)

    assert result.table.shape == (5, 16)
    assert not result.table[0].any()
    assert result.table[-1, -1] == result.max_value
    # rows never decrease along the weight axis
    assert (np.diff(result.table, axis=1) >= 0).all()


def test_inputs_are_not_mutated(easy_knapsack):
    items = list(easy_knapsack.items)
    before = list(items)

    solve_knapsack(items, 7)

    assert items == before


def test_repeated_solves_are_identical(rng):
    items = random_items(rng, 8)

    first = solve_knapsack(items, 17)
    second = solve_knapsack(items, 17)

    assert first == second
    assert first.item_ids == second.item_ids


def test_backtrack_skips_the_later_of_two_equal_items():
    twins = [
        Item(item_id="1", name="Left Idol", value=10, weight=2),
        Item(item_id="2", name="Right Idol", value=10, weight=2),
    ]

    result = solve_knapsack(twins, 2)

    # item 2 is examined first and T[2][2] == T[1][2], so it is skipped
    assert result.max_value == 10
    assert result.item_ids == ["1"]


def test_backtrack_tie_across_different_subsets():
    items = [
        Item(item_id="a", name="Pair A", value=5, weight=1),
        Item(item_id="b", name="Pair B", value=5, weight=1),
        Item(item_id="c", name="Crown", value=10, weight=2),
    ]

    result = solve_knapsack(items, 2)

    assert result.max_value == 10
    assert result.item_ids == ["a", "b"]


@pytest.mark.parametrize(
    "items, capacity",
    [
        ([], -1),
        ([], 2.5),
        ([Item(item_id="1", name="Bad", value=10, weight=-2)], 5),
        ([Item(item_id="1", name="Bad", value=-10, weight=2)], 5),
        ([Item(item_id="1", name="Bad", value=10, weight=1.5)], 5),
        (
            [
                Item(item_id="1", name="Twin", value=1, weight=1),
                Item(item_id="1", name="Twin", value=2, weight=2),
            ],
            5,
        ),
    ],
)
def test_invalid_instances_are_rejected(items, capacity):
    with pytest.raises(InvalidInstance):
        solve_knapsack(items, capacity)


def test_invalid_instance_is_a_value_error():
    with pytest.raises(ValueError):
        KnapsackSolver().solve(KnapsackInstance(items=(), capacity=-3))


def test_numpy_integers_are_accepted():
    item = Item(item_id="1", name="Coin", value=np.int64(7), weight=np.int32(2))

    assert solve_knapsack([item], np.int64(2)).max_value == 7
