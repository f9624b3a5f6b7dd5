"""
Exact 0/1 knapsack by dynamic programming.

The table ``T[i][w]`` holds the best value reachable with the first ``i``
items under weight limit ``w``.  It lives in one flat integer arena of
``(n + 1) * (capacity + 1)`` cells; row ``i`` occupies the slice
``[i * width, (i + 1) * width)``.  Each row is filled with a single
vectorised ``np.maximum`` over the weight axis:

    T[i][w] = T[i-1][w]                                   if w_i > w
    T[i][w] = max(T[i-1][w], T[i-1][w - w_i] + v_i)       otherwise

The optimal subset is recovered by walking the rows bottom-up: whenever
``T[i][w] != T[i-1][w]`` item ``i`` was taken.  When several subsets tie,
the later item is skipped whenever skipping it keeps the same value, so the
subset is deterministic but not canonical; only the optimal value is
meaningful.
"""

from __future__ import annotations

import logging
from numbers import Integral

import numpy as np

from puzzles.config import KNAPSACK
from puzzles.errors import InvalidInstance
from puzzles.models import Item, KnapsackInstance, KnapsackResult
from puzzles.solvers.base import BaseSolver

_log = logging.getLogger(__name__)


def _is_count(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and value >= 0


class KnapsackSolver(BaseSolver):
    name = "dynamic_programming"
    game = KNAPSACK

    def validate(self, instance: KnapsackInstance) -> None:
        if not _is_count(instance.capacity):
            raise InvalidInstance(
                f"capacity must be a non-negative integer, got {instance.capacity!r}"
            )
        seen: set[str] = set()
        for it in instance.items:
            if it.item_id in seen:
                raise InvalidInstance(f"Duplicate item id: '{it.item_id}'")
            seen.add(it.item_id)
            if not _is_count(it.weight):
                raise InvalidInstance(
                    f"Item[{it.item_id}] weight must be a non-negative integer, "
                    f"got {it.weight!r}"
                )
            if not _is_count(it.value):
                raise InvalidInstance(
                    f"Item[{it.item_id}] value must be a non-negative integer, "
                    f"got {it.value!r}"
                )

    def solve(self, instance: KnapsackInstance) -> KnapsackResult:
        self.validate(instance)
        items = instance.items
        capacity = int(instance.capacity)
        n = len(items)

        table = self._fill_table(items, capacity)
        chosen = self._backtrack(items, capacity, table)
        width = capacity + 1
        max_value = int(table[n * width + capacity])

        _log.debug(
            "%s solved knapsack: n=%d capacity=%d max_value=%d chosen=%s",
            self.name, n, capacity, max_value, [it.item_id for it in chosen],
        )
        return KnapsackResult(
            max_value=max_value,
            items=tuple(chosen),
            table=table.reshape(n + 1, width),
        )

    # -- table fill ------------------------------------------------------

    @staticmethod
    def _fill_table(items: tuple[Item, ...], capacity: int) -> np.ndarray:
        width = capacity + 1
        table = np.zeros((len(items) + 1) * width, dtype=np.int64)

        for i, it in enumerate(items, 1):
            prev = table[(i - 1) * width : i * width]
            row = table[i * width : (i + 1) * width]
            row[:] = prev
            wt = int(it.weight)
            if wt <= capacity:
                row[wt:] = np.maximum(prev[wt:], prev[: width - wt] + int(it.value))
        return table

    # -- backtrack -------------------------------------------------------

    @staticmethod
    def _backtrack(
        items: tuple[Item, ...],
        capacity: int,
        table: np.ndarray,
    ) -> list[Item]:
        width = capacity + 1
        w = capacity
        chosen: list[Item] = []
        for i in range(len(items), 0, -1):
            if table[i * width + w] != table[(i - 1) * width + w]:
                chosen.append(items[i - 1])
                w -= items[i - 1].weight
        chosen.reverse()
        return chosen


def solve_knapsack(items, capacity: int) -> KnapsackResult:
    """Maximum value within ``capacity`` and one subset achieving it."""
    return KnapsackSolver().solve(KnapsackInstance(items=tuple(items), capacity=capacity))
