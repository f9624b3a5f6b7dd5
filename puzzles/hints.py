"""
Hint engine.

Knapsack hints point at the unselected item with the best value-to-weight
ratio; tour hints point at the nearest unvisited city from where the player
currently stands.  Both are greedy suggestions, not guaranteed optimal moves.
"""

from __future__ import annotations

from puzzles.config import VALUE_UNIT, WEIGHT_UNIT
from puzzles.distance import euclidean
from puzzles.models import City, Item


def knapsack_hint(items, selected) -> Item | None:
    """Best-ratio item not yet selected (first one wins a tie)."""
    taken = {it.item_id for it in selected}
    best: Item | None = None
    for it in items:
        if it.item_id in taken:
            continue
        if best is None or it.ratio > best.ratio:
            best = it
    return best


def tour_hint(cities, visited) -> City | None:
    """Nearest unvisited city from the last visited one (first wins a tie)."""
    if not visited:
        return None
    last = visited[-1]
    seen = {c.city_id for c in visited}
    best: City | None = None
    best_d = float("inf")
    for c in cities:
        if c.city_id in seen:
            continue
        d = euclidean(last.coords, c.coords)
        if d < best_d:
            best, best_d = c, d
    return best


def knapsack_hint_message(item: Item | None) -> str:
    if item is None:
        return "Hint: Every item is already in your bag."
    return (
        f"Hint: Consider the {item.name} "
        f"({item.value} {VALUE_UNIT}, {item.weight}{WEIGHT_UNIT})"
    )


def tour_hint_message(city: City | None, *, started: bool) -> str:
    if not started:
        return "Hint: Start with any city - they're all equally good starting points!"
    if city is None:
        return "Hint: Every city has been visited. Submit to close the loop."
    return f"Hint: The nearest unvisited city is {city.name}"
