"""
Static explanation payloads shown on the results screen, one per game.
"""

from __future__ import annotations

from puzzles.config import GAME_KINDS, KNAPSACK, TOUR
from puzzles.models import Explanation

KNAPSACK_EXPLANATION = Explanation(
    title="Knapsack Algorithm Explanation",
    algorithm="Dynamic Programming",
    steps=(
        "Create a table where dp[i][w] represents the maximum value using "
        "first i items with weight limit w",
        "For each item, decide whether to include it or not based on maximum value",
        "If item weight ≤ current capacity, choose max of (include item, exclude item)",
        "Backtrack through table to find which items give optimal solution",
    ),
    complexity="Time: O(n×W), Space: O(n×W) where n = items, W = capacity",
    tips=(
        "Items with high value-to-weight ratio are often good choices",
        "Sometimes leaving space for multiple smaller valuable items is better",
        "Dynamic programming guarantees optimal solution unlike greedy approaches",
    ),
)

TOUR_EXPLANATION = Explanation(
    title="Traveling Salesman Problem Explanation",
    algorithm="Nearest Neighbor Heuristic",
    steps=(
        "Start at any city (all starting points are equivalent for this heuristic)",
        "From current city, move to the nearest unvisited city",
        "Repeat until all cities are visited",
        "Return to the starting city to complete the tour",
    ),
    complexity="Time: O(n²), Space: O(n) where n = number of cities",
    tips=(
        "Nearest neighbor gives good results quickly but isn't always optimal",
        "For small instances, try different starting cities to compare results",
        "Exact algorithms like dynamic programming guarantee optimality but are slower",
        "Real-world TSP often uses more sophisticated heuristics and optimizations",
    ),
)

_BY_GAME: dict[str, Explanation] = {
    KNAPSACK: KNAPSACK_EXPLANATION,
    TOUR: TOUR_EXPLANATION,
}


def explanation_for(game: str) -> Explanation:
    try:
        return _BY_GAME[game]
    except KeyError:
        raise ValueError(
            f"Unknown game kind: {game!r}. Expected one of: {', '.join(GAME_KINDS)}."
        ) from None
