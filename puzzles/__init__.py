"""Knapsack and tour optimisation puzzles: reference solvers and scoring."""

from puzzles.errors import (
    DuplicateCityInPath,
    InvalidInstance,
    PuzzleError,
    SubmitNotAllowed,
    UnknownLevel,
)
from puzzles.models import (
    City,
    Explanation,
    Item,
    KnapsackInstance,
    KnapsackResult,
    ScoreReport,
    TourInstance,
    TourResult,
)
from puzzles.scoring import score
from puzzles.solvers import solve_knapsack, solve_tour

__all__ = [
    "City",
    "DuplicateCityInPath",
    "Explanation",
    "InvalidInstance",
    "Item",
    "KnapsackInstance",
    "KnapsackResult",
    "PuzzleError",
    "ScoreReport",
    "SubmitNotAllowed",
    "TourInstance",
    "TourResult",
    "UnknownLevel",
    "score",
    "solve_knapsack",
    "solve_tour",
]
