"""Reference solvers for the knapsack and tour puzzles."""

from puzzles.solvers.base import BaseSolver
from puzzles.solvers.knapsack import KnapsackSolver, solve_knapsack
from puzzles.solvers.tour import TourSolver, solve_tour

__all__ = [
    "BaseSolver",
    "KnapsackSolver",
    "TourSolver",
    "solve_knapsack",
    "solve_tour",
]
