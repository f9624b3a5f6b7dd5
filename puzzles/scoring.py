"""
Score engine -- compares a player's result with the reference result.

    knapsack efficiency = user_value / optimal_value      (higher is better)
    tour efficiency     = optimal_distance / user_distance  (lower is better)

    base  = round-half-up(efficiency x MAX_SCORE)
    score = max(0, base - HINT_PENALTY x hints - MISTAKE_PENALTY x mistakes)

A zero denominator yields efficiency 0 instead of an error.
"""

from __future__ import annotations

import logging
import math

from puzzles.config import (
    GAME_KINDS,
    HINT_PENALTY,
    KNAPSACK,
    MAX_SCORE,
    MISTAKE_PENALTY,
    TOUR,
)
from puzzles.explanations import explanation_for
from puzzles.models import ScoreReport

_log = logging.getLogger(__name__)


def efficiency(game: str, user: float, optimal: float) -> float:
    """Ratio of player outcome to reference outcome; 1.0 means a match."""
    if game == KNAPSACK:
        return user / optimal if optimal else 0.0
    if game == TOUR:
        return optimal / user if user else 0.0
    raise ValueError(f"Unknown game kind: {game!r}. Expected one of: {', '.join(GAME_KINDS)}.")


def penalty(hints_used: int, mistakes: int) -> int:
    if hints_used < 0 or mistakes < 0:
        raise ValueError(
            f"hints_used and mistakes must be >= 0, got {hints_used} and {mistakes}"
        )
    return HINT_PENALTY * hints_used + MISTAKE_PENALTY * mistakes


def live_score(hints_used: int, mistakes: int) -> int:
    """Running score shown while a puzzle is in progress."""
    return max(0, MAX_SCORE - penalty(hints_used, mistakes))


def score(
    game: str,
    user: float,
    optimal: float,
    hints_used: int = 0,
    mistakes: int = 0,
    *,
    user_solution=(),
    optimal_solution=(),
) -> ScoreReport:
    """Build the ScoreReport for one submission."""
    eff = efficiency(game, user, optimal)
    base = math.floor(eff * MAX_SCORE + 0.5)  # half-up
    final = max(0, base - penalty(hints_used, mistakes))

    _log.debug(
        "%s scored: user=%s optimal=%s efficiency=%.4f base=%d final=%d",
        game, user, optimal, eff, base, final,
    )
    return ScoreReport(
        game=game,
        score=final,
        efficiency=eff,
        mistakes=mistakes,
        hints_used=hints_used,
        user_value=user,
        optimal_value=optimal,
        explanation=explanation_for(game),
        user_solution=tuple(user_solution),
        optimal_solution=tuple(optimal_solution),
    )
