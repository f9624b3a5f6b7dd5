"""
Console output and tabular views of puzzle results.

Views
-----
  report_frame          -- one row per ScoreReport (score, efficiency, penalties)
  knapsack_table_frame  -- the filled DP table, rows = items, columns = weight limit
"""

from __future__ import annotations

import pandas as pd

from puzzles.config import DISTANCE_UNIT, KNAPSACK, VALUE_UNIT
from puzzles.models import Item, KnapsackResult, ScoreReport

# -- console helpers -----------------------------------------------------


def banner(title: str, width: int = 72) -> None:
    print("\n" + "=" * width)
    print(f"  {title}")
    print("=" * width)


def _fmt_amount(game: str, amount: float) -> str:
    if game == KNAPSACK:
        return f"{amount:,.0f} {VALUE_UNIT}"
    return f"{amount:,.2f} {DISTANCE_UNIT}"


def _solution_names(solution) -> str:
    return " -> ".join(getattr(el, "name", str(el)) for el in solution) or "--"


def print_report(report: ScoreReport) -> None:
    label, stars = report.rating
    ex = report.explanation

    banner(f"{report.game.upper()} -- RESULTS")
    print(f"  Score                : {report.score:>6d}  {'*' * stars} {label}")
    print(f"  Efficiency           : {report.efficiency_pct:>9.1f} %")
    print(f"  Mistakes             : {report.mistakes:>6d}")
    print(f"  Hints used           : {report.hints_used:>6d}")
    print(f"  Your result          : {_fmt_amount(report.game, report.user_value)}")
    print(f"  Reference result     : {_fmt_amount(report.game, report.optimal_value)}")
    print(f"  Your solution        : {_solution_names(report.user_solution)}")
    print(f"  Reference solution   : {_solution_names(report.optimal_solution)}")

    banner(ex.title)
    print(f"  Algorithm  : {ex.algorithm}")
    print(f"  Complexity : {ex.complexity}")
    print("\n  Steps")
    for i, step in enumerate(ex.steps, 1):
        print(f"    {i}. {step}")
    print("\n  Tips")
    for tip in ex.tips:
        print(f"    - {tip}")

    print("\n" + "=" * 72)


# -- tabular views -------------------------------------------------------


def report_frame(reports: list[ScoreReport]) -> pd.DataFrame:
    rows = []
    for r in reports:
        label, stars = r.rating
        rows.append(
            {
                "game": r.game,
                "score": r.score,
                "rating": label,
                "stars": stars,
                "efficiency_pct": round(r.efficiency_pct, 1),
                "user_value": r.user_value,
                "optimal_value": r.optimal_value,
                "hints_used": r.hints_used,
                "mistakes": r.mistakes,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "game", "score", "rating", "stars", "efficiency_pct",
            "user_value", "optimal_value", "hints_used", "mistakes",
        ],
    )


def knapsack_table_frame(items, result: KnapsackResult) -> pd.DataFrame:
    """DP table as a DataFrame; row 0 is the empty prefix."""
    if result.table is None:
        raise ValueError("KnapsackResult carries no DP table")
    index = ["(none)"] + [it.name for it in items]
    frame = pd.DataFrame(result.table, index=index)
    frame.columns.name = "weight_limit"
    frame.index.name = "items_considered"
    return frame


def chosen_items_frame(items: list[Item] | tuple[Item, ...], result: KnapsackResult) -> pd.DataFrame:
    """Every item with its ratio and whether the reference solution took it."""
    chosen = set(result.item_ids)
    frame = pd.DataFrame(
        [
            {
                "item_id": it.item_id,
                "name": it.name,
                "value": it.value,
                "weight": it.weight,
                "ratio": it.ratio,
                "chosen": it.item_id in chosen,
            }
            for it in items
        ],
        columns=["item_id", "name", "value", "weight", "ratio", "chosen"],
    )
    return frame.set_index("item_id")
