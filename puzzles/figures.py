"""
Plotly figure factories for reviewing a finished puzzle.

Every function returns a ``go.Figure`` styled with the shared palette:
cream plot background, horizontal grid only, left-aligned legends.
Figures are only built here; showing or exporting them is up to the caller.
"""

from __future__ import annotations

import plotly.graph_objects as go

from puzzles.config import DISTANCE_UNIT, MAX_SCORE, RATING_BANDS
from puzzles.distance import coordinates, path_length
from puzzles.models import KnapsackResult, ScoreReport

# -- Palette
_NAVY    = "#00263A"
_GOLD    = "#D4A843"
_GREEN   = "#4A7C59"
_CRIMSON = "#C8102E"
_SKY     = "#5B9BD5"
_WHEAT   = "#E8D5B7"
_SLATE   = "#6B7B8D"
_CREAM   = "#FAF7F2"
_LGREY   = "#E5E5E5"
_DTXT    = "#2D2D2D"
_WHITE   = "#FFFFFF"

# Base layout
_LAYOUT = dict(
    font=dict(family="Segoe UI, Helvetica Neue, Arial", size=13, color=_DTXT),
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor=_CREAM,
    margin=dict(l=60, r=30, t=50, b=50),
    hoverlabel=dict(bgcolor="white", font_size=12, bordercolor=_NAVY),
    legend=dict(
        orientation="h", yanchor="bottom", y=1.02,
        xanchor="left", x=0,
        bgcolor="rgba(0,0,0,0)", font=dict(size=11, color=_SLATE),
    ),
)


def _apply(fig: go.Figure, *, show_grid: bool = True) -> go.Figure:
    """Apply the shared styling to any figure."""
    fig.update_layout(**_LAYOUT)
    y_grid = _LGREY if show_grid else "rgba(0,0,0,0)"
    fig.update_xaxes(
        showgrid=False, linecolor=_NAVY, linewidth=1.5,
        ticks="outside", tickcolor=_NAVY,
        zeroline=False,
        tickfont=dict(color=_SLATE, size=11),
        title_font=dict(color=_NAVY, size=12, family="Segoe UI"),
    )
    fig.update_yaxes(
        showgrid=show_grid, gridcolor=y_grid, gridwidth=0.5,
        linecolor=_NAVY, linewidth=0,
        ticks="", zeroline=False,
        tickfont=dict(color=_SLATE, size=11),
        title_font=dict(color=_NAVY, size=12, family="Segoe UI"),
    )
    return fig


def _hex_to_rgba(hex_color: str, alpha: float = 0.12) -> str:
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"


# -- 1. Tour map


def _axis_range(cities, axis: int, pad: float = 0.08) -> list[float]:
    """Bounds that hold every city on ``axis``, with a margin for labels."""
    if not cities:
        return [0.0, 100.0]
    pts = coordinates(cities)[:, axis]
    lo, hi = float(pts.min()), float(pts.max())
    margin = max(hi - lo, 1.0) * pad
    return [lo - margin, hi + margin]


def tour_figure(cities, user_order=(), reference_order=()) -> go.Figure:
    """City map with the player's tour and the reference tour as closed loops."""
    fig = go.Figure()

    for order, label, col, dash in (
        (reference_order, "Reference", _GOLD, "dash"),
        (user_order, "Your tour", _NAVY, "solid"),
    ):
        if len(order) < 2:
            continue
        loop = [*order, order[0]]
        fig.add_trace(go.Scatter(
            x=[c.x for c in loop], y=[c.y for c in loop],
            mode="lines",
            line=dict(width=3, color=col, dash=dash),
            name=f"{label} ({path_length(order):,.1f} {DISTANCE_UNIT})",
            hoverinfo="skip",
        ))

    start_id = cities[0].city_id if cities else None
    fig.add_trace(go.Scatter(
        x=[c.x for c in cities], y=[c.y for c in cities],
        mode="markers+text",
        marker=dict(
            size=[16 if c.city_id == start_id else 11 for c in cities],
            color=[_CRIMSON if c.city_id == start_id else _SKY for c in cities],
            line=dict(width=1.5, color=_WHITE),
        ),
        text=[c.name for c in cities],
        textposition="top center",
        name="Cities",
        hovertemplate="<b>%{text}</b><br>(%{x}, %{y})<extra></extra>",
    ))
    fig.update_layout(
        height=460,
        xaxis=dict(title="", range=_axis_range(cities, 0)),
        yaxis=dict(title="", range=_axis_range(cities, 1), scaleanchor="x"),
    )
    return _apply(fig, show_grid=False)


# -- 2. DP table heatmap


def knapsack_table_figure(items, result: KnapsackResult) -> go.Figure:
    """Heatmap of the DP table: best value per (items considered, weight limit)."""
    if result.table is None:
        raise ValueError("KnapsackResult carries no DP table")

    table = result.table
    rows = ["(none)"] + [it.name for it in items]
    cols = list(range(table.shape[1]))

    fig = go.Figure(go.Heatmap(
        z=table.tolist(), x=cols, y=rows,
        colorscale=[
            [0, _CREAM], [0.25, _WHEAT],
            [0.5, _GOLD], [0.75, _NAVY], [1.0, _CRIMSON],
        ],
        colorbar=dict(
            title=dict(text="Value", font=dict(size=10, color=_SLATE)),
            tickfont=dict(size=9, color=_SLATE),
            thickness=12, len=0.6, borderwidth=0,
        ),
        hovertemplate="<b>%{y}</b><br>limit %{x}<br>best %{z:,.0f}<extra></extra>",
        xgap=2, ygap=2,
    ))
    fig.update_layout(
        height=max(280, len(rows) * 45),
        xaxis=dict(title="Weight limit", side="top"),
        yaxis=dict(title="", autorange="reversed"),
    )
    return _apply(fig, show_grid=False)


# -- 3. Score gauge


def score_gauge(report: ScoreReport) -> go.Figure:
    """Gauge chart -- final score against the rating bands."""
    label, _stars = report.rating
    band_cols = [_GREEN, _GREEN, _SKY, _GOLD, _CRIMSON]

    thresholds = [t for t, _, _ in RATING_BANDS]
    steps = []
    upper = MAX_SCORE
    for lo, col in zip(thresholds, band_cols):
        steps.append(dict(range=[lo, upper], color=_hex_to_rgba(col, 0.18)))
        upper = lo

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=report.score,
        number=dict(font=dict(size=36, color=_NAVY)),
        gauge=dict(
            axis=dict(range=[0, max(MAX_SCORE, report.score)],
                      tickfont=dict(size=10, color=_SLATE)),
            bar=dict(color=_NAVY),
            bgcolor=_CREAM,
            borderwidth=1,
            bordercolor=_LGREY,
            steps=steps,
        ),
        title=dict(text=label, font=dict(size=14, color=_SLATE)),
    ))
    fig.update_layout(height=280, margin=dict(l=30, r=30, t=50, b=20))
    return _apply(fig, show_grid=False)
