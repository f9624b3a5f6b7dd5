"""
Planar distance computations for the tour puzzle.

Builds a symmetric pairwise distance matrix (straight-line units) between
every city of an instance and measures open or closed paths through it.
"""

from __future__ import annotations

import math

import numpy as np

from puzzles.models import City

DistanceMatrix = np.ndarray


def euclidean(
    coord1: tuple[float, float],
    coord2: tuple[float, float],
) -> float:
    """Straight-line distance between two (x, y) pairs."""
    return math.sqrt((coord1[0] - coord2[0]) ** 2 + (coord1[1] - coord2[1]) ** 2)


def coordinates(cities: list[City] | tuple[City, ...]) -> np.ndarray:
    """Return an ``(n, 2)`` float array of city coordinates."""
    return np.array([(c.x, c.y) for c in cities], dtype=float).reshape(-1, 2)


def build_distance_matrix(cities: list[City] | tuple[City, ...]) -> DistanceMatrix:
    """
    Return an ``(n, n)`` matrix where ``m[i, j]`` is the Euclidean distance
    between ``cities[i]`` and ``cities[j]``.
    """
    pts = coordinates(cities)
    diff = pts[:, None, :] - pts[None, :, :]
    return np.sqrt((diff**2).sum(axis=-1))


def path_length(
    path: list[City] | tuple[City, ...],
    *,
    closed: bool = True,
) -> float:
    """Length of ``path``; ``closed`` adds the edge back to the first city."""
    if len(path) < 2:
        return 0.0
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += euclidean(a.coords, b.coords)
    if closed:
        total += euclidean(path[-1].coords, path[0].coords)
    return total


def nearest_index(
    origin: int,
    candidates: list[int],
    distances: DistanceMatrix,
) -> int:
    """
    Position within ``candidates`` of the city closest to ``origin``.

    Ties go to the earliest candidate (``np.argmin`` returns the first
    minimum).
    """
    return int(np.argmin(distances[origin, candidates]))
