"""
Centralised configuration for the optimisation puzzles.

Keeps every scoring constant, rating band and reference dataset (the
bundled difficulty tiers) in one place so the rest of the codebase stays
clean.  Everything here is plain constant data: it is read at import time
and never mutated afterwards.
"""

from __future__ import annotations

# -- game kinds ----------------------------------------------------------
KNAPSACK = "knapsack"
TOUR = "tour"
GAME_KINDS: tuple[str, ...] = (KNAPSACK, TOUR)

# -- scoring -------------------------------------------------------------
MAX_SCORE: int = 1_000  # score for matching the reference exactly
HINT_PENALTY: int = 50  # per hint requested
MISTAKE_PENALTY: int = 25  # per over-capacity add / rejected revisit

# (threshold, label, stars) -- first band whose threshold is met wins
RATING_BANDS: tuple[tuple[int, str, int], ...] = (
    (900, "Perfect!", 3),
    (700, "Excellent!", 3),
    (500, "Good!", 2),
    (300, "Fair", 2),
    (0, "Keep Trying!", 1),
)

# -- display units -------------------------------------------------------
VALUE_UNIT = "gold"
WEIGHT_UNIT = "kg"
DISTANCE_UNIT = "leagues"

# -- difficulty tiers ----------------------------------------------------
DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")

# item rows: (id, name, value, weight)
KNAPSACK_LEVELS: dict[str, dict] = {
    "easy": {
        "capacity": 15,
        "items": (
            ("1", "Ruby Ring", 100, 1),
            ("2", "Gold Coin", 60, 2),
            ("3", "Silver Chalice", 120, 4),
            ("4", "Magic Scroll", 80, 3),
        ),
    },
    "medium": {
        "capacity": 20,
        "items": (
            ("1", "Diamond Sword", 200, 5),
            ("2", "Golden Crown", 180, 4),
            ("3", "Ancient Rune", 150, 3),
            ("4", "Mystic Orb", 120, 2),
            ("5", "Emerald Necklace", 160, 4),
            ("6", "Crystal Wand", 90, 2),
        ),
    },
    "hard": {
        "capacity": 25,
        "items": (
            ("1", "Legendary Armor", 300, 8),
            ("2", "Phoenix Feather", 250, 1),
            ("3", "Dragon Scale", 220, 6),
            ("4", "Elven Bow", 180, 4),
            ("5", "Mithril Chain", 200, 5),
            ("6", "Spell Tome", 160, 3),
            ("7", "Holy Grail", 280, 7),
            ("8", "Star Fragment", 150, 2),
        ),
    },
}

# city rows: (id, name, x, y) -- the first city is the tour's start
TOUR_LEVELS: dict[str, tuple[tuple[str, str, float, float], ...]] = {
    "easy": (
        ("1", "Startholm", 50.0, 50.0),
        ("2", "Midgarde", 80.0, 30.0),
        ("3", "Nordheim", 70.0, 80.0),
        ("4", "Westport", 30.0, 70.0),
    ),
    "medium": (
        ("1", "Capital", 60.0, 40.0),
        ("2", "Eastport", 90.0, 60.0),
        ("3", "Northwatch", 50.0, 20.0),
        ("4", "Southgate", 40.0, 90.0),
        ("5", "Westwind", 20.0, 50.0),
    ),
    "hard": (
        ("1", "Dragonspire", 50.0, 50.0),
        ("2", "Ironhold", 80.0, 30.0),
        ("3", "Frostpeak", 60.0, 20.0),
        ("4", "Goldenhaven", 90.0, 70.0),
        ("5", "Shadowmere", 30.0, 80.0),
        ("6", "Stormwind", 20.0, 40.0),
    ),
}
