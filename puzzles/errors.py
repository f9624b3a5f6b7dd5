"""
Common exceptions for the puzzle core.
"""


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle core."""


class InvalidInstance(PuzzleError, ValueError):
    """Raised when a puzzle instance violates the solver's input contract."""


class DuplicateCityInPath(PuzzleError, ValueError):
    """Raised when a city is appended to a path that already contains it."""


class UnknownLevel(PuzzleError, KeyError):
    """Raised when a difficulty tier is not in the level catalogue."""


class SubmitNotAllowed(PuzzleError, ValueError):
    """Raised when a session is submitted before its attempt is complete."""
