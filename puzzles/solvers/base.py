"""
Abstract solver interface.

Both puzzle solvers inherit from ``BaseSolver`` so the score engine and
the play sessions can ask for a reference solution without caring which
algorithm produced it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSolver(ABC):
    """Contract that every puzzle solver must satisfy."""

    name: str = "base"
    game: str = ""

    @abstractmethod
    def validate(self, instance) -> None:
        """Raise ``InvalidInstance`` if ``instance`` cannot be solved."""
        ...

    @abstractmethod
    def solve(self, instance):
        """Return the reference result for ``instance``."""
        ...
