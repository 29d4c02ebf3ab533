# stepsearch/problems/queens.py
# Incremental N-queens: a state is the tuple of queen columns for the rows filled so far.
from __future__ import annotations
from typing import Tuple

from ..core.problem import Problem

Placement = Tuple[int, ...]


def safe(placement: Placement, col: int) -> bool:
    row = len(placement)
    return all(c != col and abs(c - col) != row - r for r, c in enumerate(placement))


def n_queens(n: int = 8) -> Problem:
    """Place one queen per row; only non-attacking columns are offered, each at cost 1."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    def actions(p: Placement):
        if len(p) >= n:
            return ()
        return tuple((1.0, p + (col,)) for col in range(n) if safe(p, col))

    return Problem(
        initial_state=(),
        actions=actions,
        goal_test=lambda p: len(p) == n,
        heuristic=lambda p: float(n - len(p)),
    )
