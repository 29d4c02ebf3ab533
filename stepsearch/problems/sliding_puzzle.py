# stepsearch/problems/sliding_puzzle.py
# This code defines the N-puzzle (8-puzzle, 15-puzzle, ...) as a Problem for the stepping engine.
from __future__ import annotations
import math
import random
from typing import Optional, Sequence, Tuple

from ..core.problem import Problem

Board = Tuple[int, ...]
BLANK = 0


def _side(board: Sequence[int]) -> int:
    side = math.isqrt(len(board))
    if side < 2 or side * side != len(board):
        raise ValueError(f"board of {len(board)} tiles is not a square of side >= 2")
    return side


def moves(board: Board) -> Tuple[Board, ...]:
    """Boards reachable by sliding one tile into the blank: blank goes up, down, left, right."""
    side = _side(board)
    i = board.index(BLANK)
    r, c = divmod(i, side)
    out = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < side and 0 <= nc < side:
            j = nr * side + nc
            b = list(board)
            b[i], b[j] = b[j], b[i]
            out.append(tuple(b))
    return tuple(out)


def manhattan(board: Board, goal: Board) -> float:
    """Sum of tile distances to their goal cells, blank excluded (admissible)."""
    side = _side(board)
    where = {tile: divmod(k, side) for k, tile in enumerate(goal)}
    total = 0
    for k, tile in enumerate(board):
        if tile == BLANK:
            continue
        r, c = divmod(k, side)
        gr, gc = where[tile]
        total += abs(r - gr) + abs(c - gc)
    return float(total)


def is_solvable(board: Sequence[int], goal: Optional[Sequence[int]] = None) -> bool:
    """Parity test: inversions (plus blank row on even sides) must match the goal's."""
    goal = tuple(goal) if goal is not None else default_goal(len(board))

    def parity(b: Sequence[int]) -> int:
        tiles = [t for t in b if t != BLANK]
        inv = sum(1 for x in range(len(tiles)) for y in range(x + 1, len(tiles)) if tiles[x] > tiles[y])
        side = _side(b)
        if side % 2 == 0:
            inv += b.index(BLANK) // side
        return inv % 2

    return sorted(board) == sorted(goal) and parity(board) == parity(goal)


def default_goal(size: int) -> Board:
    return tuple(range(size))


def scrambled(side: int = 3, n_moves: int = 20, seed: Optional[int] = None) -> Board:
    """Random walk of `n_moves` blank moves away from the goal, so always solvable."""
    rng = random.Random(seed)
    board = default_goal(side * side)
    prev = None
    for _ in range(n_moves):
        options = [b for b in moves(board) if b != prev]
        prev, board = board, rng.choice(options)
    return board


def sliding_puzzle(start: Sequence[int], goal: Optional[Sequence[int]] = None) -> Problem:
    start = tuple(start)
    goal = tuple(goal) if goal is not None else default_goal(len(start))
    if len(goal) != len(start):
        raise ValueError(f"start has {len(start)} tiles but goal has {len(goal)}")
    _side(start)

    return Problem(
        initial_state=start,
        actions=lambda b: tuple((1.0, b2) for b2 in moves(b)),
        goal_test=lambda b: b == goal,
        heuristic=lambda b: manhattan(b, goal),
        state_to_key=tuple,
    )
