# stepsearch/problems/maze.py
# Random mazes on a numpy grid (0 = free, 1 = wall) and the 4-neighbor route problem over them.
from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from ..algorithms.bfs import breadth_first
from ..core.engine import next_until_goal
from ..core.problem import Problem

FREE, WALL = 0, 1
Cell = Tuple[int, int]


def neighbors4(r: int, c: int, R: int, C: int):
    for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < R and 0 <= nc < C:
            yield nr, nc


def manhattan(a: Cell, b: Cell) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def maze_problem(grid: np.ndarray, start: Cell, goal: Cell) -> Problem:
    R, C = grid.shape
    for name, cell in (("start", start), ("goal", goal)):
        r, c = cell
        if not (0 <= r < R and 0 <= c < C) or grid[r, c] == WALL:
            raise ValueError(f"{name} {cell} is outside the maze or on a wall")

    def actions(cell: Cell):
        r, c = cell
        return tuple(
            (1.0, (nr, nc)) for nr, nc in neighbors4(r, c, R, C) if grid[nr, nc] != WALL
        )

    return Problem(
        initial_state=(int(start[0]), int(start[1])),
        actions=actions,
        goal_test=lambda cell: cell == goal,
        heuristic=lambda cell: manhattan(cell, goal),
    )


def generate_maze(R: int, C: int, density: float = 0.25, seed: Optional[int] = None,
                  max_tries: int = 50) -> np.ndarray:
    """Random walls with the corners kept free; retried until a corner-to-corner route exists."""
    if R < 2 or C < 2:
        raise ValueError(f"maze must be at least 2x2, got {R}x{C}")
    rng = np.random.default_rng(seed)
    start, goal = (0, 0), (R - 1, C - 1)
    grid = np.full((R, C), FREE, dtype=np.int8)
    for _ in range(max_tries):
        grid = np.where(rng.random((R, C)) < density, WALL, FREE).astype(np.int8)
        grid[start] = FREE
        grid[goal] = FREE
        found, _ = next_until_goal(breadth_first(maze_problem(grid, start, goal)))
        if found is not None:
            return grid
    return grid  # last try even if not solvable (rare with low density)
