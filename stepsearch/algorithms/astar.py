# stepsearch/algorithms/astar.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.model import Model
from ..core.node import Node
from ..core.problem import Problem
from .best_first import best_first_search, heuristic_of


def best_first(
    problem: Problem,
    heuristic: Optional[Callable[[Node], float]] = None,
    goal_on_expand: bool = False,
) -> Model:
    """A*: f = g + h. Pass `heuristic` to override the problem's own (it receives the Node)."""
    h = heuristic or heuristic_of(problem)
    return best_first_search(problem, f=lambda n: n.path_cost, h=h, goal_on_expand=goal_on_expand)


a_star = best_first
