# stepsearch/algorithms/greedy.py
from __future__ import annotations
from ..core.model import Model
from ..core.problem import Problem
from .best_first import best_first_search, heuristic_of


def greedy(problem: Problem, goal_on_expand: bool = False) -> Model:
    # greedy: f = 0 + h
    return best_first_search(problem, f=lambda n: 0.0, h=heuristic_of(problem),
                             goal_on_expand=goal_on_expand)
