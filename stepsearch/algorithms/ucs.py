# This code implements Uniform Cost Search (UCS) by reusing the generic best-first model.
# stepsearch/algorithms/ucs.py
from __future__ import annotations
from ..core.model import Model
from ..core.problem import Problem
from .best_first import best_first_search


def uniform_cost(problem: Problem, goal_on_expand: bool = False) -> Model:
    return best_first_search(problem, f=lambda n: n.path_cost, goal_on_expand=goal_on_expand)
