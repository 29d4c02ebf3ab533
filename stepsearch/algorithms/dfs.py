# stepsearch/algorithms/dfs.py
# Depth-first: graph search with a LIFO queue. The explored check replaces the
# ancestor cycle check a plain tree-like DFS would need.
from __future__ import annotations
from ..core.frontiers import LIFO
from ..core.model import Model, init
from ..core.problem import Problem
from ..core.strategies import GRAPH_SEARCH


def depth_first(problem: Problem, goal_on_expand: bool = False) -> Model:
    return init(GRAPH_SEARCH, LIFO, problem, goal_on_expand=goal_on_expand)
