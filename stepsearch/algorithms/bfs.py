# stepsearch/algorithms/bfs.py
from __future__ import annotations
from ..core.frontiers import FIFO
from ..core.model import Model, init
from ..core.problem import Problem
from ..core.strategies import GRAPH_SEARCH


def breadth_first(problem: Problem, goal_on_expand: bool = False) -> Model:
    return init(GRAPH_SEARCH, FIFO, problem, goal_on_expand=goal_on_expand)
