# stepsearch/algorithms/best_first.py
# Generic best-first model: graph search driven by a priority queue on f(n) [+ h(n)].
from __future__ import annotations
from typing import Callable, Optional
from ..core.frontiers import PriorityQueue
from ..core.model import Model, init
from ..core.node import Node
from ..core.problem import Problem
from ..core.strategies import GRAPH_SEARCH


def best_first_search(
    problem: Problem,
    f: Callable[[Node], float],
    h: Optional[Callable[[Node], float]] = None,
    goal_on_expand: bool = False,
) -> Model:
    def fscore(n: Node) -> float:
        base = float(f(n))
        if h is None:
            return base
        hv = h(n)
        return base + (0.0 if hv is None else float(hv))

    return init(GRAPH_SEARCH, PriorityQueue(key=fscore), problem, goal_on_expand=goal_on_expand)


def heuristic_of(problem: Problem) -> Callable[[Node], float]:
    def h(n: Node) -> float:
        val = problem.heuristic(n.state)
        return 0.0 if val is None else float(val)
    return h
