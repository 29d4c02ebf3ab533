# stepsearch/__init__.py
"""Incremental state-space search: build a Model from a Problem, then step it."""
from __future__ import annotations

from .algorithms.astar import a_star, best_first
from .algorithms.bfs import breadth_first
from .algorithms.dfs import depth_first
from .algorithms.greedy import greedy
from .algorithms.registry import ALGORITHMS
from .algorithms.solve import solve
from .algorithms.ucs import uniform_cost
from .core.engine import iterate, next_n, next_until_goal, step
from .core.frontiers import FIFO, LIFO, FIFOQueue, LIFOQueue, PriorityQueue
from .core.metrics import SearchResult
from .core.model import FAILURE, PENDING, Failure, Model, Pending, Solution, init
from .core.node import Node, expand, path, path_keys, path_states
from .core.problem import Problem
from .core.strategies import GRAPH_SEARCH, TREE_SEARCH, GraphSearch, TreeSearch

__all__ = [
    "ALGORITHMS",
    "FAILURE",
    "FIFO",
    "GRAPH_SEARCH",
    "LIFO",
    "PENDING",
    "TREE_SEARCH",
    "FIFOQueue",
    "Failure",
    "GraphSearch",
    "LIFOQueue",
    "Model",
    "Node",
    "Pending",
    "PriorityQueue",
    "Problem",
    "SearchResult",
    "Solution",
    "TreeSearch",
    "a_star",
    "best_first",
    "breadth_first",
    "depth_first",
    "expand",
    "greedy",
    "init",
    "iterate",
    "next_n",
    "next_until_goal",
    "path",
    "path_keys",
    "path_states",
    "solve",
    "step",
    "uniform_cost",
]
