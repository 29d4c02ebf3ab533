# stepsearch/algorithms/registry.py
from __future__ import annotations
from typing import Callable, Dict
from ..core.model import Model
from .astar import best_first
from .bfs import breadth_first
from .dfs import depth_first
from .greedy import greedy
from .ucs import uniform_cost

ALGORITHMS: Dict[str, Callable[..., Model]] = {
    "BFS": breadth_first,
    "DFS": depth_first,
    "UCS": uniform_cost,
    "Greedy": greedy,
    "A*": best_first,
}


def by_name(name: str) -> Callable[..., Model]:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown algorithm {name!r}; choose from {', '.join(ALGORITHMS)}") from None
