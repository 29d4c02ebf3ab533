from typing import Dict, Hashable, Optional

import pytest
from stepsearch import Problem
from stepsearch.problems.romania import romania_problem
from stepsearch.problems.sliding_puzzle import sliding_puzzle


def weighted_graph(
    edges: Dict[Hashable, Dict[Hashable, float]],
    start: Hashable,
    goal: Optional[Hashable],
    h: Optional[Dict[Hashable, float]] = None,
) -> Problem:
    """Directed weighted graph; successors come out in the dict's insertion order."""
    return Problem(
        initial_state=start,
        actions=lambda s: tuple((float(w), t) for t, w in edges.get(s, {}).items()),
        goal_test=lambda s: s == goal,
        heuristic=lambda s: (h or {}).get(s, 0.0),
    )


def undirected(pairs):
    edges: Dict[Hashable, Dict[Hashable, float]] = {}
    for a, b, w in pairs:
        edges.setdefault(a, {})[b] = w
        edges.setdefault(b, {})[a] = w
    return edges


@pytest.fixture
def make_graph():
    return weighted_graph


@pytest.fixture
def triangle():
    # S-G direct costs 5, S-A-G costs 2
    return weighted_graph(undirected([("S", "A", 1), ("A", "G", 1), ("S", "G", 5)]), "S", "G")


@pytest.fixture
def empty_problem():
    return Problem(initial_state=0, actions=lambda s: [], goal_test=lambda s: False)


@pytest.fixture
def romania():
    return romania_problem()


@pytest.fixture
def eight_puzzle():
    return sliding_puzzle([1, 4, 2, 3, 0, 5, 6, 7, 8], [0, 1, 2, 3, 4, 5, 6, 7, 8])


@pytest.fixture
def make_undirected():
    return undirected
