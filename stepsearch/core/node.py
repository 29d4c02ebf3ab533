# stepsearch/core/node.py
# This code defines the Node record used by the stepping engine to represent visited states in a search tree.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .problem import Problem, State


@dataclass(frozen=True)
class Node:
    """A State reached from `parent` with accumulated `path_cost`.

    Nodes are never mutated; `parent` is a shared read-only back-reference, so a
    node keeps its whole ancestry reachable for path reconstruction.
    """
    state: State
    parent: Optional["Node"] = None
    path_cost: float = 0.0
    depth: int = 0

    def expand(self, problem: Problem) -> Tuple["Node", ...]:
        return expand(problem, self)


def expand(problem: Problem, node: Node) -> Tuple[Node, ...]:
    """Generate child Nodes from ACTIONS(s), keeping the order the problem returns them in."""
    return tuple(
        Node(
            state=s2,
            parent=node,
            path_cost=node.path_cost + float(cost),
            depth=node.depth + 1,
        )
        for cost, s2 in problem.actions(node.state)
    )


def root(problem: Problem) -> Node:
    return Node(problem.initial_state)


def path(node: Node) -> Tuple[Tuple[float, State], ...]:
    """(path_cost, state) pairs from the root down to `node` inclusive."""
    steps = []
    cur: Optional[Node] = node
    while cur is not None:
        steps.append((cur.path_cost, cur.state))
        cur = cur.parent
    steps.reverse()
    return tuple(steps)


def path_keys(problem: Problem, node: Node) -> Tuple[Tuple[float, Any], ...]:
    return tuple((cost, problem.state_to_key(s)) for cost, s in path(node))


def path_states(node: Node) -> Tuple[State, ...]:
    return tuple(s for _, s in path(node))
