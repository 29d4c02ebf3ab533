# stepsearch/core/strategies.py
# Frontier update policies: what the frontier looks like after one node was popped and expanded.
from __future__ import annotations
from typing import Any, Hashable, Mapping, Protocol, Set, Tuple

from .frontiers import Frontier
from .node import Node
from .problem import Problem

# path of (cost, key) pairs -> children as (cost, key) pairs
Explored = Mapping[Tuple[Tuple[float, Any], ...], Tuple[Tuple[float, Any], ...]]


class Strategy(Protocol):
    def frontier(
        self,
        problem: Problem,
        explored: Explored,
        node: Node,
        rest: Frontier,
        children: Tuple[Node, ...],
    ) -> Frontier: ...


class TreeSearch:
    """No deduplication. Only sensible on tree-shaped state spaces."""
    def frontier(self, problem, explored, node, rest, children):
        return tuple(children) + tuple(rest)

    def __repr__(self): return "TreeSearch()"


class GraphSearch:
    """
    Keep at most one frontier node per state key, at the lowest cost known so far.

    A child survives only if
      (a) its key differs from its parent's key,
      (b) no sibling has the same key at a lower cost (first one wins on equal cost),
      (c) its key is not the last key of any explored path,
      (d) any frontier node with the same key costs strictly more.
    Survivors go in front of the remaining frontier, in expansion order, and
    replace the frontier nodes they beat.
    """
    def frontier(self, problem, explored, node, rest, children):
        key = problem.state_to_key
        parent_key = key(node.state)
        closed = explored_keys(explored)

        keyed = [(key(c.state), c) for c in children]
        survivors = []
        for i, (k, child) in enumerate(keyed):
            if k == parent_key:
                continue
            if _beaten_by_sibling(i, k, child, keyed):
                continue
            if k in closed:
                continue
            if any(key(old.state) == k and child.path_cost >= old.path_cost for old in rest):
                continue
            survivors.append((k, child))

        kept_rest = tuple(
            old for old in rest
            if not any(k == key(old.state) and child.path_cost <= old.path_cost
                       for k, child in survivors)
        )
        return tuple(child for _, child in survivors) + kept_rest

    def __repr__(self): return "GraphSearch()"


def _beaten_by_sibling(i: int, k: Hashable, child: Node, keyed) -> bool:
    for j, (k2, other) in enumerate(keyed):
        if j == i or k2 != k:
            continue
        if other.path_cost < child.path_cost:
            return True
        if other.path_cost == child.path_cost and j < i:
            return True
    return False


def explored_keys(explored: Explored) -> Set[Hashable]:
    """Terminal state keys of every explored path."""
    return {p[-1][1] for p in explored if p}


TREE_SEARCH = TreeSearch()
GRAPH_SEARCH = GraphSearch()
