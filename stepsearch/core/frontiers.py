# stepsearch/core/frontiers.py
# Queue policies: which frontier node gets expanded next.
# The frontier is an immutable tuple built by prepending new nodes; popping returns the
# chosen node and the remaining tuple, or None when there is nothing left to pop.
from __future__ import annotations
from typing import Callable, Optional, Protocol, Tuple

from .node import Node

Frontier = Tuple[Node, ...]
Popped = Optional[Tuple[Node, Frontier]]


class Queue(Protocol):
    def pop(self, frontier: Frontier) -> Popped: ...


class FIFOQueue:
    """Oldest first: new nodes sit at the head, so the tail is the oldest."""
    def pop(self, frontier: Frontier) -> Popped:
        if not frontier:
            return None
        return frontier[-1], frontier[:-1]

    def __repr__(self): return "FIFOQueue()"


class LIFOQueue:
    """Newest first."""
    def pop(self, frontier: Frontier) -> Popped:
        if not frontier:
            return None
        return frontier[0], frontier[1:]

    def __repr__(self): return "LIFOQueue()"


class PriorityQueue:
    """Min by key(node); ties go to the earliest node in the frontier."""
    def __init__(self, key: Callable[[Node], float]):
        self.key = key

    def pop(self, frontier: Frontier) -> Popped:
        if not frontier:
            return None
        # min() keeps the first of equal keys, which is the stable choice we want
        i = min(range(len(frontier)), key=lambda j: self.key(frontier[j]))
        return frontier[i], frontier[:i] + frontier[i + 1:]

    def __repr__(self): return f"PriorityQueue(key={self.key!r})"


FIFO = FIFOQueue()
LIFO = LIFOQueue()
