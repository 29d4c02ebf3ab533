# stepsearch/core/model.py
# The search Model: one immutable snapshot of a running search, plus its outcome type.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union

from immutabledict import immutabledict

from .frontiers import Frontier, Queue
from .node import Node, root
from .problem import Problem
from .strategies import Explored, Strategy


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Solution:
    node: Node


@dataclass(frozen=True)
class Failure:
    pass


Result = Union[Pending, Solution, Failure]

PENDING = Pending()
FAILURE = Failure()


@dataclass(frozen=True)
class Model:
    """
    Snapshot of a search. `step` never changes a Model, it builds the next one,
    so any snapshot can be handed to a reader (renderer, logger) while the
    owner keeps stepping from it.

    Equality only looks at the search state (explored, frontier, solution,
    max_path_cost); the policies and problem are compared by the caller if needed.
    """
    strategy: Strategy = field(compare=False)
    queue: Queue = field(compare=False)
    problem: Problem = field(compare=False)
    explored: Explored = field(default_factory=immutabledict)
    frontier: Frontier = ()
    solution: Result = PENDING
    max_path_cost: float = 0.0
    goal_on_expand: bool = False

    @property
    def pending(self) -> bool:
        return isinstance(self.solution, Pending)

    @property
    def failed(self) -> bool:
        return isinstance(self.solution, Failure)

    @property
    def solution_node(self) -> Optional[Node]:
        if isinstance(self.solution, Solution):
            return self.solution.node
        return None


def init(strategy: Strategy, queue: Queue, problem: Problem, goal_on_expand: bool = False) -> Model:
    return Model(
        strategy=strategy,
        queue=queue,
        problem=problem,
        explored=immutabledict(),
        frontier=(root(problem),),
        solution=PENDING,
        max_path_cost=0.0,
        goal_on_expand=goal_on_expand,
    )
