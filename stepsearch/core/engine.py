# stepsearch/core/engine.py
# The stepping engine: advance a Model by expanding one frontier node per call.
from __future__ import annotations
import dataclasses
import logging
from typing import Iterator, Optional, Tuple

from immutabledict import immutabledict

from .model import FAILURE, Model, Solution
from .node import Node, expand, path_keys

logger = logging.getLogger(__name__)


def step(model: Model) -> Model:
    """
    Pop one node, expand it and fold the result into a new Model.

    Failure is reported by the step that leaves the frontier empty without a
    solution, or by popping an empty frontier. The outcome is set once: after a Solution or Failure further calls keep
    exploring whatever is left on the frontier but never replace `solution`.
    A failed model has an empty frontier, so stepping it again changes nothing.
    """
    popped = model.queue.pop(model.frontier)
    if popped is None:
        if model.pending:
            logger.debug("frontier exhausted after %d expansions", len(model.explored))
            return dataclasses.replace(model, frontier=(), solution=FAILURE)
        return dataclasses.replace(model, frontier=())

    node, rest = popped
    problem = model.problem
    solution = model.solution

    if model.goal_on_expand and model.pending and problem.goal_test(node.state):
        solution = Solution(node)

    children = expand(problem, node)

    if not model.goal_on_expand and model.pending:
        goal = next((c for c in children if problem.goal_test(c.state)), None)
        if goal is not None:
            solution = Solution(goal)

    entry = tuple((c.path_cost, problem.state_to_key(c.state)) for c in children)
    explored = immutabledict({**model.explored, path_keys(problem, node): entry})

    frontier = model.strategy.frontier(problem, explored, node, rest, children)

    max_path_cost = model.max_path_cost
    if children:
        max_path_cost = max(max_path_cost, max(c.path_cost for c in children))

    if solution is not model.solution:
        logger.debug("solution found at cost %s after %d expansions",
                     solution.node.path_cost, len(explored))
    elif not frontier and model.pending:
        # nothing left to pop: the next step could only fail
        logger.debug("frontier exhausted after %d expansions", len(explored))
        solution = FAILURE
    logger.debug("expanded depth=%d cost=%s children=%d frontier=%d",
                 node.depth, node.path_cost, len(children), len(frontier))

    return dataclasses.replace(
        model,
        explored=explored,
        frontier=frontier,
        solution=solution,
        max_path_cost=max_path_cost,
    )


def next_n(n: int, model: Model) -> Model:
    """Apply `step` exactly n times, whatever the outcome in between."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    for _ in range(n):
        model = step(model)
    return model


def next_until_goal(model: Model, max_steps: Optional[int] = None) -> Tuple[Optional[Node], Model]:
    """
    Step until the search has an outcome. Returns (goal node or None, final model).

    Without `max_steps` this only returns on a finite state space or when a
    solution exists; an infinite space without goals loops forever. With
    `max_steps` it gives up after that many steps and hands back the still
    pending model.
    """
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must be >= 0, got {max_steps}")
    steps = 0
    while model.pending:
        if max_steps is not None and steps >= max_steps:
            logger.debug("giving up after %d steps", steps)
            return None, model
        model = step(model)
        steps += 1
    return model.solution_node, model


def iterate(model: Model) -> Iterator[Model]:
    """Yield every successive Model; the last one yielded is the first with an outcome."""
    while model.pending:
        model = step(model)
        yield model
