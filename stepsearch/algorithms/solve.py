# stepsearch/algorithms/solve.py
# Run a model to completion under the timing/memory meter and summarise the run.
from __future__ import annotations
import logging
from typing import Optional
from ..core.engine import step
from ..core.metrics import MeasuredRun, SearchResult
from ..core.model import Model
from ..core.node import path_states

logger = logging.getLogger(__name__)


def solve(model: Model, name: str = "search", max_steps: Optional[int] = None) -> SearchResult:
    """Step `model` until it has an outcome (or `max_steps` runs out) and report the run."""
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must be >= 0, got {max_steps}")
    steps = 0
    with MeasuredRun() as meter:
        while model.pending:
            if max_steps is not None and steps >= max_steps:
                break
            model = step(model)
            steps += 1

    result = SearchResult(
        algo=name,
        success=model.solution_node is not None,
        steps=steps,
        explored=len(model.explored),
        frontier=len(model.frontier),
        max_path_cost=model.max_path_cost,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
    )
    goal = model.solution_node
    if goal is not None:
        result.path = list(path_states(goal))
        result.cost = goal.path_cost
    elif model.pending:
        result.error = f"gave up after {steps} steps"
    logger.info("%s: %s cost=%s steps=%d", name, "OK" if result.success else "FAIL",
                result.cost, result.steps)
    return result
