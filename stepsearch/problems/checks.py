# stepsearch/problems/checks.py
# Optional contract check for a Problem. The engine itself never validates anything.
from __future__ import annotations
import math
from collections import deque

from ..core.problem import Problem


class ProblemContractError(ValueError):
    """A Problem broke the successor contract (bad cost or unusable key)."""


def sanity_check_problem(problem: Problem, max_states: int = 10_000) -> str:
    """Walks states breadth-first and checks every step cost is a finite number >= 0."""
    seen = set()
    q = deque([problem.initial_state])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        try:
            k = problem.state_to_key(s)
            if k in seen:
                continue
            seen.add(k)
        except TypeError as e:
            raise ProblemContractError(f"state_to_key({s!r}) is not hashable: {e}") from e
        for cost, s2 in problem.actions(s):
            if cost is None:
                raise ProblemContractError(f"step cost is None for (s={s!r}, s'={s2!r})")
            if not math.isfinite(cost) or cost < 0:
                raise ProblemContractError(f"step cost {cost!r} for (s={s!r}, s'={s2!r}) is not a finite cost >= 0")
            q.append(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; all step costs finite and >= 0."
