# Defines the contract any search problem hands to the engine (initial state, successors, goal, heuristic, key).
# stepsearch/core/problem.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Protocol, Sequence, Tuple

Action = Hashable
State = Any
Successor = Tuple[float, State]


def _zero(s: State) -> float:
    return 0.0


def _identity(s: State) -> Hashable:
    return s


@dataclass(frozen=True)
class Problem:
    """Atomic state-space view consumed by the stepping engine.

    - initial_state: seeds the frontier
    - actions(s): finite, ordered sequence of (step_cost, next_state); costs should be >= 0
    - goal_test(s): True for goal states
    - heuristic(s): estimate of the remaining cost, only used by greedy / A*; default 0
    - state_to_key(s): hashable key consistent with state equality; default identity

    Nothing here is validated. Negative costs or an inadmissible heuristic cost you
    optimality, an `actions` that never returns costs you termination.
    """
    initial_state: State
    actions: Callable[[State], Sequence[Successor]]
    goal_test: Callable[[State], bool]
    heuristic: Callable[[State], float] = _zero
    state_to_key: Callable[[State], Hashable] = _identity

    @classmethod
    def from_classic(cls, problem: "ClassicProblem") -> "Problem":
        """Adapt an ACTIONS/RESULT/step_cost style problem to the successor form."""
        def actions(s: State) -> Tuple[Successor, ...]:
            out = []
            for a in problem.actions(s):
                s2 = problem.result(s, a)
                out.append((float(problem.step_cost(s, a, s2)), s2))
            return tuple(out)

        def heuristic(s: State) -> float:
            h = getattr(problem, "heuristic", None)
            val = h(s) if h is not None else None
            return 0.0 if val is None else float(val)

        return cls(
            initial_state=problem.initial_state(),
            actions=actions,
            goal_test=problem.is_goal,
            heuristic=heuristic,
        )


class ClassicProblem(Protocol):
    """Canonical AI search problem interface (ACTIONS / RESULT / c(s, a, s'))."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...
