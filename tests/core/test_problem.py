from stepsearch import Problem
from stepsearch.problems.grid import GridWorld


class _NoHeuristic:
    def initial_state(self): return "a"
    def is_goal(self, s): return s == "b"
    def actions(self, s): return ["go"] if s == "a" else []
    def result(self, s, a): return "b"
    def step_cost(self, s, a, s2): return 3


def test_defaults():
    problem = Problem(initial_state=1, actions=lambda s: (), goal_test=lambda s: True)
    assert problem.heuristic(1) == 0.0
    assert problem.state_to_key([1, 2]) == [1, 2]


def test_from_classic_grid():
    world = GridWorld(rows=5, cols=7, start=(0, 0), goal=(4, 6), walls={(1, 3)})
    problem = Problem.from_classic(world)

    assert problem.initial_state == (0, 0)
    assert problem.actions((0, 0)) == ((1.0, (1, 0)), (1.0, (0, 1)))
    assert problem.goal_test((4, 6))
    assert problem.heuristic((0, 0)) == 10.0


def test_from_classic_without_heuristic():
    problem = Problem.from_classic(_NoHeuristic())
    assert problem.actions("a") == ((3.0, "b"),)
    assert problem.actions("b") == ()
    assert problem.heuristic("a") == 0.0
