import pytest
from stepsearch.problems.sliding_puzzle import (
    default_goal,
    is_solvable,
    manhattan,
    moves,
    scrambled,
    sliding_puzzle,
)

GOAL = (0, 1, 2, 3, 4, 5, 6, 7, 8)


def test_moves_from_center_in_up_down_left_right_order():
    board = (1, 4, 2, 3, 0, 5, 6, 7, 8)
    assert moves(board) == (
        (1, 0, 2, 3, 4, 5, 6, 7, 8),
        (1, 4, 2, 3, 7, 5, 6, 0, 8),
        (1, 4, 2, 0, 3, 5, 6, 7, 8),
        (1, 4, 2, 3, 5, 0, 6, 7, 8),
    )


def test_moves_from_corner():
    assert len(moves(GOAL)) == 2


def test_manhattan():
    assert manhattan(GOAL, GOAL) == 0.0
    assert manhattan((1, 4, 2, 3, 0, 5, 6, 7, 8), GOAL) == 2.0


def test_is_solvable():
    assert is_solvable(GOAL)
    assert is_solvable((1, 4, 2, 3, 0, 5, 6, 7, 8))
    assert not is_solvable((0, 2, 1, 3, 4, 5, 6, 7, 8))
    assert is_solvable(tuple(range(16)))


def test_scrambled_is_seeded_and_solvable():
    a = scrambled(3, 30, seed=11)
    assert a == scrambled(3, 30, seed=11)
    assert sorted(a) == list(GOAL)
    assert is_solvable(a)


def test_problem_contract():
    problem = sliding_puzzle([1, 4, 2, 3, 0, 5, 6, 7, 8])
    assert problem.initial_state == (1, 4, 2, 3, 0, 5, 6, 7, 8)
    assert all(cost == 1.0 for cost, _ in problem.actions(problem.initial_state))
    assert problem.goal_test(default_goal(9))
    assert problem.heuristic(problem.initial_state) == 2.0
    assert problem.state_to_key([0, 1]) == (0, 1)


@pytest.mark.parametrize("start, goal", [([1, 2, 3], None), ([0, 1, 2, 3], [0, 1, 2])])
def test_bad_boards(start, goal):
    with pytest.raises(ValueError):
        sliding_puzzle(start, goal)
