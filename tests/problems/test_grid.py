from stepsearch import best_first, breadth_first, next_until_goal, path_states
from stepsearch.problems.grid import grid_problem, make_grid_problem


def test_walls_are_avoided():
    problem = make_grid_problem()
    goal, _ = next_until_goal(best_first(problem, goal_on_expand=True))
    walls = {(1, 3), (2, 3), (3, 3), (3, 4)}
    assert goal.state == (4, 6)
    assert not walls & set(path_states(goal))
    # Manhattan distance is 10 and the walls do not force a detour
    assert goal.path_cost == 10.0


def test_walled_off_goal_fails():
    problem = grid_problem(3, 3, start=(0, 0), goal=(2, 2), walls={(1, 2), (2, 1)})
    goal, model = next_until_goal(breadth_first(problem))
    assert goal is None
    assert model.failed
    assert len(model.explored) == 6
