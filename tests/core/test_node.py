from stepsearch import Node, Problem, expand, path, path_keys, path_states


def _line_problem():
    return Problem(
        initial_state=0,
        actions=lambda n: [(2.0, n + 1), (0.5, n + 10)],
        goal_test=lambda n: False,
        state_to_key=lambda n: f"s{n}",
    )


def test_expand_follows_action_order_and_accumulates_cost():
    problem = _line_problem()
    root = Node(0, path_cost=1.0)

    children = expand(problem, root)

    assert [c.state for c in children] == [1, 10]
    assert [c.path_cost for c in children] == [3.0, 1.5]
    assert all(c.parent is root for c in children)
    assert all(c.depth == 1 for c in children)


def test_expand_is_deterministic():
    problem = _line_problem()
    root = Node(0)
    assert expand(problem, root) == expand(problem, root)
    assert root.expand(problem) == expand(problem, root)


def test_expand_with_no_actions():
    problem = Problem(initial_state="x", actions=lambda s: (), goal_test=lambda s: True)
    assert expand(problem, Node("x")) == ()


def test_path_runs_from_root_to_node():
    problem = _line_problem()
    a = expand(problem, Node(0))[0]
    b = expand(problem, a)[1]

    assert path(b) == ((0.0, 0), (2.0, 1), (2.5, 11))
    assert path_states(b) == (0, 1, 11)
    assert path_keys(problem, b) == ((0.0, "s0"), (2.0, "s1"), (2.5, "s11"))
    assert b.depth == 2


def test_path_costs_never_decrease_with_non_negative_steps():
    problem = _line_problem()
    node = Node(0)
    for _ in range(5):
        for child in expand(problem, node):
            assert child.path_cost >= child.parent.path_cost
        node = expand(problem, node)[0]
    costs = [c for c, _ in path(node)]
    assert costs == sorted(costs)
    assert costs[-1] == node.path_cost


def test_root_path():
    assert path(Node("only")) == ((0.0, "only"),)
