from immutabledict import immutabledict
from stepsearch import GRAPH_SEARCH, TREE_SEARCH, Node, Problem
from stepsearch.core.strategies import explored_keys

PROBLEM = Problem(initial_state="A", actions=lambda s: (), goal_test=lambda s: False)


def _batch():
    parent = Node("A")
    rest = (Node("E", path_cost=5.0), Node("F", path_cost=2.0), Node("G", path_cost=1.0))
    children = (
        Node("A", parent, 1.0, 1),  # self loop
        Node("B", parent, 3.0, 1),  # beaten by the cheaper B below
        Node("C", parent, 1.0, 1),
        Node("B", parent, 2.0, 1),
        Node("C", parent, 1.0, 1),  # same cost as the earlier C
        Node("D", parent, 1.0, 1),  # already explored
        Node("E", parent, 4.0, 1),  # cheaper than the frontier's E
        Node("F", parent, 2.0, 1),  # not cheaper than the frontier's F
    )
    explored = immutabledict({((0.0, "S"), (1.0, "D")): ()})
    return parent, rest, children, explored


def test_tree_search_prepends_children():
    parent, rest, children, explored = _batch()
    assert TREE_SEARCH.frontier(PROBLEM, explored, parent, rest, children) == children + rest


def test_graph_search_filters():
    parent, rest, children, explored = _batch()

    frontier = GRAPH_SEARCH.frontier(PROBLEM, explored, parent, rest, children)

    assert len(frontier) == 5
    assert frontier[0] is children[2]
    assert frontier[1] is children[3]
    assert frontier[2] is children[6]
    assert frontier[3] is rest[1]
    assert frontier[4] is rest[2]


def test_graph_search_frontier_has_unique_keys():
    parent, rest, children, explored = _batch()
    frontier = GRAPH_SEARCH.frontier(PROBLEM, explored, parent, rest, children)
    states = [n.state for n in frontier]
    assert len(states) == len(set(states))


def test_graph_search_uses_state_key():
    problem = Problem(initial_state=0, actions=lambda s: (), goal_test=lambda s: False,
                      state_to_key=lambda s: s % 10)
    parent = Node(0)
    children = (Node(10, parent, 1.0, 1), Node(3, parent, 1.0, 1), Node(13, parent, 0.5, 1))
    frontier = GRAPH_SEARCH.frontier(problem, immutabledict(), parent, (), children)
    # 10 has the parent's key, 13 beats 3
    assert frontier == (children[2],)


def test_explored_keys_are_terminal_keys():
    explored = {((0.0, "S"),): ((1.0, "A"),), ((0.0, "S"), (1.0, "A")): ()}
    assert explored_keys(explored) == {"S", "A"}
