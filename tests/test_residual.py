from edge import Edge
from node import Direction
from residual import backward_residuals, forward_residuals, residual_neighbors

EDGES = [
    Edge("e1", "a", "b", 5, 5),   # saturated
    Edge("e2", "a", "c", 5, 2),
    Edge("e3", "d", "a", 4, 3),
    Edge("e4", "e", "a", 4, 0),   # nothing to cancel
    Edge("e5", "a", "d", 6, 0),
]


def test_forward_residuals_skip_saturated_edges():
    assert [(e.id, r) for e, r in forward_residuals(EDGES, "a")] == [("e2", 3), ("e5", 6)]


def test_backward_residuals_need_positive_flow():
    assert [(e.id, r) for e, r in backward_residuals(EDGES, "a")] == [("e3", 3)]


def test_residual_neighbors_forward_first():
    arcs = residual_neighbors(EDGES, "a")
    assert [(a.neighbor, a.direction, a.residual) for a in arcs] == [
        ("c", Direction.FORWARD, 3),
        ("d", Direction.FORWARD, 6),
        ("d", Direction.BACKWARD, 3),
    ]


def test_isolated_node_has_no_residuals():
    assert residual_neighbors(EDGES, "zzz") == []
