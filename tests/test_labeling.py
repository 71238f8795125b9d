import pytest

from edge import Edge
from exceptions import LabelingError
from graph import Graph
from labeling import expand_front
from node import UNBOUNDED, Direction, Label, Node, source_label


def _start(graph):
    g = graph.clear_labels()
    g.source().label = source_label()
    return g


def test_expanding_source_labels_out_neighbors(network):
    g = _start(network)
    exp = expand_front(g, ("s",), frozenset({"s"}))
    assert exp.node_id == "s"
    assert exp.labeled == ("v1", "v2")
    assert exp.queue == ("v1", "v2")
    assert exp.visited == {"s", "v1", "v2"}
    assert exp.sink_id is None
    assert g.node("v1").label == Label("s", Direction.FORWARD, 10)
    # source keeps its sentinel
    assert g.node("s").label.flow is UNBOUNDED


def test_label_flow_is_min_of_predecessor_and_residual(network):
    g = _start(network)
    exp = expand_front(g, ("s",), frozenset({"s"}))
    exp = expand_front(g, exp.queue, exp.visited)
    assert exp.labeled == ("v3", "v4")
    assert g.node("v3").label == Label("v1", Direction.FORWARD, 4)
    assert g.node("v4").label == Label("v1", Direction.FORWARD, 8)
    assert exp.queue == ("v2", "v3", "v4")


def test_nothing_new_to_label(network):
    g = _start(network)
    exp = expand_front(g, ("s",), frozenset({"s"}))
    exp = expand_front(g, exp.queue, exp.visited)
    exp = expand_front(g, exp.queue, exp.visited)
    assert exp.node_id == "v2"
    assert exp.labeled == ()
    assert exp.queue == ("v3", "v4")


def test_backward_edges_label_with_direction_minus(cancelling):
    g = _start(cancelling)
    exp = expand_front(g, ("s",), frozenset({"s"}))
    assert exp.labeled == ("b",)
    exp = expand_front(g, exp.queue, exp.visited)
    assert exp.labeled == ("a",)
    assert g.node("a").label == Label("b", Direction.BACKWARD, 1)


def test_sink_capture_stops_labeling():
    g = _start(Graph(
        [Node("s", is_source=True), Node("a"), Node("t", is_sink=True)],
        [Edge("e1", "s", "t", 3), Edge("e2", "s", "a", 3)],
    ))
    exp = expand_front(g, ("s",), frozenset({"s"}))
    assert exp.sink_id == "t"
    assert exp.labeled == ("t",)
    assert g.node("a").label is None
    assert "a" not in exp.visited


def test_forward_edges_are_tried_before_backward_ones():
    # the backward arc x -> s comes first in the edge list, the forward arc still wins
    g = _start(Graph(
        [Node("s", is_source=True), Node("x"), Node("t", is_sink=True)],
        [Edge("e1", "x", "s", 2, 2), Edge("e2", "s", "t", 3)],
    ))
    exp = expand_front(g, ("s",), frozenset({"s"}))
    assert exp.labeled == ("t",)
    assert g.node("x").label is None


def test_sink_reached_through_backward_edge():
    g = _start(Graph(
        [Node("s", is_source=True), Node("a"), Node("t", is_sink=True)],
        [Edge("e1", "s", "a", 2), Edge("e2", "t", "s", 4, 1)],
    ))
    exp = expand_front(g, ("s",), frozenset({"s"}))
    assert exp.labeled == ("a", "t")
    assert exp.sink_id == "t"
    assert g.node("t").label == Label("s", Direction.BACKWARD, 1)


def test_edges_to_unknown_nodes_are_ignored():
    g = _start(Graph([Node("s", is_source=True)], [Edge("e1", "s", "ghost", 2)]))
    exp = expand_front(g, ("s",), frozenset({"s"}))
    assert exp.labeled == ()


def test_expanding_requires_a_labeled_head(network):
    with pytest.raises(LabelingError):
        expand_front(network.copy(), ("v1",), frozenset({"v1"}))
    with pytest.raises(LabelingError):
        expand_front(network.copy(), (), frozenset())
