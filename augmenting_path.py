from typing import List, Optional, Sequence, Tuple

from edge import EPS, Edge, Number
from exceptions import AugmentationError
from graph import Graph
from node import UNBOUNDED, Direction


def reconstruct_path(graph: Graph, sink_id: str) -> Tuple[List[str], Number]:
    """
    Walk the labeling tree from the sink back to the source.
    Returns (path node ids from source to sink, bottleneck).

    Every label already carries the minimum residual capacity seen on the
    way from the source, so the bottleneck is just the sink's label flow.
    """
    sink = graph.node(sink_id)
    if sink is None or sink.label is None:
        raise AugmentationError(f"sink {sink_id} is not labeled")
    bottleneck = sink.label.flow
    if bottleneck is UNBOUNDED:
        raise AugmentationError(f"sink {sink_id} carries the source label")

    # reconstruct the path
    path = [sink_id]
    curr = sink
    while not curr.label.is_root():
        prev_id = curr.label.prev_node_id
        if len(path) > len(graph.nodes):
            raise AugmentationError(f"label cycle detected while tracing back from {sink_id}")
        prev = graph.node(prev_id)
        if prev is None or prev.label is None:
            raise AugmentationError(f"label chain broken at {curr.id}: {prev_id} is not labeled")
        path.append(prev_id)
        curr = prev
    path.reverse()

    return path, bottleneck


def _find_forward(edges: Sequence[Edge], a: str, b: str, amount: Number) -> Optional[Edge]:
    return next((e for e in edges if e.u == a and e.v == b and e.remaining_capacity() >= amount - EPS), None)


def _find_backward(edges: Sequence[Edge], a: str, b: str, amount: Number) -> Optional[Edge]:
    return next((e for e in edges if e.u == b and e.v == a and e.flow >= amount - EPS), None)


def augment_path(graph: Graph, path: Sequence[str], bottleneck: Number) -> Graph:
    """
    Push `bottleneck` units along `path` and return the updated graph.
    Forward steps raise the flow on a -> b, backward steps cancel flow on b -> a.
    The direction comes from b's label; an unlabeled b tries forward first.
    """
    new_graph = graph.copy()
    edges = new_graph.edges

    for a, b in zip(path, path[1:]):
        node_b = new_graph.node(b)
        direction = node_b.label.direction if node_b is not None and node_b.label is not None else None

        edge = None
        delta = bottleneck
        if direction in (None, Direction.FORWARD):
            edge = _find_forward(edges, a, b, bottleneck)
        if edge is None and direction in (None, Direction.BACKWARD):
            edge = _find_backward(edges, a, b, bottleneck)
            delta = -bottleneck
        if edge is None:
            raise AugmentationError(
                f"no residual edge between {a} and {b} can carry {bottleneck}"
            )
        edge.augment(delta)

    return new_graph
