import pytest

from edge import Edge
from graph import Graph
from load_data import default_network
from node import Node


@pytest.fixture
def network():
    return default_network()


@pytest.fixture
def single_edge():
    # s -> t with capacity 5
    return Graph(
        [Node("s", is_source=True), Node("t", is_sink=True)],
        [Edge("e1", "s", "t", 5)],
    )


@pytest.fixture
def cancelling():
    """
    One unit already routed s -> a -> b -> t. The only way to push a second
    unit is s -> b, cancel a -> b backwards, then a -> t.
    """
    return Graph(
        [Node("s", is_source=True), Node("a"), Node("b"), Node("t", is_sink=True)],
        [
            Edge("e1", "s", "a", 1, 1),
            Edge("e2", "a", "b", 1, 1),
            Edge("e3", "b", "t", 1, 1),
            Edge("e4", "s", "b", 1),
            Edge("e5", "a", "t", 1),
        ],
    )
