from typing import Iterable, List, Optional, Set

from edge import Edge, Number
from exceptions import GraphConfigurationError
from node import Node


class Graph:
    """
    Snapshot of the network: ordered nodes and ordered edges.
    Edge-list order is significant, BFS labeling visits neighbours in it.
    """

    __slots__ = ("nodes", "edges")

    def __init__(
        self,
        nodes: Optional[Iterable[Node]] = None,
        edges: Optional[Iterable[Edge]] = None,
    ) -> None:
        self.nodes: List[Node] = list(nodes) if nodes is not None else []
        self.edges: List[Edge] = list(edges) if edges is not None else []

    # ------------------------------------------------------------------ lookup

    def node(self, node_id: str) -> Optional[Node]:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def has_node(self, node_id: str) -> bool:
        return self.node(node_id) is not None

    def edge(self, edge_id: str) -> Optional[Edge]:
        for e in self.edges:
            if e.id == edge_id:
                return e
        return None

    def source(self) -> Optional[Node]:
        """
        First node flagged as source (editing helpers keep it unique).
        """
        return next((n for n in self.nodes if n.is_source), None)

    def sink(self) -> Optional[Node]:
        return next((n for n in self.nodes if n.is_sink), None)

    def edges_from(self, u: str) -> List[Edge]:
        return [e for e in self.edges if e.u == u]

    def edges_into(self, u: str) -> List[Edge]:
        return [e for e in self.edges if e.v == u]

    def labeled_ids(self) -> Set[str]:
        return {n.id for n in self.nodes if n.label is not None}

    def net_outflow(self, node_id: str) -> Number:
        """
        Flow leaving `node_id` minus flow entering it, preloaded flow included.
        """
        return sum(e.flow for e in self.edges if e.u == node_id) - sum(
            e.flow for e in self.edges if e.v == node_id
        )

    # ------------------------------------------------------------------ copies

    def copy(self) -> "Graph":
        return Graph(
            [n.copy() for n in self.nodes],
            [e.copy() for e in self.edges],
        )

    def clear_labels(self) -> "Graph":
        return Graph(
            [n.without_label() for n in self.nodes],
            [e.copy() for e in self.edges],
        )

    def validate_terminals(self) -> None:
        """
        Raise GraphConfigurationError unless source/sink flags are unambiguous.
        A graph without source or sink is allowed here: the engine reports it
        as not ready instead.
        """
        sources = [n.id for n in self.nodes if n.is_source]
        sinks = [n.id for n in self.nodes if n.is_sink]
        if len(sources) > 1:
            raise GraphConfigurationError(f"multiple source nodes: {sources}")
        if len(sinks) > 1:
            raise GraphConfigurationError(f"multiple sink nodes: {sinks}")
        both = set(sources) & set(sinks)
        if both:
            raise GraphConfigurationError(f"node {both.pop()} is both source and sink")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.nodes == other.nodes and self.edges == other.edges

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"


# ---------------------------------------------------------------------
# Editing boundary: every helper returns a new Graph
# ---------------------------------------------------------------------

def add_node(graph: Graph, node_id: str) -> Graph:
    if graph.has_node(node_id):
        raise GraphConfigurationError(f"node {node_id} already exists")
    new_graph = graph.copy()
    new_graph.nodes.append(Node(node_id))
    return new_graph


def add_edge(graph: Graph, edge_id: str, u: str, v: str, cap: Number) -> Graph:
    """
    Append the arc u -> v with zero flow.
    A second arc in the same direction is refused, the reverse arc is fine.
    """
    for endpoint in (u, v):
        if not graph.has_node(endpoint):
            raise GraphConfigurationError(f"edge {edge_id}: unknown node {endpoint}")
    if u == v:
        raise GraphConfigurationError(f"edge {edge_id}: self loop on {u}")
    if graph.edge(edge_id) is not None:
        raise GraphConfigurationError(f"edge {edge_id} already exists")
    if any(e.u == u and e.v == v for e in graph.edges):
        raise GraphConfigurationError(f"edge {u}→{v} already exists")

    new_graph = graph.copy()
    new_graph.edges.append(Edge(edge_id, u, v, cap))
    return new_graph


def _set_terminal(graph: Graph, node_id: str, *, source: bool) -> Graph:
    if not graph.has_node(node_id):
        raise GraphConfigurationError(f"unknown node {node_id}")
    nodes = []
    for n in graph.nodes:
        picked = n.id == node_id
        if source:
            # a node cannot be both: picking it as source drops its sink flag
            nodes.append(Node(n.id, is_source=picked, is_sink=n.is_sink and not picked))
        else:
            nodes.append(Node(n.id, is_source=n.is_source and not picked, is_sink=picked))
    return Graph(nodes, [e.copy() for e in graph.edges])


def set_source(graph: Graph, node_id: str) -> Graph:
    return _set_terminal(graph, node_id, source=True)


def set_sink(graph: Graph, node_id: str) -> Graph:
    return _set_terminal(graph, node_id, source=False)


def delete_node(graph: Graph, node_id: str) -> Graph:
    """
    Drop the node and every edge touching it.
    """
    return Graph(
        [n.copy() for n in graph.nodes if n.id != node_id],
        [e.copy() for e in graph.edges if e.u != node_id and e.v != node_id],
    )


def delete_edge(graph: Graph, edge_id: str) -> Graph:
    return Graph(
        [n.copy() for n in graph.nodes],
        [e.copy() for e in graph.edges if e.id != edge_id],
    )


def reset_flows(graph: Graph) -> Graph:
    return Graph(
        [n.without_label() for n in graph.nodes],
        [Edge(e.id, e.u, e.v, e.capacity) for e in graph.edges],
    )
