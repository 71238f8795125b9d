from collections import deque
from typing import List, NamedTuple, Optional, Set

from edge import Edge, Number
from exceptions import GraphConfigurationError
from graph import Graph
from residual import residual_neighbors


class CutResult(NamedTuple):
    source_side: Set[str]
    sink_side: Set[str]
    cut_edges: List[Edge]   # edges leaving source_side, in edge-list order
    capacity: Number


def residual_reachable(graph: Graph, source_id: Optional[str] = None) -> Set[str]:
    """
    Nodes reachable from the source through edges with positive residual.
    Independent of the labeling engine: plain BFS, no labels involved.
    """
    if source_id is None:
        source = graph.source()
        if source is None:
            raise GraphConfigurationError("graph has no source node")
        source_id = source.id

    known = {n.id for n in graph.nodes}
    seen = {source_id}
    frontier = deque([source_id])
    while frontier:
        u = frontier.popleft()
        for arc in residual_neighbors(graph.edges, u):
            if arc.neighbor in known and arc.neighbor not in seen:
                seen.add(arc.neighbor)
                frontier.append(arc.neighbor)
    return seen


def has_augmenting_path(graph: Graph) -> bool:
    sink = graph.sink()
    if sink is None:
        return False
    return sink.id in residual_reachable(graph)


def min_cut(graph: Graph) -> CutResult:
    """
    Cut induced by residual reachability from the source.
    Once no augmenting path is left its capacity equals the maximum flow.
    """
    source_side = residual_reachable(graph)
    sink_side = {n.id for n in graph.nodes} - source_side
    cut_edges = [e for e in graph.edges if e.u in source_side and e.v in sink_side]
    capacity = sum(e.capacity for e in cut_edges)
    return CutResult(source_side, sink_side, cut_edges, capacity)
