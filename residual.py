from typing import List, NamedTuple, Sequence, Tuple

from edge import Edge, Number
from node import Direction


class ResidualArc(NamedTuple):
    neighbor: str
    direction: Direction
    residual: Number


def forward_residuals(edges: Sequence[Edge], u: str) -> List[Tuple[Edge, Number]]:
    """
    Edges leaving `u` that can still take flow, with capacity - flow.
    """
    return [(e, e.remaining_capacity()) for e in edges if e.u == u and e.flow < e.capacity]


def backward_residuals(edges: Sequence[Edge], u: str) -> List[Tuple[Edge, Number]]:
    """
    Edges entering `u` whose flow can be cancelled, with their flow.
    """
    return [(e, e.flow) for e in edges if e.v == u and e.flow > 0]


def residual_neighbors(edges: Sequence[Edge], u: str) -> List[ResidualArc]:
    # forward arcs first, then backward arcs, each in edge-list order
    arcs = [ResidualArc(e.v, Direction.FORWARD, r) for e, r in forward_residuals(edges, u)]
    arcs += [ResidualArc(e.u, Direction.BACKWARD, r) for e, r in backward_residuals(edges, u)]
    return arcs
