from typing import FrozenSet, List, NamedTuple, Optional, Sequence, Tuple

from exceptions import LabelingError
from graph import Graph
from node import Label, limit_flow
from residual import residual_neighbors


class Expansion(NamedTuple):
    node_id: str                # node taken off the queue
    queue: Tuple[str, ...]
    visited: FrozenSet[str]
    labeled: Tuple[str, ...]    # ids labeled by this expansion, in order
    sink_id: Optional[str]      # set when the sink got labeled


def expand_front(
    graph: Graph,
    queue: Sequence[str],
    visited: FrozenSet[str],
) -> Expansion:
    """
    Expand the node at the head of the BFS queue.

    `graph` must be a working copy owned by the caller: labels of newly
    reached nodes are written onto its nodes.

    Residual neighbours are visited forward arcs first, then backward arcs,
    both in edge-list order. The first arc that labels the sink ends the
    expansion, nothing else gets labeled after it.
    """
    if not queue:
        raise LabelingError("cannot expand: BFS queue is empty")

    u_id = queue[0]
    u = graph.node(u_id)
    if u is None or u.label is None:
        raise LabelingError(f"node {u_id} is queued but carries no label")

    by_id = {n.id: n for n in graph.nodes}
    new_queue: List[str] = list(queue[1:])
    new_visited = set(visited)
    labeled: List[str] = []
    sink_id: Optional[str] = None

    for arc in residual_neighbors(graph.edges, u_id):
        target = by_id.get(arc.neighbor)
        # edges to nodes missing from the snapshot are ignored
        if target is None or target.id in new_visited:
            continue

        target.label = Label(u_id, arc.direction, limit_flow(u.label.flow, arc.residual))
        new_visited.add(target.id)
        new_queue.append(target.id)
        labeled.append(target.id)

        if target.is_sink:
            sink_id = target.id
            break

    return Expansion(u_id, tuple(new_queue), frozenset(new_visited), tuple(labeled), sink_id)
