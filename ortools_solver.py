from typing import Dict, Set, Tuple

import numpy as np
from ortools.graph.python import max_flow

from exceptions import GraphConfigurationError, SolverError
from graph import Graph


def ortools_max_flow(graph: Graph) -> Tuple[int, Dict[str, int], Set[str]]:
    """
    Reference answer from OR-Tools' SimpleMaxFlow.
    Returns (max flow, flow per edge id, source side of the min cut).
    Capacities must be integral; current edge flows are ignored.
    """
    source, sink = graph.source(), graph.sink()
    if source is None or sink is None:
        raise GraphConfigurationError("graph needs both a source and a sink")
    for e in graph.edges:
        if float(e.capacity) != int(e.capacity):
            raise GraphConfigurationError(f"edge {e.id}: OR-Tools needs integer capacities, got {e.capacity}")

    # Instantiate a SimpleMaxFlow solver.
    smf = max_flow.SimpleMaxFlow()

    # node ids -> 0..n-1
    index = {n.id: i for i, n in enumerate(graph.nodes)}

    # Define three parallel arrays: start_nodes, end_nodes, capacities.
    start_nodes = np.array([index[e.u] for e in graph.edges])
    end_nodes = np.array([index[e.v] for e in graph.edges])
    capacities = np.array([int(e.capacity) for e in graph.edges])

    # Add arcs in bulk.
    all_arcs = smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(index[source.id], index[sink.id])
    if status != smf.OPTIMAL:
        raise SolverError(f"OR-Tools max flow failed with status {status}")

    solution_flows = smf.flows(all_arcs)
    flows = {e.id: int(f) for e, f in zip(graph.edges, solution_flows)}
    source_side = {graph.nodes[i].id for i in smf.get_source_side_min_cut()}

    return int(smf.optimal_flow()), flows, source_side
