import logging
from typing import List

import networkx as nx
import pandas as pd

from edge import Edge, Number
from exceptions import CapacityError, GraphConfigurationError
from graph import Graph
from node import Node

logger = logging.getLogger(__name__)

# default column names of the CSV exports
NODE_ID_COL = "id"
NODE_ROLE_COL = "role"
EDGE_ID_COL = "id"
EDGE_FROM_COL = "from"
EDGE_TO_COL = "to"
EDGE_CAP_COL = "capacity"
EDGE_FLOW_COL = "flow"


def default_network() -> Graph:
    """
    The six-node teaching network shown when the visualizer opens.
    Its maximum flow is 19 (cut {s, v2} | {v1, v3, v4, t}).
    """
    nodes = [
        Node("s", is_source=True),
        Node("v1"),
        Node("v2"),
        Node("v3"),
        Node("v4"),
        Node("t", is_sink=True),
    ]
    edges = [
        Edge("e1", "s", "v1", 10),
        Edge("e2", "s", "v2", 10),
        Edge("e3", "v1", "v2", 2),
        Edge("e4", "v1", "v3", 4),
        Edge("e5", "v1", "v4", 8),
        Edge("e6", "v2", "v4", 9),
        Edge("e7", "v4", "v3", 6),
        Edge("e8", "v3", "t", 10),
        Edge("e9", "v4", "t", 10),
    ]
    return Graph(nodes, edges)


def _to_number(value) -> Number:
    number = float(value)
    return int(number) if number.is_integer() else number


def _require_columns(df: pd.DataFrame, columns: List[str], what: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise GraphConfigurationError(f"{what} file must contain columns: {missing}")


def load_graph(
    nodes_file: str,
    edges_file: str,
    *,
    id_colname: str = NODE_ID_COL,
    role_colname: str = NODE_ROLE_COL,
    edge_id_colname: str = EDGE_ID_COL,
    from_colname: str = EDGE_FROM_COL,
    to_colname: str = EDGE_TO_COL,
    cap_colname: str = EDGE_CAP_COL,
    flow_colname: str = EDGE_FLOW_COL,
) -> Graph:
    """
    Build a Graph from two CSV files.

    Nodes: one row per node, `role` is "source", "sink" or empty.
    Edges: one row per directed edge; `flow` is optional (defaults to 0).
    Row order is kept, it becomes the edge-list order the labeling uses.

    Rows with an unparsable capacity or flow are skipped with a warning.
    Raises GraphConfigurationError for missing columns, unknown endpoints
    or ambiguous source/sink flags.
    """
    nodes_df = pd.read_csv(nodes_file, dtype={id_colname: str}, keep_default_na=False)
    edges_df = pd.read_csv(
        edges_file,
        dtype={edge_id_colname: str, from_colname: str, to_colname: str},
        keep_default_na=False,
    )
    _require_columns(nodes_df, [id_colname], "nodes")
    _require_columns(edges_df, [edge_id_colname, from_colname, to_colname, cap_colname], "edges")

    nodes = []
    for _, row in nodes_df.iterrows():
        role = str(row[role_colname]).strip().lower() if role_colname in nodes_df.columns else ""
        nodes.append(Node(str(row[id_colname]).strip(), is_source=role == "source", is_sink=role == "sink"))
    known = {n.id for n in nodes}

    edges = []
    has_flow = flow_colname in edges_df.columns
    for _, row in edges_df.iterrows():
        u, v = str(row[from_colname]).strip(), str(row[to_colname]).strip()
        for endpoint in (u, v):
            if endpoint not in known:
                raise GraphConfigurationError(f"edge {row[edge_id_colname]}: unknown node {endpoint}")
        try:
            cap = _to_number(row[cap_colname])
            flow = _to_number(row[flow_colname]) if has_flow and row[flow_colname] != "" else 0
            edges.append(Edge(str(row[edge_id_colname]).strip(), u, v, cap, flow))
        except (ValueError, TypeError, CapacityError) as e:
            logger.warning("Skipping invalid edge row %s: %s", dict(row), e)
            continue

    graph = Graph(nodes, edges)
    graph.validate_terminals()
    return graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Directed networkx view with `capacity` and `flow` edge attributes.
    Parallel edges in the same direction are merged by summing.
    """
    G = nx.DiGraph()
    for n in graph.nodes:
        G.add_node(n.id, is_source=n.is_source, is_sink=n.is_sink)
    for e in graph.edges:
        if G.has_edge(e.u, e.v):
            G[e.u][e.v]["capacity"] += e.capacity
            G[e.u][e.v]["flow"] += e.flow
        else:
            G.add_edge(e.u, e.v, capacity=e.capacity, flow=e.flow)
    return G


def from_networkx(G: nx.DiGraph, source: str, sink: str) -> Graph:
    """
    Build a Graph from a networkx DiGraph whose edges carry `capacity`.
    Edge ids are generated as e1, e2, ... in G's edge order.
    """
    nodes = [Node(str(n), is_source=n == source, is_sink=n == sink) for n in G.nodes]
    edges: List[Edge] = []
    for i, (u, v, data) in enumerate(G.edges(data=True), start=1):
        if "capacity" not in data:
            raise GraphConfigurationError(f"edge {u}->{v} has no capacity attribute")
        edges.append(Edge(f"e{i}", str(u), str(v), data["capacity"], data.get("flow", 0)))
    graph = Graph(nodes, edges)
    graph.validate_terminals()
    return graph
