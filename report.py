import os
from datetime import datetime
from typing import Tuple

import pandas as pd

from graph import Graph
from state import EngineState


def flow_table(graph: Graph) -> pd.DataFrame:
    """
    One row per edge in edge-list order:
    id, from, to, flow, capacity, residual, saturated.
    """
    rows = [
        [e.id, e.u, e.v, e.flow, e.capacity, e.remaining_capacity(), e.is_saturated()]
        for e in graph.edges
    ]
    return pd.DataFrame(
        rows,
        columns=["id", "from", "to", "flow", "capacity", "residual", "saturated"],
    )


def log_table(state: EngineState) -> pd.DataFrame:
    return pd.DataFrame(
        {"step": range(1, len(state.logs) + 1), "message": list(state.logs)},
        columns=["step", "message"],
    )


def save_results(graph: Graph, state: EngineState, output_dir: str) -> Tuple[str, str]:
    """
    Write the flow table and the engine log as timestamped CSV files.
    Returns (flows path, log path).
    """
    os.makedirs(output_dir, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    flows_path = os.path.join(output_dir, f"max_flow_edges_{stamp}.csv")
    log_path = os.path.join(output_dir, f"max_flow_log_{stamp}.csv")
    flow_table(graph).to_csv(flows_path, index=False)
    log_table(state).to_csv(log_path, index=False)
    return flows_path, log_path
