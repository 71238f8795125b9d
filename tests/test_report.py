import os

import pandas as pd

from max_flow import run_to_completion
from report import flow_table, log_table, save_results


def test_flow_table(single_edge):
    graph, _ = run_to_completion(single_edge)
    df = flow_table(graph)
    assert list(df.columns) == ["id", "from", "to", "flow", "capacity", "residual", "saturated"]
    row = df.iloc[0]
    assert (row["id"], row["flow"], row["residual"], bool(row["saturated"])) == ("e1", 5, 0, True)


def test_log_table(single_edge):
    _, state = run_to_completion(single_edge)
    df = log_table(state)
    assert list(df["step"]) == list(range(1, len(state.logs) + 1))
    assert df["message"].iloc[-1] == state.logs[-1]


def test_save_results(tmp_path, network):
    graph, state = run_to_completion(network)
    flows_path, log_path = save_results(graph, state, str(tmp_path / "out"))
    assert os.path.exists(flows_path) and os.path.exists(log_path)
    flows = pd.read_csv(flows_path)
    assert flows.loc[flows["from"] == "s", "flow"].sum() == 19
    assert len(pd.read_csv(log_path)) == len(state.logs)
