from typing import Any, Dict, List, Optional

import pandas as pd
import pulp as pl
from pulp import LpMaximize, LpProblem, LpStatus, LpVariable, lpSum

from exceptions import GraphConfigurationError
from graph import Graph


class MaxFlowLP:
    """
    Maximum flow written as a linear program, solved with PuLP's CBC.

    Attributes:
        graph (Graph): network with source/sink flags and edge capacities
        problem (LpProblem): the linear program
        flow_vars (Dict[str, LpVariable]): one flow variable per edge id
    """

    def __init__(self, graph: Graph) -> None:
        source, sink = graph.source(), graph.sink()
        if source is None or sink is None:
            raise GraphConfigurationError("graph needs both a source and a sink")
        self.graph = graph
        self.source_id = source.id
        self.sink_id = sink.id
        self.problem = LpProblem("Max_Flow", LpMaximize)
        self.flow_vars: Dict[str, LpVariable] = {}
        self._built = False
        self._solution: Optional[Dict[str, Any]] = None

    def build_model(self) -> None:
        self._add_flow_vars()
        self._add_objective()
        self._add_flow_conservation_constraints()
        self._built = True

    def _add_flow_vars(self) -> None:
        """
        0 <= f_e <= capacity(e) for every edge.
        """
        for i, e in enumerate(self.graph.edges):
            self.flow_vars[e.id] = LpVariable(f"f_{i}", lowBound=0, upBound=e.capacity)

    def _net_outflow(self, node_id: str):
        outflow = lpSum(self.flow_vars[e.id] for e in self.graph.edges if e.u == node_id)
        inflow = lpSum(self.flow_vars[e.id] for e in self.graph.edges if e.v == node_id)
        return outflow - inflow

    def _add_objective(self) -> None:
        """
        Objective: net flow leaving the source.
        """
        self.problem += self._net_outflow(self.source_id)

    def _add_flow_conservation_constraints(self) -> None:
        # inflow == outflow everywhere except at the terminals
        for n in self.graph.nodes:
            if n.id in (self.source_id, self.sink_id):
                continue
            self.problem += (self._net_outflow(n.id) == 0)

    def solve(self) -> Dict[str, Any]:
        """
        Solve the linear program.

        Returns:
            Dict containing:
                - status: Solution status
                - objective_value: maximum flow
                - flows: flow per edge id
        Raises:
            RuntimeError: If model hasn't been built
        """
        if not self._built:
            raise RuntimeError("Model must be built before solving")

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))

        if status != pl.LpStatusOptimal:
            self._solution = {
                'status': LpStatus[status],
                'objective_value': None,
                'flows': None,
            }
            return self._solution

        self._solution = {
            'status': 'Optimal',
            'objective_value': pl.value(self.problem.objective) or 0,
            'flows': {
                edge_id: var.value()
                for edge_id, var in self.flow_vars.items()
            },
        }
        return self._solution

    def get_result_df(self) -> pd.DataFrame:
        """
        DataFrame with one row per edge carrying flow:
        id, from, to, flow, capacity.
        """
        if not self._solution or self._solution['status'] != 'Optimal':
            raise RuntimeError("No optimal solution available")

        results: List[List] = []
        for e in self.graph.edges:
            flow = self._solution['flows'][e.id]
            if flow and flow > 0:
                results.append([e.id, e.u, e.v, flow, e.capacity])

        return pd.DataFrame(results, columns=["id", "from", "to", "flow", "capacity"])
