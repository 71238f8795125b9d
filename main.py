import argparse
import logging
import sys

import networkx as nx

from exceptions import GraphConfigurationError, MaxFlowError, StepLimitExceeded
from load_data import default_network, load_graph, to_networkx
from lp_solver import MaxFlowLP
from max_flow import initialize, iter_steps
from min_cut import min_cut
from ortools_solver import ortools_max_flow
from report import save_results

output_dir = "results/"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Step through Ford-Fulkerson labeling on a capacitated network."
    )
    parser.add_argument("--nodes", help="nodes CSV (id, role)")
    parser.add_argument("--edges", help="edges CSV (id, from, to, capacity[, flow])")
    parser.add_argument("--output-dir", default=output_dir)
    parser.add_argument("--max-steps", type=int, default=None)
    parser.add_argument("--check", action="store_true",
                        help="cross-check the result with OR-Tools, PuLP and networkx")
    parser.add_argument("--no-save", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    if (args.nodes is None) != (args.edges is None):
        parser.error("--nodes and --edges must be given together")
    return args


def cross_check(graph, value) -> bool:
    """
    Compare the engine's answer with three independent solvers.
    """
    G = to_networkx(graph)
    source, sink = graph.source().id, graph.sink().id
    answers = {"networkx": nx.maximum_flow_value(G, source, sink)}

    try:
        answers["ortools"], _, _ = ortools_max_flow(graph)
    except GraphConfigurationError as e:
        print(f"Skipping OR-Tools check: {e}")

    lp = MaxFlowLP(graph)
    lp.build_model()
    result = lp.solve()
    if result['status'] == 'Optimal':
        answers["pulp"] = result['objective_value']
    else:
        print(f"LP solver status: {result['status']}")

    ok = True
    for name, expected in answers.items():
        agrees = abs(expected - value) <= 1e-6
        ok = ok and agrees
        print(f"  {name:<9} {expected}  {'ok' if agrees else 'MISMATCH'}")
    return ok


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.nodes is not None:
            graph = load_graph(args.nodes, args.edges)
        else:
            graph = default_network()
    except (GraphConfigurationError, OSError) as e:
        print(f"Error: {e}")
        print("Please check the input data.")
        return 1

    state = initialize()
    print(state.logs[-1])

    print("running...")
    steps = 0
    try:
        for result in iter_steps(graph, state, args.max_steps):
            steps += 1
            for line in result.state.logs[len(state.logs):]:
                print(f"{steps:03d} [{result.state.phase.value:<10}] {line}")
            graph, state = result.graph, result.state
    except StepLimitExceeded as e:
        print(f"Error: {e}")
        return 1
    except MaxFlowError as e:
        print(f"Engine error: {e}")
        return 1

    if graph.source() is None:
        print("Graph has no source node, nothing to do.")
        return 1

    print("done!")
    # edges may come in with flow already on them, the engine only counts what it pushed
    total = graph.net_outflow(graph.source().id)
    print(f"Maximum flow: {total}  ({steps} steps)")
    if total != state.max_flow:
        print(f"  pushed by the engine: {state.max_flow}, preloaded: {total - state.max_flow}")
    if graph.sink() is not None:
        cut = min_cut(graph)
        print(f"Minimum cut: {sorted(cut.source_side)} | {sorted(cut.sink_side)}  capacity {cut.capacity}")
        print("Cut edges: " + ", ".join(f"{e.u}→{e.v}" for e in cut.cut_edges))

        if args.check:
            print("cross-checking...")
            if not cross_check(graph, total):
                return 1

    if not args.no_save:
        flows_path, log_path = save_results(graph, state, args.output_dir)
        print(f"Results saved to {flows_path} and {log_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
