"""
Stepwise Ford-Fulkerson labeling (shortest augmenting path, BFS).

Every call to `step` performs exactly one visual transition and returns a
new (graph, state) pair; inputs are never mutated. Callers driving it from
a timer must serialise calls, each one expects the state returned by the
previous call.

    IDLE --> LABELING --(sink labeled)--> AUGMENTING --> IDLE --> ...
                 |
                 +--(queue empty)--> FINISHED
"""
import logging
from typing import Iterator, NamedTuple, Optional, Tuple

from augmenting_path import augment_path, reconstruct_path
from edge import Number
from exceptions import AugmentationError, StepLimitExceeded
from graph import Graph, reset_flows
from labeling import expand_front
from node import source_label
from state import EngineState, Phase, StepStatus

logger = logging.getLogger(__name__)


class StepResult(NamedTuple):
    graph: Graph
    state: EngineState
    status: StepStatus


def initialize() -> EngineState:
    return EngineState(logs=("Algorithm initialized, ready to start.",))


def advance(graph: Graph, state: EngineState) -> StepResult:
    """
    Perform one transition and report what happened.
    """
    if state.phase == Phase.FINISHED:
        return StepResult(graph, state, StepStatus.DONE)
    if state.phase == Phase.IDLE:
        return _start_round(graph, state)
    if state.phase == Phase.LABELING:
        return _label_step(graph, state)
    return _augment_step(graph, state)


def step(graph: Graph, state: EngineState) -> Tuple[Graph, EngineState]:
    result = advance(graph, state)
    return result.graph, result.state


# ---------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------

def _start_round(graph: Graph, state: EngineState) -> StepResult:
    new_graph = graph.clear_labels()
    source = new_graph.source()
    if source is None:
        logger.warning("no source node, labeling round not started")
        return StepResult(graph, state, StepStatus.NOT_READY)

    source.label = source_label()
    logger.debug("new labeling round from %s", source.id)
    new_state = state.with_log(
        f"Starting a new labeling round from source ({source.id}).",
        phase=Phase.LABELING,
        queue=(source.id,),
        visited={source.id},
        path_found=None,
        bottleneck=None,
    )
    return StepResult(new_graph, new_state, StepStatus.ADVANCED)


def _label_step(graph: Graph, state: EngineState) -> StepResult:
    if not state.queue:
        logger.debug("queue exhausted, max flow %s", state.max_flow)
        new_state = state.with_log(
            f"No more augmenting paths. Algorithm finished, maximum flow is {state.max_flow}.",
            phase=Phase.FINISHED,
            visited=(),
        )
        return StepResult(graph.clear_labels(), new_state, StepStatus.ADVANCED)

    new_graph = graph.copy()
    expansion = expand_front(new_graph, state.queue, state.visited)
    logger.debug("expanded %s, labeled %s", expansion.node_id, list(expansion.labeled))

    if expansion.sink_id is not None:
        path, bottleneck = reconstruct_path(new_graph, expansion.sink_id)
        new_state = state.with_log(
            f"Sink ({expansion.sink_id}) labeled! Augmenting path {' → '.join(path)} "
            f"found with bottleneck {bottleneck}.",
            phase=Phase.AUGMENTING,
            queue=(),
            visited=expansion.visited,
            path_found=path,
            bottleneck=bottleneck,
        )
        return StepResult(new_graph, new_state, StepStatus.ADVANCED)

    new_state = state.evolve(queue=expansion.queue, visited=expansion.visited)
    if expansion.labeled:
        new_state = new_state.with_log(
            f"Checked node {expansion.node_id} and labeled its neighbors: "
            f"{', '.join(expansion.labeled)}."
        )
    return StepResult(new_graph, new_state, StepStatus.ADVANCED)


def _augment_step(graph: Graph, state: EngineState) -> StepResult:
    bottleneck = state.bottleneck
    if state.path_found is None:
        raise AugmentationError("AUGMENTING state without an augmenting path")
    augmented = augment_path(graph, state.path_found, bottleneck)
    total = state.max_flow + bottleneck
    logger.debug("augmented %s along %s, total %s", bottleneck, state.path_found, total)

    new_state = state.with_log(
        f"Augmented {bottleneck} along the path. Current maximum flow: {total}. "
        "Clearing labels for the next round...",
        phase=Phase.IDLE,
        max_flow=total,
        path_found=None,
        bottleneck=None,
        visited=(),
    )
    return StepResult(augmented.clear_labels(), new_state, StepStatus.ADVANCED)


# ---------------------------------------------------------------------
# Drivers
# ---------------------------------------------------------------------

def iter_steps(
    graph: Graph,
    state: EngineState,
    max_steps: Optional[int] = None,
) -> Iterator[StepResult]:
    """
    Yield every transition until the engine finishes or cannot start.
    Raises StepLimitExceeded once `max_steps` transitions were taken
    without reaching FINISHED.
    """
    taken = 0
    while True:
        if max_steps is not None and taken >= max_steps:
            raise StepLimitExceeded(f"engine not finished after {max_steps} steps")
        result = advance(graph, state)
        if result.status != StepStatus.ADVANCED:
            return
        taken += 1
        yield result
        graph, state = result.graph, result.state
        if state.phase == Phase.FINISHED:
            return


def run_to_completion(
    graph: Graph,
    state: Optional[EngineState] = None,
    max_steps: Optional[int] = None,
) -> Tuple[Graph, EngineState]:
    if state is None:
        state = initialize()
    for result in iter_steps(graph, state, max_steps):
        graph, state = result.graph, result.state
    return graph, state


def reset(graph: Graph) -> Tuple[Graph, EngineState]:
    """
    Zero every flow, strip labels and start from a fresh state.
    """
    return reset_flows(graph), initialize()


def compute_max_flow(graph: Graph, max_steps: Optional[int] = None) -> Number:
    start_graph, state = reset(graph)
    _, final_state = run_to_completion(start_graph, state, max_steps)
    return final_state.max_flow
