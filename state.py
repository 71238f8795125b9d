from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional, Sequence, Tuple

from edge import Number


class Phase(str, Enum):
    IDLE = "IDLE"
    LABELING = "LABELING"        # BFS search for an augmenting path
    AUGMENTING = "AUGMENTING"    # path found, flow update pending
    FINISHED = "FINISHED"        # no augmenting path left


class StepStatus(str, Enum):
    ADVANCED = "ADVANCED"    # one transition was performed
    NOT_READY = "NOT_READY"  # graph has no source, nothing done
    DONE = "DONE"            # already FINISHED, nothing done


class EngineState:
    """
    Immutable engine state passed between the caller and `step`.

    queue       FIFO of node ids labeled but not yet expanded this round
    visited     node ids labeled this round
    path_found  source..sink node ids, only while AUGMENTING
    bottleneck  amount to push along path_found, only while AUGMENTING
    max_flow    total flow pushed so far, never decreases
    logs        human readable trace, append only
    """

    __slots__ = (
        "phase",
        "queue",
        "visited",
        "path_found",
        "bottleneck",
        "max_flow",
        "logs",
    )

    def __init__(
        self,
        phase: Phase = Phase.IDLE,
        queue: Sequence[str] = (),
        visited: Iterable[str] = (),
        path_found: Optional[Sequence[str]] = None,
        bottleneck: Optional[Number] = None,
        max_flow: Number = 0,
        logs: Sequence[str] = (),
    ) -> None:
        if (path_found is None) != (bottleneck is None):
            raise ValueError("path_found and bottleneck must be set together")
        if bottleneck is not None and bottleneck < 0:
            raise ValueError(f"bottleneck must be non-negative, got {bottleneck}")
        self.phase = Phase(phase)
        self.queue: Tuple[str, ...] = tuple(queue)
        self.visited: FrozenSet[str] = frozenset(visited)
        self.path_found: Optional[Tuple[str, ...]] = (
            tuple(path_found) if path_found is not None else None
        )
        self.bottleneck = bottleneck
        self.max_flow = max_flow
        self.logs: Tuple[str, ...] = tuple(logs)

    def evolve(self, **changes: Any) -> "EngineState":
        fields = {name: getattr(self, name) for name in self.__slots__}
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"unknown EngineState fields: {sorted(unknown)}")
        fields.update(changes)
        return EngineState(**fields)

    def with_log(self, message: str, **changes: Any) -> "EngineState":
        return self.evolve(logs=self.logs + (message,), **changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EngineState):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __repr__(self) -> str:
        return (
            f"EngineState(phase={self.phase.value}, queue={list(self.queue)}, "
            f"visited={sorted(self.visited)}, path={self.path_found}, "
            f"bottleneck={self.bottleneck}, max_flow={self.max_flow}, logs={len(self.logs)})"
        )
