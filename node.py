from enum import Enum
from typing import Optional, Union

from edge import Number


class Direction(str, Enum):
    FORWARD = "+"    # reached through an edge leaving the predecessor
    BACKWARD = "-"   # reached by cancelling flow on an edge entering the predecessor


class _Unbounded:
    """
    Flow available at the source before any edge has constrained it.
    Deliberately not a number: it never takes part in arithmetic or
    comparisons, `limit_flow` is the only place that looks at it.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "∞"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNBOUNDED = _Unbounded()

LabelFlow = Union[Number, _Unbounded]


def limit_flow(available: LabelFlow, residual: Number) -> Number:
    """
    Flow deliverable one edge further along a partial path.
    """
    if available is UNBOUNDED:
        return residual
    return min(available, residual)


class Label:
    """
    Labeling-tree entry for one node in the current round.
    `prev_node_id` is a lookup key into the current node list, not a reference.
    """

    __slots__ = ("prev_node_id", "direction", "flow")

    def __init__(
        self,
        prev_node_id: Optional[str],
        direction: Direction,
        flow: LabelFlow,
    ) -> None:
        self.prev_node_id = prev_node_id
        self.direction = direction
        self.flow = flow

    def is_root(self) -> bool:
        return self.prev_node_id is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return (
            self.prev_node_id == other.prev_node_id
            and self.direction == other.direction
            and self.flow == other.flow
        )

    def __repr__(self) -> str:
        prev = self.prev_node_id if self.prev_node_id is not None else "-"
        return f"({prev}, {self.direction.value}, {self.flow!r})"


def source_label() -> Label:
    return Label(None, Direction.FORWARD, UNBOUNDED)


class Node:

    __slots__ = ("id", "is_source", "is_sink", "label")

    def __init__(
        self,
        id: str,
        is_source: bool = False,
        is_sink: bool = False,
        label: Optional[Label] = None,
    ) -> None:
        self.id = id
        self.is_source = is_source
        self.is_sink = is_sink
        self.label = label

    def copy(self) -> "Node":
        # labels are never mutated in place, sharing them is fine
        return Node(self.id, self.is_source, self.is_sink, self.label)

    def without_label(self) -> "Node":
        return Node(self.id, self.is_source, self.is_sink, None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.id == other.id
            and self.is_source == other.is_source
            and self.is_sink == other.is_sink
            and self.label == other.label
        )

    def __repr__(self) -> str:
        role = "source" if self.is_source else "sink" if self.is_sink else ""
        parts = [self.id]
        if role:
            parts.append(role)
        if self.label is not None:
            parts.append(f"label={self.label!r}")
        return f"Node({', '.join(parts)})"
