from typing import Union

from exceptions import CapacityError

Number = Union[int, float]

EPS = 1e-9


class Edge:
    """
    One directed arc of the network being edited / solved.
    Residual arcs are never materialised: the forward residual is
    `capacity - flow`, the backward residual is `flow` itself.
    """

    __slots__ = (
        "id",              # stable edge id ("e1", ...)
        "u",               # from node id
        "v",               # to node id
        "capacity",        # upper bound, never negative
        "flow",            # current flow, 0 <= flow <= capacity
    )

    def __init__(
        self,
        id: str,
        u: str,
        v: str,
        capacity: Number,
        flow: Number = 0,
    ) -> None:
        if capacity < 0:
            raise CapacityError(f"edge {id}: capacity must be non-negative, got {capacity}")
        if flow < 0 or flow > capacity:
            raise CapacityError(f"edge {id}: flow {flow} outside [0, {capacity}]")
        self.id = id
        self.u = u
        self.v = v
        self.capacity = capacity
        self.flow = flow

    # ------------------------------------------------------------------ helpers

    def remaining_capacity(self) -> Number:
        return self.capacity - self.flow

    def is_saturated(self) -> bool:
        return self.flow >= self.capacity

    def augment(self, delta: Number) -> None:
        """
        Push `delta` units along this arc (negative `delta` cancels flow).
        """
        new_flow = self.flow + delta
        # float capacities: land exactly on the band edges
        if abs(new_flow - self.capacity) <= EPS:
            new_flow = self.capacity
        elif abs(new_flow) <= EPS:
            new_flow = 0
        if new_flow < 0 or new_flow > self.capacity:
            raise CapacityError(
                f"edge {self.id}: pushing {delta} would set flow to {new_flow} "
                f"outside [0, {self.capacity}]"
            )
        self.flow = new_flow

    def copy(self) -> "Edge":
        return Edge(self.id, self.u, self.v, self.capacity, self.flow)

    # ------------------------------------------------------------------ dunder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.id == other.id
            and self.u == other.u
            and self.v == other.v
            and self.capacity == other.capacity
            and self.flow == other.flow
        )

    def __repr__(self) -> str:  # nice for debugging
        return f"Edge({self.id}: {self.u}→{self.v}, flow={self.flow}/{self.capacity})"
