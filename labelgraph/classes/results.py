"""
Result types returned by graph mutation and query operations.

Edge mutations never raise for bad input; they return an EdgeResult carrying
a reason code so the caller can log the failure and keep going.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EdgeStatus(Enum):
    """Reason codes for edge insertion and removal."""
    OK = "ok"
    SOURCE_OUT_OF_RANGE = "source_out_of_range"
    DEST_OUT_OF_RANGE = "dest_out_of_range"
    SELF_LOOP = "self_loop"
    NON_POSITIVE_WEIGHT = "non_positive_weight"
    INVALID_WEIGHT = "invalid_weight"


class PathState(Enum):
    """State of the shortest-path table of a matrix graph."""
    STALE = "stale"
    CURRENT = "current"


@dataclass(frozen=True)
class EdgeResult:
    """
    Outcome of a single edge mutation.

    Truthiness follows success, so ``if graph.insert_edge(1, 2):`` reads the
    same way as a plain boolean flag.
    """
    source: int
    dest: int
    status: EdgeStatus
    weight: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.status is EdgeStatus.OK

    def __bool__(self) -> bool:
        return self.success

    def describe(self) -> str:
        """Human readable description used in log messages."""
        if self.weight is None:
            edge = f"({self.source}, {self.dest})"
        else:
            edge = f"({self.source}, {self.dest}) with cost of {self.weight}"
        if self.success:
            return f"edge {edge}"
        return f"edge {edge}: {self.status.value.replace('_', ' ')}"


@dataclass(frozen=True)
class PathResult:
    """
    Shortest path between an ordered pair of vertices.

    ``distance`` is None and ``path`` is empty when ``dest`` cannot be
    reached from ``source``.
    """
    source: int
    dest: int
    distance: Optional[int]
    path: Tuple[int, ...] = ()

    @property
    def reachable(self) -> bool:
        return self.distance is not None

    def __str__(self) -> str:
        if not self.reachable:
            return f"no path from {self.source} to {self.dest}"
        chain = " ".join(str(v) for v in self.path)
        return f"{self.source} -> {self.dest}: {self.distance} [{chain}]"
