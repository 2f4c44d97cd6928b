"""Path reconstruction from predecessor maps."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple, Union

Float = float


@dataclass(frozen=True)
class PathResult:
    """Shortest path to ``destination`` and its total cost."""

    destination: str
    cost: Float
    vertices: Tuple[str, ...]

    @property
    def reachable(self) -> bool:
        return True

    def format(self) -> str:
        """Return ``"(Cost is: 3.0) A to B to C"``."""
        return f"(Cost is: {self.cost}) " + " to ".join(self.vertices)


@dataclass(frozen=True)
class Unreachable:
    """Marker result for a destination with no path from the start."""

    destination: str

    @property
    def reachable(self) -> bool:
        return False

    def format(self) -> str:
        return f"{self.destination} is unreachable"


PathQuery = Union[PathResult, Unreachable]


def reconstruct_path(
    predecessors: Mapping[str, Optional[str]],
    source: str,
    target: str,
) -> List[str]:
    """Return the vertices from ``source`` to ``target`` (inclusive).

    The predecessor chain is walked iteratively, so path length is not
    limited by the interpreter's recursion depth.

    Args:
        predecessors: Predecessor of each vertex, ``None`` at the root or for
            unreached vertices.
        source: Start vertex name.
        target: Destination vertex name.

    Returns:
        Vertex names from source to target, or an empty list if the chain from
        ``target`` does not lead back to ``source``.
    """
    chain: List[str] = []
    cur: Optional[str] = target
    seen = set()
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if cur in seen:  # corrupt predecessor map
            break
        seen.add(cur)
        cur = predecessors.get(cur)
    return []


def build_query(
    distances: Mapping[str, Float],
    predecessors: Mapping[str, Optional[str]],
    source: str,
    target: str,
) -> PathQuery:
    """Return a :class:`PathResult` or :class:`Unreachable` for ``target``."""
    cost = distances.get(target, math.inf)
    if cost == math.inf:
        return Unreachable(target)
    return PathResult(target, cost, tuple(reconstruct_path(predecessors, source, target)))


__all__ = ["PathResult", "Unreachable", "PathQuery", "reconstruct_path", "build_query"]
