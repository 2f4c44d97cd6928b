"""Custom exception types used across :mod:`spgraph`."""

from __future__ import annotations


class SPGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(SPGraphError, ValueError):
    """Raised for invalid user input such as malformed edges."""


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails."""


class UnknownVertexError(InputError, KeyError):
    """Raised when a start or destination name is not in the graph."""

    def __init__(self, name: str, role: str = "vertex") -> None:
        super().__init__(f"{role} vertex not found: {name!r}")
        self.name = name
        self.role = role

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ConfigError(SPGraphError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(SPGraphError, RuntimeError):
    """Raised when a shortest-path run cannot produce a valid result."""


class InvalidEdgeWeightError(AlgorithmError):
    """Raised when a nonnegative-weight algorithm meets a negative edge."""


class NegativeCycleError(AlgorithmError):
    """Raised when the relaxation cap of the negative-weight solver trips.

    The cap is a heuristic: it fires for vertices reachable from a negative
    cycle, but may also fire on slow-converging graphs without one.
    """


class CyclicGraphError(AlgorithmError):
    """Raised when the acyclic solver cannot order every vertex."""


class HeapError(SPGraphError):
    """Base class for pairing-heap contract violations."""


class HeapUnderflowError(HeapError, IndexError):
    """Raised by ``delete_min``/``find_min`` on an empty heap."""


class InvalidDecreaseKeyError(HeapError, ValueError):
    """Raised when ``decrease_key`` does not strictly lower the key."""


__all__ = [
    "SPGraphError",
    "InputError",
    "GraphFormatError",
    "UnknownVertexError",
    "ConfigError",
    "AlgorithmError",
    "InvalidEdgeWeightError",
    "NegativeCycleError",
    "CyclicGraphError",
    "HeapError",
    "HeapUnderflowError",
    "InvalidDecreaseKeyError",
]
