"""Public package exports for :mod:`spgraph`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    ConfigError,
    CyclicGraphError,
    GraphFormatError,
    HeapError,
    HeapUnderflowError,
    InputError,
    InvalidDecreaseKeyError,
    InvalidEdgeWeightError,
    NegativeCycleError,
    SPGraphError,
    UnknownVertexError,
)
from .graph import Edge, Graph, PathEntry, Vertex
from .io import parse_edges, read_graph, write_graph, write_report
from .logger import Logger, NoopLogger, StdLogger
from .pairing_heap import PairingHeap, Position
from .path import PathResult, Unreachable
from .solver import ALGORITHMS, SolverConfig, SolverMetrics, SSSPResult, make_solver

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "Edge",
    "Graph",
    "PathEntry",
    "Vertex",
    "PairingHeap",
    "Position",
    "PathResult",
    "Unreachable",
    "SSSPResult",
    "SolverConfig",
    "SolverMetrics",
    "make_solver",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "parse_edges",
    "read_graph",
    "write_graph",
    "write_report",
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
