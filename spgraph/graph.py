"""Directed graph with named vertices, the data model shared by all solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import AlgorithmError, GraphFormatError, UnknownVertexError
from .path import PathQuery, PathResult

if TYPE_CHECKING:  # pragma: no cover
    from .logger import Logger
    from .solver import SolverConfig, SSSPResult

Float = float
EdgeTriple = Tuple[str, str, Float]


@dataclass(frozen=True)
class Edge:
    """Outgoing edge: a reference to the head vertex and the edge cost."""

    dest: "Vertex"
    cost: Float


@dataclass(eq=False, repr=False)
class Vertex:
    """Named vertex owning its outgoing edges in insertion order.

    Vertices hash by identity. They hold no per-run algorithm state; solvers
    keep distances, predecessors and scratch tables in their own side tables.
    """

    name: str
    adj: List[Edge] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Vertex({self.name!r}, out_degree={len(self.adj)})"


@dataclass(frozen=True, order=True)
class PathEntry:
    """Priority-queue payload ordered by ``cost`` only."""

    vertex: Vertex = field(compare=False)
    cost: Float


@dataclass
class Graph:
    """Directed weighted graph keyed by vertex name.

    Vertices are created on first mention and kept in creation order. Edge
    costs may be negative; each algorithm checks the sign constraints it needs
    while traversing.

    Attributes:
        vertices: Mapping from vertex name to :class:`Vertex`.
    """

    vertices: Dict[str, Vertex] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._result: Optional["SSSPResult"] = None

    # ---------- construction ----------------------------------------------

    def add_vertex(self, name: str) -> Vertex:
        """Return the vertex called ``name``, creating it if needed."""
        v = self.vertices.get(name)
        if v is None:
            v = Vertex(name)
            self.vertices[name] = v
            self._result = None
        return v

    def add_edge(self, source: str, dest: str, cost: Float) -> None:
        """Add a directed edge from ``source`` to ``dest``.

        Args:
            source: Tail vertex name.
            dest: Head vertex name.
            cost: Edge cost. Negative values are accepted here.

        Raises:
            GraphFormatError: If ``cost`` is not a finite-or-infinite number.

        Examples:
            ```python
            >>> g = Graph()
            >>> g.add_edge("A", "B", 1.5)
            >>> g.vertex("A").adj
            [Edge(dest=Vertex('B', out_degree=0), cost=1.5)]
            ```
        """
        if isinstance(cost, bool) or not isinstance(cost, (int, float)):
            raise GraphFormatError(f"non-numeric cost {cost!r} on edge ({source}, {dest})")
        if math.isnan(cost):
            raise GraphFormatError(f"NaN cost on edge ({source}, {dest})")
        v = self.add_vertex(source)
        w = self.add_vertex(dest)
        v.adj.append(Edge(w, float(cost)))
        # results describe the graph as it was when the run started
        self._result = None

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeTriple]) -> "Graph":
        """Create a graph from ``(source, dest, cost)`` triples."""
        g = cls()
        for u, v, w in edges:
            g.add_edge(str(u), str(v), w)
        return g

    # ---------- lookup ----------------------------------------------------

    def vertex(self, name: str, role: str = "vertex") -> Vertex:
        """Return the vertex called ``name``.

        Raises:
            UnknownVertexError: If no such vertex exists.
        """
        try:
            return self.vertices[name]
        except KeyError:
            raise UnknownVertexError(name, role) from None

    def __contains__(self, name: object) -> bool:
        return name in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def n(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    @property
    def m(self) -> int:
        """Number of edges, counting duplicates and self-loops."""
        return sum(len(v.adj) for v in self.vertices.values())

    def names(self) -> List[str]:
        """Return vertex names in creation order."""
        return list(self.vertices)

    def edges(self) -> Iterator[EdgeTriple]:
        """Yield ``(source, dest, cost)`` for every edge."""
        for v in self.vertices.values():
            for e in v.adj:
                yield v.name, e.dest.name, e.cost

    def out_degree(self, name: str) -> int:
        """Return the number of edges leaving ``name``."""
        return len(self.vertex(name).adj)

    # ---------- algorithms ------------------------------------------------

    def run(
        self,
        kind: str,
        start: str,
        config: Optional["SolverConfig"] = None,
        logger: Optional["Logger"] = None,
    ) -> "SSSPResult":
        """Run the shortest-path algorithm ``kind`` from ``start``.

        Any previous result is discarded first, so a failing run leaves the
        graph without a current result.

        Args:
            kind: One of ``unweighted``, ``dijkstra-binary``,
                ``dijkstra-pairing``, ``negative`` or ``acyclic``.
            start: Start vertex name.
            config: Optional solver configuration.
            logger: Optional event logger.

        Returns:
            Distances and predecessors of the completed run.

        Raises:
            ConfigError: If ``kind`` is unknown.
            UnknownVertexError: If ``start`` is not in the graph.
            AlgorithmError: If the algorithm rejects the graph.
        """
        from .solver import make_solver

        self._result = None
        solver = make_solver(kind, self, start, config=config, logger=logger)
        self._result = solver.solve()
        return self._result

    def unweighted(self, start: str, **kwargs) -> "SSSPResult":
        """Hop-count shortest paths (breadth-first search)."""
        return self.run("unweighted", start, **kwargs)

    def dijkstra(self, start: str, **kwargs) -> "SSSPResult":
        """Dijkstra with a binary heap and lazy deletion of stale entries."""
        return self.run("dijkstra-binary", start, **kwargs)

    def dijkstra_pairing(self, start: str, **kwargs) -> "SSSPResult":
        """Dijkstra with a pairing heap and true decrease-key."""
        return self.run("dijkstra-pairing", start, **kwargs)

    def negative(self, start: str, **kwargs) -> "SSSPResult":
        """Queue-based Bellman-Ford tolerating negative edge costs."""
        return self.run("negative", start, **kwargs)

    def acyclic(self, start: str, **kwargs) -> "SSSPResult":
        """Relaxation in topological order; the graph must be acyclic."""
        return self.run("acyclic", start, **kwargs)

    # ---------- results ---------------------------------------------------

    @property
    def result(self) -> Optional["SSSPResult"]:
        """Result of the most recent successful run, if it is still current."""
        return self._result

    def current_result(self) -> "SSSPResult":
        """Return the last run's result or raise :class:`AlgorithmError`."""
        if self._result is None:
            raise AlgorithmError("no current result: run a shortest-path algorithm first")
        return self._result

    def query_path(self, dest: str) -> "PathQuery":
        """Return the path to ``dest`` from the last run's start.

        Returns:
            A :class:`~spgraph.path.PathResult` or
            :class:`~spgraph.path.Unreachable`.

        Raises:
            UnknownVertexError: If ``dest`` is not in the graph.
            AlgorithmError: If no run has completed since the last change.
        """
        self.vertex(dest, role="destination")
        return self.current_result().query(dest)

    def path_of(self, dest: str) -> List[str]:
        """Return vertex names from start to ``dest``, or ``[]`` if unreachable."""
        found = self.query_path(dest)
        if isinstance(found, PathResult):
            return list(found.vertices)
        return []

    def distance(self, dest: str) -> Float:
        """Return the last run's distance to ``dest`` (``inf`` if unreachable)."""
        self.vertex(dest, role="destination")
        return self.current_result().distances[dest]
