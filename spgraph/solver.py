"""Single-source shortest-path solvers for the five supported regimes."""

from __future__ import annotations

import heapq
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set, Type

from .exceptions import (
    ConfigError,
    CyclicGraphError,
    InvalidEdgeWeightError,
    NegativeCycleError,
)
from .graph import Float, Graph, PathEntry, Vertex
from .logger import Logger, NoopLogger
from .pairing_heap import PairingHeap, Position
from .path import PathQuery, build_query, reconstruct_path

ALGORITHMS = ("unweighted", "dijkstra-binary", "dijkstra-pairing", "negative", "acyclic")


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solvers.

    Attributes:
        cycle_cap_factor: The negative-weight solver reports a suspected
            negative cycle once the enqueue-plus-dequeue count of a vertex
            exceeds ``cycle_cap_factor * |V|``, i.e. after roughly
            ``cycle_cap_factor * |V| / 2`` dequeues.
        count_relaxations: Maintain the ``edges_relaxed`` counter. Turning it
            off leaves the counter at zero.
    """

    cycle_cap_factor: int = 2
    count_relaxations: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.cycle_cap_factor, bool) or not isinstance(self.cycle_cap_factor, int):
            raise ConfigError("cycle_cap_factor must be an integer.")
        if self.cycle_cap_factor < 1:
            raise ConfigError("cycle_cap_factor must be at least 1.")
        if not isinstance(self.count_relaxations, bool):
            raise ConfigError("count_relaxations must be a boolean.")


@dataclass(frozen=True)
class SSSPResult:
    """Distances and predecessors of one completed run, keyed by vertex name."""

    kind: str
    start: str
    distances: Dict[str, Float]
    predecessors: Dict[str, Optional[str]]
    counters: Dict[str, int] = field(default_factory=dict)

    def reachable(self, name: str) -> bool:
        return self.distances.get(name, math.inf) < math.inf

    def path(self, name: str) -> List[str]:
        """Return vertex names from the start to ``name`` (empty if unreachable)."""
        if not self.reachable(name):
            return []
        return reconstruct_path(self.predecessors, self.start, name)

    def query(self, name: str) -> PathQuery:
        """Return the typed path result for ``name``."""
        return build_query(self.distances, self.predecessors, self.start, name)


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    kind: str
    n: int
    m: int
    counters: Dict[str, int]
    wall_ms: float
    peak_mib: float | None = None


class RunState:
    """Per-run distance and predecessor tables, keyed by vertex identity.

    A fresh instance is built at the start of every run, which is what resets
    the previous run's state.
    """

    def __init__(self, vertices: List[Vertex]) -> None:
        self.dist: Dict[Vertex, Float] = {v: math.inf for v in vertices}
        self.prev: Dict[Vertex, Optional[Vertex]] = {v: None for v in vertices}


class _BaseSolver:
    """Common pieces shared between the solvers."""

    kind = ""

    def __init__(
        self,
        G: Graph,
        source: str,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Input graph.
            source: Start vertex name.
            config: Optional solver configuration.
            logger: Optional event logger.

        Raises:
            UnknownVertexError: If ``source`` is not a vertex of ``G``.
        """
        self.G = G
        self.start = G.vertex(source, role="start")
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self._vertices: List[Vertex] = list(G.vertices.values())
        self.state = RunState(self._vertices)
        self.counters: Dict[str, int] = {}

    def _reset(self) -> None:
        self.state = RunState(self._vertices)
        self.counters = {
            "edges_relaxed": 0,
            "dequeues": 0,
            "heap_pushes": 0,
            "stale_skips": 0,
            "decrease_keys": 0,
        }

    def _relax(self, v: Vertex, w: Vertex, cost: Float) -> bool:
        """Relax edge ``(v, w)``.

        Returns:
            ``True`` if ``w`` got a strictly shorter distance through ``v``.
        """
        if self.cfg.count_relaxations:
            self.counters["edges_relaxed"] += 1
        dist = self.state.dist
        cand = dist[v] + cost
        if cand < dist[w]:
            dist[w] = cand
            self.state.prev[w] = v
            return True
        return False

    def _run(self) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    def solve(self) -> SSSPResult:
        """Reset all per-run state, run the algorithm and return its result."""
        self._reset()
        self._run()
        self.logger.debug("run", kind=self.kind, start=self.start.name, **self.counters)
        dist = self.state.dist
        prev = self.state.prev
        return SSSPResult(
            kind=self.kind,
            start=self.start.name,
            distances={v.name: dist[v] for v in self._vertices},
            predecessors={
                v.name: (prev[v].name if prev[v] is not None else None) for v in self._vertices
            },
            counters=self.summary(),
        )

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        """Return performance metrics for the most recent run."""
        return SolverMetrics(
            kind=self.kind,
            n=self.G.n,
            m=self.G.m,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )

    @staticmethod
    def _check_nonnegative(v: Vertex, w: Vertex, cost: Float) -> None:
        if cost < 0:
            raise InvalidEdgeWeightError(f"negative weight {cost} on edge ({v.name}, {w.name})")


class UnweightedSolver(_BaseSolver):
    """Breadth-first search; every edge counts as one hop."""

    kind = "unweighted"

    def _run(self) -> None:
        dist = self.state.dist
        prev = self.state.prev
        q: Deque[Vertex] = deque([self.start])
        dist[self.start] = 0.0

        while q:
            v = q.popleft()
            self.counters["dequeues"] += 1
            for e in v.adj:
                w = e.dest
                if self.cfg.count_relaxations:
                    self.counters["edges_relaxed"] += 1
                if dist[w] == math.inf:
                    dist[w] = dist[v] + 1
                    prev[w] = v
                    q.append(w)


class DijkstraSolver(_BaseSolver):
    """Dijkstra over ``heapq`` with lazy deletion of superseded entries."""

    kind = "dijkstra-binary"

    def _run(self) -> None:
        dist = self.state.dist
        n = len(self._vertices)
        finalized: Set[Vertex] = set()
        dist[self.start] = 0.0
        pq: List[PathEntry] = [PathEntry(self.start, 0.0)]
        self.counters["heap_pushes"] += 1

        while pq and len(finalized) < n:
            v = heapq.heappop(pq).vertex
            self.counters["dequeues"] += 1
            # lazy deletion
            if v in finalized:
                self.counters["stale_skips"] += 1
                continue
            finalized.add(v)

            for e in v.adj:
                w = e.dest
                self._check_nonnegative(v, w, e.cost)
                if self._relax(v, w, e.cost):
                    heapq.heappush(pq, PathEntry(w, dist[w]))
                    self.counters["heap_pushes"] += 1


class PairingDijkstraSolver(_BaseSolver):
    """Dijkstra over a :class:`PairingHeap` with one live entry per vertex."""

    kind = "dijkstra-pairing"

    def _run(self) -> None:
        dist = self.state.dist
        pq: PairingHeap[PathEntry] = PairingHeap()
        positions: Dict[Vertex, Position[PathEntry]] = {}
        dist[self.start] = 0.0
        positions[self.start] = pq.insert(PathEntry(self.start, 0.0))
        self.counters["heap_pushes"] += 1

        while not pq.is_empty():
            v = pq.delete_min().vertex
            self.counters["dequeues"] += 1

            for e in v.adj:
                w = e.dest
                self._check_nonnegative(v, w, e.cost)
                if not self._relax(v, w, e.cost):
                    continue
                entry = PathEntry(w, dist[w])
                pos = positions.get(w)
                if pos is None:
                    positions[w] = pq.insert(entry)
                    self.counters["heap_pushes"] += 1
                else:
                    pq.decrease_key(pos, entry)
                    self.counters["decrease_keys"] += 1


class NegativeWeightSolver(_BaseSolver):
    """FIFO label-correcting search (queue-based Bellman-Ford).

    ``enqueued[v]`` is odd while ``v`` sits in the queue; it is bumped on
    every enqueue and dequeue, so half of it counts how often ``v`` was
    processed.
    """

    kind = "negative"

    def _run(self) -> None:
        dist = self.state.dist
        cap = self.cfg.cycle_cap_factor * len(self._vertices)
        enqueued: Dict[Vertex, int] = dict.fromkeys(self._vertices, 0)
        q: Deque[Vertex] = deque([self.start])
        dist[self.start] = 0.0
        enqueued[self.start] = 1

        while q:
            v = q.popleft()
            self.counters["dequeues"] += 1
            count = enqueued[v]
            enqueued[v] = count + 1
            if count > cap:
                raise NegativeCycleError(
                    f"negative cycle suspected: {v.name} queue count exceeded cap {cap}"
                )

            for e in v.adj:
                w = e.dest
                if self._relax(v, w, e.cost) and enqueued[w] % 2 == 0:
                    enqueued[w] += 1
                    q.append(w)


class AcyclicSolver(_BaseSolver):
    """Relaxation in topological order (Kahn's algorithm); negative costs allowed."""

    kind = "acyclic"

    def _run(self) -> None:
        dist = self.state.dist
        indegree: Dict[Vertex, int] = dict.fromkeys(self._vertices, 0)
        for v in self._vertices:
            for e in v.adj:
                indegree[e.dest] += 1

        q: Deque[Vertex] = deque(v for v in self._vertices if indegree[v] == 0)
        dist[self.start] = 0.0

        iterations = 0
        while q:
            v = q.popleft()
            iterations += 1
            self.counters["dequeues"] += 1
            for e in v.adj:
                w = e.dest
                indegree[w] -= 1
                if indegree[w] == 0:
                    q.append(w)
                if dist[v] == math.inf:
                    continue
                self._relax(v, w, e.cost)

        if iterations != len(self._vertices):
            raise CyclicGraphError(
                f"graph has a cycle: only {iterations} of {len(self._vertices)} vertices ordered"
            )


SOLVERS: Dict[str, Type[_BaseSolver]] = {
    "unweighted": UnweightedSolver,
    "dijkstra-binary": DijkstraSolver,
    "dijkstra-pairing": PairingDijkstraSolver,
    "negative": NegativeWeightSolver,
    "acyclic": AcyclicSolver,
}


def make_solver(
    kind: str,
    G: Graph,
    source: str,
    config: Optional[SolverConfig] = None,
    logger: Logger | None = None,
) -> _BaseSolver:
    """Return the solver registered for ``kind``.

    Raises:
        ConfigError: If ``kind`` is not one of :data:`ALGORITHMS`.
    """
    try:
        cls = SOLVERS[kind]
    except KeyError:
        raise ConfigError(
            f"unknown algorithm '{kind}' (expected one of {', '.join(ALGORITHMS)})"
        ) from None
    return cls(G, source, config=config, logger=logger)
