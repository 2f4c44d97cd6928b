#!/usr/bin/env python3
"""
Directed weighted graph generator for exercising the spgraph solvers.

SUPPORTED GRAPH TYPES
---------------------
1. erdos_renyi
   Random directed graphs with uniformly sampled edges.
   Use for:
     - Cross-checking the two Dijkstra variants
     - Negative-weight runs (cycles are likely, so expect cycle reports)

2. dag
   Directed acyclic graphs (edges only from lower- to higher-index vertices).
   Use for:
     - The acyclic (topological) solver, including negative weights

3. grid
   2D grid graphs with edges between neighboring vertices (bidirectional).
   Use for:
     - Many equal-length shortest paths (tie handling)

4. exponent
   Vertices 0..n; edge i -> i+1 with cost i, and edge i -> 2i with cost
   i * (1 + log2 i) for 2 <= i and 2i <= n. Deterministic, acyclic.

WEIGHT DISTRIBUTIONS
--------------------
- uniform: evenly distributed integer weights in [w_min, w_max]
- small_int: weights concentrated in [w_min, w_min + 10] (many ties)
- unit: every edge costs 1 (unweighted comparisons)

Negative weights are only produced when ``allow_negative=True``.

Saved files use the ``source destination cost`` line format read by
``spgraph.io``; the first line is a ``# n m source`` comment.
"""

from __future__ import annotations

import math
import os
import random
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

from .test_cases import ALL_TEST_SETS

EdgeList = List[Tuple[str, str, float]]

WeightDist = Literal["uniform", "small_int", "unit"]
GraphType = Literal["erdos_renyi", "dag", "grid", "exponent"]


@dataclass(frozen=True)
class GeneratedGraph:
    n: int
    m: int
    edges: EdgeList
    source: str
    metadata: Dict[str, object] = field(default_factory=dict)


def _sample_weight(
    rng: random.Random,
    dist: WeightDist,
    w_min: int,
    w_max: int,
) -> float:
    if dist == "unit":
        return 1.0
    if w_max < w_min:
        raise ValueError("w_max must be >= w_min.")
    if dist == "uniform":
        return float(rng.randint(w_min, w_max))
    if dist == "small_int":
        # Concentrate weights in a small range to create many ties
        hi = min(w_max, w_min + 10)
        return float(rng.randint(w_min, hi))
    raise ValueError(f"Unknown weight distribution: {dist}")


def exponent_graph(n: int = 1000) -> GeneratedGraph:
    """Return the exponent graph on vertices ``0 .. n``."""
    if n < 1:
        raise ValueError("n must be >= 1.")
    edges: EdgeList = []
    for i in range(n):
        edges.append((str(i), str(i + 1), float(i)))
        if i >= 2 and 2 * i <= n:
            edges.append((str(i), str(2 * i), i * (1 + math.log2(i))))
    return GeneratedGraph(
        n=n + 1,
        m=len(edges),
        edges=edges,
        source="0",
        metadata={"graph_type": "exponent"},
    )


def generate_graph(
    *,
    n: int,
    m: Optional[int] = None,
    graph_type: GraphType = "erdos_renyi",
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    source: int = 0,
    allow_self_loops: bool = False,
    allow_negative: bool = False,
    ensure_weakly_connected: bool = True,
    grid_rows: Optional[int] = None,
    grid_cols: Optional[int] = None,
) -> GeneratedGraph:
    """
    Generate a directed weighted graph with vertex names ``"0" .. "n-1"``.

    Notes:
    - If ensure_weakly_connected=True, a backbone chain (i -> i+1) is added
      first so that the instance is weakly connected.
    - For DAG graphs, edges go from lower index to higher index (acyclic).
    - ``graph_type="exponent"`` ignores every parameter except ``n``.

    Raises:
        ValueError: On inconsistent parameters.
    """
    if graph_type == "exponent":
        return exponent_graph(n)
    if n <= 0:
        raise ValueError("n must be > 0.")
    if not (0 <= source < n):
        raise ValueError("source must be in [0, n).")
    if w_min < 0 and not allow_negative:
        raise ValueError("w_min must be >= 0 unless allow_negative=True.")

    rng = random.Random(seed)

    if graph_type == "grid":
        if grid_rows is None or grid_cols is None:
            grid_rows = max(1, int(math.isqrt(n)))
            grid_cols = max(1, (n + grid_rows - 1) // grid_rows)
        if grid_rows * grid_cols < n:
            raise ValueError("grid_rows*grid_cols must be >= n.")
    elif m is None:
        m = min(n * 4, n * (n - 1))
    if m is not None and m < 0:
        raise ValueError("m must be >= 0.")

    edges_set: set[Tuple[int, int]] = set()
    edges: List[Tuple[int, int, float]] = []

    def add_edge(u: int, v: int) -> None:
        if not allow_self_loops and u == v:
            return
        if (u, v) in edges_set:
            return
        edges_set.add((u, v))
        edges.append((u, v, _sample_weight(rng, weight_dist, w_min, w_max)))

    if ensure_weakly_connected and n >= 2 and graph_type != "grid":
        for i in range(n - 1):
            add_edge(i, i + 1)

    if graph_type == "erdos_renyi":
        target_m = min(m or 0, n * n if allow_self_loops else n * (n - 1))
        while len(edges) < target_m:
            add_edge(rng.randrange(n), rng.randrange(n))

    elif graph_type == "dag":
        target_m = min(m or 0, n * (n - 1) // 2)
        while len(edges) < target_m:
            u = rng.randrange(n)
            v = rng.randrange(n)
            if u == v:
                continue
            if u > v:
                u, v = v, u
            add_edge(u, v)

    elif graph_type == "grid":
        R, C = grid_rows, grid_cols
        for r in range(R):
            for c in range(C):
                u = r * C + c
                if u >= n:
                    continue
                if c + 1 < C and u + 1 < n:
                    add_edge(u, u + 1)
                    add_edge(u + 1, u)
                if r + 1 < R and u + C < n:
                    add_edge(u, u + C)
                    add_edge(u + C, u)
        if m is not None:
            target_m = min(m, n * (n - 1))
            while len(edges) < target_m:
                add_edge(rng.randrange(n), rng.randrange(n))

    else:
        raise ValueError(f"Unknown graph_type: {graph_type}")

    return GeneratedGraph(
        n=n,
        m=len(edges),
        edges=[(str(u), str(v), w) for u, v, w in edges],
        source=str(source),
        metadata={
            "graph_type": graph_type,
            "weight_dist": weight_dist,
            "w_min": w_min,
            "w_max": w_max,
            "seed": seed,
            "ensure_weakly_connected": ensure_weakly_connected,
            "allow_self_loops": allow_self_loops,
        },
    )


def save_edge_list_txt(g: GeneratedGraph, path: str) -> None:
    """
    Save in the edge-list format read by ``spgraph.io``:
        # n m source
        u v w
        ...
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"# {g.n} {g.m} {g.source}\n")
        for u, v, w in g.edges:
            f.write(f"{u} {v} {w}\n")


def load_edge_list_txt(path: str) -> GeneratedGraph:
    """
    Load the format produced by save_edge_list_txt.
    """
    with open(path, "r", encoding="utf-8") as f:
        header = f.readline().lstrip("#").split()
        n, source = int(header[0]), header[2]
        edges: EdgeList = []
        for line in f:
            if not line.strip():
                continue
            u, v, w = line.split()
            edges.append((u, v, float(w)))
    return GeneratedGraph(
        n=n,
        m=len(edges),
        edges=edges,
        source=source,
        metadata={"loaded_from": path},
    )


if __name__ == "__main__":
    os.makedirs("generated-graphs", exist_ok=True)

    for name, cases in ALL_TEST_SETS.items():
        for cfg in cases:
            graph = generate_graph(**cfg)
            out = f"generated-graphs/{name}_n{cfg['n']}_seed{cfg.get('seed', 'na')}.txt"
            save_edge_list_txt(graph, out)
            print(f"Saved {out} (n={graph.n}, m={graph.m})")
