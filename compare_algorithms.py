#!/usr/bin/env python3
"""
Compare the spgraph solvers on generated graphs.

This script generates every configuration in ``generator.test_cases``, runs
each applicable algorithm on it, checks that the algorithms agree on
distances, and writes a CSV with comparable metrics.

Algorithms that reject an instance (negative edge for Dijkstra, cycle for the
acyclic solver) are recorded with their error instead of a timing.
"""

from __future__ import annotations

import csv
import math
import time
from pathlib import Path
from typing import Dict, List, Optional

from generator.graph_generator import generate_graph
from generator.test_cases import ALL_TEST_SETS
from spgraph.exceptions import AlgorithmError
from spgraph.graph import Graph
from spgraph.solver import ALGORITHMS, SSSPResult, make_solver


def _run_solver(name: str, G: Graph, source: str) -> tuple[Dict[str, object], Optional[SSSPResult]]:
    # Track peak memory via tracemalloc for fair comparison
    import tracemalloc

    solver = make_solver(name, G, source)
    tracemalloc.start()
    t0 = time.perf_counter()
    try:
        res = solver.solve()
    except AlgorithmError as exc:
        tracemalloc.stop()
        return {"algo": name, "error": type(exc).__name__}, None
    wall_ms = (time.perf_counter() - t0) * 1000.0
    _cur, peak_bytes = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    metrics = solver.metrics(wall_ms=wall_ms, peak_mib=peak_bytes / (1024 * 1024))
    row: Dict[str, object] = {
        "algo": name,
        "wall_ms": metrics.wall_ms,
        "peak_mib": metrics.peak_mib,
        "reached": sum(1 for d in res.distances.values() if d < math.inf),
    }
    row.update(metrics.counters)
    return row, res


def _max_abs_diff(a: SSSPResult, b: SSSPResult) -> float:
    worst = 0.0
    for name, da in a.distances.items():
        db = b.distances[name]
        if da == math.inf or db == math.inf:
            if da != db:
                return math.inf
            continue
        worst = max(worst, abs(da - db))
    return worst


def main() -> None:
    out_csv = Path("algorithm_comparison.csv")

    fieldnames: List[str] = [
        "test_set",
        "n",
        "m",
        "source",
        "algo",
        "error",
        "wall_ms",
        "peak_mib",
        "reached",
        "edges_relaxed",
        "dequeues",
        "heap_pushes",
        "stale_skips",
        "decrease_keys",
        "max_abs_diff",
    ]

    rows: List[Dict[str, object]] = []
    for test_set, cases in ALL_TEST_SETS.items():
        for cfg in cases:
            gen = generate_graph(**cfg)
            G = Graph.from_edges(gen.edges)
            reference: Optional[SSSPResult] = None

            for algo in ALGORITHMS:
                if algo == "unweighted" and cfg.get("weight_dist") != "unit":
                    continue
                r, res = _run_solver(algo, G, gen.source)
                row: Dict[str, object] = {
                    "test_set": test_set,
                    "n": G.n,
                    "m": G.m,
                    "source": gen.source,
                }
                row.update(r)
                if res is not None:
                    if reference is None:
                        reference = res
                    row["max_abs_diff"] = _max_abs_diff(reference, res)
                rows.append(row)
                wall = row.get("wall_ms")
                wall_txt = f"{wall:.2f}" if isinstance(wall, float) else str(row.get("error"))
                print(
                    f"{test_set:16s} algo={algo:17s} n={G.n:7d} m={G.m:8d} wall_ms={wall_txt}"
                )

    with out_csv.open("w", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow({k: row.get(k, "") for k in fieldnames})

    print(f"\nWrote CSV summary to {out_csv}")


if __name__ == "__main__":
    main()
