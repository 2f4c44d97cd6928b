"""Command-line interface for running the shortest-path solvers."""

from __future__ import annotations

import argparse
import sys
import time
import traceback
from pathlib import Path
from typing import List, Optional

from .exceptions import AlgorithmError, ConfigError, InputError, SPGraphError
from .export import export_dag_graphml, export_dag_json
from .graph import Graph
from .io import read_graph, write_report
from .logger import StdLogger
from .solver import ALGORITHMS, SolverConfig

EXAMPLE_EDGES = """# source destination cost
A B 1
B C 2
A C 5
C D 1
"""

EXIT_OK = 0
EXIT_INPUT = 64
EXIT_ALGORITHM = 65
EXIT_INTERNAL = 70


def _build_graph_from_file(path: str, fmt: Optional[str], logger: StdLogger) -> Graph:
    """Build a :class:`Graph` from an edges file."""
    if not Path(path).exists():
        raise InputError(f"edges file not found: {path}")
    return read_graph(path, fmt, logger=logger)


def _build_generated_graph(kind: str, n: int, seed: int) -> Graph:
    """Generate one of the synthetic graph families."""
    from generator.graph_generator import generate_graph

    try:
        gen = generate_graph(n=n, graph_type=kind, seed=seed)
    except ValueError as exc:
        raise InputError(f"cannot generate {kind} graph: {exc}") from exc
    return Graph.from_edges(gen.edges)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``spgraph`` command-line tool."""
    examples = (
        "Examples:\n"
        "  spgraph --edges graph.txt --source A --target C\n"
        "  spgraph --edges graph.txt --source A --all-targets --algorithm negative\n"
        "  spgraph --generate exponent --source 0 --all-targets --out paths.txt\n"
    )
    p = argparse.ArgumentParser(
        prog="spgraph",
        description="Single-source shortest paths over a named-vertex graph",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit log events as JSON lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument(
        "--generate",
        choices=["exponent", "erdos_renyi", "dag", "grid"],
        help="Use a generated graph",
    )
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges file to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=["txt", "csv", "jsonl"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )
    p.add_argument("--n", type=int, default=1000, help="Vertices (generated graphs)")
    p.add_argument("--seed", type=int, default=0, help="Seed for generated graphs")

    p.add_argument("--algorithm", choices=ALGORITHMS, default="dijkstra-binary")
    p.add_argument("--source", type=str, default=None, help="Start vertex name")
    tgt = p.add_mutually_exclusive_group()
    tgt.add_argument(
        "--target", action="append", default=None, help="Destination vertex (repeatable)"
    )
    tgt.add_argument("--all-targets", action="store_true", help="Report every other vertex")
    p.add_argument("--report-format", choices=["text", "json"], default="text")
    p.add_argument("--out", type=str, default=None, help="Write the report here (default stdout)")
    p.add_argument(
        "--cycle-cap-factor",
        type=int,
        default=2,
        help="Negative-cycle heuristic: cap enqueues plus dequeues per vertex at factor*|V|",
    )
    p.add_argument(
        "--no-count-relaxations",
        dest="count_relaxations",
        action="store_false",
        help="Do not count edge relaxations",
    )
    p.add_argument("--export-json", type=str, default=None, help="Write shortest-path DAG as JSON")
    p.add_argument(
        "--export-graphml",
        type=str,
        default=None,
        help="Write shortest-path DAG as GraphML",
    )

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_EDGES)
        return EXIT_OK

    stream = sys.stdout if args.log_json and args.out else sys.stderr
    logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=stream)

    try:
        cfg = SolverConfig(
            cycle_cap_factor=args.cycle_cap_factor,
            count_relaxations=args.count_relaxations,
        )
        if args.generate:
            G = _build_generated_graph(args.generate, args.n, args.seed)
        else:
            G = _build_graph_from_file(args.edges, args.format, logger)

        source = args.source
        if source is None:
            if args.generate:
                source = "0"
            else:
                raise InputError("--source is required with --edges")

        if args.verbose:
            sys.stderr.write(
                f"config: n={G.n} m={G.m} algorithm={args.algorithm} source={source}\n"
            )

        t0 = time.perf_counter()
        result = G.run(args.algorithm, source, config=cfg, logger=logger)
        wall_ms = (time.perf_counter() - t0) * 1000.0

        if args.all_targets:
            targets = [name for name in G.names() if name != source]
        else:
            targets = args.target or []

        if args.out:
            with open(args.out, "w", encoding="utf-8") as fh:
                reachable = write_report(G, targets, fh, fmt=args.report_format)
        else:
            reachable = write_report(G, targets, sys.stdout, fmt=args.report_format)

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_dag_json(G))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_dag_graphml(G))

        logger.info(
            "run",
            n=G.n,
            m=G.m,
            algorithm=args.algorithm,
            source=source,
            targets=len(targets),
            reachable=reachable,
            wall_ms=round(wall_ms, 3),
            **result.counters,
        )
        return EXIT_OK

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_INPUT
    except AlgorithmError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"algorithm failed: {exc}\n")
        return EXIT_ALGORITHM
    except SPGraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
