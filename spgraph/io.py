"""Graph input/output helpers and path reports."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, TextIO, Tuple

from .exceptions import ConfigError, GraphFormatError, SPGraphError, UnknownVertexError
from .graph import EdgeTriple, Graph
from .logger import Logger, NoopLogger
from .path import PathResult

EdgeList = List[EdgeTriple]


def parse_edges(lines: Iterable[str], logger: Logger | None = None) -> EdgeList:
    """Parse whitespace-separated ``source destination cost`` lines.

    Blank lines and lines starting with ``#`` are ignored. Lines that do not
    have exactly three fields or whose cost is not a number are skipped with a
    ``skip_line`` warning.

    Args:
        lines: Iterable of text lines.
        logger: Receives a warning for every skipped line.

    Returns:
        Parsed ``(source, dest, cost)`` triples in input order.
    """
    log = logger or NoopLogger()
    edges: EdgeList = []
    for lineno, raw in enumerate(lines, start=1):
        row = raw.strip()
        if not row or row.startswith("#"):
            continue
        parts = row.split()
        if len(parts) != 3:
            log.warning("skip_line", lineno=lineno, reason="expected 3 fields", line=row)
            continue
        try:
            cost = float(parts[2])
        except ValueError:
            log.warning("skip_line", lineno=lineno, reason="bad cost", line=row)
            continue
        if math.isnan(cost):
            log.warning("skip_line", lineno=lineno, reason="bad cost", line=row)
            continue
        edges.append((parts[0], parts[1], cost))
    return edges


def _read_txt(path: Path, logger: Logger) -> EdgeList:
    with path.open("r", encoding="utf-8") as fh:
        return parse_edges(fh, logger)


def _write_txt(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for u, v, w in G.edges():
            fh.write(f"{u} {v} {w}\n")


def _read_csv(path: Path, logger: Logger) -> EdgeList:
    """Read ``u,v,w`` rows; tabs are accepted as separators, ``#`` starts a comment."""
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = [p.strip() for p in row.replace("\t", ",").split(",")]
            if len(parts) < 3:
                logger.warning("skip_line", lineno=lineno, reason="expected 3 columns", line=row)
                continue
            try:
                w = float(parts[2])
            except ValueError:
                logger.warning("skip_line", lineno=lineno, reason="bad cost", line=row)
                continue
            if math.isnan(w):
                logger.warning("skip_line", lineno=lineno, reason="bad cost", line=row)
                continue
            edges.append((parts[0], parts[1], w))
    return edges


def _write_csv(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for u, v, w in G.edges():
            fh.write(f"{u},{v},{w}\n")


def _read_jsonl(path: Path, logger: Logger) -> EdgeList:
    """Read one ``{"u": ..., "v": ..., "w": ...}`` object per line."""
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                edges.append((str(obj["u"]), str(obj["v"]), float(obj["w"])))
            except (ValueError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"{path}:{lineno}: bad edge record: {exc}") from exc
    return edges


def _write_jsonl(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for u, v, w in G.edges():
            fh.write(json.dumps({"u": u, "v": v, "w": w}) + "\n")


_FMT_READERS: Dict[str, Callable[[Path, Logger], EdgeList]] = {
    "txt": _read_txt,
    "csv": _read_csv,
    "jsonl": _read_jsonl,
}

_FMT_WRITERS: Dict[str, Callable[[Path, Graph], None]] = {
    "txt": _write_txt,
    "csv": _write_csv,
    "jsonl": _write_jsonl,
}


def _detect_format(path: Path) -> Optional[str]:
    """Return the format implied by the file extension, or ``None``."""
    ext = path.suffix.lower()
    if ext in {".txt", ".dat", ".edges", ""}:
        return "txt"
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    return None


def read_graph(path: str, fmt: Optional[str] = None, logger: Logger | None = None) -> Graph:
    """Read a graph from a file.

    Args:
        path: The path to the graph file.
        fmt: ``txt``, ``csv`` or ``jsonl``. Auto-detected when ``None``.
        logger: Receives warnings about skipped lines.

    Returns:
        The graph built from the file's edges.

    Raises:
        GraphFormatError: If the format is unknown or no edge could be parsed.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError(f"unknown graph format for {path}")
    edges = _FMT_READERS[fmt](p, logger or NoopLogger())
    if not edges:
        raise GraphFormatError(f"no edges parsed from {path}")
    return Graph.from_edges(edges)


def write_graph(G: Graph, path: str, fmt: Optional[str] = None) -> None:
    """Write a graph's edges to a file.

    Raises:
        GraphFormatError: If the format is unknown or unsupported.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError(f"unknown graph format for {path}")
    _FMT_WRITERS[fmt](p, G)


def _report_entries(G: Graph, destinations: Iterable[str]) -> List[Tuple[str, object]]:
    out: List[Tuple[str, object]] = []
    for dest in destinations:
        try:
            out.append((dest, G.query_path(dest)))
        except UnknownVertexError as exc:
            out.append((dest, exc))
    return out


def write_report(
    G: Graph,
    destinations: Iterable[str],
    sink: TextIO,
    fmt: str = "text",
) -> int:
    """Write the last run's paths to ``destinations`` into ``sink``.

    Unknown destination names are reported inline rather than aborting the
    whole report.

    Args:
        G: Graph on which an algorithm has completed.
        destinations: Destination vertex names, in output order.
        sink: Writable text stream.
        fmt: ``text`` for ``Start: s, End: d (Cost is: c) s to ... to d``
            lines, or ``json`` for a single JSON document.

    Returns:
        Number of destinations that were reachable.

    Raises:
        AlgorithmError: If no algorithm has completed on ``G``.
        ConfigError: If ``fmt`` is unknown.
    """
    if fmt not in ("text", "json"):
        raise ConfigError(f"unknown report format '{fmt}'")
    result = G.current_result()
    entries = _report_entries(G, destinations)
    reachable = 0

    if fmt == "text":
        for dest, found in entries:
            prefix = f"Start: {result.start}, End: {dest} "
            if isinstance(found, SPGraphError):
                sink.write(f"{prefix}error: {found}\n")
                continue
            if isinstance(found, PathResult):
                reachable += 1
            sink.write(prefix + found.format() + "\n")  # type: ignore[attr-defined]
        return reachable

    paths: List[Dict[str, object]] = []
    for dest, found in entries:
        if isinstance(found, SPGraphError):
            paths.append({"destination": dest, "error": str(found)})
        elif isinstance(found, PathResult):
            reachable += 1
            paths.append(
                {
                    "destination": dest,
                    "reachable": True,
                    "cost": found.cost,
                    "path": list(found.vertices),
                }
            )
        else:
            paths.append({"destination": dest, "reachable": False})
    doc = {"algorithm": result.kind, "start": result.start, "paths": paths}
    sink.write(json.dumps(doc) + "\n")
    return reachable
