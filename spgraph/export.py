"""Export utilities for shortest-path DAGs."""

from __future__ import annotations

import json
import math
from typing import List, Mapping, Tuple
from xml.sax.saxutils import quoteattr

from .graph import Float, Graph


def shortest_path_dag(
    G: Graph, distances: Mapping[str, Float], eps: float = 1e-9
) -> List[Tuple[str, str, Float]]:
    """Return edges lying on some shortest path from the run's start.

    Args:
        G: Graph the distances were computed on.
        distances: Distance of each vertex name (``inf`` when unreachable).
        eps: Numerical tolerance.

    Returns:
        Edges ``(u, v, w)`` with finite ``d[u]`` satisfying ``d[v] == d[u] + w``.
    """
    dag: List[Tuple[str, str, Float]] = []
    for u, v, w in G.edges():
        du = distances.get(u, math.inf)
        dv = distances.get(v, math.inf)
        if du < math.inf and dv < math.inf and abs(dv - (du + w)) <= eps:
            dag.append((u, v, w))
    return dag


def _finite(d: Float) -> Float | None:
    return d if d < math.inf else None


def export_dag_json(G: Graph) -> str:
    """Return a JSON document with vertex distances and DAG edges of the last run."""
    res = G.current_result()
    edges = shortest_path_dag(G, res.distances)
    data = {
        "algorithm": res.kind,
        "start": res.start,
        "nodes": [{"id": name, "dist": _finite(res.distances[name])} for name in G.names()],
        "edges": [{"source": u, "target": v, "weight": w} for (u, v, w) in edges],
    }
    return json.dumps(data)


def export_dag_graphml(G: Graph) -> str:
    """Return a minimal GraphML document for the last run's shortest-path DAG."""
    res = G.current_result()
    edges = shortest_path_dag(G, res.distances)
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="d" for="node" attr.name="dist" attr.type="double"/>')
    lines.append('  <key id="w" for="edge" attr.name="weight" attr.type="double"/>')
    lines.append('  <graph id="G" edgedefault="directed">')
    for name in G.names():
        d = res.distances[name]
        if d < math.inf:
            lines.append(f'    <node id={quoteattr(name)}><data key="d">{d}</data></node>')
        else:
            lines.append(f"    <node id={quoteattr(name)}/>")
    for u, v, w in edges:
        lines.append(
            f'    <edge source={quoteattr(u)} target={quoteattr(v)}><data key="w">{w}</data></edge>'
        )
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)
