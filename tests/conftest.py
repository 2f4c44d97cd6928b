"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import random
from typing import Callable, List, Tuple

import networkx as nx
import pytest

from spgraph.graph import Graph

EdgeList = List[Tuple[str, str, float]]


def random_edges(
    n: int,
    m: int,
    seed: int,
    w_min: int = 0,
    w_max: int = 20,
    dag: bool = False,
) -> EdgeList:
    """Return ``m`` random edges over vertices ``"0" .. "n-1"`` with integer costs."""
    rnd = random.Random(seed)
    edges: EdgeList = []
    while len(edges) < m:
        u = rnd.randrange(n)
        v = rnd.randrange(n)
        if dag:
            if u == v:
                continue
            u, v = min(u, v), max(u, v)
        edges.append((str(u), str(v), float(rnd.randint(w_min, w_max))))
    return edges


def to_networkx(G: Graph) -> nx.DiGraph:
    """Reference graph; parallel edges collapse to the cheapest one."""
    D = nx.DiGraph()
    D.add_nodes_from(G.names())
    for u, v, w in G.edges():
        if D.has_edge(u, v) and D[u][v]["weight"] <= w:
            continue
        D.add_edge(u, v, weight=w)
    return D


@pytest.fixture
def scenario_a() -> Graph:
    """Edges (A,B,1), (B,C,2), (A,C,5): the cheapest A -> C path goes via B."""
    return Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])


@pytest.fixture
def isolated() -> Graph:
    """Start ``S`` with a small reachable part and a vertex ``Z`` it never reaches."""
    g = Graph.from_edges([("S", "A", 1), ("A", "B", 2), ("Z", "Y", 1)])
    return g


@pytest.fixture
def make_graph() -> Callable[..., Graph]:
    """Factory building a random :class:`Graph` from :func:`random_edges` arguments."""

    def _make(n: int = 30, m: int = 120, seed: int = 0, **kwargs) -> Graph:
        g = Graph()
        for i in range(n):
            g.add_vertex(str(i))
        for u, v, w in random_edges(n, m, seed, **kwargs):
            g.add_edge(u, v, w)
        return g

    return _make
