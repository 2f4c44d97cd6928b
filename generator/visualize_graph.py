#!/usr/bin/env python3
"""
Graph visualization utility for edge-list files.

Features:
- Loads any edge list readable by ``spgraph.io.read_graph``
- Automatically downsamples large graphs for readability
- Highlights the start vertex and, optionally, the shortest path to a target

Example usage:

```
python -m generator.visualize_graph graph.txt --start 0
```
OR
```
python -m generator.visualize_graph graph.txt \
    --start 0 --target 42 \
    --algorithm dijkstra-pairing \
    --layout kamada_kawai \
    --show-weights
```
"""

from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from spgraph.graph import Graph
from spgraph.io import read_graph
from spgraph.solver import ALGORITHMS

EdgeList = List[Tuple[str, str, float]]


def downsample_edges(
    edges: Iterable[Tuple[str, str, float]],
    max_edges: int,
    seed: int = 0,
    keep: Sequence[Tuple[str, str]] = (),
) -> EdgeList:
    """
    Randomly sample edges if the graph is too large to visualize.

    Edges listed in ``keep`` (e.g. the highlighted path) always survive.
    """
    edges = list(edges)
    if len(edges) <= max_edges:
        return edges
    pinned = set(keep)
    kept = [e for e in edges if (e[0], e[1]) in pinned]
    rest = [e for e in edges if (e[0], e[1]) not in pinned]
    rng = random.Random(seed)
    return kept + rng.sample(rest, max(0, max_edges - len(kept)))


def to_networkx(edges: Iterable[Tuple[str, str, float]]) -> nx.DiGraph:
    """Build a ``DiGraph``; parallel edges collapse to the cheapest one."""
    G = nx.DiGraph()
    for u, v, w in edges:
        if G.has_edge(u, v) and G[u][v]["weight"] <= w:
            continue
        G.add_edge(u, v, weight=w)
    return G


def visualize_graph(
    edges: EdgeList,
    start: str,
    *,
    path: Optional[Sequence[str]] = None,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 300,
    out: Optional[str] = None,
) -> None:
    """
    Render the graph using NetworkX + Matplotlib.

    If ``out`` is given the figure is saved there instead of shown.
    """
    G = to_networkx(edges)

    if layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    elif layout == "kamada_kawai":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        raise ValueError(f"Unknown layout: {layout}")

    path = list(path or [])
    path_nodes = set(path)
    path_edges = list(zip(path, path[1:]))

    plt.figure(figsize=(12, 10))

    node_colors = [
        "tab:red" if node == start else "tab:orange" if node in path_nodes else "tab:blue"
        for node in G.nodes
    ]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(G, pos, arrowstyle="->", arrowsize=12, width=1.2, alpha=0.4)
    if path_edges:
        nx.draw_networkx_edges(
            G,
            pos,
            edgelist=path_edges,
            edge_color="tab:orange",
            arrowstyle="->",
            arrowsize=14,
            width=2.5,
        )
    nx.draw_networkx_labels(G, pos, font_size=8, font_color="black")

    if show_weights:
        edge_labels = {(u, v): d["weight"] for u, v, d in G.edges(data=True)}
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)

    plt.title("Directed Weighted Graph Visualization", fontsize=14)
    plt.axis("off")
    plt.tight_layout()
    if out:
        plt.savefig(out)
        plt.close()
    else:
        plt.show()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Visualize a graph and a shortest path")
    parser.add_argument("path", help="Path to an edge-list file")
    parser.add_argument("--start", required=True, help="Start vertex name")
    parser.add_argument("--target", default=None, help="Highlight the shortest path to this vertex")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default="dijkstra-binary")
    parser.add_argument("--max-edges", type=int, default=300,
                        help="Maximum edges to display (sampling if larger)")
    parser.add_argument("--layout", choices=["spring", "kamada_kawai", "shell"],
                        default="spring")
    parser.add_argument("--show-weights", action="store_true",
                        help="Render edge weights (recommended only for very small graphs)")
    parser.add_argument("--node-size", type=int, default=300)
    parser.add_argument("--out", default=None, help="Save the figure instead of showing it")

    args = parser.parse_args(argv)

    g: Graph = read_graph(args.path)
    path: List[str] = []
    if args.target is not None:
        g.run(args.algorithm, args.start)
        path = g.path_of(args.target)

    edges = downsample_edges(g.edges(), args.max_edges, keep=list(zip(path, path[1:])))
    visualize_graph(
        edges,
        args.start,
        path=path,
        layout=args.layout,
        show_weights=args.show_weights,
        node_size=args.node_size,
        out=args.out,
    )


if __name__ == "__main__":
    main()
