"""Tests for the synthetic graph generators."""

import math

import pytest

from generator.graph_generator import (
    exponent_graph,
    generate_graph,
    load_edge_list_txt,
    save_edge_list_txt,
)
from spgraph.graph import Graph
from spgraph.io import read_graph


def test_exponent_graph_shape():
    g = exponent_graph(1000)
    assert g.n == 1001
    # one chain edge per i, plus i -> 2i for 2 <= i <= 500
    assert g.m == 1000 + 499
    costs = {(u, v): w for u, v, w in g.edges}
    assert costs[("0", "1")] == 0.0
    assert costs[("4", "8")] == pytest.approx(12.0)
    assert ("1", "2") in costs and costs[("1", "2")] == 1.0
    assert ("500", "1000") in costs
    assert ("501", "1002") not in costs


def test_exponent_graph_is_acyclic():
    gen = exponent_graph(64)
    g = Graph.from_edges(gen.edges)
    res = g.acyclic(gen.source)
    expected = g.dijkstra(gen.source).distances
    assert res.distances == pytest.approx(expected)
    assert math.isfinite(res.distances["64"])


def test_dag_edges_go_forward():
    gen = generate_graph(n=50, m=200, graph_type="dag", seed=1)
    assert gen.m == 200
    assert all(int(u) < int(v) for u, v, _ in gen.edges)
    Graph.from_edges(gen.edges).acyclic("0")


def test_negative_weights_need_opt_in():
    with pytest.raises(ValueError):
        generate_graph(n=10, w_min=-5)
    gen = generate_graph(n=10, graph_type="dag", w_min=-5, w_max=5, allow_negative=True, seed=2)
    assert min(w for _, _, w in gen.edges) >= -5


def test_grid_is_symmetric():
    gen = generate_graph(n=12, m=None, graph_type="grid", grid_rows=3, grid_cols=4)
    pairs = {(u, v) for u, v, _ in gen.edges}
    assert all((v, u) in pairs for u, v in pairs)
    # 3 rows * 3 horizontal + 2 * 4 vertical neighbour pairs, both directions
    assert gen.m == 2 * (9 + 8)


def test_unit_weights_and_backbone():
    gen = generate_graph(n=20, m=40, weight_dist="unit", seed=3)
    assert {w for _, _, w in gen.edges} == {1.0}
    pairs = {(u, v) for u, v, _ in gen.edges}
    assert all((str(i), str(i + 1)) in pairs for i in range(19))


def test_save_and_load(tmp_path):
    gen = generate_graph(n=30, m=90, seed=4)
    path = str(tmp_path / "g.txt")
    save_edge_list_txt(gen, path)

    loaded = load_edge_list_txt(path)
    assert (loaded.n, loaded.m, loaded.source) == (gen.n, gen.m, gen.source)
    assert loaded.edges == gen.edges

    # the header is a comment for spgraph.io
    assert read_graph(path).m == gen.m
