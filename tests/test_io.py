"""Tests for edge-list parsing, graph files and path reports."""

import io
import json

import pytest

from spgraph import AlgorithmError, ConfigError, GraphFormatError, StdLogger
from spgraph.graph import Graph
from spgraph.io import parse_edges, read_graph, write_graph, write_report


def test_parse_edges_skips_bad_lines_with_warning():
    buf = io.StringIO()
    logger = StdLogger(level="warning", stream=buf)
    lines = [
        "A B 1",
        "bad line",
        "A C x",
        "",
        "# comment",
        "B C 2.5",
        "C D 1 extra",
        "D E nan",
    ]
    edges = parse_edges(lines, logger)
    assert edges == [("A", "B", 1.0), ("B", "C", 2.5)]
    logged = buf.getvalue().splitlines()
    assert len(logged) == 4
    assert all(line.startswith("warning skip_line") for line in logged)
    assert "lineno=2" in logged[0]


def test_parse_edges_accepts_negative_and_scientific():
    assert parse_edges(["u v -3", "v w 1e3"]) == [("u", "v", -3.0), ("v", "w", 1000.0)]


def test_read_txt(tmp_path):
    p = tmp_path / "graph.txt"
    p.write_text("A B 1\nB C 2\nA C 5\nnot an edge\n", encoding="utf-8")
    g = read_graph(str(p))
    assert g.names() == ["A", "B", "C"]
    assert g.m == 3


def test_read_csv_and_jsonl(tmp_path):
    csv_path = tmp_path / "graph.csv"
    csv_path.write_text("# u,v,w\nA,B,1\nB\tC\t2\nA,C\n", encoding="utf-8")
    assert list(read_graph(str(csv_path)).edges()) == [("A", "B", 1.0), ("B", "C", 2.0)]

    jsonl_path = tmp_path / "graph.jsonl"
    jsonl_path.write_text('{"u": 1, "v": 2, "w": 0.5}\n\n{"u": "x", "v": 1, "w": -1}\n')
    assert list(read_graph(str(jsonl_path)).edges()) == [("1", "2", 0.5), ("x", "1", -1.0)]


def test_read_jsonl_bad_record(tmp_path):
    p = tmp_path / "graph.jsonl"
    p.write_text('{"u": 1, "v": 2}\n', encoding="utf-8")
    with pytest.raises(GraphFormatError):
        read_graph(str(p))


def test_read_graph_errors(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(GraphFormatError):
        read_graph(str(empty))
    with pytest.raises(GraphFormatError):
        read_graph(str(tmp_path / "graph.xyz"))


@pytest.mark.parametrize("suffix", [".txt", ".csv", ".jsonl"])
def test_write_then_read(tmp_path, suffix):
    g = Graph.from_edges([("A", "B", 1.5), ("B", "A", -2), ("A", "A", 0)])
    path = str(tmp_path / f"out{suffix}")
    write_graph(g, path)
    assert list(read_graph(path).edges()) == list(g.edges())


def test_text_report(scenario_a):
    scenario_a.add_edge("X", "A", 1)
    scenario_a.dijkstra("A")
    sink = io.StringIO()
    reachable = write_report(scenario_a, ["B", "C", "X", "Z"], sink)
    assert reachable == 2
    assert sink.getvalue().splitlines() == [
        "Start: A, End: B (Cost is: 1.0) A to B",
        "Start: A, End: C (Cost is: 3.0) A to B to C",
        "Start: A, End: X X is unreachable",
        "Start: A, End: Z error: destination vertex not found: 'Z'",
    ]


def test_json_report(scenario_a):
    scenario_a.add_edge("X", "A", 1)
    scenario_a.dijkstra_pairing("A")
    sink = io.StringIO()
    write_report(scenario_a, ["C", "X"], sink, fmt="json")
    doc = json.loads(sink.getvalue())
    assert doc["algorithm"] == "dijkstra-pairing"
    assert doc["start"] == "A"
    assert doc["paths"] == [
        {"destination": "C", "reachable": True, "cost": 3.0, "path": ["A", "B", "C"]},
        {"destination": "X", "reachable": False},
    ]


def test_report_requires_run_and_known_format(scenario_a):
    with pytest.raises(AlgorithmError):
        write_report(scenario_a, ["C"], io.StringIO())
    scenario_a.dijkstra("A")
    with pytest.raises(ConfigError):
        write_report(scenario_a, ["C"], io.StringIO(), fmt="xml")


def test_read_csv_skips_nan_cost(tmp_path):
    buf = io.StringIO()
    p = tmp_path / "graph.csv"
    p.write_text("A,B,1\nB,C,nan\n", encoding="utf-8")
    g = read_graph(str(p), logger=StdLogger(level="warning", stream=buf))
    assert list(g.edges()) == [("A", "B", 1.0)]
    assert buf.getvalue().startswith("warning skip_line lineno=2")
