"""Tests for the ``spgraph`` command-line tool."""

import json

import pytest

from spgraph.cli import EXAMPLE_EDGES, main


@pytest.fixture
def edges_file(tmp_path):
    p = tmp_path / "graph.txt"
    p.write_text(EXAMPLE_EDGES, encoding="utf-8")
    return str(p)


def test_example(capsys):
    assert main(["--example"]) == 0
    assert capsys.readouterr().out == EXAMPLE_EDGES


def test_single_target(edges_file, capsys):
    rc = main(["--edges", edges_file, "--source", "A", "--target", "C"])
    assert rc == 0
    assert capsys.readouterr().out == "Start: A, End: C (Cost is: 3.0) A to B to C\n"


def test_all_targets_json(edges_file, capsys):
    rc = main(
        [
            "--edges",
            edges_file,
            "--source",
            "B",
            "--all-targets",
            "--algorithm",
            "acyclic",
            "--report-format",
            "json",
        ]
    )
    assert rc == 0
    doc = json.loads(capsys.readouterr().out)
    by_dest = {p["destination"]: p for p in doc["paths"]}
    assert set(by_dest) == {"A", "C", "D"}
    assert by_dest["A"] == {"destination": "A", "reachable": False}
    assert by_dest["D"]["cost"] == 3.0
    assert by_dest["D"]["path"] == ["B", "C", "D"]


def test_missing_file(tmp_path, capsys):
    rc = main(["--edges", str(tmp_path / "missing.txt"), "--source", "A"])
    assert rc == 64
    assert "edges file not found" in capsys.readouterr().err


def test_source_required_for_files(edges_file):
    assert main(["--edges", edges_file]) == 64


def test_unknown_source(edges_file, capsys):
    assert main(["--edges", edges_file, "--source", "Q"]) == 64
    assert "start vertex not found" in capsys.readouterr().err


def test_algorithm_failure_exit_code(tmp_path, capsys):
    p = tmp_path / "neg.txt"
    p.write_text("A B -1\n", encoding="utf-8")
    assert main(["--edges", str(p), "--source", "A", "--target", "B"]) == 65
    assert "negative weight" in capsys.readouterr().err


def test_negative_cycle_exit_code(tmp_path):
    p = tmp_path / "cycle.txt"
    p.write_text("A B -1\nB A -1\n", encoding="utf-8")
    assert main(["--edges", str(p), "--source", "A", "--algorithm", "negative"]) == 65


def test_generated_exponent_report(tmp_path):
    out = tmp_path / "paths.txt"
    rc = main(["--generate", "exponent", "--all-targets", "--out", str(out)])
    assert rc == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1000
    assert "Start: 0, End: 2 (Cost is: 1.0) 0 to 1 to 2" in lines


def test_exports_and_json_log(edges_file, tmp_path, capsys):
    dag = tmp_path / "dag.json"
    graphml = tmp_path / "dag.graphml"
    rc = main(
        [
            "--edges",
            edges_file,
            "--source",
            "A",
            "--target",
            "D",
            "--export-json",
            str(dag),
            "--export-graphml",
            str(graphml),
            "--log-json",
            "--log-level",
            "info",
        ]
    )
    assert rc == 0
    data = json.loads(dag.read_text(encoding="utf-8"))
    assert {(e["source"], e["target"]) for e in data["edges"]} == {("A", "B"), ("B", "C"), ("C", "D")}
    assert graphml.read_text(encoding="utf-8").startswith("<?xml")

    err = capsys.readouterr().err.strip().splitlines()
    event = json.loads(err[-1])
    assert event["event"] == "run"
    assert event["algorithm"] == "dijkstra-binary"
    assert event["reachable"] == 1


def test_no_count_relaxations_flag(edges_file, capsys):
    rc = main(
        [
            "--edges",
            edges_file,
            "--source",
            "A",
            "--target",
            "D",
            "--no-count-relaxations",
            "--log-json",
            "--log-level",
            "info",
        ]
    )
    assert rc == 0
    event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert event["edges_relaxed"] == 0
    assert event["dequeues"] == 4
