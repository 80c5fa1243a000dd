import io

import pytest

from kmeanslab.cli import main

DATA = "0 0\n0 2\n10 10\n10 12\n"


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(DATA)
    return path


def _stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_sequential_prints_final_centroids(monkeypatch, capsys, data_file):
    _stdin(monkeypatch, "2\n0 0\n10 10\n")
    assert main(["sequential", "--data", str(data_file)]) == 0
    out = capsys.readouterr().out
    assert "Converged after" in out
    assert "Centroid 1: (0.00, 1.00)" in out
    assert "Centroid 2: (10.00, 11.00)" in out
    assert "Execution time:" in out


def test_sequential_missing_file(monkeypatch, capsys, tmp_path):
    _stdin(monkeypatch, "")
    assert main(["sequential", "--data", str(tmp_path / "nope.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().out


def test_sequential_rejects_zero_clusters(monkeypatch, data_file):
    _stdin(monkeypatch, "0\n")
    assert main(["sequential", "--data", str(data_file)]) == 1


def test_sequential_missing_centroid(monkeypatch, data_file):
    _stdin(monkeypatch, "2\n0 0\n")
    assert main(["sequential", "--data", str(data_file)]) == 1


def test_threaded_runs(monkeypatch, capsys, data_file):
    _stdin(monkeypatch, f"4\n2\n{data_file}\n0 0\n10 10\n")
    assert main(["threaded", "--threads", "2"]) == 0
    assert "Execution time:" in capsys.readouterr().out


def test_batched_runs(monkeypatch, capsys, data_file):
    _stdin(monkeypatch, f"{data_file}\n2\n0 0\n10 10\n")
    assert main(["batched", "--points", "4"]) == 0
    out = capsys.readouterr().out
    assert "Convergence reached at iteration" in out
    assert "Number of iterations:" in out


def test_batched_short_file(monkeypatch, data_file):
    _stdin(monkeypatch, f"{data_file}\n2\n0 0\n10 10\n")
    assert main(["batched", "--points", "10"]) == 1