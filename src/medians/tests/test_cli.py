"""
--------------------------------------------------------------------------------
<medians project>
src/medians/tests/test_cli.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pandas as pd
from typer.testing import CliRunner

from medians.cli import app

runner = CliRunner()


def _text(tmp_path: Path, body: str, name: str = "v.txt") -> Path:
    path = tmp_path / name
    path.write_text(body)
    return path


def test_cli_backends_table():
    res = runner.invoke(app, ["backends"])
    assert res.exit_code == 0, res.output
    assert "Registered Back-ends" in res.stdout
    assert "radix_u64" in res.stdout


def test_cli_median_json_odd(tmp_path: Path) -> None:
    path = _text(tmp_path, " ".join(str(i) for i in range(15, 0, -1)))
    res = runner.invoke(app, ["median", str(path), "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.stdout)
    assert payload == {"n": 15, "backend": "float", "kind": "odd", "median": 8.0}


def test_cli_median_table(tmp_path: Path) -> None:
    path = _text(tmp_path, "1 2 3 4\n")
    res = runner.invoke(app, ["median", str(path)])
    assert res.exit_code == 0, res.output
    assert "Median" in res.stdout
    assert "2.5" in res.stdout


def test_cli_median_csv_column_with_dtype(tmp_path: Path) -> None:
    path = tmp_path / "t.csv"
    pd.DataFrame({"id": ["a", "b", "c", "d"], "count": [4, 1, 3, 2]}).to_csv(path, index=False)
    res = runner.invoke(app, ["median", str(path), "--column", "count", "--dtype", "uint8", "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.stdout)
    assert payload["backend"] == "histogram_u8"
    assert (payload["kind"], payload["lower"], payload["upper"], payload["mean"]) == ("even", 2, 3, 2.5)


def test_cli_median_explicit_backend(tmp_path: Path) -> None:
    path = tmp_path / "v.npy"
    np.save(path, np.array([7, 3, 9], dtype=np.uint64))
    res = runner.invoke(app, ["median", str(path), "--backend", "comparator", "--json"])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout)["median"] == 7


def test_cli_select_rank(tmp_path: Path) -> None:
    path = _text(tmp_path, "40 10 30 20 50\n")
    res = runner.invoke(app, ["select", str(path), "--rank", "1", "--json"])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout)["value"] == 20.0


def test_cli_select_errors(tmp_path: Path) -> None:
    path = _text(tmp_path, "1 2 3\n")
    assert runner.invoke(app, ["select", str(path)]).exit_code == 2
    assert runner.invoke(app, ["select", str(path), "--rank", "3"]).exit_code == 3


def test_cli_nan_policies(tmp_path: Path) -> None:
    path = _text(tmp_path, "1 nan 3\n")
    res = runner.invoke(app, ["median", str(path)])
    assert res.exit_code == 5
    res = runner.invoke(app, ["median", str(path), "--nan-policy", "unchecked", "--json"])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout)["median"] == 3.0
    res = runner.invoke(app, ["median", str(path), "--nan-policy", "scrub", "--json"])
    assert json.loads(res.stdout)["mean"] == 2.0


def test_cli_exit_codes(tmp_path: Path) -> None:
    empty = tmp_path / "empty.npy"
    np.save(empty, np.array([], dtype=np.float64))
    assert runner.invoke(app, ["median", str(empty)]).exit_code == 4
    path = _text(tmp_path, "1 300\n")
    assert runner.invoke(app, ["median", str(path), "--dtype", "uint8"]).exit_code == 3
    assert runner.invoke(app, ["median", str(path), "--backend", "nope"]).exit_code == 2
    assert runner.invoke(app, ["median", str(tmp_path / "absent.txt")]).exit_code == 1


def test_cli_stats_json(tmp_path: Path) -> None:
    path = _text(tmp_path, "1 2 3 4 5\n")
    res = runner.invoke(app, ["stats", str(path), "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.stdout)
    assert payload == {"n": 5, "median": 3.0, "lq": 1.5, "uq": 4.5, "mad": 1.5, "ste": 0.5}


def test_cli_config_discovery(monkeypatch, tmp_path: Path) -> None:
    data = tmp_path / "scores.csv"
    pd.DataFrame({"name": ["x", "y", "z"], "score": [9, 1, 5]}).to_csv(data, index=False)
    (tmp_path / "medians.yaml").write_text(f"input:\n  path: {data}\n  column: score\nrank: 2\n")
    monkeypatch.chdir(tmp_path)

    res = runner.invoke(app, ["median", "--json"])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout)["median"] == 5
    res = runner.invoke(app, ["select", "--json"])
    assert json.loads(res.stdout)["value"] == 9


def test_cli_without_input_is_a_config_error(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    assert runner.invoke(app, ["median"]).exit_code == 2


def test_cli_median_with_stats(tmp_path: Path) -> None:
    path = _text(tmp_path, "5 4 3 2 1\n")
    res = runner.invoke(app, ["median", str(path), "--stats", "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.stdout)
    assert payload["median"] == 3.0
    assert payload["stats"]["lq"] == 1.5 and payload["stats"]["uq"] == 4.5
    res = runner.invoke(app, ["median", str(path), "--stats"])
    assert res.exit_code == 0, res.output
    assert "Median Statistics" in res.stdout


def test_cli_select_scrub_rank_beyond_remaining_values(tmp_path: Path) -> None:
    path = _text(tmp_path, "1 nan 3\n")
    res = runner.invoke(app, ["select", str(path), "--rank", "1", "--nan-policy", "scrub", "--json"])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout)["value"] == 3.0
    res = runner.invoke(app, ["select", str(path), "--rank", "2", "--nan-policy", "scrub"])
    assert res.exit_code == 3
    assert "Invalid input" in res.stdout


def test_cli_stats_rejects_unchecked_nans(tmp_path: Path) -> None:
    path = _text(tmp_path, "1 nan 3\n")
    res = runner.invoke(app, ["median", str(path), "--stats", "--nan-policy", "unchecked"])
    assert res.exit_code == 2
    res = runner.invoke(app, ["median", str(path), "--stats", "--nan-policy", "scrub", "--json"])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout)["stats"]["median"] == 2.0
