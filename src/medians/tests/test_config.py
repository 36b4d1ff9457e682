"""
--------------------------------------------------------------------------------
<medians project>
src/medians/tests/test_config.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path

import pytest

from medians.config import DEFAULT_CONFIG_NAME, RunConfig, discover_config, load_config
from medians.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    cfg = load_config(
        _write(
            tmp_path / "run.yaml",
            "input:\n  path: data.csv\n  column: score\n  dtype: uint16\n"
            "backend: histogram_u16\nrank: 4\n",
        )
    )
    assert cfg.input.path == Path("data.csv")
    assert cfg.input.column == "score"
    assert cfg.input.dtype == "uint16"
    assert cfg.backend == "histogram_u16"
    assert cfg.rank == 4
    assert cfg.nan_policy == "checked"


def test_defaults_and_empty_file(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path / "empty.yaml", ""))
    assert cfg == RunConfig()
    assert cfg.backend == "auto"
    assert cfg.stats is False


@pytest.mark.parametrize(
    "text",
    [
        "backend: nope\n",
        "nan_policy: sometimes\n",
        "rank: -1\n",
        "input:\n  dtype: complex128\n",
        "- just\n- a list\n",
        "backend: [unclosed\n",
    ],
)
def test_invalid_configs_raise_config_error(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path / "bad.yaml", text))


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_discover_config(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    assert discover_config(None) is None
    local = _write(tmp_path / DEFAULT_CONFIG_NAME, "backend: auto\n")
    assert discover_config(None) == local.resolve()
    other = _write(tmp_path / "other.yaml", "backend: auto\n")
    assert discover_config(other) == other.resolve()
