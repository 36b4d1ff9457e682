"""
--------------------------------------------------------------------------------
<medians project>
src/medians/tests/test_ingest.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from medians.errors import OtherError, ValidationError
from medians.ingest import load_values


def test_npy_keeps_dtype(tmp_path: Path) -> None:
    path = tmp_path / "v.npy"
    np.save(path, np.array([[3, 1], [2, 9]], dtype=np.uint8))
    values = load_values(path)
    assert values.dtype == np.uint8
    assert values.tolist() == [3, 1, 2, 9]


def test_csv_named_column(tmp_path: Path) -> None:
    path = tmp_path / "t.csv"
    pd.DataFrame({"a": [1, 2, 3], "b": [7.5, 8.5, 9.5]}).to_csv(path, index=False)
    assert load_values(path, column="b").tolist() == [7.5, 8.5, 9.5]
    with pytest.raises(ValidationError):
        load_values(path)
    with pytest.raises(ValidationError):
        load_values(path, column="c")


def test_tsv_single_column_needs_no_name(tmp_path: Path) -> None:
    path = tmp_path / "t.tsv"
    path.write_text("score\n4\n2\n8\n")
    assert load_values(path).tolist() == [4, 2, 8]


def test_whitespace_text(tmp_path: Path) -> None:
    path = tmp_path / "v.txt"
    path.write_text("3 1 2\n")
    values = load_values(path)
    assert values.dtype == np.float64
    assert values.tolist() == [3.0, 1.0, 2.0]


def test_dtype_cast_checks_range_and_integrality(tmp_path: Path) -> None:
    path = tmp_path / "v.txt"
    path.write_text("3\n1\n255\n")
    assert load_values(path, dtype="uint8").dtype == np.uint8
    path.write_text("3\n1\n300\n")
    with pytest.raises(ValidationError):
        load_values(path, dtype="uint8")
    path.write_text("3\n1.5\n")
    with pytest.raises(ValidationError):
        load_values(path, dtype="int64")


def test_missing_and_unreadable_files(tmp_path: Path) -> None:
    with pytest.raises(OtherError):
        load_values(tmp_path / "absent.npy")
    bad = tmp_path / "bad.txt"
    bad.write_text("1 two 3\n")
    with pytest.raises(OtherError):
        load_values(bad)
