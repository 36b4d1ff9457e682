"""
--------------------------------------------------------------------------------
<medians project>
medians/ingest.py

Load a 1-D column of values from disk for the CLI.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from ._logging import get_logger
from .errors import OtherError, ValidationError

_LOG = get_logger(__name__)

_TABLE_SEPARATORS = {".csv": ",", ".tsv": "\t"}


def _from_table(path: Path, column: Optional[str]) -> np.ndarray:
    df = pd.read_csv(path, sep=_TABLE_SEPARATORS[path.suffix.lower()])
    if column is None:
        if df.shape[1] != 1:
            raise ValidationError(
                f"{path.name} has {df.shape[1]} columns; pass a column name ({list(df.columns)})"
            )
        column = str(df.columns[0])
    if column not in df.columns:
        raise ValidationError(f"column '{column}' not found in {path.name} ({list(df.columns)})")
    return df[column].to_numpy()


def _cast(values: np.ndarray, dtype: str) -> np.ndarray:
    target = np.dtype(dtype)
    if target.kind in "iu":
        if values.dtype.kind not in "iuf":
            raise ValidationError(f"cannot cast {values.dtype} values to {dtype}")
        if values.dtype.kind == "f" and not np.all(np.isfinite(values) & (values == np.round(values))):
            raise ValidationError(f"cannot cast non-integral values to {dtype}")
        info = np.iinfo(target)
        if values.size and (values.min() < info.min or values.max() > info.max):
            raise ValidationError(f"values outside the {dtype} range [{info.min}, {info.max}]")
    return values.astype(target)


def load_values(path: Path, column: Optional[str] = None, dtype: Optional[str] = None) -> np.ndarray:
    """
    Values from .npy, .csv/.tsv (one column) or whitespace separated text,
    flattened to 1-D and cast to `dtype` when given.
    """
    path = Path(path)
    if not path.is_file():
        raise OtherError(f"input file not found: {path}")
    suffix = path.suffix.lower()
    try:
        if suffix == ".npy":
            values = np.load(path, allow_pickle=False)
        elif suffix in _TABLE_SEPARATORS:
            values = _from_table(path, column)
        else:
            values = np.loadtxt(path, ndmin=1)
    except (OSError, ValueError) as e:
        raise OtherError(f"cannot read {path}: {e}") from e
    values = np.asarray(values).reshape(-1)
    if dtype is not None:
        values = _cast(values, dtype)
    _LOG.info(f"loaded {values.size} value(s) of dtype {values.dtype} from {path.name}")
    return values
