"""
--------------------------------------------------------------------------------
<medians project>
medians/floats.py

Order-preserving mapping between IEEE-754 doubles and uint64, so that float
data can go through the integer radix engine.

  negative (sign bit set) -> all bits complemented
  otherwise               -> sign bit set

Unsigned order of the mapped values equals the IEEE total order:
  -NaN < -inf < ... < -0.0 < +0.0 < ... < +inf < +NaN

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

SIGN_BIT = np.uint64(1 << 63)


def to_ordered_u64_array(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Fresh uint64 array of order-preserving keys for `values` (cast to float64)."""
    bits = np.array(values, dtype=np.float64).reshape(-1).view(np.uint64)
    return np.where((bits & SIGN_BIT) != 0, ~bits, bits | SIGN_BIT)


def from_ordered_u64_array(keys: np.ndarray) -> np.ndarray:
    """Exact inverse of to_ordered_u64_array."""
    keys = np.asarray(keys, dtype=np.uint64)
    bits = np.where((keys & SIGN_BIT) != 0, keys ^ SIGN_BIT, ~keys)
    return bits.view(np.float64)


def to_ordered_u64(x: float) -> int:
    return int(to_ordered_u64_array([x])[0])


def from_ordered_u64(key: int) -> float:
    return float(from_ordered_u64_array(np.array([key], dtype=np.uint64))[0])


def total_cmp(a: float, b: float) -> int:
    """Comparator for the IEEE total order (NaNs included)."""
    ka, kb = to_ordered_u64(a), to_ordered_u64(b)
    return (ka > kb) - (ka < kb)


# signed integers only need the sign bit flipped

def to_ordered_u64_signed(values: Iterable[int] | np.ndarray) -> np.ndarray:
    return np.array(values, dtype=np.int64).reshape(-1).view(np.uint64) ^ SIGN_BIT


def from_ordered_u64_signed(keys: np.ndarray) -> np.ndarray:
    return (np.asarray(keys, dtype=np.uint64) ^ SIGN_BIT).view(np.int64)


def nans(values: Iterable[float] | np.ndarray) -> bool:
    """True when any item is a NaN."""
    return bool(np.isnan(np.asarray(values, dtype=np.float64)).any())


def scrub_nans(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Copy of `values` as float64 with NaNs dropped."""
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    return arr[~np.isnan(arr)]
