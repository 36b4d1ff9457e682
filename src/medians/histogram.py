"""
--------------------------------------------------------------------------------
<medians project>
medians/histogram.py

Histogram selection for small unsigned integers (8 and 16 bit). The whole value
domain is enumerable, so one counting pass plus a walk over the cumulative
counts gives exact order statistics in O(n + alphabet) without partitioning.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

U8_BUCKETS = 1 << 8
U16_BUCKETS = 1 << 16


def histogram(s: np.ndarray, buckets: int) -> np.ndarray:
    return np.bincount(s.reshape(-1), minlength=buckets)


def histogram_u8(s: np.ndarray) -> np.ndarray:
    return histogram(s, U8_BUCKETS)


def histogram_u16(s: np.ndarray) -> np.ndarray:
    return histogram(s, U16_BUCKETS)


def select_histogram(hist: np.ndarray, need: int) -> int:
    """Bucket holding sorted rank `need`: the first whose cumulative count exceeds it."""
    cumulative = np.cumsum(hist)
    return int(np.searchsorted(cumulative, need, side="right"))


def select_pair_histogram(hist: np.ndarray, need: int) -> Tuple[int, int]:
    """Buckets holding sorted ranks `need` and `need + 1` (the same bucket twice when shared)."""
    cumulative = np.cumsum(hist)
    lo, hi = np.searchsorted(cumulative, [need, need + 1], side="right")
    return int(lo), int(hi)


def oddmedian_u8(s: np.ndarray) -> int:
    return select_histogram(histogram_u8(s), s.size // 2)


def evenmedian_u8(s: np.ndarray) -> Tuple[int, int]:
    return select_pair_histogram(histogram_u8(s), s.size // 2 - 1)


def oddmedian_u16(s: np.ndarray) -> int:
    return select_histogram(histogram_u16(s), s.size // 2)


def evenmedian_u16(s: np.ndarray) -> Tuple[int, int]:
    return select_pair_histogram(histogram_u16(s), s.size // 2 - 1)
