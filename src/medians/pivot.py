"""
--------------------------------------------------------------------------------
<medians project>
medians/pivot.py

Cheap pivot estimators for the generic engine.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Sequence

from .extremum import Comparator

# ranges longer than this use the 3-of-9 estimator
MOM3_THRESHOLD = 100


def mid_of_three(s: Sequence[Any], i0: int, i1: int, i2: int, c: Comparator) -> int:
    """Index of the middle valued item of three, using at most three comparisons."""
    lo, hi = (i0, i1) if c(s[i0], s[i1]) < 0 else (i1, i0)
    last = s[i2]
    if c(s[lo], last) >= 0:
        return lo
    if c(last, s[hi]) >= 0:
        return hi
    return i2


def _clamp(x: int, lo: int, hi: int) -> int:
    return lo if x < lo else hi if x > hi else x


def mid_of_mid_of_three(
    s: Sequence[Any], start: int, end: int, need: int, c: Comparator
) -> int:
    """
    Median of three medians of three (9 samples) over a range of at least 9 items.
    The triples are disjoint and staggered: (start+j, m+j, end-1-j) for j in 0..2,
    with m the target rank clamped well inside the range.
    """
    m = _clamp(need - 1, start + 3, end - 6)
    a = mid_of_three(s, start, m, end - 1, c)
    b = mid_of_three(s, start + 1, m + 1, end - 2, c)
    d = mid_of_three(s, start + 2, m + 2, end - 3, c)
    return mid_of_three(s, a, b, d, c)


def choose_pivot(s: Sequence[Any], start: int, end: int, need: int, c: Comparator) -> int:
    """Index of a pivot for s[start:end] near target rank `need`."""
    n = end - start
    if n > MOM3_THRESHOLD:
        return mid_of_mid_of_three(s, start, end, need, c)
    if n < 3:
        return start
    m = _clamp(need, start + 1, end - 2)
    return mid_of_three(s, start, m, end - 1, c)
