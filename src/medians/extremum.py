"""
--------------------------------------------------------------------------------
<medians project>
medians/extremum.py

Single-pass extremum helpers. Used by the engines to resolve the last one or two
ranks of a selection once they sit at the edge of a partition.

The comparator forms take `c(a, b) -> int` (negative, zero, positive) in the
style of `functools.cmp_to_key`. Maxima are found by passing `reverse(c)`.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, Tuple

import numpy as np

Comparator = Callable[[Any, Any], int]


def natural_cmp(a: Any, b: Any) -> int:
    """Comparator for the natural `<` order of the items."""
    if a < b:
        return -1
    return 1 if a > b else 0


def reverse(c: Comparator) -> Comparator:
    """Comparator with swapped arguments: turns minimum searches into maximum searches."""

    def _rev(a: Any, b: Any) -> int:
        return c(b, a)

    return _rev


def extremum(s: Sequence[Any], start: int, end: int, c: Comparator) -> Any:
    """Minimum under `c` of s[start:end] (non-empty)."""
    best = s[start]
    for i in range(start + 1, end):
        si = s[i]
        if c(si, best) < 0:
            best = si
    return best


def best_two(s: Sequence[Any], start: int, end: int, c: Comparator) -> Tuple[Any, Any]:
    """
    The two smallest items under `c` of s[start:end] (length >= 2), in order.
    With `reverse(c)` this yields (max, second max).
    """
    a, b = s[start], s[start + 1]
    m1, m2 = (a, b) if c(a, b) < 0 else (b, a)
    for i in range(start + 2, end):
        si = s[i]
        if c(si, m1) < 0:
            m2 = m1
            m1 = si
        elif c(si, m2) < 0:
            m2 = si
    return m1, m2


def min_by(s: Sequence[Any], start: int, end: int, c: Comparator) -> Any:
    return extremum(s, start, end, c)


def max_by(s: Sequence[Any], start: int, end: int, c: Comparator) -> Any:
    return extremum(s, start, end, reverse(c))


def min2_by(s: Sequence[Any], start: int, end: int, c: Comparator) -> Tuple[Any, Any]:
    return best_two(s, start, end, c)


def max2_by(s: Sequence[Any], start: int, end: int, c: Comparator) -> Tuple[Any, Any]:
    """Two largest items in ascending order: (second max, max)."""
    m1, m2 = best_two(s, start, end, reverse(c))
    return m2, m1


# ───────────────────────────────────────────────────────────────────────────────
# Raw unsigned integer forms (numpy ranges, no comparator indirection)
# ───────────────────────────────────────────────────────────────────────────────


def min_u64(s: np.ndarray, start: int, end: int) -> int:
    return int(s[start:end].min())


def max_u64(s: np.ndarray, start: int, end: int) -> int:
    return int(s[start:end].max())


def min2_u64(s: np.ndarray, start: int, end: int) -> Tuple[int, int]:
    """Two smallest values of s[start:end] (length >= 2), ascending."""
    seg = s[start:end]
    m1 = seg.min()
    if np.count_nonzero(seg == m1) > 1:
        return int(m1), int(m1)
    return int(m1), int(seg[seg > m1].min())


def max2_u64(s: np.ndarray, start: int, end: int) -> Tuple[int, int]:
    """Two largest values of s[start:end] (length >= 2), ascending: (second max, max)."""
    seg = s[start:end]
    m1 = seg.max()
    if np.count_nonzero(seg == m1) > 1:
        return int(m1), int(m1)
    return int(seg[seg < m1].max()), int(m1)
