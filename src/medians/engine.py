"""
--------------------------------------------------------------------------------
<medians project>
medians/engine.py

Generic selection engine: quickselect with an equals partition.

All functions work in place on the mutable sequence they are given and leave it
reordered. Callers that need the original order pass a list of positions and a
comparator that looks the positions up (see api.median_by).

Preconditions (checked by the public entry points, not here):
  - s is non-empty
  - 0 <= need < len(s)        for select_by
  - 0 <= need < len(s) - 1    for select_pair_by

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, MutableSequence, Tuple

from .extremum import Comparator, max2_by, max_by, min2_by, min_by
from .partition import part, swap
from .pivot import choose_pivot, mid_of_three


def select_by(s: MutableSequence[Any], need: int, c: Comparator) -> Any:
    """Item of sorted rank `need` under comparator `c`."""
    start, end = 0, len(s)
    while True:
        if end - start == 3 and need == start + 1:
            return s[mid_of_three(s, start, start + 1, start + 2, c)]
        pivotsub = choose_pivot(s, start, end, need, c)
        swap(s, start, pivotsub)
        pivot = s[start]
        eq_start, gt_start = part(s, start, end, c)
        # well inside the lt partition, iterate on it
        if need + 2 < eq_start:
            end = eq_start
            continue
        # penultimate place in the lt partition
        if need + 2 == eq_start:
            return max2_by(s, start, eq_start, c)[0]
        # last place in the lt partition
        if need + 1 == eq_start:
            return max_by(s, start, eq_start, c)
        if need < gt_start:
            return pivot
        # first place in the gt partition
        if need == gt_start:
            return min_by(s, gt_start, end, c)
        # second place in the gt partition
        if need == gt_start + 1:
            return min2_by(s, gt_start, end, c)[1]
        start = gt_start


def select_pair_by(s: MutableSequence[Any], need: int, c: Comparator) -> Tuple[Any, Any]:
    """Items of the adjacent sorted ranks `need` and `need + 1` under comparator `c`."""
    start, end = 0, len(s)
    while True:
        pivotsub = choose_pivot(s, start, end, need, c)
        swap(s, start, pivotsub)
        pivot = s[start]
        eq_start, gt_start = part(s, start, end, c)
        if need + 2 < eq_start:
            end = eq_start
            continue
        # both ranks are the two maxima of the lt partition
        if need + 2 == eq_start:
            return max2_by(s, start, eq_start, c)
        # straddles the lt/eq boundary
        if need + 1 == eq_start:
            return max_by(s, start, eq_start, c), pivot
        # fully within the equals partition
        if need + 1 < gt_start:
            return pivot, pivot
        # straddles the eq/gt boundary
        if need + 1 == gt_start:
            return pivot, min_by(s, gt_start, end, c)
        # both ranks are the two minima of the gt partition
        if need == gt_start:
            return min2_by(s, gt_start, end, c)
        start = gt_start


def oddmedian_by(s: MutableSequence[Any], c: Comparator) -> Any:
    """Median of odd sized data with comparisons by `c`."""
    return select_by(s, len(s) // 2, c)


def evenmedian_by(s: MutableSequence[Any], c: Comparator) -> Tuple[Any, Any]:
    """Both central items of even sized data with comparisons by `c`."""
    return select_pair_by(s, len(s) // 2 - 1, c)
