"""
--------------------------------------------------------------------------------
<medians project>
medians/partition.py

Partition primitives:
  - part        : three-way [less][equal][greater] partition around the pivot
                  held at s[start], by comparator
  - part_binary : two-way partition of a uint64 array range by a single bit

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, MutableSequence, Tuple

import numpy as np

from .extremum import Comparator


def swap(s: MutableSequence[Any], i: int, j: int) -> None:
    if i != j:
        s[i], s[j] = s[j], s[i]


def part(s: MutableSequence[Any], start: int, end: int, c: Comparator) -> Tuple[int, int]:
    """
    Reorder s[start:end] around the pivot stored at s[start].

    Returns (eq_start, gt_start) such that
      s[start:eq_start]     < pivot
      s[eq_start:gt_start] == pivot   (never empty; holds the pivot itself)
      s[gt_start:end]       > pivot

    One comparator call per item, swaps only, no allocation.
    """
    pivot = s[start]
    lt = start + 1  # first slot of the equals region
    gt = start + 1  # first slot of the greater region
    for i in range(start + 1, end):
        order = c(s[i], pivot)
        if order > 0:
            continue
        if order == 0:
            swap(s, gt, i)
            gt += 1
            continue
        # less: rotate through the first greater and first equal slots
        swap(s, gt, i)
        swap(s, lt, gt)
        lt += 1
        gt += 1
    # pivot goes to the last less slot, the front of the equals region
    swap(s, start, lt - 1)
    return lt - 1, gt


def part_binary(s: np.ndarray, start: int, end: int, bitmask: int) -> int:
    """
    Stable partition of uint64 array range s[start:end] (in place) by `bitmask`.

    Returns gt_start: s[start:gt_start] has the masked bit clear,
    s[gt_start:end] has it set. No value comparisons.
    """
    seg = s[start:end]
    zeros = (seg & np.uint64(bitmask)) == 0
    nzeros = int(np.count_nonzero(zeros))
    if 0 < nzeros < seg.shape[0]:
        seg[:] = np.concatenate((seg[zeros], seg[~zeros]))
    return start + nzeros
