"""
--------------------------------------------------------------------------------
<medians project>
medians/radix.py

Binary-radix selection for uint64 arrays: partition by one bit per level, from
the most significant bit down, narrowing into the side that holds the target
rank. No comparison-based pivoting, O(64 n) worst case.

Functions reorder the array they are given. Preconditions as in engine.py.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .extremum import max2_u64, max_u64, min2_u64, min_u64
from .partition import part_binary

FIRST_BIT = 1 << 63


def select_u64(s: np.ndarray, need: int) -> int:
    """Value of sorted rank `need` in uint64 array `s`."""
    start, end = 0, s.shape[0]
    bit = FIRST_BIT
    while True:
        gt_start = part_binary(s, start, end, bit)
        if bit == 1:
            # every bit consumed: the range is now in sorted order
            return int(s[need])
        if need + 2 < gt_start:
            end = gt_start
        elif need > gt_start + 1:
            start = gt_start
        elif need + 2 == gt_start:
            return max2_u64(s, start, gt_start)[0]
        elif need + 1 == gt_start:
            return max_u64(s, start, gt_start)
        elif need == gt_start:
            return min_u64(s, gt_start, end)
        else:
            return min2_u64(s, gt_start, end)[1]
        bit >>= 1


def select_pair_u64(s: np.ndarray, need: int) -> Tuple[int, int]:
    """Values of sorted ranks `need` and `need + 1` in uint64 array `s`."""
    start, end = 0, s.shape[0]
    bit = FIRST_BIT
    while True:
        gt_start = part_binary(s, start, end, bit)
        if bit == 1:
            return int(s[need]), int(s[need + 1])
        if need + 2 < gt_start:
            end = gt_start
        elif need > gt_start:
            start = gt_start
        elif need + 2 == gt_start:
            return max2_u64(s, start, gt_start)
        elif need + 1 == gt_start:
            return max_u64(s, start, gt_start), min_u64(s, gt_start, end)
        else:
            return min2_u64(s, gt_start, end)
        bit >>= 1


def oddmedian_u64(s: np.ndarray) -> int:
    return select_u64(s, s.shape[0] // 2)


def evenmedian_u64(s: np.ndarray) -> Tuple[int, int]:
    return select_pair_u64(s, s.shape[0] // 2 - 1)
