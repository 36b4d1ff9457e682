"""
--------------------------------------------------------------------------------
<medians project>
src/medians/tests/test_extremum.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import numpy as np

from medians.extremum import (
    max2_by,
    max2_u64,
    max_by,
    max_u64,
    min2_by,
    min2_u64,
    min_by,
    min_u64,
    natural_cmp,
    reverse,
)


def test_natural_and_reversed_comparators():
    assert natural_cmp(1, 2) == -1
    assert natural_cmp(2, 2) == 0
    assert natural_cmp("b", "a") == 1
    assert reverse(natural_cmp)(1, 2) == 1


def test_min_and_max_over_range():
    s = [9, 4, 7, 1, 8, 0]
    assert min_by(s, 0, 5, natural_cmp) == 1
    assert max_by(s, 1, 5, natural_cmp) == 8


def test_two_smallest_and_two_largest_ascending():
    assert min2_by([3, 1, 4, 2], 0, 4, natural_cmp) == (1, 2)
    assert max2_by([1, 9, 4, 7], 0, 4, natural_cmp) == (7, 9)


def test_two_extremes_with_duplicates():
    assert min2_by([3, 1, 1, 5], 0, 4, natural_cmp) == (1, 1)
    assert max2_by([5, 3, 5], 0, 3, natural_cmp) == (5, 5)


def test_u64_forms_agree_with_sort():
    rng = np.random.default_rng(3)
    s = rng.integers(0, 50, size=40).astype(np.uint64)
    ref = np.sort(s[5:30])
    assert min_u64(s, 5, 30) == int(ref[0])
    assert max_u64(s, 5, 30) == int(ref[-1])
    assert min2_u64(s, 5, 30) == (int(ref[0]), int(ref[1]))
    assert max2_u64(s, 5, 30) == (int(ref[-2]), int(ref[-1]))


def test_u64_forms_with_repeated_extremes():
    s = np.array([7, 2, 7, 2], dtype=np.uint64)
    assert min2_u64(s, 0, 4) == (2, 2)
    assert max2_u64(s, 0, 4) == (7, 7)
    assert isinstance(min_u64(s, 0, 4), int)
