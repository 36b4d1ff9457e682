"""
--------------------------------------------------------------------------------
<medians project>
src/medians/tests/test_engine.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import numpy as np
import pytest

from medians.engine import evenmedian_by, oddmedian_by, select_by, select_pair_by
from medians.extremum import natural_cmp, reverse

SIZES = list(range(1, 40)) + [99, 100, 101, 102, 257, 1000]


@pytest.mark.parametrize("alphabet", [3, 1000])
def test_select_agrees_with_sort(alphabet):
    rng = np.random.default_rng(alphabet)
    for n in SIZES:
        data = rng.integers(0, alphabet, size=n).tolist()
        ref = sorted(data)
        for need in {0, n // 3, n // 2, n - 1}:
            assert select_by(list(data), need, natural_cmp) == ref[need], (n, need)


@pytest.mark.parametrize("alphabet", [3, 1000])
def test_select_pair_agrees_with_sort(alphabet):
    rng = np.random.default_rng(alphabet + 1)
    for n in SIZES[1:]:
        data = rng.integers(0, alphabet, size=n).tolist()
        ref = sorted(data)
        for need in {0, n // 2 - 1, n - 2}:
            assert select_pair_by(list(data), need, natural_cmp) == (ref[need], ref[need + 1]), (n, need)


def test_every_rank_of_a_shuffled_range():
    rng = np.random.default_rng(5)
    data = rng.permutation(151).tolist()
    for need in range(151):
        assert select_by(list(data), need, natural_cmp) == need


def test_known_medians():
    assert oddmedian_by(list(range(15, 0, -1)), natural_cmp) == 8
    assert evenmedian_by(list(range(1, 17)), natural_cmp) == (8, 9)


def test_small_sizes():
    assert oddmedian_by([4], natural_cmp) == 4
    assert evenmedian_by([5, 3], natural_cmp) == (3, 5)
    for s in ([1, 2, 3], [3, 1, 2], [2, 3, 1], [2, 2, 1]):
        assert oddmedian_by(list(s), natural_cmp) == sorted(s)[1]
        assert select_by(list(s), 0, natural_cmp) == min(s)
        assert select_by(list(s), 2, natural_cmp) == max(s)


def test_all_equal_items():
    for n in (1, 2, 3, 50, 101):
        s = [7] * n
        assert select_by(list(s), n // 2, natural_cmp) == 7
        if n > 1:
            assert select_pair_by(list(s), (n - 2) // 2, natural_cmp) == (7, 7)


def test_reversed_comparator_selects_from_the_top():
    data = [4, 8, 1, 9, 3, 6, 2]
    assert select_by(list(data), 0, reverse(natural_cmp)) == 9
    assert select_pair_by(list(data), 0, reverse(natural_cmp)) == (9, 8)


def test_selection_reorders_in_place_as_permutation():
    rng = np.random.default_rng(9)
    s = rng.integers(0, 100, size=301).tolist()
    before = sorted(s)
    oddmedian_by(s, natural_cmp)
    assert sorted(s) == before


def test_comparator_over_records():
    people = [("ann", 41), ("bo", 29), ("cy", 35), ("di", 52), ("ed", 35)]

    def by_age(a, b):
        return natural_cmp(a[1], b[1])

    assert oddmedian_by(list(people), by_age)[1] == 35


def test_deterministic_and_permutation_invariant():
    rng = np.random.default_rng(21)
    data = rng.integers(0, 30, size=200).tolist()
    first = evenmedian_by(list(data), natural_cmp)
    assert evenmedian_by(list(data), natural_cmp) == first
    shuffled = rng.permutation(data).tolist()
    assert evenmedian_by(shuffled, natural_cmp) == first
