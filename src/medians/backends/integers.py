"""
--------------------------------------------------------------------------------
<medians project>
medians/backends/integers.py

Fixed-width integer back-ends: histogram (u8, u16) and binary radix (u64, i64).

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple

import numpy as np

from ..errors import ValidationError
from ..floats import from_ordered_u64_signed, to_ordered_u64_signed
from ..histogram import histogram, select_histogram, select_pair_histogram
from ..radix import select_pair_u64, select_u64
from ..results import Even, Medians, Odd


def as_unsigned(data: Sequence[Any] | np.ndarray, dtype: str, *, copy: bool = True) -> np.ndarray:
    """1-D array of unsigned `dtype`; integer inputs must fit, anything else is rejected."""
    arr = np.asarray(data)
    if arr.dtype == np.dtype(dtype):
        arr = arr.reshape(-1)
        return arr.copy() if copy else arr
    if arr.dtype.kind not in "iu":
        raise ValidationError(f"expected integer data for {dtype}, got dtype {arr.dtype}")
    info = np.iinfo(dtype)
    if arr.size and (int(arr.min()) < 0 or int(arr.max()) > info.max):
        raise ValidationError(f"values outside the {dtype} range [0, {info.max}]")
    return arr.reshape(-1).astype(dtype)


def _ascending(lo: int, hi: int) -> Medians:
    return Even(lo, hi) if lo <= hi else Even(hi, lo)


class _HistogramSelector:
    dtype = "uint8"
    buckets = 1 << 8

    def _hist(self, data: Sequence[Any]) -> np.ndarray:
        return histogram(as_unsigned(data, self.dtype, copy=False), self.buckets)

    def median(self, data: Sequence[Any]) -> Medians:
        hist = self._hist(data)
        n = int(hist.sum())
        if n % 2:
            return Odd(select_histogram(hist, n // 2))
        return Even(*select_pair_histogram(hist, n // 2 - 1))

    def select(self, data: Sequence[Any], rank: int) -> int:
        return select_histogram(self._hist(data), rank)

    def select_pair(self, data: Sequence[Any], rank: int) -> Tuple[int, int]:
        return select_pair_histogram(self._hist(data), rank)


class HistogramU8Selector(_HistogramSelector):
    name = "histogram_u8"
    description = "256 bucket histogram walk; uint8"
    dtype = "uint8"
    buckets = 1 << 8


class HistogramU16Selector(_HistogramSelector):
    name = "histogram_u16"
    description = "65536 bucket histogram walk; uint16"
    dtype = "uint16"
    buckets = 1 << 16


class RadixU64Selector:
    """
    Binary radix selection. Works on a copy unless in_place=True and the data is
    already a uint64 ndarray, which is then left reordered.
    """

    name = "radix_u64"
    description = "bitwise radix partition, MSB first; unsigned integers up to 64 bit"

    def __init__(self, in_place: bool = False) -> None:
        self.in_place = in_place

    def _keys(self, data: Sequence[Any]) -> np.ndarray:
        return as_unsigned(data, "uint64", copy=not self.in_place)

    def median(self, data: Sequence[Any]) -> Medians:
        keys = self._keys(data)
        n = keys.shape[0]
        if n == 1:
            return Odd(int(keys[0]))
        if n == 2:
            return _ascending(int(keys[0]), int(keys[1]))
        if n % 2:
            return Odd(select_u64(keys, n // 2))
        return Even(*select_pair_u64(keys, n // 2 - 1))

    def select(self, data: Sequence[Any], rank: int) -> int:
        return select_u64(self._keys(data), rank)

    def select_pair(self, data: Sequence[Any], rank: int) -> Tuple[int, int]:
        return select_pair_u64(self._keys(data), rank)


class RadixI64Selector:
    name = "radix_i64"
    description = "sign-flipped keys through the u64 radix engine; signed integers up to 64 bit"

    @staticmethod
    def _keys(data: Sequence[Any]) -> np.ndarray:
        arr = np.asarray(data)
        if arr.dtype.kind not in "iu":
            raise ValidationError(f"expected integer data for int64, got dtype {arr.dtype}")
        if arr.dtype.kind == "u" and arr.size and int(arr.max()) > np.iinfo(np.int64).max:
            raise ValidationError("values outside the int64 range")
        return to_ordered_u64_signed(arr)

    @staticmethod
    def _value(key: int) -> int:
        return int(from_ordered_u64_signed(np.array([key], dtype=np.uint64))[0])

    def median(self, data: Sequence[Any]) -> Medians:
        keys = self._keys(data)
        n = keys.shape[0]
        if n == 1:
            return Odd(self._value(int(keys[0])))
        if n == 2:
            lo, hi = self._value(int(keys[0])), self._value(int(keys[1]))
            return _ascending(lo, hi)
        if n % 2:
            return Odd(self._value(select_u64(keys, n // 2)))
        lo, hi = select_pair_u64(keys, n // 2 - 1)
        return Even(self._value(lo), self._value(hi))

    def select(self, data: Sequence[Any], rank: int) -> int:
        return self._value(select_u64(self._keys(data), rank))

    def select_pair(self, data: Sequence[Any], rank: int) -> Tuple[int, int]:
        lo, hi = select_pair_u64(self._keys(data), rank)
        return self._value(lo), self._value(hi)
