"""
--------------------------------------------------------------------------------
<medians project>
medians/backends/floating.py

Float back-end: doubles are mapped to order-preserving uint64 keys, selected by
the radix engine, and mapped back.

nan_policy:
  - checked   : any NaN raises NanError
  - unchecked : NaNs are kept and order beyond the infinities (sign decides which end)
  - scrub     : NaNs are dropped before selection

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Literal, Sequence, Tuple

import numpy as np

from ..errors import ConfigError, NanError, SizeError, ValidationError
from ..floats import from_ordered_u64, scrub_nans, to_ordered_u64_array
from ..radix import select_pair_u64, select_u64
from ..results import Even, Medians, Odd

NanPolicy = Literal["checked", "unchecked", "scrub"]
NAN_POLICIES = ("checked", "unchecked", "scrub")


class OrderedFloatSelector:
    name = "float"
    description = "IEEE total-order keys through the u64 radix engine; float16/32/64"

    def __init__(self, nan_policy: NanPolicy = "checked") -> None:
        if nan_policy not in NAN_POLICIES:
            raise ConfigError(f"nan_policy must be one of {NAN_POLICIES}, got '{nan_policy}'")
        self.nan_policy = nan_policy

    def _values(self, data: Sequence[Any]) -> np.ndarray:
        arr = np.asarray(data)
        if arr.dtype.kind not in "fiub":
            raise ValidationError(f"expected numeric data for float selection, got dtype {arr.dtype}")
        arr = arr.astype(np.float64).reshape(-1)
        if self.nan_policy == "scrub":
            arr = scrub_nans(arr)
            if arr.size == 0:
                raise SizeError("float selection: no data left after scrubbing NaNs")
        elif self.nan_policy == "checked" and np.isnan(arr).any():
            raise NanError("float selection: NaN in input")
        return arr

    def median(self, data: Sequence[Any]) -> Medians:
        values = self._values(data)
        n = values.shape[0]
        if n == 1:
            return Odd(float(values[0]))
        keys = to_ordered_u64_array(values)
        if n == 2:
            lo, hi = sorted(int(k) for k in keys)
            return Even(from_ordered_u64(lo), from_ordered_u64(hi))
        if n % 2:
            return Odd(from_ordered_u64(select_u64(keys, n // 2)))
        lo, hi = select_pair_u64(keys, n // 2 - 1)
        return Even(from_ordered_u64(lo), from_ordered_u64(hi))

    def _keys(self, data: Sequence[Any], top: int) -> np.ndarray:
        """Keys of the policy-filtered values; `top` is the highest rank the caller will read."""
        values = self._values(data)
        if top >= values.shape[0]:
            raise ValidationError(
                f"float selection: rank {top} outside [0, {values.shape[0]}) after applying nan_policy={self.nan_policy}"
            )
        return to_ordered_u64_array(values)

    def select(self, data: Sequence[Any], rank: int) -> float:
        keys = self._keys(data, rank)
        return from_ordered_u64(select_u64(keys, rank))

    def select_pair(self, data: Sequence[Any], rank: int) -> Tuple[float, float]:
        keys = self._keys(data, rank + 1)
        lo, hi = select_pair_u64(keys, rank)
        return from_ordered_u64(lo), from_ordered_u64(hi)
