"""
--------------------------------------------------------------------------------
<medians project>
medians/backends/__init__.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from ..registry import register_backend, register_dtype
from .floating import OrderedFloatSelector
from .generic import ComparatorSelector
from .integers import (
    HistogramU8Selector,
    HistogramU16Selector,
    RadixI64Selector,
    RadixU64Selector,
)

# Register back-ends
register_backend("comparator", ComparatorSelector)
register_backend("histogram_u8", HistogramU8Selector)
register_backend("histogram_u16", HistogramU16Selector)
register_backend("radix_u64", RadixU64Selector)
register_backend("radix_i64", RadixI64Selector)
register_backend("float", OrderedFloatSelector)

# Automatic dispatch by numpy dtype
register_dtype("uint8", "histogram_u8")
register_dtype("uint16", "histogram_u16")
register_dtype("uint32", "radix_u64")
register_dtype("uint64", "radix_u64")
register_dtype("int8", "radix_i64")
register_dtype("int16", "radix_i64")
register_dtype("int32", "radix_i64")
register_dtype("int64", "radix_i64")
register_dtype("float16", "float")
register_dtype("float32", "float")
register_dtype("float64", "float")

__all__ = [
    "ComparatorSelector",
    "HistogramU8Selector",
    "HistogramU16Selector",
    "OrderedFloatSelector",
    "RadixI64Selector",
    "RadixU64Selector",
]
