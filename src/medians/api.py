"""
--------------------------------------------------------------------------------
<medians project>
medians/api.py

Public entry points. Preconditions (non-empty data, rank in bounds) are checked
here once; the engines below assume them.

Unless `in_place=True` is passed, the caller's data is never reordered: the
generic engine works on a list of positions, the integer engines on a copy.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, Tuple

import numpy as np
import pandas as pd

from . import backends  # noqa: F401  (registers back-ends)
from ._logging import get_logger
from .backends.protocols import SupportsSelect
from .errors import SizeError, ValidationError
from .extremum import Comparator, natural_cmp
from .registry import DEFAULT_BACKEND, backend_for_dtype, get_backend
from .results import Medians

_LOG = get_logger(__name__)

Quantify = Callable[[Any], float]


def _as_input(data: Any) -> Any:
    if isinstance(data, (pd.Series, pd.Index)):
        return data.to_numpy()
    return data


def _length(data: Any) -> int:
    if isinstance(data, np.ndarray):
        return int(data.size)
    return len(data)


def _require_nonempty(data: Any, where: str) -> int:
    n = _length(data)
    if n == 0:
        raise SizeError(f"{where}: zero length data")
    return n


def _require_rank(n: int, rank: int, where: str) -> None:
    if not 0 <= rank < n:
        raise ValidationError(f"{where}: rank {rank} outside [0, {n}) for {n} item(s)")


def resolve_backend(data: Any) -> str:
    """Back-end name for `data`: by dtype for numpy arrays, the comparator engine otherwise."""
    data = _as_input(data)
    if isinstance(data, np.ndarray):
        return backend_for_dtype(data.dtype)
    return DEFAULT_BACKEND


def _selector(data: Any, backend: str, options: dict) -> Tuple[str, SupportsSelect]:
    name = resolve_backend(data) if backend == "auto" else backend
    return name, get_backend(name, **options)


# ───────────────────────────────────────────────────────────────────────────────
# Capability dispatch
# ───────────────────────────────────────────────────────────────────────────────


def median(data: Any, *, backend: str = "auto", **options: Any) -> Medians:
    """
    Median(s) of `data` through a registered back-end.

    backend="auto" picks by numpy dtype (uint8/uint16 -> histogram, other
    integers -> radix, floats -> float keys) and falls back to the comparator
    engine with the natural order. Extra options go to the back-end constructor
    (cmp=..., nan_policy=..., in_place=...).
    """
    data = _as_input(data)
    n = _require_nonempty(data, "median")
    name, sel = _selector(data, backend, options)
    _LOG.debug(f"median: n={n} backend={name}")
    return sel.median(data)


def select(data: Any, rank: int, *, backend: str = "auto", **options: Any) -> Any:
    """Item of sorted rank `rank` (0-based) through a registered back-end."""
    data = _as_input(data)
    n = _require_nonempty(data, "select")
    _require_rank(n, rank, "select")
    name, sel = _selector(data, backend, options)
    _LOG.debug(f"select: n={n} rank={rank} backend={name}")
    return sel.select(data, rank)


# ───────────────────────────────────────────────────────────────────────────────
# Generic order (comparator engine)
# ───────────────────────────────────────────────────────────────────────────────


def median_by(data: Sequence[Any], c: Comparator, *, in_place: bool = False) -> Medians:
    """Median(s) of any data under comparator `c(a, b) -> int`."""
    return median(data, backend="comparator", cmp=c, in_place=in_place)


def median_ord(data: Sequence[Any], *, in_place: bool = False) -> Medians:
    """Median(s) of data under its natural `<` order."""
    return median_by(data, natural_cmp, in_place=in_place)


def select_by(data: Sequence[Any], rank: int, c: Comparator, *, in_place: bool = False) -> Any:
    return select(data, rank, backend="comparator", cmp=c, in_place=in_place)


def select_ord(data: Sequence[Any], rank: int) -> Any:
    return select_by(data, rank, natural_cmp)


def qmedian_by(data: Sequence[Any], c: Comparator, q: Quantify) -> float:
    """Median under comparator `c`, quantified to float by `q`; the even pair is averaged."""
    n = _require_nonempty(data, "qmedian_by")
    if n == 1:
        return float(q(data[0]))
    if n == 2:
        return (float(q(data[0])) + float(q(data[1]))) / 2.0
    return median_by(data, c).quantify(q)


# ───────────────────────────────────────────────────────────────────────────────
# Fixed-width integers and floats
# ───────────────────────────────────────────────────────────────────────────────


def median_u8(data: Any) -> Medians:
    return median(data, backend="histogram_u8")


def median_u16(data: Any) -> Medians:
    return median(data, backend="histogram_u16")


def median_u64(data: Any, *, in_place: bool = False) -> Medians:
    """Radix median. With in_place=True a uint64 ndarray argument is left reordered."""
    return median(data, backend="radix_u64", in_place=in_place)


def medf_checked(data: Any) -> float:
    """Median of floats; raises NanError when any item is a NaN."""
    return median(data, backend="float", nan_policy="checked").quantify()


def medf_unchecked(data: Any) -> float:
    """
    Median of floats without a NaN scan. NaNs do not raise but do take part in
    the order, beyond the infinities, and so can shift the result.
    """
    return median(data, backend="float", nan_policy="unchecked").quantify()
