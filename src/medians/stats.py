"""
--------------------------------------------------------------------------------
<medians project>
medians/stats.py

Statistics layered on the median: zero-median data, MAD, median-based quartiles,
median correlation and an iterative weighted median. Items are quantified to
float by `q` (default: float()).

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

import numpy as np

from ._logging import get_logger
from .api import medf_checked, medf_unchecked
from .errors import NanError, SizeError
from .floats import nans

_LOG = get_logger(__name__)

Quantify = Callable[[Any], float]


@dataclass(frozen=True)
class MStats:
    """Central tendency and its dispersion (here: median and MAD)."""

    centre: float
    dispersion: float


@dataclass(frozen=True)
class MedInfo:
    median: float
    lq: float  # lower quartile, as median of negative differences
    uq: float  # upper quartile, as median of positive differences
    mad: float
    ste: float  # mad / median


def quantified(data: Sequence[Any] | np.ndarray, q: Quantify = float) -> np.ndarray:
    if q is float:
        return np.asarray(data, dtype=np.float64).reshape(-1)
    return np.fromiter((q(x) for x in data), dtype=np.float64, count=len(data))


def zeroed(data: Sequence[Any] | np.ndarray, centre: float, q: Quantify = float) -> np.ndarray:
    """Data minus `centre` (zero median data when centre is the median)."""
    return quantified(data, q) - centre


def mad(data: Sequence[Any] | np.ndarray, centre: float, q: Quantify = float) -> float:
    """
    Median of absolute differences from `centre`. More stable than the standard
    deviation; most stable when `centre` is the median.
    """
    return medf_unchecked(np.abs(zeroed(data, centre, q)))


def medstats(data: Sequence[Any] | np.ndarray, q: Quantify = float) -> MStats:
    values = quantified(data, q)
    centre = medf_checked(values)
    return MStats(centre=centre, dispersion=mad(values, centre))


def medinfo(data: Sequence[Any] | np.ndarray, q: Quantify = float) -> MedInfo:
    """Median, quartiles (as medians of one-sided differences), MAD and MAD/median."""
    values = quantified(data, q)
    if values.size < 2:
        raise SizeError(f"medinfo: needs at least two items, got {values.size}")
    med = medf_checked(values)
    posdifs = values[values > med] - med
    negdifs = med - values[values < med]
    equals = int(np.count_nonzero(values == med))
    if equals > 1:
        # items equal to the median count on both sides
        eqhalf = np.zeros(equals // 2)
        lq = med - medf_checked(np.concatenate((negdifs, eqhalf)))
        uq = med + medf_checked(np.concatenate((eqhalf, posdifs)))
        spread = medf_checked(np.concatenate((negdifs, np.zeros(equals), posdifs)))
    else:
        lq = med - medf_checked(negdifs)
        uq = med + medf_checked(posdifs)
        spread = medf_checked(np.concatenate((negdifs, posdifs)))
    with np.errstate(divide="ignore", invalid="ignore"):
        ste = float(np.divide(spread, med))
    return MedInfo(median=med, lq=lq, uq=uq, mad=spread, ste=ste)


def med_correlation(
    x: Sequence[Any] | np.ndarray, y: Sequence[Any] | np.ndarray, q: Quantify = float
) -> float:
    """
    Median correlation: cosine of the angle between the two zero-median vectors
    (Pearson's construction with medians in place of means).
    """
    xs, ys = quantified(x, q), quantified(y, q)
    if xs.size != ys.size:
        raise SizeError(f"med_correlation: lengths differ ({xs.size} vs {ys.size})")
    zx = xs - medf_checked(xs)
    zy = ys - medf_checked(ys)
    with np.errstate(divide="ignore", invalid="ignore"):
        res = float(np.dot(zx, zy) / np.sqrt(np.dot(zx, zx) * np.dot(zy, zy)))
    if np.isnan(res):
        raise NanError("med_correlation: NaN result (a zero-median vector is all zeros)")
    return res


def medf_weighted(
    data: Sequence[float] | np.ndarray,
    weights: Sequence[float] | np.ndarray,
    eps: float = 1e-5,
    max_iter: int = 1000,
) -> float:
    """
    Iterative weighted median. Starts from the weighted mean and reweights each
    point by weight / sqrt(distance) until the reweighting sum settles within eps.
    """
    xs = np.asarray(data, dtype=np.float64).reshape(-1)
    ws = np.asarray(weights, dtype=np.float64).reshape(-1)
    if xs.size == 0:
        raise SizeError("medf_weighted: zero length data")
    if xs.size != ws.size:
        raise SizeError("medf_weighted: data and weights lengths mismatch")
    if nans(xs) or nans(ws):
        raise NanError("medf_weighted: NaN in input")
    last_median = float(np.dot(ws, xs) / ws.sum())
    last_recsum = 0.0
    for _ in range(max_iter):
        mag = np.abs(xs - last_median)
        # points sitting on the current estimate carry no direction
        use = mag > np.finfo(np.float64).tiny
        if not use.any():
            return last_median
        rec = ws[use] / np.sqrt(mag[use])
        recsum = float(rec.sum())
        estimate = float(np.dot(rec, xs[use]) / recsum)
        if recsum - last_recsum < eps:
            return estimate
        last_median = estimate
        last_recsum = recsum
    _LOG.warning(f"medf_weighted: no convergence within {max_iter} iterations (eps={eps})")
    return last_median


def balance(data: Sequence[Any] | np.ndarray, centre: float, q: Quantify = float) -> int:
    """
    Signed count imbalance of `data` around `centre` (items above minus items
    below), reported as 0 when the items equal to `centre` can absorb it.
    A median always balances.
    """
    values = quantified(data, q)
    above = int(np.count_nonzero(values > centre))
    below = int(np.count_nonzero(values < centre))
    eq = values.size - above - below
    bal = above - below
    return 0 if abs(bal) <= eq else bal
