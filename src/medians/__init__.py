"""
--------------------------------------------------------------------------------
<medians project>
medians/__init__.py

Public API:
  - median / select (back-end dispatch by dtype)
  - median_by / median_ord / select_by / select_ord / qmedian_by
  - median_u8 / median_u16 / median_u64 / medf_checked / medf_unchecked
  - stats: mad, medstats, medinfo, med_correlation, medf_weighted

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

# Side-effect import: registers back-ends (comparator, histogram_*, radix_*, float)
from . import backends  # noqa: F401
from .api import (
    medf_checked,
    medf_unchecked,
    median,
    median_by,
    median_ord,
    median_u8,
    median_u16,
    median_u64,
    qmedian_by,
    select,
    select_by,
    select_ord,
)
from .errors import ConfigError, MedianError, NanError, OtherError, SizeError, ValidationError, make_error
from .extremum import natural_cmp, reverse
from .results import Even, Medians, Odd
from .stats import MedInfo, MStats, balance, mad, med_correlation, medf_weighted, medinfo, medstats, zeroed

__all__ = [
    "ConfigError",
    "Even",
    "MStats",
    "MedInfo",
    "MedianError",
    "Medians",
    "NanError",
    "Odd",
    "OtherError",
    "SizeError",
    "ValidationError",
    "balance",
    "mad",
    "make_error",
    "med_correlation",
    "medf_checked",
    "medf_unchecked",
    "medf_weighted",
    "median",
    "median_by",
    "median_ord",
    "median_u8",
    "median_u16",
    "median_u64",
    "medinfo",
    "medstats",
    "natural_cmp",
    "qmedian_by",
    "reverse",
    "select",
    "select_by",
    "select_ord",
    "zeroed",
]
