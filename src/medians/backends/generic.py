"""
--------------------------------------------------------------------------------
<medians project>
medians/backends/generic.py

Comparator back-end: quickselect with an equals partition over any total order.

By default the engine runs over a list of positions into the caller's data, so
the data itself is never reordered. With in_place=True the engine runs directly
on the caller's mutable sequence and leaves it reordered.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional, Sequence, Tuple

from ..engine import select_by, select_pair_by
from ..errors import ValidationError
from ..extremum import Comparator, natural_cmp
from ..results import Even, Medians, Odd


class ComparatorSelector:
    name = "comparator"
    description = "quickselect with equals partition; any total order"

    def __init__(self, cmp: Optional[Comparator] = None, in_place: bool = False) -> None:
        self.cmp = cmp or natural_cmp
        self.in_place = in_place

    def _working(self, data: Sequence[Any]) -> Tuple[MutableSequence[Any], Comparator, Callable[[Any], Any]]:
        """(working list, comparator over it, lookup from working item to data item)."""
        if self.in_place:
            if not isinstance(data, MutableSequence):
                raise ValidationError(
                    f"in_place selection needs a mutable sequence, got {type(data).__name__}"
                )
            return data, self.cmp, _identity
        c = self.cmp

        def by_position(i: int, j: int) -> int:
            return c(data[i], data[j])

        return list(range(len(data))), by_position, data.__getitem__

    def median(self, data: Sequence[Any]) -> Medians:
        n = len(data)
        if n == 1:
            return Odd(data[0])
        if n == 2:
            a, b = data[0], data[1]
            return Even(a, b) if self.cmp(a, b) <= 0 else Even(b, a)
        if n % 2:
            return Odd(self.select(data, n // 2))
        return Even(*self.select_pair(data, n // 2 - 1))

    def select(self, data: Sequence[Any], rank: int) -> Any:
        work, c, lookup = self._working(data)
        return lookup(select_by(work, rank, c))

    def select_pair(self, data: Sequence[Any], rank: int) -> Tuple[Any, Any]:
        work, c, lookup = self._working(data)
        lo, hi = select_pair_by(work, rank, c)
        return lookup(lo), lookup(hi)


def _identity(x: Any) -> Any:
    return x
