"""
--------------------------------------------------------------------------------
<medians project>
medians/results.py

Selection results: one value for odd-length data, an ascending pair of the
two central values for even-length data.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Odd(Generic[T]):
    value: T

    @property
    def values(self) -> Tuple[T]:
        return (self.value,)

    def quantify(self, q: Callable[[T], float] = float) -> float:
        return float(q(self.value))

    def __str__(self) -> str:
        return f"odd median: {self.value}"


@dataclass(frozen=True)
class Even(Generic[T]):
    lower: T
    upper: T

    @property
    def values(self) -> Tuple[T, T]:
        return (self.lower, self.upper)

    def quantify(self, q: Callable[[T], float] = float) -> float:
        """Average of the two central values after quantifying each to float."""
        return (float(q(self.lower)) + float(q(self.upper))) / 2.0

    def __str__(self) -> str:
        return f"even medians: {self.lower} {self.upper}"


Medians = Union[Odd[Any], Even[Any]]


def is_even(res: Medians) -> bool:
    return isinstance(res, Even)
