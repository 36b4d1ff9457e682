"""
--------------------------------------------------------------------------------
<medians project>
medians/backends/protocols.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple

from ..results import Medians


class SupportsSelect(Protocol):
    """A thing that can be order-selected: median and k-th order statistic."""

    name: str
    description: str

    def median(self, data: Sequence[Any]) -> Medians: ...
    def select(self, data: Sequence[Any], rank: int) -> Any: ...
    def select_pair(self, data: Sequence[Any], rank: int) -> Tuple[Any, Any]: ...
