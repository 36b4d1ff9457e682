"""
--------------------------------------------------------------------------------
<medians project>
medians/errors.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations


class MedianError(Exception):
    """Base exception for this package. Carries an error kind: size | nan | other."""

    kind: str = "other"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self._prefix}: {self.message}" if self.message else self._prefix

    @property
    def _prefix(self) -> str:
        return "Converted from"


class SizeError(MedianError):
    kind = "size"

    @property
    def _prefix(self) -> str:
        return "Size of data must be positive"


class NanError(MedianError):
    kind = "nan"

    @property
    def _prefix(self) -> str:
        return "Floats must not include NaNs"


class OtherError(MedianError):
    """Errors propagated from collaborating components."""


class ConfigError(OtherError):
    @property
    def _prefix(self) -> str:
        return "Invalid configuration"


class ValidationError(OtherError):
    """Input outside the domain a back-end accepts (dtype, value range, rank)."""

    @property
    def _prefix(self) -> str:
        return "Invalid input"


_KINDS = {"size": SizeError, "nan": NanError, "other": OtherError}


def make_error(kind: str, message: str) -> MedianError:
    """Build an error from its kind name; unknown kinds become OtherError."""
    cls = _KINDS.get(str(kind).strip().lower())
    if cls is None:
        return OtherError(f"wrong error kind '{kind}' given to make_error ({message})")
    return cls(message)
