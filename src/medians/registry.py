"""
--------------------------------------------------------------------------------
<medians project>
medians/registry.py

Back-end registry: name -> selector class, and numpy dtype -> back-end name
for automatic dispatch.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Dict, Type

import numpy as np

from ._logging import get_logger
from .errors import ConfigError

_LOG = get_logger(__name__)

_BACKEND_REGISTRY: Dict[str, Type] = {}
_DTYPE_REGISTRY: Dict[str, str] = {}

DEFAULT_BACKEND = "comparator"


def register_backend(name: str, selector_cls: Type) -> None:
    if name in _BACKEND_REGISTRY:
        _LOG.warning(f"Back-end '{name}' already registered; overriding.")
    _BACKEND_REGISTRY[name] = selector_cls


def get_backend_cls(name: str) -> Type:
    try:
        return _BACKEND_REGISTRY[name]
    except KeyError as e:
        raise ConfigError(
            f"Unknown back-end '{name}'. Available: {sorted(_BACKEND_REGISTRY)}"
        ) from e


def get_backend(name: str, **options: Any):
    """Instantiate a registered back-end with its options (e.g. cmp=..., nan_policy=...)."""
    cls = get_backend_cls(name)
    try:
        return cls(**options)
    except TypeError as e:
        raise ConfigError(f"Back-end '{name}' does not accept options {sorted(options)}") from e


def list_backends() -> Dict[str, Type]:
    return dict(_BACKEND_REGISTRY)


def register_dtype(dtype: str, backend: str) -> None:
    key = np.dtype(dtype).name
    if key in _DTYPE_REGISTRY:
        _LOG.warning(f"dtype '{key}' already mapped to '{_DTYPE_REGISTRY[key]}'; overriding.")
    _DTYPE_REGISTRY[key] = backend


def backend_for_dtype(dtype: Any) -> str:
    """Back-end name for a numpy dtype; unmapped dtypes use the comparator engine."""
    return _DTYPE_REGISTRY.get(np.dtype(dtype).name, DEFAULT_BACKEND)


def list_dtypes() -> Dict[str, str]:
    return dict(_DTYPE_REGISTRY)
