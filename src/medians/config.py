"""
--------------------------------------------------------------------------------
<medians project>
medians/config.py

Run configuration for the CLI (YAML or flags). Library calls take keyword
arguments directly and do not need these models.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from .errors import ConfigError
from .registry import get_backend_cls

NanPolicy = Literal["checked", "unchecked", "scrub"]
DType = Literal["uint8", "uint16", "uint32", "uint64", "int64", "float64"]

DEFAULT_CONFIG_NAME = "medians.yaml"


class InputConfig(BaseModel):
    """
    Where the values come from.

    path   : .npy, .csv/.tsv (needs column unless the table has a single one) or
             whitespace separated text
    column : column name for tabular files
    dtype  : cast after loading; picks the back-end under backend=auto
    """

    path: Optional[Path] = None
    column: Optional[str] = None
    dtype: Optional[DType] = None


class RunConfig(BaseModel):
    input: InputConfig = Field(default_factory=InputConfig)
    backend: str = "auto"
    nan_policy: NanPolicy = "checked"
    rank: Optional[int] = Field(None, ge=0)
    stats: bool = False

    @field_validator("backend")
    @classmethod
    def _known_backend(cls, v: str) -> str:
        if v != "auto":
            get_backend_cls(v)  # raises ConfigError when not registered
        return v


def load_config(path: Path) -> RunConfig:
    if not path.is_file():
        raise ConfigError(f"config file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    try:
        return RunConfig(**raw)
    except PydanticValidationError as e:
        raise ConfigError(f"{path}: {e}") from e


def discover_config(provided: Optional[Path]) -> Optional[Path]:
    """--config if given, else ./medians.yaml when present, else None."""
    if provided:
        return provided.resolve()
    cwd_cfg = Path.cwd() / DEFAULT_CONFIG_NAME
    if cwd_cfg.is_file():
        return cwd_cfg.resolve()
    return None
