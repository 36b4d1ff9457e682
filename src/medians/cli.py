"""
--------------------------------------------------------------------------------
<medians project>
medians/cli.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import numpy as np
import typer
from pydantic import ValidationError as PydanticValidationError

from ._console import (
    console,
    medians_payload,
    render_backends_table,
    render_medians,
    render_medinfo,
    render_selected,
    rich_tracebacks,
    setup_console_logging,
)
from .api import median, resolve_backend, select
from .config import RunConfig, discover_config, load_config
from .errors import ConfigError, NanError, SizeError, ValidationError
from .floats import scrub_nans
from .ingest import load_values
from .registry import list_backends, list_dtypes
from .stats import medinfo

app = typer.Typer(
    add_completion=True,
    no_args_is_help=True,
    help="Exact medians and order statistics of a column of values.",
)


def _exit_for(e: Exception) -> int:
    mapping = {
        ConfigError: 2,
        ValidationError: 3,
        SizeError: 4,
        NanError: 5,
    }
    for etype, code in mapping.items():
        if isinstance(e, etype):
            return code
    return 1


@app.callback()
def _root(
    log_level: str = typer.Option(
        os.environ.get("MEDIANS_LOG_LEVEL", "WARNING"),
        "--log-level",
        help="Console log level.",
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit JSON logs."),
    trace: bool = typer.Option(False, "--trace", help="Rich tracebacks on errors."),
):
    setup_console_logging(log_level, json_logs)
    rich_tracebacks(enabled=trace)


def _resolve_run(
    path: Optional[Path],
    config: Optional[Path],
    column: Optional[str],
    dtype: Optional[str],
    backend: Optional[str],
    nan_policy: Optional[str],
    rank: Optional[int] = None,
) -> RunConfig:
    """Config file (if any) with command line flags layered on top."""
    cfg_path = discover_config(config)
    cfg = load_config(cfg_path) if cfg_path else RunConfig()
    overrides: Dict[str, Any] = {}
    inp = cfg.input.model_dump()
    if path is not None:
        inp["path"] = path
    if column is not None:
        inp["column"] = column
    if dtype is not None:
        inp["dtype"] = dtype
    overrides["input"] = inp
    if backend is not None:
        overrides["backend"] = backend
    if nan_policy is not None:
        overrides["nan_policy"] = nan_policy
    if rank is not None:
        overrides["rank"] = rank
    try:
        merged = RunConfig(**{**cfg.model_dump(), **overrides})
    except PydanticValidationError as e:
        raise ConfigError(str(e)) from e
    if merged.input.path is None:
        raise ConfigError("No input. Pass PATH or set input.path in the config file.")
    return merged


def _load(cfg: RunConfig) -> np.ndarray:
    return load_values(cfg.input.path, column=cfg.input.column, dtype=cfg.input.dtype)


def _backend_call(cfg: RunConfig, values: np.ndarray) -> Tuple[str, Dict[str, Any]]:
    name = resolve_backend(values) if cfg.backend == "auto" else cfg.backend
    options: Dict[str, Any] = {}
    if name == "float":
        options["nan_policy"] = cfg.nan_policy
    return name, options


def _plain(o: Any) -> Any:
    if isinstance(o, np.generic):
        return o.item()
    return str(o)


def _echo_json(payload: Dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, default=_plain))


# ───────────────────────────────────────────────────────────────────────────────
# MEDIAN / SELECT
# ───────────────────────────────────────────────────────────────────────────────


@app.command(name="median", help="Median(s) of a column of values.")
def median_cmd(
    path: Optional[Path] = typer.Argument(None, help=".npy, .csv/.tsv or whitespace separated text"),
    column: Optional[str] = typer.Option(None, "--column", help="Column name for .csv/.tsv input."),
    backend: Optional[str] = typer.Option(None, "--backend", help="auto or a registered back-end."),
    nan_policy: Optional[str] = typer.Option(None, "--nan-policy", help="checked|unchecked|scrub"),
    dtype: Optional[str] = typer.Option(None, "--dtype", help="Cast values before selection."),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to medians.yaml"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object instead of a table."),
    with_stats: bool = typer.Option(False, "--stats", help="Also report quartiles and MAD."),
):
    try:
        cfg = _resolve_run(path, config, column, dtype, backend, nan_policy)
        if (cfg.stats or with_stats) and cfg.nan_policy == "unchecked":
            raise ConfigError("--stats needs nan_policy checked or scrub; unchecked NaNs have no quartiles.")
        values = _load(cfg)
        name, options = _backend_call(cfg, values)
        res = median(values, backend=name, **options)
        meta = {"n": int(values.size), "backend": name}
        info = None
        if cfg.stats or with_stats:
            info = medinfo(scrub_nans(values) if cfg.nan_policy == "scrub" else values)
        if as_json:
            payload = medians_payload(res, meta)
            if info is not None:
                payload["stats"] = asdict(info)
            _echo_json(payload)
        else:
            render_medians(res, meta)
            if info is not None:
                render_medinfo(info, int(values.size))
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=_exit_for(e))


@app.command(name="select", help="Item of a given 0-based sorted rank.")
def select_cmd(
    path: Optional[Path] = typer.Argument(None, help=".npy, .csv/.tsv or whitespace separated text"),
    rank: Optional[int] = typer.Option(None, "--rank", "-k", help="0-based sorted rank."),
    column: Optional[str] = typer.Option(None, "--column"),
    backend: Optional[str] = typer.Option(None, "--backend"),
    nan_policy: Optional[str] = typer.Option(None, "--nan-policy"),
    dtype: Optional[str] = typer.Option(None, "--dtype"),
    config: Optional[Path] = typer.Option(None, "--config"),
    as_json: bool = typer.Option(False, "--json"),
):
    try:
        cfg = _resolve_run(path, config, column, dtype, backend, nan_policy, rank=rank)
        if cfg.rank is None:
            raise ConfigError("Provide --rank or set rank in the config file.")
        values = _load(cfg)
        name, options = _backend_call(cfg, values)
        value = select(values, cfg.rank, backend=name, **options)
        meta = {"n": int(values.size), "backend": name, "rank": cfg.rank}
        if as_json:
            _echo_json({**meta, "value": value})
        else:
            render_selected(value, meta)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=_exit_for(e))


# ───────────────────────────────────────────────────────────────────────────────
# STATS / BACKENDS
# ───────────────────────────────────────────────────────────────────────────────


@app.command(help="Median, quartiles and MAD of a column of values.")
def stats(
    path: Optional[Path] = typer.Argument(None),
    column: Optional[str] = typer.Option(None, "--column"),
    nan_policy: Optional[str] = typer.Option(None, "--nan-policy", help="scrub drops NaNs first."),
    config: Optional[Path] = typer.Option(None, "--config"),
    as_json: bool = typer.Option(False, "--json"),
):
    try:
        cfg = _resolve_run(path, config, column, None, None, nan_policy)
        values = _load(cfg)
        if cfg.nan_policy == "scrub":
            values = scrub_nans(values)
        info = medinfo(values)
        if as_json:
            _echo_json({"n": int(values.size), **asdict(info)})
        else:
            render_medinfo(info, int(values.size))
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=_exit_for(e))


@app.command(help="List registered back-ends and the dtypes they serve under backend=auto.")
def backends():
    render_backends_table(list_backends(), list_dtypes())


def main() -> None:  # console_script entry
    app()


if __name__ == "__main__":
    main()
