"""
--------------------------------------------------------------------------------
<medians project>
medians/_console.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from rich.traceback import install as rich_tb

from ._logging import PKG_LOGGER
from .results import Even, Medians
from .stats import MedInfo

theme = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "bad": "red",
        "muted": "dim",
        "accent": "bright_cyan",
        "kv": "bold white",
        "title": "bold bright_cyan",
    }
)
console = Console(theme=theme)


def setup_console_logging(level: str = "INFO", json_logs: bool = False) -> None:
    root = logging.getLogger()
    for h in list(root.handlers):  # idempotent re-init
        root.removeHandler(h)
    root.setLevel(level.upper())

    # hand the package logger over to the root handler
    pkg = logging.getLogger(PKG_LOGGER)
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
    pkg.setLevel(level.upper())
    pkg.propagate = True

    if json_logs:

        class JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "name": record.name,
                    "message": record.getMessage(),
                }
                return json.dumps(payload)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level.upper())
        handler.setFormatter(JsonFormatter())
        root.addHandler(handler)
    else:
        handler = RichHandler(
            console=Console(stderr=True, theme=theme),
            show_time=True,
            show_level=True,
            rich_tracebacks=False,
            markup=True,
        )
        handler.setLevel(level.upper())
        root.addHandler(handler)


def rich_tracebacks(enabled: bool = True) -> None:
    if enabled:
        rich_tb(show_locals=False)


def _rounded_table(title: str) -> Table:
    return Table(
        title=Text(title, style="title"),
        show_header=True,
        header_style="bold white",
        border_style="accent",
        row_styles=["", "muted"],
        box=box.ROUNDED,
    )


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.16g}"
    return str(value)


def medians_payload(res: Medians, meta: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = dict(meta)
    if isinstance(res, Even):
        out.update({"kind": "even", "lower": res.lower, "upper": res.upper})
        try:
            out["mean"] = res.quantify()
        except (TypeError, ValueError):
            out["mean"] = None
    else:
        out.update({"kind": "odd", "median": res.value})
    return out


def render_medians(res: Medians, meta: Dict[str, Any]) -> None:
    t = _rounded_table("Median")
    t.add_column("Field")
    t.add_column("Value")
    for k, v in meta.items():
        t.add_row(k, Text(_fmt(v), style="muted"))
    if isinstance(res, Even):
        t.add_row("lower", Text(_fmt(res.lower), style="ok"))
        t.add_row("upper", Text(_fmt(res.upper), style="ok"))
        try:
            t.add_row("mean", Text(_fmt(res.quantify()), style="kv"))
        except (TypeError, ValueError):
            pass
    else:
        t.add_row("median", Text(_fmt(res.value), style="ok"))
    console.print(t)


def render_selected(value: Any, meta: Dict[str, Any]) -> None:
    t = _rounded_table("Order Statistic")
    t.add_column("Field")
    t.add_column("Value")
    for k, v in meta.items():
        t.add_row(k, Text(_fmt(v), style="muted"))
    t.add_row("value", Text(_fmt(value), style="ok"))
    console.print(t)


def render_medinfo(info: MedInfo, n: int) -> None:
    t = _rounded_table("Median Statistics")
    t.add_column("statistic")
    t.add_column("value")
    t.add_row("n", str(n))
    t.add_row("lower quartile", Text(_fmt(info.lq), style="ok"))
    t.add_row("median", Text(_fmt(info.median), style="kv"))
    t.add_row("upper quartile", Text(_fmt(info.uq), style="ok"))
    t.add_row("mad", Text(_fmt(info.mad), style="accent"))
    t.add_row("std err", Text(_fmt(info.ste), style="muted"))
    console.print(t)


def render_backends_table(backends: Dict[str, type], dtypes: Dict[str, str]) -> None:
    t = _rounded_table("Registered Back-ends")
    t.add_column("name")
    t.add_column("selector")
    t.add_column("auto dtypes")
    t.add_column("description")
    for name, cls in sorted(backends.items()):
        auto = ", ".join(sorted(d for d, b in dtypes.items() if b == name))
        t.add_row(
            name,
            cls.__name__,
            Text(auto or "-", style="accent"),
            Text(getattr(cls, "description", "") or "-", style="muted"),
        )
    console.print(t)
