"""
--------------------------------------------------------------------------------
<medians project>
medians/_logging.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import sys

PKG_LOGGER = "medians"

_DEF_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str = PKG_LOGGER, level: str = "WARNING") -> logging.Logger:
    """Library-friendly logger (idempotent handler attach on the package logger)."""
    pkg = logging.getLogger(PKG_LOGGER)
    if not pkg.handlers:
        pkg.setLevel(level.upper())
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(level.upper())
        ch.setFormatter(logging.Formatter(_DEF_FMT))
        pkg.addHandler(ch)
        pkg.propagate = False
    return logging.getLogger(name)
