"""Logging utilities for Chart Forge.

Library modules only call `get_logger(__name__)`; handlers are left to the
application. Scripts and notebooks that want to see Chart Forge's records
call `configure_logging()` once.
"""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "chart_forge"


def configure_logging(
    level: str | int | None = None,
    *,
    fmt: str | None = None,
    datefmt: str | None = None,
    force: bool = False,
) -> None:
    """Attach a stderr handler to the `chart_forge` logger (never root).

    Parameters
    ----------
    level : str | int | None, optional
        Logging level. Defaults to the `CHART_FORGE_LOG_LEVEL` environment
        variable, or "INFO" if unset.
    fmt : str | None, optional
        Log message format.
    datefmt : str | None, optional
        Date format.
    force : bool, optional
        Replace existing handlers instead of keeping the first one installed,
        by default False.
    """
    if level is None:
        level = os.environ.get("CHART_FORGE_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT)
    )
    logger.addHandler(console)


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns `logging.getLogger(name)`, or the package logger if no name is given."""
    return logging.getLogger(name or LOGGER_NAME)
