# === FILE: faver/logger.py ===
"""Logging setup for **faver**.

Every module logs through the single ``faver`` logger::

    from faver.logger import logger
    logger.debug("GET %s", url)

The CLI calls :func:`init_logging` once with the level and optional log file
chosen on the command line. Console records go to *stderr*, since *stdout*
carries the paths of saved icons.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "faver"

_LevelT = Union[int, str]


def init_logging(level: _LevelT = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Replace the handlers of the ``faver`` logger and apply *level*.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Optional logfile, rotated at 5 MiB with three backups.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    lg.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    lg.addHandler(console)

    if log_file is not None:
        rotating = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        rotating.setFormatter(formatter)
        lg.addHandler(rotating)

    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "LOG_FORMAT"]
