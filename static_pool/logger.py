"""
Centralized logging for static-pool.

- Library modules use ``from static_pool.logger import get_logger`` and log
  through named children of the ``static_pool`` logger.
- Nothing is attached at import time.  Applications (and the benchmark
  script) call ``configure_logging()`` once to get terminal output and,
  optionally, a per-run log file: <log_dir>/<YYYY-MM-DD_HH-MM-SS>.log
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------
_FMT = "%(asctime)s [%(levelname)-5s] %(name)-20s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"

_formatter = logging.Formatter(_FMT, datefmt=_DATE_FMT)

# Package logger; children are created by get_logger()
_package = logging.getLogger("static_pool")


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: Union[int, str] = logging.INFO,
) -> Optional[Path]:
    """Attach console (and optional file) handlers to the package logger.

    Returns the log file path, or None when *log_dir* is not given.
    Calling this again replaces the handlers from the previous call.
    """
    for handler in list(_package.handlers):
        _package.removeHandler(handler)
        handler.close()

    _package.setLevel(logging.DEBUG)

    # Console handler: live terminal output
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(_formatter)
    _package.addHandler(console)

    log_file = None
    if log_dir is not None:
        # File handler: captures everything (DEBUG and above)
        directory = Path(log_dir).expanduser()
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file = directory / f"{timestamp}.log"
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_formatter)
        _package.addHandler(file_handler)

    log.info("Logging started -> %s", log_file if log_file else "console")
    return log_file


def get_logger(name: str) -> logging.Logger:
    """Return a named child logger (e.g. ``get_logger('pool')``)."""
    return _package.getChild(name)


# Convenience: the package logger itself
log = _package
