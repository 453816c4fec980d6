"""Root logging setup for the camparams command line tool."""

from __future__ import annotations

import contextlib
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_BYTES = 256 * 1024
LOG_FILE_BACKUP_COUNT = 2

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        numeric = LOG_LEVELS.get(level.lower())
        if numeric is None:
            valid = ", ".join(sorted(LOG_LEVELS))
            raise ValueError(f"Unknown log level '{level}'. Choose from: {valid}")
        return numeric
    return int(level)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    *,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Replace the root handlers with a stderr handler and an optional rotating file.

    Stdout is left to command output.

    Args:
        level: Logging level (int or name such as "info").
        log_file: Optional path for a rotating log file; parent directories are created.
    """

    numeric_level = _coerce_level(level)
    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)
        with contextlib.suppress(Exception):
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(numeric_level)


__all__ = ["configure_logging", "LOG_FORMAT", "LOG_DATEFMT", "LOG_LEVELS"]
