from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Tuple

from camparams.core.logging_config import LOG_LEVELS, configure_logging


def add_common_cli_arguments(
    parser: argparse.ArgumentParser,
    *,
    default_log_level: str = "warning",
) -> None:
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default=default_log_level,
        help="Logging verbosity",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional path to write logs to (rotated)",
    )


def add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Feature profile file (key = value); defaults to profile.txt in the project root",
    )


def setup_logging_from_args(args: argparse.Namespace) -> None:
    configure_logging(args.log_level, log_file=getattr(args, "log_file", None))


def key_value(value: str) -> Tuple[str, str]:
    """argparse type for ``KEY=VALUE`` pairs."""
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{value}'")
    return key, val


def read_flattened(text: Optional[str]) -> str:
    """Return ``text``, or stdin when it is omitted or ``-``."""
    if text is None or text == "-":
        return sys.stdin.read().strip("\r\n")
    return text


__all__ = [
    "add_common_cli_arguments",
    "add_config_argument",
    "key_value",
    "read_flattened",
    "setup_logging_from_args",
]
