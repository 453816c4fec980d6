"""Shared logging helpers for the camparams package."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER_NAMESPACE = "camparams"
DEFAULT_COMPONENT = "Params"


def _normalize_logger_name(name: Optional[str]) -> str:
    if not name:
        return PACKAGE_LOGGER_NAMESPACE
    if name.startswith(PACKAGE_LOGGER_NAMESPACE):
        return name
    return f"{PACKAGE_LOGGER_NAMESPACE}.{name}"


def _derive_component(name: str) -> str:
    suffix = name[len(PACKAGE_LOGGER_NAMESPACE):].lstrip(".")
    return suffix or DEFAULT_COMPONENT


class StructuredLogger:
    """Thin wrapper that tags every record with a ``[Component]`` prefix."""

    __slots__ = ("_logger", "_component")

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
        self._component = _derive_component(logger.name)

    def __getattr__(self, item):
        return getattr(self._logger, item)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"StructuredLogger({self._logger!r}, component={self._component!r})"

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def component(self) -> str:
        return self._component

    # ------------------------------------------------------------------
    # Formatting

    def _compose(self, message: object, args: tuple) -> str:
        text = str(message)
        if args:
            try:
                text = text % args
            except (TypeError, ValueError):
                joined = " ".join(str(arg) for arg in args)
                text = f"{text} | args={joined}"
        prefix = f"[{self._component}]"
        if not text.startswith(prefix):
            text = f"{prefix} {text}"
        return text

    def _emit(self, level: int, message: object, args: tuple, kwargs: dict) -> None:
        # Skip formatting entirely for disabled levels; the parsers log a lot at DEBUG.
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, self._compose(message, args), **kwargs)

    def debug(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.DEBUG, message, args, kwargs)

    def info(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.INFO, message, args, kwargs)

    def warning(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.WARNING, message, args, kwargs)

    def error(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.ERROR, message, args, kwargs)


def get_module_logger(name: Optional[str] = None) -> StructuredLogger:
    """Return a structured logger scoped to the camparams namespace."""
    return StructuredLogger(logging.getLogger(_normalize_logger_name(name)))


__all__ = [
    "StructuredLogger",
    "get_module_logger",
]
