"""``key=value;key=value`` wire format shared with camera drivers.

There is no escaping: keys and values must not contain ``=`` or ``;``.
:class:`~camparams.params.parameter_map.ParameterMap` enforces that on every
write, so anything it holds can be flattened safely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Iterator, Mapping, Tuple, Union

from camparams.core.logging_utils import get_module_logger

if TYPE_CHECKING:
    from .parameter_map import ParameterMap

logger = get_module_logger("FlattenCodec")

ENTRY_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="
RESERVED_CHARACTERS = (ENTRY_SEPARATOR, KEY_VALUE_SEPARATOR)


def iter_entries(text: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, value)`` pairs from flattened text in wire order.

    Segments without ``=`` or with an empty key are skipped with a warning;
    empty segments (``";;"`` or a trailing ``";"``) are ignored.
    """
    if not text:
        return
    for index, segment in enumerate(text.split(ENTRY_SEPARATOR)):
        if not segment:
            continue
        key, sep, value = segment.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            logger.warning("Skipping malformed entry %d (missing '='): %r", index, segment)
            continue
        if not key:
            logger.warning("Skipping malformed entry %d (empty key): %r", index, segment)
            continue
        yield key, value


def parse_entries(text: str) -> Dict[str, str]:
    """Decode flattened text to a dict; repeated keys keep the last value."""
    entries: Dict[str, str] = {}
    for key, value in iter_entries(text):
        entries[key] = value
    return entries


def join_entries(items: Iterable[Tuple[str, str]]) -> str:
    return ENTRY_SEPARATOR.join(f"{key}{KEY_VALUE_SEPARATOR}{value}" for key, value in items)


def flatten(params: Union["ParameterMap", Mapping[str, str]]) -> str:
    """Serialize every entry as ``key=value`` joined by ``;`` (no trailing separator)."""
    return join_entries(params.items())


def unflatten(text: str) -> "ParameterMap":
    """Build a new :class:`ParameterMap` from flattened text."""
    from .parameter_map import ParameterMap

    return ParameterMap.from_flattened(text)


__all__ = [
    "ENTRY_SEPARATOR",
    "KEY_VALUE_SEPARATOR",
    "RESERVED_CHARACTERS",
    "flatten",
    "iter_entries",
    "join_entries",
    "parse_entries",
    "unflatten",
]
