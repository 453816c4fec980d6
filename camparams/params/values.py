"""Parsers and formatters for the mini-languages found inside parameter values.

Value grammars::

    size        := digits "x" digits                 e.g. "640x480"
    size list   := size ("," size)*                   e.g. "800x600,480x320"
    range       := digits "," digits                  e.g. "15000,30000"
    range list  := "(" range ")" ("," "(" range ")")*
    area        := "(" int "," int "," int "," int "," int ")"
    area list   := area ("," area)*
    point       := int "x" int                        e.g. "-120x45"
    scalar list := item ("," item)*                   e.g. "24,15,10"

Numbers are ASCII decimal. ``-`` is only accepted where a field is signed
(area coordinates and points). Parse functions never raise on bad input:
single values come back as ``None`` and lists as ``[]``. A list with one bad
element is rejected as a whole.
"""

from __future__ import annotations

import math
import operator
import re
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from camparams.core.logging_utils import get_module_logger

from .types import Area, FpsRange, Point, Size

logger = get_module_logger("ValueCodec")

# All patterns are applied with fullmatch.
_SIZE_RE = re.compile(r"\s*([0-9]+)x([0-9]+)\s*")
_POINT_RE = re.compile(r"\s*(-?[0-9]+)x(-?[0-9]+)\s*")
_RANGE_RE = re.compile(r"\s*([0-9]+),([0-9]+)\s*")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

LIST_SEPARATOR = ","

FLOAT32_MAX = float(np.finfo(np.float32).max)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def _to_int(digits: str) -> Optional[int]:
    """``int()`` of a matched digit run; ``None`` past the interpreter's digit limit."""
    try:
        return int(digits)
    except ValueError:
        logger.debug("Rejecting integer of %d characters", len(digits))
        return None


def _to_int_pair(first: str, second: str) -> Optional[Tuple[int, int]]:
    a, b = _to_int(first), _to_int(second)
    if a is None or b is None:
        return None
    return (a, b)


def format_int(value: int) -> str:
    """Plain decimal, sign only when negative."""
    return str(operator.index(value))


def format_float(value: float) -> str:
    """Shortest decimal string that reads back as the same 32-bit float.

    Locale independent; ``0.1`` formats as ``"0.1"`` and ``5.0`` as ``"5"``.
    Infinities and NaN pass through. Raises ``ValueError`` for finite values
    whose magnitude exceeds the largest 32-bit float.
    """
    if math.isfinite(value) and abs(value) > FLOAT32_MAX:
        raise ValueError(f"{value!r} is outside the 32-bit float range")
    return np.format_float_positional(np.float32(value), unique=True, trim="-")


def parse_int(text: Optional[str], *, signed: bool = True) -> Optional[int]:
    if text is None:
        return None
    pattern = _SIGNED_RE if signed else _UNSIGNED_RE
    if not pattern.fullmatch(text):
        return None
    return _to_int(text)


def parse_float(text: Optional[str]) -> Optional[float]:
    if text is None or not _FLOAT_RE.fullmatch(text):
        return None
    return float(text)


def format_list(items: Iterable[object]) -> str:
    return LIST_SEPARATOR.join(str(item) for item in items)


def parse_string_list(text: Optional[str]) -> List[str]:
    """Comma-separated words, e.g. ``"yuv420sp,yuv422i-yuyv"``; blanks dropped."""
    if not text:
        return []
    return [item.strip() for item in text.split(LIST_SEPARATOR) if item.strip()]


def parse_int_list(text: Optional[str]) -> List[int]:
    """Comma-separated unsigned integers, e.g. ``"24,15,10"``."""
    if not text:
        return []
    values: List[int] = []
    for item in text.split(LIST_SEPARATOR):
        value = parse_int(item.strip(), signed=False)
        if value is None:
            logger.debug("Rejecting int list %r: bad element %r", text, item)
            return []
        values.append(value)
    return values


# ---------------------------------------------------------------------------
# Sizes and points
# ---------------------------------------------------------------------------

def parse_size(text: Optional[str]) -> Optional[Size]:
    if text is None:
        return None
    match = _SIZE_RE.fullmatch(text)
    if not match:
        return None
    pair = _to_int_pair(match.group(1), match.group(2))
    return Size(*pair) if pair is not None else None


def format_size(size: Size) -> str:
    return f"{size.width}x{size.height}"


def parse_size_list(text: Optional[str]) -> List[Size]:
    """Parse ``"800x600,480x320"``; order is the driver's preference order."""
    if not text:
        return []
    sizes: List[Size] = []
    for item in text.split(LIST_SEPARATOR):
        size = parse_size(item)
        if size is None:
            logger.debug("Rejecting size list %r: bad element %r", text, item)
            return []
        sizes.append(size)
    return sizes


def format_size_list(sizes: Iterable[Size]) -> str:
    return format_list(format_size(size) for size in sizes)


def parse_point(text: Optional[str]) -> Optional[Point]:
    if text is None:
        return None
    match = _POINT_RE.fullmatch(text)
    if not match:
        return None
    return _to_int_pair(match.group(1), match.group(2))


def format_point(x: int, y: int) -> str:
    return f"{format_int(x)}x{format_int(y)}"


# ---------------------------------------------------------------------------
# Parenthesized tuples
# ---------------------------------------------------------------------------

def _split_tuples(text: str) -> Optional[List[List[str]]]:
    """Split ``"(a,b),(c,d)"`` into ``[["a","b"],["c","d"]]``.

    Returns ``None`` if the text is not a comma-joined sequence of
    parenthesized groups.
    """
    groups: List[List[str]] = []
    pos = 0
    end = len(text)
    while pos < end:
        if text[pos] != "(":
            return None
        close = text.find(")", pos + 1)
        if close < 0:
            return None
        inner = text[pos + 1:close]
        if "(" in inner:
            return None
        groups.append(inner.split(LIST_SEPARATOR))
        pos = close + 1
        if pos < end:
            if text[pos] != LIST_SEPARATOR or pos + 1 == end:
                return None
            pos += 1
    return groups


def _parse_tuple_list(text: Optional[str], arity: int, *, signed: bool) -> Optional[List[List[int]]]:
    if not text:
        return []
    groups = _split_tuples(text.strip())
    if groups is None:
        return None
    result: List[List[int]] = []
    for fields in groups:
        if len(fields) != arity:
            return None
        numbers = [parse_int(field, signed=signed) for field in fields]
        if any(n is None for n in numbers):
            return None
        result.append(numbers)
    return result


def parse_range(text: Optional[str]) -> Optional[FpsRange]:
    if text is None:
        return None
    match = _RANGE_RE.fullmatch(text)
    if not match:
        return None
    pair = _to_int_pair(match.group(1), match.group(2))
    return FpsRange(*pair) if pair is not None else None


def format_range(fps_range: FpsRange) -> str:
    return f"{fps_range.min_fps},{fps_range.max_fps}"


def parse_range_list(text: Optional[str]) -> List[FpsRange]:
    """Parse ``"(10500,26623),(15000,26623),(30000,30000)"``."""
    tuples = _parse_tuple_list(text, 2, signed=False)
    if tuples is None:
        logger.debug("Rejecting range list %r", text)
        return []
    return [FpsRange(lo, hi) for lo, hi in tuples]


def format_range_list(ranges: Iterable[FpsRange]) -> str:
    return format_list(f"({format_range(r)})" for r in ranges)


def parse_area_list(text: Optional[str]) -> List[Area]:
    """Parse ``"(-10,-10,0,0,300),(0,0,10,10,700)"``.

    Every area must have five integers with coordinates in [-1000, 1000] and
    weight in [1, 1000], or be the all-zero driver-default area.
    """
    tuples = _parse_tuple_list(text, 5, signed=True)
    if tuples is None:
        logger.debug("Rejecting area list %r: malformed", text)
        return []
    areas = [Area(*fields) for fields in tuples]
    for area in areas:
        if not area.is_valid:
            logger.debug("Rejecting area list %r: %s out of bounds", text, area)
            return []
    return areas


def format_area(area: Area) -> str:
    return "(" + format_list(format_int(v) for v in area.as_tuple()) + ")"


def format_area_list(areas: Sequence[Area]) -> str:
    return format_list(format_area(area) for area in areas)


__all__ = [
    "format_area",
    "format_area_list",
    "format_float",
    "format_int",
    "format_list",
    "format_point",
    "format_range",
    "format_range_list",
    "format_size",
    "format_size_list",
    "parse_area_list",
    "parse_float",
    "parse_int",
    "parse_int_list",
    "parse_point",
    "parse_range",
    "parse_range_list",
    "parse_size",
    "parse_size_list",
    "parse_string_list",
]
