"""String-backed camera parameter store with typed accessors."""

from __future__ import annotations

import operator
from typing import IO, Dict, ItemsView, Iterator, KeysView, List, Mapping, Optional, Sequence, Union

from camparams.core.logging_utils import get_module_logger

from . import keys
from . import values as codec
from .errors import InvalidValueError
from .flatten import RESERVED_CHARACTERS, iter_entries, join_entries
from .types import (
    INVALID_FPS_RANGE,
    INVALID_POINT,
    INVALID_SIZE,
    DRIVER_DEFAULT_AREA,
    Area,
    FpsRange,
    Orientation,
    Point,
    Size,
)

logger = get_module_logger("ParameterMap")

INVALID_INT = -1
INVALID_FLOAT = -1.0

_ORIENTATION_VALUES = {
    Orientation.PORTRAIT: keys.ORIENTATION_PORTRAIT,
    Orientation.LANDSCAPE: keys.ORIENTATION_LANDSCAPE,
}

ParamValue = Union[str, int]


class ParameterMap:
    """Mapping of parameter name to string value.

    Reads never raise: missing or malformed values come back as sentinels
    (``-1``, ``-1.0``, ``Size(-1, -1)``, ``[]``). Writes raise
    :class:`InvalidValueError` when the key or value would break the
    ``key=value;...`` wire format, leaving the map unchanged.

    Not synchronized; one owner mutates it at a time.
    """

    __hash__ = None  # mutable

    def __init__(self, source: Union[str, Mapping[str, ParamValue], None] = None) -> None:
        self._map: Dict[str, str] = {}
        if isinstance(source, str):
            self.unflatten(source)
        elif isinstance(source, Mapping):
            for key, value in source.items():
                self.set(key, value)
        elif source is not None:
            raise TypeError(
                f"ParameterMap source must be a flattened str or a Mapping, not {type(source).__name__}"
            )

    @classmethod
    def from_flattened(cls, text: str) -> "ParameterMap":
        params = cls()
        params.unflatten(text)
        return params

    # ------------------------------------------------------------------
    # Wire format

    def flatten(self) -> str:
        return join_entries(self._map.items())

    def unflatten(self, text: str) -> None:
        """Replace the contents with the entries decoded from ``text``."""
        self._map.clear()
        for key, value in iter_entries(text):
            self._map[key] = value

    # ------------------------------------------------------------------
    # Generic access

    @staticmethod
    def _check_text(key: str, text: str, what: str) -> None:
        for reserved in RESERVED_CHARACTERS:
            if reserved in text:
                raise InvalidValueError(key, text, f"{what} contains reserved character {reserved!r}")

    def set(self, key: str, value: ParamValue) -> None:
        """Insert or overwrite ``key``. Integers are stored as plain decimal."""
        if not isinstance(key, str) or not key:
            raise InvalidValueError(str(key), value, "key must be a non-empty string")
        self._check_text(key, key, "key")

        if isinstance(value, str):
            text = value
        elif isinstance(value, bool):
            raise InvalidValueError(key, value, "use 'true'/'false' strings for booleans")
        else:
            try:
                text = codec.format_int(value)
            except TypeError:
                raise InvalidValueError(
                    key, value, f"unsupported type {type(value).__name__}; use set_float for floats"
                ) from None
        self._check_text(key, text, "value")

        self._map[key] = text
        logger.debug("set %s=%s", key, text)

    def set_float(self, key: str, value: float) -> None:
        try:
            text = codec.format_float(value)
        except ValueError as exc:
            raise InvalidValueError(key, value, str(exc)) from None
        self.set(key, text)

    def get(self, key: str) -> Optional[str]:
        return self._map.get(key)

    def get_int(self, key: str) -> int:
        """Decimal integer value of ``key``, or ``-1`` if absent or unparsable."""
        text = self._map.get(key)
        if text is None:
            return INVALID_INT
        value = codec.parse_int(text)
        if value is None:
            logger.warning("Value of %s is not an integer: %r", key, text)
            return INVALID_INT
        return value

    get_int64 = get_int

    def get_float(self, key: str) -> float:
        """Float value of ``key``, or ``-1.0`` if absent or unparsable."""
        text = self._map.get(key)
        if text is None:
            return INVALID_FLOAT
        value = codec.parse_float(text)
        if value is None:
            logger.warning("Value of %s is not a number: %r", key, text)
            return INVALID_FLOAT
        return value

    def remove(self, key: str) -> None:
        if self._map.pop(key, None) is not None:
            logger.debug("removed %s", key)

    def clear(self) -> None:
        self._map.clear()

    def copy(self) -> "ParameterMap":
        clone = type(self)()
        clone._map = dict(self._map)
        return clone

    def to_dict(self) -> Dict[str, str]:
        return dict(self._map)

    def keys(self) -> KeysView[str]:
        return self._map.keys()

    def items(self) -> ItemsView[str, str]:
        return self._map.items()

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParameterMap):
            return self._map == other._map
        if isinstance(other, Mapping):
            return self._map == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ParameterMap({self._map!r})"

    def dump(self, stream: Optional[IO[str]] = None) -> None:
        """Write every entry as ``key: value`` to ``stream`` and the debug log."""
        header = f"dump: mMap.size = {len(self._map)}"
        logger.debug(header)
        if stream is not None:
            stream.write(header + "\n")
        for key, value in self._map.items():
            logger.debug("%s: %s", key, value)
            if stream is not None:
                stream.write(f"{key}: {value}\n")

    # ------------------------------------------------------------------
    # Structured helpers

    def _set_size(self, key: str, width: int, height: int) -> None:
        size = Size(operator.index(width), operator.index(height))
        if not size.is_valid:
            raise InvalidValueError(key, codec.format_size(size), "width and height must be non-negative")
        self.set(key, codec.format_size(size))

    def _get_size(self, key: str) -> Size:
        text = self._map.get(key)
        if text is None:
            return INVALID_SIZE
        size = codec.parse_size(text)
        if size is None:
            logger.warning("Malformed size for %s: %r", key, text)
            return INVALID_SIZE
        return size

    def _get_size_list(self, key: str) -> List[Size]:
        text = self._map.get(key)
        sizes = codec.parse_size_list(text)
        if text and not sizes:
            logger.warning("Malformed size list for %s: %r", key, text)
        return sizes

    def _get_point(self, key: str) -> Point:
        text = self._map.get(key)
        if text is None:
            return INVALID_POINT
        point = codec.parse_point(text)
        if point is None:
            logger.warning("Malformed point for %s: %r", key, text)
            return INVALID_POINT
        return point

    def _set_areas(self, key: str, areas: Sequence[Area]) -> None:
        if not areas:
            areas = [DRIVER_DEFAULT_AREA]
        for area in areas:
            if not area.is_valid:
                raise InvalidValueError(key, area, "area outside [-1000, 1000] or weight outside [1, 1000]")
        self.set(key, codec.format_area_list(areas))

    def _get_areas(self, key: str) -> List[Area]:
        text = self._map.get(key)
        areas = codec.parse_area_list(text)
        if text and not areas:
            logger.warning("Malformed area list for %s: %r", key, text)
        return areas

    def _get_area_center(self, key: str) -> Point:
        areas = self._get_areas(key)
        if not areas or areas[0].is_driver_default:
            return INVALID_POINT
        return areas[0].center

    # ------------------------------------------------------------------
    # Sizes

    def set_preview_size(self, width: int, height: int) -> None:
        self._set_size(keys.KEY_PREVIEW_SIZE, width, height)

    def get_preview_size(self) -> Size:
        return self._get_size(keys.KEY_PREVIEW_SIZE)

    def get_supported_preview_sizes(self) -> List[Size]:
        return self._get_size_list(keys.KEY_SUPPORTED_PREVIEW_SIZES)

    def set_video_size(self, width: int, height: int) -> None:
        self._set_size(keys.KEY_VIDEO_SIZE, width, height)

    def get_video_size(self) -> Size:
        return self._get_size(keys.KEY_VIDEO_SIZE)

    def get_supported_video_sizes(self) -> List[Size]:
        """Empty when the camera has no separate video output."""
        return self._get_size_list(keys.KEY_SUPPORTED_VIDEO_SIZES)

    def get_preferred_preview_size_for_video(self) -> Size:
        """``Size(-1, -1)`` when video sizes are not supported."""
        return self._get_size(keys.KEY_PREFERRED_PREVIEW_SIZE_FOR_VIDEO)

    def set_picture_size(self, width: int, height: int) -> None:
        self._set_size(keys.KEY_PICTURE_SIZE, width, height)

    def get_picture_size(self) -> Size:
        return self._get_size(keys.KEY_PICTURE_SIZE)

    def get_supported_picture_sizes(self) -> List[Size]:
        return self._get_size_list(keys.KEY_SUPPORTED_PICTURE_SIZES)

    def get_supported_hfr_sizes(self) -> List[Size]:
        return self._get_size_list(keys.KEY_SUPPORTED_HFR_SIZES)

    def set_postview_size(self, width: int, height: int) -> None:
        self._set_size(keys.KEY_POSTVIEW_SIZE, width, height)

    # ------------------------------------------------------------------
    # Frame rates and formats

    def set_preview_frame_rate(self, fps: int) -> None:
        self.set(keys.KEY_PREVIEW_FRAME_RATE, operator.index(fps))

    def get_preview_frame_rate(self) -> int:
        return self.get_int(keys.KEY_PREVIEW_FRAME_RATE)

    def get_supported_preview_frame_rates(self) -> List[int]:
        text = self._map.get(keys.KEY_SUPPORTED_PREVIEW_FRAME_RATES)
        rates = codec.parse_int_list(text)
        if text and not rates:
            logger.warning("Malformed frame rate list: %r", text)
        return rates

    def set_preview_frame_rate_mode(self, mode: str) -> None:
        self.set(keys.KEY_PREVIEW_FRAME_RATE_MODE, mode)

    def get_preview_frame_rate_mode(self) -> Optional[str]:
        return self.get(keys.KEY_PREVIEW_FRAME_RATE_MODE)

    def set_preview_fps_range(self, min_fps: int, max_fps: int) -> None:
        fps_range = FpsRange(operator.index(min_fps), operator.index(max_fps))
        if not fps_range.is_valid:
            raise InvalidValueError(
                keys.KEY_PREVIEW_FPS_RANGE,
                codec.format_range(fps_range),
                "fps range must satisfy 0 <= min <= max",
            )
        self.set(keys.KEY_PREVIEW_FPS_RANGE, codec.format_range(fps_range))

    def get_preview_fps_range(self) -> FpsRange:
        text = self._map.get(keys.KEY_PREVIEW_FPS_RANGE)
        if text is None:
            return INVALID_FPS_RANGE
        fps_range = codec.parse_range(text)
        if fps_range is None:
            logger.warning("Malformed fps range: %r", text)
            return INVALID_FPS_RANGE
        return fps_range

    def get_supported_preview_fps_ranges(self) -> List[FpsRange]:
        """Driver order: small to large, by max fps then min fps."""
        text = self._map.get(keys.KEY_SUPPORTED_PREVIEW_FPS_RANGE)
        ranges = codec.parse_range_list(text)
        if text and not ranges:
            logger.warning("Malformed fps range list: %r", text)
        return ranges

    def set_preview_format(self, fmt: str) -> None:
        self.set(keys.KEY_PREVIEW_FORMAT, fmt)

    def get_preview_format(self) -> Optional[str]:
        return self.get(keys.KEY_PREVIEW_FORMAT)

    def get_supported_preview_formats(self) -> List[str]:
        return codec.parse_string_list(self._map.get(keys.KEY_SUPPORTED_PREVIEW_FORMATS))

    def set_picture_format(self, fmt: str) -> None:
        self.set(keys.KEY_PICTURE_FORMAT, fmt)

    def get_picture_format(self) -> Optional[str]:
        return self.get(keys.KEY_PICTURE_FORMAT)

    def get_supported_picture_formats(self) -> List[str]:
        return codec.parse_string_list(self._map.get(keys.KEY_SUPPORTED_PICTURE_FORMATS))

    # ------------------------------------------------------------------
    # Focus and metering

    def set_focus_areas(self, areas: Sequence[Area]) -> None:
        """An empty sequence stores the driver-default area ``(0,0,0,0,0)``."""
        self._set_areas(keys.KEY_FOCUS_AREAS, areas)

    def get_focus_areas(self) -> List[Area]:
        return self._get_areas(keys.KEY_FOCUS_AREAS)

    def get_focus_area_center(self) -> Point:
        return self._get_area_center(keys.KEY_FOCUS_AREAS)

    def set_metering_areas(self, areas: Sequence[Area]) -> None:
        self._set_areas(keys.KEY_METERING_AREAS, areas)

    def get_metering_areas(self) -> List[Area]:
        return self._get_areas(keys.KEY_METERING_AREAS)

    def get_metering_area_center(self) -> Point:
        return self._get_area_center(keys.KEY_METERING_AREAS)

    def set_touch_index_aec(self, x: int, y: int) -> None:
        self.set(keys.KEY_TOUCH_INDEX_AEC, codec.format_point(x, y))

    def get_touch_index_aec(self) -> Point:
        return self._get_point(keys.KEY_TOUCH_INDEX_AEC)

    def set_touch_index_af(self, x: int, y: int) -> None:
        self.set(keys.KEY_TOUCH_INDEX_AF, codec.format_point(x, y))

    def get_touch_index_af(self) -> Point:
        return self._get_point(keys.KEY_TOUCH_INDEX_AF)

    # ------------------------------------------------------------------
    # Orientation

    def set_orientation(self, orientation: Orientation) -> None:
        """``Orientation.UNKNOWN`` removes the key."""
        value = _ORIENTATION_VALUES.get(Orientation(orientation))
        if value is None:
            self.remove(keys.KEY_ORIENTATION)
        else:
            self.set(keys.KEY_ORIENTATION, value)

    def get_orientation(self) -> Orientation:
        text = self._map.get(keys.KEY_ORIENTATION)
        for orientation, value in _ORIENTATION_VALUES.items():
            if text == value:
                return orientation
        return Orientation.UNKNOWN


__all__ = ["INVALID_FLOAT", "INVALID_INT", "ParameterMap"]
