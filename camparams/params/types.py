"""Value types carried inside camera parameter strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

AREA_COORD_MIN = -1000
AREA_COORD_MAX = 1000
AREA_WEIGHT_MIN = 1
AREA_WEIGHT_MAX = 1000


@dataclass(slots=True, frozen=True)
class Size:
    """Frame dimensions in pixels."""

    width: int
    height: int

    @property
    def is_valid(self) -> bool:
        return self.width >= 0 and self.height >= 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


INVALID_SIZE = Size(-1, -1)


@dataclass(slots=True, frozen=True)
class FpsRange:
    """Preview frame-rate bounds, scaled by 1000 (``30000`` is 30 fps)."""

    min_fps: int
    max_fps: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.min_fps <= self.max_fps

    @property
    def is_fixed(self) -> bool:
        return self.min_fps == self.max_fps

    def as_tuple(self) -> Tuple[int, int]:
        return (self.min_fps, self.max_fps)


INVALID_FPS_RANGE = FpsRange(-1, -1)


@dataclass(slots=True, frozen=True)
class Area:
    """Weighted rectangle in sensor coordinates, used for focus and metering hints.

    Coordinates run from -1000 (top/left of the field of view) to 1000
    (bottom/right). The all-zero area asks the driver to pick the region.
    """

    left: int
    top: int
    right: int
    bottom: int
    weight: int

    @property
    def is_driver_default(self) -> bool:
        return self.as_tuple() == (0, 0, 0, 0, 0)

    @property
    def is_valid(self) -> bool:
        if self.is_driver_default:
            return True
        coords = (self.left, self.top, self.right, self.bottom)
        if any(c < AREA_COORD_MIN or c > AREA_COORD_MAX for c in coords):
            return False
        return AREA_WEIGHT_MIN <= self.weight <= AREA_WEIGHT_MAX

    @property
    def center(self) -> Tuple[int, int]:
        return ((self.left + self.right) // 2, (self.top + self.bottom) // 2)

    def as_tuple(self) -> Tuple[int, int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom, self.weight)


DRIVER_DEFAULT_AREA = Area(0, 0, 0, 0, 0)

Point = Tuple[int, int]
INVALID_POINT: Point = (-1, -1)


class Orientation(Enum):
    UNKNOWN = 0
    PORTRAIT = 1
    LANDSCAPE = 2


__all__ = [
    "AREA_COORD_MAX",
    "AREA_COORD_MIN",
    "AREA_WEIGHT_MAX",
    "AREA_WEIGHT_MIN",
    "Area",
    "DRIVER_DEFAULT_AREA",
    "FpsRange",
    "INVALID_FPS_RANGE",
    "INVALID_POINT",
    "INVALID_SIZE",
    "Orientation",
    "Point",
    "Size",
]
