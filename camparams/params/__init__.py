"""Camera parameter store, wire codec and value grammars."""

from .errors import CameraParametersError, FeatureProfileError, InvalidValueError
from .features import FeatureProfile
from .flatten import flatten, unflatten
from .parameter_map import INVALID_FLOAT, INVALID_INT, ParameterMap
from .types import (
    DRIVER_DEFAULT_AREA,
    INVALID_FPS_RANGE,
    INVALID_POINT,
    INVALID_SIZE,
    Area,
    FpsRange,
    Orientation,
    Size,
)

__all__ = [
    "Area",
    "CameraParametersError",
    "DRIVER_DEFAULT_AREA",
    "FeatureProfile",
    "FeatureProfileError",
    "FpsRange",
    "INVALID_FLOAT",
    "INVALID_FPS_RANGE",
    "INVALID_INT",
    "INVALID_POINT",
    "INVALID_SIZE",
    "InvalidValueError",
    "Orientation",
    "ParameterMap",
    "Size",
    "flatten",
    "unflatten",
]
