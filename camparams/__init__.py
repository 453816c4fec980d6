"""Typed key/value parameter store for camera driver negotiation."""

from __future__ import annotations

from importlib import metadata

from .params import (
    Area,
    FeatureProfile,
    FpsRange,
    InvalidValueError,
    Orientation,
    ParameterMap,
    Size,
    flatten,
    unflatten,
)

try:
    __version__ = metadata.version("camparams")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"


__all__ = [
    "Area",
    "FeatureProfile",
    "FpsRange",
    "InvalidValueError",
    "Orientation",
    "ParameterMap",
    "Size",
    "__version__",
    "flatten",
    "unflatten",
]
