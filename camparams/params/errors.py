"""Exceptions raised by the parameter store."""

from __future__ import annotations


class CameraParametersError(Exception):
    """Base class for camparams errors."""


class InvalidValueError(CameraParametersError, ValueError):
    """A key or value cannot be stored because it would corrupt the wire format."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"cannot set {key!r} to {value!r}: {reason}")


class FeatureProfileError(CameraParametersError):
    """Raised for unknown feature group names."""
