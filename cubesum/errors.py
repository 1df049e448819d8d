"""Exceptions raised by the weighted slice sum helpers."""

from __future__ import annotations


class CubeSumError(ValueError):
    """Base class for argument errors raised by :mod:`cubesum`."""


class ShapeMismatchError(CubeSumError):
    """Raised when two arguments that must share a dimension do not."""


class InvalidArgumentError(CubeSumError):
    """Raised when an argument cannot be interpreted as a dense real array."""
