"""Conversion of caller supplied numbers into validated float64 arrays."""

from __future__ import annotations

from typing import Any

import numpy as np

from .config import DEFAULT_DTYPE, DEFAULT_REQUIRE_SQUARE, SLICE_AXIS
from .errors import InvalidArgumentError, ShapeMismatchError


def _as_float_array(value: Any, name: str) -> np.ndarray:
    try:
        return np.asarray(value, dtype=DEFAULT_DTYPE)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be convertible to a dense float array") from exc


def as_cube(value: Any, *, require_square: bool = DEFAULT_REQUIRE_SQUARE) -> np.ndarray:
    """Return ``value`` as a float64 array of shape ``(N, N, K)``.

    Arrays that already have the right dtype are returned without copying, in
    whatever memory order the caller used.
    """

    cube = _as_float_array(value, "cube")
    if cube.ndim != 3:
        raise InvalidArgumentError(f"cube must be three-dimensional, got {cube.ndim} dimension(s)")
    rows, cols = cube.shape[0], cube.shape[1]
    if require_square and rows != cols:
        raise ShapeMismatchError(f"cube slices must be square, got {rows}x{cols}")
    return cube


def as_weights(value: Any) -> np.ndarray:
    """Return ``value`` as a float64 vector; scalars become length-one vectors."""

    weights = _as_float_array(value, "weights")
    if weights.ndim == 0:
        weights = weights.reshape(1)
    if weights.ndim != 1:
        raise InvalidArgumentError(f"weights must be one-dimensional, got {weights.ndim} dimensions")
    return weights


def check_slice_count(cube: np.ndarray, weights: np.ndarray) -> int:
    slices = cube.shape[SLICE_AXIS]
    if weights.shape[0] != slices:
        raise ShapeMismatchError(
            f"weights has length {weights.shape[0]} but cube has {slices} slice(s)"
        )
    return slices
