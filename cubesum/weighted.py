"""Weighted sums of matrix slices.

A *cube* is a stack of ``K`` equally shaped matrices laid out along its last
axis, so ``cube[:, :, k]`` is the ``k``-th slice.  Given a weight for every
slice, :func:`round_product` returns the linear combination

    M = sum_k weights[k] * cube[:, :, k]

Two formulations are provided:

``round_product``
    Accumulates whole slices into a zero matrix, one scaled slice at a time in
    ascending ``k``.  This is the formulation callers should use; its rounding
    is reproducible because the accumulation order is fixed.

``round_product_elementwise``
    Computes the dot product of every tube ``cube[i, j, :]`` with the weights.
    It is kept as a reference for cross-checking and agrees with
    ``round_product`` up to floating point rounding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Protocol

import numpy as np

from . import _arrays
from .config import DEFAULT_DTYPE, SliceSumOptions

__all__ = [
    "SliceSumSolver",
    "WeightedSliceSum",
    "round_product",
    "round_product_elementwise",
]

LOGGER = logging.getLogger(__name__)


class SliceSumSolver(Protocol):
    """Simple protocol describing a weighted slice sum solver."""

    def compute(self, cube: Any, weights: Any) -> np.ndarray:  # pragma: no cover - protocol behaviour exercised via WeightedSliceSum
        """Return the weighted sum of the slices of ``cube``."""
        ...


def _prepare(cube: Any, weights: Any, options: SliceSumOptions | None) -> tuple[np.ndarray, np.ndarray, int]:
    opts = options or SliceSumOptions()
    cube_array = _arrays.as_cube(cube, require_square=opts.require_square)
    weight_array = _arrays.as_weights(weights)
    slices = _arrays.check_slice_count(cube_array, weight_array)
    return cube_array, weight_array, slices


def round_product(cube: Any, weights: Any, *, options: SliceSumOptions | None = None) -> np.ndarray:
    """Return the weighted sum of the slices of ``cube``.

    Parameters
    ----------
    cube:
        Array of shape ``(N, N, K)``.  Anything :func:`numpy.asarray` can turn
        into a float64 array is accepted; C and Fortran order both work.
    weights:
        Vector of length ``K``.
    options:
        Optional :class:`~cubesum.config.SliceSumOptions`.

    Returns
    -------
    numpy.ndarray
        A newly allocated ``(N, N)`` float64 matrix.  With ``K == 0`` it is all
        zeros.  NaN and infinite inputs propagate through the arithmetic.

    Raises
    ------
    ShapeMismatchError
        If ``len(weights)`` differs from ``cube.shape[2]`` or the slices are
        not square.
    InvalidArgumentError
        If either argument has the wrong number of dimensions or is not
        numeric.
    """

    cube_array, weight_array, slices = _prepare(cube, weights, options)
    rows, cols = cube_array.shape[0], cube_array.shape[1]
    LOGGER.debug("Summing %d slice(s) of shape %dx%d", slices, rows, cols)

    result = np.zeros((rows, cols), dtype=DEFAULT_DTYPE)
    for k in range(slices):
        result += cube_array[:, :, k] * weight_array[k]
    return result


def round_product_elementwise(
    cube: Any, weights: Any, *, options: SliceSumOptions | None = None
) -> np.ndarray:
    """Reference implementation using one dot product per output cell.

    Validation matches :func:`round_product`.  The result agrees with it up to
    rounding, since the per-cell summation order differs.
    """

    cube_array, weight_array, _ = _prepare(cube, weights, options)
    rows, cols = cube_array.shape[0], cube_array.shape[1]
    result = np.empty((rows, cols), dtype=DEFAULT_DTYPE)
    for i in range(rows):
        for j in range(cols):
            result[i, j] = np.dot(cube_array[i, j, :], weight_array)
    return result


@dataclass(frozen=True)
class WeightedSliceSum:
    """Solver object bundling :class:`SliceSumOptions` with :func:`round_product`."""

    options: SliceSumOptions = field(default_factory=SliceSumOptions)

    def compute(self, cube: Any, weights: Any) -> np.ndarray:
        return round_product(cube, weights, options=self.options)
