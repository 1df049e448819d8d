from __future__ import annotations

import numpy as np
import pytest

from cubesum import InvalidArgumentError, ShapeMismatchError, round_product
from cubesum._arrays import as_cube, as_weights, check_slice_count
from cubesum.config import SliceSumOptions


def test_nested_lists_are_converted() -> None:
    cube = [[[1, 5], [2, 6]], [[3, 7], [4, 8]]]

    result = round_product(cube, [2, 0.5])

    assert result.dtype == np.float64
    np.testing.assert_allclose(result, [[4.5, 7.0], [9.5, 12.0]])


def test_float64_input_is_not_copied() -> None:
    cube = np.zeros((2, 2, 1))

    assert as_cube(cube) is cube


def test_integer_and_float32_inputs_are_promoted() -> None:
    assert as_cube(np.ones((2, 2, 1), dtype=np.int32)).dtype == np.float64
    assert as_weights(np.ones(3, dtype=np.float32)).dtype == np.float64


def test_scalar_weight_becomes_vector() -> None:
    weights = as_weights(3.0)

    assert weights.shape == (1,)
    np.testing.assert_array_equal(round_product(np.ones((2, 2, 1)), 3.0), np.full((2, 2), 3.0))


@pytest.mark.parametrize("cube", [np.ones((2, 2)), np.ones((2, 2, 2, 2)), 1.0])
def test_cube_must_be_three_dimensional(cube) -> None:
    with pytest.raises(InvalidArgumentError):
        as_cube(cube)


def test_weights_must_be_one_dimensional() -> None:
    with pytest.raises(InvalidArgumentError):
        as_weights(np.ones((2, 1)))


def test_ragged_input_is_invalid() -> None:
    with pytest.raises(InvalidArgumentError):
        as_cube([[[1.0], [2.0]], [[3.0]]])


def test_non_numeric_input_is_invalid() -> None:
    with pytest.raises(InvalidArgumentError):
        as_weights(["a", "b"])


def test_square_check_can_be_disabled() -> None:
    with pytest.raises(ShapeMismatchError):
        as_cube(np.ones((2, 3, 1)))

    assert as_cube(np.ones((2, 3, 1)), require_square=False).shape == (2, 3, 1)


def test_check_slice_count() -> None:
    cube = np.ones((2, 2, 4))

    assert check_slice_count(cube, np.ones(4)) == 4
    with pytest.raises(ShapeMismatchError, match="4 slice"):
        check_slice_count(cube, np.ones(5))


def test_options_describe() -> None:
    assert SliceSumOptions().describe() == "square slices required"
    assert SliceSumOptions(require_square=False).describe() == "rectangular slices allowed"
