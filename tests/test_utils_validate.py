"""Unit tests for utils/validate.py."""

import numpy as np
import pytest

from optconkit.utils.types import DYNAMIC
from optconkit.utils.validate import (
    as_1d_float_array,
    check_dimension,
    check_index,
    check_vector_dim,
)


def test_as_1d_float_array_shapes():
    """Scalars, lists, row and column vectors become 1D float arrays."""
    assert as_1d_float_array(2).shape == (1,)
    assert as_1d_float_array([1, 2, 3]).dtype == np.float64
    assert as_1d_float_array(np.ones((1, 4))).shape == (4,)
    assert as_1d_float_array(np.ones((4, 1))).shape == (4,)


def test_as_1d_float_array_returns_copy():
    """The returned array never aliases the input."""
    x = np.array([1.0, 2.0])
    out = as_1d_float_array(x)
    out[0] = 5.0
    assert x[0] == 1.0


def test_as_1d_float_array_rejects_matrices_and_empty():
    """Matrices and empty inputs are rejected."""
    with pytest.raises(ValueError):
        as_1d_float_array(np.ones((2, 3)))
    with pytest.raises(ValueError):
        as_1d_float_array([])


def test_check_vector_dim():
    """Vector length is checked unless the dimension is DYNAMIC."""
    assert check_vector_dim([1.0, 2.0], 2).size == 2
    assert check_vector_dim([1.0, 2.0, 3.0], DYNAMIC).size == 3
    with pytest.raises(ValueError, match="length 2"):
        check_vector_dim([1.0], 2)


def test_check_dimension():
    """Dimensions must be positive integers or DYNAMIC."""
    assert check_dimension(3, name="in_dim") == 3
    assert check_dimension(DYNAMIC, name="in_dim") == DYNAMIC
    assert check_dimension(np.int64(2), name="in_dim") == 2
    with pytest.raises(ValueError):
        check_dimension(-2, name="in_dim")
    with pytest.raises(TypeError):
        check_dimension(True, name="in_dim")


def test_check_index():
    """Indices must lie in [0, size)."""
    assert check_index(0, 3) == 0
    assert check_index(np.int32(2), 3) == 2
    with pytest.raises(IndexError):
        check_index(3, 3)
    with pytest.raises(IndexError):
        check_index(-1, 3)
    with pytest.raises(TypeError):
        check_index("1", 3)
