"""Validation utilities for OptconKit."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from optconkit.utils.types import DYNAMIC, FloatArray

__all__ = [
    "as_1d_float_array",
    "check_vector_dim",
    "check_index",
    "check_dimension",
]


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> FloatArray:
    """Converts input to a 1D float64 array.

    Scalars are promoted to length-1 vectors and row/column vectors such as
    ``(1, n)`` or ``(n, 1)`` are flattened. Anything with more than one
    non-singleton axis is rejected.

    Args:
        x: Array-like input.
        name: Name used in error messages.

    Returns:
        A new 1D ``float64`` array.

    Raises:
        ValueError: If ``x`` is empty or not vector-shaped.
    """
    arr = np.array(x, dtype=np.float64)
    if arr.ndim > 1 and sum(s != 1 for s in arr.shape) > 1:
        raise ValueError(f"{name} must be a 1D vector; got shape {arr.shape}.")
    arr = np.atleast_1d(arr).reshape(-1)
    if arr.size == 0:
        raise ValueError(f"{name} must be a non-empty 1D vector.")
    return arr


def check_dimension(dim: int, *, name: str) -> int:
    """Validates a declared dimension (positive int or ``DYNAMIC``)."""
    if not isinstance(dim, (int, np.integer)) or isinstance(dim, bool):
        raise TypeError(f"{name} must be an integer; got {type(dim).__name__}.")
    dim = int(dim)
    if dim != DYNAMIC and dim < 1:
        raise ValueError(f"{name} must be positive or DYNAMIC ({DYNAMIC}); got {dim}.")
    return dim


def check_vector_dim(x: ArrayLike, dim: int, *, name: str = "x") -> FloatArray:
    """Converts ``x`` to a 1D float array and checks its length.

    Args:
        x: Array-like vector.
        dim: Expected length, or ``DYNAMIC`` to accept any non-empty vector.
        name: Name used in error messages.

    Returns:
        The validated 1D ``float64`` array (a copy).

    Raises:
        ValueError: If ``x`` is not a non-empty vector of length ``dim``.
    """
    arr = as_1d_float_array(x, name=name)
    if dim != DYNAMIC and arr.size != dim:
        raise ValueError(f"{name} must have length {dim}; got {arr.size}.")
    return arr


def check_index(idx: int, size: int, *, name: str = "index") -> int:
    """Checks that ``idx`` addresses one of ``size`` elements.

    Negative indices are rejected rather than wrapped around.

    Raises:
        TypeError: If ``idx`` is not an integer.
        IndexError: If ``idx`` is outside ``[0, size)``.
    """
    if not isinstance(idx, (int, np.integer)) or isinstance(idx, bool):
        raise TypeError(f"{name} must be an integer; got {type(idx).__name__}.")
    i = int(idx)
    if i < 0 or i >= size:
        raise IndexError(f"{name} {i} out of bounds for size {size}.")
    return i
