"""Utility functions for OptconKit package."""

from .types import DYNAMIC
from .validate import as_1d_float_array, check_index, check_vector_dim

__all__ = [
    "DYNAMIC",
    "as_1d_float_array",
    "check_index",
    "check_vector_dim",
]
