"""Derivative providers.

Provides the abstract :class:`Derivatives` capability together with the
finite-difference and (optional) JAX implementations.
"""

from .base import Derivatives
from .num_diff import NumDiffDerivatives

__all__ = ["Derivatives", "NumDiffDerivatives"]
