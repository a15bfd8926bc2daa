"""Provides the Derivatives base class.

Every derivative provider wraps a vector-valued function
:math:`y = f(x)` with :math:`x \\in \\mathbb{R}^n`, :math:`y \\in \\mathbb{R}^m`
and exposes the same capability set, so that an optimizer can swap a
numerical provider for an analytic one without changing the caller:

* ``forward_zero(x)``: the zero-order "derivative", i.e. ``f(x)`` itself.
* ``jacobian(x)``: the ``(m, n)`` matrix of first derivatives.
* ``hessian(x, w)``: the ``(n, n)`` weighted Hessian
  :math:`\\sum_k w_k \\nabla^2 f_k(x)` (optional).
* ``clone()``: an independent copy for use by another worker.

Dimensions are either fixed at construction or ``DYNAMIC`` (-1), in which
case any non-empty vector is accepted and consistency is left to the
wrapped function.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable

from numpy.typing import ArrayLike

from optconkit.utils.types import DYNAMIC, FloatArray
from optconkit.utils.validate import check_dimension, check_vector_dim

__all__ = [
    "Derivatives",
    "VectorFunction",
]

VectorFunction = Callable[[FloatArray], ArrayLike]


class Derivatives(ABC):
    """Abstract derivative provider for ``f: R^in_dim -> R^out_dim``.

    The wrapped function is shared, not owned: the provider keeps a
    reference to the caller's callable and never copies it.

    Attributes:
        function: The wrapped function.
        in_dim: Input dimension, or ``DYNAMIC``.
        out_dim: Output dimension, or ``DYNAMIC``.
    """

    def __init__(
        self,
        function: VectorFunction,
        in_dim: int = DYNAMIC,
        out_dim: int = DYNAMIC,
    ) -> None:
        """Initialises the provider with the function and its dimensions.

        Args:
            function: Callable mapping a 1D float array of length ``in_dim``
                to an array-like of length ``out_dim``.
            in_dim: Input dimension, or ``DYNAMIC`` (-1).
            out_dim: Output dimension, or ``DYNAMIC`` (-1).

        Raises:
            TypeError: If ``function`` is not callable.
            ValueError: If a dimension is neither positive nor ``DYNAMIC``.
        """
        if not callable(function):
            raise TypeError("function must be callable.")
        self.function = function
        self.in_dim = check_dimension(in_dim, name="in_dim")
        self.out_dim = check_dimension(out_dim, name="out_dim")

    def check_input(self, x: ArrayLike) -> FloatArray:
        """Returns ``x`` as a fresh 1D float array of the declared input dimension."""
        return check_vector_dim(x, self.in_dim, name="x")

    def check_weights(self, w: ArrayLike) -> FloatArray:
        """Returns ``w`` as a fresh 1D float array of the declared output dimension."""
        return check_vector_dim(w, self.out_dim, name="w")

    @abstractmethod
    def forward_zero(self, x: ArrayLike) -> FloatArray:
        """Evaluates the wrapped function at ``x``."""

    @abstractmethod
    def jacobian(self, x: ArrayLike) -> FloatArray:
        """Returns the ``(out_dim, in_dim)`` Jacobian at ``x``."""

    def hessian(self, x: ArrayLike, w: ArrayLike) -> FloatArray:
        """Returns the weighted Hessian ``sum_k w_k d^2 f_k / dx^2`` at ``x``.

        Raises:
            NotImplementedError: If the provider has no Hessian support.
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not provide a Hessian."
        )

    def clone(self) -> Derivatives:
        """Returns an independent copy sharing the same wrapped function."""
        return copy.copy(self)
