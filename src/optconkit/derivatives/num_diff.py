"""Provides the NumDiffDerivatives class.

Approximates the Jacobian of a vector-valued function
:math:`y = f(x)` by finite differences, using either single-sided (forward)
or double-sided (central) differences.

For every coordinate the perturbation is scaled with the magnitude of the
evaluation point, ``h = eps * max(|x_i|, 1)`` with
``eps = sqrt(machine_epsilon)``. The step actually realized in floating
point, ``(x_i + h) - x_i``, is used as the denominator instead of the
nominal ``h``; see
https://en.wikipedia.org/wiki/Numerical_differentiation#Practical_considerations_using_floating-point_arithmetic

Examples:
--------
>>> import numpy as np
>>> from optconkit.derivatives.num_diff import NumDiffDerivatives
>>> def f(x):
...     return np.array([x[0] ** 2, x[0] * x[1]])
>>> d = NumDiffDerivatives(f, in_dim=2, out_dim=2, double_sided=True)
>>> np.allclose(d.jacobian([1.0, 2.0]), [[2.0, 0.0], [2.0, 1.0]])
True
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from optconkit.derivatives.base import Derivatives, VectorFunction
from optconkit.logger import optconkit_logger
from optconkit.utils.types import DYNAMIC, FloatArray

__all__ = ["NumDiffDerivatives"]


class NumDiffDerivatives(Derivatives):
    """Derivative provider based on finite differences.

    Single-sided differences need ``n + 1`` function evaluations per
    Jacobian and are accurate to :math:`O(h)`. Double-sided differences
    need ``2n`` evaluations and are accurate to :math:`O(h^2)`.

    The only state besides the function reference is the ``double_sided``
    flag and the perturbation ``eps``, both fixed at construction, so
    instances are safe to share for read-only use as long as the wrapped
    function is reentrant. Use :meth:`clone` to hand each worker its own copy.
    """

    def __init__(
        self,
        function: VectorFunction,
        in_dim: int = DYNAMIC,
        out_dim: int = DYNAMIC,
        *,
        double_sided: bool = False,
    ) -> None:
        """Initialises the provider.

        Args:
            function: Function to differentiate. Must accept a 1D float
                array and return a 1D array-like.
            in_dim: Input dimension, or ``DYNAMIC``.
            out_dim: Output dimension, or ``DYNAMIC``.
            double_sided: Use central instead of forward differences.
        """
        super().__init__(function, in_dim, out_dim)
        self._double_sided = bool(double_sided)
        self._eps = float(np.sqrt(np.finfo(np.float64).eps))

    @property
    def double_sided(self) -> bool:
        """Whether central differences are used."""
        return self._double_sided

    @property
    def eps(self) -> float:
        """Relative perturbation applied to each coordinate."""
        return self._eps

    def _evaluate(self, x: FloatArray) -> FloatArray:
        return np.asarray(self.function(x), dtype=np.float64).reshape(-1)

    def forward_zero(self, x: ArrayLike) -> FloatArray:
        """Returns ``f(x)`` without any perturbation."""
        return self._evaluate(self.check_input(x))

    def jacobian(self, x: ArrayLike) -> FloatArray:
        """Returns the finite-difference Jacobian at ``x``.

        Args:
            x: Evaluation point of length ``in_dim``.

        Returns:
            Array of shape ``(m, n)`` whose column ``i`` approximates
            :math:`\\partial f / \\partial x_i`.

        Raises:
            ValueError: If ``x`` does not match ``in_dim``, or if the wrapped
                function returns outputs of inconsistent length.
        """
        x = self.check_input(x)
        y_ref = None if self._double_sided else self._evaluate(x)

        columns = []
        for i in range(x.size):
            xi = x[i]
            h = self._eps * max(abs(xi), 1.0)
            x_ph = xi + h
            dxp = x_ph - xi

            x_perturbed = x.copy()
            x_perturbed[i] = x_ph
            y_perturbed = self._evaluate(x_perturbed)

            if self._double_sided:
                x_mh = xi - h
                dxm = xi - x_mh

                x_perturbed = x.copy()
                x_perturbed[i] = x_mh
                y_perturbed_low = self._evaluate(x_perturbed)

                columns.append((y_perturbed - y_perturbed_low) / (dxp + dxm))
            else:
                columns.append((y_perturbed - y_ref) / dxp)

        jac = np.column_stack(columns)
        if not np.isfinite(jac).all():
            optconkit_logger.warning(
                "Non-finite entries in finite-difference Jacobian at x=%s.", x
            )
        return jac

    def hessian(self, x: ArrayLike, w: ArrayLike) -> FloatArray:
        """Returns the weighted Hessian of ``f`` by central second differences.

        Each output component is differenced on its own and the weights are
        applied afterwards, ``H = sum_k w_k d^2 f_k / dx^2``.

        Uses the step ``machine_eps ** 0.25 * max(|x_i|, 1)`` per coordinate,
        again dividing by the realized steps. This is the numerical fallback
        for providers without generated second-order code; it needs
        ``2n^2 + 1`` function evaluations.

        Args:
            x: Evaluation point of length ``in_dim``.
            w: Output weights of length ``out_dim`` (or of the function's
                output length when ``out_dim`` is ``DYNAMIC``).

        Returns:
            Symmetric array of shape ``(n, n)``.

        Raises:
            ValueError: If ``x`` or ``w`` has the wrong length.
        """
        x = self.check_input(x)
        w = self.check_weights(w)
        n = x.size

        step = np.finfo(np.float64).eps ** 0.25 * np.maximum(np.abs(x), 1.0)
        up = x + step
        low = x - step
        dxp = up - x
        dxm = x - low

        # Output vectors are differenced before weighting so that components
        # independent of the perturbed coordinates cancel exactly.
        y0 = self._evaluate(x)
        hess = np.empty((n, n), dtype=np.float64)
        for i in range(n):
            xp = x.copy()
            xp[i] = up[i]
            xm = x.copy()
            xm[i] = low[i]
            a, b = dxp[i], dxm[i]
            slope_up = (self._evaluate(xp) - y0) / a
            slope_low = (y0 - self._evaluate(xm)) / b
            d2y = (slope_up - slope_low) * (2.0 / (a + b))
            hess[i, i] = w @ d2y

            for j in range(i + 1, n):
                corners = []
                for vi in (up[i], low[i]):
                    for vj in (up[j], low[j]):
                        z = x.copy()
                        z[i] = vi
                        z[j] = vj
                        corners.append(self._evaluate(z))
                y_pp, y_pm, y_mp, y_mm = corners
                dyij = ((y_pp - y_pm) - (y_mp - y_mm)) / ((dxp[i] + dxm[i]) * (dxp[j] + dxm[j]))
                hij = w @ dyij
                hess[i, j] = hij
                hess[j, i] = hij

        return hess
