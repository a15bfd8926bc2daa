r"""JAX-based derivative provider.

Exact (to machine precision) counterpart of
:class:`optconkit.derivatives.num_diff.NumDiffDerivatives` for functions
written with ``jax.numpy``. The wrapped function must be JAX-traceable;
for arbitrary Python/numpy models use the numerical provider instead.

Example:
--------

    >>> import jax.numpy as jnp
    >>> from optconkit.derivatives.autodiff import JaxDerivatives
    >>> d = JaxDerivatives(lambda x: jnp.array([x[0] * x[1]]), in_dim=2, out_dim=1)
    >>> d.jacobian([2.0, 3.0])
    array([[3., 2.]])

Notes:
------

- To enable this provider, install the JAX extra: ``pip install "optconkit[jax]"``.
- JAX defaults to single precision; enable ``jax_enable_x64`` for float64
  accuracy comparable to the numerical provider.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from optconkit.derivatives.base import Derivatives, VectorFunction
from optconkit.utils.types import DYNAMIC, FloatArray

try:
    import jax
    import jax.numpy as jnp
except ImportError:
    jax = None
    jnp = None
    _HAS_JAX = False
else:
    _HAS_JAX = True

has_jax: bool = _HAS_JAX

__all__ = [
    "AutodiffUnavailable",
    "JaxDerivatives",
    "require_jax",
]


class AutodiffUnavailable(RuntimeError):
    """Raises when JAX-based autodiff is unavailable."""


def require_jax() -> None:
    """Raises if JAX is not available.

    Raises:
        AutodiffUnavailable: If JAX is not installed.
    """
    if not _HAS_JAX:
        raise AutodiffUnavailable(
            "JAX autodiff requires `jax` + `jaxlib`.\n"
            'Install with `pip install "optconkit[jax]"` '
            "(or follow JAX's official install instructions for GPU)."
        )


class JaxDerivatives(Derivatives):
    """Derivative provider using JAX forward-mode autodiff."""

    def __init__(
        self,
        function: VectorFunction,
        in_dim: int = DYNAMIC,
        out_dim: int = DYNAMIC,
    ) -> None:
        """Initialises the provider.

        Raises:
            AutodiffUnavailable: If JAX is not installed.
        """
        require_jax()
        super().__init__(function, in_dim, out_dim)

    def _vector_function(self, x):
        return jnp.ravel(jnp.asarray(self.function(x)))

    def _weighted(self, x, w):
        return jnp.dot(w, self._vector_function(x))

    def forward_zero(self, x: ArrayLike) -> FloatArray:
        """Returns ``f(x)`` as a float64 numpy array."""
        x = self.check_input(x)
        return np.asarray(self._vector_function(jnp.asarray(x)), dtype=np.float64)

    def jacobian(self, x: ArrayLike) -> FloatArray:
        """Returns the ``(m, n)`` Jacobian at ``x`` via ``jax.jacfwd``."""
        x = self.check_input(x)
        jac = jax.jacfwd(self._vector_function)(jnp.asarray(x))
        jac = np.asarray(jac, dtype=np.float64)
        return jac.reshape(-1, x.size)

    def hessian(self, x: ArrayLike, w: ArrayLike) -> FloatArray:
        """Returns the weighted Hessian of ``w . f`` via ``jax.hessian``."""
        x = self.check_input(x)
        w = self.check_weights(w)
        hess = jax.hessian(self._weighted)(jnp.asarray(x), jnp.asarray(w))
        return np.asarray(hess, dtype=np.float64)
