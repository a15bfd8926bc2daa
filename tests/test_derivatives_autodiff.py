"""Unit tests for derivatives/autodiff.py."""

from __future__ import annotations

import numpy as np
import pytest

from optconkit.derivatives.autodiff import has_jax

if not has_jax:
    pytest.skip(
        'JAX not installed; install with `pip install "optconkit[jax]"`.',
        allow_module_level=True,
    )

import jax
import jax.numpy as jnp

from optconkit.derivatives.autodiff import JaxDerivatives
from optconkit.derivatives.num_diff import NumDiffDerivatives

jax.config.update("jax_enable_x64", True)


def f_jax(x):
    """Nonlinear R^2 -> R^3 map written with jax.numpy."""
    return jnp.array([x[0] ** 2, jnp.sin(x[1]), x[0] * x[1]])


def f_mixed(x):
    """Non-separable R^2 -> R^2 map with known Hessians."""
    return jnp.array([x[0] * x[1], jnp.sin(x[0])])


def test_forward_zero():
    """forward_zero returns f(x) as a float64 numpy array."""
    d = JaxDerivatives(f_jax, 2, 3)
    y = d.forward_zero([0.4, -0.2])
    assert isinstance(y, np.ndarray)
    assert np.allclose(y, [0.16, np.sin(-0.2), -0.08])


def test_jacobian_matches_analytic_and_numeric():
    """The autodiff Jacobian matches the analytic and finite-difference ones."""
    a, b = 0.4, -0.2
    jac_true = np.array([[2 * a, 0.0], [0.0, np.cos(b)], [b, a]])
    jac = JaxDerivatives(f_jax, 2, 3).jacobian([a, b])
    assert jac.shape == (3, 2)
    assert np.allclose(jac, jac_true, atol=1e-12)
    jac_fd = NumDiffDerivatives(f_jax, 2, 3, double_sided=True).jacobian([a, b])
    assert np.allclose(jac, jac_fd, atol=1e-6)


def test_hessian():
    """The weighted Hessian matches the analytic result."""
    a, b = 0.7, -0.3
    w = np.array([2.0, 0.5])
    expected = w[0] * np.array([[0.0, 1.0], [1.0, 0.0]])
    expected += w[1] * np.array([[-np.sin(a), 0.0], [0.0, 0.0]])
    hess = JaxDerivatives(f_mixed, 2, 2).hessian([a, b], w)
    assert np.allclose(hess, expected, atol=1e-12)


def test_clone():
    """Clones give identical Jacobians."""
    d = JaxDerivatives(f_jax, 2, 3)
    c = d.clone()
    assert c is not d and c.function is d.function
    assert np.array_equal(c.jacobian([0.1, 0.2]), d.jacobian([0.1, 0.2]))


def test_dimension_mismatch_raises():
    """Inputs of the wrong length are rejected before tracing."""
    with pytest.raises(ValueError):
        JaxDerivatives(f_jax, 2, 3).jacobian([1.0, 2.0, 3.0])
