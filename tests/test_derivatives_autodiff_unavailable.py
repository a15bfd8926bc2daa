"""Unit tests for the missing-JAX path of derivatives/autodiff.py."""

import pytest

import optconkit.derivatives.autodiff as ad


def test_require_jax_raises_without_jax(monkeypatch):
    """require_jax and JaxDerivatives fail with AutodiffUnavailable when JAX is absent."""
    monkeypatch.setattr(ad, "_HAS_JAX", False)
    with pytest.raises(ad.AutodiffUnavailable, match="optconkit\\[jax\\]"):
        ad.require_jax()
    with pytest.raises(RuntimeError):
        ad.JaxDerivatives(lambda x: x, 2, 2)
