"""Pytest configuration file with shared fixtures."""

import numpy as np
import pytest

from optconkit.splines import TimeGrid


@pytest.fixture
def rng():
    """Random number generator with fixed seed (42) for reproducibility."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def grid3():
    """Equidistant grid with three shooting intervals on [0, 3]."""
    return TimeGrid(t_final=3.0, n_intervals=3)
