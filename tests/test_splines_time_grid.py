"""Unit tests for splines/time_grid.py."""

import numpy as np
import pytest

from optconkit.splines.time_grid import TimeGrid


def test_equidistant_grid():
    """An equidistant grid has N+1 evenly spaced boundaries."""
    grid = TimeGrid(t_final=2.0, n_intervals=4)
    assert grid.n_intervals == 4
    assert np.allclose(grid.times, [0.0, 0.5, 1.0, 1.5, 2.0])
    assert grid.t_final == 2.0
    assert grid.shot_start_time(2) == pytest.approx(1.0)
    assert grid.shot_duration(3) == pytest.approx(0.5)


def test_from_times():
    """Explicit grids keep their boundaries."""
    grid = TimeGrid.from_times([0.0, 0.1, 0.5, 2.0])
    assert grid.n_intervals == 3
    assert grid.shot_duration(2) == pytest.approx(1.5)
    assert grid.t_final == 2.0


def test_times_is_a_copy():
    """Modifying the returned times does not modify the grid."""
    grid = TimeGrid(1.0, 2)
    times = grid.times
    times[:] = 0.0
    assert grid.t_final == 1.0


@pytest.mark.parametrize(
    "t, idx",
    [(0.0, 0), (0.49, 0), (0.5, 1), (1.2, 2), (1.5, 3), (2.0, 3)],
)
def test_shot_index(t, idx):
    """Intervals are half open except the last one."""
    grid = TimeGrid(t_final=2.0, n_intervals=4)
    assert grid.shot_index(t) == idx


def test_shot_index_outside_horizon_raises():
    """Times outside the horizon are rejected."""
    grid = TimeGrid(t_final=2.0, n_intervals=4)
    with pytest.raises(ValueError):
        grid.shot_index(-0.1)
    with pytest.raises(ValueError):
        grid.shot_index(2.1)


def test_update_time_horizon_preserves_ratios():
    """Rescaling keeps the start time and relative interval lengths."""
    grid = TimeGrid.from_times([1.0, 2.0, 4.0])
    grid.update_time_horizon(7.0)
    assert np.allclose(grid.times, [1.0, 3.0, 7.0])
    assert grid.t_final == 7.0


@pytest.mark.parametrize("idx", [-1, 4])
def test_interval_index_out_of_range_raises(idx):
    """Invalid interval indices raise IndexError."""
    grid = TimeGrid(t_final=2.0, n_intervals=4)
    with pytest.raises(IndexError):
        grid.shot_start_time(idx)
    with pytest.raises(IndexError):
        grid.shot_duration(idx)


def test_invalid_construction_raises():
    """Bad horizons, interval counts and boundary sequences are rejected."""
    with pytest.raises(ValueError):
        TimeGrid(0.0, 3)
    with pytest.raises(ValueError):
        TimeGrid(1.0, 0)
    with pytest.raises(ValueError):
        TimeGrid.from_times([0.0])
    with pytest.raises(ValueError):
        TimeGrid.from_times([0.0, 1.0, 1.0])
    with pytest.raises(ValueError):
        TimeGrid(1.0, 2).update_time_horizon(-1.0)
