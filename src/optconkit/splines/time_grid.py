"""Time grid shared by the shooting intervals of a DMS problem.

A :class:`TimeGrid` holds the ``N + 1`` boundary times
``t_0 < t_1 < ... < t_N`` of ``N`` shooting intervals. One grid instance is
owned by the optimizer and referenced (never copied) by every spliner, so
rescaling the horizon with :meth:`TimeGrid.update_time_horizon` is seen by
all of them.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from optconkit.utils.types import FloatArray
from optconkit.utils.validate import check_index

__all__ = ["TimeGrid"]


class TimeGrid:
    """Boundary times of the shooting intervals.

    Attributes:
        n_intervals: Number of shooting intervals ``N``.
    """

    def __init__(self, t_final: float, n_intervals: int) -> None:
        """Builds an equidistant grid on ``[0, t_final]``.

        Args:
            t_final: Time horizon, must be positive.
            n_intervals: Number of shooting intervals, at least one.

        Raises:
            ValueError: If ``t_final`` or ``n_intervals`` is not positive.
        """
        n_intervals = int(n_intervals)
        if n_intervals < 1:
            raise ValueError(f"n_intervals must be >= 1; got {n_intervals}.")
        t_final = float(t_final)
        if not np.isfinite(t_final) or t_final <= 0.0:
            raise ValueError(f"t_final must be positive and finite; got {t_final}.")
        self.n_intervals = n_intervals
        self._times = np.linspace(0.0, t_final, n_intervals + 1)

    @classmethod
    def from_times(cls, times: ArrayLike) -> TimeGrid:
        """Builds a grid from explicit boundary times.

        Args:
            times: Strictly increasing 1D array of at least two times.

        Raises:
            ValueError: If ``times`` is not a strictly increasing 1D array
                of length >= 2.
        """
        arr = np.asarray(times, dtype=np.float64)
        if arr.ndim != 1 or arr.size < 2:
            raise ValueError("times must be a 1D array with at least two entries.")
        if not np.all(np.isfinite(arr)):
            raise ValueError("times must be finite.")
        if not np.all(np.diff(arr) > 0):
            raise ValueError("times must be strictly increasing.")
        grid = cls.__new__(cls)
        grid.n_intervals = arr.size - 1
        grid._times = arr.copy()
        return grid

    @property
    def times(self) -> FloatArray:
        """Copy of the ``N + 1`` boundary times."""
        return self._times.copy()

    @property
    def t_final(self) -> float:
        """Final time of the horizon."""
        return float(self._times[-1])

    def shot_start_time(self, shot_idx: int) -> float:
        """Returns the start time of shooting interval ``shot_idx``."""
        i = check_index(shot_idx, self.n_intervals, name="shot_idx")
        return float(self._times[i])

    def shot_duration(self, shot_idx: int) -> float:
        """Returns the duration ``h_i`` of shooting interval ``shot_idx``."""
        i = check_index(shot_idx, self.n_intervals, name="shot_idx")
        return float(self._times[i + 1] - self._times[i])

    def shot_index(self, t: float) -> int:
        """Returns the index of the shooting interval containing ``t``.

        Intervals are half open, ``[t_i, t_{i+1})``, except the last one
        which also contains ``t_N``.

        Raises:
            ValueError: If ``t`` lies outside ``[t_0, t_N]``.
        """
        t = float(t)
        if t < self._times[0] or t > self._times[-1]:
            raise ValueError(
                f"t={t} outside the time horizon [{self._times[0]}, {self._times[-1]}]."
            )
        idx = int(np.searchsorted(self._times, t, side="right")) - 1
        return min(idx, self.n_intervals - 1)

    def update_time_horizon(self, t_final: float) -> None:
        """Rescales all boundary times so that the horizon ends at ``t_final``.

        The start time and the relative interval lengths are preserved.

        Raises:
            ValueError: If the new horizon does not end after the start time.
        """
        t_final = float(t_final)
        t0 = self._times[0]
        if not np.isfinite(t_final) or t_final <= t0:
            raise ValueError(f"t_final must be finite and greater than {t0}; got {t_final}.")
        scale = (t_final - t0) / (self._times[-1] - t0)
        self._times = t0 + (self._times - t0) * scale
        self._times[-1] = t_final

    def __repr__(self) -> str:
        return f"TimeGrid(n_intervals={self.n_intervals}, t_final={self.t_final})"
