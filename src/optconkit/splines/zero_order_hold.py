"""Provides the ZeroOrderHoldSpliner class.

Piecewise-constant interpolation: the trajectory equals ``q_i`` on the whole
of shooting interval ``i``. The derivatives are therefore trivial, zero with
respect to time, duration and ``q_{i+1}``, identity with respect to ``q_i``.

Example:
--------
>>> from optconkit.splines import TimeGrid, ZeroOrderHoldSpliner
>>> spliner = ZeroOrderHoldSpliner(TimeGrid(t_final=3.0, n_intervals=3))
>>> spliner.compute_spline([[0.0], [1.0], [2.0]])
>>> spliner.eval_spline(1.7, 1)
array([1.])
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

from optconkit.logger import optconkit_logger
from optconkit.splines.base import Spliner
from optconkit.splines.time_grid import TimeGrid
from optconkit.utils.types import FloatArray
from optconkit.utils.validate import check_index

__all__ = ["ZeroOrderHoldSpliner"]


class ZeroOrderHoldSpliner(Spliner):
    """Zero-order-hold spliner.

    Out-of-range interval indices raise ``IndexError`` in every build; they
    are treated as input errors, not as unchecked preconditions.
    """

    def __init__(self, grid: TimeGrid) -> None:
        super().__init__(grid)
        self._holds: FloatArray | None = None

    @property
    def dim(self) -> int:
        """Dimension of the stored vectors.

        Raises:
            RuntimeError: If no points have been stored yet.
        """
        return self._require_holds().shape[1]

    def compute_spline(self, points: Sequence[ArrayLike] | ArrayLike) -> None:
        """Stores one constant vector per shooting interval.

        Args:
            points: Sequence of ``grid.n_intervals`` vectors of equal length,
                or an array of shape ``(n_intervals, dim)``. Scalars per
                interval are treated as length-1 vectors.

        Raises:
            ValueError: If the number of points does not match the number of
                shooting intervals, the vectors have unequal or zero length,
                or any entry is NaN or infinite.
        """
        try:
            holds = np.array(points, dtype=np.float64)
        except ValueError as exc:
            raise ValueError("all spline points must have the same length.") from exc
        if holds.ndim == 1:
            holds = holds[:, np.newaxis]
        if holds.ndim != 2:
            raise ValueError(
                f"points must be a sequence of 1D vectors; got shape {holds.shape}."
            )
        if holds.shape[0] != self.grid.n_intervals:
            raise ValueError(
                f"expected {self.grid.n_intervals} points (one per shooting interval); "
                f"got {holds.shape[0]}."
            )
        if holds.shape[1] == 0:
            raise ValueError("spline points must be non-empty vectors.")
        if not np.isfinite(holds).all():
            raise ValueError("spline points must be finite.")
        self._holds = holds
        optconkit_logger.debug(
            "Stored %d zero-order-hold values of dimension %d.", *holds.shape
        )

    def eval_spline(self, time: float, shot_idx: int) -> FloatArray:
        """Returns the value held on interval ``shot_idx``; ``time`` is ignored.

        Raises:
            RuntimeError: If :meth:`compute_spline` has not been called.
            IndexError: If ``shot_idx`` is not a valid interval index.
        """
        holds = self._require_holds()
        i = check_index(shot_idx, holds.shape[0], name="shot_idx")
        return holds[i].copy()

    def spline_derivative_t(self, time: float, shot_idx: int) -> FloatArray:
        """Returns the zero vector."""
        return np.zeros(self._checked_dim(shot_idx))

    def spline_derivative_h_i(self, time: float, shot_idx: int) -> FloatArray:
        """Returns the zero vector."""
        return np.zeros(self._checked_dim(shot_idx))

    def spline_derivative_q_i(self, time: float, shot_idx: int) -> FloatArray:
        """Returns the identity matrix."""
        return np.eye(self._checked_dim(shot_idx))

    def spline_derivative_q_iplus1(self, time: float, shot_idx: int) -> FloatArray:
        """Returns the zero matrix."""
        dim = self._checked_dim(shot_idx)
        return np.zeros((dim, dim))

    def _require_holds(self) -> FloatArray:
        if self._holds is None:
            raise RuntimeError("compute_spline must be called before evaluating the spline.")
        return self._holds

    def _checked_dim(self, shot_idx: int) -> int:
        holds = self._require_holds()
        check_index(shot_idx, holds.shape[0], name="shot_idx")
        return holds.shape[1]
