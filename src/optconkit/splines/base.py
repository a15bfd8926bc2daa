"""Provides the Spliner base class.

A spliner turns one decision vector ``q_i`` per shooting interval into a
continuous-time trajectory ``u(t)``. Besides evaluation it exposes the
partial derivatives of ``u(t)`` inside interval ``i`` with respect to

* the time ``t`` (``spline_derivative_t``),
* the interval duration ``h_i`` (``spline_derivative_h_i``),
* the interval's own decision vector ``q_i`` (``spline_derivative_q_i``),
* the next interval's decision vector ``q_{i+1}``
  (``spline_derivative_q_iplus1``).

All spline kinds implement every method so that callers can use them
without knowing the concrete kind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from numpy.typing import ArrayLike

from optconkit.splines.time_grid import TimeGrid
from optconkit.utils.types import FloatArray

__all__ = ["Spliner"]


class Spliner(ABC):
    """Abstract spliner over a shared :class:`TimeGrid`.

    Attributes:
        grid: The time grid. It is referenced, not copied, and must outlive
            the spliner.
    """

    def __init__(self, grid: TimeGrid) -> None:
        """Initialises the spliner with the shared time grid."""
        if not isinstance(grid, TimeGrid):
            raise TypeError(f"grid must be a TimeGrid; got {type(grid).__name__}.")
        self.grid = grid

    @abstractmethod
    def compute_spline(self, points: Sequence[ArrayLike] | ArrayLike) -> None:
        """Ingests one vector per shooting interval."""

    @abstractmethod
    def eval_spline(self, time: float, shot_idx: int) -> FloatArray:
        """Evaluates the spline at ``time`` inside interval ``shot_idx``."""

    @abstractmethod
    def spline_derivative_t(self, time: float, shot_idx: int) -> FloatArray:
        """Derivative with respect to time."""

    @abstractmethod
    def spline_derivative_h_i(self, time: float, shot_idx: int) -> FloatArray:
        """Derivative with respect to the duration of interval ``shot_idx``."""

    @abstractmethod
    def spline_derivative_q_i(self, time: float, shot_idx: int) -> FloatArray:
        """Derivative with respect to the decision vector of interval ``shot_idx``."""

    @abstractmethod
    def spline_derivative_q_iplus1(self, time: float, shot_idx: int) -> FloatArray:
        """Derivative with respect to the decision vector of interval ``shot_idx + 1``."""

    def eval_at(self, time: float) -> FloatArray:
        """Evaluates the spline at an absolute time on the grid.

        Raises:
            ValueError: If ``time`` lies outside the grid's horizon.
        """
        return self.eval_spline(time, self.grid.shot_index(time))
