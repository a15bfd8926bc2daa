"""Spliners for direct multiple shooting.

Provides the shared :class:`TimeGrid`, the abstract :class:`Spliner`
capability and the :class:`ZeroOrderHoldSpliner`.
"""

from .base import Spliner
from .time_grid import TimeGrid
from .zero_order_hold import ZeroOrderHoldSpliner

__all__ = ["Spliner", "TimeGrid", "ZeroOrderHoldSpliner"]
