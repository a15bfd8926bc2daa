"""Provides the OptconKit derivative providers and spliners."""

from importlib.metadata import PackageNotFoundError, version

from optconkit.derivatives.base import Derivatives
from optconkit.derivatives.num_diff import NumDiffDerivatives
from optconkit.splines.base import Spliner
from optconkit.splines.time_grid import TimeGrid
from optconkit.splines.zero_order_hold import ZeroOrderHoldSpliner
from optconkit.utils.types import DYNAMIC

try:
    __version__ = version("optconkit")
except PackageNotFoundError:
    pass

__all__ = [
    "DYNAMIC",
    "Derivatives",
    "NumDiffDerivatives",
    "Spliner",
    "TimeGrid",
    "ZeroOrderHoldSpliner",
]
