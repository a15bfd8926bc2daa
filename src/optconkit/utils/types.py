"""Shared typing aliases for OptconKit."""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]

#: Marker for a dimension that is only known at runtime.
DYNAMIC: int = -1
