"""
Shared compute utilities: timing and numerical tolerances.
"""

from trendfit.core.compute.timing import Timer
from trendfit.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    DEGENERACY_THRESHOLD,
)

__all__ = [
    "Timer",
    "ToleranceTier",
    "CPU_FP64",
    "DEGENERACY_THRESHOLD",
]
