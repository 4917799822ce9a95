"""
Core infrastructure for trendfit.

This module provides shared abstractions and utilities used by the
regression package.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from trendfit.core.protocols import Backend
from trendfit.core.result import Result
from trendfit.core.exceptions import (
    TrendFitError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    NumericalError,
    InsufficientVarianceError,
    ZeroVarianceError,
    NumericalWarning,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "TrendFitError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "NumericalError",
    "InsufficientVarianceError",
    "ZeroVarianceError",
    "NumericalWarning",
]
