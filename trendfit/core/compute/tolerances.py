"""
Tolerance tiers for numerical validation.

Defines precision expectations for float64 computation, plus the
threshold below which a predictor's spread is treated as suspicious.

Used by the test suite and the fit backend's degeneracy check.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Reference path: closed-form OLS in double precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned data',
)

# Relative spread of x below which fit() warns: Σ(x - mean_x)² compared
# against n * mean_x². At 1e-20 the centred values keep fewer than ~6
# significant digits.
DEGENERACY_THRESHOLD = 1e-20
