"""
Exception hierarchy for trendfit.

All exceptions inherit from TrendFitError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class TrendFitError(Exception):
    """Base exception for all trendfit errors."""
    pass


class ValidationError(TrendFitError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent lengths.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Too few observations for the requested computation.
    
    A regression line needs at least two points; metrics need at least one.
    
    Attributes:
        n_observations: Number of observations supplied
        required: Minimum number of observations the operation needs
    """
    
    def __init__(
        self,
        message: str,
        n_observations: int | None = None,
        required: int | None = None
    ):
        super().__init__(message)
        self.n_observations = n_observations
        self.required = required


class NumericalError(TrendFitError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation,
    including results that would otherwise come out as NaN or Inf.
    """
    pass


class InsufficientVarianceError(NumericalError):
    """
    The predictor has no spread.
    
    Raised by fit() when every x value is identical: the denominator
    Σ(x - mean_x)² is zero and the slope is undefined.
    
    Attributes:
        variable: Name of the constant variable ('x')
        value: The common value, if known
    """
    
    def __init__(
        self,
        message: str,
        variable: str | None = None,
        value: float | None = None
    ):
        super().__init__(message)
        self.variable = variable
        self.value = value


class ZeroVarianceError(NumericalError):
    """
    The response has no spread.
    
    Raised when every observed y is identical: SS_tot is zero and R² is
    undefined. MSE is still well defined and can be requested on its own.
    
    Attributes:
        variable: Name of the constant variable ('y')
        value: The common value, if known
    """
    
    def __init__(
        self,
        message: str,
        variable: str | None = None,
        value: float | None = None
    ):
        super().__init__(message)
        self.variable = variable
        self.value = value


class NumericalWarning(UserWarning):
    """Non-fatal numerical concern (e.g. nearly constant predictor)."""
    pass
