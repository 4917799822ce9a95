"""
Regression solution types.

Contains the value types produced by fitting and evaluation (Model,
Metrics), the parameter payload of a full trend analysis, and the
user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from trendfit.core.result import Result


@dataclass(frozen=True)
class Model:
    """
    Fitted regression line y = intercept + slope * x.
    
    A plain value: no reference to the data it was fitted on.
    """
    intercept: float
    slope: float
    
    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Predicted y at x.
        
        A scalar gives a float; an array-like gives a float64 array of
        the same shape, each element predicted independently.
        """
        arr = np.asarray(x, dtype=np.float64)
        if arr.ndim == 0:
            return self.intercept + self.slope * float(arr)
        return self.intercept + self.slope * arr


@dataclass(frozen=True)
class Metrics:
    """Fit quality of a Model on a Dataset."""
    r_squared: float
    mse: float


@dataclass(frozen=True)
class TrendParams:
    """
    Parameter payload for a trend analysis.
    
    This is the immutable data assembled by analyze().
    """
    model: Model
    metrics: Metrics
    forecast_x: NDArray[np.floating[Any]]
    forecasts: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    n: int
    mean_x: float
    sxx: float
    df_residual: int


@dataclass
class TrendSolution:
    """
    User-facing trend analysis results.
    
    Wraps the Result and provides convenient accessors for the fitted
    line, its fit quality, the forecasts, and coefficient inference
    (standard errors, t statistics, two-sided p-values).
    """
    _result: Result[TrendParams]
    
    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None
    _t_statistics: NDArray[np.floating[Any]] | None = None
    _p_values: NDArray[np.floating[Any]] | None = None
    
    @property
    def model(self) -> Model:
        return self._result.params.model
    
    @property
    def intercept(self) -> float:
        return self.model.intercept
    
    @property
    def slope(self) -> float:
        return self.model.slope
    
    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """(intercept, slope) as an array."""
        return np.array([self.intercept, self.slope], dtype=np.float64)
    
    @property
    def metrics(self) -> Metrics:
        return self._result.params.metrics
    
    @property
    def r_squared(self) -> float:
        return self.metrics.r_squared
    
    @property
    def mse(self) -> float:
        return self.metrics.mse
    
    @property
    def forecast_x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.forecast_x
    
    @property
    def forecasts(self) -> NDArray[np.floating[Any]]:
        return self._result.params.forecasts
    
    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals
    
    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values
    
    @property
    def rss(self) -> float:
        return self._result.params.rss
    
    @property
    def tss(self) -> float:
        return self._result.params.tss
    
    @property
    def n(self) -> int:
        return self._result.params.n
    
    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual
    
    @property
    def residual_std_error(self) -> float:
        df = self.df_residual
        if df <= 0:
            return float('nan')
        return float(np.sqrt(self.rss / df))
    
    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of (intercept, slope).
        
        SE(slope) = sqrt(σ² / Sxx)
        SE(intercept) = sqrt(σ² (1/n + mean_x² / Sxx))
        
        NaN when there are no residual degrees of freedom (n == 2).
        """
        if self._standard_errors is not None:
            return self._standard_errors
        
        params = self._result.params
        if params.df_residual <= 0:
            self._standard_errors = np.full(2, np.nan, dtype=np.float64)
            return self._standard_errors
        
        sigma_sq = params.rss / params.df_residual
        se_slope = np.sqrt(sigma_sq / params.sxx)
        se_intercept = np.sqrt(
            sigma_sq * (1.0 / params.n + params.mean_x ** 2 / params.sxx)
        )
        self._standard_errors = np.array([se_intercept, se_slope], dtype=np.float64)
        return self._standard_errors
    
    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for (intercept, slope)."""
        if self._t_statistics is not None:
            return self._t_statistics
        
        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
            # An exact fit has zero standard error; report NA, not Inf
            t = np.where(np.isfinite(t), t, np.nan)
        self._t_statistics = t
        return self._t_statistics
    
    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from Student's t with df_residual degrees of freedom."""
        if self._p_values is not None:
            return self._p_values
        
        t = self.t_statistics
        if self.df_residual <= 0:
            self._p_values = np.full(2, np.nan, dtype=np.float64)
        else:
            self._p_values = 2.0 * stats.t.sf(np.abs(t), self.df_residual)
        return self._p_values
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing
    
    @property
    def backend_name(self) -> str:
        return self._result.backend_name
    
    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings
    
    def summary(self) -> str:
        """Generate a plain-text report of the fit and its forecasts."""
        lines = [
            "Linear Trend Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"R-squared: {self.r_squared:.4f}",
            f"Mean squared error: {self.mse:.4f}",
            f"Residual Std. Error: {_fmt(self.residual_std_error, '.6f')} "
            f"on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 60,
        ]
        
        for label, coef, se, t, p in zip(
            ('(Intercept)', 'slope'),
            self.coefficients,
            self.standard_errors,
            self.t_statistics,
            self.p_values,
        ):
            lines.append(
                f"{label:<12} {coef:14.6f} {_fmt(se, '12.6f', 12)} "
                f"{_fmt(t, '10.3f', 10)} {_fmt(p, '10.4g', 10)}"
            )
        
        lines.append("-" * 60)
        if len(self.forecasts):
            lines.append("Forecasts:")
            for xi, yi in zip(self.forecast_x, self.forecasts):
                lines.append(f"  x = {xi:g}: {yi:.4f}")
            lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        
        return "\n".join(lines)
    
    def __repr__(self) -> str:
        return (
            f"TrendSolution(n={self.n}, intercept={self.intercept:.4f}, "
            f"slope={self.slope:.4f}, r_squared={self.r_squared:.4f})"
        )


def _fmt(value: float, format_spec: str, width: int = 0) -> str:
    """Format a number, or 'NA' right-aligned to width if it is NaN."""
    if np.isnan(value):
        return "NA".rjust(width)
    return format(value, format_spec)
