"""
Solver dispatch for regression.

This module provides the public API: fit(), evaluate(), mse(),
r_squared(), predict() and analyze(), plus backend selection.
"""

from __future__ import annotations

from typing import Any, Iterable, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from trendfit.core.protocols import Backend
from trendfit.core.result import Result
from trendfit.core.exceptions import (
    ValidationError,
    NumericalError,
    ZeroVarianceError,
)
from trendfit.core.validation import (
    check_array,
    check_finite,
    check_min_samples,
)
from trendfit.core.compute.timing import Timer
from trendfit.regression.design import Dataset, Observation
from trendfit.regression.solution import Model, Metrics, TrendParams, TrendSolution
from trendfit.regression.backends.cpu import CPUOLSBackend


BackendChoice = Literal['auto', 'cpu']

DataInput = Dataset | Iterable[tuple[float, float]]


def fit(
    dataset: DataInput,
    *,
    backend: BackendChoice = 'auto',
) -> Model:
    """
    Fit a simple linear regression y = intercept + slope * x.
    
    Ordinary least squares in closed form:
        slope = Σ(x - mean_x)(y - mean_y) / Σ(x - mean_x)²
        intercept = mean_y - slope * mean_x
    
    Args:
        dataset: Dataset, or any iterable of (x, y) pairs
        backend: Computational backend to use ('auto' or 'cpu')
        
    Returns:
        The fitted Model
        
    Raises:
        InsufficientDataError: If there are fewer than 2 observations
        InsufficientVarianceError: If all x values are identical
        
    Example:
        >>> from trendfit.regression import Dataset, fit
        >>> model = fit(Dataset.from_pairs([(1, 2), (2, 4), (3, 6)]))
        >>> model.predict(4)
        8.0
    """
    return _solve(_ensure_dataset(dataset), backend).params


def mse(model: Model, dataset: DataInput) -> float:
    """
    Mean squared error (1/n) Σ(y - ŷ)² of model on dataset.
    
    Raises:
        InsufficientDataError: If the dataset is empty
        NumericalError: If the result overflows
    """
    ds = _ensure_dataset(dataset)
    check_min_samples(ds.y, 1, 'dataset')
    rss = _residual_sum_of_squares(model, ds)
    return _check_metric(rss / ds.n, 'mse')


def r_squared(model: Model, dataset: DataInput) -> float:
    """
    Coefficient of determination 1 - SS_res / SS_tot.
    
    R² is undefined when every observed y is the same (SS_tot = 0); this
    raises ZeroVarianceError rather than returning NaN or a convention
    value.
    
    Raises:
        InsufficientDataError: If the dataset is empty
        ZeroVarianceError: If all y values are identical
        NumericalError: If the result overflows
    """
    ds = _ensure_dataset(dataset)
    check_min_samples(ds.y, 1, 'dataset')
    tss = _total_sum_of_squares(ds)
    rss = _residual_sum_of_squares(model, ds)
    return _check_metric(1.0 - rss / tss, 'r_squared')


def evaluate(model: Model, dataset: DataInput) -> Metrics:
    """
    Compute R² and MSE of model on dataset.
    
    Raises:
        InsufficientDataError: If the dataset is empty
        ZeroVarianceError: If all y values are identical
        NumericalError: If a metric overflows
    """
    ds = _ensure_dataset(dataset)
    check_min_samples(ds.y, 1, 'dataset')
    tss = _total_sum_of_squares(ds)
    rss = _residual_sum_of_squares(model, ds)
    return Metrics(
        r_squared=_check_metric(1.0 - rss / tss, 'r_squared'),
        mse=_check_metric(rss / ds.n, 'mse'),
    )


def predict(model: Model, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Predicted y = intercept + slope * x.
    
    A scalar x gives a float; a sequence gives a float64 array with one
    forecast per input, each computed independently.
    """
    return model.predict(x)


def analyze(
    data: DataInput | ArrayLike,
    *,
    horizon: int = 3,
    future: ArrayLike | None = None,
    backend: BackendChoice = 'auto',
) -> TrendSolution:
    """
    Fit, evaluate and forecast a trend in one call.
    
    Args:
        data: Dataset, iterable of (x, y) pairs, or a 1-D series of
            observed values (then x = 0, 1, 2, ...)
        horizon: Number of forecasts past the largest x, one unit apart.
            Ignored when future is given.
        future: Explicit x values to forecast at
        backend: Computational backend to use ('auto' or 'cpu')
        
    Returns:
        TrendSolution with model, metrics, forecasts and summary()
        
    Raises:
        InsufficientDataError: If there are fewer than 2 observations
        InsufficientVarianceError: If all x values are identical
        ZeroVarianceError: If all y values are identical
        ValidationError: If horizon or future is invalid
        
    Example:
        >>> from trendfit.regression import analyze
        >>> solution = analyze([2.0, 3.0, 5.0, 7.0, 11.0])
        >>> print(solution.summary())
    """
    ds = _ensure_series(data)
    forecast_x = _forecast_points(ds, horizon, future)
    
    timer = Timer()
    
    with timer.section('fit'):
        fit_result = _solve(ds, backend)
    model = fit_result.params
    
    with timer.section('evaluate'):
        metrics = evaluate(model, ds)
        fitted_values = np.asarray(model.predict(ds.x))
        residuals = ds.y - fitted_values
    
    with timer.section('forecast'):
        forecasts = np.asarray(model.predict(forecast_x))
    
    params = TrendParams(
        model=model,
        metrics=metrics,
        forecast_x=forecast_x,
        forecasts=forecasts,
        residuals=residuals,
        fitted_values=fitted_values,
        rss=float(np.sum(residuals * residuals)),
        tss=_total_sum_of_squares(ds),
        n=ds.n,
        mean_x=fit_result.info['mean_x'],
        sxx=fit_result.info['sxx'],
        df_residual=ds.n - 2,
    )
    
    result = fit_result.derive(
        params,
        timing=timer.result(),
        horizon=int(forecast_x.shape[0]),
    )
    return TrendSolution(_result=result)


def _solve(dataset: Dataset, backend: BackendChoice) -> Result[Model]:
    """Run the selected backend on a validated dataset."""
    return _get_backend(backend).solve(dataset)


def _get_backend(choice: BackendChoice) -> Backend[Dataset, Model]:
    """
    Select and instantiate the appropriate backend.
    
    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUOLSBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")


def _ensure_dataset(data: DataInput) -> Dataset:
    """Convert (x, y) pairs to Dataset if needed."""
    if isinstance(data, Dataset):
        return data
    return Dataset.from_pairs(data)


def _ensure_series(data: DataInput | ArrayLike) -> Dataset:
    """Like _ensure_dataset, but a flat sequence of numbers is a time series."""
    if isinstance(data, Dataset):
        return data
    if not isinstance(data, np.ndarray):
        try:
            data = list(data)
        except TypeError as e:
            raise ValidationError(f"data: expected a sequence, got {type(data).__name__}") from e
        if any(isinstance(item, Observation) for item in data):
            return Dataset.from_pairs(data)
    try:
        ndim = np.ndim(data)
    except (ValueError, TypeError):
        ndim = None
    if ndim == 1:
        return Dataset.from_series(data)
    return Dataset.from_pairs(data)


def _forecast_points(
    dataset: Dataset,
    horizon: int,
    future: ArrayLike | None,
) -> NDArray[np.floating[Any]]:
    """x values at which analyze() forecasts."""
    if future is not None:
        points = np.atleast_1d(check_array(future, 'future'))
        if points.ndim != 1:
            raise ValidationError(
                f"future: expected a scalar or 1D sequence, got shape {points.shape}"
            )
        check_finite(points, 'future')
        return points
    
    if isinstance(horizon, bool) or not isinstance(horizon, (int, np.integer)):
        raise ValidationError(f"horizon: expected an integer, got {horizon!r}")
    if horizon < 0:
        raise ValidationError(f"horizon: must be non-negative, got {horizon}")
    
    last = float(np.max(dataset.x)) if dataset.n else 0.0
    return last + np.arange(1, horizon + 1, dtype=np.float64)


def _total_sum_of_squares(dataset: Dataset) -> float:
    """SS_tot = Σ(y - mean_y)², rejecting a constant response."""
    if dataset.is_constant_y():
        raise ZeroVarianceError(
            f"y: all {dataset.n} values equal {dataset.y[0]!r}; R² is undefined",
            variable='y',
            value=float(dataset.y[0]),
        )
    y = dataset.y
    mean_y = np.sum(y) / dataset.n
    dy = y - mean_y
    tss = float(np.sum(dy * dy))
    if tss == 0.0:
        raise ZeroVarianceError(
            "y: sum of squared deviations is zero; R² is undefined",
            variable='y',
        )
    return tss


def _residual_sum_of_squares(model: Model, dataset: Dataset) -> float:
    """SS_res = Σ(y - ŷ)²."""
    residuals = dataset.y - model.predict(dataset.x)
    return float(np.sum(residuals * residuals))


def _check_metric(value: float, name: str) -> float:
    """Refuse to hand NaN or Inf to the caller."""
    if not np.isfinite(value):
        raise NumericalError(f"{name}: computed non-finite value {value!r}")
    return float(value)
