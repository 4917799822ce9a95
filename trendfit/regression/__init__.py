"""
Simple linear regression for time-ordered observations.

Public API:
    fit(dataset) -> Model
    evaluate(model, dataset) -> Metrics
    mse(model, dataset), r_squared(model, dataset) -> float
    predict(model, x) -> float or array
    analyze(data) -> TrendSolution

Example:
    >>> from trendfit.regression import Dataset, fit, evaluate, predict
    >>> ds = Dataset.from_series([2.0, 3.0, 5.0, 7.0, 11.0])
    >>> model = fit(ds)
    >>> metrics = evaluate(model, ds)
    >>> predict(model, [5, 6, 7])
"""

from trendfit.regression.design import Dataset, Observation
from trendfit.regression.solution import Model, Metrics, TrendParams, TrendSolution
from trendfit.regression.solvers import (
    fit,
    evaluate,
    mse,
    r_squared,
    predict,
    analyze,
)

__all__ = [
    "fit",
    "evaluate",
    "mse",
    "r_squared",
    "predict",
    "analyze",
    "Dataset",
    "Observation",
    "Model",
    "Metrics",
    "TrendParams",
    "TrendSolution",
]
