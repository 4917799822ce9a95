"""
trendfit: linear trend fitting and forecasting for time series.

Fits a least-squares line to time-ordered observations, reports its fit
quality (R², MSE) and forecasts future points.

Submodules:
    regression: Dataset, fit, evaluate, predict, analyze
    core: Exceptions, validation, result envelope
"""

__version__ = "0.1.0"

from trendfit import regression
from trendfit.regression import (
    Dataset,
    Observation,
    Model,
    Metrics,
    fit,
    evaluate,
    mse,
    r_squared,
    predict,
    analyze,
)

__all__ = [
    "__version__",
    "regression",
    "Dataset",
    "Observation",
    "Model",
    "Metrics",
    "fit",
    "evaluate",
    "mse",
    "r_squared",
    "predict",
    "analyze",
]
