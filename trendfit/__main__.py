"""
Demonstration: fit a trend to a short series and forecast three periods.

Run with ``python -m trendfit``.
"""

from trendfit.regression import Dataset, analyze, fit, evaluate, predict

SAMPLE_SERIES = [2.0, 3.0, 5.0, 7.0, 11.0]
FORECAST_PERIODS = [5, 6, 7]


def main() -> None:
    dataset = Dataset.from_series(SAMPLE_SERIES)
    model = fit(dataset)
    metrics = evaluate(model, dataset)

    print(f"Fitted model: {model}")
    print(f"R-squared: {metrics.r_squared:.4f}")
    print(f"Mean squared error: {metrics.mse:.4f}")
    for period in FORECAST_PERIODS:
        print(f"Forecast for t = {period}: {predict(model, period):.4f}")

    print()
    print(analyze(dataset, future=FORECAST_PERIODS).summary())


if __name__ == "__main__":
    main()
