"""
Tests for regression fit().

Covers the closed-form estimator, degenerate inputs, and backend
selection.
"""

import dataclasses
import warnings

import numpy as np
import pytest

from trendfit.core.compute.tolerances import CPU_FP64
from trendfit.core.protocols import Backend
from trendfit.core.exceptions import (
    InsufficientDataError,
    InsufficientVarianceError,
    NumericalError,
    NumericalWarning,
    ValidationError,
)
from trendfit.regression import Dataset, Model, fit
from trendfit.regression.backends import CPUOLSBackend


class TestFitBasic:

    def test_known_values(self):
        model = fit(Dataset.from_pairs([(1, 2), (2, 4), (3, 6)]))
        assert isinstance(model, Model)
        assert abs(model.intercept - 0.0) < CPU_FP64.atol
        assert abs(model.slope - 2.0) < CPU_FP64.atol

    def test_exact_fit_recovers_line(self, exact_line_data):
        ds, a, b = exact_line_data
        model = fit(ds)
        np.testing.assert_allclose(model.intercept, a, atol=CPU_FP64.atol)
        np.testing.assert_allclose(model.slope, b, atol=CPU_FP64.atol)

    def test_period_indexed_series(self):
        model = fit(Dataset.from_series([2.0, 4.0, 6.0, 8.0]))
        assert abs(model.slope - 2.0) < 1e-6
        assert abs(model.intercept - 2.0) < 1e-6

    def test_sample_series(self, sample_series):
        model = fit(sample_series)
        assert model.slope == pytest.approx(2.2)
        assert model.intercept == pytest.approx(1.2)

    def test_two_points_determine_line(self):
        model = fit([(0.0, 1.0), (2.0, 5.0)])
        assert model.slope == pytest.approx(2.0)
        assert model.intercept == pytest.approx(1.0)

    def test_accepts_plain_pairs(self):
        model = fit([(1, 2), (2, 4), (3, 6)])
        assert model.slope == pytest.approx(2.0)

    def test_duplicate_x_values_allowed(self):
        model = fit([(1, 1), (1, 3), (2, 4), (2, 6)])
        assert model.slope == pytest.approx(3.0)
        assert model.intercept == pytest.approx(-1.0)

    def test_matches_numpy_polyfit(self, noisy_trend_data):
        model = fit(noisy_trend_data)
        slope, intercept = np.polyfit(noisy_trend_data.x, noisy_trend_data.y, 1)
        np.testing.assert_allclose(
            [model.intercept, model.slope], [intercept, slope], rtol=1e-10
        )

    def test_deterministic(self, noisy_trend_data):
        assert fit(noisy_trend_data) == fit(noisy_trend_data)


class TestFitProperties:

    def test_order_independence(self, noisy_trend_data, rng):
        perm = rng.permutation(noisy_trend_data.n)
        shuffled = Dataset.from_arrays(noisy_trend_data.x[perm], noisy_trend_data.y[perm])
        a = fit(noisy_trend_data)
        b = fit(shuffled)
        np.testing.assert_allclose(a.intercept, b.intercept, rtol=1e-12)
        np.testing.assert_allclose(a.slope, b.slope, rtol=1e-12)

    def test_model_has_no_dataset_reference(self):
        names = {f.name for f in dataclasses.fields(Model)}
        assert names == {'intercept', 'slope'}

    def test_model_frozen(self):
        model = fit([(1, 2), (2, 4)])
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.slope = 0.0

    def test_coefficients_are_python_floats(self):
        model = fit([(1, 2), (2, 4), (3, 7)])
        assert type(model.intercept) is float
        assert type(model.slope) is float

    def test_line_passes_through_centroid(self, noisy_trend_data):
        model = fit(noisy_trend_data)
        mean_x = noisy_trend_data.x.mean()
        mean_y = noisy_trend_data.y.mean()
        assert model.predict(mean_x) == pytest.approx(mean_y, rel=1e-12)


class TestFitDegenerate:

    def test_empty_dataset(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            fit(Dataset.from_pairs([]))
        assert exc_info.value.n_observations == 0
        assert exc_info.value.required == 2

    def test_single_observation(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            fit(Dataset.from_pairs([(1.0, 2.0)]))
        assert exc_info.value.n_observations == 1

    def test_constant_x(self):
        with pytest.raises(InsufficientVarianceError) as exc_info:
            fit(Dataset.from_pairs([(5, 1), (5, 3), (5, 7)]))
        assert exc_info.value.variable == 'x'
        assert exc_info.value.value == 5.0

    def test_constant_non_representable_x(self):
        """0.1 * 3 / 3 != 0.1; the check must not rely on the mean."""
        with pytest.raises(InsufficientVarianceError):
            fit([(0.1, 1.0), (0.1, 2.0), (0.1, 4.0)])

    def test_constant_y_fits_flat_line(self):
        model = fit(Dataset.from_pairs([(1, 4), (2, 4), (3, 4)]))
        assert abs(model.slope) < CPU_FP64.atol
        assert abs(model.intercept - 4.0) < CPU_FP64.atol

    def test_overflow_raises(self):
        with pytest.raises(NumericalError, match="overflowed"):
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", RuntimeWarning)
                fit([(1e200, 1.0), (-1e200, 2.0), (0.0, 3.0)])

    def test_nearly_constant_x_warns(self):
        x = 1e10 + np.array([0.0, 1e-5, 2e-5])
        ds = Dataset.from_arrays(x, [1.0, 2.0, 3.0])
        with pytest.warns(NumericalWarning, match="nearly constant"):
            model = fit(ds)
        assert np.isfinite(model.slope)

    def test_warning_points_at_caller(self):
        x = 1e10 + np.array([0.0, 1e-5, 2e-5])
        ds = Dataset.from_arrays(x, [1.0, 2.0, 3.0])
        with pytest.warns(NumericalWarning) as record:
            fit(ds)
        assert record[0].filename == __file__

    def test_well_spread_x_does_not_warn(self, noisy_trend_data):
        with warnings.catch_warnings():
            warnings.simplefilter("error", NumericalWarning)
            fit(noisy_trend_data)


class TestBackend:

    def test_cpu_backend(self):
        model = fit([(1, 2), (2, 4)], backend='cpu')
        assert model.slope == pytest.approx(2.0)

    def test_invalid_backend_raises(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            fit([(1, 2), (2, 4)], backend='gpu')

    def test_backend_result_envelope(self, sample_series):
        result = CPUOLSBackend().solve(sample_series)
        assert result.backend_name == 'cpu_ols'
        assert result.info['method'] == 'ols_closed_form'
        assert result.info['n'] == 5
        assert result.info['sxx'] == pytest.approx(10.0)
        assert result.info['sxy'] == pytest.approx(22.0)
        assert 'total_seconds' in result.timing
        assert 'sums_of_squares' in result.timing
        assert result.warnings == ()

    def test_backend_records_warning(self):
        x = 1e10 + np.array([0.0, 1e-5, 2e-5])
        ds = Dataset.from_arrays(x, [1.0, 2.0, 3.0])
        with pytest.warns(NumericalWarning):
            result = CPUOLSBackend().solve(ds)
        assert any("nearly constant" in w for w in result.warnings)

    def test_backend_satisfies_protocol(self):
        assert isinstance(CPUOLSBackend(), Backend)
