"""
Tests for predict() and Model.predict().
"""

import numpy as np
import pytest

from trendfit.regression import Dataset, Model, fit, predict


class TestPredict:

    def test_known_values(self):
        model = fit(Dataset.from_pairs([(1, 2), (2, 4), (3, 6)]))
        assert predict(model, 4) == pytest.approx(8.0, abs=1e-9)

    def test_odd_number_series(self):
        model = fit(Dataset.from_series([1.0, 3.0, 5.0, 7.0]))
        assert abs(predict(model, 4.0) - 9.0) < 1e-6

    def test_scalar_returns_float(self):
        result = predict(Model(1.0, 2.0), 3)
        assert type(result) is float
        assert result == 7.0

    def test_numpy_scalar_returns_float(self):
        assert type(predict(Model(1.0, 2.0), np.float32(3.0))) is float

    def test_sequence_returns_array(self):
        result = predict(Model(1.0, 2.0), [5, 6, 7])
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [11.0, 13.0, 15.0])

    def test_preserves_shape(self):
        result = predict(Model(0.0, 1.0), np.ones((2, 3)))
        assert result.shape == (2, 3)

    def test_empty_sequence(self):
        result = predict(Model(0.0, 1.0), [])
        assert result.shape == (0,)

    def test_elementwise_matches_scalar(self, rng):
        model = Model(-0.3, 1.7)
        xs = rng.standard_normal(10)
        batch = predict(model, xs)
        for xi, yi in zip(xs, batch):
            assert predict(model, xi) == yi

    def test_function_matches_method(self):
        model = Model(2.5, -1.0)
        assert predict(model, 4.0) == model.predict(4.0)

    def test_does_not_modify_input(self):
        xs = np.array([1.0, 2.0])
        predict(Model(1.0, 1.0), xs)
        np.testing.assert_array_equal(xs, [1.0, 2.0])


class TestPredictProperties:

    def test_linearity(self, rng):
        model = fit(Dataset.from_arrays(rng.standard_normal(20), rng.standard_normal(20)))
        for _ in range(20):
            x1, x2 = rng.uniform(-1e3, 1e3, size=2)
            diff = predict(model, x2) - predict(model, x1)
            assert diff == pytest.approx(model.slope * (x2 - x1), rel=1e-9, abs=1e-9)

    def test_intercept_at_zero(self):
        model = Model(intercept=3.25, slope=-8.0)
        assert predict(model, 0.0) == 3.25

    def test_overflow_follows_float_semantics(self):
        result = predict(Model(0.0, 1e300), 1e300)
        assert result == float('inf')
