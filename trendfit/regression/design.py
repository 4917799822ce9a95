"""
Regression Dataset.

Dataset holds the ordered (x, y) observations a trend line is fitted to.
It validates once, at construction, and is read-only afterwards: the
fitter, evaluator and predictor all trust it without re-checking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from trendfit.core.exceptions import ValidationError, DimensionError
from trendfit.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
)


@dataclass(frozen=True)
class Observation:
    """One historical data point: input x and observed value y."""
    x: float
    y: float


@dataclass(frozen=True)
class Dataset:
    """
    Ordered sequence of observations.
    
    Stores x and y as float64 arrays. Immutable after construction: the
    arrays are flagged read-only so they can be shared freely.
    
    Construction:
        Dataset.from_pairs([(1, 2), (2, 4), (3, 6)])
        Dataset.from_arrays(x, y)
        Dataset.from_series([2, 3, 5, 7, 11])       # x = 0, 1, 2, ...
    
    Zero or one observation is allowed here; fit() is what rejects it.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    
    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> Dataset:
        """Build Dataset from parallel x and y array-likes."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr)
    
    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> Dataset:
        """
        Build Dataset from (x, y) pairs.
        
        Accepts tuples, lists, Observation instances, or an (n, 2) array.
        """
        rows = [
            (p.x, p.y) if isinstance(p, Observation) else p
            for p in pairs
        ]
        if not rows:
            return cls._build(np.empty(0), np.empty(0))
        
        arr = check_array(rows, 'pairs')
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(
                f"pairs: expected a sequence of (x, y) pairs, got shape {arr.shape}"
            )
        return cls._build(arr[:, 0].copy(), arr[:, 1].copy())
    
    @classmethod
    def from_series(
        cls,
        values: ArrayLike,
        *,
        start: float = 0.0,
        step: float = 1.0,
    ) -> Dataset:
        """
        Build Dataset from a time series, one period per value.
        
        Args:
            values: Observed values y, in time order
            start: Period assigned to the first value
            step: Distance between consecutive periods
        """
        y_arr = check_array(values, 'values')
        check_1d(y_arr, 'values')
        if not np.isfinite(step) or step == 0:
            raise ValidationError(f"step: must be finite and non-zero, got {step}")
        x_arr = start + step * np.arange(y_arr.shape[0], dtype=np.float64)
        return cls._build(x_arr, y_arr)
    
    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> Dataset:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_finite(x, 'x')
        check_finite(y, 'y')
        
        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        x.setflags(write=False)
        y.setflags(write=False)
        return cls(_x=x, _y=y)
    
    # === Properties ===
    
    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Inputs (n,), read-only."""
        return self._x
    
    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Observed values (n,), read-only."""
        return self._y
    
    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._x.shape[0])
    
    @property
    def observations(self) -> tuple[Observation, ...]:
        """Observations in their original order."""
        return tuple(self)
    
    def is_constant_x(self) -> bool:
        """True if every x is the same value (or there are none)."""
        return bool(np.all(self._x == self._x[0])) if self.n else True
    
    def is_constant_y(self) -> bool:
        """True if every y is the same value (or there are none)."""
        return bool(np.all(self._y == self._y[0])) if self.n else True
    
    def __len__(self) -> int:
        return self.n
    
    def __iter__(self) -> Iterator[Observation]:
        for xi, yi in zip(self._x, self._y):
            yield Observation(x=float(xi), y=float(yi))
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return (
            np.array_equal(self._x, other._x)
            and np.array_equal(self._y, other._y)
        )
    
    def __hash__(self) -> int:
        return hash((self._x.tobytes(), self._y.tobytes()))
    
    def __repr__(self) -> str:
        return f"Dataset(n={self.n})"
