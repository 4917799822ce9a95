"""
CPU reference backend for simple linear regression.

Solves ordinary least squares in closed form from centred sums of
squares, accumulating in float64 in the dataset's order.
"""

from typing import Any
import warnings
import numpy as np

from trendfit.core.result import Result
from trendfit.core.exceptions import (
    InsufficientVarianceError,
    NumericalError,
    NumericalWarning,
)
from trendfit.core.validation import check_min_samples
from trendfit.core.compute.timing import Timer
from trendfit.core.compute.tolerances import DEGENERACY_THRESHOLD
from trendfit.regression.design import Dataset
from trendfit.regression.solution import Model


class CPUOLSBackend:
    """
    CPU backend using the closed-form OLS estimator.
    
    Implements the Backend protocol for Dataset -> Model.
    """
    
    @property
    def name(self) -> str:
        return 'cpu_ols'
    
    def solve(self, design: Dataset) -> Result[Model]:
        """
        Estimate intercept and slope.
        
        Algorithm:
            1. mean_x, mean_y
            2. Sxx = Σ(x - mean_x)², Sxy = Σ(x - mean_x)(y - mean_y)
            3. slope = Sxy / Sxx, intercept = mean_y - slope * mean_x
            
        Args:
            design: Validated dataset
            
        Returns:
            Result containing the fitted Model
            
        Raises:
            InsufficientDataError: If the dataset has fewer than 2 observations
            InsufficientVarianceError: If all x values are identical
        """
        check_min_samples(design.x, 2, 'dataset')
        
        x = design.x
        y = design.y
        n = design.n
        
        if design.is_constant_x():
            raise InsufficientVarianceError(
                f"x: all {n} values equal {x[0]!r}; slope is undefined",
                variable='x',
                value=float(x[0]),
            )
        
        timer = Timer()
        
        with timer.section('means'):
            mean_x = float(np.sum(x) / n)
            mean_y = float(np.sum(y) / n)
        
        with timer.section('sums_of_squares'):
            dx = x - mean_x
            dy = y - mean_y
            sxx = float(np.sum(dx * dx))
            sxy = float(np.sum(dx * dy))
        
        if not (np.isfinite(sxx) and np.isfinite(sxy)):
            raise NumericalError(
                f"sums of squares overflowed (sxx={sxx!r}, sxy={sxy!r}); rescale x or y"
            )
        
        # Distinct x values can still cancel to zero after centring
        if sxx == 0.0:
            raise InsufficientVarianceError(
                "x: sum of squared deviations is zero; slope is undefined",
                variable='x',
            )
        
        with timer.section('coefficients'):
            slope = sxy / sxx
            intercept = mean_y - slope * mean_x
        
        if not (np.isfinite(slope) and np.isfinite(intercept)):
            raise NumericalError(
                f"coefficients overflowed (sxx={sxx!r}, sxy={sxy!r}); rescale x or y"
            )
        
        issued: list[str] = []
        scale = n * mean_x * mean_x
        if scale > 0 and sxx / scale < DEGENERACY_THRESHOLD:
            msg = (
                f"x is nearly constant (relative spread {sxx / scale:.3g}); "
                f"coefficients may be inaccurate"
            )
            # solve <- _solve <- fit/analyze <- caller
            warnings.warn(msg, NumericalWarning, stacklevel=4)
            issued.append(msg)
        
        info: dict[str, Any] = {
            'method': 'ols_closed_form',
            'n': n,
            'mean_x': mean_x,
            'mean_y': mean_y,
            'sxx': sxx,
            'sxy': sxy,
        }
        
        return Result(
            params=Model(intercept=float(intercept), slope=float(slope)),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(issued),
        )
