"""
Execution timing utilities.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer for one computation, split into named sections.
    
    The clock starts when the timer is created. The first call to
    result() fixes the total; sections cannot be opened after that.
    
    Usage:
        timer = Timer()
        with timer.section('means'):
            mean_x = np.sum(x) / n
        with timer.section('sums_of_squares'):
            sxx = np.sum(dx * dx)
        timer.result()
        # {'total_seconds': 0.0002, 'means': 0.00005, 'sums_of_squares': 0.00004}
    """
    
    def __init__(self):
        self._origin = time.perf_counter()
        self._sections: dict[str, float] = {}
        self._total: float | None = None
        
    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section. Repeated names accumulate.
        
        Raises:
            RuntimeError: If result() has already been called
        """
        if self._total is not None:
            raise RuntimeError(f"Timer.section({name!r}) opened after result()")
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed
    
    def result(self) -> dict[str, float]:
        """'total_seconds' since construction plus every section's time."""
        if self._total is None:
            self._total = time.perf_counter() - self._origin
        return {'total_seconds': self._total, **self._sections}
