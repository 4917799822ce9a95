"""
Result envelope for trendfit computations.

Backends return their payload wrapped in a Result so that the method
diagnostics, timing and non-fatal warnings travel with it. Higher-level
operations such as analyze() build on a backend's Result with derive(),
which keeps the backend's identity and warnings attached to the new
payload.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type
Q = TypeVar('Q')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable envelope around a computed payload.
    
    Attributes:
        params: The payload (a Model, a TrendParams, ...)
        info: Method diagnostics, e.g. {'method': 'ols_closed_form', 'sxx': 10.0}
        timing: Section timings from Timer.result(), or None if not measured
        backend_name: Backend that produced the payload, e.g. 'cpu_ols'
        warnings: Messages of the warnings issued while computing
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def derive(
        self,
        params: Q,
        *,
        timing: dict[str, float] | None = None,
        **info: Any,
    ) -> 'Result[Q]':
        """
        Wrap a payload computed from this result's payload.
        
        backend_name and warnings carry over; info is this result's info
        updated with the given keywords; timing replaces the original.
        """
        return Result(
            params=params,
            info={**self.info, **info},
            timing=timing,
            backend_name=self.backend_name,
            warnings=self.warnings,
        )
