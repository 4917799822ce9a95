"""
Core protocols for trendfit.

Structural interfaces that computational backends must satisfy. We use
Protocol (structural typing) rather than ABC (nominal typing) so a backend
only has to look right, not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from trendfit.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    A backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless, which makes them easy to
    test and swap.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}', e.g. 'cpu_ols'.
        """
        ...
    
    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.
        
        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the design is invalid for this backend
        """
        ...
