"""
Regression backends.

Available backends:
    CPUOLSBackend: CPU reference implementation, closed-form OLS
"""

from trendfit.regression.backends.cpu import CPUOLSBackend

__all__ = [
    "CPUOLSBackend",
]
