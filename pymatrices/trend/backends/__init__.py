"""
Trend forecasting backends.

Available backends:
    CPUTrendBackend: straight-line least squares on y or ln(y)
"""

from pymatrices.trend.backends.cpu import CPUTrendBackend

__all__ = [
    "CPUTrendBackend",
]
