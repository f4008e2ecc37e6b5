"""
Regression backends.

Available backends:
    CPULeastSquaresBackend: Householder QR least squares
"""

from pymatrices.regression.backends.cpu import CPULeastSquaresBackend

__all__ = [
    "CPULeastSquaresBackend",
]
