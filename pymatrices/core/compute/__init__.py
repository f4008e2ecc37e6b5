"""
Shared compute infrastructure for pymatrices.

This module provides timing utilities, precision constants and linear
algebra kernels that are shared across all domain-specific code.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Float64 epsilon and zero-tolerance rules
    tolerances: Tolerance tiers for numerical comparison
    linalg: Linear algebra kernels (LU, QR, SVD, eigen)
"""

from pymatrices.core.compute.timing import Timer, timed
from pymatrices.core.compute.precision import (
    EPSILON_64,
    numerical_rank,
    rank_tolerance,
    safe_ratio,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Precision
    "EPSILON_64",
    "numerical_rank",
    "rank_tolerance",
    "safe_ratio",
]
