"""
Linear algebra kernels for pymatrices.

This module provides the CPU implementations of the decompositions used
across all domains. They operate on plain float64 NumPy arrays; the
Matrix-level API lives in pymatrices.linalg.

All functions follow these conventions:
    - Use NumPy/SciPy (LAPACK under the hood)
    - Structured decompositions return a result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    lu: LU decomposition with partial pivoting (det, inverse, square solve)
    qr: QR decomposition and least-squares solve
    svd: Singular values (rank, condition number)
    eigen: Eigendecomposition (symmetric and general)
"""

from pymatrices.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    lu_det_cpu,
    lu_solve_cpu,
)
from pymatrices.core.compute.linalg.qr import (
    QRResult,
    qr_cpu,
    qr_solve_cpu,
)
from pymatrices.core.compute.linalg.svd import (
    singular_values_cpu,
    condition_from_singular_values,
)
from pymatrices.core.compute.linalg.eigen import (
    EigenResult,
    eig_cpu,
)

__all__ = [
    # LU decomposition
    "LUResult",
    "lu_cpu",
    "lu_det_cpu",
    "lu_solve_cpu",
    # QR decomposition
    "QRResult",
    "qr_cpu",
    "qr_solve_cpu",
    # SVD
    "singular_values_cpu",
    "condition_from_singular_values",
    # Eigendecomposition
    "EigenResult",
    "eig_cpu",
]
