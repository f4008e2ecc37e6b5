"""
Dense matrix value type.

Public API:
    Matrix             - the matrix value type
    make_constant()    - rows x cols matrix filled with one value
    make_identity()    - n x n identity

Example:
    >>> from pymatrices.matrix import Matrix, make_identity
    >>> A = Matrix([[1, 2], [3, 4]])
    >>> A.transpose().to_rows()
    [[1.0, 3.0], [2.0, 4.0]]
"""

from pymatrices.matrix.matrix import Matrix, make_constant, make_identity

__all__ = [
    "Matrix",
    "make_constant",
    "make_identity",
]
