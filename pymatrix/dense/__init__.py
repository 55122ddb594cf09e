"""
Dense matrix module.

Provides a row-major dense matrix over a closed set of fixed-width numeric
element types, with arithmetic that keeps each type's native semantics.

Public API:
    Matrix(rows, columns, *values, dtype)  - Construct, zero-filled past values
    new(rows, columns, *values, dtype)     - Same, as a function
    identity(size, dtype)                  - Square identity matrix
    Matrix.at / set                        - Bounds-checked element access
    Matrix.scale                           - Multiply by a scalar
    Matrix.length                          - Euclidean length of a column vector
    Matrix.dot_product                     - Dot product of column vectors
    Matrix.must_add / must_mul             - Sum and product (also + and @)
"""

from pymatrix.dense.matrix import Matrix, identity, new

__all__ = [
    "Matrix",
    "new",
    "identity",
]
