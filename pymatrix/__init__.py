"""
PyMatrix: a small dense matrix value type for Python.

Row-major dense matrices over fixed-width integer and floating-point element
types, with construction, bounds-checked element access, scaling, Euclidean
length, dot product, addition and multiplication.

Submodules:
    dense: The Matrix type and its constructors
    core: Element types, validation and exceptions
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DTypeError,
    DimensionError,
    IndexOutOfBoundsError,
)
from pymatrix.dense import Matrix, identity, new

__all__ = [
    "__version__",
    "Matrix",
    "new",
    "identity",
    "PyMatrixError",
    "ValidationError",
    "DTypeError",
    "DimensionError",
    "IndexOutOfBoundsError",
]
