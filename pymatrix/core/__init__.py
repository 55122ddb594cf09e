"""
Core infrastructure for PyMatrix.

Shared building blocks used by the dense matrix implementation.

Key components:
    exceptions: Exception hierarchy
    dtypes: Supported element types and native-width arithmetic helpers
    validation: Fail-fast precondition checks
"""

from pymatrix.core.dtypes import (
    DEFAULT_DTYPE,
    FLOAT_DTYPES,
    INTEGER_DTYPES,
    SUPPORTED_DTYPES,
    resolve_dtype,
)
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DTypeError,
    DimensionError,
    IndexOutOfBoundsError,
)

__all__ = [
    # Element types
    "DEFAULT_DTYPE",
    "FLOAT_DTYPES",
    "INTEGER_DTYPES",
    "SUPPORTED_DTYPES",
    "resolve_dtype",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DTypeError",
    "DimensionError",
    "IndexOutOfBoundsError",
]
