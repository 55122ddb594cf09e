"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every precondition failure (bad index, incompatible
shape, unsupported element type) is a ValidationError: it is raised by the
call that detects it and no partial result is ever returned.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. values
    that cannot be represented in the matrix element type.
    """
    pass


class DTypeError(ValidationError):
    """
    Element type is unsupported or inconsistent.

    Raised when a matrix is requested with a dtype outside the supported
    set, or when a binary operation mixes matrices of different dtypes.

    Attributes:
        dtype: The offending dtype (as given or as resolved)
        expected: The dtype or set of dtypes that was required
    """

    def __init__(
        self,
        message: str,
        dtype: object | None = None,
        expected: object | None = None
    ):
        super().__init__(message)
        self.dtype = dtype
        self.expected = expected


class DimensionError(ValidationError):
    """
    Matrix dimensions are invalid or incompatible.

    Raised for negative dimensions at construction and for operations whose
    shape precondition does not hold (addition of differently shaped
    matrices, multiplication with mismatched inner dimensions, norm or dot
    product of something other than a column vector).

    Attributes:
        operation: Name of the operation that rejected the shapes
        shape: Shape of the receiving matrix, if any
        other_shape: Shape of the second operand, if any
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None,
        other_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape
        self.other_shape = other_shape


class IndexOutOfBoundsError(ValidationError):
    """
    Element index lies outside the matrix.

    Negative indices are always out of bounds; they never wrap around.

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: (rows, columns) of the indexed matrix
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape
