"""
Matrix: dense row-major matrix over a fixed-width numeric element type.

Storage is a flat 1D numpy array of length rows * columns; element (r, c)
lives at linear index r * columns + c. Every operation computes in the
matrix's own dtype, so int8 arithmetic wraps at 8 bits and float32
arithmetic rounds to single precision.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.dtypes import (
    DEFAULT_DTYPE,
    accumulate,
    float64_to,
    native_arithmetic,
    resolve_dtype,
)
from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_column_vector,
    check_dimension,
    check_index,
    check_mul_compatible,
    check_same_dtype,
    check_same_shape,
    coerce_values,
)


class Matrix:
    """
    Dense matrix of numbers stored in row-major order.

    The element type is one of int8/16/32/64, uint8/16/32/64, float32 or
    float64 and is fixed for the life of the matrix. Shape is fixed too:
    scale, must_add and must_mul return new matrices with their own
    storage, and set() overwrites a single element in place.

    Construction:
        Matrix(2, 2, 1, 2, 3, 4, dtype=np.int32)
        Matrix.identity(3)
        Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])

    Precondition failures (out-of-range index, incompatible shapes, mixed
    element types) raise a ValidationError subclass from the call that
    detects them; no partial result is produced.

    Thread safety:
        A Matrix carries no locks. Reading from several threads is fine;
        callers that share a matrix while calling set() must synchronize
        those calls themselves.
    """

    __hash__ = None  # mutable through set()

    def __init__(
        self,
        rows: int,
        columns: int,
        *values: Any,
        dtype: DTypeLike = DEFAULT_DTYPE,
    ):
        """
        Create a rows x columns matrix, filled in row-major order.

        The first min(rows * columns, len(values)) positions take the given
        values; remaining positions are zero. Values beyond capacity are
        ignored.

        Args:
            rows: Number of rows (>= 0)
            columns: Number of columns (>= 0)
            *values: Initial elements in row-major order
            dtype: Element type

        Raises:
            DimensionError: If rows or columns is negative or not an integer
            DTypeError: If dtype is not a supported element type
            ValidationError: If a used value cannot be stored as dtype
        """
        self._dtype = resolve_dtype(dtype)
        self._rows = check_dimension(rows, "rows")
        self._columns = check_dimension(columns, "columns")

        n = self._rows * self._columns
        self._data = np.zeros(n, dtype=self._dtype)

        used = min(n, len(values))
        if used:
            self._data[:used] = coerce_values(values[:used], self._dtype, "values")

    @classmethod
    def _wrap(cls, rows: int, columns: int, data: NDArray[Any]) -> Matrix:
        """Internal builder around an already validated flat array."""
        m = cls.__new__(cls)
        m._rows = rows
        m._columns = columns
        m._dtype = data.dtype
        m._data = data
        return m

    @classmethod
    def identity(cls, size: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
        """
        Square matrix with ones on the diagonal and zeros elsewhere.

        Args:
            size: Number of rows and columns; 0 gives an empty matrix
            dtype: Element type
        """
        m = cls(size, size, dtype=dtype)
        # Diagonal elements are size + 1 apart in row-major storage
        m._data[:: m._columns + 1] = 1
        return m

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Parameters
        ----------
        array : array-like
            Nested sequences or a numpy array. 1D input becomes a column
            vector. The data are copied.
        dtype : dtype, optional
            Element type. Defaults to the array's own dtype, which must be
            one of the supported element types.
        """
        try:
            arr = np.asarray(array)
        except (ValueError, TypeError) as e:
            raise ValidationError(f"array: cannot convert to array: {e}") from e

        resolved = resolve_dtype(arr.dtype if dtype is None else dtype)
        if dtype is not None and not isinstance(array, np.ndarray):
            # Keep nested Python numbers as they are so each converts exactly
            arr = np.asarray(array, dtype=object)

        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise DimensionError(
                f"array: expected 1D or 2D input, got {arr.ndim}D with shape {arr.shape}",
                operation="from_array",
            )

        rows, columns = arr.shape
        data = coerce_values(arr.ravel(order='C'), resolved, "array")
        return cls._wrap(rows, columns, data)

    # ─── shape ──────────────────────────────────────────────────────────

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        """Number of stored elements, rows * columns."""
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def data(self) -> NDArray[Any]:
        """
        Row-major elements as a read-only 1D view.

        Use set() to change an element.
        """
        view = self._data.view()
        view.flags.writeable = False
        return view

    # ─── element access ─────────────────────────────────────────────────

    def at(self, row: int, column: int) -> np.generic:
        """
        Element at (row, column).

        Raises:
            IndexOutOfBoundsError: If row or column is outside the matrix.
                Negative indices do not count from the end.
        """
        return self._data[check_index(row, column, self.shape)]

    def set(self, row: int, column: int, value: Any) -> None:
        """
        Overwrite the element at (row, column).

        Raises:
            IndexOutOfBoundsError: If row or column is outside the matrix
            ValidationError: If value cannot be stored as the element type
        """
        idx = check_index(row, column, self.shape)
        self._data[idx] = coerce_values([value], self._dtype, "value")[0]

    def __getitem__(self, key: tuple[int, int]) -> np.generic:
        row, column = self._split_key(key)
        return self.at(row, column)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, column = self._split_key(key)
        self.set(row, column, value)

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"index: expected a (row, column) pair, got {key!r}"
            )
        return key

    # ─── arithmetic ─────────────────────────────────────────────────────

    def scale(self, scalar: Any) -> Matrix:
        """
        New matrix with every element multiplied by scalar.

        The scalar is converted to the element type first and the products
        use that type's arithmetic (wrapping for integers).
        """
        s = coerce_values([scalar], self._dtype, "scalar")[0]
        with native_arithmetic():
            data = self._data * s
        return Matrix._wrap(self._rows, self._columns, data)

    def length(self) -> np.generic:
        """
        Euclidean length of a column vector.

        The sum of squares is accumulated in the element type, square-rooted
        in float64 and converted back to the element type, so integer
        vectors get a truncated integer length.

        Raises:
            DimensionError: If the matrix does not have exactly 1 column
        """
        check_column_vector(self, "length")
        with native_arithmetic():
            squares = self._data * self._data
            total = accumulate(squares, self._dtype)
            root = np.sqrt(np.float64(total))
        return float64_to(root, self._dtype)

    def dot_product(self, other: Matrix) -> np.generic:
        """
        Sum of pairwise products of two column vectors.

        Runs over this vector's elements and reads other at the same
        positions. A longer other contributes only its leading elements;
        a shorter one is an out-of-bounds read.

        Raises:
            DimensionError: If either operand does not have exactly 1 column
            DTypeError: If the element types differ
            IndexOutOfBoundsError: If other has fewer elements than self
        """
        check_column_vector(self, "dot_product")
        check_column_vector(other, "dot_product")
        check_same_dtype(self, other, "dot_product")

        n = self.size
        if other.size < n:
            raise IndexOutOfBoundsError(
                f"dot_product: index {other.size} out of range for "
                f"vector with {other.size} elements (needs {n})",
                row=other.rows,
                column=0,
                shape=other.shape,
            )

        with native_arithmetic():
            products = self._data * other._data[:n]
        return accumulate(products, self._dtype)

    def must_add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum of two matrices of the same shape.

        Raises:
            DimensionError: If the shapes differ
            DTypeError: If the element types differ
        """
        check_same_shape(self, other, "must_add")
        check_same_dtype(self, other, "must_add")
        with native_arithmetic():
            data = self._data + other._data
        return Matrix._wrap(self._rows, other._columns, data)

    def must_mul(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Each result element is a running sum over the inner dimension,
        accumulated in the element type and read through the bounds-checked
        accessors.

        Raises:
            DimensionError: If self.columns != other.rows
            DTypeError: If the element types differ
        """
        check_mul_compatible(self, other)
        check_same_dtype(self, other, "must_mul")

        result = Matrix(self._rows, other._columns, dtype=self._dtype)
        zero = self._dtype.type(0)
        with native_arithmetic():
            for i in range(self._rows):
                for j in range(other._columns):
                    s = zero
                    for n in range(self._columns):
                        s += self.at(i, n) * other.at(n, j)
                    result.set(i, j, s)
        return result

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.must_add(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.must_mul(other)

    # ─── conversion ─────────────────────────────────────────────────────

    def copy(self) -> Matrix:
        """Independent copy with its own storage."""
        return Matrix._wrap(self._rows, self._columns, self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a (rows, columns) array."""
        return self._data.reshape(self._rows, self._columns).copy()

    def tolist(self) -> list[list[Any]]:
        """Elements as nested Python lists, one list per row."""
        return self.to_numpy().tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._dtype == other._dtype
            and self.shape == other.shape
            and bool(np.array_equal(self._data, other._data))
        )

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, columns={self._columns}, "
            f"dtype={self._dtype.name}, data={self._data.tolist()})"
        )


def new(
    rows: int,
    columns: int,
    *values: Any,
    dtype: DTypeLike = DEFAULT_DTYPE,
) -> Matrix:
    """Create a rows x columns matrix; see Matrix.__init__."""
    return Matrix(rows, columns, *values, dtype=dtype)


def identity(size: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
    """Square identity matrix; see Matrix.identity."""
    return Matrix.identity(size, dtype=dtype)
