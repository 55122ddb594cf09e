"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting,
clamping or resizing anything.

Design principles:
    - No silent lossy coercion (no truncating 1.5 into an integer matrix)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages

The shape checks are duck-typed over anything with ``rows``, ``columns``
and ``dtype`` attributes so they do not depend on the Matrix class.
"""

import math
import operator

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pymatrix.core.dtypes import is_integer_dtype, native_arithmetic
from pymatrix.core.exceptions import (
    DimensionError,
    DTypeError,
    IndexOutOfBoundsError,
    ValidationError,
)


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Requested dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        DimensionError: If the value is not an integer or is negative
    """
    try:
        n = _as_int(value, name)
    except ValidationError as e:
        raise DimensionError(str(e), operation="construct") from e
    if n < 0:
        raise DimensionError(
            f"{name}: must be non-negative, got {n}", operation="construct"
        )
    return n


def check_index(row: Any, column: Any, shape: tuple[int, int]) -> int:
    """
    Validate an element position and return its row-major linear index.

    Args:
        row: Row index
        column: Column index
        shape: (rows, columns) of the indexed matrix

    Returns:
        ``row * columns + column``

    Raises:
        ValidationError: If an index is not an integer
        IndexOutOfBoundsError: If row or column is negative or too large
    """
    r = _as_int(row, "row")
    c = _as_int(column, "column")
    rows, columns = shape
    if r < 0 or c < 0 or r >= rows or c >= columns:
        raise IndexOutOfBoundsError(
            f"matrix indexes out of bounds: ({r}, {c}) for shape {rows}x{columns}",
            row=r,
            column=c,
            shape=shape,
        )
    return r * columns + c


def check_column_vector(matrix: Any, operation: str) -> None:
    """
    Verify a matrix has exactly one column.

    Raises:
        DimensionError: If columns != 1
    """
    if matrix.columns != 1:
        raise DimensionError(
            f"{operation}: requires a matrix with 1 column, "
            f"got shape {matrix.rows}x{matrix.columns}",
            operation=operation,
            shape=(matrix.rows, matrix.columns),
        )


def check_same_shape(a: Any, b: Any, operation: str) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionError: If rows or columns differ
    """
    if a.rows != b.rows or a.columns != b.columns:
        raise DimensionError(
            f"{operation}: matrix sizes are incompatible, "
            f"{a.rows}x{a.columns} vs {b.rows}x{b.columns}",
            operation=operation,
            shape=(a.rows, a.columns),
            other_shape=(b.rows, b.columns),
        )


def check_mul_compatible(a: Any, b: Any) -> None:
    """
    Verify the inner dimensions of a product agree (a.columns == b.rows).

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if a.columns != b.rows:
        raise DimensionError(
            f"must_mul: matrix sizes are incompatible for multiplication, "
            f"{a.rows}x{a.columns} @ {b.rows}x{b.columns} "
            f"({a.columns} columns vs {b.rows} rows)",
            operation="must_mul",
            shape=(a.rows, a.columns),
            other_shape=(b.rows, b.columns),
        )


def check_same_dtype(a: Any, b: Any, operation: str) -> None:
    """
    Verify two matrices share an element type.

    Raises:
        DTypeError: If the dtypes differ
    """
    if a.dtype != b.dtype:
        raise DTypeError(
            f"{operation}: element types differ, {a.dtype} vs {b.dtype}",
            dtype=b.dtype,
            expected=a.dtype,
        )


def coerce_values(values: Any, dtype: np.dtype, name: str) -> NDArray[Any]:
    """
    Convert a flat sequence of numbers to an array of the element type.

    Conversion is exact or native: integers must fit the integer type,
    floats stored into an integer type must be integral, and numbers
    stored into a float type are rounded by the usual IEEE cast.

    Args:
        values: Flat sequence of numbers
        dtype: Target element type (already resolved)
        name: Parameter name for error messages

    Returns:
        New 1D array of dtype

    Raises:
        ValidationError: If a value is non-numeric, non-integral for an
            integer type, or outside the integer type's range
    """
    # Real numeric arrays convert in one vectorised step. Python sequences go
    # value by value: batching mixed ints and floats through np.asarray would
    # round big ints to float64 before any check sees them.
    if isinstance(values, np.ndarray) and values.dtype != object:
        return _coerce_array(values, dtype, name)

    try:
        items = list(values)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a flat sequence of numbers: {e}") from e

    converted = [_coerce_scalar(v, dtype, name) for v in items]
    with native_arithmetic():
        return np.array(converted, dtype=dtype)


def _check_int_range(lo: int, hi: int, dtype: np.dtype, name: str) -> None:
    info = np.iinfo(dtype)
    if lo < info.min or hi > info.max:
        raise ValidationError(
            f"{name}: values outside the {dtype} range "
            f"[{info.min}, {info.max}] (got min={lo}, max={hi})"
        )


def _coerce_scalar(value: Any, dtype: np.dtype, name: str) -> int | float:
    """Exact conversion of one Python or numpy number for dtype."""
    if isinstance(value, (list, tuple, np.ndarray)):
        raise ValidationError(
            f"{name}: expected a flat sequence of numbers, "
            f"got nested {type(value).__name__}"
        )
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise ValidationError(
            f"{name}: non-numeric value {value!r}, expected real numbers"
        )

    if is_integer_dtype(dtype):
        if isinstance(value, (float, np.floating)):
            if not math.isfinite(value) or not float(value).is_integer():
                raise ValidationError(
                    f"{name}: non-integral value {value!r} cannot be stored as {dtype}"
                )
        n = int(value)
        _check_int_range(n, n, dtype, name)
        return n

    if isinstance(value, (int, np.integer)):
        try:
            return float(value)
        except OverflowError:
            # Beyond float64: the IEEE cast saturates to infinity
            return math.inf if value > 0 else -math.inf
    return value


def _coerce_array(raw: NDArray[Any], dtype: np.dtype, name: str) -> NDArray[Any]:
    """Vectorised conversion of a numeric ndarray; raw.dtype is exact already."""
    if raw.ndim != 1:
        raise ValidationError(
            f"{name}: expected a flat sequence of numbers, got shape {raw.shape}"
        )

    if raw.size == 0:
        return np.zeros(0, dtype=dtype)

    if not np.issubdtype(raw.dtype, np.number) or np.issubdtype(raw.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {raw.dtype}, expected real numbers"
        )

    if is_integer_dtype(dtype):
        if np.issubdtype(raw.dtype, np.floating):
            if not np.all(np.isfinite(raw)) or not np.all(raw == np.trunc(raw)):
                raise ValidationError(
                    f"{name}: non-integral values cannot be stored as {dtype}"
                )
        _check_int_range(int(raw.min()), int(raw.max()), dtype, name)

    with native_arithmetic():
        return raw.astype(dtype)
