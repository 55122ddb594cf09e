"""
Element types and native-width arithmetic helpers.

A Matrix stores its elements in exactly one of a closed set of numpy dtypes:
signed and unsigned integers of 8 to 64 bits, and 32/64-bit floats.
Arithmetic always runs in that dtype, so integer results wrap around at the
type's width and float results follow IEEE rounding. Nothing is promoted to
a wider type or to arbitrary precision.
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any

from pymatrix.core.exceptions import DTypeError


INTEGER_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.int8),
    np.dtype(np.int16),
    np.dtype(np.int32),
    np.dtype(np.int64),
    np.dtype(np.uint8),
    np.dtype(np.uint16),
    np.dtype(np.uint32),
    np.dtype(np.uint64),
)

FLOAT_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.float32),
    np.dtype(np.float64),
)

# All element types a Matrix may hold
SUPPORTED_DTYPES: frozenset[np.dtype] = frozenset(INTEGER_DTYPES + FLOAT_DTYPES)

# Element type used when the caller does not name one
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Resolve a dtype specifier to one of the supported element types.

    Accepts anything numpy.dtype() accepts (np.int16, "uint8", float, ...).
    Python's int and float resolve to numpy's platform defaults.

    Args:
        dtype: dtype specifier

    Returns:
        The canonical supported numpy.dtype

    Raises:
        DTypeError: If the specifier is not a dtype or names a type outside
            the supported set (bool, complex, object, strings, ...)
    """
    if dtype is None:
        raise DTypeError("dtype: None is not a dtype", dtype=dtype,
                         expected=SUPPORTED_DTYPES)
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise DTypeError(f"dtype: cannot interpret {dtype!r} as a dtype: {e}",
                         dtype=dtype, expected=SUPPORTED_DTYPES) from e

    # Equality rather than hashing: 'l' and 'q' are distinct dtype objects
    # that compare equal where both are 64 bits wide.
    for supported in INTEGER_DTYPES + FLOAT_DTYPES:
        if resolved == supported:
            return supported

    names = ", ".join(d.name for d in INTEGER_DTYPES + FLOAT_DTYPES)
    raise DTypeError(
        f"dtype: {resolved} is not supported, expected one of {names}",
        dtype=resolved,
        expected=SUPPORTED_DTYPES,
    )


def is_integer_dtype(dtype: np.dtype) -> bool:
    """True for the signed and unsigned integer element types."""
    return np.issubdtype(dtype, np.integer)


def is_float_dtype(dtype: np.dtype) -> bool:
    """True for float32 and float64."""
    return np.issubdtype(dtype, np.floating)


def native_arithmetic() -> np.errstate:
    """
    Context for arithmetic that must keep the element type's own semantics.

    Integer wraparound and float overflow to inf are expected results here,
    so numpy's overflow/invalid warnings are silenced rather than reported.
    """
    return np.errstate(over='ignore', invalid='ignore', under='ignore')


def accumulate(values: NDArray[Any], dtype: np.dtype) -> np.generic:
    """
    Sum values left to right in the given dtype.

    np.sum uses pairwise summation for floats, which rounds differently from
    a running total. cumsum is a strict running total, so its last element is
    the sequentially accumulated sum.

    Args:
        values: 1D array of elements (already of dtype)
        dtype: Accumulator type

    Returns:
        Scalar of dtype; zero for an empty array
    """
    if values.size == 0:
        return dtype.type(0)
    with native_arithmetic():
        return np.cumsum(values, dtype=dtype)[-1]


def float64_to(value: float, dtype: np.dtype) -> np.generic:
    """
    Convert a float64 to the element type.

    Integer targets truncate toward zero. Values the target cannot hold
    (NaN, inf, out of range) give numpy's platform-defined cast result.
    """
    with native_arithmetic():
        return np.asarray(value, dtype=np.float64).astype(dtype)[()]
