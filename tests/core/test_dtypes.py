"""
Tests for element type resolution and native arithmetic helpers.

Validates:
    - resolve_dtype accepts exactly the ten supported types
    - Python int/float map to numpy defaults
    - accumulate sums left to right in the element type
    - float64_to truncates toward zero for integers
"""

import numpy as np
import pytest

from pymatrix.core.dtypes import (
    DEFAULT_DTYPE,
    FLOAT_DTYPES,
    INTEGER_DTYPES,
    SUPPORTED_DTYPES,
    accumulate,
    float64_to,
    is_float_dtype,
    is_integer_dtype,
    resolve_dtype,
)
from pymatrix.core.exceptions import DTypeError


# ═══════════════════════════════════════════════════════════════════════
# Supported set
# ═══════════════════════════════════════════════════════════════════════


class TestSupportedSet:

    def test_ten_types(self):
        assert len(SUPPORTED_DTYPES) == 10
        assert len(INTEGER_DTYPES) == 8
        assert len(FLOAT_DTYPES) == 2

    def test_default_is_float64(self):
        assert DEFAULT_DTYPE == np.float64

    def test_classification(self, dtype):
        assert is_integer_dtype(dtype) != is_float_dtype(dtype)


# ═══════════════════════════════════════════════════════════════════════
# resolve_dtype
# ═══════════════════════════════════════════════════════════════════════


class TestResolveDtype:

    def test_supported_roundtrip(self, dtype):
        assert resolve_dtype(dtype) == dtype

    @pytest.mark.parametrize("spec,expected", [
        (np.int16, np.int16),
        ("uint8", np.uint8),
        ("float32", np.float32),
        (float, np.float64),
    ])
    def test_specifiers(self, spec, expected):
        assert resolve_dtype(spec) == np.dtype(expected)

    def test_python_int_is_integer(self):
        assert is_integer_dtype(resolve_dtype(int))

    @pytest.mark.parametrize("spec", [bool, np.complex128, object, "U5", np.float16])
    def test_rejects_unsupported(self, spec):
        with pytest.raises(DTypeError, match="not supported"):
            resolve_dtype(spec)

    def test_rejects_garbage(self):
        with pytest.raises(DTypeError, match="cannot interpret"):
            resolve_dtype("not-a-dtype")

    def test_rejects_none(self):
        with pytest.raises(DTypeError):
            resolve_dtype(None)

    def test_error_carries_expected_set(self):
        with pytest.raises(DTypeError) as exc_info:
            resolve_dtype(bool)
        assert exc_info.value.expected == SUPPORTED_DTYPES


# ═══════════════════════════════════════════════════════════════════════
# accumulate
# ═══════════════════════════════════════════════════════════════════════


class TestAccumulate:

    def test_empty_is_zero(self, dtype):
        result = accumulate(np.zeros(0, dtype=dtype), dtype)
        assert result == 0
        assert result.dtype == dtype

    def test_simple_sum(self, dtype):
        result = accumulate(np.array([1, 2, 3], dtype=dtype), dtype)
        assert result == 6
        assert result.dtype == dtype

    def test_int8_wraps(self):
        dt = np.dtype(np.int8)
        result = accumulate(np.array([100, 100], dtype=dt), dt)
        assert result == np.int8(-56)

    def test_uint8_wraps(self):
        dt = np.dtype(np.uint8)
        result = accumulate(np.array([200, 100], dtype=dt), dt)
        assert result == 44

    def test_float32_sequential_rounding(self):
        """A running float32 total drops 1.0 once it reaches 2**24."""
        dt = np.dtype(np.float32)
        values = np.array([2.0 ** 24, 1.0, 1.0], dtype=dt)
        assert accumulate(values, dt) == np.float32(2.0 ** 24)


# ═══════════════════════════════════════════════════════════════════════
# float64_to
# ═══════════════════════════════════════════════════════════════════════


class TestFloat64To:

    def test_truncates_positive(self):
        assert float64_to(5.9, np.dtype(np.int32)) == 5

    def test_truncates_negative(self):
        assert float64_to(-5.9, np.dtype(np.int32)) == -5

    def test_keeps_type(self, dtype):
        assert float64_to(3.0, dtype).dtype == dtype

    def test_float32_rounds(self):
        result = float64_to(0.1, np.dtype(np.float32))
        assert result == np.float32(0.1)
