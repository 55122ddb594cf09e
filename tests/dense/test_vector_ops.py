"""
Tests for column-vector operations: length and dot_product.

Validates:
    - length(): sum of squares in the element type, sqrt in float64,
      truncated back for integers
    - dot_product(): running sum in the element type
    - Only self's elements drive dot_product; a shorter other is rejected,
      a longer other contributes its leading elements
"""

import numpy as np
import pytest

from pymatrix import (
    DimensionError,
    DTypeError,
    IndexOutOfBoundsError,
    Matrix,
)


# ═══════════════════════════════════════════════════════════════════════
# length
# ═══════════════════════════════════════════════════════════════════════


class TestLength:

    def test_three_four_five(self, dtype):
        v = Matrix(2, 1, 3, 4, dtype=dtype)
        result = v.length()
        assert result == 5
        assert result.dtype == dtype

    def test_integer_truncates(self):
        # sqrt(1 + 1) = 1.414... -> 1
        assert Matrix(2, 1, 1, 1, dtype=np.int64).length() == 1

    def test_float_exact(self):
        v = Matrix(2, 1, 1, 1)
        assert v.length() == np.sqrt(2.0)

    def test_float32_result(self):
        v = Matrix(2, 1, 1, 1, dtype=np.float32)
        assert v.length() == np.float32(np.sqrt(2.0))

    def test_sum_of_squares_wraps(self):
        # 17**2 = 289 wraps to 33 in uint8, sqrt(33) = 5.74 -> 5
        v = Matrix(1, 1, 17, dtype=np.uint8)
        assert v.length() == 5

    def test_empty_column(self):
        assert Matrix(0, 1, dtype=np.int32).length() == 0

    def test_unchanged(self):
        v = Matrix(2, 1, 3, 4)
        v.length()
        np.testing.assert_array_equal(v.data, [3, 4])

    @pytest.mark.parametrize("rows,columns", [(1, 2), (2, 2), (0, 0), (3, 0)])
    def test_requires_single_column(self, rows, columns):
        with pytest.raises(DimensionError, match="1 column"):
            Matrix(rows, columns).length()


# ═══════════════════════════════════════════════════════════════════════
# dot_product
# ═══════════════════════════════════════════════════════════════════════


class TestDotProduct:

    def test_example(self, dtype):
        a = Matrix(3, 1, 1, 2, 3, dtype=dtype)
        b = Matrix(3, 1, 4, 5, 6, dtype=dtype)
        result = a.dot_product(b)
        assert result == 32
        assert result.dtype == dtype

    def test_symmetric_for_equal_lengths(self, rng):
        a = Matrix.from_array(rng.integers(-10, 10, size=5))
        b = Matrix.from_array(rng.integers(-10, 10, size=5))
        assert a.dot_product(b) == b.dot_product(a)

    def test_matches_numpy(self, rng):
        a = rng.standard_normal(6)
        b = rng.standard_normal(6)
        result = Matrix.from_array(a).dot_product(Matrix.from_array(b))
        np.testing.assert_allclose(result, a @ b, rtol=1e-12)

    def test_int16_wraps(self):
        a = Matrix(2, 1, 200, 200, dtype=np.int16)
        # 40000 + 40000 = 80000, wrapped to 16 bits
        assert a.dot_product(a) == np.int16(80000 - 65536)

    def test_longer_other_uses_leading_elements(self):
        a = Matrix(2, 1, 1, 2, dtype=np.int32)
        b = Matrix(4, 1, 10, 20, 1000, 1000, dtype=np.int32)
        assert a.dot_product(b) == 50

    def test_shorter_other_is_out_of_bounds(self):
        a = Matrix(3, 1, 1, 2, 3)
        b = Matrix(2, 1, 1, 2)
        with pytest.raises(IndexOutOfBoundsError, match="out of range") as exc_info:
            a.dot_product(b)
        assert exc_info.value.shape == (2, 1)

    def test_empty_self(self):
        a = Matrix(0, 1, dtype=np.int8)
        b = Matrix(2, 1, 5, 5, dtype=np.int8)
        assert a.dot_product(b) == 0

    def test_self_must_be_column(self):
        with pytest.raises(DimensionError, match="dot_product"):
            Matrix(1, 3).dot_product(Matrix(3, 1))

    def test_other_must_be_column(self):
        with pytest.raises(DimensionError, match="dot_product"):
            Matrix(3, 1).dot_product(Matrix(1, 3))

    def test_dtype_mismatch(self):
        with pytest.raises(DTypeError):
            Matrix(2, 1, dtype=np.int32).dot_product(Matrix(2, 1, dtype=np.uint32))
