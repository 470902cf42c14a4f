################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for integer range checking in matrix arithmetic."""

from __future__ import annotations

import numpy as np
import pytest

from mtrs.builders import matrix
from mtrs.errors import IntegerOverflowError
from mtrs.errors import MatrixError
from mtrs.matrix import Matrix


def test_product_overflow_raises() -> None:
    """A product past the int64 range raises instead of wrapping to zero."""
    big: Matrix = matrix((1, 1), 2**32)
    with pytest.raises(IntegerOverflowError):
        big * big


def test_product_at_range_limit_is_exact() -> None:
    """Products that still fit int64 are exact."""
    mat: Matrix = matrix((1, 2), 2**31, 1)
    product: Matrix = mat * mat.T
    assert product.to_list() == [2**62 + 1]
    assert product.dtype == np.int64


def test_determinant_of_product() -> None:
    """det(A * A) == det(A)**2, and a product that cannot fit raises."""
    A: Matrix = matrix((2, 2), 2**20, 0, 0, 2**20)
    squared: Matrix = A * A
    assert squared.determinant() == A.determinant() ** 2
    assert squared.determinant() == 2**80
    with pytest.raises(IntegerOverflowError):
        squared * squared


def test_add_and_subtract_overflow() -> None:
    """Elementwise add and subtract are range checked."""
    top: Matrix = matrix((1, 1), np.iinfo(np.int64).max)
    bottom: Matrix = matrix((1, 1), np.iinfo(np.int64).min)
    with pytest.raises(IntegerOverflowError):
        top + Matrix.ones(1)
    with pytest.raises(IntegerOverflowError):
        bottom - Matrix.ones(1)
    assert (top - Matrix.ones(1)).to_list() == [np.iinfo(np.int64).max - 1]


def test_scalar_overflow_raises() -> None:
    """Scalar operands beyond the element range raise a MatrixError."""
    with pytest.raises(IntegerOverflowError):
        Matrix.identity(2) * 2**70
    with pytest.raises(IntegerOverflowError):
        2**70 * Matrix.identity(2)
    with pytest.raises(IntegerOverflowError):
        Matrix.identity(2) + 2**63
    with pytest.raises(MatrixError):
        Matrix.identity(2).scalar_sub(2**64)


def test_overflow_is_an_overflow_error() -> None:
    """IntegerOverflowError is both a MatrixError and an OverflowError."""
    with pytest.raises(OverflowError):
        Matrix.identity(2) * 2**70


def test_float_matrix_accepts_large_int_scalar() -> None:
    """Float matrices promote large integer scalars instead of raising."""
    result: Matrix = Matrix.identity(2, dtype=np.float64) * 2**70
    assert result[0, 0] == float(2**70)


def test_unsigned_division_by_negative() -> None:
    """Dividing an unsigned matrix by a negative int gives float quotients."""
    mat: Matrix = Matrix.identity(2, dtype=np.uint8) * 4
    result: Matrix = mat / -2
    assert result.dtype.kind == "f"
    assert result.to_list() == [-2.0, 0.0, 0.0, -2.0]


def test_unsigned_exact_division_stays_unsigned() -> None:
    """Exact positive division keeps the unsigned dtype."""
    mat: Matrix = Matrix.identity(2, dtype=np.uint8) * 4
    result: Matrix = mat / 2
    assert result.dtype == np.uint8
    assert result.to_list() == [2, 0, 0, 2]


def test_unsigned_reflected_subtraction() -> None:
    """A scalar minus an unsigned matrix is range checked."""
    mat: Matrix = Matrix.identity(2, dtype=np.uint8)
    assert (10 - mat).to_list() == [9, 10, 10, 9]
    with pytest.raises(IntegerOverflowError):
        0 - mat


def test_unsigned_negation() -> None:
    """Negating a non-zero unsigned matrix raises, a zero one does not."""
    with pytest.raises(IntegerOverflowError):
        -Matrix.identity(2, dtype=np.uint8)
    assert -Matrix.zeros(2, dtype=np.uint8) == Matrix.zeros(2)


def test_signed_negation_of_minimum() -> None:
    """-min(int64) has no int64 representation."""
    with pytest.raises(IntegerOverflowError):
        -matrix((1, 1), np.iinfo(np.int64).min)


def test_mixed_width_products_promote() -> None:
    """int8 times int64 is checked against the promoted int64 range."""
    small: Matrix = Matrix.identity(2, dtype=np.int8) * 100
    wide: Matrix = Matrix.identity(2, dtype=np.int64) * 100
    assert (small * wide).to_list() == [10000, 0, 0, 10000]
    with pytest.raises(IntegerOverflowError):
        small * small


def test_literal_beyond_64_bits() -> None:
    """Integer literals past 64 bits raise IntegerOverflowError."""
    with pytest.raises(IntegerOverflowError, match="64-bit"):
        matrix((1, 1), 2**70)
    with pytest.raises(IntegerOverflowError):
        Matrix.from_rows([[1, -(2**70)]])


def test_literal_in_unsigned_range() -> None:
    """Values above int64 but within uint64 are stored as uint64."""
    mat: Matrix = matrix((1, 1), 2**63)
    assert mat.dtype == np.uint64
    assert mat[0, 0] == 2**63


def test_literal_out_of_explicit_dtype() -> None:
    """A value that does not fit an explicit dtype raises."""
    with pytest.raises(IntegerOverflowError):
        matrix((1, 1), 300, dtype=np.int8)
    with pytest.raises(IntegerOverflowError):
        Matrix.from_rows([[300]], dtype=np.int8)
