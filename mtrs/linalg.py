################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import logging
import numbers
from typing import Any
from typing import List
from typing import Sequence

from .errors import DimensionMismatch
from .errors import SingularMatrixError


_LOG: logging.Logger = logging.getLogger(__name__)


class LinearAlgebra:
    """Square-matrix helpers backing Matrix.determinant and Matrix.inverse.

    Responsibility:
        Provide determinant and inverse on nested row lists without going
        through a floating-point backend, so integer inputs stay exact.

    Inputs/outputs:
        - Matrices are row lists of shape (n, n) holding Python scalars.
        - determinant returns a scalar of the input's type family.
        - inverse always returns floating-point rows.

    Determinism and edge cases:
        - A row of zero pivots yields a zero determinant, never an error.
        - inverse raises SingularMatrixError when the determinant is zero.
        - Non-square input raises DimensionMismatch.

    Equations:
        Fraction-free (Bareiss) elimination:
            a_ij <- (a_ij * a_kk - a_ik * a_kj) / a_(k-1)(k-1)
            det(A) = sign * a_(n-1)(n-1)
    """

    @staticmethod
    def determinant(matrix: Sequence[Sequence[Any]]) -> Any:
        LinearAlgebra._validate_square(matrix, "determinant")
        size: int = len(matrix)
        exact: bool = LinearAlgebra._is_integral(matrix)
        a: List[List[Any]] = [list(row) for row in matrix]
        sign: int = 1
        prev: Any = 1
        for k in range(size - 1):
            if a[k][k] == 0:
                swap: int | None = None
                for i in range(k + 1, size):
                    if a[i][k] != 0:
                        swap = i
                        break
                if swap is None:
                    return a[k][k]
                a[k], a[swap] = a[swap], a[k]
                sign = -sign
            for i in range(k + 1, size):
                for j in range(k + 1, size):
                    num: Any = a[i][j] * a[k][k] - a[i][k] * a[k][j]
                    # Bareiss guarantees exact division for integers
                    a[i][j] = num // prev if exact else num / prev
            prev = a[k][k]
        return sign * a[size - 1][size - 1]

    @staticmethod
    def inverse(matrix: Sequence[Sequence[Any]]) -> List[List[Any]]:
        det: Any = LinearAlgebra.determinant(matrix)
        if det == 0:
            _LOG.debug("Refusing to invert singular %dx%d matrix", len(matrix), len(matrix))
            raise SingularMatrixError("Matrix is singular (determinant is zero)")

        size: int = len(matrix)
        aug: List[List[Any]] = [
            [value * 1.0 for value in row] + [1.0 if i == j else 0.0 for j in range(size)]
            for i, row in enumerate(matrix)
        ]
        for col in range(size):
            pivot_row: int = max(range(col, size), key=lambda r: abs(aug[r][col]))
            if aug[pivot_row][col] == 0.0:
                raise SingularMatrixError("Matrix is singular (zero pivot)")
            aug[col], aug[pivot_row] = aug[pivot_row], aug[col]

            pivot: Any = aug[col][col]
            aug[col] = [value / pivot for value in aug[col]]
            for row in range(size):
                if row == col:
                    continue
                factor: Any = aug[row][col]
                if factor == 0.0:
                    continue
                aug[row] = [a - factor * b for a, b in zip(aug[row], aug[col])]

        return [row[size:] for row in aug]

    @staticmethod
    def _validate_square(matrix: Sequence[Sequence[Any]], name: str) -> None:
        if not matrix:
            raise DimensionMismatch(f"{name} requires a non-empty matrix")
        size: int = len(matrix)
        for row in matrix:
            if len(row) != size:
                raise DimensionMismatch(
                    f"{name} requires a square matrix, got {size}x{len(row)}"
                )

    @staticmethod
    def _is_integral(matrix: Sequence[Sequence[Any]]) -> bool:
        return all(isinstance(value, numbers.Integral) for row in matrix for value in row)
