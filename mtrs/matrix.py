################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense, immutable two-dimensional matrices."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike

from .config.matrix_params import CompareParams
from .config.matrix_params import DisplayParams
from .config.matrix_params import get_params
from .errors import DimensionMismatch
from .errors import IntegerOverflowError
from .errors import InvalidDimension
from .errors import MatrixError
from .linalg import LinearAlgebra
from .size import Size
from .size import as_dim
from .size import require_positive_dim


# Array kinds accepted as matrix elements: signed, unsigned, float, complex
NUMERIC_KINDS: str = "iufc"
# Array kinds whose arithmetic is checked for overflow
INTEGER_KINDS: str = "iu"


def _require_scalar(value: Any, name: str) -> None:
    """Raise TypeError unless value is a numeric scalar."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise TypeError(f"{name} must be a numeric scalar, got {type(value).__name__}")


def _require_matrix(value: Any, name: str) -> None:
    """Raise TypeError unless value is a Matrix."""
    if not isinstance(value, Matrix):
        raise TypeError(f"{name} must be a Matrix, got {type(value).__name__}")


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _fits(exact: np.ndarray, dtype: np.dtype) -> bool:
    """Return True when every Python int in exact is representable in dtype."""
    info: np.iinfo = np.iinfo(dtype)
    values: List[int] = exact.ravel().tolist()
    return min(values) >= info.min and max(values) <= info.max


def _from_exact(exact: np.ndarray, dtype: np.dtype, name: str) -> Matrix:
    """Narrow an object array of exact integers to dtype, or raise on overflow."""
    if not _fits(exact, dtype):
        raise IntegerOverflowError(f"{name} result does not fit in {dtype}")
    return Matrix(exact.astype(dtype))


@dataclass(frozen=True, eq=False)
class Matrix:
    """Dense row-major matrix with immutable value semantics.

    Attributes:
        data: Read-only array of shape (rows, cols), owned by this matrix
    """

    data: np.ndarray

    # Keep numpy from broadcasting over a Matrix operand
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        """Copy the input, validate its shape and dtype, and freeze it."""
        try:
            array: np.ndarray = np.array(self.data, copy=True)
        except ValueError as exc:
            raise DimensionMismatch(f"Matrix rows must have equal length: {exc}") from exc

        if array.ndim != 2:
            raise DimensionMismatch(f"Matrix data must be 2D, got shape {array.shape}")
        if array.shape[0] == 0 or array.shape[1] == 0:
            raise InvalidDimension(f"Matrix dimensions must be positive, got {array.shape}")
        if array.dtype.kind == "O" and all(_is_integer(v) for v in array.ravel().tolist()):
            # numpy falls back to object arrays for ints beyond 64 bits
            array = np.array(array.tolist())
            if array.dtype.kind not in INTEGER_KINDS:
                raise IntegerOverflowError(
                    "Integer elements do not fit in a 64-bit integer type"
                )
        if array.dtype.kind not in NUMERIC_KINDS:
            raise MatrixError(f"Matrix elements must be numeric, got dtype {array.dtype}")

        array.setflags(write=False)
        object.__setattr__(self, "data", array)

    #
    # Construction
    #

    @classmethod
    def identity(cls, n: int, dtype: DTypeLike = int) -> Matrix:
        """Return an n x n matrix with ones on the diagonal."""
        rows: int
        cols: int
        rows, cols = require_positive_dim(n, "n")
        if rows != cols:
            raise InvalidDimension(f"identity requires a square size, got {(rows, cols)}")
        return cls(np.eye(rows, dtype=dtype))

    @classmethod
    def from_flat(
        cls,
        size: Size,
        values: Iterable[Any],
        dtype: Optional[DTypeLike] = None,
    ) -> Matrix:
        """Build a matrix from its size and row-major values."""
        rows: int
        cols: int
        rows, cols = require_positive_dim(size)
        try:
            flat: np.ndarray = np.asarray(list(values), dtype=dtype)
        except OverflowError as exc:
            raise IntegerOverflowError(f"values do not fit in {dtype}: {exc}") from exc
        if flat.ndim != 1:
            raise DimensionMismatch(f"values must be a flat sequence, got shape {flat.shape}")
        if flat.size != rows * cols:
            raise DimensionMismatch(
                f"({rows}, {cols}) matrix needs {rows * cols} values, got {flat.size}"
            )
        return cls(flat.reshape((rows, cols)))

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Any]],
        dtype: Optional[DTypeLike] = None,
    ) -> Matrix:
        """Build a matrix from a sequence of equal-length rows."""
        if len(rows) == 0:
            raise InvalidDimension("Matrix needs at least one row")
        for row in rows:
            if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
                raise DimensionMismatch("Every row must be a sequence of values")
        lengths: set[int] = {len(row) for row in rows}
        if len(lengths) != 1:
            raise DimensionMismatch(f"Rows must have equal length, got {sorted(lengths)}")
        try:
            array: np.ndarray = np.asarray([list(row) for row in rows], dtype=dtype)
        except OverflowError as exc:
            raise IntegerOverflowError(f"rows do not fit in {dtype}: {exc}") from exc
        return cls(array)

    @classmethod
    def zeros(cls, size: Size, dtype: DTypeLike = int) -> Matrix:
        """Return a matrix of the given size filled with zeros."""
        return cls(np.zeros(require_positive_dim(size), dtype=dtype))

    @classmethod
    def ones(cls, size: Size, dtype: DTypeLike = int) -> Matrix:
        """Return a matrix of the given size filled with ones."""
        return cls(np.ones(require_positive_dim(size), dtype=dtype))

    #
    # Access
    #

    @property
    def rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def cols(self) -> int:
        return int(self.data.shape[1])

    @property
    def size(self) -> Tuple[int, int]:
        """Return the (rows, cols) dimensions."""
        return (self.rows, self.cols)

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def __getitem__(self, pos: Any) -> Any:
        """Return the element at (row, col), or at (n, n) for an int n."""
        row: int
        col: int
        row, col = as_dim(pos, "pos")
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Position {(row, col)} out of range for {self.size} matrix")
        return self.data[row, col].item()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def to_list(self) -> List[Any]:
        """Return the elements as a flat row-major list."""
        return self.data.ravel().tolist()

    def to_rows(self) -> List[List[Any]]:
        """Return the elements as a list of rows."""
        return self.data.tolist()

    def column(self, index: int) -> List[Any]:
        """Return a single column."""
        if not 0 <= index < self.cols:
            raise IndexError(f"Column {index} out of range for {self.size} matrix")
        return self.data[:, index].tolist()

    def columns(self) -> List[List[Any]]:
        """Return every column, left to right."""
        return self.data.T.tolist()

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the underlying array."""
        return self.data.copy()

    #
    # Equality
    #

    def equals(self, other: Matrix) -> bool:
        """Return True when sizes match and every element is exactly equal."""
        _require_matrix(other, "other")
        return self.size == other.size and bool(np.array_equal(self.data, other.data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.size, tuple(self.to_list())))

    def is_close(
        self,
        other: Matrix,
        rtol: Optional[float] = None,
        atol: Optional[float] = None,
    ) -> bool:
        """Return True when sizes match and elements agree within tolerance."""
        _require_matrix(other, "other")
        compare: CompareParams = get_params().compare
        if self.size != other.size:
            return False
        return bool(
            np.allclose(
                self.data,
                other.data,
                rtol=compare.rtol if rtol is None else rtol,
                atol=compare.atol if atol is None else atol,
            )
        )

    #
    # Matrix arithmetic
    #

    def multiply(self, other: Matrix) -> Matrix:
        """Return the matrix product self x other."""
        if self.cols != other.rows:
            raise DimensionMismatch(
                f"Cannot multiply {self.size} by {other.size}: "
                f"{self.cols} columns vs {other.rows} rows"
            )
        dtype: Optional[np.dtype] = self._integer_result_dtype(other)
        if dtype is not None:
            return _from_exact(self._exact() @ other._exact(), dtype, "multiply")
        return Matrix(self.data @ other.data)

    def add(self, other: Matrix) -> Matrix:
        """Return the elementwise sum."""
        self._require_same_size(other, "add")
        dtype: Optional[np.dtype] = self._integer_result_dtype(other)
        if dtype is not None:
            return _from_exact(self._exact() + other._exact(), dtype, "add")
        return Matrix(self.data + other.data)

    def subtract(self, other: Matrix) -> Matrix:
        """Return the elementwise difference."""
        self._require_same_size(other, "subtract")
        dtype: Optional[np.dtype] = self._integer_result_dtype(other)
        if dtype is not None:
            return _from_exact(self._exact() - other._exact(), dtype, "subtract")
        return Matrix(self.data - other.data)

    #
    # Scalar arithmetic
    #

    def scalar_add(self, value: Any) -> Matrix:
        _require_scalar(value, "value")
        dtype: Optional[np.dtype] = self._integer_scalar_dtype(value)
        if dtype is not None:
            return _from_exact(self._exact() + int(value), dtype, "scalar_add")
        return Matrix(self.data + value)

    def scalar_sub(self, value: Any) -> Matrix:
        _require_scalar(value, "value")
        dtype: Optional[np.dtype] = self._integer_scalar_dtype(value)
        if dtype is not None:
            return _from_exact(self._exact() - int(value), dtype, "scalar_sub")
        return Matrix(self.data - value)

    def scalar_mul(self, value: Any) -> Matrix:
        _require_scalar(value, "value")
        dtype: Optional[np.dtype] = self._integer_scalar_dtype(value)
        if dtype is not None:
            return _from_exact(self._exact() * int(value), dtype, "scalar_mul")
        return Matrix(self.data * value)

    def scalar_div(self, value: Any) -> Matrix:
        """Divide every element by value.

        Integer matrices divided exactly by an integer stay integer when the
        quotient fits the element type, otherwise the result is true division.
        """
        _require_scalar(value, "value")
        if value == 0:
            raise ZeroDivisionError("Matrix division by zero")
        dtype: Optional[np.dtype] = self._integer_scalar_dtype(value)
        if dtype is None:
            return Matrix(self.data / value)

        divisor: int = int(value)
        exact: np.ndarray = self._exact()
        if not np.any(exact % divisor):
            quotient: np.ndarray = exact // divisor
            if _fits(quotient, dtype):
                return Matrix(quotient.astype(dtype))
        return Matrix(self.data.astype(np.float64) / float(divisor))

    #
    # Operators
    #

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, numbers.Number) and not isinstance(other, bool):
            return self.scalar_mul(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Number) and not isinstance(other, bool):
            return self.scalar_mul(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.add(other)
        if isinstance(other, numbers.Number) and not isinstance(other, bool):
            return self.scalar_add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Number) and not isinstance(other, bool):
            return self.scalar_add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.subtract(other)
        if isinstance(other, numbers.Number) and not isinstance(other, bool):
            return self.scalar_sub(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Number) and not isinstance(other, bool):
            dtype: Optional[np.dtype] = self._integer_scalar_dtype(other)
            if dtype is not None:
                return _from_exact(int(other) - self._exact(), dtype, "subtract")
            return Matrix(other - self.data)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Number) and not isinstance(other, bool):
            return self.scalar_div(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        if self.dtype.kind in INTEGER_KINDS:
            return _from_exact(-self._exact(), self.dtype, "negate")
        return Matrix(-self.data)

    #
    # Shape and linear algebra
    #

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix(self.data.T)

    def resized(self, size: Size) -> Matrix:
        """Return the row-major data truncated or zero-padded to a new size."""
        rows: int
        cols: int
        rows, cols = require_positive_dim(size)
        flat: np.ndarray = np.zeros(rows * cols, dtype=self.dtype)
        count: int = min(flat.size, self.data.size)
        flat[:count] = self.data.ravel()[:count]
        return Matrix(flat.reshape((rows, cols)))

    def determinant(self) -> Any:
        """Return the determinant, exact for integer matrices."""
        return LinearAlgebra.determinant(self.to_rows())

    def inverse(self) -> Matrix:
        """Return the inverse as a floating-point matrix."""
        return Matrix(np.asarray(LinearAlgebra.inverse(self.to_rows())))

    #
    # Display
    #

    def __str__(self) -> str:
        display: DisplayParams = get_params().display
        lines: List[str] = [
            "".join(f"{value}{display.separator}" for value in row) + display.row_terminator
            for row in self.to_rows()
        ]
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Matrix({self.size}, {self.to_list()})"

    def _exact(self) -> np.ndarray:
        """Return the elements as an object array of Python scalars."""
        return np.array(self.data.tolist(), dtype=object)

    def _integer_result_dtype(self, other: Matrix) -> Optional[np.dtype]:
        """Return the promoted integer dtype for two integer matrices, else None."""
        if self.dtype.kind not in INTEGER_KINDS or other.dtype.kind not in INTEGER_KINDS:
            return None
        dtype: np.dtype = np.result_type(self.dtype, other.dtype)
        return dtype if dtype.kind in INTEGER_KINDS else None

    def _integer_scalar_dtype(self, value: Any) -> Optional[np.dtype]:
        """Return the integer result dtype for an integer scalar operand, else None."""
        if self.dtype.kind not in INTEGER_KINDS or not _is_integer(value):
            return None
        if isinstance(value, np.integer):
            dtype: np.dtype = np.result_type(self.dtype, value.dtype)
            return dtype if dtype.kind in INTEGER_KINDS else None
        # Python ints take the matrix dtype
        return self.dtype

    def _require_same_size(self, other: Matrix, name: str) -> None:
        if self.size != other.size:
            raise DimensionMismatch(f"Cannot {name} {self.size} and {other.size} matrices")
