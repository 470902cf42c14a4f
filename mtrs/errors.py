################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by matrix construction and arithmetic."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for errors raised by mtrs."""


class DimensionMismatch(MatrixError, ValueError):
    """Raised when operand shapes are incompatible for an operation."""


class InvalidDimension(MatrixError, ValueError):
    """Raised when a constructor receives a non-positive or malformed size."""


class SingularMatrixError(MatrixError, ArithmeticError):
    """Raised when inverting a matrix with a zero determinant."""


class IntegerOverflowError(MatrixError, OverflowError):
    """Raised when an integer result does not fit the matrix element type."""
