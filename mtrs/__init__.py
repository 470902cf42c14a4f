################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""A library for creating, using, and printing matrices."""

from __future__ import annotations

import logging

from mtrs.builders import matrix
from mtrs.config.matrix_params import MatrixParams
from mtrs.config.matrix_params import MatrixParamsError
from mtrs.config.matrix_params import get_params
from mtrs.config.matrix_params import set_params
from mtrs.errors import DimensionMismatch
from mtrs.errors import IntegerOverflowError
from mtrs.errors import InvalidDimension
from mtrs.errors import MatrixError
from mtrs.errors import SingularMatrixError
from mtrs.matrix import Matrix


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "DimensionMismatch",
    "IntegerOverflowError",
    "InvalidDimension",
    "Matrix",
    "MatrixError",
    "MatrixParams",
    "MatrixParamsError",
    "SingularMatrixError",
    "get_params",
    "matrix",
    "set_params",
]
