################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for matrix comparison and display."""

from __future__ import annotations

from mtrs.config.matrix_params import CompareParams
from mtrs.config.matrix_params import DisplayParams
from mtrs.config.matrix_params import MatrixParams
from mtrs.config.matrix_params import MatrixParamsError
from mtrs.config.matrix_params import get_params
from mtrs.config.matrix_params import set_params


__all__ = [
    "CompareParams",
    "DisplayParams",
    "MatrixParams",
    "MatrixParamsError",
    "get_params",
    "set_params",
]
