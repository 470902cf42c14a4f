################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for matrix comparison and display."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import Any


_LOG: logging.Logger = logging.getLogger(__name__)


# Relative tolerance used by Matrix.is_close
COMPARE_RTOL: float = 1e-9
# Absolute tolerance used by Matrix.is_close
COMPARE_ATOL: float = 1e-12

# Text printed after every element when formatting a matrix
DISPLAY_SEPARATOR: str = " "
# Text printed at the end of every row when formatting a matrix
DISPLAY_ROW_TERMINATOR: str = "\n"


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a finite, non-negative value."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MatrixParamsError(f"{name} must be a number")
    if not math.isfinite(value) or value < 0.0:
        raise MatrixParamsError(f"{name} must be finite and non-negative")


def _require_str(value: Any, name: str) -> None:
    """Require a string value."""
    if not isinstance(value, str):
        raise MatrixParamsError(f"{name} must be a string")


@dataclass(frozen=True)
class CompareParams:
    """Floating-point comparison tolerances."""

    # Relative tolerance for approximate equality
    rtol: float = COMPARE_RTOL
    # Absolute tolerance for approximate equality
    atol: float = COMPARE_ATOL


@dataclass(frozen=True)
class DisplayParams:
    """Text formatting parameters."""

    # Separator printed after every element
    separator: str = DISPLAY_SEPARATOR
    # Terminator printed after every row
    row_terminator: str = DISPLAY_ROW_TERMINATOR


@dataclass(frozen=True)
class MatrixParams:
    """Complete configuration tree for mtrs."""

    compare: CompareParams = field(default_factory=CompareParams)
    display: DisplayParams = field(default_factory=DisplayParams)

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameter tree."""
        return cls(compare=CompareParams(), display=DisplayParams())

    def replace(self, **kwargs: Any) -> MatrixParams:
        """Return a copy with the given namespaces replaced."""
        return replace(self, **kwargs)

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_non_negative(self.compare.rtol, "compare.rtol")
        _require_non_negative(self.compare.atol, "compare.atol")

        _require_str(self.display.separator, "display.separator")
        _require_str(self.display.row_terminator, "display.row_terminator")
        if not self.display.row_terminator:
            raise MatrixParamsError("display.row_terminator must be set")


_active_params: MatrixParams = MatrixParams.defaults()


def get_params() -> MatrixParams:
    """Return the process-wide active parameters."""
    return _active_params


def set_params(params: MatrixParams) -> None:
    """Validate and install new process-wide parameters."""
    global _active_params

    params.validate()
    _LOG.debug("Installing matrix params %s", params)
    _active_params = params
