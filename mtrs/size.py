################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Size and position coercion.

A size is either an integer ``n``, read as the square ``(n, n)``, or an
explicit ``(rows, cols)`` pair. Element positions use the same convention,
so ``m[1]`` addresses the diagonal element ``m[1, 1]``.
"""

from __future__ import annotations

import numbers
from typing import Tuple
from typing import Union

from .errors import InvalidDimension


Size = Union[int, Tuple[int, int]]


def _as_index(value: object, name: str) -> int:
    """Return value as a plain int, rejecting bools and non-integrals."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    return int(value)


def as_dim(size: object, name: str = "size") -> Tuple[int, int]:
    """Return a (rows, cols) pair for an int or 2-tuple size."""
    if isinstance(size, tuple):
        if len(size) != 2:
            raise InvalidDimension(f"{name} must be (rows, cols), got {size!r}")
        return (_as_index(size[0], f"{name}[0]"), _as_index(size[1], f"{name}[1]"))

    n: int = _as_index(size, name)
    return (n, n)


def require_positive_dim(size: object, name: str = "size") -> Tuple[int, int]:
    """Return a (rows, cols) pair, requiring both parts to be at least 1."""
    rows: int
    cols: int
    rows, cols = as_dim(size, name)
    if rows <= 0 or cols <= 0:
        raise InvalidDimension(f"{name} must be positive, got {(rows, cols)}")
    return (rows, cols)
