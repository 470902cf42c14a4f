################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Literal builder for matrices.

All of these create the same 2 x 2 matrix::

    matrix((2, 2), 1, 2, 3, 4)
    matrix((2, 2), [1, 2], [3, 4])
    matrix([[1, 2], [3, 4]])

Passing ``dtype`` forces the element type, e.g.
``matrix((2, 2), 1, 2, 3, 4.1, dtype=np.float32)``.
"""

from __future__ import annotations

from typing import Any
from typing import List
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import DTypeLike

from .errors import DimensionMismatch
from .errors import InvalidDimension
from .matrix import Matrix


def matrix(*args: Any, dtype: Optional[DTypeLike] = None) -> Matrix:
    """Build a matrix from a size and values, or from nested rows."""
    if not args:
        raise InvalidDimension("matrix() needs a size or a list of rows")

    head: Any = args[0]
    if len(args) == 1 and isinstance(head, (list, np.ndarray)):
        return Matrix.from_rows(head, dtype=dtype)

    values: List[Any] = []
    for group in args[1:]:
        if _is_row_group(group):
            values.extend(group)
        else:
            values.append(group)
    return Matrix.from_flat(head, values, dtype=dtype)


def _is_row_group(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        raise DimensionMismatch("matrix() values must be numbers or rows of numbers")
    return isinstance(value, (Sequence, np.ndarray))
