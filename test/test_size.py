################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for size coercion."""

from __future__ import annotations

import pytest

from mtrs.errors import InvalidDimension
from mtrs.size import as_dim
from mtrs.size import require_positive_dim


def test_int_is_square() -> None:
    """An int size expands to a square size."""
    assert as_dim(3) == (3, 3)


def test_tuple_passes_through() -> None:
    """A (rows, cols) tuple is returned as ints."""
    assert as_dim((2, 5)) == (2, 5)


@pytest.mark.parametrize("size", [(1, 2, 3), "2", 2.0, True, (1, None)])
def test_malformed_sizes(size: object) -> None:
    """Non-integer or wrongly sized inputs are rejected."""
    with pytest.raises(InvalidDimension):
        as_dim(size)


@pytest.mark.parametrize("size", [0, -1, (0, 3), (3, 0), (2, -2)])
def test_non_positive_sizes(size: object) -> None:
    """Zero and negative dimensions are rejected for construction."""
    with pytest.raises(InvalidDimension):
        require_positive_dim(size)
