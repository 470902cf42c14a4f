################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for YAML loading of matrix parameters."""

from __future__ import annotations

from pathlib import Path

import pytest

from mtrs.config.matrix_params import CompareParams
from mtrs.config.matrix_params import MatrixParams
from mtrs.config.matrix_params import MatrixParamsError
from mtrs.config.params_yaml import dumps_yaml
from mtrs.config.params_yaml import load_file
from mtrs.config.params_yaml import loads_yaml


def test_roundtrip() -> None:
    """Dumped params load back unchanged."""
    params: MatrixParams = MatrixParams(compare=CompareParams(rtol=1e-6, atol=1e-8))
    assert loads_yaml(dumps_yaml(params)) == params


def test_partial_document_uses_defaults() -> None:
    """Missing keys fall back to defaults."""
    params: MatrixParams = loads_yaml("compare:\n  atol: 0.5\n")
    assert params.compare.atol == 0.5
    assert params.compare.rtol == CompareParams().rtol
    assert params.display == MatrixParams.defaults().display


def test_empty_document_is_defaults() -> None:
    """An empty document yields the defaults."""
    assert loads_yaml("") == MatrixParams.defaults()


def test_unknown_keys_rejected() -> None:
    """Unknown keys raise an error."""
    with pytest.raises(MatrixParamsError):
        loads_yaml("compare:\n  epsilon: 0.1\n")
    with pytest.raises(MatrixParamsError):
        loads_yaml("solver: {}\n")


def test_invalid_values_rejected() -> None:
    """Values are validated after loading."""
    with pytest.raises(MatrixParamsError):
        loads_yaml("compare:\n  rtol: -1\n")
    with pytest.raises(MatrixParamsError):
        loads_yaml("- 1\n- 2\n")
    with pytest.raises(MatrixParamsError):
        loads_yaml("compare: [1, 2]\n")


def test_exponent_tolerances() -> None:
    """Exponent notation without a dot loads as a float tolerance."""
    params: MatrixParams = loads_yaml("compare:\n  rtol: 1e-9\n  atol: 1E-12\n")
    assert params.compare.rtol == 1e-9
    assert params.compare.atol == 1e-12
    with pytest.raises(MatrixParamsError):
        loads_yaml("compare:\n  rtol: tight\n")
    with pytest.raises(MatrixParamsError):
        loads_yaml("compare:\n  atol: -1e-3\n")


def test_malformed_yaml() -> None:
    """Unparseable YAML raises MatrixParamsError."""
    with pytest.raises(MatrixParamsError):
        loads_yaml("compare: {rtol: [\n")


def test_load_file(tmp_path: Path) -> None:
    """Params load from a file on disk."""
    path: Path = tmp_path / "mtrs.yaml"
    path.write_text('display:\n  separator: "\\t"\n', encoding="utf-8")
    assert load_file(path).display.separator == "\t"


def test_load_missing_file(tmp_path: Path) -> None:
    """A missing file raises MatrixParamsError."""
    with pytest.raises(MatrixParamsError):
        load_file(tmp_path / "missing.yaml")
