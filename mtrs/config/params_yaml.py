################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of mtrs
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""YAML loading and dumping for the matrix parameter tree."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any
from typing import cast

import yaml

from .matrix_params import CompareParams
from .matrix_params import DisplayParams
from .matrix_params import MatrixParams
from .matrix_params import MatrixParamsError


_LOG: logging.Logger = logging.getLogger(__name__)


def params_to_dict(params: MatrixParams) -> dict[str, object]:
    """Convert a parameter tree to plain nested dicts."""
    return cast(dict[str, object], asdict(params))


def params_from_dict(data: dict[str, object]) -> MatrixParams:
    """Build and validate a parameter tree, filling missing keys from defaults."""
    _require_keys("root", data, {"compare", "display"})

    compare_data: dict[str, object] = _require_mapping(
        data.get("compare", {}), "compare"
    )
    _require_keys("compare", compare_data, {"rtol", "atol"})
    compare_data = {key: _coerce_float(value) for key, value in compare_data.items()}

    display_data: dict[str, object] = _require_mapping(
        data.get("display", {}), "display"
    )
    _require_keys("display", display_data, {"separator", "row_terminator"})

    params: MatrixParams = MatrixParams(
        compare=CompareParams(**compare_data),  # type: ignore[arg-type]
        display=DisplayParams(**display_data),  # type: ignore[arg-type]
    )
    params.validate()
    return params


def dumps_yaml(params: MatrixParams) -> str:
    """Serialize a parameter tree to deterministic YAML."""
    safe_dump: Any = cast(Any, yaml.safe_dump)
    return safe_dump(
        params_to_dict(params),
        sort_keys=False,
        indent=2,
        default_flow_style=False,
    )


def loads_yaml(text: str) -> MatrixParams:
    """Parse a parameter tree from YAML text."""
    try:
        loaded: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MatrixParamsError(f"Invalid YAML: {exc}") from exc

    if loaded is None:
        return MatrixParams.defaults()
    if not isinstance(loaded, dict):
        raise MatrixParamsError("YAML root must be a mapping")
    return params_from_dict(loaded)


def load_file(path: str | Path) -> MatrixParams:
    """Read a parameter tree from a YAML file."""
    yaml_path: Path = Path(path)
    _LOG.debug("Loading matrix params from %s", yaml_path)
    try:
        text: str = yaml_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MatrixParamsError(f"Unable to read {yaml_path}: {exc}") from exc
    return loads_yaml(text)


def _require_keys(scope: str, data: dict[str, object], allowed: set[str]) -> None:
    unknown: set[str] = set(data) - allowed
    if unknown:
        raise MatrixParamsError(f"Unknown {scope} keys: {sorted(unknown)}")


def _require_mapping(value: object, name: str) -> dict[str, object]:
    if not isinstance(value, dict):
        raise MatrixParamsError(f"{name} must be a mapping")
    return value


def _coerce_float(value: object) -> object:
    # PyYAML reads exponents without a dot (1e-9) as strings
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value
