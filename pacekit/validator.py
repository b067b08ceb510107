"""Argument checks shared by the converters' callers.

Each check raises one of the :mod:`pacekit.errors` exceptions and otherwise
returns nothing; inputs are never modified.
"""
from __future__ import annotations

from typing import Any

from pacekit.errors import InvalidType, InvalidUnit, RequiredParameterMissing
from pacekit.log import log_event
from pacekit.units import UNIT_SETS

_KIND_CHECKS = {
    "number": lambda value: isinstance(value, (int, float)) and not isinstance(value, bool),
    "string": lambda value: isinstance(value, str),
}


def require_argument(value: Any, name: str) -> None:
    if value is None:
        log_event("validation_failed", param=name, code=RequiredParameterMissing.code)
        raise RequiredParameterMissing(name)


def check_type(value: Any, name: str, expected_kind: str) -> None:
    try:
        matches = _KIND_CHECKS[expected_kind]
    except KeyError:
        raise ValueError(f"unknown kind: {expected_kind}") from None
    if not matches(value):
        log_event("validation_failed", param=name, code=InvalidType.code)
        raise InvalidType(name, expected_kind, value)


def check_unit(unit: str, name: str, category: str) -> None:
    try:
        allowed = UNIT_SETS[category]
    except KeyError:
        raise ValueError(f"unknown unit category: {category}") from None
    if not isinstance(unit, str) or unit not in allowed:
        log_event("validation_failed", param=name, code=InvalidUnit.code, unit=unit)
        raise InvalidUnit(name, unit, sorted(allowed))
