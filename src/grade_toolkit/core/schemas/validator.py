"""
Record Validation Utilities

Validates test records handed over by the storage layer before they are
turned into models.

Stored records are camelCase dictionaries written by the desktop UI over
several releases. Fields may be missing (defaults apply) or carry numbers
as strings, but a field that is present must be usable. Validation fails
fast with a ValidationError pointing at the offending path.
"""

from __future__ import annotations

import math
from typing import Any, Optional

VALID_TEST_TYPES = ("cvte", "composite")
VALID_MODES = ("legacy", "official", "main")


class ValidationError(Exception):
    """Raised when a record fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def to_number(value: Any) -> Optional[float]:
    """
    Read a stored numeric value.

    Accepts ints, floats and numeric strings (comma or dot decimal).
    Returns None for None, blank strings and anything non-numeric or
    non-finite.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _check_number(data: dict[str, Any], key: str, path: str, errors: list[str],
                  *, positive: bool = False, non_negative: bool = False,
                  integer: bool = False) -> None:
    if key not in data or data[key] is None:
        return
    number = to_number(data[key])
    field_path = f"{path}.{key}" if path else key
    if number is None:
        errors.append(f"{field_path}: not a number ({data[key]!r})")
    elif positive and number <= 0:
        errors.append(f"{field_path}: must be positive ({number:g})")
    elif non_negative and number < 0:
        errors.append(f"{field_path}: must be non-negative ({number:g})")
    elif integer and not number.is_integer():
        errors.append(f"{field_path}: must be a whole number ({number:g})")


def _check_norm(data: Any, path: str, errors: list[str]) -> None:
    if not isinstance(data, dict):
        errors.append(f"{path}: expected an object")
        return
    _check_number(data, "maxPoints", path, errors, positive=True, integer=True)
    _check_number(data, "nTerm", path, errors, non_negative=True)
    mode = data.get("cvteCalculationMode")
    if mode is not None and str(mode).strip().lower() not in VALID_MODES:
        prefix = f"{path}." if path else ""
        errors.append(f"{prefix}cvteCalculationMode: unknown mode {mode!r}")


def validate_test_record(data: dict[str, Any]) -> None:
    """
    Validate a stored test record.

    Args:
        data: Test record from the storage layer

    Raises:
        ValidationError: If any present field is unusable; ``errors``
            lists every problem found
    """
    if not isinstance(data, dict):
        raise ValidationError("Test record must be an object", path="")

    errors: list[str] = []

    test_type = data.get("testType", "cvte")
    if test_type not in VALID_TEST_TYPES:
        errors.append(f"testType: unknown test type {test_type!r}")

    _check_norm(data, "", errors)

    elements = data.get("elements") or []
    if not isinstance(elements, list):
        errors.append("elements: expected a list")
        elements = []
    for index, element in enumerate(elements):
        path = f"elements[{index}]"
        if not isinstance(element, dict):
            errors.append(f"{path}: expected an object")
            continue
        if not str(element.get("id", "")).strip():
            errors.append(f"{path}.id: missing")
        if not str(element.get("name", "")).strip():
            errors.append(f"{path}.name: missing")
        _check_number(element, "maxPoints", path, errors, positive=True, integer=True)
        _check_number(element, "weight", path, errors, positive=True)

    formula = data.get("customFormula")
    if formula is not None and not isinstance(formula, str):
        errors.append("customFormula: expected a string")

    levels = data.get("levelNormerings") or {}
    if not isinstance(levels, dict):
        errors.append("levelNormerings: expected an object")
        levels = {}
    for code, norm in levels.items():
        if not str(code).strip():
            errors.append("levelNormerings: blank level code")
            continue
        _check_norm(norm, f"levelNormerings[{code!r}]", errors)

    if errors:
        raise ValidationError(
            f"Invalid test record {data.get('id', '')!r}: {errors[0]}",
            path=errors[0].split(":", 1)[0],
            errors=errors,
        )
