"""
Record Serialization Utilities

Converts between the camelCase records kept by the storage layer and the
immutable models used by the grade engine.

Records come from several releases of the desktop app:
- CvTE fields may be missing (defaults from GradingConfig apply)
- numbers may be stored as strings
- class groups were once stored as ``className`` / ``classNames``

Conversion goes record -> validate -> model. Calculated values are never
read back from a record; they are always recomputed.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from grade_toolkit.config import DEFAULT_CONFIG, GradingConfig
from ..models.assessments import Test, TestType
from ..models.elements import Element, ElementScore
from ..models.norms import CalculationMode, Norm
from ..schemas.validator import ValidationError, to_number, validate_test_record

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Norms
# ─────────────────────────────────────────────────────────────────────────────

def norm_from_record(
    data: dict[str, Any],
    config: GradingConfig = DEFAULT_CONFIG,
) -> Norm:
    """
    Build a Norm from ``maxPoints``, ``nTerm`` and ``cvteCalculationMode``.

    Missing values fall back to the config defaults (10 points, N = 1,
    legacy mode).

    Raises:
        ValueError: If a present value violates Norm invariants
    """
    max_points = to_number(data.get("maxPoints"))
    n_term = to_number(data.get("nTerm"))
    mode = data.get("cvteCalculationMode") or config.default_mode
    return Norm(
        max_points=int(max_points) if max_points is not None else config.default_max_points,
        n_term=n_term if n_term is not None else config.default_n_term,
        mode=CalculationMode.coerce(mode),
    )


def norm_to_record(norm: Norm) -> dict[str, Any]:
    """Serialize a Norm to its stored shape."""
    return {
        "maxPoints": norm.max_points,
        "nTerm": norm.n_term,
        "cvteCalculationMode": norm.mode.value,
    }


# ─────────────────────────────────────────────────────────────────────────────
# Elements
# ─────────────────────────────────────────────────────────────────────────────

def element_from_record(data: dict[str, Any]) -> Element:
    max_points = to_number(data.get("maxPoints"))
    weight = to_number(data.get("weight"))
    order = to_number(data.get("order"))
    return Element(
        id=str(data["id"]),
        name=str(data["name"]),
        max_points=int(max_points) if max_points is not None else 10,
        weight=weight if weight is not None else 1.0,
        order=int(order) if order is not None else 0,
    )


def element_to_record(element: Element) -> dict[str, Any]:
    return {
        "id": element.id,
        "name": element.name,
        "maxPoints": element.max_points,
        "weight": element.weight,
        "order": element.order,
    }


def element_scores_from_records(records: Iterable[dict[str, Any]] | None) -> list[ElementScore]:
    """
    Read ``{elementId, pointsEarned}`` entries.

    Entries without a usable number are skipped: an empty input field
    means "not scored", not zero.
    """
    scores: list[ElementScore] = []
    for record in records or []:
        points = to_number(record.get("pointsEarned"))
        if points is None:
            logger.debug(f"Skipping unscored element {record.get('elementId')!r}")
            continue
        scores.append(ElementScore(str(record["elementId"]), points))
    return scores


def element_scores_to_records(scores: Iterable[ElementScore]) -> list[dict[str, Any]]:
    return [
        {"elementId": score.element_id, "pointsEarned": score.points_earned}
        for score in scores
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Tests
# ─────────────────────────────────────────────────────────────────────────────

def load_test(
    data: dict[str, Any],
    config: GradingConfig = DEFAULT_CONFIG,
) -> Test:
    """
    Build a Test snapshot from a stored record.

    Elements are ordered by their ``order`` field.

    Args:
        data: Stored test record
        config: Source of defaults for missing norm fields

    Returns:
        Test instance

    Raises:
        ValidationError: If the record is malformed
    """
    validate_test_record(data)

    elements = sorted(
        (element_from_record(e) for e in data.get("elements") or []),
        key=lambda element: element.order,
    )
    levels = {
        code: norm_from_record(norm, config)
        for code, norm in (data.get("levelNormerings") or {}).items()
    }
    formula = data.get("customFormula")

    try:
        return Test(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            test_type=TestType(data.get("testType", "cvte")),
            default_norm=norm_from_record(data, config),
            elements=tuple(elements),
            custom_formula=formula if formula and formula.strip() else None,
            level_normerings=levels,
        )
    except ValueError as exc:
        raise ValidationError(f"Invalid test record {data.get('id', '')!r}: {exc}") from exc


def dump_test(test: Test) -> dict[str, Any]:
    """
    Serialize the scoring fields of a Test.

    Only the fields owned by the grade engine are written; the storage
    layer merges them into its full record.
    """
    record: dict[str, Any] = {
        "id": test.id,
        "name": test.name,
        "testType": test.test_type.value,
        **norm_to_record(test.default_norm),
    }
    if test.test_type is TestType.COMPOSITE:
        record["elements"] = [element_to_record(e) for e in test.elements]
        record["customFormula"] = test.custom_formula or ""
    if test.has_level_normerings:
        record["levelNormerings"] = {
            code: norm_to_record(norm) for code, norm in test.level_normerings.items()
        }
    return record


def normalize_class_groups(data: dict[str, Any]) -> list[str]:
    """
    Collect a record's class groups, including legacy fields.

    Precedence: ``classGroups``, then ``classNames``, then ``className``.
    Values are trimmed, blanks dropped and duplicates removed in order.

    Example:
        >>> normalize_class_groups({"className": " 3B "})
        ['3B']
    """
    candidates = (
        data.get("classGroups")
        or data.get("classNames")
        or ([data["className"]] if data.get("className") else [])
    )
    groups: list[str] = []
    for value in candidates:
        group = str(value).strip()
        if group and group not in groups:
            groups.append(group)
    return groups
