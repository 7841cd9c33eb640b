"""
Module: core.models.assessments

Purpose:
    Provides the Test dataclass as seen by the grade engine, plus the
    student profile fields the engine uses to pick a level norm.

Key Classes:
    - TestType: cvte or composite
    - Test: Immutable snapshot of a test's scoring definition
    - StudentProfile: Level-related student fields

Dependencies:
    - types.MappingProxyType (std): read-only level norm table

Used By:
    - grading.levels: Norm resolution
    - grading.controller: Grade computation
    - core.utils.serialization: Record conversion

Design Notes:
    Tests arrive from the storage layer as loosely-typed form state. They
    are converted once per computation into this frozen snapshot so a
    half-edited form can never leak into a calculation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .elements import Element
from .norms import Norm


class TestType(str, Enum):
    """How a test is scored."""

    __test__ = False  # not a pytest test class

    CVTE = "cvte"
    COMPOSITE = "composite"


def normalize_level(code: Optional[str]) -> Optional[str]:
    """
    Normalize a level code for lookups (trim + uppercase).

    Returns None for None or blank input.

    Example:
        >>> normalize_level(" havo ")
        'HAVO'
    """
    if code is None:
        return None
    normalized = code.strip().upper()
    return normalized or None


@dataclass(frozen=True)
class Test:
    """
    Scoring definition of one test.

    Attributes:
        id: Test identifier
        name: Display name
        test_type: cvte or composite
        default_norm: Norm used when no level-specific norm applies
        elements: Ordered composite elements (composite tests)
        custom_formula: Optional formula over element names (composite tests)
        level_normerings: Level code -> Norm, keys normalized on construction

    Invariants:
        - element names are unique (trimmed, case-insensitive)
        - element ids are unique
        - level_normerings is read-only after construction

    Example:
        >>> test = Test("t1", "Chapter 3", TestType.CVTE, Norm(40, 1.0))
        >>> test.has_level_normerings
        False
    """

    __test__ = False  # not a pytest test class

    id: str
    name: str
    test_type: TestType
    default_norm: Norm
    elements: Tuple[Element, ...] = ()
    custom_formula: Optional[str] = None
    level_normerings: Mapping[str, Norm] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and freeze collections on construction."""
        object.__setattr__(self, "test_type", TestType(self.test_type))
        object.__setattr__(self, "elements", tuple(self.elements))

        seen_ids: set[str] = set()
        seen_names: set[str] = set()
        for element in self.elements:
            if element.id in seen_ids:
                raise ValueError(f"Duplicate element id: {element.id!r}")
            if element.token in seen_names:
                raise ValueError(f"Duplicate element name: {element.name!r}")
            seen_ids.add(element.id)
            seen_names.add(element.token)

        levels: dict[str, Norm] = {}
        for code, norm in dict(self.level_normerings).items():
            key = normalize_level(code)
            if key is None:
                raise ValueError(f"Level code cannot be blank: {code!r}")
            if key in levels:
                raise ValueError(f"Duplicate level code after normalization: {code!r}")
            levels[key] = norm
        object.__setattr__(self, "level_normerings", MappingProxyType(levels))

    @property
    def has_level_normerings(self) -> bool:
        """True if any level-specific norm is defined."""
        return len(self.level_normerings) > 0

    @property
    def has_custom_formula(self) -> bool:
        """True if a non-blank custom formula is set."""
        return bool(self.custom_formula and self.custom_formula.strip())

    def element_by_id(self, element_id: str) -> Optional[Element]:
        """Find an element by id, or None."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None


@dataclass(frozen=True)
class StudentProfile:
    """
    Student fields that determine the level used for norm lookup.

    Attributes:
        student_id: Student identifier
        profiel1: Primary profile string, e.g. "M/K - MAVO/VMBO KADER"
        studies: Study strings, first one used as fallback
        level_override: Explicit per-student level code
    """

    student_id: int
    profiel1: Optional[str] = None
    studies: Tuple[str, ...] = ()
    level_override: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "studies", tuple(self.studies))
