"""
Module: grading.levels

Purpose:
    Picks the norm that applies to a student: the level-specific norm
    from the test's level table when the student's level has one,
    otherwise the test's default norm.

Key Functions:
    - extract_short_level(): "M/K - MAVO/VMBO KADER" -> "M/K"
    - detect_student_level(): Override, profile or study -> level code
    - resolve_norm(): Test + level -> Norm
    - describe_norm_resolution(): Same, with the reason for the choice

Used By:
    - grading.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from grade_toolkit.core.models.assessments import StudentProfile, Test, normalize_level
from grade_toolkit.core.models.norms import Norm

LEVEL_DELIMITER = " - "

# Codes offered for the per-student level override
LEVEL_OVERRIDE_OPTIONS = (
    ("B", "B - Basis"),
    ("K", "K - Kader"),
    ("M", "M - Mavo"),
    ("H", "H - Havo"),
    ("A", "A - Atheneum"),
    ("G", "G - Gymnasium"),
)


class NormSource(str, Enum):
    """Why a particular norm was chosen for a student."""

    DEFAULT = "default"                        # test has no level table
    LEVEL = "level"                            # level-specific norm applied
    MISSING_LEVEL_NORM = "missing_level_norm"  # level known, no entry for it
    NO_LEVEL = "no_level"                      # level table exists, level unknown


@dataclass(frozen=True)
class NormResolution:
    """
    Outcome of norm resolution for one student.

    Attributes:
        norm: The norm to grade with
        level: Normalized level code used for the lookup (may be None)
        source: Reason the norm was chosen
    """

    norm: Norm
    level: Optional[str]
    source: NormSource

    @property
    def needs_attention(self) -> bool:
        """True when a level table exists but could not be applied."""
        return self.source in (NormSource.MISSING_LEVEL_NORM, NormSource.NO_LEVEL)


def extract_short_level(text: str) -> str:
    """
    Extract the short level code from a profile string.

    Examples:
        - "M/K - MAVO/VMBO KADER" -> "M/K"
        - "HAVO" -> "HAVO"
        - "a - atheneum" -> "A"
    """
    return text.split(LEVEL_DELIMITER, 1)[0].strip().upper()


def detect_student_level(profile: StudentProfile) -> Optional[str]:
    """
    Determine a student's level code.

    Precedence: explicit override, then ``profiel1``, then the first study.

    Returns:
        Normalized level code, or None if nothing usable is present.
    """
    override = normalize_level(profile.level_override)
    if override:
        return override
    if profile.profiel1 and profile.profiel1.strip():
        return normalize_level(extract_short_level(profile.profiel1))
    if profile.studies:
        return normalize_level(extract_short_level(profile.studies[0]))
    return None


def describe_norm_resolution(test: Test, student_level: Optional[str]) -> NormResolution:
    """
    Resolve the norm for a student level and report why it was chosen.

    A level norm is used whole; it is never merged with the default norm.

    Args:
        test: Test whose norms are consulted (not modified)
        student_level: Level code, any case/whitespace, or None

    Returns:
        NormResolution with the chosen norm and its source
    """
    level = normalize_level(student_level)
    if not test.has_level_normerings:
        return NormResolution(test.default_norm, level, NormSource.DEFAULT)
    if level is None:
        return NormResolution(test.default_norm, None, NormSource.NO_LEVEL)

    norm = test.level_normerings.get(level)
    if norm is None:
        return NormResolution(test.default_norm, level, NormSource.MISSING_LEVEL_NORM)
    return NormResolution(norm, level, NormSource.LEVEL)


def resolve_norm(test: Test, student_level: Optional[str]) -> Norm:
    """
    Select the norm to grade a student with.

    Example:
        >>> resolve_norm(test, " havo ") is test.level_normerings["HAVO"]
        True
    """
    return describe_norm_resolution(test, student_level).norm
