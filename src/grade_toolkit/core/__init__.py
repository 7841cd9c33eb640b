"""
Grade Toolkit Core Package

Shared data models, record validation and record serialization for the
grade engine. The models are the single source of truth passed between
the calculators; raw storage records only appear at the serialization
boundary (``grade_toolkit.core.utils``).
"""

from .models import (
    CalculationMode,
    Element,
    ElementScore,
    Norm,
    StudentProfile,
    Test,
    TestType,
)

__all__ = [
    "CalculationMode",
    "Element",
    "ElementScore",
    "Norm",
    "StudentProfile",
    "Test",
    "TestType",
]
