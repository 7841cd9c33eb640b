"""
Core Models Package

Immutable, validated data models handed to the grade engine.

All models in this package are frozen dataclasses. A test definition is
converted into these models once per computation, so every calculation
works on a consistent snapshot and the models can be shared between
threads without locking.

| Stored record field | Model | Notes |
|---------------------|-------|-------|
| `maxPoints`, `nTerm`, `cvteCalculationMode` | `Norm` | Validated, mode is an enum |
| `elements[]` | `Element` | Name doubles as formula token |
| `elementGrades[]` | `ElementScore` | May exceed element maximum |
| test record | `Test` | Level keys normalized, read-only |
"""

from .norms import CalculationMode, Norm
from .elements import Element, ElementScore
from .assessments import StudentProfile, Test, TestType, normalize_level

__all__ = [
    "CalculationMode",
    "Norm",
    "Element",
    "ElementScore",
    "StudentProfile",
    "Test",
    "TestType",
    "normalize_level",
]
