"""
Schemas Package

Validation of stored records before conversion into models.
"""

from .validator import ValidationError, to_number, validate_test_record

__all__ = [
    "ValidationError",
    "to_number",
    "validate_test_record",
]
