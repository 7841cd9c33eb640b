"""
Utils Package

Record (dict) <-> model conversion at the storage boundary.
"""

from .serialization import (
    dump_test,
    element_scores_from_records,
    element_scores_to_records,
    load_test,
    norm_from_record,
    norm_to_record,
    normalize_class_groups,
)

__all__ = [
    "dump_test",
    "element_scores_from_records",
    "element_scores_to_records",
    "load_test",
    "norm_from_record",
    "norm_to_record",
    "normalize_class_groups",
]
