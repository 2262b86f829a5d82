"""
Report normalization for agent replies.

Stages:
1. JSON parse: text must be a JSON object
2. Shape check: known sections must match the report models

Falls back to an opaque report on any failure; never raises.
"""

from startup_validator.normalization.exceptions import (
    ReportJSONError,
    ReportParseError,
    ReportShapeError,
)
from startup_validator.normalization.normalizer import ResultNormalizer

__all__ = [
    "ResultNormalizer",
    "ReportParseError",
    "ReportJSONError",
    "ReportShapeError",
]
