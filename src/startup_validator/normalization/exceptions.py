"""
Normalization-specific exceptions.

These never leave the normalizer: any of them turns the agent text into an
OpaqueReport. They exist so each failure is logged with its reason.
"""

from typing import Any


class ReportParseError(Exception):
    """
    Base exception for report normalization failures.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ReportJSONError(ReportParseError):
    """
    Agent text is not a JSON object.

    Raised for malformed syntax, empty text, or a JSON value of another type.
    """

    def __init__(self, message: str, raw_content: str | None = None, parse_error: str | None = None):
        details = {}
        if raw_content:
            # First 500 chars are enough to debug, avoid excessive logging
            details["content_snippet"] = raw_content[:500]
        if parse_error:
            details["parse_error"] = parse_error

        super().__init__(message, details)


class ReportShapeError(ReportParseError):
    """
    Agent JSON does not match the report sections.

    e.g. "quick_verdict" is a string instead of an object.
    """

    def __init__(self, message: str, validation_errors: list[str] | None = None):
        details = {}
        if validation_errors:
            details["validation_errors"] = validation_errors[:20]
        super().__init__(message, details)
