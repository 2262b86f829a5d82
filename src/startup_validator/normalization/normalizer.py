"""
Result normalizer for agent report text.

Two stages, both of which must pass for a StructuredReport:
1. JSON parse: the text must be a JSON object
2. Shape check: known sections must match the report models

Any failure falls back to OpaqueReport(text). Normalization never raises,
so the display layer always has something to show.
"""

import json

import structlog
from pydantic import ValidationError as PydanticValidationError

from startup_validator.models.report_models import (
    OpaqueReport,
    ReportSections,
    StructuredReport,
    ValidationReport,
)
from startup_validator.normalization.exceptions import (
    ReportJSONError,
    ReportParseError,
    ReportShapeError,
)

logger = structlog.get_logger(__name__)


class ResultNormalizer:
    """Turn raw agent text into a ValidationReport."""

    def parse_document(self, text: str) -> dict:
        """
        Parse agent text into a JSON object.

        Raises:
            ReportJSONError: If text is empty, malformed, or not an object
        """
        if not text or not text.strip():
            raise ReportJSONError(
                "Report text is empty or whitespace-only",
                raw_content=text,
                parse_error="Empty content",
            )

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            raise ReportJSONError(
                f"Failed to parse report as JSON: {e.msg}",
                raw_content=text,
                parse_error=f"{e.msg} at line {e.lineno} col {e.colno}",
            ) from e

        if not isinstance(parsed, dict):
            raise ReportJSONError(
                f"Report is not a JSON object (got {type(parsed).__name__})",
                raw_content=text,
                parse_error=f"Expected dict, got {type(parsed).__name__}",
            )
        return parsed

    def parse_sections(self, document: dict) -> ReportSections:
        """
        Check a parsed document against the report models.

        Raises:
            ReportShapeError: If a known section has the wrong shape
        """
        try:
            return ReportSections.model_validate(document)
        except PydanticValidationError as e:
            raise ReportShapeError(
                "Report does not match the expected sections",
                validation_errors=[
                    f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ],
            ) from e

    def normalize(self, text: str) -> ValidationReport:
        """
        Normalize agent text.

        Args:
            text: Response string extracted by the relay service

        Returns:
            StructuredReport when both stages pass, OpaqueReport(text) otherwise
        """
        try:
            sections = self.parse_sections(self.parse_document(text))
        except ReportParseError as e:
            logger.info(
                "Report is not structured, falling back to raw text",
                error_type=type(e).__name__,
                details=e.details,
            )
            return OpaqueReport(text=text)

        logger.debug(
            "Report normalized",
            sections=[
                name
                for name in ReportSections.model_fields
                if getattr(sections, name) is not None
            ],
        )
        return StructuredReport(sections=sections, raw_text=text)
