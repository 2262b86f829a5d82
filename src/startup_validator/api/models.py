"""
API-specific response models for FastAPI endpoints.

Request bodies reuse RelayRequest from the domain models.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class ValidateResponse(BaseModel):
    """Response for POST /api/validate."""

    response: str = Field(
        description="Agent reply text (usually a JSON report serialized as a string)"
    )


class SecondaryValidateResponse(BaseModel):
    """Response for POST /api/secondary-validate. The agent reply is not exposed."""

    message: str = Field(
        examples=[
            "Secondary API call completed successfully",
            "Secondary API not configured",
        ]
    )
    status: Optional[Literal["success"]] = Field(default=None)


class HealthResponse(BaseModel):
    """Response for GET /api/health-check."""

    status: Literal["ok", "error"]
    message: Optional[str] = None
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(
        description="Human-readable error message",
        examples=["Missing required fields", "LYZR_API_KEY not configured"],
    )
