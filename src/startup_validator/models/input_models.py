"""
Input data models for the Startup Idea Validator.

SubmissionRequest is what a user fills in on the form. RelayRequest is the
wire body the client sends to the relay service, and AgentPayload is what the
relay service sends to the hosted agent.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_NAME_LENGTH = 2
MIN_IDEA_LENGTH = 50


class FormValidationError(Exception):
    """
    Raised when local form validation fails.

    Carries one message per offending field. Never reaches the retry policy:
    it is raised before any network call is made.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = field_errors
        super().__init__(
            "Invalid submission: " + ", ".join(sorted(field_errors))
        )


class SubmissionRequest(BaseModel):
    """
    A single startup-idea submission.

    Immutable once constructed; use SubmissionRequest.from_form() to get
    field-level messages instead of a pydantic ValidationError.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Founder full name")
    email: str = Field(..., description="Contact email address")
    idea: str = Field(..., description="Free-text description of the startup idea")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        if len(value.strip()) < MIN_NAME_LENGTH:
            raise ValueError("Name must be at least 2 characters")
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Please enter a valid email address")
        return value

    @field_validator("idea")
    @classmethod
    def _check_idea(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Startup idea description is required")
        if len(value.strip()) < MIN_IDEA_LENGTH:
            raise ValueError(
                "Please provide a more detailed description (at least 50 characters)"
            )
        return value

    @classmethod
    def from_form(cls, name: str, email: str, idea: str) -> "SubmissionRequest":
        """
        Build a request from raw form values.

        Raises:
            FormValidationError: With every failing field and its message
        """
        try:
            return cls(name=name, email=email, idea=idea)
        except ValidationError as e:
            field_errors: dict[str, str] = {}
            for error in e.errors():
                field = str(error["loc"][0]) if error["loc"] else "form"
                message = error["msg"]
                # pydantic prefixes ValueError messages
                if message.startswith("Value error, "):
                    message = message[len("Value error, "):]
                field_errors.setdefault(field, message)
            raise FormValidationError(field_errors) from e


class RelayRequest(BaseModel):
    """
    Body of POST /api/validate and POST /api/secondary-validate.

    session_id is optional: the client sends one per submission so that
    retries stay in the same agent conversation. The relay generates one
    when it is missing.
    """

    name: str = Field(..., min_length=1)
    email_id: str = Field(..., min_length=1)
    idea: str = Field(..., min_length=1)
    session_id: Optional[str] = Field(default=None)

    @classmethod
    def from_submission(
        cls, request: SubmissionRequest, session_id: Optional[str] = None
    ) -> "RelayRequest":
        return cls(
            name=request.name,
            email_id=request.email,
            idea=request.idea,
            session_id=session_id,
        )


class AgentPayload(BaseModel):
    """Request body expected by the hosted agent chat endpoint."""

    model_config = ConfigDict(frozen=True)

    agent_id: str
    session_id: str
    message: str
