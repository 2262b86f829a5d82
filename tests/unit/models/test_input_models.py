"""
Unit tests for input models and local form validation.
"""

import pytest
from pydantic import ValidationError

from startup_validator.models.input_models import (
    FormValidationError,
    RelayRequest,
    SubmissionRequest,
)

VALID_IDEA = "x" * 50


class TestSubmissionRequest:
    """Test SubmissionRequest.from_form field messages."""

    def test_valid_submission(self):
        request = SubmissionRequest.from_form(
            name="Ada Lovelace", email="ada@example.com", idea=VALID_IDEA
        )

        assert request.name == "Ada Lovelace"
        assert request.idea == VALID_IDEA

    def test_idea_too_short(self):
        with pytest.raises(FormValidationError) as exc_info:
            SubmissionRequest.from_form(name="Ada", email="ada@example.com", idea="y" * 40)

        assert exc_info.value.field_errors == {
            "idea": "Please provide a more detailed description (at least 50 characters)"
        }

    def test_idea_length_ignores_surrounding_whitespace(self):
        with pytest.raises(FormValidationError) as exc_info:
            SubmissionRequest.from_form(
                name="Ada", email="ada@example.com", idea="   " + "y" * 49 + "   "
            )

        assert "idea" in exc_info.value.field_errors

    @pytest.mark.parametrize(
        "name,message",
        [
            ("", "Name is required"),
            ("   ", "Name is required"),
            ("A", "Name must be at least 2 characters"),
        ],
    )
    def test_name_messages(self, name, message):
        with pytest.raises(FormValidationError) as exc_info:
            SubmissionRequest.from_form(name=name, email="ada@example.com", idea=VALID_IDEA)

        assert exc_info.value.field_errors["name"] == message

    @pytest.mark.parametrize(
        "email,message",
        [
            ("", "Email is required"),
            ("ada", "Please enter a valid email address"),
            ("ada@example", "Please enter a valid email address"),
            ("ada lovelace@example.com", "Please enter a valid email address"),
        ],
    )
    def test_email_messages(self, email, message):
        with pytest.raises(FormValidationError) as exc_info:
            SubmissionRequest.from_form(name="Ada", email=email, idea=VALID_IDEA)

        assert exc_info.value.field_errors["email"] == message

    def test_all_fields_reported_together(self):
        with pytest.raises(FormValidationError) as exc_info:
            SubmissionRequest.from_form(name="", email="", idea="")

        assert exc_info.value.field_errors == {
            "name": "Name is required",
            "email": "Email is required",
            "idea": "Startup idea description is required",
        }

    def test_request_is_immutable(self):
        request = SubmissionRequest.from_form(
            name="Ada", email="ada@example.com", idea=VALID_IDEA
        )

        with pytest.raises(ValidationError):
            request.name = "Grace"


class TestRelayRequest:
    def test_from_submission(self):
        submission = SubmissionRequest(name="Ada", email="ada@example.com", idea=VALID_IDEA)

        relay = RelayRequest.from_submission(submission, session_id="session_1_abc")

        assert relay.model_dump() == {
            "name": "Ada",
            "email_id": "ada@example.com",
            "idea": VALID_IDEA,
            "session_id": "session_1_abc",
        }

    @pytest.mark.parametrize("missing", ["name", "email_id", "idea"])
    def test_required_fields(self, missing):
        data = {"name": "Ada", "email_id": "ada@example.com", "idea": "An idea"}
        data[missing] = ""

        with pytest.raises(ValidationError):
            RelayRequest(**data)
