"""
Unit tests for client exceptions and user-facing messages.
"""

import pytest

from startup_validator.client.exceptions import (
    API_ERROR_MESSAGES,
    ERROR_KIND_MESSAGES,
    SubmissionError,
    ValidationApiError,
    get_error_message,
)
from startup_validator.models.call_results import UpstreamFailure
from startup_validator.models.enums import ErrorKind


def test_every_kind_has_a_message():
    assert set(ERROR_KIND_MESSAGES) == set(ErrorKind)


@pytest.mark.parametrize(
    "kind,key",
    [
        (ErrorKind.INVALID_INPUT, "INVALID_INPUT"),
        (ErrorKind.AUTH_ERROR, "AUTHENTICATION_ERROR"),
        (ErrorKind.RATE_LIMITED, "RATE_LIMIT"),
        (ErrorKind.SERVER_UNAVAILABLE, "SERVER_ERROR"),
        (ErrorKind.NETWORK_ERROR, "NETWORK_ERROR"),
        (ErrorKind.UNKNOWN, "VALIDATION_FAILED"),
    ],
)
def test_kind_message_mapping(kind, key):
    error = ValidationApiError("upstream detail", status=None, kind=kind)

    assert get_error_message(error) == API_ERROR_MESSAGES[key]


def test_message_ignores_upstream_body():
    """Upstream error text is diagnostic only, never shown to users."""
    error = ValidationApiError(
        "Lyzr API Error (401): invalid key sk-123", status=401, kind=ErrorKind.AUTH_ERROR
    )

    message = get_error_message(error)

    assert "sk-123" not in message
    assert message == API_ERROR_MESSAGES["AUTHENTICATION_ERROR"]


def test_unclassified_exception_gets_generic_message():
    assert get_error_message(RuntimeError("internal detail")) == API_ERROR_MESSAGES[
        "VALIDATION_FAILED"
    ]


def test_submission_error_keeps_user_message():
    cause = ValidationApiError("x", status=429, kind=ErrorKind.RATE_LIMITED)
    error = SubmissionError(cause.user_message, cause)

    assert get_error_message(error) == API_ERROR_MESSAGES["RATE_LIMIT"]
    assert error.cause is cause


def test_from_failure_copies_classification():
    failure = UpstreamFailure(
        kind=ErrorKind.UNKNOWN, status_code=200, message="non-JSON response", terminal=True
    )

    error = ValidationApiError.from_failure(failure)

    assert error.kind == ErrorKind.UNKNOWN
    assert error.status == 200
    assert error.terminal is True
    assert str(error) == "non-JSON response"
