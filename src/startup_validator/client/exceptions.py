"""
Exceptions for the validation API client.

These exceptions let the retry policy distinguish client-caused failures
(never retried) from transient ones (retried with backoff), and give the
presentation layer one fixed, user-displayable message per error kind.
"""

from typing import Optional

from startup_validator.models.call_results import UpstreamFailure
from startup_validator.models.enums import ErrorKind

DEFAULT_FAILURE_MESSAGE = "Failed to validate startup idea"

API_ERROR_MESSAGES: dict[str, str] = {
    "NETWORK_ERROR": "Unable to connect to our servers. Please check your internet connection and try again.",
    "RATE_LIMIT": "Too many requests. Please wait a moment before trying again.",
    "VALIDATION_FAILED": "We couldn't validate your startup idea right now. Please try again later.",
    "INVALID_INPUT": "Please check your input and try again.",
    "SERVER_ERROR": "Our validation service is temporarily unavailable. Please try again in a few minutes.",
    "AUTHENTICATION_ERROR": "There's an issue with our validation service. Please contact support if this persists.",
}

ERROR_KIND_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: API_ERROR_MESSAGES["INVALID_INPUT"],
    ErrorKind.AUTH_ERROR: API_ERROR_MESSAGES["AUTHENTICATION_ERROR"],
    ErrorKind.RATE_LIMITED: API_ERROR_MESSAGES["RATE_LIMIT"],
    ErrorKind.SERVER_UNAVAILABLE: API_ERROR_MESSAGES["SERVER_ERROR"],
    ErrorKind.NETWORK_ERROR: API_ERROR_MESSAGES["NETWORK_ERROR"],
    ErrorKind.UNKNOWN: API_ERROR_MESSAGES["VALIDATION_FAILED"],
}


class ValidationApiError(Exception):
    """
    A classified failure of a call to the validation API.

    Attributes:
        message: Diagnostic message (upstream error text, never shown to users)
        status: HTTP status code, None for transport failures
        kind: ErrorKind derived from status or exception
        terminal: True when retrying cannot change the outcome
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        terminal: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.kind = kind
        self.terminal = terminal

    @classmethod
    def from_failure(cls, failure: UpstreamFailure) -> "ValidationApiError":
        return cls(
            failure.message,
            status=failure.status_code,
            kind=failure.kind,
            terminal=failure.terminal,
        )

    @property
    def user_message(self) -> str:
        return ERROR_KIND_MESSAGES[self.kind]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"kind={self.kind.value}, status={self.status}, "
            f"message={self.message!r})"
        )


class SubmissionError(Exception):
    """
    Raised when the primary validation call fails for good.

    Carries the user-facing message to display and the classified cause.
    No partial report is ever attached.
    """

    def __init__(self, user_message: str, cause: BaseException):
        super().__init__(user_message)
        self.user_message = user_message
        self.cause = cause


class SubmissionInProgressError(Exception):
    """Raised when a submission is started while another is in flight."""

    pass


def get_error_message(error: BaseException) -> str:
    """
    Map any exception to the fixed message shown to the user.

    Classified errors map by kind; anything else is a generic failure so
    that internals are never leaked to end users.
    """
    if isinstance(error, ValidationApiError):
        return error.user_message
    if isinstance(error, SubmissionError):
        return error.user_message
    return API_ERROR_MESSAGES["VALIDATION_FAILED"]
