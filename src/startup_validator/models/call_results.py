"""
Outcome of a single call to the validation API.

An UpstreamCallResult is produced by the response classifier from exactly one
HTTP exchange and consumed immediately by the retry policy.
"""

from dataclasses import dataclass
from typing import Optional, Union

from startup_validator.models.enums import ErrorKind


@dataclass(frozen=True)
class UpstreamSuccess:
    """A 2xx JSON response. raw_body may be empty."""

    raw_body: str


@dataclass(frozen=True)
class UpstreamFailure:
    """
    A classified failure.

    Attributes:
        kind: Error taxonomy entry, fixed for a given status/exception
        status_code: HTTP status, None when no response was received
        message: Diagnostic message (never shown to end users)
        terminal: True when retrying cannot change the outcome
    """

    kind: ErrorKind
    status_code: Optional[int]
    message: str
    terminal: bool = False


UpstreamCallResult = Union[UpstreamSuccess, UpstreamFailure]
