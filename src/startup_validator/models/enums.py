"""
Enumerations for Startup Idea Validator data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """
    Classification of a failed call to the validation API.

    Derived deterministically from the HTTP status code or, when no response
    was received, from the transport exception.
    """

    INVALID_INPUT = "invalid_input"
    AUTH_ERROR = "auth_error"
    RATE_LIMITED = "rate_limited"
    SERVER_UNAVAILABLE = "server_unavailable"
    NETWORK_ERROR = "network_error"
    UNKNOWN = "unknown"


class SubmissionState(str, Enum):
    """
    Lifecycle of one submission as seen by the presentation layer.

    IDLE -> SUBMITTING -> (SUCCESS | FAILED) -> IDLE (on reset)
    """

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class ApiStatusKind(str, Enum):
    """Result of probing the service health-check endpoint."""

    CONNECTED = "connected"
    ERROR = "error"
    NOT_CONFIGURED = "not-configured"


class ScoreBand(str, Enum):
    """
    Coarse band for "N/10" style scores.

    Ordered from low to high (can be used for display colouring).
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class YCFit(str, Enum):
    """Normalized Y Combinator fit rating reported by the agent."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"
