"""
Custom exceptions for the upstream agent client.

These exceptions let the API layer map each failure mode of the hosted
agent to a specific HTTP response, so the client-side classifier can decide
whether a retry makes sense.
"""


class AgentClientError(Exception):
    """
    Base exception for all agent client errors.

    All agent-specific exceptions inherit from this to allow catching
    any upstream error with a single except clause.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AgentNotConfiguredError(AgentClientError):
    """
    Raised when required credentials for an agent endpoint are missing.

    For the primary agent this is fatal for the request; for the secondary
    agent it is the designed "skip" state and is never raised.
    """

    pass


class AgentConnectionError(AgentClientError):
    """
    Raised when unable to reach the agent endpoint.

    Includes network errors, DNS failures, refused connections, etc.
    """

    pass


class AgentTimeoutError(AgentConnectionError):
    """
    Raised when the agent does not answer within UPSTREAM_TIMEOUT.

    Separate from generic connection errors so it can map to 504.
    """

    pass


class AgentHTTPError(AgentClientError):
    """
    Raised when the agent answers with a non-2xx status.

    The status code is passed through to our own caller together with the
    agent's body text.
    """

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message, details={"status": status_code})
        self.status_code = status_code
        self.body = body
