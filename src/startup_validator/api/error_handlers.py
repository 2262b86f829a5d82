"""
FastAPI exception handlers for structured error responses.

Maps agent exceptions to HTTP status codes. Every error body has the same
shape, {"error": "<message>"}, which the client-side classifier reads.
"""

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from startup_validator.upstream.exceptions import (
    AgentConnectionError,
    AgentHTTPError,
    AgentNotConfiguredError,
    AgentTimeoutError,
)

logger = structlog.get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle invalid relay request bodies.

    Maps to 400 Bad Request (client error).
    """
    logger.warning(
        "Invalid request format",
        errors=[".".join(str(part) for part in err["loc"]) for err in exc.errors()],
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": MISSING_FIELDS_MESSAGE},
    )


async def agent_not_configured_handler(
    request: Request, exc: AgentNotConfiguredError
) -> JSONResponse:
    """
    Handle missing primary agent credentials.

    Maps to 500 Internal Server Error (deployment problem).
    """
    logger.error("Agent not configured", error=exc.message)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )


async def agent_http_error_handler(request: Request, exc: AgentHTTPError) -> JSONResponse:
    """
    Handle non-2xx agent responses.

    The agent's status code is passed through unchanged so the client can
    classify it (429 and 5xx are retried, other 4xx are not).
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


async def agent_connection_error_handler(
    request: Request, exc: AgentConnectionError
) -> JSONResponse:
    """
    Handle agent connection errors.

    Maps to 502 Bad Gateway (upstream service unreachable).
    """
    logger.error("Agent connection error", error=exc.message, details=exc.details)

    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"error": f"Unable to reach the validation agent: {exc.message}"},
    )


async def agent_timeout_error_handler(request: Request, exc: AgentTimeoutError) -> JSONResponse:
    """
    Handle agent timeout errors.

    Maps to 504 Gateway Timeout (upstream service timeout).
    """
    logger.error("Agent timeout error", error=exc.message, details=exc.details)

    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content={"error": f"Validation agent timed out: {exc.message}"},
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.error("Unexpected error", error_type=type(exc).__name__, exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": f"Internal server error: {exc}"},
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    RequestValidationError: request_validation_error_handler,
    AgentNotConfiguredError: agent_not_configured_handler,
    AgentHTTPError: agent_http_error_handler,
    AgentTimeoutError: agent_timeout_error_handler,
    AgentConnectionError: agent_connection_error_handler,
    Exception: generic_error_handler,
}
