"""
Relay routes between the client and the hosted evaluation agents.

- POST /api/validate: primary agent, returns the extracted response text
- POST /api/secondary-validate: secondary agent, reply not exposed
- GET /api/health-check: reports whether primary credentials are configured
"""

from typing import Optional, Union

import httpx
import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from startup_validator.api.dependencies import (
    get_agent_transport,
    get_prompt_builder,
    get_settings,
)
from startup_validator.api.models import (
    ErrorResponse,
    HealthResponse,
    SecondaryValidateResponse,
    ValidateResponse,
)
from startup_validator.config import Settings
from startup_validator.models.input_models import RelayRequest
from startup_validator.upstream.agent_client import AgentClient
from startup_validator.upstream.extractors import extract_response_text
from startup_validator.upstream.prompt_builder import (
    PRIMARY_SESSION_PREFIX,
    SECONDARY_SESSION_PREFIX,
    PromptBuilder,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api")


@router.post(
    "/validate",
    response_model=ValidateResponse,
    status_code=status.HTTP_200_OK,
    summary="Validate a startup idea",
    description="""
    Forward a submission to the primary evaluation agent.

    The agent reply is reduced to a single response string. Non-2xx agent
    statuses are passed through with the agent's body in the error message.
    """,
    responses={
        200: {"description": "Agent answered"},
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        500: {"model": ErrorResponse, "description": "Agent credentials not configured"},
        502: {"model": ErrorResponse, "description": "Agent unreachable"},
        504: {"model": ErrorResponse, "description": "Agent timed out"},
    },
)
async def validate_idea(
    request: RelayRequest,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_agent_transport),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
) -> ValidateResponse:
    """
    Relay one submission to the primary agent.

    Args:
        request: Relay request (name, email_id, idea, optional session_id)
        settings: Application settings (injected)
        transport: httpx transport for agent calls (injected)
        prompt_builder: Prompt builder singleton (injected)

    Returns:
        ValidateResponse with the extracted agent text
    """
    async with AgentClient.primary_from_settings(settings, transport=transport) as agent:
        payload = prompt_builder.build_payload(
            request, agent_id=agent.agent_id, session_prefix=PRIMARY_SESSION_PREFIX
        )
        raw_body = await agent.send(payload)

    text = extract_response_text(raw_body)
    logger.info(
        "Validation relayed",
        session_id=payload.session_id,
        response_length=len(text),
    )
    return ValidateResponse(response=text)


@router.post(
    "/secondary-validate",
    response_model=SecondaryValidateResponse,
    response_model_exclude_none=True,
    summary="Duplicate a submission to the secondary agent",
    responses={
        400: {"model": ErrorResponse, "description": "Missing required fields"},
    },
)
async def secondary_validate(
    request: RelayRequest,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_agent_transport),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
) -> SecondaryValidateResponse:
    """
    Relay one submission to the secondary agent, if configured.

    An absent configuration is the designed skip state, not an error.
    """
    agent = AgentClient.secondary_from_settings(settings, transport=transport)
    if agent is None:
        logger.info("Secondary API not configured, skipping")
        return SecondaryValidateResponse(message="Secondary API not configured")

    async with agent:
        payload = prompt_builder.build_payload(
            request, agent_id=agent.agent_id, session_prefix=SECONDARY_SESSION_PREFIX
        )
        await agent.send(payload)

    return SecondaryValidateResponse(
        message="Secondary API call completed successfully",
        status="success",
    )


@router.get(
    "/health-check",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Check agent credentials",
    responses={
        200: {"description": "Primary credentials configured"},
        500: {"model": HealthResponse, "description": "Primary credentials missing"},
    },
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> Union[HealthResponse, JSONResponse]:
    """
    Report whether the primary agent can be called.

    Only presence of LYZR_API_KEY and LYZR_AGENT_ID is checked; the agent
    itself is not contacted.
    """
    missing = None
    if not settings.LYZR_API_KEY:
        missing = "LYZR_API_KEY"
    elif not settings.LYZR_AGENT_ID:
        missing = "LYZR_AGENT_ID"

    if missing:
        logger.warning("Health check failed", missing=missing)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "error": f"{missing} environment variable is not configured",
            },
        )

    return HealthResponse(status="ok", message="API credentials configured")
