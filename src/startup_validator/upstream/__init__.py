"""
Upstream agent access for the relay service.

Components:
- AgentClient: httpx client for one agent endpoint (primary or secondary)
- PromptBuilder: Renders a submission into the agent payload
- extractors: Ordered response-text extractors for agent replies
- exceptions: Agent-specific exceptions
"""

from startup_validator.upstream.agent_client import AgentClient
from startup_validator.upstream.exceptions import (
    AgentClientError,
    AgentConnectionError,
    AgentHTTPError,
    AgentNotConfiguredError,
    AgentTimeoutError,
)
from startup_validator.upstream.extractors import RESPONSE_EXTRACTORS, extract_response_text
from startup_validator.upstream.prompt_builder import PromptBuilder, new_session_id

__all__ = [
    "AgentClient",
    "PromptBuilder",
    "new_session_id",
    "RESPONSE_EXTRACTORS",
    "extract_response_text",
    "AgentClientError",
    "AgentConnectionError",
    "AgentHTTPError",
    "AgentNotConfiguredError",
    "AgentTimeoutError",
]
