"""
Prompt builder for agent requests.

Responsible for:
- Rendering the submission into the single prompt string the agent expects
- Generating per-submission session identifiers
- Constructing the complete AgentPayload
"""

import secrets
import string
import time
from typing import Optional

import structlog
from jinja2 import Environment, StrictUndefined

from startup_validator.models.input_models import AgentPayload, RelayRequest

logger = structlog.get_logger(__name__)

MESSAGE_TEMPLATE = "Name: {{ name }}\nEmail: {{ email }}\nStartup Idea: {{ idea }}"

PRIMARY_SESSION_PREFIX = "session"
SECONDARY_SESSION_PREFIX = "secondary_session"

_SESSION_ALPHABET = string.ascii_lowercase + string.digits
_SESSION_SUFFIX_LENGTH = 9


def new_session_id(prefix: str = PRIMARY_SESSION_PREFIX) -> str:
    """
    Generate a session identifier, e.g. session_1767225600000_k3x9a0b2c.

    One is generated per submission so the agent treats every idea as an
    independent conversation.
    """
    suffix = "".join(
        secrets.choice(_SESSION_ALPHABET) for _ in range(_SESSION_SUFFIX_LENGTH)
    )
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


class PromptBuilder:
    """
    Build agent payloads from relay requests.

    The template is rendered without autoescaping: we are generating a
    prompt, not HTML.
    """

    def __init__(self, template: str = MESSAGE_TEMPLATE):
        self.jinja_env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            autoescape=False,
        )
        self.message_template = self.jinja_env.from_string(template)

    def build_message(self, request: RelayRequest) -> str:
        return self.message_template.render(
            name=request.name,
            email=request.email_id,
            idea=request.idea,
        )

    def build_payload(
        self,
        request: RelayRequest,
        agent_id: str,
        session_prefix: str = PRIMARY_SESSION_PREFIX,
    ) -> AgentPayload:
        """
        Build the agent request body.

        Uses the caller's session_id when present so that retries of one
        submission share a conversation.
        """
        session_id: Optional[str] = request.session_id or new_session_id(session_prefix)
        message = self.build_message(request)

        logger.debug(
            "Built agent payload",
            agent_id=agent_id,
            session_id=session_id,
            message_length=len(message),
        )
        return AgentPayload(agent_id=agent_id, session_id=session_id, message=message)
