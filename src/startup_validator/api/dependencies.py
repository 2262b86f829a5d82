"""
FastAPI dependency injection for the relay service.

Agent clients are built per request inside the routes, after the request
body has been validated, so that a missing field is reported before missing
credentials.
"""

from functools import lru_cache
from typing import Optional

import httpx

from startup_validator.config import Settings, settings
from startup_validator.upstream.prompt_builder import PromptBuilder


def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


def get_agent_transport() -> Optional[httpx.AsyncBaseTransport]:
    """
    Transport used for agent calls.

    None means the default network transport. Tests override this
    dependency with an httpx.MockTransport.
    """
    return None


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder.

    Compiles the message template once and reuses it across requests.
    """
    return PromptBuilder()
