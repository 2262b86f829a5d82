"""
Response text extraction for agent replies.

Agents answer in several shapes depending on provider and configuration:
a JSON object with "response", "message", an OpenAI-style
"choices[0].message.content", or "content"; a bare JSON string; or plain text.
Each shape has one typed extractor returning the text or None, tried in
priority order. The first match wins; the raw body is the fallback.
"""

import json
from typing import Any, Callable, Optional

ResponseExtractor = Callable[[Any], Optional[str]]


def _as_text(value: Any) -> Optional[str]:
    """Non-empty string as-is, nested JSON re-serialized, anything else None."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, (dict, list)) and value:
        return json.dumps(value, ensure_ascii=False)
    return None


def bare_string(data: Any) -> Optional[str]:
    return data if isinstance(data, str) else None


def key_extractor(key: str) -> ResponseExtractor:
    def extract(data: Any) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        return _as_text(data.get(key))

    extract.__name__ = f"key_{key}"
    return extract


def choices_content(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    return _as_text(message.get("content"))


RESPONSE_EXTRACTORS: tuple[ResponseExtractor, ...] = (
    bare_string,
    key_extractor("response"),
    key_extractor("message"),
    choices_content,
    key_extractor("content"),
)


def extract_response_text(
    raw_body: str,
    extractors: tuple[ResponseExtractor, ...] = RESPONSE_EXTRACTORS,
) -> str:
    """
    Extract the single response string from an agent reply body.

    Args:
        raw_body: Agent response text
        extractors: Extractors in priority order

    Returns:
        Extracted text, or raw_body when the body is not JSON or no
        extractor matches
    """
    try:
        data = json.loads(raw_body)
    except (json.JSONDecodeError, TypeError):
        return raw_body

    for extractor in extractors:
        text = extractor(data)
        if text is not None:
            return text
    return raw_body
