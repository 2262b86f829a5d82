"""
Retry policy for calls to the validation API.

Transient failures (network errors, 429, 5xx) are retried up to MAX_RETRIES
times with exponential backoff (RETRY_BASE_DELAY * 2^attempt). Client errors
(4xx except 429) and non-JSON responses are never retried.

Usage:
    >>> from startup_validator.retry import RetryPolicy
    >>> policy = RetryPolicy(max_retries=2, base_delay=1.0)
    >>> body = await policy.execute(lambda: client.validate(payload))
"""

from startup_validator.retry.policy import RetryPolicy, is_retryable, with_retry

__all__ = [
    "RetryPolicy",
    "is_retryable",
    "with_retry",
]
