"""
Retry policy with exponential backoff.

Wraps an arbitrary async operation and re-invokes it on transient failures:

    attempt 1 -> wait base_delay -> attempt 2 -> wait 2 * base_delay -> attempt 3

Client errors (4xx except 429) and terminal errors (non-JSON responses)
propagate immediately. The last observed error propagates once all attempts
are used. The wait suspends only the calling task.

Usage:
    policy = RetryPolicy(max_retries=2, base_delay=1.0)
    body = await policy.execute(lambda: client.validate(payload))
"""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

import structlog

from startup_validator.client.exceptions import ValidationApiError
from startup_validator.config import Settings

logger = structlog.get_logger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]


def is_retryable(error: BaseException) -> bool:
    """
    Decide whether a failed attempt may be retried.

    Unclassified exceptions are treated as transient.
    """
    if isinstance(error, ValidationApiError):
        if error.terminal:
            return False
        if error.status is not None and 400 <= error.status < 500 and error.status != 429:
            return False
    return True


class RetryPolicy:
    """
    Bounded exponential-backoff retry.

    Attributes:
        max_retries: Retries after the first attempt (total attempts = max_retries + 1)
        base_delay: Delay before the first retry in seconds, doubled per retry
        sleep: Awaitable used to wait between attempts
    """

    def __init__(
        self,
        max_retries: int = 2,
        base_delay: float = 1.0,
        sleep: Optional[SleepFunc] = None,
    ):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if base_delay < 0:
            raise ValueError("base_delay must be >= 0")
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.sleep = sleep or asyncio.sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        return cls(max_retries=settings.MAX_RETRIES, base_delay=settings.RETRY_BASE_DELAY)

    def backoff_delay(self, attempt_index: int) -> float:
        """Delay after the zero-based attempt that just failed."""
        return self.base_delay * (2 ** attempt_index)

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run operation until it succeeds or the policy gives up.

        Args:
            operation: Zero-argument coroutine factory, called once per attempt

        Returns:
            The first successful result

        Raises:
            The last error raised by operation
        """
        total_attempts = self.max_retries + 1

        for attempt_index in range(total_attempts):
            try:
                return await operation()
            except Exception as e:
                if not is_retryable(e):
                    logger.info(
                        "Non-retryable error, giving up",
                        attempt=attempt_index + 1,
                        error_type=type(e).__name__,
                        status=getattr(e, "status", None),
                    )
                    raise

                if attempt_index == total_attempts - 1:
                    logger.warning(
                        "Retry attempts exhausted",
                        attempts=total_attempts,
                        error_type=type(e).__name__,
                        status=getattr(e, "status", None),
                    )
                    raise

                delay = self.backoff_delay(attempt_index)
                logger.info(
                    "Attempt failed, retrying after backoff",
                    attempt=attempt_index + 1,
                    max_attempts=total_attempts,
                    delay_seconds=delay,
                    error_type=type(e).__name__,
                    status=getattr(e, "status", None),
                )
                await self.sleep(delay)

        # range() is never empty, every path above returns or raises
        raise RuntimeError("unreachable")


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 2,
    base_delay: float = 1.0,
) -> T:
    """Run operation under a RetryPolicy built from the given limits."""
    return await RetryPolicy(max_retries=max_retries, base_delay=base_delay).execute(
        operation
    )
