"""
Submission orchestrator.

One submission triggers two concurrent calls:

1. Primary: POST /api/validate through the retry policy. Its outcome is the
   outcome of the submission: a ValidationReport, or a SubmissionError with
   the user-facing message.
2. Secondary: POST /api/secondary-validate as a detached task, no retry.
   Its result and errors go to the diagnostics sink only and can never change
   the primary outcome.

Usage:
    orchestrator = SubmissionOrchestrator(api_client)
    report = await orchestrator.submit(SubmissionRequest.from_form(name, email, idea))
"""

import asyncio
from typing import Callable, Optional

import structlog

from startup_validator.client.api_client import ValidationApiClient
from startup_validator.client.exceptions import SubmissionError, get_error_message
from startup_validator.models.input_models import RelayRequest, SubmissionRequest
from startup_validator.models.report_models import ValidationReport
from startup_validator.normalization.normalizer import ResultNormalizer
from startup_validator.retry.policy import RetryPolicy
from startup_validator.upstream.prompt_builder import (
    PRIMARY_SESSION_PREFIX,
    SECONDARY_SESSION_PREFIX,
    new_session_id,
)

logger = structlog.get_logger(__name__)

DiagnosticsSink = Callable[[BaseException], None]


def _log_secondary_failure(error: BaseException) -> None:
    logger.warning(
        "Secondary validation call failed",
        error_type=type(error).__name__,
        error=str(error),
    )


class SubmissionOrchestrator:
    """
    Run the primary and secondary validation calls for a submission.

    Attributes:
        api_client: Client for the relay service
        retry_policy: Policy wrapping the primary call
        normalizer: Turns the primary response text into a report
        diagnostics: Receives secondary-call failures
    """

    def __init__(
        self,
        api_client: ValidationApiClient,
        retry_policy: Optional[RetryPolicy] = None,
        normalizer: Optional[ResultNormalizer] = None,
        diagnostics: Optional[DiagnosticsSink] = None,
    ):
        self.api_client = api_client
        self.retry_policy = retry_policy or RetryPolicy()
        self.normalizer = normalizer or ResultNormalizer()
        self.diagnostics = diagnostics or _log_secondary_failure
        # Strong references keep detached tasks alive until they finish
        self._background_tasks: set[asyncio.Task] = set()

    async def submit(self, request: SubmissionRequest) -> ValidationReport:
        """
        Validate one submission.

        The session id is generated once here, so every retry of the primary
        call stays in the same agent conversation.

        Raises:
            SubmissionError: The primary call failed for good
        """
        primary_payload = RelayRequest.from_submission(
            request, session_id=new_session_id(PRIMARY_SESSION_PREFIX)
        )

        if self.api_client.secondary_enabled:
            self._spawn_secondary(
                RelayRequest.from_submission(
                    request, session_id=new_session_id(SECONDARY_SESSION_PREFIX)
                )
            )

        logger.info(
            "Submitting idea for validation",
            session_id=primary_payload.session_id,
            idea_length=len(request.idea),
        )

        try:
            text = await self.retry_policy.execute(
                lambda: self.api_client.validate(primary_payload)
            )
        except Exception as e:
            user_message = get_error_message(e)
            logger.warning(
                "Submission failed",
                session_id=primary_payload.session_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise SubmissionError(user_message, e) from e

        report = self.normalizer.normalize(text)
        logger.info(
            "Submission validated",
            session_id=primary_payload.session_id,
            report_kind=report.kind,
        )
        return report

    def _spawn_secondary(self, payload: RelayRequest) -> None:
        task = asyncio.create_task(
            self.api_client.secondary_validate(payload),
            name=f"secondary-validate-{payload.session_id}",
        )
        self._background_tasks.add(task)
        task.add_done_callback(self._on_secondary_done)

    def _on_secondary_done(self, task: asyncio.Task) -> None:
        self._background_tasks.discard(task)
        if task.cancelled():
            logger.debug("Secondary validation call cancelled", task=task.get_name())
            return
        error = task.exception()
        if error is not None:
            self.diagnostics(error)
        else:
            logger.debug(
                "Secondary validation call completed",
                task=task.get_name(),
                status_code=task.result(),
            )

    @property
    def pending_secondary_calls(self) -> int:
        return len(self._background_tasks)

    async def drain(self) -> None:
        """Wait for in-flight secondary calls. Their errors stay swallowed."""
        if self._background_tasks:
            await asyncio.gather(*list(self._background_tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Drain secondary calls, then close the relay client."""
        await self.drain()
        await self.api_client.close()
