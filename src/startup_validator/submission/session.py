"""
Submission state machine for a presentation layer.

    IDLE -> SUBMITTING -> SUCCESS | FAILED
    any state -> IDLE (reset)

A new submission may start from IDLE, SUCCESS or FAILED; the previous report
is discarded, never mutated. Starting one while SUBMITTING raises
SubmissionInProgressError. reset() during SUBMITTING cancels the in-flight
submission, and a superseded submission never writes its result.
"""

import asyncio
from typing import Optional

import structlog

from startup_validator.client.exceptions import SubmissionError, SubmissionInProgressError
from startup_validator.models.enums import SubmissionState
from startup_validator.models.input_models import FormValidationError, SubmissionRequest
from startup_validator.models.report_models import ValidationReport
from startup_validator.submission.orchestrator import SubmissionOrchestrator

logger = structlog.get_logger(__name__)


class ValidationSession:
    """
    Holds what a form/results view renders: state, report, error, field errors.
    """

    def __init__(self, orchestrator: SubmissionOrchestrator):
        self.orchestrator = orchestrator
        self.state = SubmissionState.IDLE
        self.report: Optional[ValidationReport] = None
        self.error_message: Optional[str] = None
        self.field_errors: dict[str, str] = {}
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def is_loading(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    async def submit(self, name: str, email: str, idea: str) -> SubmissionState:
        """
        Validate the form locally, then run the submission.

        Field errors leave the state untouched and issue no network call.

        Returns:
            The state after the submission resolved

        Raises:
            SubmissionInProgressError: A submission is already in flight
        """
        if self.state is SubmissionState.SUBMITTING:
            raise SubmissionInProgressError("A submission is already in progress")

        try:
            request = SubmissionRequest.from_form(name=name, email=email, idea=idea)
        except FormValidationError as e:
            self.field_errors = e.field_errors
            logger.info("Form validation failed", fields=sorted(e.field_errors))
            return self.state

        self._generation += 1
        generation = self._generation
        self.state = SubmissionState.SUBMITTING
        self.report = None
        self.error_message = None
        self.field_errors = {}

        self._task = asyncio.ensure_future(self.orchestrator.submit(request))
        try:
            report = await self._task
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.info("Superseded submission cancelled")
                return self.state
            # Cancelled by the caller, not superseded
            self.state = SubmissionState.IDLE
            self.report = None
            self.error_message = None
            logger.info("Submission cancelled by caller")
            raise
        except SubmissionError as e:
            if generation == self._generation:
                self.state = SubmissionState.FAILED
                self.error_message = e.user_message
            return self.state
        finally:
            if generation == self._generation:
                self._task = None

        if generation == self._generation:
            self.state = SubmissionState.SUCCESS
            self.report = report
        return self.state

    def reset(self) -> None:
        """Return to IDLE, cancelling an in-flight submission if any."""
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.state = SubmissionState.IDLE
        self.report = None
        self.error_message = None
        self.field_errors = {}
