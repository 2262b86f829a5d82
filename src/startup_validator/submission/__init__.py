"""
Submission flow: orchestration of the validation calls and the state machine
a presentation layer binds to.
"""

from startup_validator.submission.orchestrator import SubmissionOrchestrator
from startup_validator.submission.session import ValidationSession

__all__ = [
    "SubmissionOrchestrator",
    "ValidationSession",
]
