"""
Pydantic data models for the Startup Idea Validator.

Includes:
- Input models (SubmissionRequest, RelayRequest, AgentPayload)
- Report models (ReportSections, StructuredReport, OpaqueReport)
- Call results (UpstreamSuccess, UpstreamFailure)
- Enums (ErrorKind, SubmissionState, ApiStatusKind, ScoreBand, YCFit)
"""

from startup_validator.models.enums import (
    ApiStatusKind,
    ErrorKind,
    ScoreBand,
    SubmissionState,
    YCFit,
)
from startup_validator.models.input_models import (
    AgentPayload,
    FormValidationError,
    RelayRequest,
    SubmissionRequest,
)
from startup_validator.models.report_models import (
    ActionableInsights,
    CompetitiveLandscape,
    DetailedEvaluation,
    OpaqueReport,
    QuickVerdict,
    ReportSections,
    ScoredDimension,
    SimilarCompany,
    StructuredReport,
    ValidationReport,
    YCReadyPitch,
    score_band,
)
from startup_validator.models.call_results import (
    UpstreamCallResult,
    UpstreamFailure,
    UpstreamSuccess,
)

__all__ = [
    # Enums
    "ApiStatusKind",
    "ErrorKind",
    "ScoreBand",
    "SubmissionState",
    "YCFit",
    # Input models
    "AgentPayload",
    "FormValidationError",
    "RelayRequest",
    "SubmissionRequest",
    # Report models
    "ActionableInsights",
    "CompetitiveLandscape",
    "DetailedEvaluation",
    "OpaqueReport",
    "QuickVerdict",
    "ReportSections",
    "ScoredDimension",
    "SimilarCompany",
    "StructuredReport",
    "ValidationReport",
    "YCReadyPitch",
    "score_band",
    # Call results
    "UpstreamCallResult",
    "UpstreamFailure",
    "UpstreamSuccess",
]
