"""
Report data models for the Startup Idea Validator.

These models describe the evaluation the hosted agent may return. Every
section and every field is optional: the agent output is not under our
control, so the display layer renders what is present and omits the rest.
Unknown keys are kept so that nothing the agent sent is silently dropped.

A ValidationReport is either fully structured or fully opaque, never a mix.
"""

import re
from abc import abstractmethod
from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from startup_validator.models.enums import ScoreBand, YCFit

_SECTION_CONFIG = ConfigDict(extra="allow", coerce_numbers_to_str=True)

_SCORE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)")

EXPORT_FILENAME_PREFIX = "yc-pilot-analysis"


def score_band(score: Optional[str]) -> Optional[ScoreBand]:
    """
    Band an "N/10" style score.

    Returns None when no leading number can be read from the score.
    """
    if not score:
        return None
    match = _SCORE_PATTERN.match(score)
    if match is None:
        return None
    value = float(match.group(1))
    if value >= 8:
        return ScoreBand.HIGH
    if value >= 6:
        return ScoreBand.MEDIUM
    return ScoreBand.LOW


class QuickVerdict(BaseModel):
    """Headline verdict shown above the tabs."""

    model_config = _SECTION_CONFIG

    overall_score: Optional[str] = None
    yc_fit: Optional[str] = None
    key_strength: Optional[str] = None
    major_risk: Optional[str] = None

    @property
    def overall_band(self) -> Optional[ScoreBand]:
        return score_band(self.overall_score)

    @property
    def yc_fit_rating(self) -> YCFit:
        try:
            return YCFit((self.yc_fit or "").strip().lower())
        except ValueError:
            return YCFit.UNKNOWN


class ScoredDimension(BaseModel):
    """One evaluated dimension: a score plus the reasoning behind it."""

    model_config = _SECTION_CONFIG

    score: Optional[str] = None
    reasoning: Optional[str] = None

    @property
    def band(self) -> Optional[ScoreBand]:
        return score_band(self.score)


class DetailedEvaluation(BaseModel):
    model_config = _SECTION_CONFIG

    problem_solution: Optional[ScoredDimension] = None
    market_opportunity: Optional[ScoredDimension] = None
    traction_validation: Optional[ScoredDimension] = None
    team_execution: Optional[ScoredDimension] = None
    scalability_growth: Optional[ScoredDimension] = None


class SimilarCompany(BaseModel):
    model_config = _SECTION_CONFIG

    company_name: Optional[str] = None
    batch_year: Optional[str] = None


class CompetitiveLandscape(BaseModel):
    model_config = _SECTION_CONFIG

    similar_yc_companies: Optional[list[SimilarCompany]] = None
    differentiation_analysis: Optional[str] = None
    market_position: Optional[str] = None
    learning_opportunities: Optional[str] = None


class ActionableInsights(BaseModel):
    model_config = ConfigDict(
        extra="allow", coerce_numbers_to_str=True, populate_by_name=True
    )

    strengthen: Optional[list[str]] = None
    validate_: Optional[list[str]] = Field(default=None, alias="validate")
    pivot_consider: Optional[list[str]] = None


class YCReadyPitch(BaseModel):
    model_config = _SECTION_CONFIG

    pitch: Optional[str] = None


class ReportSections(BaseModel):
    """
    The multi-section evaluation document returned by the agent.

    Matches the agent's JSON output one-to-one; a document with none of the
    known sections is still a valid (empty) report.
    """

    model_config = ConfigDict(extra="allow")

    quick_verdict: Optional[QuickVerdict] = None
    detailed_evaluation: Optional[DetailedEvaluation] = None
    competitive_landscape: Optional[CompetitiveLandscape] = None
    actionable_insights: Optional[ActionableInsights] = None
    yc_ready_pitch: Optional[YCReadyPitch] = None


class _ReportBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def export_text(self) -> str:
        """Raw agent text, as offered for copy and download."""

    @staticmethod
    def export_filename(on: Optional[date] = None) -> str:
        """Download filename, e.g. yc-pilot-analysis-2026-01-31.txt"""
        on = on or date.today()
        return f"{EXPORT_FILENAME_PREFIX}-{on.isoformat()}.txt"


class StructuredReport(_ReportBase):
    """Agent text that parsed into the known report shape."""

    kind: Literal["structured"] = "structured"
    sections: ReportSections
    raw_text: str

    def export_text(self) -> str:
        return self.raw_text


class OpaqueReport(_ReportBase):
    """Agent text that could not be parsed; displayed verbatim."""

    kind: Literal["opaque"] = "opaque"
    text: str

    def export_text(self) -> str:
        return self.text


ValidationReport = Annotated[
    Union[StructuredReport, OpaqueReport], Field(discriminator="kind")
]
