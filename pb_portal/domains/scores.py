"""
Scoring domain models.

These models define committee evaluations and rubric criteria.
"""
from typing import Annotated, Dict

from pydantic import BaseModel, Field

from pb_portal.domains.base import PortalModel, now_millis

MAX_RATING = 3

# Weighted percent at or above this reads as a pass on screen
PASS_THRESHOLD = 50

Rating = Annotated[int, Field(ge=0, le=MAX_RATING)]


class ScoringCriterion(PortalModel):
    """One rubric criterion."""
    id: str = Field(..., description="Criterion identifier")
    name: str = Field(..., description="Display name")
    guidance: str = Field("", description="Short guidance for scorers")
    rubric: str = Field("", description="Detailed rubric text")
    weight: int = Field(..., ge=0, le=100,
                        description="Weight in percentage points")


class Score(PortalModel):
    """A committee member's evaluation of one application."""
    app_id: str = Field(..., alias="appId", description="Scored application")
    scorer_id: str = Field(..., alias="scorerId", description="Scoring user")
    scorer_name: str = Field(
        "Committee Member", alias="scorerName", description="Scorer display name")
    scores: Dict[str, Rating] = Field(
        default_factory=dict, description="Rating per criterion id")
    notes: Dict[str, str] = Field(
        default_factory=dict, description="Notes per criterion id")
    is_final: bool = Field(
        False, alias="isFinal", description="Whether the scorer has finalised")
    total: int = Field(0, ge=0, description="Raw total")
    timestamp: int = Field(
        default_factory=now_millis, description="Submission time, epoch ms")

    @property
    def document_id(self) -> str:
        """Composite key, one score per scorer per application."""
        return f"{self.app_id}_{self.scorer_id}"


class ScoreSummary(BaseModel):
    """Totals computed from a set of ratings."""
    raw_total: int = Field(..., description="Sum of ratings")
    weighted_percent: int = Field(..., ge=0, le=100,
                                  description="Rubric-weighted percent")

    @property
    def passes(self) -> bool:
        """Display-only pass classification."""
        return self.weighted_percent >= PASS_THRESHOLD
