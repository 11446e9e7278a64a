"""
Scoring service implementation.

This service turns a committee member's ratings into raw and
rubric-weighted totals.
"""
import math
from typing import Dict, List, Optional

from pb_portal.domains import (
    MAX_RATING,
    SCORING_CRITERIA,
    Score,
    ScoreSummary,
    ScoringCriterion,
    User,
    now_millis,
)
from pb_portal.exceptions import ConfigurationError


def round_half_up(value: float) -> int:
    """Round .5 up, as the portal's display always has."""
    return int(math.floor(value + 0.5))


class ScoringService:
    """Service for computing rubric scores."""

    def __init__(self, criteria: Optional[List[ScoringCriterion]] = None):
        """Initialize the scoring service.

        Args:
            criteria: Rubric criteria; weights must sum to 100
        """
        self.criteria = list(criteria if criteria is not None else SCORING_CRITERIA)
        total_weight = sum(c.weight for c in self.criteria)
        if total_weight != 100:
            raise ConfigurationError(
                f"Scoring criteria weights must sum to 100, got {total_weight}")

    @property
    def max_raw_total(self) -> int:
        return MAX_RATING * len(self.criteria)

    def summarize(self, ratings: Dict[str, int]) -> ScoreSummary:
        """Compute raw and weighted totals.

        Args:
            ratings: Rating per criterion id; missing criteria count as 0

        Returns:
            Raw total and weighted percent
        """
        raw_total = 0
        weighted = 0.0
        for criterion in self.criteria:
            value = ratings.get(criterion.id, 0)
            if not 0 <= value <= MAX_RATING:
                raise ValueError(
                    f"Rating for {criterion.id} must be between 0 and {MAX_RATING}")
            raw_total += value
            weighted += (value / MAX_RATING) * criterion.weight

        return ScoreSummary(
            raw_total=raw_total, weighted_percent=round_half_up(weighted))

    def summarize_score(self, score: Score) -> ScoreSummary:
        return self.summarize(score.scores)

    def build_score(
        self,
        app_id: str,
        scorer: User,
        ratings: Dict[str, int],
        notes: Optional[Dict[str, str]] = None,
        is_final: bool = True,
        existing: Optional[Score] = None,
    ) -> Score:
        """Build a score ready to save.

        An existing score keeps its scorer identity, so an admin editing
        a member's evaluation does not re-attribute it.
        """
        summary = self.summarize(ratings)
        return Score(
            app_id=app_id,
            scorer_id=existing.scorer_id if existing else scorer.uid,
            scorer_name=(
                existing.scorer_name if existing
                else scorer.display_name or "Committee Member"
            ),
            scores=dict(ratings),
            notes=dict(notes or {}),
            is_final=is_final,
            total=summary.raw_total,
            timestamp=now_millis(),
        )
