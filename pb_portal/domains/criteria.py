"""
Static scoring rubric used by the committee.
"""
from typing import List

from pb_portal.domains.scores import ScoringCriterion

SCORING_CRITERIA: List[ScoringCriterion] = [
    ScoringCriterion(
        id="community_need",
        name="Community Need",
        guidance="Is there clear evidence that the project meets a local need?",
        rubric=(
            "0 - No evidence of need. "
            "1 - Need asserted but not evidenced. "
            "2 - Need evidenced with some local data or consultation. "
            "3 - Strong evidence from residents, data and partners."
        ),
        weight=25,
    ),
    ScoringCriterion(
        id="marmot_principles",
        name="Marmot Principles",
        guidance="How well does the project address the Marmot principles?",
        rubric=(
            "0 - Not addressed. "
            "1 - One principle mentioned without detail. "
            "2 - One or two principles addressed with clear actions. "
            "3 - Several principles addressed with measurable outcomes."
        ),
        weight=15,
    ),
    ScoringCriterion(
        id="wfg_goals",
        name="Well-being of Future Generations",
        guidance="Does the project contribute to the Well-being goals?",
        rubric=(
            "0 - No contribution. "
            "1 - Weak link to one goal. "
            "2 - Clear contribution to at least one goal. "
            "3 - Clear contribution to several goals and the five ways of working."
        ),
        weight=15,
    ),
    ScoringCriterion(
        id="community_involvement",
        name="Community Involvement",
        guidance="Are residents involved in designing and delivering the project?",
        rubric=(
            "0 - No involvement. "
            "1 - Residents informed only. "
            "2 - Residents consulted during design. "
            "3 - Residents co-produce and help deliver the project."
        ),
        weight=15,
    ),
    ScoringCriterion(
        id="value_for_money",
        name="Value for Money",
        guidance="Is the budget realistic and proportionate to the benefit?",
        rubric=(
            "0 - Budget missing or unrealistic. "
            "1 - Budget incomplete. "
            "2 - Budget complete and reasonable. "
            "3 - Budget detailed, costed and includes match funding or in-kind support."
        ),
        weight=15,
    ),
    ScoringCriterion(
        id="deliverability",
        name="Deliverability",
        guidance="Can the organisation deliver the project on time?",
        rubric=(
            "0 - No plan. "
            "1 - Outline plan with gaps. "
            "2 - Realistic plan and timescale. "
            "3 - Realistic plan, named leads, risks identified and managed."
        ),
        weight=15,
    ),
]
