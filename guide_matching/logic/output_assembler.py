"""
Output Assembler

Transforms ranked scoring data into the final RecommendationOutput contract.
"""

import logging
from typing import List, Optional

from .contracts import (
    TravelerPreferences,
    ScoredGuide,
    GuideRecommendation,
    RecommendationOutput,
)

logger = logging.getLogger(__name__)


def assemble_recommendation(
    scored: ScoredGuide,
    rank: int
) -> GuideRecommendation:
    """
    Convert a ScoredGuide into a GuideRecommendation.

    Args:
        scored: The scored guide
        rank: 1-based ranking position
    """
    candidate = scored.candidate
    result = scored.result

    return GuideRecommendation(
        rank=rank,
        guide_id=candidate.guide_id,
        name=candidate.name,
        image=candidate.image,
        score=result.score,
        grade=result.grade.grade,
        label=result.grade.label,
        breakdown=result.breakdown,
        profile=candidate.profile,
    )


def assemble_output(
    traveler: TravelerPreferences,
    ranked: List[ScoredGuide],
    total_evaluated: int,
    total_skipped: int = 0,
    traveler_id: Optional[str] = None,
    processing_time_ms: Optional[float] = None
) -> RecommendationOutput:
    """
    Assemble the final RecommendationOutput.

    Args:
        traveler: Preferences the guides were scored against
        ranked: Ranked guides, already truncated to the requested limit
        total_evaluated: Guides scored
        total_skipped: Records dropped before scoring
        traveler_id: Requesting traveler, if known
        processing_time_ms: Processing time in milliseconds
    """
    recommendations = [
        assemble_recommendation(scored, rank)
        for rank, scored in enumerate(ranked, 1)
    ]

    warnings = _generate_warnings(traveler, total_evaluated)
    for warning in warnings:
        logger.warning(warning)

    return RecommendationOutput(
        traveler_id=traveler_id,
        recommendations=recommendations,
        total_candidates_evaluated=total_evaluated,
        total_skipped=total_skipped,
        total_recommended=len(recommendations),
        processing_time_ms=processing_time_ms,
        warnings=warnings,
    )


def _generate_warnings(
    traveler: TravelerPreferences,
    total_evaluated: int
) -> List[str]:
    """Generate any warnings for the output."""
    warnings = []

    if total_evaluated == 0:
        warnings.append("No guides available to match.")

    if not traveler.preferred_languages:
        warnings.append("No preferred languages set. Language match cannot contribute to scores.")

    if not traveler.interests:
        warnings.append("No interests set. Interest match cannot contribute to scores.")

    return warnings
