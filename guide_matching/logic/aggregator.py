"""
Score Aggregator

Combines the component scores into the final 0-100 match score.
"""

import math
from typing import Dict, List

from .contracts import (
    TravelerPreferences,
    GuideCapabilities,
    ComponentScore,
    MatchBreakdown,
    MatchResult,
    GuideCandidate,
    ScoredGuide,
)
from .component_scorers import COMPONENT_SCORERS
from .classifier import grade_of
from .constants import MIN_SCORE, MAX_SCORE


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def score_components(
    traveler: TravelerPreferences,
    guide: GuideCapabilities
) -> Dict[str, ComponentScore]:
    """Run every component scorer, keyed by component name."""
    components: Dict[str, ComponentScore] = {}
    for scorer in COMPONENT_SCORERS:
        component = scorer(traveler, guide)
        components[component.component] = component
    return components


def compute_score(
    traveler: TravelerPreferences,
    guide: GuideCapabilities
) -> MatchResult:
    """
    Compute the match score of one guide for one traveler.

    Args:
        traveler: Traveler's preferences
        guide: Guide's capabilities

    Returns:
        MatchResult with the rounded score, pre-rounded breakdown and grade
    """
    components = score_components(traveler, guide)

    breakdown = MatchBreakdown(
        language=components["language"].points,
        interests=components["interests"].points,
        rating=components["rating"].points,
        experience=components["experience"].points,
    )

    score = round_half_up(breakdown.total)
    score = max(MIN_SCORE, min(MAX_SCORE, score))

    return MatchResult(
        score=score,
        breakdown=breakdown,
        grade=grade_of(score),
    )


def batch_score(
    traveler: TravelerPreferences,
    candidates: List[GuideCandidate]
) -> List[ScoredGuide]:
    """
    Score multiple candidates in batch, preserving input order.
    """
    return [
        ScoredGuide(candidate=c, result=compute_score(traveler, c.capabilities))
        for c in candidates
    ]
