"""
Match Scorer

Facade over the scoring pipeline for callers that want a single object.

Pipeline flow:
1. Component Scoring - language, interests, rating, experience
2. Aggregation - Sum the weighted components and round
3. Classification - Map the score onto a letter grade
4. Ranking - Stable descending sort of scored guides

The scorer holds no mutable state; one instance can be shared across
threads.
"""

from typing import List, Optional, Sequence, Tuple, TypeVar

from .contracts import (
    TravelerPreferences,
    GuideCapabilities,
    GuideCandidate,
    GradeInfo,
    MatchResult,
    ScoredGuide,
)
from .aggregator import compute_score, batch_score
from .classifier import grade_of
from .ranker import rank_guides, rank_scored_guides
from .constants import ENGINE_VERSION

T = TypeVar("T")


class MatchScorer:
    """Computes, grades and ranks guide/traveler match scores."""

    def __init__(self):
        self.version = ENGINE_VERSION

    def compute_score(
        self,
        traveler: TravelerPreferences,
        guide: GuideCapabilities
    ) -> MatchResult:
        return compute_score(traveler, guide)

    def grade_of(self, score: int) -> GradeInfo:
        return grade_of(score)

    def rank_guides(
        self,
        guides: Sequence[Tuple[T, Optional[float]]]
    ) -> List[Tuple[T, Optional[float]]]:
        return rank_guides(guides)

    def score_candidates(
        self,
        traveler: TravelerPreferences,
        candidates: List[GuideCandidate]
    ) -> List[ScoredGuide]:
        """
        Score and rank a pool of candidates for one traveler.

        Args:
            traveler: Traveler preferences
            candidates: Candidate guides, in the caller's order

        Returns:
            ScoredGuide list, best match first
        """
        return rank_scored_guides(batch_score(traveler, candidates))


# Convenience function for simple usage
def get_match_score(
    traveler: TravelerPreferences,
    guide: GuideCapabilities
) -> int:
    """Return only the 0-100 score."""
    return compute_score(traveler, guide).score
