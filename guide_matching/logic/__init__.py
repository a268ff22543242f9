"""
Matching Logic Module

Provides the deterministic scoring engine for guide/traveler matching.
"""

from .contracts import (
    TravelerPreferences,
    GuideCapabilities,
    ComponentScore,
    MatchBreakdown,
    GradeInfo,
    MatchResult,
    GuideCandidate,
    ScoredGuide,
    RecommendationRequest,
    GuideRecommendation,
    RecommendationOutput,
)
from .aggregator import compute_score
from .classifier import grade_of
from .ranker import rank_guides
from .engine import MatchScorer, get_match_score
from .runner import recommend_guides, score_single_guide
from .exceptions import MatchingError, TravelerAccessError, GuideNotFoundError
from .constants import MatchGrade, TourCategory

__all__ = [
    # Main engine
    "MatchScorer",
    "compute_score",
    "grade_of",
    "rank_guides",
    "get_match_score",

    # Pipeline
    "recommend_guides",
    "score_single_guide",

    # Contracts
    "TravelerPreferences",
    "GuideCapabilities",
    "ComponentScore",
    "MatchBreakdown",
    "GradeInfo",
    "MatchResult",
    "GuideCandidate",
    "ScoredGuide",
    "RecommendationRequest",
    "GuideRecommendation",
    "RecommendationOutput",

    # Errors
    "MatchingError",
    "TravelerAccessError",
    "GuideNotFoundError",

    # Enums
    "MatchGrade",
    "TourCategory",
]
