"""
Data Contracts for the Guide Matching Engine

Defines Pydantic models for traveler/guide profiles (input) and match results
and recommendation output (output). These contracts are the API boundary
between the scoring engine and the collaborators that fetch profiles and
serialize results.
"""

import uuid
from typing import Any, Dict, FrozenSet, List, Optional
from pydantic import BaseModel, Field

from ..config import DEFAULT_RECOMMENDATION_LIMIT, MAX_RECOMMENDATION_LIMIT
from .constants import MatchGrade, ENGINE_VERSION


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class TravelerPreferences(BaseModel):
    """
    A traveler's stated preferences.
    Sets are compared by membership only; duplicates collapse.
    """
    preferred_languages: FrozenSet[str] = Field(default_factory=frozenset)
    interests: FrozenSet[str] = Field(default_factory=frozenset)

    class Config:
        frozen = True


class GuideCapabilities(BaseModel):
    """
    What a guide offers.

    average_rating is expected in [0, 5] and total_tours to be non-negative.
    The model does not enforce either; the component scorers clamp
    out-of-domain values.
    """
    languages: FrozenSet[str] = Field(default_factory=frozenset)
    categories: FrozenSet[str] = Field(default_factory=frozenset)
    average_rating: float = 0.0
    total_tours: int = 0

    class Config:
        frozen = True


class RecommendationRequest(BaseModel):
    """Options for a recommended-guides query."""
    limit: int = Field(
        default=DEFAULT_RECOMMENDATION_LIMIT,
        ge=1,
        le=MAX_RECOMMENDATION_LIMIT,
    )


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ComponentScore(BaseModel):
    """Individual component score with explanation."""
    component: str
    score: float = Field(ge=0.0, le=1.0)   # fraction of the weight earned
    weight: float = Field(ge=0.0)
    points: float = Field(ge=0.0)          # score * weight, before rounding
    explanation: str = ""


class MatchBreakdown(BaseModel):
    """Pre-rounded contribution of each component."""
    language: float = 0.0
    interests: float = 0.0
    rating: float = 0.0
    experience: float = 0.0

    class Config:
        frozen = True

    @property
    def total(self) -> float:
        return self.language + self.interests + self.rating + self.experience


class GradeInfo(BaseModel):
    grade: MatchGrade
    label: str

    class Config:
        frozen = True


class MatchResult(BaseModel):
    """Score of one guide against one traveler."""
    score: int = Field(ge=0, le=100)
    breakdown: MatchBreakdown
    grade: GradeInfo

    class Config:
        frozen = True


# =============================================================================
# PIPELINE STRUCTURES
# =============================================================================

class GuideCandidate(BaseModel):
    """
    A guide as handed to the recommendation pipeline.
    profile carries display data through untouched (never credentials).
    """
    guide_id: str
    name: Optional[str] = None
    image: Optional[str] = None
    capabilities: GuideCapabilities
    profile: Dict[str, Any] = Field(default_factory=dict)


class ScoredGuide(BaseModel):
    """A candidate with its computed match result."""
    candidate: GuideCandidate
    result: MatchResult

    @property
    def score(self) -> int:
        return self.result.score


class GuideRecommendation(BaseModel):
    """Single guide recommendation with full scoring details."""
    rank: int
    guide_id: str
    name: Optional[str] = None
    image: Optional[str] = None

    score: int = Field(ge=0, le=100)
    grade: MatchGrade
    label: str
    breakdown: MatchBreakdown

    profile: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        use_enum_values = True


class RecommendationOutput(BaseModel):
    """
    Ranked guide recommendations for one traveler with summary statistics.
    """
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    traveler_id: Optional[str] = None

    recommendations: List[GuideRecommendation] = Field(default_factory=list)

    # Summary Statistics
    total_candidates_evaluated: int = 0
    total_skipped: int = 0
    total_recommended: int = 0

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    warnings: List[str] = Field(default_factory=list)
