"""
Component Scorers

Individual scoring functions for each match component.
Each scorer produces a fraction between 0.0 and 1.0 and the points it is
worth under the component's weight.
All logic is deterministic - no AI/ML components.
"""

import logging
import math
from typing import AbstractSet

from .contracts import TravelerPreferences, GuideCapabilities, ComponentScore
from .constants import (
    COMPONENT_WEIGHTS,
    MIN_RATING,
    MAX_RATING,
    EXPERIENCE_SATURATION_TOURS,
)

logger = logging.getLogger(__name__)


def _overlap_ratio(wanted: AbstractSet[str], offered: AbstractSet[str]) -> float:
    """Share of `wanted` found in `offered`; 0.0 when nothing is wanted."""
    if not wanted:
        return 0.0
    return len(wanted & offered) / len(wanted)


def _component(name: str, fraction: float, explanation: str) -> ComponentScore:
    weight = COMPONENT_WEIGHTS[name]
    return ComponentScore(
        component=name,
        score=fraction,
        weight=weight,
        points=fraction * weight,
        explanation=explanation,
    )


def score_language(
    traveler: TravelerPreferences,
    guide: GuideCapabilities
) -> ComponentScore:
    """
    Score shared languages.

    Partial overlap is rewarded proportionally: one shared language makes a
    guide usable, more shared languages make a stronger fit.
    """
    wanted = traveler.preferred_languages
    if not wanted:
        return _component("language", 0.0, "No preferred languages given")

    matched = len(wanted & guide.languages)
    fraction = min(_overlap_ratio(wanted, guide.languages), 1.0)
    return _component(
        "language",
        fraction,
        f"{matched}/{len(wanted)} preferred languages spoken",
    )


def score_interests(
    traveler: TravelerPreferences,
    guide: GuideCapabilities
) -> ComponentScore:
    """Score how many of the traveler's interests the guide covers."""
    wanted = traveler.interests
    if not wanted:
        return _component("interests", 0.0, "No interests given")

    matched = len(wanted & guide.categories)
    return _component(
        "interests",
        _overlap_ratio(wanted, guide.categories),
        f"{matched}/{len(wanted)} interests covered",
    )


def score_rating(
    traveler: TravelerPreferences,
    guide: GuideCapabilities
) -> ComponentScore:
    """Score the guide's average rating on the 0-5 scale."""
    rating = guide.average_rating
    if math.isnan(rating):
        logger.warning(f"Average rating is NaN, treated as {MIN_RATING}")
        rating = MIN_RATING
    elif rating < MIN_RATING or rating > MAX_RATING:
        clamped = max(MIN_RATING, min(MAX_RATING, rating))
        logger.warning(
            f"Average rating {rating} outside [{MIN_RATING}, {MAX_RATING}], clamped to {clamped}"
        )
        rating = clamped

    return _component(
        "rating",
        rating / MAX_RATING,
        f"Average rating {rating:.1f}/{MAX_RATING:.0f}",
    )


def score_experience(
    traveler: TravelerPreferences,
    guide: GuideCapabilities
) -> ComponentScore:
    """
    Score completed tours.
    Saturates at EXPERIENCE_SATURATION_TOURS so experience cannot dominate.
    """
    tours = guide.total_tours
    if tours < 0:
        logger.warning(f"Negative total tours ({tours}), treated as 0")
        tours = 0

    fraction = min(tours / EXPERIENCE_SATURATION_TOURS, 1.0)
    return _component(
        "experience",
        fraction,
        f"{tours} completed tours (full credit at {EXPERIENCE_SATURATION_TOURS})",
    )


# Order defines the breakdown order
COMPONENT_SCORERS = [
    score_language,
    score_interests,
    score_rating,
    score_experience,
]
