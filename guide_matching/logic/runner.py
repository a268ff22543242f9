"""
Recommendation Runner

Orchestrates the guide recommendation pipeline:
1. Accepts the requesting user record and a pool of guide records
2. Converts records via adapter
3. Scores, grades and ranks the guides
4. Returns the top recommendations

The records are fetched by the caller; this layer never touches storage.
"""

import logging
import time
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ..config import MAX_CANDIDATES_EVALUATED
from .adapter import extract_traveler, to_guide_candidate
from .aggregator import batch_score, compute_score
from .contracts import GuideCandidate, MatchResult, RecommendationOutput, RecommendationRequest
from .exceptions import GuideNotFoundError
from .output_assembler import assemble_output
from .ranker import rank_scored_guides, take_top

logger = logging.getLogger(__name__)


def recommend_guides(
    traveler_record: Any,
    guide_records: Iterable[Any],
    limit: Optional[int] = None,
    max_candidates: int = MAX_CANDIDATES_EVALUATED
) -> RecommendationOutput:
    """
    Main entry point: recommended guides for one traveler.

    Args:
        traveler_record: Requesting user with a traveler profile
        guide_records: Candidate guide users, in storage order
        limit: Recommendations to return (default and bounds from config)
        max_candidates: Guide records considered at most

    Returns:
        RecommendationOutput with ranked recommendations

    Raises:
        TravelerAccessError: requester is not a traveler with a profile
        ValidationError: limit out of bounds
    """
    request = RecommendationRequest() if limit is None else RecommendationRequest(limit=limit)
    traveler_id, traveler = extract_traveler(traveler_record)

    logger.info(f"🚀 Starting guide matching for traveler: {traveler_id or 'anonymous'}")
    start_time = time.perf_counter()

    # Step 1: Convert records, skipping anything that is not a usable guide
    candidates: List[GuideCandidate] = []
    skipped = 0
    for index, record in enumerate(guide_records):
        if index >= max_candidates:
            logger.info(f"Candidate pool capped at {max_candidates} guides")
            break
        try:
            candidate = to_guide_candidate(record)
        except (ValidationError, ValueError, TypeError) as e:
            logger.debug(f"Failed to convert guide record #{index}: {e}")
            candidate = None
        if candidate is None:
            skipped += 1
            continue
        candidates.append(candidate)

    logger.info(f"📦 Guides converted for scoring: {len(candidates)} (skipped {skipped})")

    # Step 2: Score and rank
    scored = batch_score(traveler, candidates)
    ranked = take_top(rank_scored_guides(scored), request.limit)

    processing_time = (time.perf_counter() - start_time) * 1000

    output = assemble_output(
        traveler=traveler,
        ranked=ranked,
        total_evaluated=len(candidates),
        total_skipped=skipped,
        traveler_id=traveler_id,
        processing_time_ms=round(processing_time, 2),
    )

    logger.info(
        f"✨ Guide matching complete: {output.total_recommended} recommended ({processing_time:.2f}ms)"
    )
    return output


def score_single_guide(traveler_record: Any, guide_record: Any) -> MatchResult:
    """
    Score one specific guide for the requesting traveler.

    Raises:
        TravelerAccessError: requester is not a traveler with a profile
        GuideNotFoundError: guide missing, not a guide, or without a guide profile
    """
    _, traveler = extract_traveler(traveler_record)

    try:
        candidate = to_guide_candidate(guide_record)
    except ValidationError:
        raise
    except ValueError as e:
        raise GuideNotFoundError() from e
    if candidate is None:
        raise GuideNotFoundError()

    result = compute_score(traveler, candidate.capabilities)
    logger.debug(f"Guide {candidate.guide_id} scored {result.score} ({result.grade.grade})")
    return result


# =============================================================================
# VALIDATION
# =============================================================================

def validate_runner():
    """
    Developer sanity check - runs the full pipeline on sample records.
    """
    from ..config import configure_logging

    configure_logging()

    traveler = {
        "id": "traveler_001",
        "role": "TRAVELER",
        "travelerProfile": {"preferredLanguages": ["EN"], "interests": ["FOOD", "CAFE"]},
    }
    guides = [
        {
            "id": "guide_001",
            "name": "Minji",
            "role": "GUIDE",
            "password": "hashed",
            "guideProfile": {
                "languages": ["EN", "KO"],
                "categories": ["FOOD"],
                "averageRating": 4.5,
                "totalTours": 20,
            },
        },
        {
            "id": "guide_002",
            "name": "Kenji",
            "role": "GUIDE",
            "guideProfile": {
                "languages": ["JA"],
                "categories": ["HISTORY"],
                "averageRating": 3.0,
                "totalTours": 2,
            },
        },
    ]

    output = recommend_guides(traveler, guides, limit=5)

    print("=" * 60)
    print("RUNNER VALIDATION")
    print("=" * 60)
    for rec in output.recommendations:
        print(f"{rec.rank}. {rec.name} - {rec.score} ({rec.grade}, {rec.label})")
    for w in output.warnings:
        print(f"  ⚠️  {w}")

    return output


if __name__ == "__main__":
    validate_runner()
