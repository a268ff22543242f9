"""
Ranker

Orders guides by match score.

Sorting is stable: guides with equal scores keep their input order, so the
same input always yields the same display and pagination order.
"""

from typing import Any, List, Optional, Sequence, Tuple, TypeVar

from .contracts import ScoredGuide

T = TypeVar("T")


def _score_or_zero(score: Optional[float]) -> float:
    return 0 if score is None else score


def rank_guides(
    guides: Sequence[Tuple[T, Optional[float]]]
) -> List[Tuple[T, Optional[float]]]:
    """
    Rank (guide, score) pairs by score, descending.

    Args:
        guides: Pre-scored pairs; a missing score ranks as 0

    Returns:
        New list, highest score first, ties in input order
    """
    return sorted(guides, key=lambda pair: _score_or_zero(pair[1]), reverse=True)


def rank_scored_guides(scored_guides: Sequence[ScoredGuide]) -> List[ScoredGuide]:
    """
    Rank ScoredGuide objects by match score (descending, stable).
    """
    return sorted(scored_guides, key=lambda s: s.score, reverse=True)


def take_top(ranked: Sequence[Any], limit: int) -> List[Any]:
    """Truncate a ranked list to at most `limit` entries."""
    return list(ranked[:max(0, limit)])
