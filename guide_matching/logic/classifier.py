"""
Classifier

Maps match scores onto letter grades:
- S (perfect match)
- A (very good)
- B (good)
- C (fair)
- D (low)
"""

from typing import Dict, List

from .contracts import GradeInfo, ScoredGuide
from .constants import MatchGrade, GRADE_BANDS, FALLBACK_GRADE


def grade_of(score: int) -> GradeInfo:
    """
    Classify a score into a grade.

    Bands are checked high-to-low with inclusive lower bounds. No range
    validation: scores above 100 grade S and below 0 grade D.
    """
    for threshold, grade, label in GRADE_BANDS:
        if score >= threshold:
            return GradeInfo(grade=grade, label=label)

    grade, label = FALLBACK_GRADE
    return GradeInfo(grade=grade, label=label)


def filter_by_grade(
    scored_guides: List[ScoredGuide],
    grade: MatchGrade
) -> List[ScoredGuide]:
    """Keep only guides in the given grade, preserving order."""
    return [s for s in scored_guides if s.result.grade.grade == grade]


def get_grade_counts(scored_guides: List[ScoredGuide]) -> Dict[MatchGrade, int]:
    """
    Count guides in each grade.
    """
    counts = {grade: 0 for grade in MatchGrade}
    for scored in scored_guides:
        counts[scored.result.grade.grade] += 1
    return counts
