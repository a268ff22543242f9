"""
Tests for the match score engine: score, grade and ranking.
"""

import pytest

from guide_matching.logic import (
    MatchScorer,
    TravelerPreferences,
    GuideCapabilities,
    MatchGrade,
    compute_score,
    grade_of,
    rank_guides,
    get_match_score,
)


def _traveler(languages=(), interests=()):
    return TravelerPreferences(preferred_languages=languages, interests=interests)


def _guide(languages=(), categories=(), rating=0.0, tours=0):
    return GuideCapabilities(
        languages=languages,
        categories=categories,
        average_rating=rating,
        total_tours=tours,
    )


def test_food_lover_matched_with_experienced_bilingual_guide():
    traveler = _traveler(["EN"], ["FOOD", "CAFE"])
    guide = _guide(["EN", "KO"], ["FOOD"], rating=4.5, tours=20)

    result = compute_score(traveler, guide)

    assert result.breakdown.language == pytest.approx(40)
    assert result.breakdown.interests == pytest.approx(15)
    assert result.breakdown.rating == pytest.approx(18)
    assert result.breakdown.experience == pytest.approx(10)
    assert result.score == 83
    assert result.grade.grade == MatchGrade.A
    assert result.grade.label == "very good"


def test_no_shared_language_and_no_interests():
    traveler = _traveler(["JA"], [])
    guide = _guide(["EN"], [], rating=3.0, tours=0)

    result = compute_score(traveler, guide)

    assert result.breakdown.language == 0
    assert result.breakdown.interests == 0
    assert result.breakdown.rating == pytest.approx(12)
    assert result.breakdown.experience == 0
    assert result.score == 12
    assert result.grade.grade == MatchGrade.D


def test_perfect_guide_scores_100():
    traveler = _traveler(["EN", "KO"], ["FOOD", "NATURE"])
    guide = _guide(["EN", "KO", "JA"], ["FOOD", "NATURE", "CAFE"], rating=5.0, tours=50)

    result = compute_score(traveler, guide)

    assert result.score == 100
    assert result.grade.grade == MatchGrade.S


def test_partial_language_overlap_is_proportional():
    traveler = _traveler(["EN", "KO", "JA", "ZH"], [])
    guide = _guide(["EN"], [])

    result = compute_score(traveler, guide)

    assert result.breakdown.language == pytest.approx(10)


def test_duplicates_do_not_change_the_score():
    with_dupes = _traveler(["EN", "EN", "KO"], ["FOOD", "FOOD"])
    without = _traveler(["KO", "EN"], ["FOOD"])
    guide = _guide(["EN"], ["FOOD"], rating=4.0, tours=3)

    assert compute_score(with_dupes, guide) == compute_score(without, guide)


def test_empty_preferences_contribute_nothing():
    traveler = _traveler([], [])
    guide = _guide(["EN"], ["FOOD"], rating=5.0, tours=10)

    result = compute_score(traveler, guide)

    assert result.breakdown.language == 0
    assert result.breakdown.interests == 0
    assert result.score == 30


def test_score_is_deterministic():
    traveler = _traveler(["EN", "JA"], ["HISTORY", "CAFE", "FOOD"])
    guide = _guide(["JA"], ["CAFE"], rating=3.7, tours=4)

    assert compute_score(traveler, guide) == compute_score(traveler, guide)


def test_experience_saturates_at_ten_tours():
    traveler = _traveler(["EN"], ["FOOD"])
    ten = compute_score(traveler, _guide(tours=10))
    many = compute_score(traveler, _guide(tours=10_000))

    assert ten.breakdown.experience == pytest.approx(10)
    assert many.breakdown.experience == pytest.approx(10)
    assert ten.score == many.score


def test_rounding_is_half_up():
    # 2.5 rating -> 10 points, 5 tours -> 5 points, 1/4 interests -> 7.5 points
    traveler = _traveler([], ["FOOD", "CAFE", "HISTORY", "NATURE"])
    guide = _guide([], ["FOOD"], rating=2.5, tours=5)

    result = compute_score(traveler, guide)

    assert result.breakdown.total == pytest.approx(22.5)
    assert result.score == 23


def test_higher_rating_never_lowers_score():
    traveler = _traveler(["EN"], ["FOOD"])
    scores = [
        get_match_score(traveler, _guide(["EN"], ["FOOD"], rating=r / 2, tours=3))
        for r in range(0, 11)
    ]
    assert scores == sorted(scores)


def test_more_tours_never_lowers_score():
    traveler = _traveler(["EN"], ["FOOD"])
    scores = [
        get_match_score(traveler, _guide(["EN"], [], rating=4.2, tours=t))
        for t in range(0, 12)
    ]
    assert scores == sorted(scores)


def test_adding_wanted_language_never_lowers_score():
    traveler = _traveler(["EN", "KO"], ["FOOD"])
    before = get_match_score(traveler, _guide(["EN"], ["FOOD"], rating=4.0, tours=5))
    after = get_match_score(traveler, _guide(["EN", "KO"], ["FOOD"], rating=4.0, tours=5))

    assert after >= before
    assert after == before + 20


def test_score_stays_in_bounds_with_malformed_numbers():
    traveler = _traveler(["EN"], ["FOOD"])

    high = compute_score(traveler, _guide(["EN"], ["FOOD"], rating=9.0, tours=99))
    low = compute_score(traveler, _guide([], [], rating=-3.0, tours=-5))

    assert high.score == 100
    assert low.score == 0


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, MatchGrade.S),
        (90, MatchGrade.S),
        (89, MatchGrade.A),
        (80, MatchGrade.A),
        (79, MatchGrade.B),
        (70, MatchGrade.B),
        (69, MatchGrade.C),
        (60, MatchGrade.C),
        (59, MatchGrade.D),
        (0, MatchGrade.D),
    ],
)
def test_grade_boundaries(score, expected):
    assert grade_of(score).grade == expected


def test_grade_outside_range_falls_through():
    assert grade_of(150).grade == MatchGrade.S
    assert grade_of(-20).grade == MatchGrade.D


def test_grade_labels():
    assert grade_of(95).label == "perfect match"
    assert grade_of(75).label == "good"
    assert grade_of(65).label == "fair"
    assert grade_of(10).label == "low"


def test_rank_guides_is_descending_and_stable():
    ranked = rank_guides([("A", 70), ("B", 90), ("C", 70)])

    assert ranked == [("B", 90), ("A", 70), ("C", 70)]


def test_rank_guides_empty_pool():
    assert rank_guides([]) == []


def test_rank_guides_missing_score_ranks_as_zero():
    ranked = rank_guides([("A", None), ("B", 5), ("C", 0)])

    assert [name for name, _ in ranked] == ["B", "A", "C"]


def test_rank_guides_does_not_mutate_input():
    pairs = [("A", 10), ("B", 20)]
    rank_guides(pairs)
    assert pairs == [("A", 10), ("B", 20)]


def test_match_scorer_facade():
    scorer = MatchScorer()
    traveler = _traveler(["EN"], ["FOOD", "CAFE"])
    guide = _guide(["EN", "KO"], ["FOOD"], rating=4.5, tours=20)

    result = scorer.compute_score(traveler, guide)

    assert result.score == 83
    assert scorer.grade_of(result.score).grade == MatchGrade.A
    assert scorer.rank_guides([("x", 1), ("y", 2)]) == [("y", 2), ("x", 1)]


def test_score_candidates_ranks_pool_and_grade_helpers():
    from guide_matching.logic.classifier import filter_by_grade, get_grade_counts
    from guide_matching.logic.contracts import GuideCandidate

    traveler = _traveler(["EN"], ["FOOD", "CAFE"])
    candidates = [
        GuideCandidate(guide_id="weak", capabilities=_guide(["JA"], [], rating=1.0)),
        GuideCandidate(guide_id="strong", capabilities=_guide(["EN"], ["FOOD"], rating=4.5, tours=20)),
    ]

    scored = MatchScorer().score_candidates(traveler, candidates)

    assert [s.candidate.guide_id for s in scored] == ["strong", "weak"]
    assert [s.score for s in scored] == [83, 4]

    counts = get_grade_counts(scored)
    assert counts[MatchGrade.A] == 1
    assert counts[MatchGrade.D] == 1
    assert counts[MatchGrade.S] == 0
    assert [s.candidate.guide_id for s in filter_by_grade(scored, MatchGrade.D)] == ["weak"]
