from __future__ import annotations

import pytest

from app.services.scoring.grades import (
    GRADE_THRESHOLDS,
    grade_tier,
    resolve_score_max,
    resolve_scoring_type,
    score_to_grade,
)

ALL_TYPES = ["5grade", "5point", "10point", "100point", "3level", "likert5"]


def test_resolve_scoring_type_per_scale() -> None:
    assert resolve_scoring_type("5점", 4) == ("5point", pytest.approx(80))
    assert resolve_scoring_type("10점", 7.5) == ("10point", pytest.approx(75))
    assert resolve_scoring_type("100점", 83) == ("100point", 83)
    assert resolve_scoring_type("기타", 61) == ("100point", 61)
    assert resolve_scoring_type(None, 42) == ("100point", 42)


def test_seven_point_scale_uses_hundred_point_type() -> None:
    scoring_type, normalized = resolve_scoring_type("7점", 7)
    assert scoring_type == "100point"
    assert normalized == pytest.approx(100)


def test_score_to_grade_5grade_boundaries() -> None:
    assert score_to_grade(96, "5grade") == "S"
    assert score_to_grade(95, "5grade") == "S"
    assert score_to_grade(86, "5grade") == "A"
    assert score_to_grade(75, "5grade") == "B"
    assert score_to_grade(65, "5grade") == "C"
    assert score_to_grade(40, "5grade") == "D"


def test_score_to_grade_point_types() -> None:
    assert score_to_grade(100, "5point") == "5"
    assert score_to_grade(80, "5point") == "4"
    assert score_to_grade(20, "5point") == "1"
    assert score_to_grade(0, "5point") == "1"
    assert score_to_grade(50, "5point") == "3"  # 2.5는 올림
    assert score_to_grade(75, "10point") == "8"
    assert score_to_grade(3, "10point") == "1"


def test_score_to_grade_threshold_tables() -> None:
    assert score_to_grade(89.9, "100point") == "80-89"
    assert score_to_grade(49, "100point") == "0-49"
    assert score_to_grade(80, "3level") == "상"
    assert score_to_grade(50, "3level") == "중"
    assert score_to_grade(59, "likert5") == "보통"


@pytest.mark.parametrize("scoring_type", ALL_TYPES)
def test_out_of_range_scores_clamp_to_boundary(scoring_type: str) -> None:
    assert score_to_grade(-15, scoring_type) == score_to_grade(0, scoring_type)
    assert score_to_grade(140, scoring_type) == score_to_grade(100, scoring_type)


@pytest.mark.parametrize("scoring_type", ALL_TYPES)
def test_grade_is_monotonic(scoring_type: str) -> None:
    tiers = [grade_tier(score_to_grade(step / 2, scoring_type), scoring_type) for step in range(0, 201)]
    assert all(tier >= 0 for tier in tiers)
    assert tiers == sorted(tiers)


def test_grade_tier_order() -> None:
    labels = [label for _, label in GRADE_THRESHOLDS["5grade"]]
    assert [grade_tier(label, "5grade") for label in labels] == [4, 3, 2, 1, 0]
    assert grade_tier("Z", "5grade") == -1


def test_resolve_score_max() -> None:
    assert resolve_score_max("5점") == 5
    assert resolve_score_max("7점") == 7
    assert resolve_score_max("10점") == 10
    assert resolve_score_max("100점") == 100
    assert resolve_score_max("등급") is None
    assert resolve_score_max(None) is None
