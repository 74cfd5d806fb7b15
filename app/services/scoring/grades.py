"""평가 척도 정규화 및 등급 산출."""

from __future__ import annotations

import math
from typing import Literal, NamedTuple

ScoringType = Literal["5grade", "5point", "10point", "100point", "3level", "likert5"]

# (하한, 등급) — 점수 >= 하한이면 해당 등급. 높은 등급부터 나열한다.
GRADE_THRESHOLDS: dict[str, list[tuple[float, str]]] = {
    "5grade": [(95, "S"), (85, "A"), (70, "B"), (60, "C"), (0, "D")],
    "100point": [(90, "90-100"), (80, "80-89"), (70, "70-79"), (60, "60-69"), (50, "50-59"), (0, "0-49")],
    "3level": [(80, "상"), (50, "중"), (0, "하")],
    "likert5": [(80, "매우만족"), (60, "만족"), (40, "보통"), (20, "불만족"), (0, "매우불만족")],
}

# 반올림 후 1..max 정수 등급을 쓰는 척도: (나눌 값, 최대 등급)
POINT_GRADES: dict[str, tuple[float, int]] = {
    "5point": (20, 5),
    "10point": (10, 10),
}

SCALE_MAX: dict[str, float] = {"5점": 5, "7점": 7, "10점": 10, "100점": 100}


class ScoringResolution(NamedTuple):
    scoring_type: ScoringType
    normalized_score: float


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def resolve_score_max(rating_scale: str | None) -> float | None:
    """평가 척도의 만점. 알 수 없는 척도면 None."""

    if rating_scale is None:
        return None
    return SCALE_MAX.get(rating_scale)


def resolve_scoring_type(rating_scale: str | None, score: float) -> ScoringResolution:
    """원 척도 점수를 0~100 점수와 등급 체계로 변환한다.

    7점 척도는 전용 등급표가 없어 100점 체계로 환산한다.
    """

    if rating_scale == "5점":
        return ScoringResolution("5point", score / 5 * 100)
    if rating_scale == "7점":
        return ScoringResolution("100point", score / 7 * 100)
    if rating_scale == "10점":
        return ScoringResolution("10point", score / 10 * 100)
    return ScoringResolution("100point", score)


def score_to_grade(score: float, scoring_type: ScoringType = "5grade") -> str:
    """0~100 점수를 등급 라벨로 변환한다. 범위를 벗어나면 경계 등급으로 맞춘다."""

    bounded = min(100.0, max(0.0, score))
    if scoring_type in POINT_GRADES:
        divisor, top = POINT_GRADES[scoring_type]
        return str(min(top, max(1, _round_half_up(bounded / divisor))))

    thresholds = GRADE_THRESHOLDS.get(scoring_type) or GRADE_THRESHOLDS["5grade"]
    for threshold, label in thresholds:
        if bounded >= threshold:
            return label
    return thresholds[-1][1]


def grade_tier(label: str, scoring_type: ScoringType = "5grade") -> int:
    """등급 라벨의 서열 (0이 최하위). 모르는 라벨은 -1."""

    if scoring_type in POINT_GRADES:
        try:
            return int(label) - 1
        except ValueError:
            return -1
    thresholds = GRADE_THRESHOLDS.get(scoring_type) or GRADE_THRESHOLDS["5grade"]
    labels = [name for _, name in reversed(thresholds)]
    return labels.index(label) if label in labels else -1


__all__ = [
    "GRADE_THRESHOLDS",
    "ScoringResolution",
    "ScoringType",
    "grade_tier",
    "resolve_score_max",
    "resolve_scoring_type",
    "score_to_grade",
]
