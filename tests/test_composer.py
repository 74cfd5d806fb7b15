from __future__ import annotations

import pytest

from app.services.results.composer import (
    compose_aggregated_result,
    compose_single_result,
    is_result_viewable,
    merge_campaign_config,
    use_aggregated_view,
)
from app.services.results.models import Campaign, Evaluation, EvaluationTemplate
from app.services.scoring.models import AdjustmentPayload, RaterResponse

TEMPLATE = EvaluationTemplate.model_validate(
    {"id": 1, "type": "역량평가", "items": [{"id": 1, "title": "전문성"}, {"id": 2, "title": "태도"}]}
)


def _evaluation() -> Evaluation:
    return Evaluation.model_validate(
        {"id": "ev-9", "name": "연간 평가", "type": "역량평가", "subject": "이영희", "ratingScale": "5점"}
    )


def _campaign(**overrides) -> Campaign:
    data = {
        "id": "cmp-1",
        "ratingScale": "100점",
        "scoringRule": "가중합",
        "adjustmentMode": "points",
        "adjustmentRange": 5,
        "raterGroups": [{"role": "SELF", "weight": 40}, {"role": "LEADER", "weight": 60}],
    }
    data.update(overrides)
    return Campaign.model_validate(data)


def _responses() -> list[RaterResponse]:
    return [
        RaterResponse.model_validate(
            {"relation": "SELF", "totalScore": 90, "answers": [{"itemId": 1, "score": 90, "comment": "성실함"}]}
        ),
        RaterResponse.model_validate(
            {"relation": "LEADER", "totalScore": 70, "answers": [{"itemId": 1, "score": 60, "comment": ""}]}
        ),
    ]


def test_merge_campaign_config_overrides_scale_and_rule() -> None:
    merged = merge_campaign_config(_evaluation(), _campaign())
    assert merged.rating_scale == "100점"
    assert merged.scoring_rule == "가중합"
    assert merge_campaign_config(_evaluation(), None).rating_scale == "5점"
    kept = merge_campaign_config(_evaluation(), _campaign(ratingScale=None))
    assert kept.rating_scale == "5점"


def test_compose_aggregated_result_applies_adjustment() -> None:
    adjustment = AdjustmentPayload.model_validate(
        {"managerAdjustment": {"value": 8}, "hqAdjustment": {"value": -1}}
    )
    result = compose_aggregated_result(_evaluation(), _campaign(), _responses(), adjustment, [TEMPLATE])
    assert result is not None
    # 78 + 5(범위 제한) - 1
    assert result.final_score == pytest.approx(82)
    assert result.final_grade == "80-89"
    assert result.competencies[0].final_score == pytest.approx(90 * 0.4 + 60 * 0.6)
    assert result.competencies[1].final_score == 0
    # 집계 답변은 코멘트를 비우므로 피드백이 없다
    assert result.peer_feedback == []


def test_compose_aggregated_result_without_responses() -> None:
    assert compose_aggregated_result(_evaluation(), _campaign(), [], None, [TEMPLATE]) is None


def test_compose_single_result_keeps_comments() -> None:
    response = _responses()[0]
    result = compose_single_result(_evaluation(), None, response, None, [TEMPLATE])
    assert result is not None
    assert result.final_score == 90
    # 캠페인이 없으면 평가 레코드의 5점 척도 사용 → 정규화 1800점 → 최고 등급
    assert result.final_grade == "5"
    assert [(entry.from_, entry.comment) for entry in result.peer_feedback] == [("전문성", "성실함")]
    assert compose_single_result(_evaluation(), None, None, None, []) is None


def test_result_visibility_rules() -> None:
    assert is_result_viewable(None, None)
    assert is_result_viewable(_campaign(), "SUBMITTED")
    assert not is_result_viewable(_campaign(allowReview=False), "SUBMITTED")
    assert is_result_viewable(_campaign(allowReview=False), "REVIEW_OPEN")


def test_use_aggregated_view() -> None:
    assert use_aggregated_view(_campaign(), "emp-1")
    assert not use_aggregated_view(_campaign(), None)
    assert not use_aggregated_view(_campaign(raterGroups=[]), "emp-1")
    assert not use_aggregated_view(None, "emp-1")
