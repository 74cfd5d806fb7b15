"""집계 → 조정 → 결과 구성 파이프라인."""

from __future__ import annotations

from collections.abc import Sequence

from app.services.scoring import aggregate_evaluation_responses, apply_score_adjustments
from app.services.scoring.models import AdjustmentPayload, RaterResponse
from app.utils.logger import get_logger
from .builder import build_result_data, resolve_template
from .models import Campaign, Evaluation, EvaluationResultData, EvaluationTemplate

logger = get_logger(__name__)

REVIEW_OPEN_STATUS = "REVIEW_OPEN"


def merge_campaign_config(evaluation: Evaluation, campaign: Campaign | None) -> Evaluation:
    """캠페인의 척도/집계 규칙이 있으면 평가 레코드 값을 덮어쓴다."""

    if campaign is None:
        return evaluation
    return evaluation.model_copy(
        update={
            "rating_scale": campaign.rating_scale or evaluation.rating_scale,
            "scoring_rule": campaign.scoring_rule or evaluation.scoring_rule,
        }
    )


def is_result_viewable(campaign: Campaign | None, assignment_status: str | None) -> bool:
    """결과 열람 허용 여부. 캠페인이 열람을 막으면 REVIEW_OPEN 배정만 허용."""

    if campaign is not None and campaign.allow_review is False:
        return assignment_status == REVIEW_OPEN_STATUS
    return True


def use_aggregated_view(campaign: Campaign | None, evaluatee_id: str | None) -> bool:
    """평가자 그룹이 설정된 캠페인의 피평가자 결과는 전체 응답을 집계해 보여준다."""

    return bool(campaign and campaign.rater_groups) and bool(evaluatee_id)


def compose_aggregated_result(
    evaluation: Evaluation,
    campaign: Campaign | None,
    responses: Sequence[RaterResponse],
    adjustment: AdjustmentPayload | None,
    templates: Sequence[EvaluationTemplate] = (),
) -> EvaluationResultData | None:
    """피평가자의 모든 응답을 집계·조정해 결과를 만든다. 응답이 없으면 None."""

    if not responses:
        logger.info("compose_aggregated_result:응답 없음 evaluation=%s", evaluation.id)
        return None

    merged = merge_campaign_config(evaluation, campaign)
    config = campaign or merged
    aggregated = aggregate_evaluation_responses(responses, config.rater_groups, config.scoring_rule)
    adjusted = apply_score_adjustments(
        aggregated.total_score,
        adjustment,
        config.adjustment_mode,
        config.adjustment_range,
        config.rating_scale,
    )
    logger.info(
        "compose_aggregated_result:완료 evaluation=%s base=%s adjusted=%s",
        evaluation.id,
        aggregated.total_score,
        adjusted.adjusted_score,
    )
    template = resolve_template(merged, templates)
    return build_result_data(merged, template, aggregated.model_copy(update={"total_score": adjusted.adjusted_score}))


def compose_single_result(
    evaluation: Evaluation,
    campaign: Campaign | None,
    response: RaterResponse | None,
    adjustment: AdjustmentPayload | None,
    templates: Sequence[EvaluationTemplate] = (),
) -> EvaluationResultData | None:
    """단일 응답에 조정을 반영해 결과를 만든다. 응답이 없으면 None."""

    if response is None:
        logger.info("compose_single_result:응답 없음 evaluation=%s", evaluation.id)
        return None

    merged = merge_campaign_config(evaluation, campaign)
    config = campaign or merged
    adjusted = apply_score_adjustments(
        response.total_score,
        adjustment,
        config.adjustment_mode,
        config.adjustment_range,
        config.rating_scale,
    )
    template = resolve_template(merged, templates)
    return build_result_data(merged, template, response.model_copy(update={"total_score": adjusted.adjusted_score}))


__all__ = [
    "compose_aggregated_result",
    "compose_single_result",
    "is_result_viewable",
    "merge_campaign_config",
    "use_aggregated_view",
]
