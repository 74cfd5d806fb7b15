"""API 라우터와 엔드포인트 정의."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from app.api.schemas import (
    AdjustPreviewRequest,
    AdjustRequest,
    AggregateRequest,
    GradeRequest,
    GradeResponse,
    HealthResponse,
    MonitoringRequest,
    ResultRequest,
)
from app.services.monitoring import (
    build_adjustments_map,
    build_evaluatee_summaries,
    build_members_map,
    build_participants,
    build_stats,
    filter_summaries,
)
from app.services.monitoring.models import MonitoringReport
from app.services.results import (
    EvaluationResultData,
    compose_aggregated_result,
    compose_single_result,
    is_result_viewable,
    use_aggregated_view,
)
from app.services.scoring import (
    aggregate_evaluation_responses,
    apply_score_adjustments,
    preview_adjustment,
    resolve_scoring_type,
    score_to_grade,
)
from app.services.scoring.models import AdjustmentPreview, AdjustmentResult, AggregationResult
from app.utils.config import get_settings
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse, tags=["system"])
async def health():
    """서비스 가용성을 확인하는 헬스 체크."""

    logger.debug("health:시작")
    return {"status": "ok"}


@router.post(
    "/api/scoring/aggregate",
    response_model=AggregationResult,
    tags=["scoring"],
    summary="평가 응답 집계",
)
async def aggregate(payload: AggregateRequest) -> AggregationResult:
    """여러 평가자 응답을 총점과 항목별 점수로 집계한다.

    - `scoringRule`이 `단순평균`이거나 `raterGroups`가 비어 있으면 모든 응답을 단순 평균.
    - 그 외에는 응답이 있는 그룹끼리 가중치를 재분배해 가중 평균.
    """

    logger.debug("aggregate:시작 responses=%d", len(payload.responses))
    result = aggregate_evaluation_responses(payload.responses, payload.rater_groups, payload.scoring_rule)
    logger.info("aggregate:성공 total=%s items=%d", result.total_score, len(result.answers))
    return result


@router.post(
    "/api/scoring/adjust",
    response_model=AdjustmentResult,
    tags=["scoring"],
    summary="관리자/본부 조정 적용",
)
async def adjust(payload: AdjustRequest) -> AdjustmentResult:
    """기본 점수에 조정을 반영하고, 실제 반영된(범위 제한 후) 조정 값을 함께 돌려준다."""

    config = payload.config
    mode = config.adjustment_mode or get_settings().default_adjustment_mode
    result = apply_score_adjustments(
        payload.base_score,
        payload.adjustment,
        mode,
        config.adjustment_range,
        config.rating_scale,
    )
    logger.info(
        "adjust:성공 base=%s adjusted=%s manager=%s hq=%s",
        payload.base_score,
        result.adjusted_score,
        result.applied_manager,
        result.applied_hq,
    )
    return result


@router.post(
    "/api/scoring/adjust/preview",
    response_model=AdjustmentPreview | None,
    tags=["scoring"],
    summary="조정 미리보기",
)
async def adjust_preview(payload: AdjustPreviewRequest) -> AdjustmentPreview | None:
    """후보 조정 값을 반영했을 때의 점수. 기본 점수가 없으면 `null`."""

    config = payload.config
    if config.adjustment_mode is None:
        config = config.model_copy(update={"adjustment_mode": get_settings().default_adjustment_mode})
    return preview_adjustment(payload.base_score, payload.current, payload.role, payload.value, config)


@router.post("/api/scoring/grade", response_model=GradeResponse, tags=["scoring"], summary="등급 산출")
async def grade(payload: GradeRequest) -> GradeResponse:
    """원 척도 점수를 0~100으로 환산하고 등급을 구한다."""

    scoring_type, normalized = resolve_scoring_type(payload.rating_scale, payload.score)
    return GradeResponse(
        scoring_type=scoring_type,
        normalized_score=normalized,
        grade=score_to_grade(normalized, scoring_type),
    )


@router.post(
    "/api/results/build",
    response_model=EvaluationResultData,
    responses={409: {"description": "열람 불가 또는 제출된 응답 없음"}},
    tags=["results"],
    summary="평가 결과 화면 데이터 구성",
)
async def build_result(payload: ResultRequest) -> EvaluationResultData:
    """응답 집계 → 조정 → 결과 레코드 구성을 한 번에 수행한다.

    - 캠페인에 `raterGroups`가 있고 피평가자가 지정되면 모든 응답을 집계한다.
    - 그 외에는 첫 번째 응답을 단일 결과로 사용한다.
    """

    evaluation = payload.evaluation
    campaign = payload.campaign
    logger.debug("build_result:시작 evaluation=%s responses=%d", evaluation.id, len(payload.responses))

    if not is_result_viewable(campaign, payload.assignment_status):
        raise HTTPException(status_code=409, detail="결과 열람이 허용되지 않았습니다.")

    evaluatee_id = payload.evaluatee_id or evaluation.subject_id
    if use_aggregated_view(campaign, evaluatee_id):
        data = compose_aggregated_result(
            evaluation, campaign, payload.responses, payload.adjustment, payload.templates
        )
    else:
        first = payload.responses[0] if payload.responses else None
        data = compose_single_result(evaluation, campaign, first, payload.adjustment, payload.templates)

    if data is None:
        raise HTTPException(status_code=409, detail="제출된 평가 결과가 없습니다.")
    logger.info("build_result:성공 evaluation=%s score=%s grade=%s", evaluation.id, data.final_score, data.final_grade)
    return data


@router.post(
    "/api/monitoring/summaries",
    response_model=MonitoringReport,
    tags=["monitoring"],
    summary="캠페인 모니터링 요약",
)
async def monitoring_summaries(payload: MonitoringRequest) -> MonitoringReport:
    """배정/제출 결과/조정 레코드로 진행 현황과 피평가자별 점수를 계산한다."""

    members_map = build_members_map(payload.members)
    participants = build_participants(payload.assignments, members_map)
    summaries = build_evaluatee_summaries(
        payload.assignments,
        payload.results,
        members_map,
        build_adjustments_map(payload.adjustments),
        payload.config,
    )
    filtered = filter_summaries(summaries, payload.status_filter, payload.sort_key, payload.low_score_threshold)
    logger.info("monitoring_summaries:성공 participants=%d summaries=%d", len(participants), len(filtered))
    return MonitoringReport(participants=participants, summaries=filtered, stats=build_stats(participants))


__all__ = ["router"]
