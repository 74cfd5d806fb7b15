"""점수 집계/조정/결과 요청·응답 스키마."""

from __future__ import annotations

from pydantic import Field

from app.services.monitoring.models import (
    Assignment,
    Member,
    SortKey,
    StatusFilter,
    StoredAdjustment,
    SubmittedResult,
)
from app.services.results.models import Campaign, Evaluation, EvaluationTemplate
from app.services.scoring.grades import ScoringType
from app.services.scoring.models import (
    AdjustmentPayload,
    AdjustmentRole,
    CamelModel,
    RaterGroup,
    RaterResponse,
    ScoringConfig,
    ScoringRule,
)


class AggregateRequest(CamelModel):
    """응답 집계 요청."""

    responses: list[RaterResponse] = Field(default_factory=list, description="제출된 평가 응답 목록")
    rater_groups: list[RaterGroup] | None = Field(
        None,
        description="평가자 그룹 가중치 (없으면 단순 평균)",
        examples=[[{"role": "SELF", "weight": 40}, {"role": "LEADER", "weight": 60}]],
    )
    scoring_rule: ScoringRule | None = Field(None, description="집계 규칙", examples=["가중합"])


class AdjustRequest(CamelModel):
    """조정 적용 요청."""

    base_score: float = Field(..., description="집계된 기본 점수", examples=[70])
    adjustment: AdjustmentPayload | None = Field(None, description="관리자/본부 조정 레코드")
    config: ScoringConfig = Field(default_factory=ScoringConfig, description="조정 방식/범위/척도")


class AdjustPreviewRequest(CamelModel):
    """저장 전 조정 미리보기 요청."""

    base_score: float | None = Field(None, description="기본 점수 (없으면 미리보기 불가)")
    current: AdjustmentPayload | None = Field(None, description="현재 저장된 조정 레코드")
    role: AdjustmentRole = Field(..., description="조정 주체", examples=["manager"])
    value: float = Field(..., description="후보 조정 값", examples=[5])
    config: ScoringConfig = Field(default_factory=ScoringConfig)


class GradeRequest(CamelModel):
    rating_scale: str | None = Field(None, description="평가 척도", examples=["5점"])
    score: float = Field(..., description="원 척도 점수", examples=[4.2])


class GradeResponse(CamelModel):
    scoring_type: ScoringType
    normalized_score: float
    grade: str


class ResultRequest(CamelModel):
    """결과 화면 구성 요청. 응답이 여러 건이고 캠페인에 그룹이 있으면 집계 결과를 만든다."""

    evaluation: Evaluation
    campaign: Campaign | None = None
    evaluatee_id: str | None = Field(None, description="집계 대상 피평가자")
    assignment_status: str | None = Field(None, description="결과를 여는 배정의 상태")
    responses: list[RaterResponse] = Field(default_factory=list)
    adjustment: AdjustmentPayload | None = None
    templates: list[EvaluationTemplate] = Field(default_factory=list)


class MonitoringRequest(CamelModel):
    """캠페인 모니터링 요약 요청."""

    config: ScoringConfig = Field(default_factory=ScoringConfig)
    assignments: list[Assignment] = Field(default_factory=list)
    results: list[SubmittedResult] = Field(default_factory=list)
    members: list[Member] = Field(default_factory=list)
    adjustments: list[StoredAdjustment] = Field(default_factory=list)
    status_filter: StatusFilter = "all"
    sort_key: SortKey = "score_desc"
    low_score_threshold: float | None = None


__all__ = [
    "AdjustPreviewRequest",
    "AdjustRequest",
    "AggregateRequest",
    "GradeRequest",
    "GradeResponse",
    "MonitoringRequest",
    "ResultRequest",
]
