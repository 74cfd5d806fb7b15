"""평가 점수 집계/조정 값 객체."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

AdjustmentMode = Literal["points", "percent"]
AdjustmentRole = Literal["manager", "hq"]
ScoringRule = Literal["가중합", "단순평균", "총점합산"]

UNKNOWN_RELATION = "UNKNOWN"


class RaterRelation(str, Enum):
    """평가자와 피평가자의 관계."""

    SELF = "SELF"
    PEER = "PEER"
    LEADER = "LEADER"
    MEMBER = "MEMBER"


class CamelModel(BaseModel):
    """camelCase 문서 필드를 그대로 받는 공통 베이스."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseAnswer(CamelModel):
    """응답 내 단일 항목 답변."""

    item_id: int
    score: float = 0
    grade: str | None = None
    comment: str = ""


class RaterResponse(CamelModel):
    """평가자 한 명이 한 피평가자에 대해 제출한 응답."""

    answers: list[ResponseAnswer] = Field(default_factory=list)
    total_score: float = 0
    relation: RaterRelation | None = None
    completed_at: str | None = Field(
        default=None,
        validation_alias=AliasChoices("completedAt", "submittedAt", "completed_at"),
    )
    evaluator_name: str | None = None
    evaluator_email: str | None = None

    @property
    def relation_key(self) -> str:
        """집계용 관계 키. 관계가 없으면 `UNKNOWN`."""

        return self.relation.value if self.relation else UNKNOWN_RELATION


class RaterGroup(CamelModel):
    """캠페인의 평가자 그룹 가중치 설정."""

    role: RaterRelation
    weight: float = Field(0, ge=0)
    required: bool | None = None


class AdjustmentEntry(CamelModel):
    """관리자/본부의 점수 조정 한 건."""

    value: float
    note: str | None = None
    adjusted_by: str | None = None
    adjusted_at: datetime | None = None


class AdjustmentPayload(CamelModel):
    """피평가자별 조정 레코드 (`campaignId_evaluateeId`)."""

    manager_adjustment: AdjustmentEntry | None = None
    hq_adjustment: AdjustmentEntry | None = None

    def is_empty(self) -> bool:
        return self.manager_adjustment is None and self.hq_adjustment is None


class ScoringConfig(CamelModel):
    """캠페인/평가 레코드의 점수 관련 설정."""

    adjustment_mode: AdjustmentMode | None = None
    adjustment_range: float | None = None
    rating_scale: str | None = None
    scoring_rule: ScoringRule | None = None
    rater_groups: list[RaterGroup] | None = None


class AggregatedAnswer(ResponseAnswer):
    """역할별 점수를 합친 항목 점수. 코멘트는 비워 둔다."""


class AggregationResult(CamelModel):
    """여러 응답을 합친 총점과 항목별 점수."""

    total_score: float
    answers: list[AggregatedAnswer] = Field(default_factory=list)


class AdjustmentResult(CamelModel):
    """조정 적용 결과. `applied_*`는 범위 제한 후 실제 반영 값."""

    adjusted_score: float
    applied_manager: float = 0
    applied_hq: float = 0


class AdjustmentPreview(CamelModel):
    base_score: float
    adjusted_score: float


__all__ = [
    "AdjustmentEntry",
    "AdjustmentMode",
    "AdjustmentPayload",
    "AdjustmentPreview",
    "AdjustmentResult",
    "AdjustmentRole",
    "AggregatedAnswer",
    "AggregationResult",
    "CamelModel",
    "RaterGroup",
    "RaterRelation",
    "RaterResponse",
    "ResponseAnswer",
    "ScoringConfig",
    "ScoringRule",
    "UNKNOWN_RELATION",
]
