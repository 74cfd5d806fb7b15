"""캠페인 모니터링 모델."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from app.services.scoring.models import (
    AdjustmentPayload,
    CamelModel,
    RaterRelation,
    ResponseAnswer,
)

ParticipantState = Literal["completed", "in_progress", "not_started", "review_open", "resubmit_requested"]
StatusFilter = Literal["all", "complete", "incomplete"]
SortKey = Literal["score_desc", "score_asc", "submission_desc", "name"]


class Member(CamelModel):
    id: str
    name: str | None = None
    role: str | None = None


class Assignment(CamelModel):
    """평가자-피평가자 배정."""

    id: str
    evaluator_id: str | None = None
    evaluatee_id: str | None = None
    relation: RaterRelation | None = None
    status: str | None = None
    progress: float = 0


class SubmittedResult(CamelModel):
    """제출된 평가 결과 문서."""

    evaluatee_id: str | None = None
    relation: RaterRelation | None = None
    total_score: float | None = None
    answers: list[ResponseAnswer] | None = None


class StoredAdjustment(AdjustmentPayload):
    """`campaignId_evaluateeId` 문서."""

    id: str | None = None
    campaign_id: str | None = None
    evaluatee_id: str | None = None


class ParticipantStatus(CamelModel):
    assignment_id: str
    name: str
    team: str
    evaluatee_name: str
    relation: RaterRelation | None = None
    status: ParticipantState
    progress: float = 0


class EvaluateeSummary(CamelModel):
    id: str
    name: str
    team: str
    assignment_count: int
    submitted_count: int
    leader_assignment_count: int = 0
    leader_submitted: bool = False
    has_manager_adjustment: bool = False
    base_score: float | None = None
    final_score: float | None = None
    manager_adjustment: float | None = None
    hq_adjustment: float | None = None


class MonitoringStats(CamelModel):
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    not_started: int = 0


class MonitoringReport(CamelModel):
    participants: list[ParticipantStatus] = Field(default_factory=list)
    summaries: list[EvaluateeSummary] = Field(default_factory=list)
    stats: MonitoringStats = Field(default_factory=MonitoringStats)


__all__ = [
    "Assignment",
    "EvaluateeSummary",
    "Member",
    "MonitoringReport",
    "MonitoringStats",
    "ParticipantState",
    "ParticipantStatus",
    "SortKey",
    "StatusFilter",
    "StoredAdjustment",
    "SubmittedResult",
]
