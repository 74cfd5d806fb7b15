"""캠페인 모니터링 화면용 피평가자 요약/진행 현황."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from app.services.scoring import aggregate_evaluation_responses, apply_score_adjustments
from app.services.scoring.models import RaterRelation, RaterResponse, ScoringConfig
from app.utils.logger import get_logger
from .models import (
    Assignment,
    EvaluateeSummary,
    Member,
    MonitoringStats,
    ParticipantState,
    ParticipantStatus,
    SortKey,
    StatusFilter,
    StoredAdjustment,
    SubmittedResult,
)

logger = get_logger(__name__)

UNKNOWN_NAME = "Unknown"
DEFAULT_TEAM = "Team Member"
SUBMITTED_STATUSES = {"SUBMITTED", "REVIEW_OPEN"}

ASSIGNMENT_STATES: dict[str, ParticipantState] = {
    "REVIEW_OPEN": "review_open",
    "RESUBMIT_REQUESTED": "resubmit_requested",
    "SUBMITTED": "completed",
    "IN_PROGRESS": "in_progress",
}


@dataclass
class _Counts:
    assignments: int = 0
    submitted: int = 0


def build_members_map(members: Iterable[Member]) -> dict[str, Member]:
    return {member.id: member for member in members}


def build_adjustments_map(adjustments: Iterable[StoredAdjustment]) -> dict[str, StoredAdjustment]:
    """피평가자 ID → 조정 레코드. ID가 없는 레코드는 무시한다."""

    return {adj.evaluatee_id: adj for adj in adjustments if adj.evaluatee_id}


def build_participants(
    assignments: Sequence[Assignment],
    members_map: dict[str, Member],
) -> list[ParticipantStatus]:
    """배정별 평가자 진행 상태 목록."""

    participants = []
    for assignment in assignments:
        evaluator = members_map.get(assignment.evaluator_id or "")
        evaluatee = members_map.get(assignment.evaluatee_id or "")
        participants.append(
            ParticipantStatus(
                assignment_id=assignment.id,
                name=(evaluator.name if evaluator else None) or UNKNOWN_NAME,
                team=(evaluator.role if evaluator else None) or DEFAULT_TEAM,
                evaluatee_name=(evaluatee.name if evaluatee else None) or UNKNOWN_NAME,
                relation=assignment.relation,
                status=ASSIGNMENT_STATES.get(assignment.status or "", "not_started"),
                progress=assignment.progress,
            )
        )
    return participants


def _count_assignments(
    assignments: Sequence[Assignment],
) -> tuple[dict[str, _Counts], dict[str, _Counts]]:
    counts: dict[str, _Counts] = {}
    leaders: dict[str, _Counts] = {}
    for assignment in assignments:
        if not assignment.evaluatee_id:
            continue
        submitted = assignment.status in SUBMITTED_STATUSES
        entry = counts.setdefault(assignment.evaluatee_id, _Counts())
        entry.assignments += 1
        entry.submitted += int(submitted)
        if assignment.relation == RaterRelation.LEADER:
            leader = leaders.setdefault(assignment.evaluatee_id, _Counts())
            leader.assignments += 1
            leader.submitted += int(submitted)
    return counts, leaders


def _group_responses(
    results: Sequence[SubmittedResult],
    counts: dict[str, _Counts],
) -> dict[str, list[RaterResponse]]:
    """제출 결과를 피평가자별 응답으로 묶는다. 배정 없이 결과만 있는 피평가자도 포함."""

    grouped: dict[str, list[RaterResponse]] = {}
    for result in results:
        if not result.evaluatee_id:
            continue
        grouped.setdefault(result.evaluatee_id, []).append(
            RaterResponse(
                answers=result.answers or [],
                total_score=result.total_score or 0,
                relation=result.relation,
            )
        )
        counts.setdefault(result.evaluatee_id, _Counts())
    return grouped


def build_evaluatee_summaries(
    assignments: Sequence[Assignment],
    results: Sequence[SubmittedResult],
    members_map: dict[str, Member],
    adjustments_map: dict[str, StoredAdjustment],
    config: ScoringConfig,
) -> list[EvaluateeSummary]:
    """피평가자별 제출 현황과 기본/최종 점수를 계산해 이름순으로 반환한다."""

    logger.debug(
        "build_evaluatee_summaries:시작 assignments=%d results=%d",
        len(assignments),
        len(results),
    )
    counts, leaders = _count_assignments(assignments)
    responses_by_evaluatee = _group_responses(results, counts)

    summaries = []
    for evaluatee_id, count in counts.items():
        member = members_map.get(evaluatee_id)
        responses = responses_by_evaluatee.get(evaluatee_id, [])
        adjustment = adjustments_map.get(evaluatee_id)

        base_score: float | None = None
        final_score: float | None = None
        applied_manager = applied_hq = 0.0
        if responses:
            base_score = aggregate_evaluation_responses(
                responses, config.rater_groups, config.scoring_rule
            ).total_score
            adjusted = apply_score_adjustments(
                base_score,
                adjustment,
                config.adjustment_mode,
                config.adjustment_range,
                config.rating_scale,
            )
            final_score = adjusted.adjusted_score
            applied_manager, applied_hq = adjusted.applied_manager, adjusted.applied_hq

        leader = leaders.get(evaluatee_id, _Counts())
        has_assignments = count.assignments > 0
        summaries.append(
            EvaluateeSummary(
                id=evaluatee_id,
                name=(member.name if member else None) or UNKNOWN_NAME,
                team=(member.role if member else None) or DEFAULT_TEAM,
                assignment_count=count.assignments if has_assignments else len(responses),
                submitted_count=count.submitted if has_assignments else len(responses),
                leader_assignment_count=leader.assignments,
                leader_submitted=leader.assignments > 0 and leader.submitted >= leader.assignments,
                has_manager_adjustment=bool(adjustment and adjustment.manager_adjustment),
                base_score=base_score,
                final_score=final_score,
                manager_adjustment=applied_manager or None,
                hq_adjustment=applied_hq or None,
            )
        )

    summaries.sort(key=lambda s: s.name)
    logger.debug("build_evaluatee_summaries:종료 summaries=%d", len(summaries))
    return summaries


def build_stats(participants: Sequence[ParticipantStatus]) -> MonitoringStats:
    return MonitoringStats(
        total=len(participants),
        completed=sum(1 for p in participants if p.status in ("completed", "review_open")),
        in_progress=sum(1 for p in participants if p.status in ("in_progress", "resubmit_requested")),
        not_started=sum(1 for p in participants if p.status == "not_started"),
    )


def _submission_rate(summary: EvaluateeSummary) -> float:
    if summary.assignment_count <= 0:
        return 0.0
    return summary.submitted_count / summary.assignment_count


def filter_summaries(
    summaries: Sequence[EvaluateeSummary],
    status_filter: StatusFilter = "all",
    sort_key: SortKey = "score_desc",
    low_score_threshold: float | None = None,
) -> list[EvaluateeSummary]:
    """제출 상태/저점수 기준으로 거르고 정렬한다. 점수가 없는 항목은 점수 정렬에서 항상 뒤로 간다."""

    items = list(summaries)
    if status_filter == "complete":
        items = [s for s in items if s.assignment_count > 0 and s.submitted_count >= s.assignment_count]
    elif status_filter == "incomplete":
        items = [s for s in items if s.assignment_count > 0 and s.submitted_count < s.assignment_count]

    if low_score_threshold is not None:
        items = [s for s in items if s.final_score is not None and s.final_score <= low_score_threshold]

    if sort_key == "name":
        return sorted(items, key=lambda s: s.name)
    if sort_key == "submission_desc":
        return sorted(items, key=_submission_rate, reverse=True)
    if sort_key == "score_asc":
        return sorted(items, key=lambda s: s.final_score if s.final_score is not None else math.inf)
    return sorted(
        items,
        key=lambda s: s.final_score if s.final_score is not None else -math.inf,
        reverse=True,
    )


__all__ = [
    "build_adjustments_map",
    "build_evaluatee_summaries",
    "build_members_map",
    "build_participants",
    "build_stats",
    "filter_summaries",
]
