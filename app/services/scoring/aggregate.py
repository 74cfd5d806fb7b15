"""평가 응답 집계."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from app.utils.logger import get_logger
from .models import (
    AggregatedAnswer,
    AggregationResult,
    RaterGroup,
    RaterResponse,
    ScoringRule,
)

logger = get_logger(__name__)

SIMPLE_AVERAGE_RULE = "단순평균"


@dataclass
class RoleStats:
    total: float = 0.0
    count: int = 0

    def add(self, score: float) -> None:
        self.total += score
        self.count += 1

    @property
    def average(self) -> float:
        return self.total / self.count if self.count > 0 else 0.0


class UnweightedResolver:
    """역할 구분 없이 모든 응답을 동일 비중으로 평균한다."""

    weighted = False

    def total_score(self, responses: Sequence[RaterResponse]) -> float:
        return sum(r.total_score for r in responses) / len(responses)

    def item_score(self, role_stats: dict[str, RoleStats]) -> float:
        total = sum(stats.total for stats in role_stats.values())
        count = sum(stats.count for stats in role_stats.values())
        return total / count if count > 0 else 0.0


class GroupWeightResolver:
    """응답이 있는 평가자 그룹끼리 가중치를 재분배해 가중 평균한다."""

    weighted = True

    def __init__(self, shares: list[tuple[str, float]], group_averages: dict[str, float]) -> None:
        # shares: (역할, 가중치 / 가용 가중치 합), 캠페인 설정 순서 유지
        self.shares = shares
        self.group_averages = group_averages

    def total_score(self, responses: Sequence[RaterResponse]) -> float:
        return sum(self.group_averages.get(role, 0.0) * share for role, share in self.shares)

    def item_score(self, role_stats: dict[str, RoleStats]) -> float:
        return sum(
            (role_stats[role].average if role in role_stats else 0.0) * share
            for role, share in self.shares
        )


WeightResolver = UnweightedResolver | GroupWeightResolver


def _group_by_relation(responses: Sequence[RaterResponse]) -> dict[str, list[RaterResponse]]:
    grouped: dict[str, list[RaterResponse]] = {}
    for response in responses:
        grouped.setdefault(response.relation_key, []).append(response)
    return grouped


def _collect_item_stats(responses: Sequence[RaterResponse]) -> dict[int, dict[str, RoleStats]]:
    """항목별·역할별 점수 합계/개수. 응답이 없는 역할은 키 자체가 없다."""

    item_stats: dict[int, dict[str, RoleStats]] = {}
    for response in responses:
        role = response.relation_key
        for answer in response.answers:
            role_map = item_stats.setdefault(answer.item_id, {})
            role_map.setdefault(role, RoleStats()).add(answer.score)
    return item_stats


def select_weight_resolver(
    responses_by_role: dict[str, list[RaterResponse]],
    rater_groups: Sequence[RaterGroup] | None,
    scoring_rule: ScoringRule | None,
) -> WeightResolver:
    """집계 규칙과 그룹 설정으로 가중치 전략을 고른다.

    단순평균 규칙, 그룹 미설정, 응답이 있는 그룹의 가중치 합이 0인 경우 모두 비가중 평균.
    """

    if scoring_rule == SIMPLE_AVERAGE_RULE or not rater_groups:
        return UnweightedResolver()

    group_averages: dict[str, float] = {}
    for group in rater_groups:
        bucket = responses_by_role.get(group.role.value, [])
        if bucket:
            group_averages[group.role.value] = sum(r.total_score for r in bucket) / len(bucket)

    available = [group for group in rater_groups if group.role.value in group_averages]
    available_weight_sum = sum(group.weight for group in available)
    if available_weight_sum == 0:
        logger.debug("select_weight_resolver:가용 가중치 0, 단순 평균으로 대체")
        return UnweightedResolver()

    shares = [(group.role.value, group.weight / available_weight_sum) for group in available]
    return GroupWeightResolver(shares, group_averages)


def aggregate_evaluation_responses(
    responses: Sequence[RaterResponse],
    rater_groups: Sequence[RaterGroup] | None = None,
    scoring_rule: ScoringRule | None = None,
) -> AggregationResult:
    """여러 평가자의 응답을 하나의 총점/항목별 점수로 집계한다."""

    logger.debug(
        "aggregate_evaluation_responses:시작 responses=%d groups=%d rule=%s",
        len(responses),
        len(rater_groups or []),
        scoring_rule,
    )
    if not responses:
        return AggregationResult(total_score=0, answers=[])

    responses_by_role = _group_by_relation(responses)
    item_stats = _collect_item_stats(responses)
    resolver = select_weight_resolver(responses_by_role, rater_groups, scoring_rule)

    total_score = resolver.total_score(responses)
    answers = [
        AggregatedAnswer(item_id=item_id, score=resolver.item_score(role_stats), comment="")
        for item_id, role_stats in item_stats.items()
    ]
    logger.debug(
        "aggregate_evaluation_responses:종료 weighted=%s total=%s items=%d",
        resolver.weighted,
        total_score,
        len(answers),
    )
    return AggregationResult(total_score=total_score, answers=answers)


__all__ = [
    "GroupWeightResolver",
    "RoleStats",
    "UnweightedResolver",
    "WeightResolver",
    "aggregate_evaluation_responses",
    "select_weight_resolver",
]
