from __future__ import annotations

import pytest

from app.services.scoring.aggregate import (
    GroupWeightResolver,
    UnweightedResolver,
    aggregate_evaluation_responses,
    select_weight_resolver,
)
from app.services.scoring.models import RaterGroup, RaterResponse


def _response(relation: str | None, total: float, answers: dict[int, float] | None = None) -> RaterResponse:
    return RaterResponse(
        relation=relation,
        total_score=total,
        answers=[{"itemId": item_id, "score": score, "comment": "메모"} for item_id, score in (answers or {}).items()],
    )


def _groups(*pairs: tuple[str, float]) -> list[RaterGroup]:
    return [RaterGroup(role=role, weight=weight) for role, weight in pairs]


def _scores(result) -> dict[int, float]:
    return {answer.item_id: answer.score for answer in result.answers}


@pytest.mark.parametrize("rule", [None, "가중합", "단순평균", "총점합산"])
def test_empty_responses_return_zero(rule) -> None:
    result = aggregate_evaluation_responses([], _groups(("SELF", 50)), rule)
    assert result.total_score == 0
    assert result.answers == []


def test_weighted_total_example() -> None:
    responses = [_response("SELF", 90), _response("LEADER", 70)]
    result = aggregate_evaluation_responses(responses, _groups(("SELF", 40), ("LEADER", 60)), "가중합")
    assert result.total_score == pytest.approx(78)


def test_zero_weight_falls_back_to_simple_average() -> None:
    result = aggregate_evaluation_responses([_response("PEER", 80)], _groups(("PEER", 0)), "가중합")
    assert result.total_score == pytest.approx(80)


def test_missing_groups_redistribute_weight() -> None:
    responses = [_response("SELF", 60), _response("PEER", 90), _response("PEER", 70)]
    groups = _groups(("SELF", 20), ("PEER", 30), ("LEADER", 50))
    result = aggregate_evaluation_responses(responses, groups, None)
    # SELF 60 * 0.4 + PEER 평균 80 * 0.6
    assert result.total_score == pytest.approx(72)


def test_simple_average_rule_ignores_groups() -> None:
    responses = [_response("SELF", 90, {1: 5}), _response("LEADER", 70, {1: 3}), _response("LEADER", 50, {1: 1})]
    result = aggregate_evaluation_responses(responses, _groups(("SELF", 90), ("LEADER", 10)), "단순평균")
    assert result.total_score == pytest.approx(70)
    assert _scores(result) == {1: pytest.approx(3)}


def test_no_groups_uses_pooled_item_average() -> None:
    responses = [
        _response("SELF", 4, {1: 4, 2: 2}),
        _response("PEER", 3, {1: 2}),
        _response(None, 5, {2: 5, 3: 1}),
    ]
    result = aggregate_evaluation_responses(responses, None, None)
    assert result.total_score == pytest.approx(4)
    assert _scores(result) == {1: pytest.approx(3), 2: pytest.approx(3.5), 3: pytest.approx(1)}
    assert [answer.item_id for answer in result.answers] == [1, 2, 3]
    assert all(answer.comment == "" for answer in result.answers)


def test_weighted_item_scores_use_role_averages() -> None:
    responses = [
        _response("SELF", 80, {1: 4, 2: 5}),
        _response("LEADER", 60, {1: 2}),
        _response("LEADER", 70, {1: 4}),
    ]
    result = aggregate_evaluation_responses(responses, _groups(("SELF", 1), ("LEADER", 3)), "가중합")
    assert result.total_score == pytest.approx(80 * 0.25 + 65 * 0.75)
    scores = _scores(result)
    assert scores[1] == pytest.approx(4 * 0.25 + 3 * 0.75)
    # LEADER가 답하지 않은 항목은 해당 역할 몫이 0
    assert scores[2] == pytest.approx(5 * 0.25)


def test_unconfigured_relations_do_not_count_in_weighted_total() -> None:
    responses = [_response("SELF", 90), _response("MEMBER", 10), _response(None, 0)]
    result = aggregate_evaluation_responses(responses, _groups(("SELF", 100)), "가중합")
    assert result.total_score == pytest.approx(90)


def test_empty_answers_degrade_to_total_only() -> None:
    result = aggregate_evaluation_responses([_response("SELF", 88)], _groups(("SELF", 1)), None)
    assert result.total_score == pytest.approx(88)
    assert result.answers == []


def test_select_weight_resolver_dispatch() -> None:
    by_role = {"SELF": [_response("SELF", 50)]}
    assert isinstance(select_weight_resolver(by_role, None, None), UnweightedResolver)
    assert isinstance(select_weight_resolver(by_role, [], "가중합"), UnweightedResolver)
    assert isinstance(select_weight_resolver(by_role, _groups(("SELF", 1)), "단순평균"), UnweightedResolver)
    assert isinstance(select_weight_resolver(by_role, _groups(("PEER", 5)), None), UnweightedResolver)

    resolver = select_weight_resolver(by_role, _groups(("SELF", 2), ("PEER", 5)), None)
    assert isinstance(resolver, GroupWeightResolver)
    assert resolver.shares == [("SELF", 1.0)]
