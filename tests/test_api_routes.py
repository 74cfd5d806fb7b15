from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_health(client) -> None:
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_aggregate_weighted(client) -> None:
    resp = await client.post(
        "/api/scoring/aggregate",
        json={
            "responses": [
                {"relation": "SELF", "totalScore": 90, "answers": [{"itemId": 1, "score": 4, "comment": "a"}]},
                {"relation": "LEADER", "totalScore": 70, "answers": [{"itemId": 1, "score": 2, "comment": "b"}]},
            ],
            "raterGroups": [{"role": "SELF", "weight": 40}, {"role": "LEADER", "weight": 60}],
            "scoringRule": "가중합",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalScore"] == pytest.approx(78)
    assert body["answers"][0]["itemId"] == 1
    assert body["answers"][0]["score"] == pytest.approx(2.8)
    assert body["answers"][0]["comment"] == ""


@pytest.mark.asyncio
async def test_aggregate_rejects_unknown_relation(client) -> None:
    resp = await client.post(
        "/api/scoring/aggregate",
        json={"responses": [{"relation": "BOSS", "totalScore": 1, "answers": []}]},
    )
    assert resp.status_code == 400
    assert resp.json()["error_code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_adjust_points_mode(client) -> None:
    resp = await client.post(
        "/api/scoring/adjust",
        json={
            "baseScore": 70,
            "adjustment": {"managerAdjustment": {"value": 5, "note": "성과 반영"}, "hqAdjustment": {"value": -3}},
            "config": {"adjustmentMode": "points", "adjustmentRange": 10, "ratingScale": "100점"},
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"adjustedScore": 72, "appliedManager": 5, "appliedHq": -3}


@pytest.mark.asyncio
async def test_adjust_preview(client) -> None:
    resp = await client.post(
        "/api/scoring/adjust/preview",
        json={"baseScore": 4, "role": "hq", "value": 50, "config": {"adjustmentMode": "percent", "ratingScale": "5점"}},
    )
    assert resp.status_code == 200
    assert resp.json() == {"baseScore": 4, "adjustedScore": 5}


@pytest.mark.asyncio
async def test_grade(client) -> None:
    resp = await client.post("/api/scoring/grade", json={"ratingScale": "10점", "score": 8.6})
    assert resp.status_code == 200
    body = resp.json()
    assert body["scoringType"] == "10point"
    assert body["normalizedScore"] == pytest.approx(86)
    assert body["grade"] == "9"


@pytest.mark.asyncio
async def test_build_result_aggregated(client) -> None:
    resp = await client.post(
        "/api/results/build",
        json={
            "evaluation": {
                "id": "ev-1",
                "name": "상반기 평가",
                "subject": "홍길동",
                "subjectId": "emp-1",
                "period": "2026 H1",
                "templateSnapshot": {"items": [{"id": 1, "title": "문제해결"}]},
            },
            "campaign": {
                "ratingScale": "100점",
                "raterGroups": [{"role": "SELF", "weight": 50}, {"role": "PEER", "weight": 50}],
            },
            "responses": [
                {"relation": "SELF", "totalScore": 80, "answers": [{"itemId": 1, "score": 80, "comment": ""}]},
                {"relation": "PEER", "totalScore": 90, "answers": [{"itemId": 1, "score": 90, "comment": ""}]},
            ],
            "adjustment": {"hqAdjustment": {"value": 2}},
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["finalScore"] == pytest.approx(87)
    assert body["finalGrade"] == "80-89"
    assert body["summary"] == "총점 87점으로 평가가 완료되었습니다."
    assert body["competencies"] == [{"name": "문제해결", "selfScore": 85, "peerScore": 0, "finalScore": 85}]
    assert body["areasForImprovement"] == ["문제해결 항목은 개선 여지가 있습니다."]
    assert body["wordCloudData"] is None


@pytest.mark.asyncio
async def test_build_result_blocked_when_review_closed(client) -> None:
    resp = await client.post(
        "/api/results/build",
        json={
            "evaluation": {"name": "평가", "subject": "홍길동"},
            "campaign": {"allowReview": False},
            "assignmentStatus": "SUBMITTED",
            "responses": [{"relation": "SELF", "totalScore": 3, "answers": []}],
        },
    )
    assert resp.status_code == 409
    assert resp.json()["error_code"] == "RESULT_UNAVAILABLE"


@pytest.mark.asyncio
async def test_build_result_without_responses(client) -> None:
    resp = await client.post("/api/results/build", json={"evaluation": {"name": "평가", "subject": "홍길동"}})
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_monitoring_summaries(client) -> None:
    resp = await client.post(
        "/api/monitoring/summaries",
        json={
            "config": {"ratingScale": "100점"},
            "assignments": [
                {"id": "a1", "evaluatorId": "m1", "evaluateeId": "m1", "relation": "SELF", "status": "SUBMITTED"},
                {"id": "a2", "evaluatorId": "m2", "evaluateeId": "m1", "relation": "PEER", "status": "IN_PROGRESS"},
            ],
            "results": [{"evaluateeId": "m1", "relation": "SELF", "totalScore": 64}],
            "members": [{"id": "m1", "name": "윤서연", "role": "QA"}],
            "adjustments": [{"evaluateeId": "m1", "managerAdjustment": {"value": 6}}],
            "statusFilter": "incomplete",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["stats"] == {"total": 2, "completed": 1, "inProgress": 1, "notStarted": 0}
    assert len(body["summaries"]) == 1
    summary = body["summaries"][0]
    assert summary["name"] == "윤서연"
    assert summary["baseScore"] == pytest.approx(64)
    assert summary["finalScore"] == pytest.approx(70)
    assert summary["managerAdjustment"] == 6
    assert body["participants"][1]["name"] == "Unknown"
