"""평가 결과 화면 데이터 구성."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from app.services.scoring.grades import resolve_scoring_type, score_to_grade
from app.services.scoring.models import AggregationResult, RaterResponse, ResponseAnswer
from app.utils.logger import get_logger
from .avatar import get_avatar_url
from .models import (
    AnswerDetail,
    Competency,
    Evaluation,
    EvaluationResultData,
    EvaluationTemplate,
    FeedbackEntry,
    SubjectInfo,
    TemplateItem,
    WordCloudEntry,
)

logger = get_logger(__name__)

TOKEN_SPLIT = re.compile(r"[\s,.;!?]+")
WORD_CLOUD_LIMIT = 10
DEFAULT_SUBJECT_ROLE = "평가 대상"
DEFAULT_FEEDBACK_TITLE = "피드백"


def _item_title(item_id: int, title: str | None = None) -> str:
    return title or f"항목 {item_id}"


def format_score(score: float) -> str:
    """정수값이면 소수점 없이 표시한다."""

    return str(int(score)) if float(score).is_integer() else str(score)


def resolve_template(
    evaluation: Evaluation,
    templates: Sequence[EvaluationTemplate],
) -> EvaluationTemplate | None:
    """평가에 저장된 템플릿 스냅샷을 우선, 없으면 같은 유형의 템플릿을 찾는다."""

    if evaluation.template_snapshot is not None:
        return evaluation.template_snapshot
    return next((t for t in templates if t.type == evaluation.type), None)


def summarize_by_score(competencies: Sequence[Competency]) -> tuple[list[str], list[str]]:
    """점수 상위/하위 2개 항목으로 강점과 개선점 문장을 만든다. 0점 항목은 제외."""

    if not competencies:
        return [], []

    ranked = sorted(competencies, key=lambda c: c.final_score, reverse=True)
    top = [c for c in ranked[:2] if c.final_score > 0]
    bottom = [c for c in list(reversed(ranked))[:2] if c.final_score > 0]

    strengths = [f"{c.name} 항목에서 강점이 두드러집니다." for c in top]
    improvements = [f"{c.name} 항목은 개선 여지가 있습니다." for c in bottom]
    return strengths, improvements


def build_feedback(
    items: Sequence[TemplateItem] | None,
    answer_map: dict[int, ResponseAnswer],
) -> list[FeedbackEntry]:
    """코멘트가 있는 항목만 (항목명, 코멘트)로 모은다."""

    feedback: list[FeedbackEntry] = []
    for item in items or []:
        answer = answer_map.get(item.id)
        comment = (answer.comment or "").strip() if answer else ""
        if not comment:
            continue
        feedback.append(FeedbackEntry(from_=item.title or DEFAULT_FEEDBACK_TITLE, comment=comment))
    return feedback


def build_answer_details(
    items: Sequence[TemplateItem] | None,
    answers: Sequence[ResponseAnswer],
    answer_map: dict[int, ResponseAnswer],
) -> list[AnswerDetail]:
    """항목별 답변 상세. 템플릿이 없으면 원 답변 순서대로 만든다."""

    if items:
        details = []
        for item in items:
            answer = answer_map.get(item.id)
            details.append(
                AnswerDetail(
                    item_id=item.id,
                    title=_item_title(item.id, item.title),
                    type=item.type,
                    weight=item.weight,
                    score=answer.score if answer else 0,
                    grade=(answer.grade or None) if answer else None,
                    comment=answer.comment if answer else "",
                )
            )
        return details

    return [
        AnswerDetail(
            item_id=answer.item_id,
            title=_item_title(answer.item_id),
            score=answer.score,
            grade=answer.grade or None,
            comment=answer.comment,
        )
        for answer in answers
    ]


def build_word_cloud_data(comments: Iterable[str]) -> list[WordCloudEntry]:
    """코멘트 단어 빈도 상위 10개. 한 글자 토큰은 버린다."""

    counts: Counter[str] = Counter()
    for comment in comments:
        counts.update(token for token in TOKEN_SPLIT.split(comment) if len(token.strip()) > 1)

    return [
        WordCloudEntry(text=text, value=min(90, 40 + count * 15))
        for text, count in counts.most_common(WORD_CLOUD_LIMIT)
    ]


def build_result_data(
    evaluation: Evaluation,
    template: EvaluationTemplate | None,
    response: RaterResponse | AggregationResult,
) -> EvaluationResultData:
    """(조정까지 끝난) 응답으로 결과 화면 레코드를 만든다.

    Args:
        evaluation: 평가 레코드. 피평가자 스냅샷이 없으면 원 필드를 쓴다.
        template: 항목 정보. 없으면 역량/피드백/워드클라우드는 빈 값.
        response: 집계 결과 또는 단일 응답. `total_score`는 조정까지 반영된 최종 점수여야 한다.

    Returns:
        EvaluationResultData: 렌더링용 결과.
    """

    snapshot = evaluation.subject_snapshot
    subject_name = (snapshot.name if snapshot else None) or evaluation.subject
    subject_role = (snapshot.role if snapshot else None) or DEFAULT_SUBJECT_ROLE

    if evaluation.start_date and evaluation.end_date:
        period = f"{evaluation.start_date} ~ {evaluation.end_date}"
    else:
        period = evaluation.period

    answers = list(response.answers)
    total_score = response.total_score
    answer_map = {answer.item_id: answer for answer in answers}
    items = template.items if template else []

    competencies = []
    for item in items:
        answer = answer_map.get(item.id)
        score = answer.score if answer else 0
        competencies.append(
            Competency(name=_item_title(item.id, item.title), self_score=score, peer_score=0, final_score=score)
        )

    strengths, improvements = summarize_by_score(competencies)
    feedback = build_feedback(items, answer_map)
    word_cloud = build_word_cloud_data(entry.comment for entry in feedback)

    scoring_type, normalized = resolve_scoring_type(evaluation.rating_scale, total_score)
    final_grade = score_to_grade(normalized, scoring_type)
    logger.debug(
        "build_result_data subject=%s score=%s type=%s grade=%s items=%d",
        subject_name,
        total_score,
        scoring_type,
        final_grade,
        len(items),
    )

    return EvaluationResultData(
        subject=SubjectInfo(name=subject_name, role=subject_role, avatar=get_avatar_url(subject_name)),
        evaluation_name=evaluation.name,
        period=period,
        final_score=total_score,
        final_grade=final_grade,
        summary=f"총점 {format_score(total_score)}점으로 평가가 완료되었습니다.",
        competencies=competencies,
        strengths=strengths,
        areas_for_improvement=improvements,
        peer_feedback=feedback,
        answer_details=build_answer_details(items, answers, answer_map),
        word_cloud_data=word_cloud or None,
    )


__all__ = [
    "build_answer_details",
    "build_feedback",
    "build_result_data",
    "build_word_cloud_data",
    "format_score",
    "resolve_template",
    "summarize_by_score",
]
