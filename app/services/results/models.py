"""평가 결과 화면용 모델."""

from __future__ import annotations

from pydantic import Field

from app.services.scoring.models import CamelModel, ScoringConfig


class TemplateItem(CamelModel):
    """평가 템플릿의 항목."""

    id: int
    title: str | None = None
    type: str | None = None
    weight: float | None = None


class EvaluationTemplate(CamelModel):
    id: int | str | None = None
    name: str | None = None
    type: str | None = None
    items: list[TemplateItem] = Field(default_factory=list)


class SubjectSnapshot(CamelModel):
    """평가 시점의 피평가자 정보."""

    name: str | None = None
    role: str | None = None
    team_id: str | None = None
    team_name: str | None = None
    part_id: str | None = None
    part_name: str | None = None
    headquarter_id: str | None = None


class Evaluation(ScoringConfig):
    """결과 화면이 참조하는 평가 레코드."""

    id: int | str | None = None
    name: str = ""
    type: str | None = None
    period: str = ""
    subject: str = ""
    subject_id: str | None = None
    subject_snapshot: SubjectSnapshot | None = None
    start_date: str | None = None
    end_date: str | None = None
    template_snapshot: EvaluationTemplate | None = None


class Campaign(ScoringConfig):
    """평가 캠페인 설정 중 점수 계산에 쓰는 부분."""

    id: str | None = None
    allow_review: bool | None = None


class SubjectInfo(CamelModel):
    name: str
    role: str
    avatar: str


class Competency(CamelModel):
    """항목별 역량 점수. peer_score는 집계 점수에 합쳐지므로 항상 0."""

    name: str
    self_score: float
    peer_score: float = 0
    final_score: float


class FeedbackEntry(CamelModel):
    from_: str = Field(alias="from")
    comment: str


class AnswerDetail(CamelModel):
    item_id: int
    title: str
    type: str | None = None
    weight: float | None = None
    score: float = 0
    grade: str | None = None
    comment: str = ""


class WordCloudEntry(CamelModel):
    text: str
    value: int


class EvaluationResultData(CamelModel):
    """평가 결과 화면에 그대로 렌더링할 레코드."""

    subject: SubjectInfo
    evaluation_name: str
    period: str
    final_score: float
    final_grade: str
    summary: str
    competencies: list[Competency] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    areas_for_improvement: list[str] = Field(default_factory=list)
    peer_feedback: list[FeedbackEntry] = Field(default_factory=list)
    answer_details: list[AnswerDetail] = Field(default_factory=list)
    word_cloud_data: list[WordCloudEntry] | None = None


__all__ = [
    "AnswerDetail",
    "Campaign",
    "Competency",
    "Evaluation",
    "EvaluationResultData",
    "EvaluationTemplate",
    "FeedbackEntry",
    "SubjectInfo",
    "SubjectSnapshot",
    "TemplateItem",
    "WordCloudEntry",
]
