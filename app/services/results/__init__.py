"""평가 결과 화면 데이터 패키지."""

from .builder import (
    build_answer_details,
    build_feedback,
    build_result_data,
    build_word_cloud_data,
    resolve_template,
    summarize_by_score,
)
from .composer import (
    compose_aggregated_result,
    compose_single_result,
    is_result_viewable,
    merge_campaign_config,
    use_aggregated_view,
)
from .models import Campaign, Evaluation, EvaluationResultData, EvaluationTemplate

__all__ = [
    "Campaign",
    "Evaluation",
    "EvaluationResultData",
    "EvaluationTemplate",
    "build_answer_details",
    "build_feedback",
    "build_result_data",
    "build_word_cloud_data",
    "compose_aggregated_result",
    "compose_single_result",
    "is_result_viewable",
    "merge_campaign_config",
    "use_aggregated_view",
    "resolve_template",
    "summarize_by_score",
]
