"""평가 점수 집계·조정·등급 산출 패키지."""

from .adjuster import (
    adjustment_unit,
    apply_score_adjustments,
    build_adjustment_entry,
    clamp_adjustment_value,
    merge_adjustment,
    preview_adjustment,
)
from .aggregate import aggregate_evaluation_responses, select_weight_resolver
from .grades import grade_tier, resolve_score_max, resolve_scoring_type, score_to_grade
from .models import (
    AdjustmentEntry,
    AdjustmentPayload,
    AdjustmentResult,
    AggregationResult,
    RaterGroup,
    RaterRelation,
    RaterResponse,
    ResponseAnswer,
    ScoringConfig,
)

__all__ = [
    "AdjustmentEntry",
    "AdjustmentPayload",
    "AdjustmentResult",
    "AggregationResult",
    "RaterGroup",
    "RaterRelation",
    "RaterResponse",
    "ResponseAnswer",
    "ScoringConfig",
    "adjustment_unit",
    "aggregate_evaluation_responses",
    "apply_score_adjustments",
    "build_adjustment_entry",
    "clamp_adjustment_value",
    "grade_tier",
    "merge_adjustment",
    "preview_adjustment",
    "resolve_score_max",
    "resolve_scoring_type",
    "score_to_grade",
    "select_weight_resolver",
]
