"""서비스 계층 패키지."""

from .results import compose_aggregated_result, compose_single_result
from .scoring import aggregate_evaluation_responses, apply_score_adjustments

__all__ = [
    "aggregate_evaluation_responses",
    "apply_score_adjustments",
    "compose_aggregated_result",
    "compose_single_result",
]
