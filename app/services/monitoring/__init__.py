"""캠페인 모니터링 집계 패키지."""

from .summaries import (
    build_adjustments_map,
    build_evaluatee_summaries,
    build_members_map,
    build_participants,
    build_stats,
    filter_summaries,
)

__all__ = [
    "build_adjustments_map",
    "build_evaluatee_summaries",
    "build_members_map",
    "build_participants",
    "build_stats",
    "filter_summaries",
]
