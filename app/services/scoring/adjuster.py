"""관리자/본부 점수 조정 적용."""

from __future__ import annotations

from datetime import datetime

from app.utils.logger import get_logger
from .grades import resolve_score_max
from .models import (
    AdjustmentEntry,
    AdjustmentMode,
    AdjustmentPayload,
    AdjustmentPreview,
    AdjustmentResult,
    AdjustmentRole,
    ScoringConfig,
)

logger = get_logger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def adjustment_unit(mode: AdjustmentMode | None) -> str:
    """조정 값 표시 단위."""

    return "%" if mode == "percent" else "점"


def clamp_adjustment_value(value: float, adjustment_range: float | None) -> float:
    """조정 값을 [-|range|, +|range|]로 제한한다. range가 없으면 그대로."""

    if adjustment_range is None:
        return value
    limit = abs(adjustment_range)
    return _clamp(value, -limit, limit)


def apply_score_adjustments(
    base_score: float,
    adjustment: AdjustmentPayload | None,
    adjustment_mode: AdjustmentMode | None = None,
    adjustment_range: float | None = None,
    rating_scale: str | None = None,
) -> AdjustmentResult:
    """기본 점수에 관리자/본부 조정을 반영한다.

    Args:
        base_score: 집계된 기본 점수.
        adjustment: 저장된 조정 레코드. 없거나 두 항목이 모두 비면 그대로 반환한다.
        adjustment_mode: `points`(기본)는 값을 점수로, `percent`는 기본 점수 대비 비율로 해석한다.
        adjustment_range: 각 조정 값의 허용 범위(절댓값).
        rating_scale: 최종 점수를 [0, 만점]으로 제한할 척도. 모르는 척도면 제한하지 않는다.

    Returns:
        AdjustmentResult: 조정 점수와 범위 제한 후 실제 반영된 조정 값.
    """

    if adjustment is None or adjustment.is_empty():
        return AdjustmentResult(adjusted_score=base_score, applied_manager=0, applied_hq=0)

    mode = adjustment_mode or "points"

    def _delta(entry: AdjustmentEntry | None) -> tuple[float, float]:
        clamped = clamp_adjustment_value(entry.value if entry else 0, adjustment_range)
        if mode == "percent":
            return clamped, base_score * (clamped / 100)
        return clamped, clamped

    manager_value, manager_delta = _delta(adjustment.manager_adjustment)
    hq_value, hq_delta = _delta(adjustment.hq_adjustment)

    adjusted = base_score + manager_delta + hq_delta
    max_score = resolve_score_max(rating_scale)
    if max_score is not None:
        adjusted = _clamp(adjusted, 0, max_score)

    logger.debug(
        "apply_score_adjustments base=%s mode=%s manager=%s hq=%s adjusted=%s",
        base_score,
        mode,
        manager_value,
        hq_value,
        adjusted,
    )
    return AdjustmentResult(adjusted_score=adjusted, applied_manager=manager_value, applied_hq=hq_value)


def build_adjustment_entry(
    value: float,
    note: str | None,
    adjusted_by: str | None,
    adjusted_at: datetime,
) -> AdjustmentEntry:
    """저장할 조정 항목을 만든다. 작성자/시각은 호출자가 넘긴다."""

    return AdjustmentEntry(
        value=value,
        note=note or None,
        adjusted_by=adjusted_by or "system",
        adjusted_at=adjusted_at,
    )


def merge_adjustment(
    current: AdjustmentPayload | None,
    role: AdjustmentRole,
    entry: AdjustmentEntry | None,
) -> AdjustmentPayload:
    """`role` 슬롯만 교체하고 다른 슬롯은 유지한 새 레코드를 반환한다."""

    base = current or AdjustmentPayload()
    field = "manager_adjustment" if role == "manager" else "hq_adjustment"
    return base.model_copy(update={field: entry})


def preview_adjustment(
    base_score: float | None,
    current: AdjustmentPayload | None,
    role: AdjustmentRole,
    value: float,
    config: ScoringConfig,
) -> AdjustmentPreview | None:
    """저장 전 후보 조정 값을 반영했을 때의 점수를 계산한다."""

    if base_score is None:
        return None
    candidate = merge_adjustment(current, role, AdjustmentEntry(value=value))
    result = apply_score_adjustments(
        base_score,
        candidate,
        config.adjustment_mode,
        config.adjustment_range,
        config.rating_scale,
    )
    return AdjustmentPreview(base_score=base_score, adjusted_score=result.adjusted_score)


__all__ = [
    "adjustment_unit",
    "apply_score_adjustments",
    "build_adjustment_entry",
    "clamp_adjustment_value",
    "merge_adjustment",
    "preview_adjustment",
]
