"""API 요청/응답 스키마 패키지."""

from .common import ErrorCode, ErrorResponse, HealthResponse
from .scoring import (
    AdjustPreviewRequest,
    AdjustRequest,
    AggregateRequest,
    GradeRequest,
    GradeResponse,
    MonitoringRequest,
    ResultRequest,
)

__all__ = [
    "AdjustPreviewRequest",
    "AdjustRequest",
    "AggregateRequest",
    "ErrorCode",
    "ErrorResponse",
    "GradeRequest",
    "GradeResponse",
    "HealthResponse",
    "MonitoringRequest",
    "ResultRequest",
]
