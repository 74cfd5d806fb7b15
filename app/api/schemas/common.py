"""공통 응답 스키마."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """표준 에러 코드."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RESULT_UNAVAILABLE = "RESULT_UNAVAILABLE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ErrorResponse(BaseModel):
    """FastAPI에서 사용하는 에러 응답 포맷."""

    status: str = Field("error", description="에러 상태.", examples=["error"])
    error_code: ErrorCode = Field(..., description="표준 에러 코드.", examples=["VALIDATION_ERROR"])
    detail: str = Field(..., description="에러 메시지.")


class HealthResponse(BaseModel):
    """헬스 체크 응답."""

    status: str = Field(..., description="서비스 상태. 정상일 경우 'ok'.", examples=["ok"])


__all__ = ["ErrorCode", "ErrorResponse", "HealthResponse"]
