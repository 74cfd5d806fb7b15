"""표준 에러 응답 핸들러."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.api.schemas import ErrorCode, ErrorResponse
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _resolve_error_code(status_code: int) -> ErrorCode:
    """HTTP 상태로 에러 코드를 결정한다."""

    if status_code in (400, 422):
        return ErrorCode.VALIDATION_ERROR
    if status_code == 404:
        return ErrorCode.NOT_FOUND
    if status_code == 409:
        return ErrorCode.RESULT_UNAVAILABLE
    return ErrorCode.UNKNOWN_ERROR


def http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
    """HTTPException을 표준 응답으로 변환한다."""

    detail = str(exc.detail)
    error_code = _resolve_error_code(exc.status_code)
    payload = ErrorResponse(error_code=error_code, detail=detail)
    logger.warning("http_exception_handler:응답 status=%s error_code=%s detail=%s", exc.status_code, error_code, detail)
    return JSONResponse(status_code=exc.status_code, content=payload.model_dump(mode="json"))


def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 오류를 표준 응답으로 변환한다."""

    payload = ErrorResponse(error_code=ErrorCode.VALIDATION_ERROR, detail="요청 검증 실패")
    logger.warning("validation_exception_handler:응답 errors=%s", exc.errors())
    return JSONResponse(status_code=400, content=payload.model_dump(mode="json"))


def unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    """미처리 예외를 표준 응답으로 변환한다."""

    payload = ErrorResponse(error_code=ErrorCode.UNKNOWN_ERROR, detail="알 수 없는 오류")
    logger.error("unhandled_exception_handler:응답 err=%s", exc, exc_info=exc)
    return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))


def register_error_handlers(app: FastAPI) -> None:
    """표준 에러 핸들러를 앱에 등록한다."""

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "http_exception_handler",
    "register_error_handlers",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
