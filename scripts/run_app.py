"""FastAPI 서버를 실행하는 CLI 스크립트."""

from __future__ import annotations

import argparse
import os

import uvicorn

from app.utils.config import get_settings
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="평가 점수 API 서버 실행")
    parser.add_argument("--host", default=os.getenv("FASTAPI_HOST", settings.fastapi_host))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT") or settings.fastapi_port))
    parser.add_argument("--reload", action="store_true", help="코드 변경 시 자동 재시작")
    return parser.parse_args()


def main() -> None:
    """Uvicorn으로 `app.main:app`을 띄운다."""

    args = _parse_args()
    logger.info("FastAPI 서버 시작: http://%s:%s", args.host, args.port)
    try:
        uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload, log_level="info")
    except KeyboardInterrupt:
        logger.warning("사용자 중단 감지, 서버 종료")
    finally:
        logger.debug("run_app main:종료")


if __name__ == "__main__":
    main()
