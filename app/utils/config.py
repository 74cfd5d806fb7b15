"""애플리케이션 설정 로더."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """`.env`/환경변수 기반 서비스 설정."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    fastapi_title: str = "Evaluation Scoring API"
    fastapi_version: str = "0.1.0"
    fastapi_host: str = "127.0.0.1"
    fastapi_port: int = 8000
    cors_origins: list[str] = ["*"]

    log_level: str = "DEBUG"
    log_to_file: bool = False
    log_dir: str = "logs"

    # 캠페인 레코드에 조정 방식이 없을 때 사용
    default_adjustment_mode: Literal["points", "percent"] = "points"


@lru_cache
def get_settings() -> Settings:
    """캐시된 `Settings` 인스턴스를 반환한다."""

    return Settings()


__all__ = ["Settings", "get_settings"]
