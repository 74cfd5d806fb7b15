from __future__ import annotations

import sys
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# 리포 루트를 모듈 경로에 추가해 `app` 임포트가 보장되도록 함
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.main import create_app  # noqa: E402
from app.utils.config import Settings  # noqa: E402

TEST_SETTINGS = Settings(fastapi_title="Evaluation Scoring API (test)", log_to_file=False)


@pytest_asyncio.fixture
async def client() -> AsyncClient:
    """테스트 설정으로 만든 앱에 붙는 ASGI 클라이언트."""

    transport = ASGITransport(app=create_app(TEST_SETTINGS))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
