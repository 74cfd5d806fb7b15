"""FastAPI 애플리케이션 팩토리."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router as api_router
from .api.error_handlers import register_error_handlers
from .utils.config import Settings, get_settings


FASTAPI_DESCRIPTION = (
    "인사 평가 점수 집계/조정 엔진 API입니다. 저장소 조회는 호출자가 맡고, 이 서비스는 계산만 합니다.\n\n"
    "핵심 개념:\n"
    "- **평가자 그룹 가중치**: 캠페인의 `raterGroups`(SELF/PEER/LEADER/MEMBER별 가중치). "
    "응답이 없는 그룹의 가중치는 응답이 있는 그룹에 비례 재분배됩니다.\n"
    "- **조정 방식**: `points`는 점수 그대로, `percent`는 기본 점수 대비 비율로 반영. "
    "`adjustmentRange`가 있으면 각 조정 값을 ±범위로 제한합니다.\n"
    "- **정규화 점수**: 5/7/10/100점 척도를 0~100으로 환산해 등급을 구합니다.\n\n"
    "주요 엔드포인트:\n"
    "- `/health` (GET): 서비스 상태 확인.\n"
    "- `/api/scoring/aggregate` (POST): 응답 집계.\n"
    "- `/api/scoring/adjust`, `/api/scoring/adjust/preview` (POST): 조정 적용/미리보기.\n"
    "- `/api/scoring/grade` (POST): 등급 산출.\n"
    "- `/api/results/build` (POST): 결과 화면 데이터 구성.\n"
    "- `/api/monitoring/summaries` (POST): 캠페인 모니터링 요약.\n\n"
    "모든 요청/응답 필드는 camelCase입니다."
)

TAGS_METADATA = [
    {"name": "system", "description": "헬스 체크"},
    {"name": "scoring", "description": "응답 집계, 점수 조정, 등급 산출"},
    {"name": "results", "description": "평가 결과 화면 데이터"},
    {"name": "monitoring", "description": "캠페인 진행 현황 및 피평가자 요약"},
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션을 구성해 반환한다.

    Args:
        settings: 외부에서 주입할 `Settings` 인스턴스. 생략 시 `.env`/환경변수를 읽어 생성한다.

    Returns:
        FastAPI: 라우터, 미들웨어, 에러 핸들러가 등록된 FastAPI 인스턴스.
    """

    settings = settings or get_settings()
    app = FastAPI(
        title=settings.fastapi_title.strip('"'),
        version=settings.fastapi_version,
        description=FASTAPI_DESCRIPTION,
        openapi_tags=TAGS_METADATA,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)
    app.state.settings = settings
    return app


app = create_app()
