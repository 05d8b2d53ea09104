from fastapi import FastAPI

from youth_gateway.core.config import settings, warn_missing_keys
from youth_gateway.core.cors import setup_cors
from youth_gateway.core.log import setup_logging
from youth_gateway.routers import health
from youth_gateway.routers import tools


def create_app() -> FastAPI:

    setup_logging(settings.log_level)
    warn_missing_keys(settings)

    openapi_tags = [
        # Health
        {
            "name": "[HEALTH] Health Check",
            "description": "서비스 상태 확인 API"
        },
        # Tools
        {
            "name": "[도구] 조회/호출",
            "description": "청년정책·센터(온통청년), 채용·기업·훈련(고용24) 조회 도구 목록과 호출"
        },
    ]

    app = FastAPI(
        title="Youth Gateway",
        version="1.0.0",
        openapi_tags=openapi_tags
    )

    setup_cors(app)

    # Health
    app.include_router(health.router, prefix="/api")

    # Tools
    app.include_router(tools.router, prefix="/api")

    return app

app = create_app()
