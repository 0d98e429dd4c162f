"""SSO API Application Entry Point.

LinkedIn/Google 로그인 이후 state에 담긴 작업(adopt, revoke, pdf, login)을 수행하는
콜백 서비스입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.sso.presentation.http.controllers import root_router
from apps.sso.presentation.http.errors import register_exception_handlers
from apps.sso.setup.config import get_settings
from apps.sso.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    # Startup
    settings = get_settings()
    logger.info(
        "Starting SSO API",
        extra={"environment": settings.environment, "frontend_url": settings.frontend_url},
    )

    yield

    # Shutdown
    from apps.sso.infrastructure.persistence_postgres.session import dispose_engine

    await dispose_engine()
    logger.info("Shutting down SSO API")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging("DEBUG" if settings.environment == "local" else "INFO")

    app = FastAPI(
        title="SSO API",
        description="SSO 콜백 작업 처리 서비스",
        version="1.0.0",
        lifespan=lifespan,
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)

    # Health check (루트)
    @app.get("/health")
    async def root_health():
        return {"status": "healthy", "service": "sso-api", "version": "1.0.0"}

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.sso.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
