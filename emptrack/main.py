# emptrack/main.py

import logging
import os
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from emptrack.core.config import Settings, settings as default_settings
from emptrack.core.database import Database
from emptrack.core.dependencies import get_database
from emptrack.core.exceptions import register_exception_handlers
from emptrack.core.logging import setup_logging

from emptrack.domains.org.routers import router as org_router
from emptrack.domains.visit.routers import router as visit_router
from emptrack.domains.rpt.routers import router as rpt_router

logger = logging.getLogger(__name__)

HEALTH_CHECK_FAILED_DETAIL = "Database health check failed"


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    시작 시 데이터베이스 스키마를 동기화하고, 종료 시 연결 풀을 정리합니다.
    """
    db: Database = app.state.db
    logger.info("Starting %s (env=%s)", app.title, app.state.settings.APP_ENV)
    try:
        await db.create_db_and_tables()
    except Exception:
        logger.exception("Database initialization failed")
        raise

    yield

    logger.info("Shutting down %s", app.title)
    await db.dispose()
    logger.info("Database connection pool disposed.")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    설정을 받아 FastAPI 애플리케이션을 생성합니다.
    Database 인스턴스는 여기서 한 번 생성되어 app.state.db로 모든 핸들러에 주입됩니다.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.LOG_LEVEL, debug=app_settings.DEBUG_MODE)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.db = Database(app_settings)

    # 업로드된 프로필 이미지를 정적 파일로 제공합니다.
    os.makedirs(app_settings.UPLOAD_DIR, exist_ok=True)
    app.mount(
        app_settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=app_settings.UPLOAD_DIR),
        name="uploads",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 기존 클라이언트와의 호환을 위해 경로 접두사 없이 등록합니다.
    app.include_router(org_router)
    app.include_router(visit_router)
    app.include_router(rpt_router)

    @app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
    async def read_root():
        return {"message": f"Welcome to {app_settings.APP_NAME}. Visit /docs for interactive API documentation."}

    @app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
    async def health_check(db: Database = Depends(get_database)):
        """
        데이터베이스에 간단한 쿼리를 실행하여 연결 상태를 확인합니다.
        """
        try:
            if await db.ping():
                return {"status": "ok", "database_connection": "successful"}
        except Exception:
            logger.exception("Health check failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=HEALTH_CHECK_FAILED_DETAIL,
            )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=HEALTH_CHECK_FAILED_DETAIL,
        )

    return app


# -- Uvicorn 서버 직접 실행 (개발용) --
# 애플리케이션은 임포트 시점이 아니라 팩토리 호출 시점에 생성됩니다.
#   uvicorn emptrack.main:create_app --factory --port 3000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("emptrack.main:create_app", factory=True, host="0.0.0.0", port=3000, reload=True, log_level="info")
