# emptrack/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- 설정(Settings)으로부터 비동기 엔진과 세션 팩토리를 갖는 `Database` 객체를 생성합니다.
- `Database` 객체는 애플리케이션 팩토리에서 프로세스당 한 번 생성되어 `app.state.db`에 보관됩니다.
- 애플리케이션 시작 시 모든 테이블을 생성하는 스키마 동기화 함수를 포함합니다.
"""

import logging
import os
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import configure_mappers, sessionmaker

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.config import Settings

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 도메인 모델을 임포트합니다.
from emptrack.domains import models  # noqa: F401

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite는 연결마다 외래 키 제약(ON DELETE CASCADE 포함)을 켜야 합니다.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    비동기 엔진과 세션 팩토리를 묶은 영속성 클라이언트입니다.
    """

    def __init__(self, settings: Settings):
        url = settings.DATABASE_URL.get_secret_value()
        if settings.is_sqlite:
            # 파일 기반 SQLite는 상위 디렉토리가 있어야 연결할 수 있습니다.
            db_path = make_url(url).database
            if db_path and db_path != ":memory:":
                os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

        engine_kwargs = {"echo": settings.DEBUG_MODE, "future": True}
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_recycle=3600,  # 1시간마다 연결 재활용
                pool_size=10,
                max_overflow=20,
            )

        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        if settings.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_db_and_tables(self) -> None:
        """
        등록된 모든 모델의 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다.
        """
        configure_mappers()
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database schema synchronized (%d tables).", len(SQLModel.metadata.tables))

    async def ping(self) -> bool:
        async with self.session_factory() as session:
            result = await session.exec(select(1))
            return result.first() is not None

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        스크립트 등 요청 컨텍스트 밖에서 사용할 수 있는
        독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

