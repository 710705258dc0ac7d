# emptrack/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_session).
- 애플리케이션 설정 접근 (get_settings).
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.config import Settings
from emptrack.core.database import Database


def get_database(request: Request) -> Database:
    """애플리케이션 팩토리가 app.state에 보관한 Database 인스턴스를 반환합니다."""
    return request.app.state.db


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    요청마다 새로운 비동기 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with get_database(request).session_factory() as session:
        yield session
