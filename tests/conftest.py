# tests/conftest.py

from typing import AsyncGenerator, Awaitable, Callable, Optional

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.config import Settings
from emptrack.core.dependencies import get_session
from emptrack.main import create_app

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 모델을 임포트합니다.
from emptrack.domains.org import models as org_models
from emptrack.domains.visit import models as visit_models


# --- 테스트용 설정 ---
# 테스트마다 tmp_path 아래에 독립된 SQLite 파일과 업로드 디렉토리를 사용합니다.
@pytest.fixture(scope="function")
def test_settings(tmp_path) -> Settings:
    return Settings(
        APP_ENV="testing",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test_emptrack.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_LEVEL="WARNING",
    )


# --- 애플리케이션 및 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_app(test_settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """
    테스트 설정으로 애플리케이션을 생성하고 모든 테이블을 만듭니다.
    ASGITransport는 lifespan을 실행하지 않으므로 스키마 동기화를 직접 호출합니다.
    """
    app = create_app(test_settings)
    await app.state.db.create_db_and_tables()

    yield app

    await app.state.db.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 데이터 준비와 API 요청이 함께 사용하는 비동기 데이터베이스 세션을 제공합니다.
    """
    async with test_app.state.db.session_factory() as session:
        yield session


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(test_app: FastAPI, db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    테스트용 비동기 DB 세션을 주입한 AsyncClient 인스턴스를 생성합니다.
    """
    async def override_get_session():
        yield db_session

    original_overrides = test_app.dependency_overrides.copy()
    try:
        test_app.dependency_overrides[get_session] = override_get_session

        async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        test_app.dependency_overrides.clear()
        test_app.dependency_overrides.update(original_overrides)


# --- 부서 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_department_a(db_session: AsyncSession) -> org_models.Department:
    """테스트용 부서A를 데이터베이스에 생성하고 반환합니다."""
    department = org_models.Department(name="테스트 부서A")
    db_session.add(department)
    await db_session.commit()
    await db_session.refresh(department)
    return department


@pytest_asyncio.fixture(scope="function")
async def test_department_b(db_session: AsyncSession) -> org_models.Department:
    """테스트용 부서B를 데이터베이스에 생성하고 반환합니다."""
    department = org_models.Department(name="테스트 부서B")
    db_session.add(department)
    await db_session.commit()
    await db_session.refresh(department)
    return department


# --- 직원 픽스처 (팩토리 사용) ---
@pytest_asyncio.fixture(scope="function")
def employee_factory(db_session: AsyncSession) -> Callable[..., Awaitable[org_models.Employee]]:
    """
    속성을 지정하여 테스트 직원을 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_employee(
        emp_name: str,
        department_id: Optional[int],
        age: int = 30,
        salary: float = 1000.0,
        **kwargs,
    ) -> org_models.Employee:
        employee = org_models.Employee(
            emp_name=emp_name,
            department_id=department_id,
            age=age,
            salary=salary,
            **kwargs,
        )
        db_session.add(employee)
        await db_session.commit()
        await db_session.refresh(employee)
        return employee
    return _create_employee


@pytest_asyncio.fixture(scope="function")
async def test_employee(
    employee_factory: Callable[..., Awaitable[org_models.Employee]],
    test_department_a: org_models.Department,
) -> org_models.Employee:
    """부서A 소속의 테스트 직원을 생성합니다."""
    return await employee_factory(
        "홍길동",
        department_id=test_department_a.id,
        profile_img="/uploads/original-avatar.png",
    )


@pytest_asyncio.fixture(scope="function")
def visit_factory(db_session: AsyncSession) -> Callable[..., Awaitable[visit_models.Visit]]:
    """직원 ID와 방문 일자로 방문 기록을 생성하는 팩토리 함수를 반환합니다."""
    async def _create_visit(employee_id: int, visit_date) -> visit_models.Visit:
        visit = visit_models.Visit(employee_id=employee_id, visit_date=visit_date)
        db_session.add(visit)
        await db_session.commit()
        await db_session.refresh(visit)
        return visit
    return _create_visit
