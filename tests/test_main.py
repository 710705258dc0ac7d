# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 애플리케이션의 루트 경로 (`/`) 응답을 테스트합니다.
- 데이터베이스 연결 헬스 체크 엔드포인트 (`/health-check`)를 테스트합니다.
- 처리되지 않은 영속성 오류가 상세 내용 없이 500으로 변환되는지 테스트합니다.
"""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError

import emptrack.main as main_module
from emptrack.main import HEALTH_CHECK_FAILED_DETAIL


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    """
    루트 엔드포인트 (`GET /`)가 올바르게 응답하는지 테스트합니다.
    """
    response = await client.get("/")

    assert response.status_code == 200
    assert "Visit /docs" in response.json()["message"]


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """
    헬스 체크 엔드포인트가 데이터베이스 연결 상태를 올바르게 반환하는지 테스트합니다.
    """
    response = await client.get("/health-check")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


@pytest.mark.asyncio
async def test_persistence_error_returns_plain_500(test_app: FastAPI):
    """
    라우터에서 발생한 SQLAlchemy 오류가 'Server error' 평문 500 응답으로 변환되는지 테스트합니다.
    """
    @test_app.get("/_boom")
    async def boom():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        response = await ac.get("/_boom")

    assert response.status_code == 500
    assert response.text == "Server error"
    assert "locked" not in response.text


@pytest.mark.asyncio
async def test_health_check_failure_hides_exception_text(
    client: AsyncClient,
    test_app: FastAPI,
    monkeypatch: pytest.MonkeyPatch,
):
    """
    데이터베이스 연결 실패 시 고정된 메시지만 반환하고 예외 내용은 노출하지 않는지 테스트합니다.
    """
    async def failing_ping():
        raise OSError("connection refused: secret-host:5432")

    monkeypatch.setattr(test_app.state.db, "ping", failing_ping)

    response = await client.get("/health-check")

    assert response.status_code == 500
    assert response.json() == {"detail": HEALTH_CHECK_FAILED_DETAIL}
    assert "secret-host" not in response.text


def test_import_does_not_build_application():
    """
    모듈 임포트만으로는 애플리케이션(및 데이터/업로드 디렉토리)이 생성되지 않는지 테스트합니다.
    """
    assert not hasattr(main_module, "app")
    assert callable(main_module.create_app)
