# emptrack/core/exceptions.py

"""
애플리케이션 전역 예외 핸들러를 정의하는 모듈입니다.

라우터에서 처리되지 않은 데이터베이스/파일 시스템 오류는 여기서 포착되어
서버 로그에 기록되고, 클라이언트에는 상세 내용 없이 500 응답으로 반환됩니다.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


async def internal_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled %s on %s %s", type(exc).__name__, request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """영속성 계층(SQLAlchemy)과 파일 저장(OSError) 오류를 500으로 변환하는 핸들러를 등록합니다."""
    app.add_exception_handler(SQLAlchemyError, internal_error_handler)
    app.add_exception_handler(OSError, internal_error_handler)
