# emptrack/core/logging.py

"""
애플리케이션 로깅 설정 유틸리티입니다.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    루트 로거를 한 번만 설정합니다.

    Args:
        level: 로깅 레벨 이름 (예: "INFO", "DEBUG")
        debug: True이면 SQLAlchemy 엔진 로그도 출력합니다.
    """
    global _configured

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
        _configured = True

    # 라이브러리 로그 상세도 조절
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if debug else logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
