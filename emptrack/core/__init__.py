# emptrack/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 엔진, 세션 팩토리, 스키마 동기화 (SQLModel 및 AsyncSQLAlchemy).
- `crud_base.py`: 공통 비동기 CRUD 기본 클래스.
- `dependencies.py`: FastAPI 의존성 주입에 사용되는 공통 의존성 함수.
- `exceptions.py`: 애플리케이션 전역 예외 핸들러.
- `logging.py`: 표준 logging 모듈 설정.
"""

__title__ = "Employee Tracker Core"
__description__ = "Core components for the Employee Tracker application."
__version__ = "0.1.0"
__all__ = []
