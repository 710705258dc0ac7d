# emptrack/domains/visit/__init__.py

"""
'visit' 도메인 패키지입니다.

직원의 방문 기록(visits)을 관리하며, 직원당 같은 날짜의 방문은 하나만 허용합니다.

주요 서브모듈:
- `models.py`: visits 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 데이터 전송 객체.
- `crud.py`: 중복 검사를 포함한 비동기 CRUD 로직.
- `routers.py`: /visits API 엔드포인트.
"""

__title__ = "Employee Tracker Visit Domain"
__description__ = "Manages employee visit records."
__version__ = "0.1.0"
__all__ = []
