# emptrack/domains/rpt/__init__.py

"""
FastAPI 애플리케이션의 'rpt' (Report) 도메인 패키지입니다.

이 패키지는 자체 테이블 없이 org, visit 도메인의 테이블에 대한
집계 쿼리(급여 합계, 일자별 방문 수)를 원시 SQL로 실행합니다.

주요 서브모듈:
- `schemas.py`: 집계 결과 응답 모델.
- `crud.py`: 파라미터 바인딩을 사용하는 집계 쿼리.
- `routers.py`: /employeeCount, /countVisits API 엔드포인트.
"""

__title__ = "Employee Tracker Report Domain"
__description__ = "Aggregate salary and visit reports."
__version__ = "0.1.0"
__all__ = []
