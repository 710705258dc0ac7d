# emptrack/domains/org/__init__.py

"""
'org' 도메인 패키지입니다.

부서(departments)와 직원(employees) 데이터, 그리고 직원 프로필 이미지 업로드를 담당합니다.

주요 서브모듈:
- `models.py`: departments, employees 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 데이터 전송 객체 (camelCase JSON).
- `crud.py`: 비동기 CRUD 로직.
- `services.py`: 프로필 이미지 저장을 포함한 직원 생성/수정 서비스.
- `routers.py`: /employees, /department API 엔드포인트.
"""

__title__ = "Employee Tracker Organization Domain"
__description__ = "Manages departments and employees, including profile image uploads."
__version__ = "0.1.0"
__all__ = []
