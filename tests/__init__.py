# tests/__init__.py

"""
Employee Tracker API의 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트용 설정, 애플리케이션, DB 세션, 비동기 클라이언트 및 데이터 픽스처를 정의합니다.
- `domains/`: 도메인(org, visit, rpt)별 API 통합 테스트입니다.
- `utils/`: 유틸리티 모듈 단위 테스트입니다.
"""

__title__ = "Employee Tracker API Tests"
__version__ = "0.1.0"
__all__ = []
