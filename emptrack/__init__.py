# emptrack/__init__.py

"""
직원/부서/방문 기록 관리 FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 에러 처리를 담는 core 서브패키지,
각 비즈니스 도메인(org, visit, rpt)을 대표하는 domains 서브패키지,
그리고 파일 업로드 유틸리티를 담는 utils 서브패키지로 구성됩니다.
"""

APP_NAME = "Employee Tracker API"
APP_VERSION = "0.1.0"

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Employee, department and visit tracking API backend."
__all__ = []
