# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.

- `test_org_n.py`: 직원 및 부서 관리
- `test_visit_n.py`: 방문 기록
- `test_rpt_n.py`: 집계 보고서
"""
