# emptrack/domains/__init__.py

"""
비즈니스 도메인 패키지입니다.

- `org`: 부서(Department)와 직원(Employee) 관리 및 프로필 이미지 업로드.
- `visit`: 직원 방문 기록(Visit) 관리.
- `rpt`: 급여 합계, 일자별 방문 수 등 집계 보고서.
- `models`: 모든 도메인 모델을 SQLModel.metadata에 등록하기 위한 중앙 임포트.
"""
