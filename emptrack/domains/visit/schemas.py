# emptrack/domains/visit/schemas.py

"""
'visit' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import date, datetime
from pydantic import AliasChoices, Field

from emptrack.core.schemas import APIModel
from emptrack.domains.org.schemas import DepartmentSummary


class VisitCreate(APIModel):
    # 기존 클라이언트는 'EmployeeId'를 보내므로 함께 허용합니다.
    employee_id: int = Field(
        ...,
        validation_alias=AliasChoices("EmployeeId", "employeeId", "employee_id"),
    )
    visit_date: date


class VisitUpdate(APIModel):
    visit_date: date


class VisitRead(APIModel):
    id: int
    employee_id: int
    visit_date: date
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")


class VisitEmployeeSummary(APIModel):
    """방문 목록에 포함되는 직원 요약 정보 (소속 부서 포함)"""
    id: int
    emp_name: str
    age: Optional[int] = None
    salary: Optional[float] = None
    department: Optional[DepartmentSummary] = None


class VisitReadWithDetails(APIModel):
    id: int
    visit_date: date
    employee: Optional[VisitEmployeeSummary] = None
