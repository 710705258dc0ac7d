# emptrack/domains/org/schemas.py

"""
'org' 도메인 (부서 및 직원 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from pydantic import Field

from emptrack.core.schemas import APIModel


# =============================================================================
# 1. 부서 (Department) 스키마
# =============================================================================
class DepartmentBase(APIModel):
    name: str = Field(..., min_length=1, max_length=100)


class DepartmentCreate(DepartmentBase):
    pass


class DepartmentUpdate(DepartmentBase):
    """부서 수정 요청. 대상 부서 ID를 URL이 아닌 본문으로 받습니다."""
    id: int


class DepartmentRead(DepartmentBase):
    id: int
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")


class DepartmentSummary(APIModel):
    """다른 엔티티 조회 시 함께 반환되는 부서 요약 정보"""
    id: int
    name: str


# =============================================================================
# 2. 직원 (Employee) 스키마
# =============================================================================
class EmployeeBase(APIModel):
    emp_name: str = Field(..., min_length=1, max_length=100)
    age: Optional[int] = Field(None, ge=0)
    salary: Optional[float] = Field(None, ge=0)


class EmployeeCreate(EmployeeBase):
    """직원 생성을 위한 스키마 (multipart 폼 필드 + 저장된 이미지 경로로 구성)"""
    department_id: Optional[int] = None
    profile_img: Optional[str] = None


class EmployeeUpdate(APIModel):
    """
    직원 정보 수정을 위한 스키마. 설정(set)된 필드만 기존 값을 덮어씁니다.
    profile_img는 새 파일이 업로드된 경우에만 설정됩니다.
    """
    emp_name: Optional[str] = Field(None, min_length=1, max_length=100)
    age: Optional[int] = Field(None, ge=0)
    salary: Optional[float] = Field(None, ge=0)
    profile_img: Optional[str] = None


class EmployeeRead(EmployeeBase):
    id: int
    profile_img: Optional[str] = None
    department_id: Optional[int] = None
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")


class EmployeeReadWithDepartment(APIModel):
    """직원 목록 조회 시 소속 부서 정보까지 함께 반환하는 스키마"""
    id: int
    emp_name: str
    age: Optional[int] = None
    profile_img: Optional[str] = None
    salary: Optional[float] = None
    department: Optional[DepartmentSummary] = None
