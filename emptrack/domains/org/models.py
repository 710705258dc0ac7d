# emptrack/domains/org/models.py

"""
'org' 도메인 (부서 및 직원)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 departments, employees 테이블에 대한 SQLModel 클래스를 포함합니다.
부서 삭제는 소속 직원에게, 직원 삭제는 해당 직원의 방문 기록에게
데이터베이스 외래 키(ON DELETE CASCADE)와 ORM 관계 양쪽에서 전파됩니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import ForeignKey, Integer
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

# 다른 도메인의 모델을 참조해야 할 경우
# TYPE_CHECKING을 사용하여 순환 임포트 문제를 방지합니다.
if TYPE_CHECKING:
    from emptrack.domains.visit.models import Visit


# =============================================================================
# 1. departments 테이블 모델
# =============================================================================
class DepartmentBase(SQLModel):
    """
    departments 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="부서 고유 ID")
    name: str = Field(max_length=100, description="부서명")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


class Department(DepartmentBase, table=True):
    """
    departments 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "departments"

    # 로드되지 않은 직원은 DB의 ON DELETE CASCADE가 삭제합니다.
    employees: List["Employee"] = Relationship(
        back_populates="department",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True}
    )


# =============================================================================
# 2. employees 테이블 모델
# =============================================================================
class EmployeeBase(SQLModel):
    """
    employees 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="직원 고유 ID")
    emp_name: str = Field(max_length=100, description="직원 이름")
    age: Optional[int] = Field(default=None, description="나이")
    profile_img: Optional[str] = Field(default=None, max_length=255, description="프로필 이미지 웹 경로")
    salary: Optional[float] = Field(default=None, description="급여")
    department_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("departments.id", onupdate="CASCADE", ondelete="CASCADE"),
            index=True,
        ),
        description="소속 부서 ID (FK)"
    )

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


class Employee(EmployeeBase, table=True):
    """
    employees 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "employees"

    department: Optional["Department"] = Relationship(back_populates="employees")
    visits: List["Visit"] = Relationship(
        back_populates="employee",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True}
    )
