# emptrack/domains/visit/models.py

"""
'visit' 도메인 (직원 방문 기록)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional, TYPE_CHECKING
from datetime import date, datetime, UTC
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

if TYPE_CHECKING:
    from emptrack.domains.org.models import Employee


# 직원당 같은 날짜의 방문은 하나만 허용합니다.
VISIT_UNIQUE_CONSTRAINT = "uq_visits_employee_id_visit_date"


class VisitBase(SQLModel):
    """
    visits 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="방문 고유 ID")
    employee_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("employees.id", onupdate="CASCADE", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="방문한 직원 ID (FK)"
    )
    visit_date: date = Field(description="방문 일자")

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


class Visit(VisitBase, table=True):
    """
    visits 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "visits"
    __table_args__ = (
        UniqueConstraint("employee_id", "visit_date", name=VISIT_UNIQUE_CONSTRAINT),
    )

    employee: Optional["Employee"] = Relationship(back_populates="visits")
