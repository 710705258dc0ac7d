# emptrack/domains/visit/crud.py

"""
'visit' 도메인의 CRUD 작업을 담당하는 모듈입니다.

같은 직원의 같은 날짜 방문은 하나만 허용합니다. 사전 조회로 친절한 400 응답을 돌려주고,
동시에 들어온 요청이 조회를 함께 통과하더라도 DB 유니크 제약 위반을 같은 400으로 변환합니다.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.crud_base import CRUDBase
from emptrack.domains.org import models as org_models
from . import models as visit_models
from . import schemas as visit_schemas

logger = logging.getLogger(__name__)

DUPLICATE_VISIT_DETAIL = "Visit already exists for this employee on the given date."


class CRUDVisit(CRUDBase[visit_models.Visit, visit_schemas.VisitCreate, visit_schemas.VisitUpdate]):
    def __init__(self):
        super().__init__(model=visit_models.Visit)

    async def get_by_employee_and_date(
        self, db: AsyncSession, *, employee_id: int, visit_date: date
    ) -> Optional[visit_models.Visit]:
        return await self.get_one_filtered(
            db, filters={"employee_id": employee_id, "visit_date": visit_date}
        )

    async def _ensure_not_duplicate(
        self, db: AsyncSession, *, employee_id: int, visit_date: date, exclude_id: Optional[int] = None
    ) -> None:
        existing = await self.get_by_employee_and_date(db, employee_id=employee_id, visit_date=visit_date)
        if existing and existing.id != exclude_id:
            logger.info("Rejected duplicate visit: employee=%s date=%s", employee_id, visit_date)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_VISIT_DETAIL)

    async def _raise_if_unique_violation(self, db: AsyncSession, exc: IntegrityError) -> None:
        await db.rollback()
        message = str(exc.orig)
        # PostgreSQL은 제약 이름을, SQLite는 "UNIQUE constraint failed"를 메시지에 포함합니다.
        if visit_models.VISIT_UNIQUE_CONSTRAINT in message or "UNIQUE constraint failed" in message:
            logger.info("Duplicate visit rejected by unique constraint: %s", exc.orig)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_VISIT_DETAIL) from exc
        raise exc

    async def create(self, db: AsyncSession, *, obj_in: visit_schemas.VisitCreate) -> visit_models.Visit:
        await self._ensure_not_duplicate(db, employee_id=obj_in.employee_id, visit_date=obj_in.visit_date)
        try:
            return await super().create(db, obj_in=obj_in)
        except IntegrityError as exc:
            await self._raise_if_unique_violation(db, exc)

    async def update(
        self, db: AsyncSession, *, db_obj: visit_models.Visit, obj_in: visit_schemas.VisitUpdate
    ) -> visit_models.Visit:
        await self._ensure_not_duplicate(
            db, employee_id=db_obj.employee_id, visit_date=obj_in.visit_date, exclude_id=db_obj.id
        )
        try:
            return await super().update(db, db_obj=db_obj, obj_in=obj_in)
        except IntegrityError as exc:
            await self._raise_if_unique_violation(db, exc)

    async def get_all_with_details(self, db: AsyncSession) -> List[visit_models.Visit]:
        """직원과 그 직원의 소속 부서를 함께 로드하여 모든 방문 기록을 조회합니다."""
        return await self.get_all(
            db,
            options=[
                selectinload(visit_models.Visit.employee).selectinload(org_models.Employee.department)
            ],
        )


visit = CRUDVisit()
