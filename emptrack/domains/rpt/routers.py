# emptrack/domains/rpt/routers.py

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.dependencies import get_session

from . import crud as rpt_crud
from . import schemas as rpt_schemas


router = APIRouter(
    tags=["Report Management (보고서)"],
)

# departmentId 없이 호출하면 기존 동작대로 1번 부서를 집계합니다.
DEFAULT_SALARY_DEPARTMENT_ID = 1


@router.get("/employeeCount", response_model=rpt_schemas.SalarySum, summary="부서별 급여 합계")
async def read_salary_sum(
    department_id: int = Query(DEFAULT_SALARY_DEPARTMENT_ID, alias="departmentId", ge=1),
    db: AsyncSession = Depends(get_session),
):
    return await rpt_crud.get_salary_sum(db, department_id=department_id)


@router.get("/countVisits", response_model=List[rpt_schemas.VisitCount], summary="일자별 방문 수")
async def read_visit_counts(db: AsyncSession = Depends(get_session)):
    return await rpt_crud.get_visit_counts(db)
