# emptrack/domains/rpt/crud.py

"""
집계 보고서용 원시 SQL 쿼리를 실행하는 모듈입니다.
모든 외부 입력은 바인드 파라미터로 전달합니다.
"""

from typing import List

from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from . import schemas

SALARY_SUM_SQL = text(
    "SELECT COALESCE(SUM(salary), 0) AS total_salary "
    "FROM employees WHERE department_id = :department_id"
)

VISIT_COUNT_SQL = text(
    "SELECT visit_date, COUNT(*) AS total_visits "
    "FROM visits GROUP BY visit_date ORDER BY visit_date"
)


async def get_salary_sum(db: AsyncSession, *, department_id: int) -> schemas.SalarySum:
    """특정 부서 소속 직원들의 급여 합계를 계산합니다. 직원이 없으면 0입니다."""
    result = await db.exec(SALARY_SUM_SQL, params={"department_id": department_id})
    total_salary = result.scalar_one()
    return schemas.SalarySum(department_id=department_id, total_salary=total_salary)


async def get_visit_counts(db: AsyncSession) -> List[schemas.VisitCount]:
    """방문 일자별 방문 수를 일자 오름차순으로 반환합니다."""
    result = await db.exec(VISIT_COUNT_SQL)
    return [
        schemas.VisitCount(visit_date=row["visit_date"], total_visits=row["total_visits"])
        for row in result.mappings().all()
    ]
