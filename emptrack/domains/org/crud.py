# emptrack/domains/org/crud.py

"""
'org' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from typing import List

from sqlalchemy.orm import selectinload
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.crud_base import CRUDBase
from . import models as org_models
from . import schemas as org_schemas


# =============================================================================
# 1. departments 테이블 CRUD
# =============================================================================
class CRUDDepartment(CRUDBase[org_models.Department, org_schemas.DepartmentCreate, org_schemas.DepartmentUpdate]):
    def __init__(self):
        super().__init__(model=org_models.Department)


department = CRUDDepartment()


# =============================================================================
# 2. employees 테이블 CRUD
# =============================================================================
class CRUDEmployee(CRUDBase[org_models.Employee, org_schemas.EmployeeCreate, org_schemas.EmployeeUpdate]):
    def __init__(self):
        super().__init__(model=org_models.Employee)

    async def get_all_with_department(self, db: AsyncSession) -> List[org_models.Employee]:
        """소속 부서를 함께 로드하여 모든 직원을 조회합니다."""
        return await self.get_all(db, options=[selectinload(org_models.Employee.department)])


employee = CRUDEmployee()
