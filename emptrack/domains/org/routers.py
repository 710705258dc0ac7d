# emptrack/domains/org/routers.py

"""
'org' 도메인 (직원 및 부서 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- 직원 생성/수정은 multipart 폼으로 받으며, 선택적으로 프로필 이미지 파일 하나를 포함합니다.
- 부서 수정은 대상 ID를 URL이 아닌 요청 본문에서 받습니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, Form, File
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.config import Settings
from emptrack.core.dependencies import get_session, get_settings

from . import crud as org_crud
from . import schemas as org_schemas
from . import services as org_services


router = APIRouter(
    tags=["Employee & Department Management (직원 및 부서 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 직원 (Employee) 엔드포인트
# =============================================================================
@router.post("/employees", response_model=org_schemas.EmployeeRead, status_code=status.HTTP_201_CREATED, summary="새 직원 생성")
async def create_employee(
    emp_name: str = Form(..., alias="empName", min_length=1, max_length=100),
    age: Optional[int] = Form(None, ge=0),
    salary: Optional[float] = Form(None, ge=0),
    dept_id: Optional[int] = Form(None, alias="deptId"),
    file: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    """
    새 직원을 생성합니다. 프로필 이미지 파일이 함께 전송되면 저장 후 경로를 기록합니다.
    """
    return await org_services.create_employee(
        db,
        settings=settings,
        emp_name=emp_name,
        age=age,
        salary=salary,
        department_id=dept_id,
        upload_file=file,
    )


@router.get("/employees", response_model=List[org_schemas.EmployeeReadWithDepartment], summary="모든 직원 조회")
async def read_employees(db: AsyncSession = Depends(get_session)):
    return await org_crud.employee.get_all_with_department(db)


@router.get("/employees/{employee_id}", response_model=Optional[org_schemas.EmployeeRead], summary="특정 직원 조회")
async def read_employee(employee_id: int, db: AsyncSession = Depends(get_session)):
    """
    특정 직원을 조회합니다. 존재하지 않으면 404 대신 null을 반환합니다.
    """
    return await org_crud.employee.get(db, id=employee_id)


@router.put("/employees/{employee_id}", response_model=org_schemas.EmployeeRead, summary="직원 정보 수정")
async def update_employee(
    employee_id: int,
    emp_name: Optional[str] = Form(None, alias="empName", min_length=1, max_length=100),
    age: Optional[int] = Form(None, ge=0),
    salary: Optional[float] = Form(None, ge=0),
    file: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    db_employee = await org_crud.employee.get(db, id=employee_id)
    if not db_employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")

    return await org_services.update_employee(
        db,
        settings=settings,
        db_obj=db_employee,
        emp_name=emp_name,
        age=age,
        salary=salary,
        upload_file=file,
    )


@router.delete("/employees/{employee_id}", response_model=org_schemas.EmployeeRead, summary="직원 삭제")
async def delete_employee(employee_id: int, db: AsyncSession = Depends(get_session)):
    """
    직원을 삭제하고 (방문 기록은 함께 삭제됨) 삭제 직전의 레코드를 반환합니다.
    """
    db_employee = await org_crud.employee.get(db, id=employee_id)
    if not db_employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")

    return await org_crud.employee.delete(db, db_obj=db_employee)


# =============================================================================
# 2. 부서 (Department) 엔드포인트
# =============================================================================
@router.post("/department", response_model=org_schemas.DepartmentRead, status_code=status.HTTP_201_CREATED, summary="새 부서 생성")
async def create_department(
    department_in: org_schemas.DepartmentCreate,
    db: AsyncSession = Depends(get_session),
):
    return await org_crud.department.create(db, obj_in=department_in)


@router.get("/department", response_model=List[org_schemas.DepartmentRead], summary="모든 부서 조회")
async def read_departments(db: AsyncSession = Depends(get_session)):
    return await org_crud.department.get_all(db)


@router.put("/department", response_model=org_schemas.DepartmentRead, summary="부서 업데이트")
async def update_department(
    department_in: org_schemas.DepartmentUpdate,
    db: AsyncSession = Depends(get_session),
):
    db_department = await org_crud.department.get(db, id=department_in.id)
    if not db_department:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")

    return await org_crud.department.update(db, db_obj=db_department, obj_in=department_in)


@router.delete("/department/{department_id}", response_model=org_schemas.DepartmentRead, summary="부서 삭제")
async def delete_department(department_id: int, db: AsyncSession = Depends(get_session)):
    """
    부서를 삭제합니다. 소속 직원과 그 직원들의 방문 기록도 함께 삭제됩니다.
    """
    db_department = await org_crud.department.get(db, id=department_id)
    if not db_department:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")

    return await org_crud.department.delete(db, db_obj=db_department)
