# emptrack/domains/org/services.py

from typing import Optional

from fastapi import UploadFile
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.config import Settings
from emptrack.utils.files import store_upload_file
from . import models, crud, schemas


async def _store_profile_image(settings: Settings, upload_file: Optional[UploadFile]) -> Optional[str]:
    return await store_upload_file(upload_file, settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX)


async def create_employee(
    db: AsyncSession, *, settings: Settings,
    emp_name: str, age: Optional[int], salary: Optional[float], department_id: Optional[int],
    upload_file: Optional[UploadFile],
) -> models.Employee:
    """
    프로필 이미지를 (전송된 경우) 저장하고 새 직원 레코드를 생성합니다.
    부서 존재 여부는 확인하지 않으며, 잘못된 부서 ID는 DB 외래 키 제약에서 거부됩니다.
    """
    profile_img = await _store_profile_image(settings, upload_file)

    employee_in = schemas.EmployeeCreate(
        emp_name=emp_name,
        age=age,
        salary=salary,
        department_id=department_id,
        profile_img=profile_img,
    )
    return await crud.employee.create(db=db, obj_in=employee_in)


async def update_employee(
    db: AsyncSession, *, settings: Settings, db_obj: models.Employee,
    emp_name: Optional[str], age: Optional[int], salary: Optional[float],
    upload_file: Optional[UploadFile],
) -> models.Employee:
    """
    직원 정보를 수정합니다. 전송된 폼 필드만 교체합니다.
    프로필 이미지 경로는 새 파일이 업로드된 경우에만 교체하고, 그렇지 않으면 기존 경로를 유지합니다.
    """
    update_fields = {}
    if emp_name is not None:
        update_fields["emp_name"] = emp_name
    if age is not None:
        update_fields["age"] = age
    if salary is not None:
        update_fields["salary"] = salary

    profile_img = await _store_profile_image(settings, upload_file)
    if profile_img is not None:
        update_fields["profile_img"] = profile_img

    employee_in = schemas.EmployeeUpdate(**update_fields)
    return await crud.employee.update(db=db, db_obj=db_obj, obj_in=employee_in)
