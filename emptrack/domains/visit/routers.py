# emptrack/domains/visit/routers.py

"""
'visit' 도메인 (직원 방문 기록)의 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from emptrack.core.dependencies import get_session

from . import crud as visit_crud
from . import schemas as visit_schemas


router = APIRouter(
    tags=["Visit Management (방문 기록 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/visits", response_model=visit_schemas.VisitRead, status_code=status.HTTP_201_CREATED, summary="방문 기록 생성")
async def create_visit(
    visit_in: visit_schemas.VisitCreate,
    db: AsyncSession = Depends(get_session),
):
    """
    새 방문 기록을 생성합니다. 같은 직원의 같은 날짜 방문이 이미 있으면 400을 반환합니다.
    """
    return await visit_crud.visit.create(db, obj_in=visit_in)


@router.get("/visits", response_model=List[visit_schemas.VisitReadWithDetails], summary="모든 방문 기록 조회")
async def read_visits(db: AsyncSession = Depends(get_session)):
    """
    모든 방문 기록을 직원 및 소속 부서 정보와 함께 조회합니다.
    """
    return await visit_crud.visit.get_all_with_details(db)


@router.put("/visits/{visit_id}", response_model=visit_schemas.VisitRead, summary="방문 일자 수정")
async def update_visit(
    visit_id: int,
    visit_in: visit_schemas.VisitUpdate,
    db: AsyncSession = Depends(get_session),
):
    db_visit = await visit_crud.visit.get(db, id=visit_id)
    if not db_visit:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visit not found")

    return await visit_crud.visit.update(db, db_obj=db_visit, obj_in=visit_in)


@router.delete("/visits/{visit_id}", response_model=visit_schemas.VisitRead, summary="방문 기록 삭제")
async def delete_visit(visit_id: int, db: AsyncSession = Depends(get_session)):
    db_visit = await visit_crud.visit.get(db, id=visit_id)
    if not db_visit:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visit not found")

    return await visit_crud.visit.delete(db, db_obj=db_visit)
