# emptrack/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 세션을 사용합니다.
"""

import logging
from typing import Generic, List, Optional, Sequence, Type, TypeVar, Any, Dict

from sqlalchemy.orm.interfaces import LoaderOption
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_all(
        self, db: AsyncSession, *, options: Sequence[LoaderOption] = ()
    ) -> List[ModelType]:
        """
        모든 레코드를 id 순으로 조회합니다. 관계 로딩 옵션을 지원합니다.
        """
        query = select(self.model).order_by(self.model.id)
        if options:
            query = query.options(*options)

        result = await db.exec(query)
        return list(result.all())

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.exec(statement)
        return response.first()

    """
    조건을 만족하는 레코드가 여러 개 있더라도 첫 번째 것을 반환하며,
    조건을 만족하는 레코드가 전혀 없으면 None을 반환
    """
    async def get_one_filtered(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,
    ) -> Optional[ModelType]:
        query = select(self.model)
        conditions = []

        if filters:
            for attribute, value in filters.items():
                if hasattr(self.model, attribute):
                    conditions.append(getattr(self.model, attribute) == value)
                else:
                    logger.warning("Model %s has no attribute '%s'", self.model.__name__, attribute)

        if conditions:
            query = query.where(*conditions)

        response = await db.exec(query)
        return response.first()

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: UpdateSchemaType
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다. 요청에 명시된(set) 필드만 덮어쓰며, 기본 키는 변경하지 않습니다.
        """
        update_data = obj_in.model_dump(exclude_unset=True, exclude={"id"})
        db_obj.sqlmodel_update(update_data)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        레코드를 삭제하고 삭제 직전의 상태를 반환합니다.
        """
        await db.delete(db_obj)
        await db.commit()
        return db_obj
