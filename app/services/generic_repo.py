# app/services/generic_repo.py
from __future__ import annotations

from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

E = TypeVar("E", bound=Base)


class GenericRepo(Generic[E]):
    """
    按实体类型参数化的通用 DAO：只做 CRUD，不控事务。
    事务边界由上层 Service 的 UnitOfWork 决定。
    """

    model: Type[E]

    def __init__(self, session: AsyncSession, model: Optional[Type[E]] = None) -> None:
        self.session = session
        if model is not None:
            self.model = model

    async def get(self, entity_id: Any) -> Optional[E]:
        return await self.session.get(self.model, entity_id)

    async def find_all(self, *order_by: Any) -> List[E]:
        stmt = select(self.model)
        if order_by:
            stmt = stmt.order_by(*order_by)
        else:
            stmt = stmt.order_by(*self.model.__mapper__.primary_key)
        rows: Sequence[E] = (await self.session.execute(stmt)).scalars().all()
        return list(rows)

    async def add(self, entity: E) -> E:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def remove(self, entity: E) -> None:
        await self.session.delete(entity)
        await self.session.flush()
