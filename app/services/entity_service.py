# app/services/entity_service.py
from __future__ import annotations

from typing import Any, Generic, List, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.db.base import Base
from app.db.uow import UnitOfWork
from app.domain.errors import NotFoundError
from app.services.generic_repo import GenericRepo

E = TypeVar("E", bound=Base)


class EntityService(Generic[E]):
    """
    通用实体服务：
    - 读操作走只读 UoW（不提交）
    - 写操作走读写 UoW（无异常提交，异常回滚后原样抛出）

    子类只需声明 model（必要时换 repo_class）。
    """

    model: Type[E]
    repo_class: Type[GenericRepo] = GenericRepo

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo: GenericRepo[E] = self.repo_class(session, self.model)
        self.logger = get_logger(f"services.{type(self).__name__}")

    async def find_by_id(self, entity_id: Any) -> E:
        async with UnitOfWork(self.session, read_only=True):
            entity = await self.repo.get(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.model.__name__} not found: {entity_id}")
        return entity

    async def find_all(self) -> List[E]:
        async with UnitOfWork(self.session, read_only=True):
            return await self.repo.find_all()

    async def save(self, entity: E) -> E:
        async with UnitOfWork(self.session):
            return await self.repo.add(entity)

    async def remove(self, entity_id: Any) -> None:
        async with UnitOfWork(self.session):
            entity = await self.repo.get(entity_id)
            if entity is None:
                raise NotFoundError(f"{self.model.__name__} not found: {entity_id}")
            await self.repo.remove(entity)
