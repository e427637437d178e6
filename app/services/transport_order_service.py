# app/services/transport_order_service.py
from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar

from sqlalchemy import select

from app.db.base import Base
from app.db.uow import UnitOfWork
from app.domain.errors import NotFoundError
from app.domain.transport_order_lifecycle import coerce_state, transition
from app.models.enums import TransportOrderState
from app.models.location import Location, LocationGroup
from app.models.message import Message
from app.models.transport_order import TransportOrder
from app.models.transport_unit import TransportUnit
from app.models.values import Problem, utcnow
from app.services.entity_service import EntityService
from app.services.generic_repo import GenericRepo

R = TypeVar("R", bound=Base)

_UNSET: Any = object()


class TransportOrderRepo(GenericRepo[TransportOrder]):
    model = TransportOrder

    async def find_by_state(self, state: TransportOrderState) -> List[TransportOrder]:
        stmt = (
            select(TransportOrder)
            .where(TransportOrder.state == state)
            .order_by(TransportOrder.priority.desc(), TransportOrder.id)
        )
        return list((await self.session.execute(stmt)).scalars().all())

    async def latest_message(self, message_no: int) -> Optional[Message]:
        stmt = (
            select(Message)
            .where(Message.message_no == message_no)
            .order_by(Message.id.desc())
            .limit(1)
        )
        return (await self.session.execute(stmt)).scalars().first()


class TransportOrderService(EntityService[TransportOrder]):
    """
    运输单服务（写操作全部在读写 UoW 中完成）：

    - create_order   : 新建（state=CREATED），可同时绑定托盘/来源/目标
    - update_order   : 普通属性赋值（托盘 / 来源 / 目标 / 目标组 / 优先级），不动状态
    - change_state   : 走生命周期校验推进状态；到 FINISHED 时补 end_date
    - report_problem : 记录最近一次异常，文本缺省取 MESSAGE 表中同号消息
    - find_by_state  : 按状态查，priority 降序

    生命周期校验失败时异常原样抛出，UoW 回滚，订单保持原状。
    """

    model = TransportOrder
    repo_class = TransportOrderRepo
    repo: TransportOrderRepo

    async def _ref(self, model: Type[R], entity_id: Optional[int]) -> Optional[R]:
        if entity_id is None:
            return None
        entity = await self.session.get(model, entity_id)
        if entity is None:
            raise NotFoundError(f"{model.__name__} not found: {entity_id}")
        return entity

    async def _load(self, order_id: int) -> TransportOrder:
        order = await self.repo.get(order_id)
        if order is None:
            raise NotFoundError(f"TransportOrder not found: {order_id}")
        return order

    async def create_order(
        self,
        *,
        transport_unit_id: Optional[int] = None,
        source_location_id: Optional[int] = None,
        target_location_id: Optional[int] = None,
        target_location_group_id: Optional[int] = None,
        priority: int = 0,
    ) -> TransportOrder:
        async with UnitOfWork(self.session):
            order = TransportOrder(
                priority=priority,
                transport_unit=await self._ref(TransportUnit, transport_unit_id),
                source_location=await self._ref(Location, source_location_id),
                target_location=await self._ref(Location, target_location_id),
                target_location_group=await self._ref(LocationGroup, target_location_group_id),
            )
            await self.repo.add(order)
        self.logger.info("transport order created: id=%s priority=%s", order.id, order.priority)
        return order

    async def get_order(self, order_id: int) -> TransportOrder:
        return await self.find_by_id(order_id)

    async def update_order(
        self,
        order_id: int,
        *,
        transport_unit_id: Optional[int] = _UNSET,
        source_location_id: Optional[int] = _UNSET,
        target_location_id: Optional[int] = _UNSET,
        target_location_group_id: Optional[int] = _UNSET,
        priority: int = _UNSET,
    ) -> TransportOrder:
        async with UnitOfWork(self.session):
            order = await self._load(order_id)
            if transport_unit_id is not _UNSET:
                order.transport_unit = await self._ref(TransportUnit, transport_unit_id)
            if source_location_id is not _UNSET:
                order.source_location = await self._ref(Location, source_location_id)
            if target_location_id is not _UNSET:
                order.target_location = await self._ref(Location, target_location_id)
            if target_location_group_id is not _UNSET:
                order.target_location_group = await self._ref(
                    LocationGroup, target_location_group_id
                )
            if priority is not _UNSET:
                order.priority = int(priority)
            await self.session.flush()
        return order

    async def change_state(self, order_id: int, new_state: Any) -> TransportOrder:
        async with UnitOfWork(self.session):
            order = await self._load(order_id)
            previous = order.state
            target = transition(order, new_state)
            if target is TransportOrderState.FINISHED and order.end_date is None:
                order.end_date = utcnow()
            await self.session.flush()
        self.logger.info(
            "transport order %s state %s -> %s", order.id, previous.value, target.value
        )
        return order

    async def report_problem(
        self,
        order_id: int,
        message_no: int,
        message: Optional[str] = None,
    ) -> TransportOrder:
        async with UnitOfWork(self.session):
            order = await self._load(order_id)
            if message is None:
                registered = await self.repo.latest_message(message_no)
                message = registered.message_text if registered is not None else None
            order.problem = Problem(occurred=utcnow(), message_no=message_no, message=message)
            await self.session.flush()
        self.logger.warning(
            "transport order %s problem reported: no=%s msg=%s", order.id, message_no, message
        )
        return order

    async def find_by_state(self, state: Any) -> List[TransportOrder]:
        target = coerce_state(state)
        async with UnitOfWork(self.session, read_only=True):
            return await self.repo.find_by_state(target)
