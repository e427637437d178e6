# app/services/placing_rule_service.py
from __future__ import annotations

from typing import List

from sqlalchemy import select

from app.db.uow import UnitOfWork
from app.models.type_placing_rule import FORBIDDEN, TypePlacingRule
from app.services.entity_service import EntityService


class PlacingRuleService(EntityService[TypePlacingRule]):
    """
    放置规则查询：

    - allowed_location_types:
        某托盘类型允许放置的规则（排除 privilege_level <= -1 的禁止规则），
        按 privilege_level 降序（最优先的在前），同级按 id 升序。

    - is_placing_allowed:
        某托盘类型能否放到某库位类型上：存在一条非禁止规则即可，
        任意一条禁止规则优先生效。
    """

    model = TypePlacingRule

    async def allowed_location_types(self, transport_unit_type_id: int) -> List[TypePlacingRule]:
        stmt = (
            select(TypePlacingRule)
            .where(TypePlacingRule.transport_unit_type_id == transport_unit_type_id)
            .where(TypePlacingRule.privilege_level > FORBIDDEN)
            .order_by(TypePlacingRule.privilege_level.desc(), TypePlacingRule.id)
        )
        async with UnitOfWork(self.session, read_only=True):
            return list((await self.session.execute(stmt)).scalars().all())

    async def is_placing_allowed(self, transport_unit_type_id: int, location_type_id: int) -> bool:
        stmt = select(TypePlacingRule.privilege_level).where(
            TypePlacingRule.transport_unit_type_id == transport_unit_type_id,
            TypePlacingRule.allowed_location_type_id == location_type_id,
        )
        async with UnitOfWork(self.session, read_only=True):
            levels = list((await self.session.execute(stmt)).scalars().all())
        if not levels or any(lv <= FORBIDDEN for lv in levels):
            return False
        return True
