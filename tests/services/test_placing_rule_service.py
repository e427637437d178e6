# tests/services/test_placing_rule_service.py
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import TypePlacingRule
from app.services.placing_rule_service import PlacingRuleService
from tests.factories import make_location_type, make_placing_rule, make_transport_unit_type

pytestmark = pytest.mark.asyncio


async def test_allowed_location_types_ordered_by_privilege(session: AsyncSession):
    euro = await make_transport_unit_type(session, "EURO")
    rack = await make_location_type(session, "RACK")
    floor = await make_location_type(session, "FLOOR")
    conveyor = await make_location_type(session, "CONVEYOR")
    await make_placing_rule(session, euro, floor, 0)
    await make_placing_rule(session, euro, rack, 5)
    await make_placing_rule(session, euro, conveyor, -1)
    await session.commit()

    rules = await PlacingRuleService(session).allowed_location_types(euro.id)

    assert [r.allowed_location_type_id for r in rules] == [rack.id, floor.id]
    assert all(not r.is_forbidden for r in rules)


async def test_is_placing_allowed(session: AsyncSession):
    euro = await make_transport_unit_type(session, "EURO")
    rack = await make_location_type(session, "RACK")
    conveyor = await make_location_type(session, "CONVEYOR")
    unknown = await make_location_type(session, "UNKNOWN")
    await make_placing_rule(session, euro, rack, 2)
    await make_placing_rule(session, euro, conveyor, -1)
    await session.commit()

    svc = PlacingRuleService(session)
    assert await svc.is_placing_allowed(euro.id, rack.id) is True
    assert await svc.is_placing_allowed(euro.id, conveyor.id) is False
    assert await svc.is_placing_allowed(euro.id, unknown.id) is False


async def test_placing_rule_unique_constraint(session: AsyncSession):
    euro = await make_transport_unit_type(session, "EURO")
    rack = await make_location_type(session, "RACK")
    await make_placing_rule(session, euro, rack, 1)

    with pytest.raises(IntegrityError):
        await make_placing_rule(session, euro, rack, 1)


async def test_levels_below_forbidden_are_neither_listed_nor_allowed(session: AsyncSession):
    euro = await make_transport_unit_type(session, "EURO")
    rack = await make_location_type(session, "RACK")
    cold = await make_location_type(session, "COLD")
    await make_placing_rule(session, euro, rack, 1)
    await make_placing_rule(session, euro, cold, -2)
    await session.commit()

    svc = PlacingRuleService(session)
    rules = await svc.allowed_location_types(euro.id)
    assert [r.allowed_location_type_id for r in rules] == [rack.id]
    assert await svc.is_placing_allowed(euro.id, cold.id) is False


async def test_rule_without_transport_unit_type_is_stored(session: AsyncSession):
    rack = await make_location_type(session, "RACK")
    rule = await PlacingRuleService(session).save(
        TypePlacingRule(allowed_location_type_id=rack.id, privilege_level=0)
    )
    assert rule.id is not None
    assert rule.transport_unit_type_id is None
