# tests/services/test_location_service.py
from __future__ import annotations

import logging

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.errors import NotFoundError
from app.models import Location
from app.services.location_service import LocationService
from tests.factories import make_group, make_location, make_location_type

pytestmark = pytest.mark.asyncio


async def test_get_all_locations_returns_every_location_ordered(session: AsyncSession):
    group = await make_group(session, "ZONE-A")
    lt = await make_location_type(session, "RACK")
    l1 = await make_location(session, "FGIN", "0001", group=group, location_type=lt)
    l2 = await make_location(session, "FGIN", "0002")
    l3 = await make_location(session, "STOCK", "0001", "0001", "0002", "0003")
    await session.commit()

    svc = LocationService(session)
    locations = await svc.get_all_locations()

    assert [loc.id for loc in locations] == [l1.id, l2.id, l3.id]
    assert locations[0].location_group_id == group.id
    assert locations[0].location_type.type == "RACK"
    assert locations[2].location_id == "STOCK/0001/0001/0002/0003"


async def test_get_all_locations_empty_store(session: AsyncSession):
    assert await LocationService(session).get_all_locations() == []


async def test_get_all_locations_is_read_only(session: AsyncSession):
    await make_location(session, "FGIN", "0001")
    await session.commit()

    svc = LocationService(session)
    first = await svc.get_all_locations()
    first[0].description = "changed outside a transaction"

    again = await svc.get_all_locations()
    assert again[0].description is None
    assert not session.in_transaction()


async def test_get_all_locations_keeps_caller_transaction(session: AsyncSession):
    # 只 flush 不提交：事务仍归调用方
    loc = await make_location(session, "FGIN", "0001")
    assert session.in_transaction()

    locations = await LocationService(session).get_all_locations()

    assert [x.id for x in locations] == [loc.id]
    assert session.in_transaction()
    count = (await session.execute(select(func.count()).select_from(Location))).scalar_one()
    assert count == 1

    await session.rollback()
    count = (await session.execute(select(func.count()).select_from(Location))).scalar_one()
    assert count == 0


async def test_get_all_locations_logs_call(session: AsyncSession, caplog):
    caplog.set_level(logging.DEBUG, logger="wmstms")
    await LocationService(session).get_all_locations()
    assert "get_all_locations on service called" in caplog.text


async def test_find_by_location_id_and_by_pk(session: AsyncSession):
    loc = await make_location(session, "FGIN", "0001", "0001", "0001", "0001")
    await session.commit()

    svc = LocationService(session)
    found = await svc.find_by_location_id("FGIN/0001/0001/0001/0001")
    assert found is not None and found.id == loc.id
    assert await svc.find_by_location_id("FGIN/0001") is None

    assert (await svc.find_by_id(loc.id)).area == "FGIN"
    with pytest.raises(NotFoundError):
        await svc.find_by_id(9999)


async def test_save_and_remove_location(session: AsyncSession):
    svc = LocationService(session)
    loc = await svc.save(Location(area="TEMP", aisle="0001", x="0", y="0", z="0"))
    loc_id = loc.id
    assert loc_id is not None
    assert not session.in_transaction()

    assert (await svc.find_by_id(loc_id)).area == "TEMP"

    await svc.remove(loc_id)
    with pytest.raises(NotFoundError):
        await svc.find_by_id(loc_id)
    with pytest.raises(NotFoundError):
        await svc.remove(loc_id)
