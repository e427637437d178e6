# tests/api/test_locations_api.py
from __future__ import annotations

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import make_group, make_location

pytestmark = pytest.mark.asyncio


async def test_health(client: httpx.AsyncClient):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


async def test_get_all_locations(client: httpx.AsyncClient, session: AsyncSession):
    group = await make_group(session, "ZONE-A")
    await make_location(session, "FGIN", "0001", group=group)
    await make_location(session, "FGIN", "0002")
    await session.commit()

    r = await client.get("/locations")
    assert r.status_code == 200, r.text
    body = r.json()
    assert [row["location_id"] for row in body] == [
        "FGIN/0001/0000/0000/0000",
        "FGIN/0002/0000/0000/0000",
    ]
    assert body[0]["location_group_id"] == group.id
    assert body[1]["location_group_id"] is None


async def test_location_group_tree(client: httpx.AsyncClient, session: AsyncSession):
    wh = await make_group(session, "WAREHOUSE")
    await make_group(session, "ZONE-A", wh)
    await session.commit()

    r = await client.get("/location-groups/tree")
    assert r.status_code == 200, r.text
    tree = r.json()
    assert tree["group"] is None
    assert tree["children"][0]["group"]["name"] == "WAREHOUSE"
    assert tree["children"][0]["children"][0]["group"]["name"] == "ZONE-A"
    assert tree["children"][0]["children"][0]["children"] == []
