# app/services/location_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from app.models.location import Location, LocationGroup
from app.services.generic_repo import GenericRepo


class LocationRepo(GenericRepo[Location]):
    model = Location

    async def get_all_locations(self) -> List[Location]:
        stmt = select(Location).order_by(Location.id)
        return list((await self.session.execute(stmt)).scalars().all())

    async def find_by_location_id(self, location_id: str) -> Optional[Location]:
        """按 "AREA/AISLE/X/Y/Z" 业务键查找。"""
        parts = [p.strip() for p in location_id.split("/")]
        if len(parts) != 5:
            return None
        area, aisle, x, y, z = parts
        stmt = select(Location).where(
            Location.area == area,
            Location.aisle == aisle,
            Location.x == x,
            Location.y == y,
            Location.z == z,
        )
        return (await self.session.execute(stmt)).scalars().first()


class LocationGroupRepo(GenericRepo[LocationGroup]):
    model = LocationGroup
