# app/services/location_service.py
from __future__ import annotations

from typing import List, Optional

from app.db.uow import UnitOfWork
from app.models.location import Location
from app.services.entity_service import EntityService
from app.services.location_repo import LocationRepo


class LocationService(EntityService[Location]):
    """库位服务：通用 CRUD 之外只多一个全量只读查询。"""

    model = Location
    repo_class = LocationRepo
    repo: LocationRepo

    async def get_all_locations(self) -> List[Location]:
        self.logger.debug("get_all_locations on service called")
        async with UnitOfWork(self.session, read_only=True):
            return await self.repo.get_all_locations()

    async def find_by_location_id(self, location_id: str) -> Optional[Location]:
        async with UnitOfWork(self.session, read_only=True):
            return await self.repo.find_by_location_id(location_id)
