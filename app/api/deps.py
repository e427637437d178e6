# app/api/deps.py
from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session as _get_session
from app.services.location_group_service import LocationGroupService
from app.services.location_service import LocationService
from app.services.transport_order_service import TransportOrderService


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 依赖：统一走 app.db.session 的 AsyncSession 工厂。
    测试里通过 app.dependency_overrides[get_session] 换成内存库。
    """
    async for session in _get_session():
        yield session


def get_location_service(session: AsyncSession = Depends(get_session)) -> LocationService:
    return LocationService(session)


def get_location_group_service(
    session: AsyncSession = Depends(get_session),
) -> LocationGroupService:
    return LocationGroupService(session)


def get_transport_order_service(
    session: AsyncSession = Depends(get_session),
) -> TransportOrderService:
    return TransportOrderService(session)
