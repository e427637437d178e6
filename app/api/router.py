# app/api/router.py
from __future__ import annotations

from fastapi import APIRouter

from app.api.routers.health import router as health_router
from app.api.routers.locations import router as locations_router
from app.api.routers.transport_orders import router as transport_orders_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(locations_router)
api_router.include_router(transport_orders_router)
