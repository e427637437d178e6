# app/api/routers/transport_orders.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_transport_order_service
from app.schemas.transport_orders import (
    ProblemIn,
    StateChangeIn,
    TransportOrderCreate,
    TransportOrderOut,
)
from app.services.transport_order_service import TransportOrderService

router = APIRouter(prefix="/transport-orders", tags=["transport-orders"])


@router.post("", response_model=TransportOrderOut, status_code=status.HTTP_201_CREATED)
async def create_transport_order(
    body: TransportOrderCreate,
    svc: TransportOrderService = Depends(get_transport_order_service),
):
    return await svc.create_order(**body.model_dump())


@router.get("", response_model=List[TransportOrderOut])
async def list_transport_orders(
    state: str = Query(..., description="按状态过滤，例如 STARTED"),
    svc: TransportOrderService = Depends(get_transport_order_service),
):
    return await svc.find_by_state(state)


@router.get("/{order_id}", response_model=TransportOrderOut)
async def get_transport_order(
    order_id: int,
    svc: TransportOrderService = Depends(get_transport_order_service),
):
    return await svc.get_order(order_id)


@router.post("/{order_id}/state", response_model=TransportOrderOut)
async def change_transport_order_state(
    order_id: int,
    body: StateChangeIn,
    svc: TransportOrderService = Depends(get_transport_order_service),
):
    """
    推进运输单状态：
    - 目标为空 / 未知 → 422 INVALID_ARGUMENT
    - 回退 / CREATED 后未先 INITIALIZED → 409 ILLEGAL_TRANSITION
    - 离开 CREATED 缺托盘或目标 → 409 MISSING_PRECONDITION
    """
    return await svc.change_state(order_id, body.state)


@router.post("/{order_id}/problem", response_model=TransportOrderOut)
async def report_transport_order_problem(
    order_id: int,
    body: ProblemIn,
    svc: TransportOrderService = Depends(get_transport_order_service),
):
    return await svc.report_problem(order_id, body.message_no, body.message)
