# app/schemas/transport_orders.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.enums import TransportOrderState


class _Base(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore", populate_by_name=True)


class TransportOrderCreate(_Base):
    transport_unit_id: Optional[int] = None
    source_location_id: Optional[int] = None
    target_location_id: Optional[int] = None
    target_location_group_id: Optional[int] = None
    priority: Annotated[int, Field(ge=-32768, le=32767, description="越大越紧急")] = 0

    model_config = _Base.model_config | {
        "json_schema_extra": {
            "example": {"transport_unit_id": 1, "target_location_id": 7, "priority": 10}
        }
    }


class StateChangeIn(_Base):
    # 允许为空：由生命周期统一判为 INVALID_ARGUMENT
    state: Optional[str] = None

    @field_validator("state", mode="before")
    @classmethod
    def _trim(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


class ProblemIn(_Base):
    message_no: int
    message: Annotated[Optional[str], Field(max_length=1024)] = None


class ProblemOut(_Base):
    occurred: Optional[datetime] = None
    message_no: int = 0
    message: Optional[str] = None


class TransportOrderOut(_Base):
    id: int
    state: TransportOrderState
    priority: int
    creation_date: datetime
    date_updated: Optional[datetime] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    transport_unit_id: Optional[int] = None
    source_location_id: Optional[int] = None
    target_location_id: Optional[int] = None
    target_location_group_id: Optional[int] = None
    problem: Optional[ProblemOut] = None
    version: int


__all__ = [
    "TransportOrderCreate",
    "StateChangeIn",
    "ProblemIn",
    "ProblemOut",
    "TransportOrderOut",
]
