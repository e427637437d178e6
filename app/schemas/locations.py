# app/schemas/locations.py
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Base(BaseModel):
    """
    - from_attributes: 允许 ORM 对象直接序列化
    - extra="ignore": 忽略冗余字段
    """

    model_config = ConfigDict(from_attributes=True, extra="ignore", populate_by_name=True)


class LocationOut(_Base):
    id: int
    location_id: Annotated[str, Field(description="业务键 AREA/AISLE/X/Y/Z")]
    area: str
    aisle: str
    x: str
    y: str
    z: str
    description: Optional[str] = None
    no_max_transport_units: int = 1
    location_type_id: Optional[int] = None
    location_group_id: Optional[int] = None

    model_config = _Base.model_config | {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "location_id": "FGIN/0001/0000/0000/0000",
                "area": "FGIN",
                "aisle": "0001",
                "x": "0000",
                "y": "0000",
                "z": "0000",
                "location_group_id": 3,
            }
        }
    }


class LocationGroupOut(_Base):
    id: int
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None


class LocationGroupNode(BaseModel):
    group: Optional[LocationGroupOut] = None
    children: List["LocationGroupNode"] = Field(default_factory=list)


LocationGroupNode.model_rebuild()

__all__ = ["LocationOut", "LocationGroupOut", "LocationGroupNode"]
