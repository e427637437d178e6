# app/models/location.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class LocationType(Base):
    """库位类型（货架位 / 输送线 / 地堆 ...）。"""

    __tablename__ = "LOCATION_TYPE"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column("TYPE", String(64), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column("DESCRIPTION", String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<LocationType id={self.id} type={self.type!r}>"


class LocationGroup(Base):
    """
    库位组（强契约）：
    - name 全局唯一
    - parent_id 自关联，组成层级；顶层组 parent_id 为空
    """

    __tablename__ = "LOCATION_GROUP"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("NAME", String(64), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column("DESCRIPTION", String(255), nullable=True)
    parent_id: Mapped[Optional[int]] = mapped_column(
        "PARENT", Integer, ForeignKey("LOCATION_GROUP.ID"), nullable=True
    )

    def __repr__(self) -> str:
        return f"<LocationGroup id={self.id} name={self.name!r} parent={self.parent_id}>"


class Location(Base):
    """
    库位主档：
    - (area, aisle, x, y, z) 组成业务键，展示为 "AREA/AISLE/X/Y/Z"
    - location_type / location_group 均为多对一
    """

    __tablename__ = "LOCATION"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)

    area: Mapped[str] = mapped_column("AREA", String(20), nullable=False)
    aisle: Mapped[str] = mapped_column("AISLE", String(20), nullable=False)
    x: Mapped[str] = mapped_column("X", String(20), nullable=False)
    y: Mapped[str] = mapped_column("Y", String(20), nullable=False)
    z: Mapped[str] = mapped_column("Z", String(20), nullable=False)

    description: Mapped[Optional[str]] = mapped_column("DESCRIPTION", String(255), nullable=True)
    no_max_transport_units: Mapped[int] = mapped_column(
        "NO_MAX_TRANSPORT_UNITS", Integer, nullable=False, default=1
    )

    location_type_id: Mapped[Optional[int]] = mapped_column(
        "LOCATION_TYPE", Integer, ForeignKey("LOCATION_TYPE.ID"), nullable=True
    )
    location_group_id: Mapped[Optional[int]] = mapped_column(
        "LOCATION_GROUP", Integer, ForeignKey("LOCATION_GROUP.ID"), nullable=True
    )

    location_type: Mapped[Optional[LocationType]] = relationship(LocationType, lazy="selectin")
    location_group: Mapped[Optional[LocationGroup]] = relationship(LocationGroup, lazy="selectin")

    __table_args__ = (
        UniqueConstraint("AREA", "AISLE", "X", "Y", "Z", name="uq_location_id_parts"),
        Index("ix_location_group", "LOCATION_GROUP"),
    )

    @property
    def location_id(self) -> str:
        return "/".join([self.area, self.aisle, self.x, self.y, self.z])

    def __repr__(self) -> str:
        return f"<Location id={self.id} {self.location_id}>"


__all__: List[str] = ["LocationType", "LocationGroup", "Location"]
