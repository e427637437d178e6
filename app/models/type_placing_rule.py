# app/models/type_placing_rule.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.location import LocationType

if TYPE_CHECKING:
    from app.models.transport_unit import TransportUnitType

FORBIDDEN = -1


class TypePlacingRule(Base):
    """
    放置规则：某 TransportUnitType 允许放到哪些 LocationType 上。

    privilege_level：
    - 0 为最低优先级（默认），数值越大越优先放置
    - -1 表示禁止放置（更小的值同样视为禁止）
    """

    __tablename__ = "TYPE_PLACING_RULE"
    __table_args__ = (
        UniqueConstraint(
            "TRANSPORT_UNIT_TYPE",
            "PRIVILEGE_LEVEL",
            "ALLOWED_LOCATION_TYPE",
            name="uq_type_placing_rule",
        ),
    )

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    transport_unit_type_id: Mapped[Optional[int]] = mapped_column(
        "TRANSPORT_UNIT_TYPE", Integer, ForeignKey("TRANSPORT_UNIT_TYPE.ID"), nullable=True
    )
    privilege_level: Mapped[int] = mapped_column("PRIVILEGE_LEVEL", Integer, nullable=False, default=0)
    allowed_location_type_id: Mapped[int] = mapped_column(
        "ALLOWED_LOCATION_TYPE", Integer, ForeignKey("LOCATION_TYPE.ID"), nullable=False
    )

    transport_unit_type: Mapped[Optional["TransportUnitType"]] = relationship(
        "TransportUnitType", back_populates="placing_rules"
    )
    allowed_location_type: Mapped[LocationType] = relationship(LocationType, lazy="selectin")

    @property
    def is_forbidden(self) -> bool:
        return self.privilege_level <= FORBIDDEN

    def __repr__(self) -> str:
        return (
            f"<TypePlacingRule id={self.id} tut={self.transport_unit_type_id} "
            f"level={self.privilege_level} loc_type={self.allowed_location_type_id}>"
        )
