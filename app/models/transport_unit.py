# app/models/transport_unit.py
from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.enums import WeightUnit
from app.models.location import Location
from app.models.values import Weight

if TYPE_CHECKING:
    from app.models.type_placing_rule import TypePlacingRule


class TransportUnitType(Base):
    """托盘/容器类型，持有自己的放置规则（TypePlacingRule）。"""

    __tablename__ = "TRANSPORT_UNIT_TYPE"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column("TYPE", String(64), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column("DESCRIPTION", String(255), nullable=True)

    placing_rules: Mapped[List["TypePlacingRule"]] = relationship(
        "TypePlacingRule",
        back_populates="transport_unit_type",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<TransportUnitType id={self.id} type={self.type!r}>"


class TransportUnit(Base):
    """
    运输单元（托盘 / 周转箱）：
    - barcode 全局唯一
    - actual_location 当前所在库位
    - weight 由 WEIGHT + WEIGHT_UNIT 两列内嵌
    """

    __tablename__ = "TRANSPORT_UNIT"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    barcode: Mapped[str] = mapped_column("BARCODE", String(64), nullable=False, unique=True)

    transport_unit_type_id: Mapped[Optional[int]] = mapped_column(
        "TRANSPORT_UNIT_TYPE", Integer, ForeignKey("TRANSPORT_UNIT_TYPE.ID"), nullable=True
    )
    actual_location_id: Mapped[Optional[int]] = mapped_column(
        "ACTUAL_LOCATION", Integer, ForeignKey("LOCATION.ID"), nullable=True
    )

    weight_value: Mapped[Optional[Decimal]] = mapped_column("WEIGHT", Numeric(15, 3), nullable=True)
    weight_unit: Mapped[Optional[WeightUnit]] = mapped_column(
        "WEIGHT_UNIT",
        SAEnum(WeightUnit, name="weight_unit", native_enum=False, length=8),
        nullable=True,
    )

    transport_unit_type: Mapped[Optional[TransportUnitType]] = relationship(
        TransportUnitType, lazy="selectin"
    )
    actual_location: Mapped[Optional[Location]] = relationship(Location, lazy="selectin")

    @property
    def weight(self) -> Optional[Weight]:
        if self.weight_value is None or self.weight_unit is None:
            return None
        return Weight(self.weight_value, self.weight_unit)

    @weight.setter
    def weight(self, weight: Optional[Weight]) -> None:
        if weight is None:
            self.weight_value = None
            self.weight_unit = None
        else:
            self.weight_value = weight.value
            self.weight_unit = weight.unit

    def __repr__(self) -> str:
        return f"<TransportUnit id={self.id} barcode={self.barcode!r}>"
