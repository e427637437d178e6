# app/models/transport_order.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Index, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.enums import TransportOrderState
from app.models.location import Location, LocationGroup
from app.models.transport_unit import TransportUnit
from app.models.values import Problem, utcnow


class TransportOrder(Base):
    """
    运输单：把一个 TransportUnit 从来源库位搬到目标库位（或目标库位组）。

    约定：
    - 新建即 state=CREATED，creation_date=now
    - state 只能通过 change_state() 推进（见 app.domain.transport_order_lifecycle）
    - priority 越大越紧急
    - version 列交给 SQLAlchemy 做乐观锁（version_id_col）
    """

    __tablename__ = "TRANSPORT_ORDER"
    __table_args__ = (Index("ix_transport_order_state", "STATE"),)

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)

    transport_unit_id: Mapped[Optional[int]] = mapped_column(
        "TRANSPORT_UNIT", Integer, ForeignKey("TRANSPORT_UNIT.ID"), nullable=True
    )
    priority: Mapped[int] = mapped_column("PRIORITY", SmallInteger, nullable=False, default=0)

    creation_date: Mapped[datetime] = mapped_column(
        "CREATION_DATE", DateTime(timezone=True), nullable=False
    )
    date_updated: Mapped[Optional[datetime]] = mapped_column(
        "DATE_UPDATED", DateTime(timezone=True), nullable=True, onupdate=utcnow
    )
    start_date: Mapped[Optional[datetime]] = mapped_column(
        "START_DATE", DateTime(timezone=True), nullable=True
    )
    end_date: Mapped[Optional[datetime]] = mapped_column(
        "END_DATE", DateTime(timezone=True), nullable=True
    )

    state: Mapped[TransportOrderState] = mapped_column(
        "STATE",
        SAEnum(TransportOrderState, name="transport_order_state", native_enum=False, length=16),
        nullable=False,
    )

    source_location_id: Mapped[Optional[int]] = mapped_column(
        "SOURCE_LOCATION", Integer, ForeignKey("LOCATION.ID"), nullable=True
    )
    target_location_id: Mapped[Optional[int]] = mapped_column(
        "TARGET_LOCATION", Integer, ForeignKey("LOCATION.ID"), nullable=True
    )
    target_location_group_id: Mapped[Optional[int]] = mapped_column(
        "TARGET_LOCATION_GROUP", Integer, ForeignKey("LOCATION_GROUP.ID"), nullable=True
    )

    # 最近一次异常（Problem 内嵌三列）
    problem_occurred: Mapped[Optional[datetime]] = mapped_column(
        "OCCURRED", DateTime(timezone=True), nullable=True
    )
    problem_message_no: Mapped[Optional[int]] = mapped_column("MESSAGE_NO", Integer, nullable=True)
    problem_message: Mapped[Optional[str]] = mapped_column("MESSAGE", String(1024), nullable=True)

    version: Mapped[int] = mapped_column("C_VERSION", Integer, nullable=False)

    transport_unit: Mapped[Optional[TransportUnit]] = relationship(TransportUnit, lazy="selectin")
    source_location: Mapped[Optional[Location]] = relationship(
        Location, foreign_keys=[source_location_id], lazy="selectin"
    )
    target_location: Mapped[Optional[Location]] = relationship(
        Location, foreign_keys=[target_location_id], lazy="selectin"
    )
    target_location_group: Mapped[Optional[LocationGroup]] = relationship(
        LocationGroup, lazy="selectin"
    )

    __mapper_args__ = {"version_id_col": version}

    def __init__(
        self,
        *,
        priority: int = 0,
        transport_unit: Optional[TransportUnit] = None,
        source_location: Optional[Location] = None,
        target_location: Optional[Location] = None,
        target_location_group: Optional[LocationGroup] = None,
    ) -> None:
        super().__init__()
        self.creation_date = utcnow()
        self.state = TransportOrderState.CREATED
        self.priority = priority
        self.date_updated = None
        self.start_date = None
        self.end_date = None
        self.problem = None
        self.transport_unit_id = None
        self.source_location_id = None
        self.target_location_id = None
        self.target_location_group_id = None
        # 关系显式落值，异步会话下访问不触发懒加载
        self.transport_unit = transport_unit
        self.source_location = source_location
        self.target_location = target_location
        self.target_location_group = target_location_group

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def problem(self) -> Optional[Problem]:
        if self.problem_occurred is None and self.problem_message_no is None:
            return None
        return Problem(
            occurred=self.problem_occurred,
            message_no=self.problem_message_no or 0,
            message=self.problem_message,
        )

    @problem.setter
    def problem(self, problem: Optional[Problem]) -> None:
        if problem is None:
            self.problem_occurred = None
            self.problem_message_no = None
            self.problem_message = None
        else:
            self.problem_occurred = problem.occurred
            self.problem_message_no = problem.message_no
            self.problem_message = problem.message

    def change_state(self, new_state: Optional[TransportOrderState]) -> None:
        """按生命周期规则推进状态；非法迁移直接抛错，不做任何修改。"""
        from app.domain.transport_order_lifecycle import transition

        transition(self, new_state)

    def __repr__(self) -> str:
        return f"<TransportOrder id={self.id} state={self.state} priority={self.priority}>"
