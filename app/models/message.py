# app/models/message.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.values import utcnow


class Message(Base):
    """预定义消息（消息号 → 文本），供 Problem 引用。"""

    __tablename__ = "MESSAGE"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    message_no: Mapped[int] = mapped_column("MESSAGE_NO", Integer, nullable=False, index=True)
    message_text: Mapped[str | None] = mapped_column("MESSAGE_TEXT", String(1024), nullable=True)
    created: Mapped[datetime] = mapped_column("CREATED", DateTime(timezone=True), nullable=False)

    def __init__(self, message_no: int, message_text: str | None = None) -> None:
        super().__init__()
        self.message_no = message_no
        self.message_text = message_text
        self.created = utcnow()

    def __repr__(self) -> str:
        return f"<Message id={self.id} no={self.message_no}>"
