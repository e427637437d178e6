# app/models/values.py
"""
值对象（不单独建表，按列内嵌到宿主实体）：

- Problem : 运输单上最近一次异常（发生时间 + 消息号 + 文本）
- Weight  : 带单位的重量
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from app.models.enums import WeightUnit


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Problem:
    occurred: datetime = field(default_factory=utcnow)
    message_no: int = 0
    message: str | None = None


@functools.total_ordering
@dataclass(frozen=True)
class Weight:
    """
    重量 = 数值 + 单位。

    排序规则：先比单位，大单位在前（T, KG, G, MG）；单位相同时数值大的在前。
    需要按实际大小比较时，先 convert_to() 到同一单位。
    """

    value: Decimal
    unit: WeightUnit

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            object.__setattr__(self, "value", Decimal(str(self.value)))
        if not isinstance(self.unit, WeightUnit):
            object.__setattr__(self, "unit", WeightUnit(self.unit))

    def convert_to(self, unit: WeightUnit) -> "Weight":
        shift = (self.unit.rank - unit.rank) * 3
        return Weight(self.value.scaleb(shift), unit)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return (-self.unit.rank, -self.value) < (-other.unit.rank, -other.value)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"
