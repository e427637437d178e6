# app/models/__init__.py
"""
统一导出 ORM 模型；导入本包即注册全部映射，字符串关系目标都可解析。
"""

from app.models.enums import TransportOrderState, WeightUnit
from app.models.location import Location, LocationGroup, LocationType
from app.models.message import Message
from app.models.transport_order import TransportOrder
from app.models.transport_unit import TransportUnit, TransportUnitType
from app.models.type_placing_rule import TypePlacingRule
from app.models.values import Problem, Weight

__all__ = [
    "Location",
    "LocationGroup",
    "LocationType",
    "Message",
    "Problem",
    "TransportOrder",
    "TransportOrderState",
    "TransportUnit",
    "TransportUnitType",
    "TypePlacingRule",
    "Weight",
    "WeightUnit",
]
