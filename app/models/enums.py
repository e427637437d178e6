# app/models/enums.py
from __future__ import annotations

from enum import Enum


class TransportOrderState(str, Enum):
    """
    运输单状态（声明顺序即业务推进顺序）：

    - CREATED      新建，尚未绑定托盘/目标
    - INITIALIZED  已初始化（托盘 + 目标位/目标组 已就绪）
    - STARTED      已开始执行
    - INTERRUPTED  执行被中断
    - ONFAILURE    执行失败
    - FINISHED     已完成

    是否允许迁移由 app.domain.transport_order_lifecycle 的迁移表决定，
    不依赖这里的声明顺序。
    """

    CREATED = "CREATED"
    INITIALIZED = "INITIALIZED"
    STARTED = "STARTED"
    INTERRUPTED = "INTERRUPTED"
    ONFAILURE = "ONFAILURE"
    FINISHED = "FINISHED"


class WeightUnit(str, Enum):
    """重量单位，相邻单位之间相差 1000 倍（按声明顺序从小到大）。"""

    MG = "MG"
    G = "G"
    KG = "KG"
    T = "T"

    @property
    def rank(self) -> int:
        return list(WeightUnit).index(self)
