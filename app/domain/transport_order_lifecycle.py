# app/domain/transport_order_lifecycle.py
"""
运输单生命周期（纯内存、同步，无 I/O）。

迁移合法性只看 ALLOWED_TRANSITIONS 这张有向表，不依赖枚举声明顺序：

    CREATED      -> INITIALIZED
    INITIALIZED  -> INITIALIZED / STARTED / INTERRUPTED / ONFAILURE / FINISHED
    STARTED      -> STARTED / INTERRUPTED / ONFAILURE / FINISHED
    INTERRUPTED  -> INTERRUPTED / ONFAILURE / FINISHED
    ONFAILURE    -> ONFAILURE / FINISHED
    FINISHED     -> FINISHED

同状态迁移（no-op）除 CREATED 外一律放行；重复进入 STARTED 会重新打 start_date。

副作用只有一个：进入 STARTED 时写 start_date。
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Dict, FrozenSet, Optional, Union

from app.domain.errors import (
    IllegalTransitionError,
    InsufficientValueError,
    InvalidStateArgumentError,
)
from app.models.enums import TransportOrderState as S
from app.models.values import utcnow

if TYPE_CHECKING:
    from app.models.transport_order import TransportOrder

ALLOWED_TRANSITIONS: Dict[S, FrozenSet[S]] = {
    S.CREATED: frozenset({S.INITIALIZED}),
    S.INITIALIZED: frozenset({S.INITIALIZED, S.STARTED, S.INTERRUPTED, S.ONFAILURE, S.FINISHED}),
    S.STARTED: frozenset({S.STARTED, S.INTERRUPTED, S.ONFAILURE, S.FINISHED}),
    S.INTERRUPTED: frozenset({S.INTERRUPTED, S.ONFAILURE, S.FINISHED}),
    S.ONFAILURE: frozenset({S.ONFAILURE, S.FINISHED}),
    S.FINISHED: frozenset({S.FINISHED}),
}


def coerce_state(value: Union[S, str, None]) -> S:
    if value is None:
        raise InvalidStateArgumentError("transportState cannot be null")
    if isinstance(value, S):
        return value
    try:
        return S(str(value).strip().upper())
    except ValueError:
        raise InvalidStateArgumentError(f"unknown transport order state: {value!r}") from None


def can_transition(current: S, new_state: S) -> bool:
    return new_state in ALLOWED_TRANSITIONS.get(current, frozenset())


def validate_initialization(order: "TransportOrder") -> None:
    has_tu = order.transport_unit is not None or order.transport_unit_id is not None
    has_target = any(
        v is not None
        for v in (
            order.target_location,
            order.target_location_id,
            order.target_location_group,
            order.target_location_group_id,
        )
    )
    if not (has_tu and has_target):
        raise InsufficientValueError(
            "Not all properties are set to switch transportOrder in next state"
        )


def validate_state_change(order: "TransportOrder", new_state: Union[S, str, None]) -> S:
    """
    校验顺序：
      1) 目标为空 / 非法 → InvalidStateArgumentError
      2) 不在迁移表中 → IllegalTransitionError（CREATED 起步必须 INITIALIZED，其余为回退）
      3) 从 CREATED 出发 → 必须已有托盘 + (目标库位 | 目标库位组)
    """
    target = coerce_state(new_state)
    current = order.state

    if not can_transition(current, target):
        if current is S.CREATED:
            raise IllegalTransitionError("TransportOrder must be initialized after creation")
        raise IllegalTransitionError(
            f"Turning back state of transportOrder not allowed ({current.value} -> {target.value})"
        )

    if current is S.CREATED:
        validate_initialization(order)

    return target


def transition(
    order: "TransportOrder",
    new_state: Union[S, str, None],
    *,
    now: Optional[datetime] = None,
) -> S:
    target = validate_state_change(order, new_state)
    if target is S.STARTED:
        order.start_date = now or utcnow()
    order.state = target
    return target
