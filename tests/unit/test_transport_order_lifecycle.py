# tests/unit/test_transport_order_lifecycle.py
from datetime import datetime, timezone

import pytest

from app.domain.errors import (
    IllegalTransitionError,
    InsufficientValueError,
    InvalidStateArgumentError,
)
from app.domain.transport_order_lifecycle import (
    ALLOWED_TRANSITIONS,
    can_transition,
    transition,
)
from app.models import Location, LocationGroup, TransportOrder, TransportUnit
from app.models.enums import TransportOrderState as S

STATES = list(S)


def _location() -> Location:
    return Location(area="FGIN", aisle="0001", x="0000", y="0000", z="0000")


def _ready_order() -> TransportOrder:
    order = TransportOrder()
    order.transport_unit = TransportUnit(barcode="TU-0001")
    order.target_location = _location()
    return order


def test_new_order_defaults():
    order = TransportOrder()
    assert order.state is S.CREATED
    assert order.creation_date is not None
    assert order.start_date is None
    assert order.priority == 0
    assert order.is_new
    assert order.problem is None


@pytest.mark.parametrize(
    "current,requested",
    [(a, b) for a in STATES for b in STATES if STATES.index(b) < STATES.index(a)],
)
def test_backward_transition_rejected(current, requested):
    order = _ready_order()
    order.state = current

    with pytest.raises(IllegalTransitionError):
        transition(order, requested)
    assert order.state is current


@pytest.mark.parametrize("requested", [s for s in STATES if s is not S.INITIALIZED])
def test_created_must_go_to_initialized_first(requested):
    # 前置条件齐全也不行
    order = _ready_order()
    with pytest.raises(IllegalTransitionError) as ei:
        transition(order, requested)
    assert not isinstance(ei.value, InsufficientValueError)
    assert order.state is S.CREATED


@pytest.mark.parametrize("requested", [s for s in STATES if s is not S.INITIALIZED])
def test_created_illegal_move_wins_over_missing_precondition(requested):
    order = TransportOrder()
    with pytest.raises(IllegalTransitionError) as ei:
        transition(order, requested)
    assert not isinstance(ei.value, InsufficientValueError)


def test_none_state_is_invalid_argument():
    order = _ready_order()
    with pytest.raises(InvalidStateArgumentError):
        transition(order, None)
    assert order.state is S.CREATED


def test_unknown_state_is_invalid_argument():
    with pytest.raises(InvalidStateArgumentError):
        transition(_ready_order(), "TELEPORTED")


def test_string_state_is_accepted():
    order = _ready_order()
    transition(order, "initialized")
    assert order.state is S.INITIALIZED


def test_initialize_requires_transport_unit():
    order = TransportOrder()
    order.target_location = _location()
    with pytest.raises(InsufficientValueError):
        transition(order, S.INITIALIZED)
    assert order.state is S.CREATED


def test_initialize_requires_some_target():
    order = TransportOrder()
    order.transport_unit = TransportUnit(barcode="TU-0002")
    with pytest.raises(InsufficientValueError):
        transition(order, S.INITIALIZED)


def test_initialize_with_target_group_only():
    order = TransportOrder()
    order.transport_unit = TransportUnit(barcode="TU-0003")
    order.target_location_group = LocationGroup(name="ZONE-A")
    transition(order, S.INITIALIZED)
    assert order.state is S.INITIALIZED


def test_missing_precondition_is_an_illegal_transition():
    assert issubclass(InsufficientValueError, IllegalTransitionError)


def test_start_stamps_start_date_once_started():
    order = _ready_order()
    transition(order, S.INITIALIZED)
    assert order.start_date is None

    now = datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc)
    transition(order, S.STARTED, now=now)
    assert order.state is S.STARTED
    assert order.start_date == now


def test_other_transitions_do_not_touch_start_date():
    order = _ready_order()
    transition(order, S.INITIALIZED)
    transition(order, S.FINISHED)
    assert order.state is S.FINISHED
    assert order.start_date is None
    assert order.end_date is None


def test_same_state_transition_is_a_noop_after_creation():
    order = _ready_order()
    transition(order, S.INITIALIZED)
    transition(order, S.INITIALIZED)
    assert order.state is S.INITIALIZED


def test_created_to_created_rejected():
    with pytest.raises(IllegalTransitionError):
        transition(_ready_order(), S.CREATED)


def test_transition_table_is_forward_only():
    for current, targets in ALLOWED_TRANSITIONS.items():
        for target in targets:
            assert STATES.index(target) >= STATES.index(current)
    assert set(ALLOWED_TRANSITIONS) == set(STATES)
    assert can_transition(S.STARTED, S.INTERRUPTED)
    assert not can_transition(S.FINISHED, S.STARTED)


def test_full_scenario_via_entity():
    order = TransportOrder()

    with pytest.raises(InsufficientValueError):
        order.change_state(S.INITIALIZED)

    order.transport_unit = TransportUnit(barcode="TU-0004")
    order.target_location = _location()
    order.change_state(S.INITIALIZED)
    assert order.state is S.INITIALIZED

    order.change_state(S.STARTED)
    assert order.state is S.STARTED
    assert order.start_date is not None

    with pytest.raises(IllegalTransitionError):
        order.change_state(S.CREATED)
    assert order.state is S.STARTED
