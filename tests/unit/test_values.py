# tests/unit/test_values.py
from decimal import Decimal

from app.models import Problem, TransportOrder, TransportUnit, Weight, WeightUnit


def test_weight_convert_down_and_up():
    w = Weight(Decimal("1.5"), WeightUnit.KG)

    g = w.convert_to(WeightUnit.G)
    assert g.unit is WeightUnit.G
    assert g.value == Decimal("1500")

    t = w.convert_to(WeightUnit.T)
    assert t.value == Decimal("0.0015")

    assert g.convert_to(WeightUnit.KG) == w


def test_weight_ordering_larger_unit_then_larger_value_first():
    kg = Weight(Decimal("1"), WeightUnit.KG)
    g = Weight(Decimal("1"), WeightUnit.G)
    assert kg < g
    assert [str(w) for w in sorted([g, kg])] == ["1 KG", "1 G"]

    assert Weight(Decimal("2"), WeightUnit.KG) < Weight(Decimal("1"), WeightUnit.KG)
    assert Weight(Decimal("1"), WeightUnit.T) < Weight(Decimal("900"), WeightUnit.KG)
    ordered = sorted(
        [
            Weight(Decimal("5"), WeightUnit.MG),
            Weight(Decimal("1"), WeightUnit.KG),
            Weight(Decimal("3"), WeightUnit.T),
            Weight(Decimal("4"), WeightUnit.KG),
        ]
    )
    assert [str(w) for w in ordered] == ["3 T", "4 KG", "1 KG", "5 MG"]


def test_weight_coerces_plain_values():
    w = Weight(2, "KG")
    assert w.value == Decimal("2")
    assert w.unit is WeightUnit.KG
    assert str(w) == "2 KG"


def test_transport_unit_weight_columns():
    tu = TransportUnit(barcode="TU-W")
    assert tu.weight is None

    tu.weight = Weight(Decimal("7.25"), WeightUnit.KG)
    assert tu.weight_value == Decimal("7.25")
    assert tu.weight_unit is WeightUnit.KG
    assert tu.weight == Weight(Decimal("7.25"), WeightUnit.KG)

    tu.weight = None
    assert tu.weight_value is None and tu.weight_unit is None


def test_problem_embedded_on_order():
    order = TransportOrder()
    p = Problem(message_no=4711, message="conveyor blocked")
    assert p.occurred is not None

    order.problem = p
    assert order.problem_message_no == 4711
    assert order.problem == p

    order.problem = None
    assert order.problem is None
