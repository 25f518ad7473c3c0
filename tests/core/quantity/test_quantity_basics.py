import math
from dataclasses import FrozenInstanceError

import pytest

from unitable.core.errors import InvalidAmount, NoConversionPath, UnknownUnit
from unitable.core.quantity import Quantity

# -------------------------------
# Quantity: construction & conversion
# -------------------------------

def test_quantity_construct_and_fields(length):
    q = Quantity(3, "foot", length)
    assert q.amount == 3
    assert q.unit == "foot"
    assert q.table is length


def test_quantity_is_immutable(length):
    q = length.value(3, "foot")
    with pytest.raises(FrozenInstanceError):
        q.amount = 4
    with pytest.raises(FrozenInstanceError):
        q.unit = "meter"


def test_to_returns_new_quantity_in_target_unit(length):
    q = length.value(1, "yard")
    out = q.to("meter")

    assert isinstance(out, Quantity)
    assert out is not q
    assert out.unit == "meter"
    assert out.table is length
    assert out.amount == pytest.approx(0.9144)
    # receiver unchanged
    assert (q.amount, q.unit) == (1, "yard")


def test_to_worked_example_reverse(length):
    assert length.value(1, "meter").to("yard").amount == pytest.approx(1 / 0.9144)


def test_to_same_unit_is_exact(length):
    for unit in length:
        assert length.value(0.1, unit).to(unit).amount == 0.1


def test_get_returns_bare_number(length):
    got = length.value(2, "yard").get("foot")
    assert isinstance(got, float)
    assert got == 6.0


@pytest.mark.parametrize("unit", ["foot", "meter", "yard", "inch", "mile", "centimeter"])
def test_round_trip_through_every_unit(length, unit):
    q = length.value(7.25, "inch")
    assert q.to(unit).to("inch").amount == pytest.approx(7.25, abs=1e-9)


def test_to_unknown_unit_raises(length):
    with pytest.raises(UnknownUnit):
        length.value(1, "foot").to("parsec")
    with pytest.raises(UnknownUnit):
        length.value(1, "parsec").get("foot")


def test_to_disjoint_unit_raises(split):
    with pytest.raises(NoConversionPath):
        split.value(1, "foot").to("second")


def test_unknown_unit_is_caught_as_missing_path(length):
    # every "factor absent" failure is a NoConversionPath
    with pytest.raises(NoConversionPath):
        length.value(1, "foot").get("parsec")


def test_with_amount_keeps_unit_and_table(length):
    q = length.value(3, "foot")
    out = q.with_amount(9)
    assert (out.amount, out.unit, out.table) == (9, "foot", length)


# -------------------------------
# Validity
# -------------------------------

def test_valid(length):
    assert length.value(3, "foot").valid()
    assert length.value(0, "meter").valid()


@pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf, "3", None])
def test_invalid_amount(length, amount):
    q = length.value(amount, "foot")
    assert not q.valid()
    with pytest.raises(InvalidAmount):
        q.validate()


def test_unknown_unit_is_not_valid(length):
    q = length.value(3, "parsec")
    assert not q.valid()
    with pytest.raises(UnknownUnit):
        q.validate()


def test_unhashable_unit_is_unknown(length):
    q = length.value(3, "foot")
    with pytest.raises(UnknownUnit):
        q.get(["meter"])
    bad = length.value(3, ["foot"])
    assert not bad.valid()
    with pytest.raises(UnknownUnit):
        bad.validate()


def test_validate_returns_self(length):
    q = length.value(3, "foot")
    assert q.validate() is q


# -------------------------------
# Text
# -------------------------------

def test_repr(length):
    assert repr(length.value(3, "foot")) == "Quantity(3, 'foot')"


def test_str(length):
    assert str(length.value(0.9144, "meter")) == "0.9144 meter"
    assert str(length.value(13.0, "foot")) == "13 foot"


def test_format_applies_to_amount(length):
    q = length.value(0.9144, "meter")
    assert f"{q}" == "0.9144 meter"
    assert f"{q:.2f}" == "0.91 meter"
    assert f"{q:e}" == "9.144000e-01 meter"
