"""
unitable.core.family
====================

Sugar for working with one table and one default unit without repeating the
table reference at every call site.

>>> length = make_unit_family(table, "meter")
>>> length(3)
Quantity(3, 'meter')
>>> length(2, "foot").to("meter")
Quantity(0.6096, 'meter')
>>> zero(length)
Quantity(0.0, 'meter')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from unitable.core.errors import UnknownUnit
from unitable.core.matrix import ConversionMatrix
from unitable.core.quantity import Quantity


@dataclass(frozen=True, slots=True)
class UnitFamily:
    """A conversion table paired with the unit used when none is given."""

    table: ConversionMatrix
    default_unit: str

    def __call__(self, amount: float, unit: Optional[str] = None) -> Quantity:
        return Quantity(amount, self.default_unit if unit is None else unit, self.table)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Quantity) and item.table is self.table


def make_unit_family(table: ConversionMatrix, default_unit: str) -> UnitFamily:
    """Bind ``table`` and ``default_unit``; the unit must be known to the table."""
    if default_unit not in table:
        raise UnknownUnit(default_unit)
    return UnitFamily(table, default_unit)


def zero(family: UnitFamily) -> Quantity:
    return family(0.0)


def identity(family: UnitFamily) -> Quantity:
    return family(1.0)


__all__ = ["UnitFamily", "make_unit_family", "zero", "identity"]
