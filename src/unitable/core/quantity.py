"""
unitable.core.quantity
======================

Defines the `Quantity` value type: an amount tagged with a unit name and
bound to the `ConversionMatrix` that gives the unit meaning.

Quantities are immutable. Conversion, comparison and arithmetic all return
new values and delegate every unit change to a factor lookup in the shared
table. Two quantities belong to the same *family* when they share a table;
operations that combine quantities reject anything outside the family.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unitable.core.errors import InvalidAmount, InvalidOperand, UnknownUnit
from unitable.core.utils import Number, approx_equals, is_finite_number, is_scalar

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitable.core.matrix import ConversionMatrix


@dataclass(frozen=True, slots=True, eq=False)
class Quantity:
    """
    An amount expressed in a unit of one `ConversionMatrix`.

    Attributes
    ----------
    amount : float
        Numeric magnitude in ``unit``.
    unit : str
        Unit name; meaningful only as a key of ``table``.
    table : ConversionMatrix
        Shared, read-only conversion table.

    Notes
    -----
    The constructor performs no validation; use `valid` or `validate`.
    Equality is approximate, so quantities are unhashable.
    """

    amount: float
    unit: str
    table: "ConversionMatrix"

    # --- operand checks ----------------------------------------------------
    def _ensure_family(self, other: object, op: str) -> "Quantity":
        if not isinstance(other, Quantity):
            raise InvalidOperand(
                f"{op} requires a Quantity, got {type(other).__name__}"
            )
        if other.table is not self.table:
            raise InvalidOperand(
                f"{op} requires a Quantity from the same table: "
                f"'{self.unit}' and '{other.unit}' are unrelated"
            )
        return other

    @staticmethod
    def _ensure_scalar(other: object, op: str) -> Number:
        if not is_scalar(other):
            raise InvalidOperand(
                f"{op} requires an int or float scalar, got {type(other).__name__}"
            )
        return other  # type: ignore[return-value]

    # --- validity ----------------------------------------------------------
    def valid(self) -> bool:
        """True when the amount is a finite number and the unit is known."""
        return is_finite_number(self.amount) and self.unit in self.table

    def validate(self) -> "Quantity":
        """Return self, or raise `InvalidAmount` / `UnknownUnit`."""
        if not is_finite_number(self.amount):
            raise InvalidAmount(f"Amount must be a finite number, got {self.amount!r}")
        if self.unit not in self.table:
            raise UnknownUnit(self.unit)
        return self

    # --- conversion --------------------------------------------------------
    def get(self, unit: str) -> float:
        """The amount expressed in ``unit``, as a bare number."""
        return self.amount * self.table.factor(self.unit, unit)

    def to(self, unit: str) -> "Quantity":
        return Quantity(self.get(unit), unit, self.table)

    def with_amount(self, amount: float) -> "Quantity":
        return Quantity(amount, self.unit, self.table)

    # --- comparison --------------------------------------------------------
    def eq(self, other: "Quantity") -> bool:
        """Approximate equality after converting ``other`` into this unit."""
        other = self._ensure_family(other, "eq")
        return approx_equals(self.amount, other.get(self.unit))

    def gt(self, other: "Quantity") -> bool:
        other = self._ensure_family(other, "gt")
        return self.amount > other.get(self.unit)

    def lt(self, other: "Quantity") -> bool:
        other = self._ensure_family(other, "lt")
        return self.amount < other.get(self.unit)

    def ge(self, other: "Quantity") -> bool:
        return self.gt(other) or self.eq(other)

    def le(self, other: "Quantity") -> bool:
        return self.lt(other) or self.eq(other)

    # --- arithmetic --------------------------------------------------------
    def negate(self) -> "Quantity":
        return self.with_amount(-self.amount)

    def add(self, other: "Quantity") -> "Quantity":
        """Sum expressed in this quantity's unit."""
        other = self._ensure_family(other, "add")
        return self.with_amount(self.amount + other.get(self.unit))

    def sub(self, other: "Quantity") -> "Quantity":
        other = self._ensure_family(other, "sub")
        return self.with_amount(self.amount - other.get(self.unit))

    def mul(self, k: Number) -> "Quantity":
        k = self._ensure_scalar(k, "mul")
        return self.with_amount(self.amount * k)

    def div(self, k: Number) -> "Quantity":
        k = self._ensure_scalar(k, "div")
        return self.with_amount(self.amount / k)

    def pow(self, k: Number) -> "Quantity":
        """Raise the amount to ``k``; the unit tag is left unchanged.

        There is no dimensional exponent tracking: squaring a length gives a
        number still tagged with the length unit. A result that is complex or
        too large for a float raises `InvalidAmount`.
        """
        k = self._ensure_scalar(k, "pow")
        try:
            return self.with_amount(math.pow(self.amount, k))
        except (ValueError, OverflowError) as e:
            raise InvalidAmount(
                f"{self.amount!r} ** {k!r} has no finite real result"
            ) from e

    # --- operator protocol -------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if other.table is not self.table:
            return False
        return self.eq(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __gt__(self, other: "Quantity") -> bool:
        return self.gt(other)

    def __lt__(self, other: "Quantity") -> bool:
        return self.lt(other)

    def __ge__(self, other: "Quantity") -> bool:
        return self.ge(other)

    def __le__(self, other: "Quantity") -> bool:
        return self.le(other)

    def __neg__(self) -> "Quantity":
        return self.negate()

    def __add__(self, other: "Quantity") -> "Quantity":
        return self.add(other)

    def __sub__(self, other: "Quantity") -> "Quantity":
        return self.sub(other)

    def __mul__(self, k: Number) -> "Quantity":
        return self.mul(k)

    def __rmul__(self, k: Number) -> "Quantity":
        # allows 3 * q
        return self.mul(k)

    def __truediv__(self, k: Number) -> "Quantity":
        return self.div(k)

    def __pow__(self, k: Number) -> "Quantity":
        return self.pow(k)

    __hash__ = None  # type: ignore[assignment]

    # --- text --------------------------------------------------------------
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.amount!r}, {self.unit!r})"

    def __str__(self) -> str:
        return f"{self.amount:.15g} {self.unit}"

    def __format__(self, spec: str) -> str:
        """
        Format the amount with a float format spec and append the unit.

        Examples
        --------
        >>> q = table.value(0.9144, "meter")
        >>> f"{q}"
        '0.9144 meter'
        >>> f"{q:.2f}"
        '0.91 meter'
        """
        if not spec:
            return str(self)
        return f"{format(self.amount, spec)} {self.unit}"


__all__ = ["Quantity"]
