"""
unitable.core.errors
====================

Exception hierarchy shared by conversion tables, quantities and the table
registry.

Every error derives from `UnitError` and from the builtin exception a caller
would naturally expect (`LookupError`, `TypeError`, `ValueError`), so code
written against the builtins keeps working.
"""

from __future__ import annotations


class UnitError(Exception):
    """Base class for every error raised by unitable."""


class NoConversionPath(UnitError, LookupError):
    """No factor exists between two units.

    Raised when both units are known to the table but live in disjoint
    connected components.
    """

    def __init__(self, source: str, target: str, message: str | None = None) -> None:
        self.source = source
        self.target = target
        super().__init__(message or f"No conversion path from {source!r} to {target!r}")


class UnknownUnit(NoConversionPath):
    """A unit name is not present in the conversion table."""

    def __init__(self, unit: object, source: object = None, target: object = None) -> None:
        self.unit = unit
        # source/target keep the direction of the failed lookup
        super().__init__(unit if source is None else source,
                         unit if target is None else target,
                         f"Unknown unit: {unit!r}")


class InvalidOperand(UnitError, TypeError):
    """An operation received an operand of the wrong kind or family."""


class InvalidAmount(UnitError, ValueError):
    """An amount is not a finite real number."""


class InvalidConversion(UnitError, ValueError):
    """A declared conversion is malformed (bad unit name or factor)."""


class UnknownTable(UnitError, LookupError):
    """A table name is not present in a `TableRegistry`."""


__all__ = [
    "UnitError",
    "NoConversionPath",
    "UnknownUnit",
    "InvalidOperand",
    "InvalidAmount",
    "InvalidConversion",
    "UnknownTable",
]
