"""
unitable.core.matrix
====================

Pairwise conversion table built from a sparse set of declared conversions.

A `ConversionMatrix` is given a handful of direct conversions such as
``1 foot = 0.3048 meter`` and derives every other factor reachable from them:
reverse factors, identities and all transitive factors inside each connected
component. The table is fully populated at construction time so lookups are a
pair of dict accesses.

Construction contract
---------------------
Each declared ``(a, b, f)`` (meaning ``1 a = f b``) is fed to a ``set``
procedure:

- ``a`` unknown: start a new row ``a -> {b: f}``.
- ``a`` already has a factor for ``b``: nothing to do.
- otherwise every ``(other, g)`` already in row ``a`` yields
  ``set(b, other, g / f)``, then ``a -> b = f`` is recorded.

Every recorded entry is followed by its reverse ``set(b, a, 1 / f)`` and the
identities ``set(a, a, 1)`` and ``set(b, b, 1)``. The no-op rule on known
pairs bounds the work, so the pending calls are kept on an explicit stack
rather than the interpreter's call stack.
"""

from __future__ import annotations

import logging
from math import isclose
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from unitable.core.errors import InvalidConversion, NoConversionPath, UnknownUnit
from unitable.core.utils import Number, is_positive_finite

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitable.core.quantity import Quantity

logger = logging.getLogger(__name__)

Conversion = Tuple[str, str, float]
ConversionSpec = Union[Mapping[str, Tuple[Number, str]], Iterable[Tuple[str, str, Number]]]


def _normalize_conversions(conversions: ConversionSpec) -> Tuple[Conversion, ...]:
    """Turn either accepted input shape into ``(source, target, factor)`` triples.

    - mapping ``key -> (factor, target)``: "1 key = factor target"
    - iterable of ``(source, target, factor)``: "1 source = factor target"
    """
    triples: List[Conversion] = []
    if isinstance(conversions, Mapping):
        for source, spec in conversions.items():
            try:
                factor, target = spec
            except (TypeError, ValueError) as e:
                raise InvalidConversion(
                    f"Conversion for {source!r} must be a (factor, target) pair, got {spec!r}"
                ) from e
            triples.append(_check_conversion(source, target, factor))
    else:
        for entry in conversions:
            try:
                source, target, factor = entry
            except (TypeError, ValueError) as e:
                raise InvalidConversion(
                    f"Conversion must be a (source, target, factor) triple, got {entry!r}"
                ) from e
            triples.append(_check_conversion(source, target, factor))
    return tuple(triples)


def _check_conversion(source: object, target: object, factor: object) -> Conversion:
    for name in (source, target):
        if not isinstance(name, str) or not name.strip():
            raise InvalidConversion(f"Unit names must be non-empty strings, got {name!r}")
    if not is_positive_finite(factor):
        raise InvalidConversion(
            f"Factor for {source!r} -> {target!r} must be a positive, finite number, got {factor!r}"
        )
    if source == target and factor != 1:
        raise InvalidConversion(
            f"A unit converts to itself with factor 1, got {factor!r} for {source!r}"
        )
    return source, target, float(factor)  # type: ignore[return-value]


class ConversionMatrix:
    """Complete pairwise conversion factors for one dimension.

    Parameters
    ----------
    conversions : mapping or iterable
        Either an ordered mapping ``{key: (factor, target)}`` read as
        "1 key = factor target", or an iterable of
        ``(source, target, factor)`` triples read as "1 source = factor target".

    Raises
    ------
    InvalidConversion
        If a declaration is malformed (empty unit name, non-positive or
        non-finite factor, self-conversion other than 1).
    """

    __slots__ = ("_conversions", "_matrix", "_view")

    def __init__(self, conversions: ConversionSpec = ()) -> None:
        self._conversions = _normalize_conversions(conversions)
        self._matrix: Dict[str, Dict[str, float]] = {}
        for source, target, factor in self._conversions:
            self._declare(source, target, factor)
        self._view = MappingProxyType(
            {unit: MappingProxyType(row) for unit, row in self._matrix.items()}
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Built conversion matrix from {len(self._conversions)} declarations: "
                f"{len(self._matrix)} units in {len(self.components())} components"
            )

    # ------------------------- construction --------------------------------
    def _declare(self, source: str, target: str, factor: float) -> None:
        row = self._matrix.get(source)
        if row is not None and target in row:
            existing = row[target]
            if not isclose(existing, factor, rel_tol=1e-9):
                logger.warning(
                    f"Ignoring redundant conversion 1 {source} = {factor} {target}: "
                    f"already derived as {existing}"
                )
            return
        self._propagate(source, target, factor)

    def _propagate(self, source: str, target: str, factor: float) -> None:
        # Pending set() calls; a known pair is always a no-op, so this drains.
        pending: List[Conversion] = [(source, target, factor)]
        while pending:
            a, b, f = pending.pop()
            row = self._matrix.get(a)
            if row is None:
                self._matrix[a] = {b: f}
            elif b in row:
                continue
            else:
                pending.extend((b, other, g / f) for other, g in list(row.items()))
                row[b] = f
            # Runs before the derived calls queued above (LIFO).
            pending.extend(((a, a, 1.0), (b, b, 1.0), (b, a, 1.0 / f)))

    # ------------------------- lookups -------------------------------------
    def _row(self, unit: object) -> Optional[Dict[str, float]]:
        # Only str names are keys; anything else is simply unknown.
        if not isinstance(unit, str):
            return None
        return self._matrix.get(unit)

    def factor(self, source: str, target: str) -> float:
        """Multiplier ``f`` such that ``1 source = f target``.

        Raises `UnknownUnit` when either unit is not in the table and
        `NoConversionPath` when both are known but not connected.
        """
        row = self._row(source)
        if row is None:
            raise UnknownUnit(source, source, target)
        try:
            return row[target]
        except (KeyError, TypeError):
            if target not in self:
                raise UnknownUnit(target, source, target) from None
            raise NoConversionPath(source, target) from None

    def has_path(self, source: str, target: str) -> bool:
        row = self._row(source)
        return row is not None and target in self and target in row

    def convert(self, amount: float, source: str, target: str) -> float:
        """Express ``amount`` of ``source`` in ``target`` units."""
        return amount * self.factor(source, target)

    def value(self, amount: float, unit: str) -> "Quantity":
        """Build a `Quantity` bound to this table. Does not validate."""
        # Local import avoids a circular import at module load time.
        from unitable.core.quantity import Quantity

        return Quantity(amount, unit, self)

    # ------------------------- introspection -------------------------------
    @property
    def conversions(self) -> Tuple[Conversion, ...]:
        """Declared conversions as ``(source, target, factor)`` triples."""
        return self._conversions

    @property
    def matrix(self) -> Mapping[str, Mapping[str, float]]:
        """Read-only view of the full table."""
        return self._view

    @property
    def units(self) -> Tuple[str, ...]:
        return tuple(self._matrix)

    def as_dict(self) -> Dict[str, Dict[str, float]]:
        return {unit: dict(row) for unit, row in self._matrix.items()}

    def component(self, unit: str) -> frozenset[str]:
        """All units connected to ``unit`` (itself included)."""
        row = self._row(unit)
        if row is None:
            raise UnknownUnit(unit)
        return frozenset(row)

    def components(self) -> Tuple[frozenset[str], ...]:
        seen: Dict[frozenset[str], None] = {}
        for row in self._matrix.values():
            seen.setdefault(frozenset(row), None)
        return tuple(seen)

    def __contains__(self, unit: object) -> bool:
        return isinstance(unit, str) and unit in self._matrix

    def __iter__(self) -> Iterator[str]:
        return iter(self._matrix)

    def __len__(self) -> int:
        return len(self._matrix)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(units={len(self._matrix)}, "
            f"components={len(self.components())})"
        )


# Name used by callers that think of it as "the unit table".
UnitTable = ConversionMatrix

__all__ = ["ConversionMatrix", "UnitTable", "Conversion", "ConversionSpec"]
