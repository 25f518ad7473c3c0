"""
unitable.tables.registry
========================

A small, thread-safe registry of named conversion tables.

Each `ConversionMatrix` models one dimension; an application usually keeps
several (length, mass, time, ...). The registry gives them names and can
locate the table that knows a given unit.

- `register` / `get` / `has` / `all` as the public API.
- Names are normalised (NFC, surrounding whitespace stripped).
- Multiple registries can coexist, which keeps tests isolated.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Optional, Tuple

from unitable.core.errors import UnknownTable, UnknownUnit
from unitable.core.matrix import ConversionMatrix

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitable.core.quantity import Quantity

logger = logging.getLogger(__name__)


def normalize_name(s: str) -> str:
    """Normalise a table name: strip whitespace, Unicode NFC."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip())


class TableRegistry:
    """Thread-safe registry mapping names to `ConversionMatrix` objects."""

    def __init__(self, tables: Optional[Iterable[Tuple[str, ConversionMatrix]]] = None) -> None:
        self._lock = threading.RLock()
        self._tables: Dict[str, ConversionMatrix] = {}
        for name, table in tables or ():
            self.register(name, table)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)

    # -------------------------- public API ---------------------------------
    def register(self, name: str, table: ConversionMatrix, replace: bool = False) -> None:
        """Register ``table`` under ``name`` (overwrite only if ``replace``)."""
        if not isinstance(table, ConversionMatrix):
            raise TypeError(f"Expected a ConversionMatrix, got {type(table).__name__}")
        key = normalize_name(name)
        if not key:
            raise ValueError("Table name must be a non-empty string")

        # Check-and-set under one lock acquisition.
        with self._lock:
            if not replace and key in self._tables:
                raise ValueError(
                    f"Cannot register table '{key}': a table with this name already exists."
                )
            self._tables[key] = table
        logger.debug(f"Registered table {key!r}: {table!r}")

    def get(self, name: str) -> ConversionMatrix:
        """Lookup a table by name. Raises `UnknownTable` if missing."""
        key = normalize_name(name)
        with self._lock:
            table = self._tables.get(key)
        if table is None:
            raise UnknownTable(f"Unknown table: {name}")
        return table

    def has(self, name: str) -> bool:
        with self._lock:
            return normalize_name(name) in self._tables

    def all(self) -> Mapping[str, ConversionMatrix]:
        with self._lock:
            return dict(self._tables)

    def table_for(self, unit: str) -> ConversionMatrix:
        """The one registered table that knows ``unit``.

        Raises `UnknownUnit` if no table knows it and `ValueError` if more
        than one does.
        """
        with self._lock:
            matches = [name for name, table in self._tables.items() if unit in table]
            if not matches:
                raise UnknownUnit(unit)
            if len(matches) > 1:
                raise ValueError(
                    f"Unit '{unit}' is ambiguous: defined in tables {sorted(matches)}"
                )
            return self._tables[matches[0]]

    def value(self, amount: float, unit: str) -> "Quantity":
        """Build a `Quantity` in whichever table knows ``unit``."""
        return self.table_for(unit).value(amount, unit)


__all__ = ["TableRegistry", "normalize_name"]
