"""
Unitable: unit-tagged quantities over conversion tables derived from a few declared factors.

Declare a handful of direct conversions ("1 foot = 0.3048 meter") and Unitable
derives every reverse, identity and transitive factor up front, so quantities
can be converted, compared and added with constant-time lookups.
"""

import logging
from importlib import metadata as _metadata

__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("unitable")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from unitable.core.errors import (  # noqa: E402
    InvalidAmount,
    InvalidConversion,
    InvalidOperand,
    NoConversionPath,
    UnitError,
    UnknownTable,
    UnknownUnit,
)
from unitable.core.family import UnitFamily, identity, make_unit_family, zero  # noqa: E402
from unitable.core.matrix import ConversionMatrix, UnitTable  # noqa: E402
from unitable.core.quantity import Quantity  # noqa: E402
from unitable.core.utils import DEFAULT_EPSILON, approx_equals  # noqa: E402
from unitable.tables.registry import TableRegistry  # noqa: E402

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "ConversionMatrix",
    "UnitTable",
    "Quantity",
    "UnitFamily",
    "make_unit_family",
    "zero",
    "identity",
    "TableRegistry",
    "DEFAULT_EPSILON",
    "approx_equals",
    "UnitError",
    "UnknownUnit",
    "NoConversionPath",
    "InvalidOperand",
    "InvalidAmount",
    "InvalidConversion",
    "UnknownTable",
]
