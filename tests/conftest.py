# tests/conftest.py
import pytest
from unitable.core.matrix import ConversionMatrix


LENGTH_CONVERSIONS = {
    "foot": (0.3048, "meter"),
    "yard": (3, "foot"),
    "inch": (1 / 12, "foot"),
    "mile": (1760, "yard"),
    "centimeter": (0.01, "meter"),
}

MASS_CONVERSIONS = [
    ("kilogram", "gram", 1000),
    ("pound", "kilogram", 0.45359237),
    ("ounce", "pound", 1 / 16),
]


@pytest.fixture
def length_conversions():
    return dict(LENGTH_CONVERSIONS)


@pytest.fixture
def length():
    return ConversionMatrix(LENGTH_CONVERSIONS)


@pytest.fixture
def mass():
    return ConversionMatrix(MASS_CONVERSIONS)


@pytest.fixture
def split():
    """Two unrelated chains declared in one table."""
    return ConversionMatrix([
        ("foot", "meter", 0.3048),
        ("hour", "minute", 60),
        ("minute", "second", 60),
    ])
