import pytest

from meteoritestory.utils import decade_of, format_si, format_thousands


@pytest.mark.parametrize("value,expected", [
    (60000000.0, "60,000,000"),
    (1234, "1,234"),
    (12.5, "12.5"),
    (0.25, "0.25"),
])
def test_format_thousands(value, expected):
    assert format_thousands(value) == expected


@pytest.mark.parametrize("value,expected", [
    (1.0, "1"),
    (1000.0, "1k"),
    (1e7, "10M"),
    (6e7, "60M"),
])
def test_format_si(value, expected):
    assert format_si(value) == expected


def test_decade_of():
    assert decade_of(1999) == 1990
    assert decade_of(2000) == 2000
    assert decade_of(861) == 860
