import math

_SI_PREFIXES = [(1e12, "T"), (1e9, "G"), (1e6, "M"), (1e3, "k")]


def format_thousands(value: float) -> str:
    """Format a number with comma thousands separators, dropping a zero fraction."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_si(value: float) -> str:
    """Abbreviate a tick value with an SI prefix (1000 -> 1k, 6e7 -> 60M)."""
    for factor, suffix in _SI_PREFIXES:
        if abs(value) >= factor:
            return f"{value / factor:g}{suffix}"
    return f"{value:g}"


def decade_of(year: int) -> int:
    """Start year of the decade containing `year`."""
    return math.floor(year / 10) * 10
