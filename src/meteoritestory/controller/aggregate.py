"""
Aggregator
Summary structures derived from the dataset. Everything is recomputed on
each redraw; the dataset is small enough for full rescans.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence

from meteoritestory.config import ALL_CLASSES, TOP_N
from meteoritestory.model.records import Record
from meteoritestory.utils import decade_of


def decade_counts(records: Iterable[Record]) -> list[tuple[int, int]]:
    """Number of records per decade, ascending by decade."""
    counts = Counter(decade_of(r.year) for r in records)
    return sorted(counts.items())


def top_by_mass(records: Sequence[Record], n: int = TOP_N) -> list[Record]:
    """The `n` heaviest records; equal masses keep their dataset order."""
    return sorted(records, key=lambda r: r.mass, reverse=True)[:n]


def heaviest(records: Iterable[Record]) -> Optional[Record]:
    """First record with the maximum mass, or None for an empty subset."""
    best: Optional[Record] = None
    for r in records:
        if best is None or r.mass > best.mass:
            best = r
    return best


def geolocated(records: Iterable[Record]) -> list[Record]:
    return [r for r in records if r.has_location]


def filter_by_year_and_class(records: Iterable[Record], min_year: int, recclass: str) -> list[Record]:
    return [
        r for r in records
        if r.year >= min_year and (recclass == ALL_CLASSES or r.recclass == recclass)
    ]


def year_extent(records: Iterable[Record]) -> Optional[tuple[int, int]]:
    years = [r.year for r in records]
    if not years:
        return None
    return min(years), max(years)


def max_mass(records: Iterable[Record]) -> Optional[float]:
    masses = [r.mass for r in records]
    return max(masses) if masses else None


def distinct_classes(records: Iterable[Record]) -> list[str]:
    return sorted({r.recclass for r in records})
