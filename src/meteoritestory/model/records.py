"""
Landing Records
===============
The immutable data the whole application renders.

Classes:
    Record: One meteorite landing.
    Boundary: One geographic outline (a country) as closed lon/lat rings.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Record:
    """A single landing. `year` and `mass` are guaranteed by the loader."""
    name: str
    mass: float  # grams, > 0
    year: int
    lat: Optional[float] = None
    lon: Optional[float] = None
    recclass: str = ""

    @property
    def has_location(self) -> bool:
        return self.lat is not None and self.lon is not None


# Loaded once, never mutated; shared by every scene.
Dataset = tuple[Record, ...]


@dataclass(eq=False)
class Boundary:
    """
    A named outline made of one or more closed rings.
    Each ring is an (N, 2) array of (lon, lat) degrees.
    """
    name: str
    rings: list[npt.NDArray[np.float64]] = field(default_factory=list)


def as_dataset(records: Sequence[Record]) -> Dataset:
    return tuple(records)
