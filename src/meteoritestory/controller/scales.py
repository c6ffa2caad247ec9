"""
Coordinate Mapper
=================
Pure domain -> pixel mappings, rebuilt from the current dataset and viewport
on every redraw. Nothing here is cached between frames.

Every scale degrades the same way: an empty domain (no data) or a
degenerate one (min == max) maps every input to the midpoint of its range,
so an empty filter never breaks a frame.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Optional, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)

# Mercator diverges at the poles
MAX_MERCATOR_LAT = 85.05113


class InvalidMassValue(ValueError):
    """A mass <= 0 reached the logarithmic or square-root mapper."""


def _midpoint(rng: tuple[float, float]) -> float:
    return (rng[0] + rng[1]) / 2.0


# ------------------------------------------------------------------------------
# Tick helpers
# ------------------------------------------------------------------------------

def tick_increment(start: float, stop: float, count: int) -> float:
    """
    Step between round tick values (1, 2 or 5 x 10^k) for roughly `count` ticks.
    Negative results encode the reciprocal of a fractional step (-10 means 0.1),
    which keeps small steps free of float noise.
    """
    if count <= 0 or stop <= start:
        return 0.0
    step = (stop - start) / count
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def nice_domain(start: float, stop: float, count: int = 10) -> tuple[float, float]:
    """Extend [start, stop] outward to round tick values."""
    previous = None
    for _ in range(10):
        step = tick_increment(start, stop, count)
        if step == previous or step == 0:
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        else:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        previous = step
    return start, stop


def linear_ticks(start: float, stop: float, count: int = 10) -> list[float]:
    if stop < start:
        start, stop = stop, start
    if start == stop:
        return [start]
    step = tick_increment(start, stop, count)
    if step > 0:
        lo, hi = math.ceil(start / step), math.floor(stop / step)
        return [i * step for i in range(lo, hi + 1)]
    if step < 0:
        lo, hi = math.ceil(start * -step), math.floor(stop * -step)
        return [i / -step for i in range(lo, hi + 1)]
    return []


# ------------------------------------------------------------------------------
# Scales
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class LinearScale:
    domain: Optional[tuple[float, float]]
    range: tuple[float, float]

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        rng: tuple[float, float],
        nice: bool = True,
        include_zero: bool = False,
    ) -> LinearScale:
        arr = np.fromiter(values, dtype=np.float64)
        if arr.size == 0:
            return cls(domain=None, range=rng)
        lo, hi = float(arr.min()), float(arr.max())
        if include_zero:
            lo = min(0.0, lo)
        if nice:
            lo, hi = nice_domain(lo, hi)
        return cls(domain=(lo, hi), range=rng)

    @property
    def degenerate(self) -> bool:
        return self.domain is None or self.domain[0] == self.domain[1]

    def __call__(self, value: float) -> float:
        if self.degenerate:
            return _midpoint(self.range)
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def map_many(self, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        arr = np.asarray(values, dtype=np.float64)
        if self.degenerate:
            return np.full(arr.shape, _midpoint(self.range))
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (arr - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 10) -> list[float]:
        if self.domain is None:
            return []
        return linear_ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class LogScale:
    """Base-10 log scale. Inputs below the lower bound are clamped onto it."""
    domain: Optional[tuple[float, float]]
    range: tuple[float, float]

    @classmethod
    def for_mass(cls, max_mass: Optional[float], rng: tuple[float, float]) -> LogScale:
        if max_mass is None:
            return cls(domain=None, range=rng)
        if max_mass <= 0:
            raise InvalidMassValue(f"Maximum mass must be positive, got {max_mass}")
        return cls(domain=(1.0, float(max_mass)), range=rng)

    @property
    def degenerate(self) -> bool:
        return self.domain is None or self.domain[1] <= self.domain[0]

    def __call__(self, value: float) -> float:
        if value <= 0 or math.isnan(value):
            raise InvalidMassValue(f"Logarithmic mapping needs a positive value, got {value}")
        if self.degenerate:
            return _midpoint(self.range)
        d0, d1 = self.domain
        r0, r1 = self.range
        value = min(max(value, d0), d1)
        t = (math.log10(value) - math.log10(d0)) / (math.log10(d1) - math.log10(d0))
        return r0 + t * (r1 - r0)

    def ticks(self) -> list[float]:
        """Powers of ten inside the domain."""
        if self.degenerate:
            return [] if self.domain is None else [self.domain[0]]
        lo = math.ceil(math.log10(self.domain[0]))
        hi = math.floor(math.log10(self.domain[1]))
        return [10.0 ** k for k in range(lo, hi + 1)]


@dataclass(frozen=True)
class SqrtScale:
    """Radius scale: area, not radius, grows linearly with the value."""
    domain: Optional[tuple[float, float]]
    range: tuple[float, float]

    @classmethod
    def for_mass(cls, max_mass: Optional[float], rng: tuple[float, float] = (0.0, 12.0)) -> SqrtScale:
        if max_mass is None:
            return cls(domain=None, range=rng)
        if max_mass < 0:
            raise InvalidMassValue(f"Maximum mass must not be negative, got {max_mass}")
        return cls(domain=(0.0, float(max_mass)), range=rng)

    @property
    def degenerate(self) -> bool:
        return self.domain is None or self.domain[0] == self.domain[1]

    def __call__(self, value: float) -> float:
        if value <= 0 or math.isnan(value):
            raise InvalidMassValue(f"Square-root mapping needs a positive mass, got {value}")
        if self.degenerate:
            return _midpoint(self.range)
        d0, d1 = self.domain
        r0, r1 = self.range
        t = (math.sqrt(value) - math.sqrt(d0)) / (math.sqrt(d1) - math.sqrt(d0))
        return r0 + t * (r1 - r0)


@dataclass(frozen=True)
class BandScale:
    """Equal slots for ordered categories, with inner and outer padding as a fraction of a step."""
    domain: tuple[Hashable, ...]
    range: tuple[float, float]
    padding: float = 0.2
    step: float = field(init=False, default=0.0)
    bandwidth: float = field(init=False, default=0.0)
    _positions: dict = field(init=False, default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)

        if n == 0:
            step = 0.0
        else:
            step = (stop - start) / max(1.0, n - self.padding + self.padding * 2)
        # center the bands inside the range
        start += (stop - start - step * (n - self.padding)) * 0.5
        positions = [start + step * i for i in range(n)]
        if reverse:
            positions.reverse()

        object.__setattr__(self, "step", step)
        object.__setattr__(self, "bandwidth", step * (1 - self.padding))
        object.__setattr__(self, "_positions", dict(zip(self.domain, positions)))

    @classmethod
    def from_keys(cls, keys: Sequence[Hashable], rng: tuple[float, float], padding: float = 0.2) -> BandScale:
        return cls(domain=tuple(sorted(set(keys))), range=rng, padding=padding)

    def __call__(self, key: Hashable) -> float:
        if not self.domain:
            return _midpoint(self.range)
        return self._positions[key]

    def center(self, key: Hashable) -> float:
        return self(key) + self.bandwidth / 2.0


@dataclass(frozen=True)
class MercatorProjection:
    """Cylindrical (Mercator) projection of lon/lat degrees to pixels."""
    scale: float
    translate: tuple[float, float]

    @classmethod
    def fitted(cls, width: float, height: float) -> MercatorProjection:
        """Scale follows the surface width; the map is centred on the surface."""
        return cls(scale=width / 640.0 * 100.0, translate=(width / 2.0, height / 2.0))

    def __call__(self, lon: float, lat: float) -> tuple[float, float]:
        x, y = self.project(np.array([[lon, lat]], dtype=np.float64))[0]
        return float(x), float(y)

    def project(self, lonlat: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Project an (N, 2) array of (lon, lat) degrees to (N, 2) pixel coordinates."""
        arr = np.asarray(lonlat, dtype=np.float64).reshape(-1, 2)
        lam = np.radians(arr[:, 0])
        phi = np.radians(np.clip(arr[:, 1], -MAX_MERCATOR_LAT, MAX_MERCATOR_LAT))
        tx, ty = self.translate
        x = self.scale * lam + tx
        y = ty - self.scale * np.log(np.tan(np.pi / 4.0 + phi / 2.0))
        return np.c_[x, y]
