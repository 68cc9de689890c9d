from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from typing import Dict, Iterator, Tuple

from .errors import InvalidInputError

# Display names, in the order of the day.
PRAYER_NAMES: Tuple[str, ...] = ("Fajr", "Shuruq", "Dhuhr", "Asr", "Sunset", "Maghrib", "Isha")


@dataclass(frozen=True)
class Location:
    lat_deg: float    # (-90, 90), north positive
    lon_deg: float    # [-180, 180], east positive

    def __post_init__(self) -> None:
        for name in ("lat_deg", "lon_deg"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Real) or not math.isfinite(v):
                raise InvalidInputError(f"{name} must be a finite number, got {v!r}")
        if not -90.0 < self.lat_deg < 90.0:
            raise InvalidInputError(f"latitude must be in (-90, 90), got {self.lat_deg}")
        if not -180.0 <= self.lon_deg <= 180.0:
            raise InvalidInputError(f"longitude must be in [-180, 180], got {self.lon_deg}")


@dataclass(frozen=True)
class SolarParameters:
    declination_rad: float
    equation_of_time_hours: float    # (-12, 12]

    @property
    def declination_deg(self) -> float:
        return math.degrees(self.declination_rad)

    @property
    def equation_of_time_minutes(self) -> float:
        return 60.0 * self.equation_of_time_hours


@dataclass(frozen=True)
class PrayerTimes:
    """The seven daily times, decimal hours UTC in [0,24)."""
    fajr: float
    shuruq: float
    dhuhr: float
    asr: float
    sunset: float
    maghrib: float
    isha: float

    def __iter__(self) -> Iterator[Tuple[str, float]]:
        for name, f in zip(PRAYER_NAMES, fields(self)):
            yield name, getattr(self, f.name)

    def __getitem__(self, name: str) -> float:
        if name not in PRAYER_NAMES:
            raise KeyError(f"Unknown prayer '{name}'. Available: {list(PRAYER_NAMES)}")
        return getattr(self, name.lower())

    def as_dict(self) -> Dict[str, float]:
        return dict(self)
