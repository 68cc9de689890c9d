from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace

from .errors import InvalidInputError

FAJR_ANGLE_DEG = 15.0
ISHA_ANGLE_DEG = 15.0

# Apparent sunrise/sunset: 34' refraction + 16' solar semi-diameter.
SUNRISE_ALTITUDE_DEG = -0.833

# Provisional: Maghrib as a fixed delay after sunset.
MAGHRIB_OFFSET_MINUTES = 3.0

# Later (Hanafi) Asr: shadow length = 2 x object height + noon shadow.
ASR_SHADOW_FACTOR = 2.0


@dataclass(frozen=True)
class MethodParams:
    """
    Tunables of the calculation method.

    fajr_angle_deg / isha_angle_deg are depressions below the horizon
    (positive numbers); sunrise_altitude_deg is a signed altitude.
    """
    fajr_angle_deg: float = FAJR_ANGLE_DEG
    isha_angle_deg: float = ISHA_ANGLE_DEG
    sunrise_altitude_deg: float = SUNRISE_ALTITUDE_DEG
    maghrib_offset_minutes: float = MAGHRIB_OFFSET_MINUTES

    def __post_init__(self) -> None:
        for name in ("fajr_angle_deg", "isha_angle_deg", "sunrise_altitude_deg", "maghrib_offset_minutes"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Real) or not math.isfinite(v):
                raise InvalidInputError(f"{name} must be a finite number, got {v!r}")
        for name in ("fajr_angle_deg", "isha_angle_deg"):
            if not 0.0 < getattr(self, name) < 90.0:
                raise InvalidInputError(f"{name} must be in (0, 90), got {getattr(self, name)}")
        if not -90.0 < self.sunrise_altitude_deg < 90.0:
            raise InvalidInputError(f"sunrise_altitude_deg must be in (-90, 90), got {self.sunrise_altitude_deg}")
        if not 0.0 <= self.maghrib_offset_minutes <= 60.0:
            raise InvalidInputError(f"maghrib_offset_minutes must be in [0, 60], got {self.maghrib_offset_minutes}")

    def tweak(self, **changes) -> "MethodParams":
        """Return a copy with some fields replaced (validated again)."""
        return replace(self, **changes)


DEFAULT_PARAMS = MethodParams()
