# reference/solar.py

from __future__ import annotations

import math
from math import fmod

from ..core.errors import UndefinedHourAngleError
from ..core.params import ASR_SHADOW_FACTOR
from ..core.types import SolarParameters


J2000 = 2451545.0  # JD of J2000.0


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # fmod(-1e-14, 360) + 360 rounds to 360.0
    if y >= 360.0:
        y = 0.0
    return y


def fold_hours(h: float) -> float:
    """
    Fold a signed hour offset into (-12, 12].

    For differences of two clock positions (such as the equation of time),
    not for times of day: a small negative offset must stay negative.
    """
    while h > 12.0:
        h -= 24.0
    while h <= -12.0:
        h += 24.0
    return h


# ------------------------------------------------------------
# Solar position (low precision, a few arcminutes 1950-2050)
# ------------------------------------------------------------

def solar_parameters(jd: float) -> SolarParameters:
    """
    Declination and equation of time at Julian Date jd.

    Every positional angle is wrapped to [0,360) before use; the equation of
    time is the difference of two such positions and is folded, not wrapped.
    """
    D = jd - J2000

    # Mean anomaly and mean longitude of the Sun
    g_deg = wrap_deg(357.529 + 0.98560028 * D)
    q_deg = wrap_deg(280.459 + 0.98564736 * D)
    g_rad = math.radians(g_deg)

    # Ecliptic longitude (equation of centre, two terms)
    L_deg = wrap_deg(q_deg + 1.915 * math.sin(g_rad) + 0.020 * math.sin(2.0 * g_rad))
    L_rad = math.radians(L_deg)

    # Obliquity of the ecliptic
    eps_rad = math.radians(23.439 - 0.00000036 * D)

    # Right ascension; atan2 keeps the quadrant
    y = math.cos(eps_rad) * math.sin(L_rad)
    x = math.cos(L_rad)
    ra_hours = wrap_deg(math.degrees(math.atan2(y, x))) / 15.0

    declination = math.asin(math.sin(eps_rad) * math.sin(L_rad))
    eot_hours = fold_hours(q_deg / 15.0 - ra_hours)

    return SolarParameters(declination_rad=declination, equation_of_time_hours=eot_hours)


# ------------------------------------------------------------
# Hour angle
# ------------------------------------------------------------

def hour_angle(lat_deg: float, declination_rad: float, altitude_deg: float) -> float:
    """
    Hour angle (radians, [0, pi]) at which the Sun stands at altitude_deg.

      cos H = (sin h - sin phi sin delta) / (cos phi cos delta)

    Raises UndefinedHourAngleError when |cos H| > 1, i.e. the Sun never
    reaches that altitude on this date.
    """
    lat_rad = math.radians(lat_deg)
    h_rad = math.radians(altitude_deg)

    cos_H = (math.sin(h_rad) - math.sin(lat_rad) * math.sin(declination_rad)) / (
        math.cos(lat_rad) * math.cos(declination_rad)
    )
    if not -1.0 <= cos_H <= 1.0:
        raise UndefinedHourAngleError(lat_deg, declination_rad, altitude_deg, cos_H)
    return math.acos(cos_H)


def asr_altitude_deg(lat_deg: float, declination_rad: float) -> float:
    """
    Solar altitude (degrees) when an object's shadow equals its noon shadow
    plus ASR_SHADOW_FACTOR times its height.
    """
    noon_zenith = abs(math.radians(lat_deg) - declination_rad)
    return math.degrees(math.atan(1.0 / (ASR_SHADOW_FACTOR + math.tan(noon_zenith))))
