"""
miqat.reference.prayer
----------------------
Assembles the seven daily times from one Julian Date.

All times come from a single SolarParameters value, so they are mutually
consistent for the date. Results are UTC decimal hours in [0,24).
"""

from __future__ import annotations

import math
from typing import Dict

from ..core.errors import UndefinedHourAngleError
from ..core.params import DEFAULT_PARAMS, MethodParams
from ..core.time import frac24
from ..core.types import Location, PrayerTimes, SolarParameters
from .solar import asr_altitude_deg, hour_angle, solar_parameters


def solar_noon_hours(sp: SolarParameters, lon_deg: float) -> float:
    """Transit time (UTC hours) at longitude lon_deg (east positive)."""
    return frac24(12.0 - sp.equation_of_time_hours - lon_deg / 15.0)


def _hour_angle_hours(event: str, lat_deg: float, sp: SolarParameters, altitude_deg: float) -> float:
    try:
        H = hour_angle(lat_deg, sp.declination_rad, altitude_deg)
    except UndefinedHourAngleError as e:
        raise e.for_event(event) from None
    return math.degrees(H) / 15.0


def hour_angles_hours(sp: SolarParameters, loc: Location, params: MethodParams = DEFAULT_PARAMS) -> Dict[str, float]:
    """Half-arcs (hours either side of noon) for each altitude threshold."""
    lat = loc.lat_deg
    return {
        "fajr": _hour_angle_hours("Fajr", lat, sp, -params.fajr_angle_deg),
        "sunrise": _hour_angle_hours("Shuruq/Sunset", lat, sp, params.sunrise_altitude_deg),
        "asr": _hour_angle_hours("Asr", lat, sp, asr_altitude_deg(lat, sp.declination_rad)),
        "isha": _hour_angle_hours("Isha", lat, sp, -params.isha_angle_deg),
    }


def prayer_times_from_solar(sp: SolarParameters, loc: Location, params: MethodParams = DEFAULT_PARAMS) -> PrayerTimes:
    noon = solar_noon_hours(sp, loc.lon_deg)
    ha = hour_angles_hours(sp, loc, params)

    sunset = frac24(noon + ha["sunrise"])
    return PrayerTimes(
        fajr=frac24(noon - ha["fajr"]),
        shuruq=frac24(noon - ha["sunrise"]),
        dhuhr=noon,
        asr=frac24(noon + ha["asr"]),
        sunset=sunset,
        maghrib=frac24(sunset + params.maghrib_offset_minutes / 60.0),
        isha=frac24(noon + ha["isha"]),
    )


def prayer_times_from_jd(jd: float, loc: Location, params: MethodParams = DEFAULT_PARAMS) -> PrayerTimes:
    return prayer_times_from_solar(solar_parameters(jd), loc, params)
