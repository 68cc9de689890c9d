from __future__ import annotations

import calendar
import logging
import math
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple

from .core.errors import InvalidInputError, UndefinedHourAngleError
from .core.params import DEFAULT_PARAMS, MethodParams
from .core.time import DateLike, as_date, julian_date, to_jdn
from .core.types import Location, PrayerTimes
from .reference.prayer import hour_angles_hours, prayer_times_from_solar, solar_noon_hours
from .reference.solar import asr_altitude_deg, solar_parameters

logger = logging.getLogger(__name__)

DayRow = Tuple[date, Optional[PrayerTimes]]


def prayer_times_for_date(d: date, loc: Location, *, params: MethodParams = DEFAULT_PARAMS) -> PrayerTimes:
    """Prayer times (UTC hours) for civil date d at loc."""
    jd = julian_date(d, lon_deg=loc.lon_deg)
    sp = solar_parameters(jd)
    logger.debug(
        "%s at (%.4f, %.4f): jd=%.5f decl=%.4f deg eot=%.3f min",
        d, loc.lat_deg, loc.lon_deg, jd, sp.declination_deg, sp.equation_of_time_minutes,
    )
    return prayer_times_from_solar(sp, loc, params)


def calculate_prayer_times(
    latitude: float,
    longitude: float,
    date: DateLike,
    *,
    params: MethodParams = DEFAULT_PARAMS,
) -> PrayerTimes:
    """
    Prayer times for a latitude/longitude (degrees, east positive) and a
    'YYYY-MM-DD' date (or datetime.date).

    Returns a PrayerTimes record in UTC decimal hours; use .as_dict() for the
    {'Fajr': ..., 'Isha': ...} mapping.

    Raises InvalidInputError before computing anything if the inputs are bad,
    and UndefinedHourAngleError if the Sun never reaches one of the
    thresholds on that date (high latitudes).
    """
    loc = Location(latitude, longitude)
    return prayer_times_for_date(as_date(date), loc, params=params)


def prayer_times_range(
    start: DateLike,
    end: DateLike,
    loc: Location,
    *,
    params: MethodParams = DEFAULT_PARAMS,
    skip_undefined: bool = False,
) -> List[DayRow]:
    """
    Prayer times for every date in [start, end].

    Days are independent. With skip_undefined=True a day on which a threshold
    is never reached yields None instead of raising.
    """
    d0 = as_date(start)
    d1 = as_date(end)
    if d1 < d0:
        raise InvalidInputError(f"end date {d1} is before start date {d0}")

    rows: List[DayRow] = []
    for i in range((d1 - d0).days + 1):
        d = d0 + timedelta(days=i)
        try:
            rows.append((d, prayer_times_for_date(d, loc, params=params)))
        except UndefinedHourAngleError as e:
            if not skip_undefined:
                raise
            logger.debug("%s: %s", d, e)
            rows.append((d, None))
    return rows


def month_table(year: int, month: int, loc: Location, *, params: MethodParams = DEFAULT_PARAMS) -> List[DayRow]:
    """One Gregorian month of prayer times; polar days are None."""
    if not 1 <= year <= 9999:
        raise InvalidInputError(f"year must be 1..9999, got {year}")
    if not 1 <= month <= 12:
        raise InvalidInputError(f"month must be 1..12, got {month}")
    last = calendar.monthrange(year, month)[1]
    return prayer_times_range(date(year, month, 1), date(year, month, last), loc, params=params, skip_undefined=True)


def explain(
    latitude: float,
    longitude: float,
    date: DateLike,
    *,
    params: MethodParams = DEFAULT_PARAMS,
) -> Dict[str, Any]:
    """Intermediate quantities of the calculation, for debugging."""
    loc = Location(latitude, longitude)
    d = as_date(date)
    jd = julian_date(d, lon_deg=loc.lon_deg)
    sp = solar_parameters(jd)

    out: Dict[str, Any] = {
        "date": d,
        "location": loc,
        "params": params,
        "jdn": to_jdn(d),
        "jd": jd,
        "declination_deg": sp.declination_deg,
        "equation_of_time_minutes": sp.equation_of_time_minutes,
        "noon_utc_hours": solar_noon_hours(sp, loc.lon_deg),
        "asr_altitude_deg": asr_altitude_deg(loc.lat_deg, sp.declination_rad),
    }
    try:
        out["hour_angles_hours"] = hour_angles_hours(sp, loc, params)
        out["times"] = prayer_times_from_solar(sp, loc, params)
    except UndefinedHourAngleError as e:
        out["error"] = str(e)
    return out


def day_length_hours(times: PrayerTimes) -> float:
    """Sunrise to sunset span, in hours."""
    return math.fmod(times.sunset - times.shuruq + 24.0, 24.0)
