"""miqat public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    calculate_prayer_times,
    prayer_times_for_date,
    prayer_times_range,
    month_table,
    explain,
    day_length_hours,
)
from .core.errors import MiqatError, InvalidInputError, UndefinedHourAngleError
from .core.params import MethodParams, DEFAULT_PARAMS, MAGHRIB_OFFSET_MINUTES
from .core.time import format_hours
from .core.types import Location, PrayerTimes, SolarParameters, PRAYER_NAMES

__all__ = [
    "calculate_prayer_times",
    "prayer_times_for_date",
    "prayer_times_range",
    "month_table",
    "explain",
    "day_length_hours",
    "MiqatError",
    "InvalidInputError",
    "UndefinedHourAngleError",
    "MethodParams",
    "DEFAULT_PARAMS",
    "MAGHRIB_OFFSET_MINUTES",
    "format_hours",
    "Location",
    "PrayerTimes",
    "SolarParameters",
    "PRAYER_NAMES",
]
