from .constants import *
from .errors import LibEpochError, EpochFormatError
from .units import (
    HMS,
    seconds_to_minutes,
    minutes_to_seconds,
    minutes_to_hours,
    hours_to_minutes,
    hours_to_days,
    days_to_hours,
    seconds_to_milliseconds,
    milliseconds_to_seconds,
    days_to_minutes,
    minutes_to_days,
    days_to_seconds,
    seconds_to_days,
    hours_to_seconds,
    seconds_to_hours,
    hms_to_days,
    days_to_hms,
)
from .time_utils import (
    CalendarDateTime,
    calendar_to_julian,
    julian_to_calendar,
    julian_to_mjd,
    mjd_to_julian,
    julian_utc_to_tt,
    julian_tt_to_utc,
)
from .epoch import Epoch, parse_iso
from .state import (
    get_timescale,
    get_tai_minus_utc,
    set_tai_minus_utc,
    get_tt_minus_utc,
    leap_seconds_at,
    calibrate_tai_minus_utc,
)
from .utils import normalize_degrees, normalize_radians, difdeg2n


# =============================================================================
# PYSWISSEPH-STYLE ALIASES
# =============================================================================

julday = calendar_to_julian
revjul = julian_to_calendar

__version__ = "0.1.0"
__license__ = "LGPL-3.0"

__all__ = [
    # Epoch
    "Epoch",
    "parse_iso",
    # Errors
    "LibEpochError",
    "EpochFormatError",
    # Calendar / Julian Date (both long names and pyswisseph-style aliases)
    "CalendarDateTime",
    "calendar_to_julian",
    "julday",
    "julian_to_calendar",
    "revjul",
    "julian_to_mjd",
    "mjd_to_julian",
    "julian_utc_to_tt",
    "julian_tt_to_utc",
    # Unit conversions
    "HMS",
    "seconds_to_minutes",
    "minutes_to_seconds",
    "minutes_to_hours",
    "hours_to_minutes",
    "hours_to_days",
    "days_to_hours",
    "seconds_to_milliseconds",
    "milliseconds_to_seconds",
    "days_to_minutes",
    "minutes_to_days",
    "days_to_seconds",
    "seconds_to_days",
    "hours_to_seconds",
    "seconds_to_hours",
    "hms_to_days",
    "days_to_hms",
    # Configuration
    "get_timescale",
    "get_tai_minus_utc",
    "set_tai_minus_utc",
    "get_tt_minus_utc",
    "leap_seconds_at",
    "calibrate_tai_minus_utc",
    # Angles
    "normalize_degrees",
    "normalize_radians",
    "difdeg2n",
]
