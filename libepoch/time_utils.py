"""
Time conversion utilities for libepoch.

Implements the astronomical time functions used by Epoch:
- Calendar dates and Julian Dates (Fliegel - Van Flandern / Meeus form)
- Julian Dates and Modified Julian Dates
- UTC and TT (Terrestrial Time), using a fixed TT - UTC offset

All functions are pure arithmetic and accept any float; no calendar
validation is performed. Algorithms follow Meeus "Astronomical Algorithms"
(1998), chapter 7.
"""

import math
from dataclasses import dataclass

from .constants import (
    GREG_CAL,
    GREGORIAN_REFORM_JDN,
    JD_RECIPROCAL_1,
    JD_RECIPROCAL_2,
    JD_RECIPROCAL_3,
    MJD_ZERO,
)
from .state import get_tt_minus_utc
from .units import days_to_hms, hms_to_days


@dataclass(frozen=True)
class CalendarDateTime:
    """
    Calendar date and time of day, as produced by julian_to_calendar().

    Attributes:
        year: Astronomical year (0 = 1 BCE)
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second with fraction (0.0-60.0)
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float


def calendar_to_julian(
    year: float,
    month: float,
    day: float,
    hour: float = 0,
    minute: float = 0,
    second: float = 0.0,
    gregflag: int = GREG_CAL,
) -> float:
    """
    Convert a calendar date and time to a Julian Date.

    Args:
        year: Calendar year (astronomical numbering)
        month: Month (1-12)
        day: Day of month
        hour: Hour of day
        minute: Minute of hour
        second: Second of minute, may be fractional
        gregflag: GREG_CAL (1) for the proleptic Gregorian calendar,
            JUL_CAL (0) for the Julian calendar

    Returns:
        float: Julian Date in the same time scale as the input

    Note:
        January and February are counted as months 13 and 14 of the
        previous year. Out-of-range fields are not rejected, they simply
        shift the result.
        JD 2451545.0 = Jan 1, 2000 12:00 (J2000.0 epoch)
    """
    if month < 3:
        year -= 1
        month += 12

    if gregflag == GREG_CAL:
        a = math.floor(year * 0.01)
        b = 2 - a + math.floor(a * 0.25)
    else:
        b = 0

    jd = (
        b
        + math.floor(365.25 * year)
        + math.floor(30.6001 * (month + 1))
        + day
        + 1720994.5
    )
    return jd + hms_to_days(hour, minute, second)


def julian_to_calendar(jd: float) -> CalendarDateTime:
    """
    Convert a Julian Date to a calendar date and time.

    Args:
        jd: Julian Date

    Returns:
        CalendarDateTime: Date and time in the same time scale as the input

    Note:
        Day numbers up to 2299160 (Oct 4, 1582) are decoded in the Julian
        calendar, later ones in the Gregorian calendar.
    """
    jd1 = jd + 0.5
    i = math.floor(jd1)
    f = jd1 - i

    b = i
    if i > GREGORIAN_REFORM_JDN:
        a = math.floor((i - 1867216.25) * JD_RECIPROCAL_1)
        b = i + 1 + a - math.floor(a * 0.25)

    c = b + 1524
    d = math.floor((c - 122.1) * JD_RECIPROCAL_2)
    e = math.floor(365.25 * d)
    g = math.floor((c - e) * JD_RECIPROCAL_3)
    day = c - e + f - math.floor(30.6001 * g)

    # g and month are integers; compare against half-integers
    month = g - 1
    if g > 13.5:
        month -= 12
    year = d - 4716
    if month < 2.5:
        year += 1

    day_int = math.floor(day)
    time = days_to_hms(day - day_int)
    return CalendarDateTime(
        year=year,
        month=month,
        day=day_int,
        hour=time.hours,
        minute=time.minutes,
        second=time.seconds,
    )


def julian_to_mjd(jd: float) -> float:
    """Convert a Julian Date to a Modified Julian Date."""
    return jd - MJD_ZERO


def mjd_to_julian(mjd: float) -> float:
    """Convert a Modified Julian Date to a Julian Date."""
    return mjd + MJD_ZERO


def julian_utc_to_tt(jd: float) -> float:
    """
    Convert a UTC Julian Date to a Terrestrial Time Julian Date.

    Args:
        jd: Julian Date (UTC)

    Returns:
        float: Julian Date (TT)

    Note:
        Adds the fixed TT - UTC offset from state.get_tt_minus_utc()
        (69.184 s by default). Leap seconds are not looked up per date.
    """
    return jd + get_tt_minus_utc()


def julian_tt_to_utc(jd: float) -> float:
    """
    Convert a Terrestrial Time Julian Date to a UTC Julian Date.

    Args:
        jd: Julian Date (TT)

    Returns:
        float: Julian Date (UTC)
    """
    return jd - get_tt_minus_utc()
