"""
Epoch value object for libepoch.

An Epoch is a single instant stored as a Julian Date in Terrestrial Time.
It is created from an ISO-8601 UTC string, from a raw Julian TT value, or
from datetime / skyfield Time objects, and provides:
- Formatting back to YYYY-MM-DDTHH:MM:SS.sssZ (UTC)
- Day arithmetic
- Julian centuries and days past J2000.0
- Greenwich Mean Sidereal Time

Epochs are immutable: plus_days() and copy() return new instances.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from skyfield.timelib import Time, Timescale

from .constants import (
    EARTH_ROTATION_DEG_PER_DAY,
    GMST_AT_0H_J2000,
    GMST_CENTURY_QUADRATIC,
    GMST_CENTURY_RATE,
    J2000,
    JD_RECIPROCAL_4,
    MJD_ZERO,
    SECONDS_TO_DAYS,
)
from .errors import EpochFormatError
from .state import get_timescale
from .time_utils import (
    CalendarDateTime,
    calendar_to_julian,
    julian_to_calendar,
    julian_to_mjd,
    julian_tt_to_utc,
    julian_utc_to_tt,
)
from .utils import normalize_degrees, normalize_radians

_HALF_MILLISECOND = 0.0005 * SECONDS_TO_DAYS


def _split_fields(text: str, separator: str, what: str) -> List[str]:
    fields = text.split(separator)
    if len(fields) != 3:
        raise EpochFormatError(
            f"Expected 3 {what} fields separated by {separator!r}, got {text!r}"
        )
    return fields


def parse_iso(text: str) -> Tuple[float, float, float, float, float, float]:
    """
    Split a YYYY-MM-DDTHH:MM:SS[.sss]Z string into its six numeric fields.

    Field widths are not enforced and values are not range-checked;
    only the separators matter.

    Args:
        text: Date/time string in UTC

    Returns:
        tuple: (year, month, day, hour, minute, second) as floats

    Raises:
        EpochFormatError: If the separators are wrong or a field is not a number
    """
    parts = text.split("T")
    if len(parts) != 2:
        raise EpochFormatError(f"Expected exactly one 'T' separator, got {text!r}")

    date_fields = _split_fields(parts[0], "-", "date")
    time_fields = _split_fields(parts[1], ":", "time")
    time_fields[2] = time_fields[2].replace("Z", "")

    try:
        year, month, day = (float(v) for v in date_fields)
        hour, minute, second = (float(v) for v in time_fields)
    except ValueError as e:
        raise EpochFormatError(f"Non-numeric field in {text!r}") from e
    return year, month, day, hour, minute, second


@dataclass(frozen=True, order=True)
class Epoch:
    """
    An instant in time stored as a Julian Date in Terrestrial Time (TT).

    Attributes:
        julian_tt: Julian Date (TT)

    Examples:
        >>> epoch = Epoch.from_iso("2018-08-08T08:08:08.888Z")
        >>> str(epoch.plus_days(1))
        '2018-08-09T08:08:08.888Z'
    """

    julian_tt: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_iso(cls, text: str) -> "Epoch":
        """
        Create an Epoch from a UTC string of the form YYYY-MM-DDTHH:MM:SS.sssZ.

        Raises:
            EpochFormatError: If the string cannot be split into six numbers
        """
        jd_utc = calendar_to_julian(*parse_iso(text))
        return cls(julian_utc_to_tt(jd_utc))

    @classmethod
    def from_julian_tt(cls, julian_tt: float) -> "Epoch":
        """Create an Epoch from a Julian Date (TT). No validation."""
        return cls(julian_tt)

    @classmethod
    def from_julian_utc(cls, julian_utc: float) -> "Epoch":
        """Create an Epoch from a Julian Date (UTC)."""
        return cls(julian_utc_to_tt(julian_utc))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Epoch":
        """
        Create an Epoch from a datetime.

        Naive datetimes are taken as UTC; aware ones are converted to UTC.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(timezone.utc)
        jd_utc = calendar_to_julian(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second + dt.microsecond * 1e-6,
        )
        return cls(julian_utc_to_tt(jd_utc))

    @classmethod
    def from_skyfield(cls, t: Time) -> "Epoch":
        """Create an Epoch from a scalar skyfield Time."""
        return cls(float(t.tt))

    def copy(self) -> "Epoch":
        return Epoch.from_julian_tt(self.julian_tt)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    @property
    def julian_utc(self) -> float:
        """Julian Date (UTC)."""
        return julian_tt_to_utc(self.julian_tt)

    @property
    def mjd(self) -> float:
        """Modified Julian Date (UTC)."""
        return julian_to_mjd(self.julian_utc)

    def _calendar_ms(self) -> Tuple[CalendarDateTime, int]:
        # Nearest millisecond: shift by half, then truncate
        cal = julian_to_calendar(self.julian_utc + _HALF_MILLISECOND)
        return cal, math.floor(cal.second * 1000)

    def to_iso(self) -> str:
        """
        Format as a UTC string, rounded to the millisecond.

        Returns:
            str: YYYY-MM-DDTHH:MM:SS.sssZ

        Note:
            Only years 0-9999 parse back with from_iso(). Negative years
            format as "-005-..." and the extra '-' is rejected as a
            malformed date.
        """
        cal, ms = self._calendar_ms()
        return (
            f"{cal.year:04d}-{cal.month:02d}-{cal.day:02d}"
            f"T{cal.hour:02d}:{cal.minute:02d}:{ms / 1000:06.3f}Z"
        )

    def to_datetime(self) -> datetime:
        """
        Convert to an aware UTC datetime, rounded to the millisecond.

        Raises:
            ValueError: If the year is outside datetime's 1-9999 range
        """
        cal, ms = self._calendar_ms()
        return datetime(
            cal.year,
            cal.month,
            cal.day,
            cal.hour,
            cal.minute,
            ms // 1000,
            (ms % 1000) * 1000,
            tzinfo=timezone.utc,
        )

    def to_skyfield(self, ts: Optional[Timescale] = None) -> Time:
        """
        Convert to a skyfield Time on the TT scale.

        Args:
            ts: Timescale to use (defaults to state.get_timescale())
        """
        if ts is None:
            ts = get_timescale()
        return ts.tt_jd(self.julian_tt)

    def __str__(self) -> str:
        return self.to_iso()

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_days(self, days: float) -> "Epoch":
        """Return a new Epoch `days` later (negative values go back)."""
        return Epoch.from_julian_tt(self.julian_tt + days)

    def days_past_j2000(self) -> float:
        return self.julian_tt - J2000

    def julian_centuries_past_j2000(self) -> float:
        """
        Number of Julian centuries (36525 days) between J2000.0 and this epoch.

        Examples:
            >>> Epoch.from_julian_tt(2451545.0).julian_centuries_past_j2000()
            0.0
        """
        return (self.julian_tt - J2000) * JD_RECIPROCAL_4

    def gmst(self) -> float:
        """
        Greenwich Mean Sidereal Time.

        Returns:
            float: GMST in radians, in [0, 2*pi)

        Algorithm:
            1. Split the UTC Modified Julian Date into 0h and day fraction
            2. T = Julian centuries of 0h UT since J2000.0
            3. GMST = 100.4606184 + 36000.77004 T + 0.000387933 T^2
                      + 360.98564724 * fraction   (degrees)
            4. Reduce to [0, 360) and convert to radians

        References:
            IAU 1982 GMST expression (Meeus ch. 12, Vallado alg. 15)
        """
        mjd = self.mjd
        mjd_0h = math.floor(mjd)
        fraction = mjd - mjd_0h
        T = (mjd_0h + MJD_ZERO - J2000) * JD_RECIPROCAL_4

        gmst_deg = (
            GMST_AT_0H_J2000
            + GMST_CENTURY_RATE * T
            + GMST_CENTURY_QUADRATIC * T * T
            + EARTH_ROTATION_DEG_PER_DAY * fraction
        )
        return normalize_radians(math.radians(normalize_degrees(gmst_deg)))
