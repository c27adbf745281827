"""
Constants for libepoch.

Unit conversion factors, calendar epochs and time scale offsets.
All values are plain module-level numbers; nothing here is mutated at runtime.
"""

# =============================================================================
# UNIT CONVERSION FACTORS
# =============================================================================

DAYS_TO_HOURS = 24
HOURS_TO_MINUTES = 60
MINUTES_TO_SECONDS = 60
SECONDS_TO_MILLISECONDS = 1000
MILLISECONDS_TO_SECONDS = 0.001

SECONDS_TO_MINUTES = 1 / MINUTES_TO_SECONDS
MINUTES_TO_HOURS = 1 / HOURS_TO_MINUTES
HOURS_TO_DAYS = 1 / DAYS_TO_HOURS

DAYS_TO_SECONDS = 86400
DAYS_TO_MILLISECONDS = DAYS_TO_SECONDS * SECONDS_TO_MILLISECONDS
DAYS_TO_MINUTES = 1440
HOURS_TO_SECONDS = 3600
SECONDS_TO_DAYS = 1 / DAYS_TO_SECONDS
SECONDS_TO_HOURS = 1 / HOURS_TO_SECONDS

# =============================================================================
# CALENDAR
# =============================================================================

DAYS_IN_JULIAN_YEAR = 365.25
DAYS_IN_JULIAN_CENTURY = 36525
MJD_ZERO = 2400000.5  # JD of MJD 0.0 (1858-11-17 00:00)
J2000 = 2451545.0  # 2000-01-01 12:00:00 TT

# Last Julian Day Number of the Julian calendar (1582-10-04).
# Day numbers above this are decoded with the Gregorian correction.
GREGORIAN_REFORM_JDN = 2299160

# Calendar flags (pyswisseph numbering)
JUL_CAL = 0
GREG_CAL = 1

JD_RECIPROCAL_1 = 1 / 36524.25
JD_RECIPROCAL_2 = 1 / DAYS_IN_JULIAN_YEAR
JD_RECIPROCAL_3 = 1 / 30.6001
JD_RECIPROCAL_4 = 1 / DAYS_IN_JULIAN_CENTURY

# =============================================================================
# TIME SCALES
# =============================================================================

TT_MINUS_TAI_SECONDS = 32.184
# Leap second count as of 2017-01-01. Not updated automatically,
# see state.calibrate_tai_minus_utc().
TAI_MINUS_UTC_SECONDS = 37
# Offset at the start of the leap-second era (1972-01-01)
TAI_MINUS_UTC_1972_SECONDS = 10

TT_MINUS_TAI = TT_MINUS_TAI_SECONDS * SECONDS_TO_DAYS
TAI_MINUS_UTC = TAI_MINUS_UTC_SECONDS * SECONDS_TO_DAYS
TT_MINUS_UTC = TT_MINUS_TAI + TAI_MINUS_UTC

# =============================================================================
# SIDEREAL TIME (IAU 1982, degrees)
# =============================================================================

GMST_AT_0H_J2000 = 100.4606184
GMST_CENTURY_RATE = 36000.77004
GMST_CENTURY_QUADRATIC = 0.000387933
EARTH_ROTATION_DEG_PER_DAY = 360.98564724
