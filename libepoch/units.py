"""
Unit conversions between seconds, minutes, hours and days.

Every function is a linear scaling by a constant from constants.py.
No validation is done: negative and fractional values are accepted.
"""

import math
from dataclasses import dataclass

from .constants import (
    DAYS_TO_HOURS,
    HOURS_TO_DAYS,
    HOURS_TO_MINUTES,
    MILLISECONDS_TO_SECONDS,
    MINUTES_TO_HOURS,
    MINUTES_TO_SECONDS,
    SECONDS_TO_MILLISECONDS,
    SECONDS_TO_MINUTES,
)


@dataclass(frozen=True)
class HMS:
    """
    Hours, minutes and seconds decomposed from a day fraction.

    Attributes:
        hours: Whole hours (floored, may be negative)
        minutes: Whole minutes of the remaining hour (0-59)
        seconds: Remaining seconds, fractional (0.0-60.0)
    """

    hours: int
    minutes: int
    seconds: float


def seconds_to_minutes(seconds: float) -> float:
    return seconds * SECONDS_TO_MINUTES


def minutes_to_seconds(minutes: float) -> float:
    return minutes * MINUTES_TO_SECONDS


def minutes_to_hours(minutes: float) -> float:
    return minutes * MINUTES_TO_HOURS


def hours_to_minutes(hours: float) -> float:
    return hours * HOURS_TO_MINUTES


def hours_to_days(hours: float) -> float:
    return hours * HOURS_TO_DAYS


def days_to_hours(days: float) -> float:
    return days * DAYS_TO_HOURS


def seconds_to_milliseconds(seconds: float) -> float:
    return seconds * SECONDS_TO_MILLISECONDS


def milliseconds_to_seconds(milliseconds: float) -> float:
    return milliseconds * MILLISECONDS_TO_SECONDS


# Composite conversions


def days_to_minutes(days: float) -> float:
    return hours_to_minutes(days_to_hours(days))


def minutes_to_days(minutes: float) -> float:
    return hours_to_days(minutes_to_hours(minutes))


def days_to_seconds(days: float) -> float:
    return minutes_to_seconds(days_to_minutes(days))


def seconds_to_days(seconds: float) -> float:
    return minutes_to_days(seconds_to_minutes(seconds))


def hours_to_seconds(hours: float) -> float:
    return minutes_to_seconds(hours_to_minutes(hours))


def seconds_to_hours(seconds: float) -> float:
    return minutes_to_hours(seconds_to_minutes(seconds))


def hms_to_days(hours: float, minutes: float, seconds: float) -> float:
    """
    Convert hours, minutes and seconds to a (fractional) number of days.

    Args:
        hours: Hours
        minutes: Minutes (not limited to 0-59)
        seconds: Seconds (not limited to 0-59)

    Returns:
        float: Equivalent number of days
    """
    return hours_to_days(hours) + minutes_to_days(minutes) + seconds_to_days(seconds)


def days_to_hms(days: float) -> HMS:
    """
    Split a number of days into whole hours, whole minutes and seconds.

    Hours and minutes are floored toward negative infinity, so the minutes
    and seconds of the result are never negative.

    Args:
        days: Number of days (usually the fractional part of a Julian Date)

    Returns:
        HMS: (hours, minutes, seconds)

    Examples:
        >>> days_to_hms(0.75)
        HMS(hours=18, minutes=0, seconds=0.0)
        >>> days_to_hms(-0.5)
        HMS(hours=-12, minutes=0, seconds=0.0)
    """
    complete_hours = days_to_hours(days)
    hours = math.floor(complete_hours)
    complete_minutes = hours_to_minutes(complete_hours - hours)
    minutes = math.floor(complete_minutes)
    seconds = minutes_to_seconds(complete_minutes - minutes)
    return HMS(hours, minutes, seconds)
