"""
Global state management for libepoch.

This module holds the library's configuration:
- Skyfield data loader and timescale (leap-second table, interop)
- The fixed TAI - UTC offset used for every UTC <-> TT conversion

All state is stored in module-level globals. Setters are meant to be called
once at start-up; concurrent reconfiguration is not synchronized.
"""

import logging
import math
import os
from typing import Optional

import numpy as np
from skyfield.api import Loader
from skyfield.timelib import Timescale

from .constants import (
    SECONDS_TO_DAYS,
    TAI_MINUS_UTC_1972_SECONDS,
    TAI_MINUS_UTC_SECONDS,
    TT_MINUS_TAI_SECONDS,
)

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL STATE VARIABLES
# =============================================================================

_DATA_PATH: Optional[str] = None  # Custom skyfield data directory
_LOADER: Optional[Loader] = None  # Skyfield data loader
_TS: Optional[Timescale] = None  # Timescale object
_TAI_MINUS_UTC: float = float(TAI_MINUS_UTC_SECONDS)  # Leap seconds (s)


def get_loader() -> Loader:
    """
    Get or create the Skyfield data loader.

    Returns:
        Loader: Skyfield Loader instance

    Note:
        Data files are cached in the parent directory of this module unless
        set_data_path() was called.
    """
    global _LOADER
    if _LOADER is None:
        data_dir = _DATA_PATH or os.path.join(os.path.dirname(__file__), "..")
        logger.debug("Creating skyfield loader in %s", data_dir)
        _LOADER = Loader(data_dir, verbose=False)
    return _LOADER


def get_timescale() -> Timescale:
    """
    Get or create the Skyfield timescale object.

    Returns:
        Timescale: Skyfield timescale built from the data files bundled with
        skyfield (no download).
    """
    global _TS
    if _TS is None:
        load = get_loader()
        _TS = load.timescale(builtin=True)
        logger.debug("Loaded builtin skyfield timescale")
    return _TS


def set_data_path(path: Optional[str]) -> None:
    """
    Set the directory used by the skyfield loader.

    Args:
        path: Directory for skyfield data files, or None for the default

    Note:
        Clears the cached loader and timescale.
    """
    global _DATA_PATH, _LOADER, _TS
    _DATA_PATH = path
    _LOADER = None
    _TS = None


def get_tai_minus_utc() -> float:
    """
    Get the fixed TAI - UTC offset in seconds.

    Returns:
        float: Leap second count applied to all UTC <-> TT conversions
    """
    return _TAI_MINUS_UTC


def set_tai_minus_utc(seconds: float) -> None:
    """
    Set the fixed TAI - UTC offset.

    Args:
        seconds: TAI - UTC in seconds (37 since 2017-01-01)

    Raises:
        ValueError: If seconds is not a finite number

    Note:
        The same offset is used for every date. Dates on the other side of
        a leap second are off by the difference.
    """
    global _TAI_MINUS_UTC
    seconds = float(seconds)
    if not math.isfinite(seconds):
        raise ValueError(f"TAI - UTC must be finite, got {seconds}")
    if seconds != _TAI_MINUS_UTC:
        logger.info("TAI - UTC changed from %s s to %s s", _TAI_MINUS_UTC, seconds)
    _TAI_MINUS_UTC = seconds


def get_tt_minus_utc() -> float:
    """
    Get TT - UTC in days.

    Returns:
        float: (32.184 s + TAI - UTC) expressed in days
    """
    return (TT_MINUS_TAI_SECONDS + _TAI_MINUS_UTC) * SECONDS_TO_DAYS


def leap_seconds_at(jd_utc: float) -> float:
    """
    Look up TAI - UTC for a date in skyfield's leap-second table.

    Args:
        jd_utc: Julian Date (UTC)

    Returns:
        float: TAI - UTC in seconds. Dates before the first table entry
        (1972-07-01) return 10 s.

    Note:
        leap_offsets[i] applies from leap_dates[i] onward.
    """
    ts = get_timescale()
    index = np.searchsorted(ts.leap_dates, jd_utc, "right") - 1
    if index < 0:
        return float(TAI_MINUS_UTC_1972_SECONDS)
    return float(ts.leap_offsets[index])


def calibrate_tai_minus_utc(jd_utc: Optional[float] = None) -> float:
    """
    Set the fixed TAI - UTC offset from skyfield's leap-second table.

    Args:
        jd_utc: Julian Date (UTC) to read the table at. Defaults to now.

    Returns:
        float: The new TAI - UTC offset in seconds
    """
    if jd_utc is None:
        jd_utc = get_timescale().now().utc_jd()
    seconds = leap_seconds_at(jd_utc)
    set_tai_minus_utc(seconds)
    return seconds


def reset() -> None:
    """
    Restore the default configuration.

    Use this between unrelated calculation contexts (and in tests).
    """
    global _TAI_MINUS_UTC
    _TAI_MINUS_UTC = float(TAI_MINUS_UTC_SECONDS)
    set_data_path(None)
