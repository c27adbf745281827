"""
Time Conversions Comparison Script

Compares libepoch against pyswisseph (calendar <-> Julian Date) and
skyfield (UTC -> TT, GMST) across a set of historical and modern dates.
"""

import math
import sys

import swisseph as swe
import libepoch as pyepoch
from libepoch import state
from comparison_utils import (
    angular_diff,
    decimal_hour,
    format_value,
    format_diff,
    format_status,
    TestStatistics,
    print_header,
    parse_args,
    ALL_SUBJECTS,
    STANDARD_SUBJECTS,
    Tolerances,
)

# ============================================================================
# COMPARISON FUNCTIONS
# ============================================================================


def compare_julday(name, year, month, day, hour, minute, second, verbose=False):
    """
    Compare calendar -> Julian Date.

    Returns:
        (passed, diff, error_occurred)
    """
    try:
        jd_swe = swe.julday(year, month, day, decimal_hour(hour, minute, second))
        jd_py = pyepoch.calendar_to_julian(year, month, day, hour, minute, second)
    except Exception as e:
        print(f"[{name}] julday: ERROR {e}")
        return False, 0.0, True

    diff = abs(jd_swe - jd_py)
    passed = diff < Tolerances.JULIAN_DAY

    if verbose:
        print(
            f"[{name:<18}] julday  SWE={format_value(jd_swe)} PY={format_value(jd_py)} "
            f"Diff={format_diff(diff)} {format_status(passed)}"
        )
    return passed, diff, False


def compare_revjul(name, year, month, day, hour, minute, second, verbose=False):
    """
    Compare Julian Date -> calendar.

    Returns:
        (passed, diff_hours, error_occurred)
    """
    jd = swe.julday(year, month, day, decimal_hour(hour, minute, second))
    try:
        y_swe, m_swe, d_swe, h_swe = swe.revjul(jd)
        cal = pyepoch.julian_to_calendar(jd)
    except Exception as e:
        print(f"[{name}] revjul: ERROR {e}")
        return False, 0.0, True

    h_py = decimal_hour(cal.hour, cal.minute, cal.second)
    diff = abs(h_swe - h_py)
    passed = (y_swe, m_swe, d_swe) == (cal.year, cal.month, cal.day) and diff < Tolerances.HOUR

    if verbose:
        print(
            f"[{name:<18}] revjul  SWE={y_swe:5d}-{m_swe:02d}-{d_swe:02d} {h_swe:10.6f}h "
            f"PY={cal.year:5d}-{cal.month:02d}-{cal.day:02d} {h_py:10.6f}h "
            f"Diff={format_diff(diff)} {format_status(passed)}"
        )
    return passed, diff, False


def compare_tt(name, year, month, day, hour, minute, second, verbose=False):
    """
    Compare UTC -> TT with skyfield, calibrating TAI - UTC for the date.

    Returns:
        (passed, diff, error_occurred)
    """
    ts = state.get_timescale()
    try:
        jd_utc = pyepoch.calendar_to_julian(year, month, day, hour, minute, second)
        state.calibrate_tai_minus_utc(jd_utc)
        jd_py = pyepoch.julian_utc_to_tt(jd_utc)
        jd_sky = ts.utc(year, month, day, hour, minute, second).tt
    except Exception as e:
        print(f"[{name}] tt: ERROR {e}")
        return False, 0.0, True
    finally:
        state.reset()

    diff = abs(jd_sky - jd_py)
    passed = diff < Tolerances.TERRESTRIAL_TIME

    if verbose:
        print(
            f"[{name:<18}] tt      SKY={format_value(jd_sky)} PY={format_value(jd_py)} "
            f"Diff={format_diff(diff)} {format_status(passed)}"
        )
    return passed, diff, False


def compare_gmst(name, year, month, day, hour, minute, second, verbose=False):
    """
    Compare GMST with skyfield for the same UT instant.

    Returns:
        (passed, diff_degrees, error_occurred)
    """
    ts = state.get_timescale()
    try:
        jd_utc = pyepoch.calendar_to_julian(year, month, day, hour, minute, second)
        gmst_py = math.degrees(pyepoch.Epoch.from_julian_utc(jd_utc).gmst())
        gmst_sky = ts.ut1_jd(jd_utc).gmst * 15.0
    except Exception as e:
        print(f"[{name}] gmst: ERROR {e}")
        return False, 0.0, True

    diff = angular_diff(gmst_sky, gmst_py)
    passed = diff < Tolerances.GMST

    if verbose:
        print(
            f"[{name:<18}] gmst    SKY={format_value(gmst_sky, 6, 12)}° "
            f"PY={format_value(gmst_py, 6, 12)}° Diff={format_diff(diff)}° {format_status(passed)}"
        )
    return passed, diff, False


# ============================================================================
# MAIN COMPARISON RUNNER
# ============================================================================


def run_all_comparisons(verbose: bool = False) -> tuple:
    """
    Run all time conversion comparison tests.

    Returns:
        (passed_count, total_count)
    """
    print_header("TIME CONVERSIONS COMPARISON")

    stats = TestStatistics()

    print("\n--- Calendar <-> Julian Date (pyswisseph) ---\n")
    for subject in ALL_SUBJECTS:
        stats.add_result(*compare_julday(*subject, verbose=verbose))
        stats.add_result(*compare_revjul(*subject, verbose=verbose))

    # Leap-second table starts in 1972
    print("\n--- UTC -> TT and GMST (skyfield) ---\n")
    for subject in STANDARD_SUBJECTS:
        if subject[1] >= 1972:
            stats.add_result(*compare_tt(*subject, verbose=verbose))
        stats.add_result(*compare_gmst(*subject, verbose=verbose))

    stats.print_summary("TIME CONVERSIONS COMPARISON SUMMARY")

    return stats.passed, stats.total


# ============================================================================
# COMMAND LINE INTERFACE
# ============================================================================


def print_help():
    """Print usage help."""
    print("Usage: python compare_time.py [OPTIONS]")
    print()
    print("Options:")
    print("  -v, --verbose           Show detailed output for each test")
    print("  -h, --help              Show this help message")
    print()


def main():
    """Main entry point."""
    args = parse_args(sys.argv)

    if args["help"]:
        print_help()
        sys.exit(0)

    passed, total = run_all_comparisons(verbose=args["verbose"])

    # Exit with appropriate code
    sys.exit(0 if passed == total else 1)


if __name__ == "__main__":
    main()
