"""
Shared utilities for comparison scripts.

This module provides common classes, functions, and constants used by the
comparison scripts in the suite.
"""

from typing import List

# ============================================================================
# TOLERANCE THRESHOLDS
# ============================================================================


class Tolerances:
    """Tolerance thresholds for different comparison types."""

    # Julian Date tolerances (days)
    JULIAN_DAY = 1e-9
    TERRESTRIAL_TIME = 1e-8  # ~1 ms

    # Calendar decoding (hours)
    HOUR = 1e-6

    # Sidereal time (degrees)
    GMST = 0.001


# ============================================================================
# TEST SUBJECTS
# ============================================================================

# Format: (Name, Year, Month, Day, Hour, Minute, Second)
STANDARD_SUBJECTS = [
    ("Standard J2000", 2000, 1, 1, 12, 0, 0.0),
    ("Sample", 2018, 8, 8, 8, 8, 8.888),
    ("Apollo 11", 1969, 7, 20, 20, 17, 40.0),
    ("Recent", 2024, 11, 5, 9, 0, 0.0),
    ("Mid-century", 1950, 10, 15, 22, 0, 0.0),
]

HISTORICAL_SUBJECTS = [
    ("Gregorian reform", 1582, 10, 15, 0, 0, 0.0),
    ("Leap century", 1600, 2, 29, 12, 0, 0.0),
    ("Non-leap century", 1900, 3, 1, 0, 0, 0.0),
]

ALL_SUBJECTS = STANDARD_SUBJECTS + HISTORICAL_SUBJECTS

# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def angular_diff(val1: float, val2: float) -> float:
    """Calculate angular difference accounting for 360° wrap."""
    d = abs(val1 - val2) % 360.0
    if d > 180:
        d = 360 - d
    return d


def decimal_hour(hour: float, minute: float, second: float) -> float:
    """Combine hour, minute and second into a decimal hour."""
    return hour + minute / 60.0 + second / 3600.0


def format_value(value: float, decimals: int = 9, width: int = 18) -> str:
    """Format value with consistent width."""
    return f"{value:{width}.{decimals}f}"


def format_diff(value: float, decimals: int = 3, width: int = 10) -> str:
    """Format difference value with consistent width."""
    return f"{value:{width}.{decimals}e}"


def format_status(passed: bool) -> str:
    """Format pass/fail status."""
    return "✓" if passed else "✗"


# ============================================================================
# SUMMARY STATISTICS
# ============================================================================


class TestStatistics:
    """Tracks and reports test statistics."""

    def __init__(self):
        self.total = 0
        self.passed = 0
        self.failed = 0
        self.errors = 0
        self.max_diff = 0.0
        self.diff_sum = 0.0

    def add_result(self, passed: bool, diff: float = 0.0, error: bool = False):
        """Add a test result."""
        self.total += 1
        if error:
            self.errors += 1
        elif passed:
            self.passed += 1
        else:
            self.failed += 1

        if not error:
            self.max_diff = max(self.max_diff, diff)
            self.diff_sum += diff

    def avg_diff(self) -> float:
        """Calculate average difference (excluding errors)."""
        count = self.total - self.errors
        return self.diff_sum / count if count > 0 else 0.0

    def pass_rate(self) -> float:
        """Calculate pass rate (excluding errors)."""
        count = self.total - self.errors
        return (self.passed / count * 100) if count > 0 else 0.0

    def print_summary(self, title: str = "SUMMARY"):
        """Print formatted summary."""
        print()
        print("=" * 80)
        print(title)
        print("=" * 80)
        print(f"Total tests:   {self.total}")
        print(f"Passed:        {self.passed} ✓")
        print(f"Failed:        {self.failed} ✗")
        print(f"Errors:        {self.errors}")
        if self.total > self.errors:
            print(f"Pass rate:     {self.pass_rate():.1f}%")
            print(f"Max diff:      {self.max_diff:.3e}")
            print(f"Avg diff:      {self.avg_diff():.3e}")
        print("=" * 80)


# ============================================================================
# COMMAND LINE HELPERS
# ============================================================================


def parse_args(args: List[str]) -> dict:
    """Parse common command line arguments."""
    return {
        "verbose": "--verbose" in args or "-v" in args,
        "help": "--help" in args or "-h" in args,
    }


def print_header(title: str):
    """Print formatted header."""
    print("=" * 80)
    print(title)
    print("=" * 80)
    print()
