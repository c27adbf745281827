"""
pytest configuration and shared fixtures for libepoch tests.
"""

import pytest
from libepoch import state


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def standard_jd():
    """Standard Julian Day for testing (J2000.0)."""
    return 2451545.0  # 2000-01-01 12:00:00 TT


@pytest.fixture
def test_dates():
    """Collection of test dates spanning different eras."""
    return [
        (2000, 1, 1, 12.0, "J2000"),
        (1980, 5, 20, 0.0, "Past"),
        (2024, 11, 5, 18.0, "Recent"),
        (1950, 10, 15, 6.0, "Mid-century"),
        (1600, 2, 29, 12.0, "Leap century"),
    ]


@pytest.fixture
def test_timestamps():
    """
    (year, month, day, hour, minute, second) tuples with seconds away from
    minute boundaries, so decoded fields can be compared one by one.
    """
    return [
        (2018, 8, 8, 8, 8, 8.888),
        (1969, 7, 20, 20, 17, 40.25),
        (2000, 2, 29, 23, 59, 30.5),
        (1582, 10, 15, 1, 2, 3.5),
        (2100, 3, 1, 6, 30, 45.125),
    ]


@pytest.fixture
def iso_strings():
    """Canonical UTC strings after the Gregorian reform."""
    return [
        "1582-10-15T00:00:00.000Z",
        "1858-11-17T00:00:00.000Z",
        "1900-03-01T00:00:00.000Z",
        "1969-07-20T20:17:40.000Z",
        "2000-01-01T12:00:00.000Z",
        "2000-02-29T23:59:59.999Z",
        "2018-08-08T08:08:08.888Z",
        "2024-12-31T23:59:59.000Z",
        "2100-06-15T06:30:45.123Z",
    ]


# ============================================================================
# TOLERANCE FIXTURES
# ============================================================================


@pytest.fixture
def default_tolerances():
    """Default tolerance values for comparisons."""
    return {
        "jd": 1e-8,  # days (~1 ms)
        "second": 1e-4,  # seconds
        "relative": 1e-9,  # unit conversions
        "gmst": 1e-3,  # degrees
    }


# ============================================================================
# SETUP/TEARDOWN
# ============================================================================


@pytest.fixture(autouse=True)
def reset_epoch_state():
    """Reset libepoch configuration before and after each test."""
    state.reset()

    yield

    state.reset()


# ============================================================================
# MARKERS
# ============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
