"""
Unit tests for the Epoch value object.
"""

import dataclasses
import math
from datetime import datetime, timedelta, timezone

import pytest
from libepoch import Epoch, EpochFormatError, parse_iso
from libepoch.constants import *
from libepoch.utils import TAU


SAMPLE = "2018-08-08T08:08:08.888Z"


@pytest.mark.unit
class TestConstruction:
    """Tests for the Epoch factories."""

    def test_from_iso_julian_tt(self):
        """TT Julian Date is the UTC Julian Date plus 69.184 s."""
        epoch = Epoch.from_iso(SAMPLE)
        expected = 2458338.5 + (8 * 3600 + 8 * 60 + 8.888) / 86400 + 69.184 / 86400
        assert abs(epoch.julian_tt - expected) < 1e-8

    def test_from_julian_tt(self, standard_jd):
        """Raw scalar construction stores the value unchanged."""
        assert Epoch.from_julian_tt(standard_jd).julian_tt == standard_jd
        assert Epoch.from_julian_tt(-12.5).julian_tt == -12.5

    def test_from_julian_utc(self, standard_jd):
        """UTC construction applies the TT offset."""
        epoch = Epoch.from_julian_utc(standard_jd)
        assert epoch.julian_tt == pytest.approx(standard_jd + TT_MINUS_UTC, abs=1e-9)
        assert epoch.julian_utc == pytest.approx(standard_jd, abs=1e-9)

    def test_missing_fraction(self):
        """Whole seconds without a fraction are accepted."""
        epoch = Epoch.from_iso("2018-08-08T08:08:08Z")
        assert epoch.to_iso() == "2018-08-08T08:08:08.000Z"

    def test_missing_z(self):
        """The trailing Z is optional."""
        assert Epoch.from_iso("2018-08-08T08:08:08.888") == Epoch.from_iso(SAMPLE)

    def test_unpadded_fields(self):
        """Field widths are not enforced."""
        assert Epoch.from_iso("2018-8-8T8:8:8.888Z") == Epoch.from_iso(SAMPLE)

    def test_out_of_range_fields_propagate(self):
        """Month 13 is January of the following year."""
        assert Epoch.from_iso("2018-13-01T00:00:00Z") == Epoch.from_iso("2019-01-01T00:00:00Z")

    def test_fractional_day_accepted(self):
        """A fractional day adds its fraction."""
        a = Epoch.from_iso("2018-08-08.5T00:00:00Z")
        b = Epoch.from_iso("2018-08-08T12:00:00Z")
        assert a.julian_tt == pytest.approx(b.julian_tt, abs=1e-9)

    def test_parse_iso_fields(self):
        """parse_iso returns six floats."""
        assert parse_iso(SAMPLE) == (2018.0, 8.0, 8.0, 8.0, 8.0, 8.888)


@pytest.mark.unit
class TestMalformedStrings:
    """Tests for the structured parse error."""

    @pytest.mark.parametrize(
        "text",
        [
            "2018-08-08 08:08:08.888Z",
            "2018-08-08T08:08Z",
            "2018-08T08:08:08Z",
            "2018-08-08-01T08:08:08Z",
            "2018-08-08T08:08:08T01Z",
            "2018-08-08TXX:08:08Z",
            "year-08-08T08:08:08Z",
            "",
        ],
    )
    def test_malformed(self, text):
        """Wrong separators or non-numeric fields raise EpochFormatError."""
        with pytest.raises(EpochFormatError):
            Epoch.from_iso(text)

    def test_error_is_value_error(self):
        """EpochFormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Epoch.from_iso("not a date")

    def test_error_chains_cause(self):
        """Numeric failures keep the original exception as the cause."""
        with pytest.raises(EpochFormatError) as excinfo:
            Epoch.from_iso("2018-08-08T08:08:abcZ")
        assert isinstance(excinfo.value.__cause__, ValueError)


@pytest.mark.unit
class TestFormatting:
    """Tests for to_iso / __str__."""

    def test_sample_roundtrip(self):
        """The sample string formats back unchanged."""
        epoch = Epoch.from_iso(SAMPLE)
        assert epoch.to_iso() == SAMPLE
        assert str(epoch) == SAMPLE

    def test_roundtrip(self, iso_strings):
        """Canonical strings after 1582-10-15 round-trip exactly."""
        for text in iso_strings:
            assert Epoch.from_iso(text).to_iso() == text, text

    def test_from_julian_tt_formats(self):
        """Raw Julian TT values format on the UTC scale."""
        epoch = Epoch.from_julian_tt(2451545.0)
        assert epoch.to_iso() == "2000-01-01T11:58:50.816Z"

    def test_padding(self):
        """Year is padded to 4 digits and seconds to SS.sss."""
        epoch = Epoch.from_iso("0800-01-02T03:04:05.6Z")
        text = epoch.to_iso()
        assert text.startswith("0799-12-")
        assert text.endswith("T03:04:05.600Z")

    def test_rounds_to_millisecond(self):
        """Sub-millisecond values round to the nearest millisecond."""
        assert Epoch.from_iso("2018-08-08T08:08:08.8888Z").to_iso() == "2018-08-08T08:08:08.889Z"
        assert Epoch.from_iso("2018-08-08T08:08:59.9998Z").to_iso() == "2018-08-08T08:09:00.000Z"

    def test_negative_year_does_not_reparse(self):
        """Negative years format with a sign that from_iso rejects."""
        from libepoch import calendar_to_julian

        jd = calendar_to_julian(-5, 6, 1, 12, gregflag=JUL_CAL)
        text = Epoch.from_julian_utc(jd).to_iso()
        assert text == "-005-06-01T12:00:00.000Z"
        with pytest.raises(EpochFormatError):
            Epoch.from_iso(text)


@pytest.mark.unit
class TestValueSemantics:
    """Tests for copy, plus_days and immutability."""

    def test_plus_days(self):
        """Adding one day keeps the time of day."""
        epoch = Epoch.from_iso(SAMPLE)
        assert epoch.plus_days(1).to_iso() == "2018-08-09T08:08:08.888Z"
        assert epoch.plus_days(-8).to_iso() == "2018-07-31T08:08:08.888Z"
        assert epoch.plus_days(0.5).to_iso() == "2018-08-08T20:08:08.888Z"

    def test_plus_days_returns_new_instance(self):
        """The original Epoch is unchanged."""
        epoch = Epoch.from_iso(SAMPLE)
        later = epoch.plus_days(1)
        assert later is not epoch
        assert epoch.to_iso() == SAMPLE
        assert later.julian_tt == pytest.approx(epoch.julian_tt + 1)

    def test_copy(self):
        """Copies are equal but independent objects."""
        epoch = Epoch.from_iso(SAMPLE)
        clone = epoch.copy()
        assert clone == epoch
        assert clone is not epoch
        assert clone.to_iso() == SAMPLE

    def test_frozen(self):
        """Epochs cannot be modified in place."""
        epoch = Epoch.from_iso(SAMPLE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            epoch.julian_tt = 0.0

    def test_ordering_and_hash(self):
        """Epochs compare and hash by their Julian TT value."""
        a = Epoch.from_julian_tt(2451545.0)
        b = a.plus_days(1)
        assert a < b
        assert sorted([b, a]) == [a, b]
        assert len({a, a.copy(), b}) == 2


@pytest.mark.unit
class TestJ2000Quantities:
    """Tests for centuries and days past J2000.0."""

    def test_centuries_at_j2000(self):
        """J2000.0 is zero centuries past J2000.0."""
        assert Epoch.from_julian_tt(2451545.0).julian_centuries_past_j2000() == 0.0

    def test_centuries_one_century(self):
        """36525 days is one Julian century."""
        epoch = Epoch.from_julian_tt(2451545.0 + 36525)
        assert epoch.julian_centuries_past_j2000() == pytest.approx(1.0)

    def test_centuries_sample(self):
        """Test centuries for the sample date."""
        epoch = Epoch.from_iso(SAMPLE)
        expected = (epoch.julian_tt - 2451545.0) / 36525
        assert epoch.julian_centuries_past_j2000() == pytest.approx(expected)
        assert 0.186 < epoch.julian_centuries_past_j2000() < 0.187

    def test_days_past_j2000(self):
        """Test days past J2000.0."""
        assert Epoch.from_julian_tt(2451545.0).days_past_j2000() == 0.0
        assert Epoch.from_julian_tt(2451544.0).days_past_j2000() == -1.0

    def test_mjd(self):
        """mjd is on the UTC scale."""
        epoch = Epoch.from_iso("1858-11-17T00:00:00Z")
        assert epoch.mjd == pytest.approx(0.0, abs=1e-9)


@pytest.mark.unit
class TestGMST:
    """Tests for Greenwich Mean Sidereal Time."""

    def test_gmst_j2000(self):
        """GMST at 2000-01-01 12:00 UT is 280.46061837 degrees."""
        epoch = Epoch.from_julian_utc(2451545.0)
        assert math.degrees(epoch.gmst()) == pytest.approx(280.46061837, abs=1e-4)

    def test_gmst_midnight(self):
        """At 0h UT only the century terms contribute."""
        epoch = Epoch.from_iso("2000-01-01T00:00:00Z")
        T = -0.5 / 36525
        expected = 100.4606184 + 36000.77004 * T + 0.000387933 * T * T
        assert math.degrees(epoch.gmst()) == pytest.approx(expected, abs=1e-6)

    def test_gmst_advances_one_sidereal_day(self):
        """One solar day later GMST is about 0.9856 degrees further on."""
        epoch = Epoch.from_iso("2018-08-08T06:00:00Z")
        diff = math.degrees(epoch.plus_days(1).gmst() - epoch.gmst()) % 360.0
        assert diff == pytest.approx(0.98564724, abs=1e-3)

    @pytest.mark.parametrize(
        "julian_tt",
        [-1e7, -123456.789, -0.3, 0.0, 1.0, 2299160.5, 2451545.0, 2458338.8397925, 5e6],
    )
    def test_gmst_range(self, julian_tt):
        """GMST is always in [0, 2*pi), also for negative Julian Dates."""
        value = Epoch.from_julian_tt(julian_tt).gmst()
        assert 0.0 <= value < TAU


@pytest.mark.unit
class TestDatetimeInterop:
    """Tests for datetime conversion."""

    def test_to_datetime(self):
        """to_datetime returns an aware UTC datetime."""
        dt = Epoch.from_iso(SAMPLE).to_datetime()
        assert dt == datetime(2018, 8, 8, 8, 8, 8, 888000, tzinfo=timezone.utc)
        assert dt.tzinfo is timezone.utc

    def test_from_naive_datetime(self):
        """Naive datetimes are taken as UTC."""
        epoch = Epoch.from_datetime(datetime(2018, 8, 8, 8, 8, 8, 888000))
        assert epoch.to_iso() == SAMPLE

    def test_from_aware_datetime(self):
        """Aware datetimes are converted to UTC first."""
        tz = timezone(timedelta(hours=2))
        epoch = Epoch.from_datetime(datetime(2018, 8, 8, 10, 8, 8, 888000, tzinfo=tz))
        assert epoch.to_iso() == SAMPLE

    def test_to_datetime_out_of_range(self):
        """Years outside datetime's range raise ValueError."""
        with pytest.raises(ValueError):
            Epoch.from_julian_tt(0.0).to_datetime()
