# tests/test_time.py

import pytest
from datetime import date

from miqat.core import time as mt
from miqat.core.errors import InvalidInputError


def test_known_jdn():
    """
    J2000.0 civil date and two 2024 dates used elsewhere in the suite.
    """
    assert mt.to_jdn(date(2000, 1, 1)) == 2451545
    assert mt.to_jdn(date(2024, 6, 21)) == 2460483
    assert mt.to_jdn(date(2024, 11, 3)) == 2460618


def test_julian_date_local_noon():
    # 12:00 UTC is the JDN itself; local mean noon east of Greenwich is earlier
    assert mt.julian_date(date(2000, 1, 1)) == 2451545.0
    assert mt.julian_date(date(2000, 1, 1), lon_deg=90.0) == pytest.approx(2451544.75, abs=1e-12)
    assert mt.julian_date(date(2000, 1, 1), lon_deg=-180.0) == pytest.approx(2451545.5, abs=1e-12)


def test_parse_ymd():
    assert mt.parse_ymd("2024-06-21") == date(2024, 6, 21)
    assert mt.as_date("2024-02-29") == date(2024, 2, 29)
    assert mt.as_date(date(2024, 2, 29)) == date(2024, 2, 29)


@pytest.mark.parametrize("bad", ["2024-6-21", "2024/06/21", "", "21-06-2024", "2023-02-29", "2024-13-01", " 2024-06-21"])
def test_parse_ymd_rejects(bad):
    with pytest.raises(InvalidInputError):
        mt.parse_ymd(bad)


def test_parse_ymd_error_is_value_error():
    with pytest.raises(ValueError):
        mt.parse_ymd("tomorrow")


def test_frac24():
    assert mt.frac24(25.5) == pytest.approx(1.5)
    assert mt.frac24(-1.0) == pytest.approx(23.0)
    assert mt.frac24(24.0) == 0.0
    assert mt.frac24(-48.25) == pytest.approx(23.75)
    # tiny negatives must not round up to 24.0
    assert mt.frac24(-1e-17) == 0.0


def test_shift_hours():
    assert mt.shift_hours(22.5, 3.0) == pytest.approx(1.5)
    assert mt.shift_hours(1.0, -5.0) == pytest.approx(20.0)


def test_format_hours():
    assert mt.format_hours(12.5) == "12:30"
    assert mt.format_hours(5.01) == "05:01"
    assert mt.format_hours(-0.5) == "23:30"
    # rounds up past midnight
    assert mt.format_hours(23.9999) == "00:00"
    with pytest.raises(InvalidInputError):
        mt.format_hours(float("nan"))
