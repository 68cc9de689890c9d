# tests/test_solar.py

import math
import random

import pytest

from miqat.core.errors import UndefinedHourAngleError
from miqat.reference import solar


def test_wrap_deg():
    assert solar.wrap_deg(-30.0) == pytest.approx(330.0)
    assert solar.wrap_deg(720.5) == pytest.approx(0.5)
    assert solar.wrap_deg(360.0) == 0.0
    assert 0.0 <= solar.wrap_deg(-1e-14) < 360.0


def test_fold_hours():
    assert solar.fold_hours(23.9) == pytest.approx(-0.1)
    assert solar.fold_hours(-23.9) == pytest.approx(0.1)
    assert solar.fold_hours(0.2) == pytest.approx(0.2)
    assert solar.fold_hours(12.0) == 12.0
    assert solar.fold_hours(-12.0) == 12.0


def test_j2000_solar_parameters():
    """
    2000-01-01 12:00 (JD 2451545.0): declination about -23.03 deg,
    equation of time about -3.3 min.
    """
    sp = solar.solar_parameters(2451545.0)
    assert sp.declination_deg == pytest.approx(-23.035, abs=0.05)
    assert sp.equation_of_time_minutes == pytest.approx(-3.30, abs=0.1)


def test_june_solstice_declination():
    # 2024-06-21 12:00 UTC, a few hours after the solstice
    sp = solar.solar_parameters(2460483.0)
    assert sp.declination_deg == pytest.approx(23.44, abs=0.03)


@pytest.mark.parametrize(
    "jd, eot_min",
    [
        (2460618.0, 16.4),    # 2024-11-03, yearly maximum
        (2460352.0, -14.2),   # 2024-02-11, yearly minimum
    ],
)
def test_equation_of_time_extremes(jd, eot_min):
    sp = solar.solar_parameters(jd)
    assert sp.equation_of_time_minutes == pytest.approx(eot_min, abs=0.3)


def test_equation_of_time_bounded():
    """
    The equation of time is a small signed offset: never wrapped to [0,24).
    """
    random.seed(42)
    for _ in range(5000):
        jd = random.uniform(2415020.0, 2488070.0)  # 1900..2100
        sp = solar.solar_parameters(jd)
        assert -12.0 < sp.equation_of_time_hours <= 12.0
        assert abs(sp.equation_of_time_hours) < 0.3
        assert abs(sp.declination_deg) <= 23.46


def test_solar_parameters_deterministic():
    a = solar.solar_parameters(2460483.25)
    b = solar.solar_parameters(2460483.25)
    assert a == b


def test_hour_angle_equator_equinox():
    # Sun on the equator seen from the equator: horizon crossing 6h from noon
    H = solar.hour_angle(0.0, 0.0, 0.0)
    assert H == pytest.approx(math.pi / 2, abs=1e-12)


def test_hour_angle_range():
    random.seed(7)
    for _ in range(1000):
        lat = random.uniform(-60.0, 60.0)
        delta = math.radians(random.uniform(-23.44, 23.44))
        alt = random.uniform(-18.0, 30.0)
        try:
            H = solar.hour_angle(lat, delta, alt)
        except UndefinedHourAngleError:
            continue
        assert 0.0 <= H <= math.pi


def test_hour_angle_polar_day_twilight():
    """
    70 N near the June solstice: the Sun never sinks to -15 deg.
    """
    with pytest.raises(UndefinedHourAngleError) as ei:
        solar.hour_angle(70.0, math.radians(23.44), -15.0)
    e = ei.value
    assert e.latitude == 70.0
    assert e.altitude == -15.0
    assert e.cos_value < -1.0
    assert e.event is None


def test_hour_angle_polar_night():
    # 70 N near the December solstice: no sunrise, but -15 deg is reached
    with pytest.raises(UndefinedHourAngleError) as ei:
        solar.hour_angle(70.0, math.radians(-23.44), -0.833)
    assert ei.value.cos_value > 1.0
    H = solar.hour_angle(70.0, math.radians(-23.44), -15.0)
    assert 0.0 < H < math.pi


def test_undefined_hour_angle_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        solar.hour_angle(80.0, math.radians(23.0), -10.0)


def test_asr_altitude():
    # Sun at the zenith at noon: shadow of twice the height -> atan(1/2)
    assert solar.asr_altitude_deg(23.44, math.radians(23.44)) == pytest.approx(26.5651, abs=1e-4)
    assert solar.asr_altitude_deg(0.0, 0.0) == pytest.approx(26.5651, abs=1e-4)
    # longer noon shadow lowers the Asr altitude
    assert solar.asr_altitude_deg(50.0, math.radians(-20.0)) < solar.asr_altitude_deg(30.0, 0.0)
