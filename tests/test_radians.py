import math

import pytest

from depthcluster.radians import Radians, deg, rad

EPS = 0.000001


def test_rad():
    pi = rad(3.14)
    assert pi.value == pytest.approx(3.14, abs=EPS)


def test_deg():
    pi = deg(180)
    assert pi.value == pytest.approx(math.pi, abs=EPS)


def test_copy():
    pi = deg(180)
    pi_copy = Radians(pi.value)
    assert pi.value == pytest.approx(math.pi, abs=EPS)
    assert pi_copy.value == pytest.approx(math.pi, abs=EPS)


def test_from_radians():
    pi = deg(180)
    pi_copy = Radians.from_radians(pi.value)
    assert pi.value == pytest.approx(math.pi, abs=EPS)
    assert pi_copy.value == pytest.approx(math.pi, abs=EPS)


def test_plus():
    a = deg(2)
    b = deg(2)
    res = deg(4)
    assert (a + b).to_degrees() == pytest.approx(res.to_degrees(), abs=EPS)


def test_plus_equals():
    a = deg(-2)
    b = deg(2)
    a += b
    res = deg(0)
    assert a.to_degrees() == pytest.approx(res.to_degrees(), abs=EPS)


def test_default_is_invalid_zero():
    angle = Radians()
    assert angle.valid is False
    assert angle.value == 0.0


def test_constructed_is_valid():
    assert deg(10).valid is True


def test_division_by_angle_gives_ratio():
    assert deg(90) / deg(45) == pytest.approx(2.0)


def test_division_and_multiplication_by_number():
    assert (deg(90) / 2).to_degrees() == pytest.approx(45.0)
    assert (deg(10) * 3).to_degrees() == pytest.approx(30.0)
    assert (3 * deg(10)).to_degrees() == pytest.approx(30.0)


def test_negation_and_abs():
    assert (-deg(30)).to_degrees() == pytest.approx(-30.0)
    assert abs(deg(-30)).to_degrees() == pytest.approx(30.0)


def test_comparisons_use_tolerance():
    assert deg(1) < deg(2)
    assert deg(2) > deg(1)
    assert not (rad(1.0) < rad(1.0))
    assert not (rad(1.0) > rad(1.0))


def test_normalize_default_range():
    assert deg(-90).normalized().to_degrees() == pytest.approx(270.0)
    assert deg(400).normalized().to_degrees() == pytest.approx(40.0)


def test_normalize_custom_range():
    result = deg(270).normalized(deg(-180), deg(180))
    assert result.to_degrees() == pytest.approx(-90.0)


def test_normalize_rejects_empty_range():
    with pytest.raises(ValueError):
        deg(10).normalized(deg(5), deg(5))


def test_floor():
    assert deg(45.7).floor().to_degrees() == pytest.approx(45.0)