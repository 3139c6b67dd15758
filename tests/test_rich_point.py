import dataclasses
import math

import numpy as np
import pytest

from depthcluster.rich_point import RichPoint

EPS = 1.1920928955078125e-07


def test_init():
    point = RichPoint()
    assert point.x == pytest.approx(0.0, abs=EPS)
    assert point.y == pytest.approx(0.0, abs=EPS)
    assert point.z == pytest.approx(0.0, abs=EPS)
    assert point.ring == 0


def test_init_full():
    point = RichPoint(1, 2, 3, 4)
    assert point.x == pytest.approx(1.0, abs=EPS)
    assert point.y == pytest.approx(2.0, abs=EPS)
    assert point.z == pytest.approx(3.0, abs=EPS)
    assert point.ring == 4


def test_init_partial():
    point = RichPoint(1, 2, 3)
    assert point.x == pytest.approx(1.0, abs=EPS)
    assert point.y == pytest.approx(2.0, abs=EPS)
    assert point.z == pytest.approx(3.0, abs=EPS)
    assert point.ring == 0


def test_init_vector():
    point = RichPoint.from_vector(np.array([1.0, 2.0, 3.0]))
    assert point.x == pytest.approx(1.0, abs=EPS)
    assert point.y == pytest.approx(2.0, abs=EPS)
    assert point.z == pytest.approx(3.0, abs=EPS)
    assert point.ring == 0


def test_dist_2d():
    point = RichPoint.from_vector([1, 1, 1])
    assert point.dist_to_sensor_2d() == pytest.approx(math.sqrt(2), abs=EPS)


def test_dist_3d():
    point = RichPoint.from_vector([1, 1, 1])
    assert point.dist_to_sensor_3d() == pytest.approx(math.sqrt(3), abs=EPS)


def test_assign():
    point = RichPoint.from_vector([1, 1, 1])
    point.ring = 20
    point2 = dataclasses.replace(point)
    assert point2.x == pytest.approx(point.x, abs=EPS)
    assert point2.y == pytest.approx(point.y, abs=EPS)
    assert point2.z == pytest.approx(point.z, abs=EPS)
    assert point2.ring == point.ring


def test_equals():
    point = RichPoint.from_vector([1, 1, 1])
    point2 = RichPoint.from_vector([1, 1, 1])
    assert point == point2
    point.ring = 20
    assert not point == point2


def test_as_vector_round_trip():
    point = RichPoint(1.5, -2.0, 3.25, 7)
    again = RichPoint.from_vector(point.as_vector(), point.ring)
    assert again == point


def test_ring_out_of_range():
    with pytest.raises(ValueError):
        RichPoint(0, 0, 0, -1)
    with pytest.raises(ValueError):
        RichPoint(0, 0, 0, 70000)