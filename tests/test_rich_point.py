import copy
import math

import numpy as np
import pytest

from depthcluster.rich_point import RichPoint

EPS = float(np.finfo(np.float32).eps)


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


def test_init_from_array():
    point = RichPoint.from_array(np.array([1, 2, 3]))
    assert point.x == pytest.approx(1.0, abs=EPS)
    assert point.y == pytest.approx(2.0, abs=EPS)
    assert point.z == pytest.approx(3.0, abs=EPS)
    assert point.ring == 0


def test_as_array_round_trip():
    point = RichPoint(1.5, -2.0, 3.25, 7)
    again = RichPoint.from_array(point.as_array(), ring=point.ring)
    assert again == point
    np.testing.assert_allclose(point.as_array(), [1.5, -2.0, 3.25])


def test_dist_2d():
    point = RichPoint.from_array([1, 1, 1])
    assert point.dist_to_sensor_2d() == pytest.approx(math.sqrt(2), abs=EPS)


def test_dist_3d():
    point = RichPoint.from_array([1, 1, 1])
    assert point.dist_to_sensor_3d() == pytest.approx(math.sqrt(3), abs=EPS)


def test_assign():
    point = RichPoint.from_array([1, 1, 1])
    point.ring = 20
    point2 = copy.copy(point)
    assert point2.x == pytest.approx(point.x, abs=EPS)
    assert point2.y == pytest.approx(point.y, abs=EPS)
    assert point2.z == pytest.approx(point.z, abs=EPS)
    assert point2.ring == point.ring
    point2.x = 5
    assert point.x == pytest.approx(1.0, abs=EPS)


def test_equals():
    point = RichPoint.from_array([1, 1, 1])
    point2 = RichPoint.from_array([1, 1, 1])
    assert point == point2
    point.ring = 20
    assert not (point == point2)