import math

import numpy as np
import pytest

from depthcluster.bbox import Bbox
from depthcluster.cloud import Cloud
from depthcluster.pose import Pose
from depthcluster.rich_point import RichPoint


def test_default_box_is_degenerate():
    box = Bbox()
    assert box.volume == Bbox.WRONG_VOLUME
    assert np.array_equal(box.scale, np.zeros(3))
    assert np.array_equal(box.center, np.zeros(3))


def test_unit_box_volume():
    box = Bbox([0, 0, 0], [1, 1, 1])
    assert box.volume == pytest.approx(1.0)


def test_flat_box_has_wrong_volume():
    box = Bbox([0, 0, 0], [1, 1, 0])
    assert box.volume == Bbox.WRONG_VOLUME
    assert np.array_equal(box.center, np.zeros(3))


def test_scale_is_extent():
    box = Bbox([0, 0, 0], [2, 3, 4])
    assert np.allclose(box.scale, [2, 3, 4])


def test_from_cloud_corners_come_from_points():
    cloud = Cloud([RichPoint(1, 5, 2), RichPoint(-1, 3, 4), RichPoint(0, 4, 3)])
    box = Bbox.from_cloud(cloud)
    assert np.allclose(box.min_point, [-1, 3, 2])
    assert np.allclose(box.max_point, [1, 5, 4])


def test_from_empty_cloud():
    assert Bbox.from_cloud(Cloud()).volume == Bbox.WRONG_VOLUME


def test_intersect_with_itself():
    box = Bbox([0, 1, 2], [3, 4, 5])
    same = box.intersect(box)
    assert np.allclose(same.min_point, box.min_point)
    assert np.allclose(same.max_point, box.max_point)
    assert same.volume == pytest.approx(box.volume)


def test_overlapping_boxes():
    a = Bbox([0, 0, 0], [2, 2, 2])
    b = Bbox([1, 1, 1], [3, 3, 3])
    assert a.intersects(b)
    assert b.intersects(a)
    overlap = a.intersect(b)
    assert np.allclose(overlap.min_point, [1, 1, 1])
    assert np.allclose(overlap.max_point, [2, 2, 2])


def test_disjoint_boxes():
    a = Bbox([0, 0, 0], [1, 1, 1])
    b = Bbox([2, 2, 2], [3, 3, 3])
    assert not a.intersects(b)
    assert a.intersect(b).volume == Bbox.WRONG_VOLUME


def test_touching_boxes_do_not_intersect():
    a = Bbox([0, 0, 0], [1, 1, 1])
    b = Bbox([1, 0, 0], [2, 1, 1])
    assert not a.intersects(b)


def test_move_by_identity_keeps_corners():
    box = Bbox([0, 1, 2], [3, 4, 5])
    box.move_by(Pose())
    assert np.allclose(box.min_point, [0, 1, 2])
    assert np.allclose(box.max_point, [3, 4, 5])


def test_move_by_translation_keeps_volume():
    box = Bbox([0, 1, 2], [3, 4, 5])
    volume = box.volume
    box.move_by(Pose(1, 0, 0))
    assert box.volume == pytest.approx(volume)
    assert box.min_point[1] == pytest.approx(1)


def test_move_by_half_turn_sorts_corners():
    box = Bbox([0, 1, 2], [3, 4, 5])
    volume = box.volume
    box.move_by(Pose(0, 0, math.pi))
    assert np.all(box.min_point < box.max_point)
    assert box.volume == pytest.approx(volume)
    assert np.allclose(box.min_point, [-3, -4, 2])