import numpy as np
import pytest

from depthcluster.cloud import Cloud
from depthcluster.euclidean_clusterer import (
    EuclideanClusterer,
    extract_euclidean_clusters,
)
from depthcluster.pose import Pose
from depthcluster.rich_point import RichPoint


def _two_groups():
    small = [(10.0 + 0.1 * i, 0.0, 0.0) for i in range(3)]
    large = [(0.1 * i, 0.0, 0.0) for i in range(5)]
    return np.array(small + large)


class _Recorder:
    def __init__(self):
        self.received = []

    def on_new_object_received(self, obj, sender_id):
        self.received.append((obj, sender_id))


def test_clusters_sorted_by_size_with_sorted_indices():
    clusters = extract_euclidean_clusters(_two_groups(), 0.15, 1, 100)
    assert clusters == [[3, 4, 5, 6, 7], [0, 1, 2]]


def test_min_size_filters_small_clusters():
    clusters = extract_euclidean_clusters(_two_groups(), 0.15, 4, 100)
    assert clusters == [[3, 4, 5, 6, 7]]


def test_max_size_filters_large_clusters():
    clusters = extract_euclidean_clusters(_two_groups(), 0.15, 1, 4)
    assert clusters == [[0, 1, 2]]


def test_chain_of_neighbours_forms_one_cluster():
    points = [(0.1 * i, 0.0, 0.0) for i in range(11)] + [(50.0, 0.0, 0.0)]
    clusters = extract_euclidean_clusters(points, 0.15, 1, 100)
    assert clusters == [list(range(11)), [11]]


def test_empty_input_has_no_clusters():
    assert extract_euclidean_clusters(np.empty((0, 3)), 0.2, 1, 10) == []


def test_every_point_in_at_most_one_cluster():
    rng = np.random.default_rng(3)
    points = rng.uniform(0, 5, size=(200, 3))
    clusters = extract_euclidean_clusters(points, 0.4, 1, 1000)
    flat = [index for cluster in clusters for index in cluster]
    assert sorted(flat) == list(range(200))


def _cloud():
    cloud = Cloud(pose=Pose(1, 2, 0))
    for x, y, z in _two_groups():
        cloud.append(RichPoint(x, y, z, 3))
    return cloud


def test_clusterer_shares_clusters_and_skips():
    clusterer = EuclideanClusterer(0.15, 1, 100, skip=2)
    recorder = _Recorder()
    clusterer.add_client(recorder)
    cloud = _cloud()

    clusterer.on_new_object_received(cloud, 0)
    clusterer.on_new_object_received(cloud, 0)
    clusterer.on_new_object_received(cloud, 0)

    first, sender = recorder.received[0]
    assert sender == clusterer.id
    assert sorted(first) == [0, 1]
    assert len(first[0]) == 5
    assert len(first[1]) == 3
    assert first[0].pose.x == pytest.approx(1.0)
    assert first[0].pose is not cloud.pose
    assert recorder.received[1][0] == {}
    assert len(recorder.received[2][0]) == 2


def test_cluster_points_are_copies():
    clusterer = EuclideanClusterer(0.15, 1, 100, skip=1)
    recorder = _Recorder()
    clusterer.add_client(recorder)
    cloud = _cloud()
    clusterer.on_new_object_received(cloud, 0)
    clusters = recorder.received[0][0]
    clusters[1][0].x = -100.0
    assert cloud[0].x == pytest.approx(10.0)
    assert clusters[1][0].ring == 3


def test_skip_must_be_positive():
    with pytest.raises(ValueError):
        EuclideanClusterer(skip=0)