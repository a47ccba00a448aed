"""Clustering of point clouds by Euclidean distance between points."""

from __future__ import annotations

import itertools
import logging
from collections import deque
from dataclasses import replace
from typing import Any

import numpy as np
from scipy.spatial import cKDTree

from depthcluster.cloud import Cloud
from depthcluster.timer import Timer

_log = logging.getLogger(__name__)

_ids = itertools.count(1)


def extract_euclidean_clusters(
    points, tolerance: float, min_size: int = 1, max_size: int = 2**31 - 1
) -> list[list[int]]:
    """Group points whose chains of neighbours are at most ``tolerance`` apart.

    Returns the sorted point indices of every cluster whose size lies in
    ``[min_size, max_size]``, largest clusters first.
    """
    coords = np.asarray(points, dtype=float).reshape(-1, 3)
    if len(coords) == 0:
        return []
    tree = cKDTree(coords)
    processed = np.zeros(len(coords), dtype=bool)
    clusters: list[list[int]] = []
    for seed, coord in enumerate(coords):
        if processed[seed]:
            continue
        processed[seed] = True
        members = [seed]
        frontier = deque([coord])
        while frontier:
            for neighbour in tree.query_ball_point(frontier.popleft(), tolerance):
                if not processed[neighbour]:
                    processed[neighbour] = True
                    members.append(neighbour)
                    frontier.append(coords[neighbour])
        if min_size <= len(members) <= max_size:
            clusters.append(sorted(members))
    clusters.sort(key=len, reverse=True)
    return clusters


class EuclideanClusterer:
    """Clusters incoming clouds and hands the clusters on to its clients.

    Only every ``skip``-th cloud is clustered; for the others an empty
    mapping is sent. Clients receive ``on_new_object_received(clusters, id)``.
    """

    def __init__(
        self,
        cluster_tolerance: float = 0.2,
        min_cluster_size: int = 100,
        max_cluster_size: int = 25000,
        skip: int = 10,
    ):
        if skip < 1:
            raise ValueError(f"skip must be at least 1, got {skip}")
        self.id = next(_ids)
        self.cluster_tolerance = cluster_tolerance
        self.min_cluster_size = min_cluster_size
        self.max_cluster_size = max_cluster_size
        self.skip = skip
        self._counter = 0
        self._clients: list[Any] = []

    def add_client(self, client: Any) -> None:
        self._clients.append(client)

    def _share(self, clusters: dict[int, Cloud]) -> None:
        for client in self._clients:
            client.on_new_object_received(clusters, self.id)

    def on_new_object_received(self, cloud: Cloud, sender_id: int) -> None:
        """Cluster ``cloud`` (or skip it) and send the result to all clients."""
        count = self._counter
        self._counter += 1
        clusters: dict[int, Cloud] = {}
        if count % self.skip != 0:
            self._share(clusters)
            return
        timer = Timer()
        coords = np.array([(p.x, p.y, p.z) for p in cloud], dtype=float)
        groups = extract_euclidean_clusters(
            coords, self.cluster_tolerance, self.min_cluster_size, self.max_cluster_size
        )
        _log.info("euclidean based labeling took: %d us", timer.measure())
        for label, members in enumerate(groups):
            clusters[label] = Cloud(
                (replace(cloud[index]) for index in members), pose=cloud.pose.copy()
            )
        self._share(clusters)