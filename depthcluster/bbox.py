"""Axis-aligned bounding boxes."""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from depthcluster.cloud import Cloud
from depthcluster.pose import Pose

_FLOAT_MAX = float(np.finfo(np.float32).max)


class Bbox:
    """An axis-aligned box given by its minimum and maximum corners.

    A box with a non-positive extent along any axis is degenerate: its scale
    and center are zero and its volume is :attr:`WRONG_VOLUME`.
    """

    WRONG_VOLUME: ClassVar[float] = -1.0

    def __init__(self, min_point=None, max_point=None):
        self._min_point = (
            np.full(3, _FLOAT_MAX)
            if min_point is None
            else np.asarray(min_point, dtype=float).reshape(3).copy()
        )
        self._max_point = (
            np.full(3, -_FLOAT_MAX)
            if max_point is None
            else np.asarray(max_point, dtype=float).reshape(3).copy()
        )
        self._center = np.zeros(3)
        self._scale = np.zeros(3)
        self._volume = self.WRONG_VOLUME
        self.update_scale_and_center()

    @classmethod
    def from_cloud(cls, cloud: Cloud) -> Bbox:
        """The smallest box holding every point of ``cloud``."""
        if len(cloud) == 0:
            return cls()
        coords = np.array([(p.x, p.y, p.z) for p in cloud], dtype=float)
        return cls(coords.min(axis=0), coords.max(axis=0))

    @property
    def min_point(self) -> np.ndarray:
        return self._min_point.copy()

    @property
    def max_point(self) -> np.ndarray:
        return self._max_point.copy()

    @property
    def center(self) -> np.ndarray:
        return self._center.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def volume(self) -> float:
        return self._volume

    def intersect(self, other: Bbox) -> Bbox:
        """The box where this box and ``other`` overlap."""
        return Bbox(
            np.maximum(self._min_point, other._min_point),
            np.minimum(self._max_point, other._max_point),
        )

    def intersects(self, other: Bbox) -> bool:
        return self.intersect(other).volume > 0.0

    def move_by(self, pose: Pose) -> None:
        """Transform both corners by ``pose`` and re-sort them per axis."""
        moved_min = pose.transform_point(self._min_point)
        moved_max = pose.transform_point(self._max_point)
        self._min_point = np.minimum(moved_min, moved_max)
        self._max_point = np.maximum(moved_min, moved_max)
        self.update_scale_and_center()

    def update_scale_and_center(self) -> None:
        scale = self._max_point - self._min_point
        if np.any(scale <= 0.0):
            self._scale = np.zeros(3)
            self._center = np.zeros(3)
            self._volume = self.WRONG_VOLUME
            return
        self._scale = scale
        self._center = 0.5 * (self._min_point + self._max_point)
        self._volume = float(np.prod(scale))

    def __repr__(self) -> str:
        return (
            f"Bbox(min_point={self._min_point.tolist()}, "
            f"max_point={self._max_point.tolist()})"
        )