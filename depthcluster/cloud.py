"""A collection of rich points with a pose and an optional image projection."""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Any, Iterable, Iterator

import numpy as np

from depthcluster.pose import Pose
from depthcluster.rich_point import RichPoint


class Cloud:
    """An ordered set of :class:`RichPoint` objects.

    A cloud may carry a projection: any object whose ``at(row, col)`` returns
    a cell with a ``points`` sequence of indices into this cloud. If the
    projection has a ``clone()`` method it is used when the cloud is copied.
    """

    def __init__(
        self,
        points: Iterable[RichPoint] | None = None,
        pose: Pose | None = None,
        sensor_pose: Pose | None = None,
    ):
        self._points: list[RichPoint] = list(points) if points is not None else []
        self.pose = pose if pose is not None else Pose()
        self.sensor_pose = sensor_pose if sensor_pose is not None else Pose()
        self._projection: Any = None

    @property
    def points(self) -> list[RichPoint]:
        """The points of the cloud, in insertion order."""
        return self._points

    @property
    def projection(self) -> Any:
        return self._projection

    def append(self, point: RichPoint) -> None:
        self._points.append(point)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> RichPoint:
        return self._points[index]

    def __iter__(self) -> Iterator[RichPoint]:
        return iter(self._points)

    def copy(self) -> Cloud:
        """Return a deep copy of points and poses, with a cloned projection."""
        duplicate = Cloud(
            (replace(point) for point in self._points),
            self.pose.copy(),
            self.sensor_pose.copy(),
        )
        if self._projection is not None:
            clone = getattr(self._projection, "clone", None)
            duplicate._projection = (
                clone() if callable(clone) else copy.deepcopy(self._projection)
            )
        return duplicate

    def transform_in_place(self, pose: Pose) -> None:
        """Move every point by ``pose``; rings are kept, the projection dropped."""
        if self._points:
            coords = np.array([(p.x, p.y, p.z) for p in self._points], dtype=float)
            moved = pose.transform_point(coords)
            for point, (x, y, z) in zip(self._points, moved):
                point.x, point.y, point.z = float(x), float(y), float(z)
        self._projection = None

    def transform(self, pose: Pose) -> Cloud:
        """Return a transformed copy of this cloud."""
        moved = self.copy()
        moved.transform_in_place(pose)
        return moved

    def set_projection(self, projection: Any) -> None:
        self._projection = projection

    def points_projected_to_pixel(self, row: int, col: int) -> list[RichPoint]:
        """Return the points that fall into the given projection pixel."""
        if self._projection is None:
            return []
        return [self._points[index] for index in self._projection.at(row, col).points]

    def __repr__(self) -> str:
        return f"Cloud({len(self._points)} points, pose={self.pose!r})"