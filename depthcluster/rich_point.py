"""A 3D point carrying the index of the laser ring that produced it."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass
class RichPoint:
    """A point with x, y, z coordinates and a ring number."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    ring: int = 0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.ring = int(self.ring)

    @classmethod
    def from_array(cls, array, ring: int = 0) -> RichPoint:
        x, y, z = np.asarray(array, dtype=float).reshape(3)
        return cls(x, y, z, ring)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def dist_to_sensor_2d(self) -> float:
        return math.hypot(self.x, self.y)

    def dist_to_sensor_3d(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)