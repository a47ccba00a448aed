"""Rigid 3D poses stored as homogeneous 4x4 matrices."""

from __future__ import annotations

import math

import numpy as np


def _rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def _rotation_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _euler_xyz(m: np.ndarray) -> np.ndarray:
    """Euler angles about X, Y, Z; first angle in [0, pi], others in [-pi, pi]."""
    first = math.atan2(m[1, 2], m[2, 2])
    c2 = math.hypot(m[0, 0], m[0, 1])
    if first > 0:
        first -= math.pi
        second = math.atan2(-m[0, 2], -c2)
    else:
        second = math.atan2(-m[0, 2], c2)
    s1, c1 = math.sin(first), math.cos(first)
    third = math.atan2(s1 * m[2, 0] - c1 * m[1, 0], c1 * m[1, 1] - s1 * m[2, 1])
    return -np.array([first, second, third])


class Pose:
    """A rigid transform with a likelihood in [0, 1]."""

    def __init__(self, x: float = 0.0, y: float = 0.0, theta: float = 0.0):
        self.matrix = np.eye(4)
        self._likelihood = 1.0
        self.theta = theta
        self.x = x
        self.y = y

    @classmethod
    def from_matrix(cls, matrix) -> Pose:
        """Build a pose from a 4x4 homogeneous matrix; likelihood is reset to 1."""
        array = np.array(matrix, dtype=float)
        if array.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
        pose = cls()
        pose.matrix = array
        return pose

    @classmethod
    def from_vector6(cls, vector) -> Pose:
        """Build a pose from (x, y, z, roll, pitch, yaw) with X-Y-Z rotation order."""
        values = np.asarray(vector, dtype=float).reshape(6)
        pose = cls()
        pose.matrix[:3, 3] = values[:3]
        pose.matrix[:3, :3] = (
            _rotation_x(values[3]) @ _rotation_y(values[4]) @ _rotation_z(values[5])
        )
        return pose

    def to_vector6(self) -> np.ndarray:
        """Return (x, y, z) followed by X-Y-Z Euler angles."""
        return np.concatenate([self.matrix[:3, 3], _euler_xyz(self.matrix[:3, :3])])

    @property
    def x(self) -> float:
        return float(self.matrix[0, 3])

    @x.setter
    def x(self, value: float) -> None:
        self.matrix[0, 3] = value

    @property
    def y(self) -> float:
        return float(self.matrix[1, 3])

    @y.setter
    def y(self, value: float) -> None:
        self.matrix[1, 3] = value

    @property
    def z(self) -> float:
        return float(self.matrix[2, 3])

    @z.setter
    def z(self, value: float) -> None:
        self.matrix[2, 3] = value

    @property
    def theta(self) -> float:
        """Rotation about the z axis."""
        angle = math.acos(max(-1.0, min(1.0, self.matrix[0, 0])))
        return angle if self.matrix[1, 0] > 0 else -angle

    @theta.setter
    def theta(self, theta: float) -> None:
        c, s = math.cos(theta), math.sin(theta)
        self.matrix[0, 0] = c
        self.matrix[1, 1] = c
        self.matrix[0, 1] = -s
        self.matrix[1, 0] = s

    @property
    def likelihood(self) -> float:
        return self._likelihood

    @likelihood.setter
    def likelihood(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"likelihood must lie in [0, 1], got {value}")
        self._likelihood = float(value)

    @property
    def translation(self) -> np.ndarray:
        return self.matrix[:3, 3].copy()

    @property
    def rotation(self) -> np.ndarray:
        return self.matrix[:3, :3].copy()

    def set_pitch(self, pitch: float) -> None:
        c, s = math.cos(pitch), math.sin(pitch)
        self.matrix[0, 0] = c
        self.matrix[2, 2] = c
        self.matrix[0, 2] = -s
        self.matrix[2, 0] = s

    def set_roll(self, roll: float) -> None:
        c, s = math.cos(roll), math.sin(roll)
        self.matrix[1, 1] = c
        self.matrix[2, 2] = c
        self.matrix[1, 2] = -s
        self.matrix[2, 1] = s

    def set_yaw(self, yaw: float) -> None:
        self.theta = yaw

    def to_local_frame_of(self, other: Pose) -> None:
        """Express this pose in the frame of ``other``, in place."""
        self.matrix = np.linalg.inv(other.matrix) @ self.matrix

    def in_local_frame_of(self, other: Pose) -> Pose:
        """Return a copy of this pose expressed in the frame of ``other``."""
        pose = self.copy()
        pose.to_local_frame_of(other)
        return pose

    def transform_point(self, point) -> np.ndarray:
        """Apply the transform to a 3-vector or to an (N, 3) array of points."""
        points = np.asarray(point, dtype=float)
        return points @ self.matrix[:3, :3].T + self.matrix[:3, 3]

    def copy(self) -> Pose:
        pose = Pose()
        pose.matrix = self.matrix.copy()
        pose._likelihood = self._likelihood
        return pose

    def __neg__(self) -> Pose:
        """A pose with negated translation and no rotation."""
        inverted = Pose()
        inverted.x = -self.x
        inverted.y = -self.y
        inverted.z = -self.z
        return inverted

    def __repr__(self) -> str:
        return (
            f"Pose(x={self.x:f}, y={self.y:f}, z={self.z:f}, "
            f"theta={self.theta:f}, likelihood={self._likelihood:f})"
        )