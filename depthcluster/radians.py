"""An angle type that always stores radians."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Single-precision machine epsilon, used as the tolerance of angle comparisons.
_FLOAT_EPS = 2.0 ** -23


@dataclass(frozen=True)
class Radians:
    """An angle in radians.

    A bare ``Radians()`` is a zero angle marked as not valid. Build valid
    angles with :meth:`from_radians`, :meth:`from_degrees`, :func:`rad` or
    :func:`deg`.
    """

    val: float = 0.0
    valid: bool = False

    @classmethod
    def from_radians(cls, radians: float) -> Radians:
        return cls(float(radians), True)

    @classmethod
    def from_degrees(cls, degrees: float) -> Radians:
        return cls(float(degrees) * math.pi / 180.0, True)

    def to_degrees(self) -> float:
        return 180.0 * self.val / math.pi

    def normalized(
        self, lower: Radians | None = None, upper: Radians | None = None
    ) -> Radians:
        """Return this angle shifted by whole spans into ``[lower, upper]``.

        The range defaults to 0 to 360 degrees.
        """
        lower = deg(0) if lower is None else lower
        upper = deg(360) if upper is None else upper
        span = (upper - lower).val
        angle = self.val
        while angle < lower.val:
            angle += span
        while angle > upper.val:
            angle -= span
        return Radians.from_radians(angle)

    def floor(self) -> Radians:
        """Round the angle down to a whole number of degrees."""
        return Radians.from_degrees(math.floor(self.to_degrees()))

    def __abs__(self) -> Radians:
        return Radians.from_radians(abs(self.val))

    def __add__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians.from_radians(self.val + other.val)

    def __sub__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians.from_radians(self.val - other.val)

    def __mul__(self, factor: float) -> Radians:
        if isinstance(factor, Radians):
            return NotImplemented
        return Radians.from_radians(self.val * factor)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Divide by a number to get an angle, or by an angle to get a ratio."""
        if isinstance(other, Radians):
            return self.val / other.val
        return Radians.from_radians(self.val / other)

    def __neg__(self) -> Radians:
        return Radians.from_radians(-self.val)

    def __lt__(self, other: Radians) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self.val < other.val - _FLOAT_EPS

    def __gt__(self, other: Radians) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self.val > other.val + _FLOAT_EPS


def deg(value: float) -> Radians:
    """Make an angle from degrees."""
    return Radians.from_degrees(value)


def rad(value: float) -> Radians:
    """Make an angle from radians."""
    return Radians.from_radians(value)