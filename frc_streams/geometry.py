"""Angle and 2D vector helpers.

Angles are stored in radians and converted on request, which removes unit
ambiguity when passing angles between subsystems. Every angle is normalized
so that wrap-around (e.g. 359° vs -1°) never leaks into control math.
"""

import math
from dataclasses import dataclass
from typing import Iterator

TWO_PI = 2.0 * math.pi


def normalize_radians(radians: float, center: float = 0.0) -> float:
    """Normalize an angle in radians to the range [center - pi, center + pi).

    Args:
        radians: Angle to normalize.
        center: Center of the output range (default: 0.0).

    Returns:
        Equivalent angle within pi of the center.

    Example:
        >>> normalize_radians(3 * math.pi / 2)
        -1.5707963267948966
    """
    return radians - TWO_PI * math.floor((radians + math.pi - center) / TWO_PI)


def normalize_degrees(degrees: float, center: float = 0.0) -> float:
    """Normalize an angle in degrees to the range [center - 180, center + 180).

    Example:
        >>> normalize_degrees(270.0)
        -90.0
    """
    return degrees - 360.0 * math.floor((degrees + 180.0 - center) / 360.0)


class Angle:
    """Immutable angle, stored in radians normalized around 0.

    Construct with ``Angle.from_radians`` or ``Angle.from_degrees``.
    """

    __slots__ = ("_radians",)

    def __init__(self, radians: float = 0.0) -> None:
        self._radians = normalize_radians(radians)

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(math.radians(degrees))

    def to_radians(self, center: float = 0.0) -> float:
        """Value in radians, normalized around ``center`` (radians)."""
        if center == 0.0:
            return self._radians
        return normalize_radians(self._radians, center)

    def to_degrees(self, center: float = 0.0) -> float:
        """Value in degrees, normalized around ``center`` (degrees)."""
        return normalize_degrees(math.degrees(self._radians), center)

    def add(self, other: "Angle") -> "Angle":
        return Angle(self._radians + other._radians)

    def sub(self, other: "Angle") -> "Angle":
        return Angle(self._radians - other._radians)

    def __add__(self, other: "Angle") -> "Angle":
        return self.add(other)

    def __sub__(self, other: "Angle") -> "Angle":
        return self.sub(other)

    def __neg__(self) -> "Angle":
        return Angle(-self._radians)

    def sin(self) -> float:
        return math.sin(self._radians)

    def cos(self) -> float:
        return math.cos(self._radians)

    def tan(self) -> float:
        return math.tan(self._radians)

    def vector(self) -> "Vector2D":
        """Point of the angle on the unit circle."""
        return Vector2D(self.cos(), self.sin())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians == other._radians

    def __hash__(self) -> int:
        return hash(self._radians)

    def __repr__(self) -> str:
        return f"Angle({self.to_degrees():.3f}°)"


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2D vector (e.g. a joystick position or a field offset)."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> Angle:
        """Direction of the vector (0 for the zero vector)."""
        return Angle(math.atan2(self.y, self.x))

    def normalize(self) -> "Vector2D":
        """Unit vector in the same direction; the zero vector stays zero."""
        magnitude = self.magnitude()
        if magnitude == 0.0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / magnitude, self.y / magnitude)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def distance(self, other: "Vector2D") -> float:
        return (self - other).magnitude()

    def rotate(self, angle: Angle) -> "Vector2D":
        """Rotate counter-clockwise by ``angle``."""
        cos_a = angle.cos()
        sin_a = angle.sin()
        return Vector2D(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "Vector2D":
        return Vector2D(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
