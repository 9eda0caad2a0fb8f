# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import math
from typing import Iterable, NamedTuple, Optional, Tuple, Union


DEFAULT_ALMOST_EQUAL_TOLERANCE = 1e-9
_PointOrVec = Union["Point", "Vector"]


def almost_equal(c1, c2, tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE) -> bool:
    return abs(c1 - c2) <= tolerance


def almost_equal_angle(a1, a2, tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE) -> bool:
    """True if two angles in radians are equal modulo a full turn."""
    delta = math.remainder(a1 - a2, 2 * math.pi)
    return abs(delta) <= tolerance


class Point(NamedTuple):
    x: float = 0
    y: float = 0

    def __sub__(self, other: _PointOrVec) -> _PointOrVec:
        """Return a Point or Vector based on the type of other.

        If other is a Point, return Vector from other to self.
        If other is a Vector, return Point translated by -other Vector.
        """
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        elif isinstance(other, Vector):
            return self.__class__(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __add__(self, other: "Vector") -> "Point":
        """Return Point translated by other Vector"""
        if isinstance(other, Vector):
            return self.__class__(self.x + other.x, self.y + other.y)
        return NotImplemented

    def reflect(self, about: "Point") -> "Point":
        """Return the reflection of self through the about Point."""
        return about + (about - self)

    def almost_equals(
        self, other: "Point", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE
    ) -> bool:
        return almost_equal(self.x, other.x, tolerance) and almost_equal(
            self.y, other.y, tolerance
        )


class Vector(NamedTuple):
    x: float = 0
    y: float = 0

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vector":
        return cls(length * math.cos(angle), length * math.sin(angle))

    def __add__(self, other: "Vector") -> "Vector":
        return self.__class__(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.__class__(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return self * -1.0

    def __mul__(self, scalar: float) -> "Vector":
        """Multiply vector by a scalar value."""
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.__class__(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def perpendicular(self, clockwise: bool = False) -> "Vector":
        """Return Vector rotated 90 degrees counter-clockwise from self.

        If clockwise is True, return the other perpendicular vector.
        """
        # https://mathworld.wolfram.com/PerpendicularVector.html
        if clockwise:
            return self.__class__(self.y, -self.x)
        else:
            return self.__class__(-self.y, self.x)

    def norm(self) -> float:
        """Return the vector Euclidean norm (or length or magnitude)."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def angle(self) -> float:
        """Return the direction of the vector in radians, in [-pi, pi]."""
        return math.atan2(self.y, self.x)


class Rect(NamedTuple):
    x: float = 0
    y: float = 0
    w: float = 0
    h: float = 0

    def empty(self) -> bool:
        """Return True if the Rect's width or height is 0."""
        return self.w == 0 or self.h == 0

    def center(self) -> Point:
        return Point(self.x + self.w / 2, self.y + self.h / 2)

    def contains(self, pt: Tuple[float, float], tolerance=0.0) -> bool:
        x, y = pt
        return (
            self.x - tolerance <= x <= self.x + self.w + tolerance
            and self.y - tolerance <= y <= self.y + self.h + tolerance
        )


class MinMax(NamedTuple):
    """Axis-aligned extent as a pair of (min, max) corners."""

    min: Point
    max: Point

    @classmethod
    def of_points(cls, points: Iterable[Tuple[float, float]]) -> Optional["MinMax"]:
        xs = []
        ys = []
        for x, y in points:
            xs.append(x)
            ys.append(y)
        if not xs:
            return None
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    def rect(self) -> Rect:
        return Rect(
            self.min.x,
            self.min.y,
            self.max.x - self.min.x,
            self.max.y - self.min.y,
        )
