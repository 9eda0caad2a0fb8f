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

"""2D affine transforms for path geometry.

Also reads https://www.w3.org/TR/SVG11/coords.html#TransformAttribute
so transforms can be given the way svg writes them.
"""
from math import atan2, cos, hypot, radians, sin, tan
import re
from typing import NamedTuple, Tuple
from sys import float_info
from vecpath.geometric_types import Point, Vector


# Row-vector affine, applied as
#
# x' = a*x + c*y + e
# y' = b*x + d*y + f
class Affine2D(NamedTuple):
    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @staticmethod
    def identity():
        return _IDENTITY

    @staticmethod
    def fromstring(raw_transform):
        return parse_svg_transform(raw_transform)

    @staticmethod
    def product(first: "Affine2D", second: "Affine2D") -> "Affine2D":
        """Returns the transform that applies first, then second."""
        return Affine2D(
            first.a * second.a + first.b * second.c,
            first.a * second.b + first.b * second.d,
            first.c * second.a + first.d * second.c,
            first.c * second.b + first.d * second.d,
            second.a * first.e + second.c * first.f + second.e,
            second.b * first.e + second.d * first.f + second.f,
        )

    def matrix(self, a, b, c, d, e, f):
        """Prepend matrix(a b c d e f), as a nested svg transform would."""
        return Affine2D.product(Affine2D(a, b, c, d, e, f), self)

    def translate(self, tx, ty=0):
        if tx == 0 and ty == 0:
            return self
        return self.matrix(1, 0, 0, 1, tx, ty)

    def _about(self, cx, cy, a, b, c, d):
        # move (cx, cy) to the origin, apply [a b c d], move it back
        return self.translate(cx, cy).matrix(a, b, c, d, 0, 0).translate(-cx, -cy)

    def scale(self, sx, sy=None, cx=0.0, cy=0.0):
        if sy is None:
            sy = sx
        return self._about(cx, cy, sx, 0, 0, sy)

    # angles are in radians
    def rotate(self, a, cx=0.0, cy=0.0):
        return self._about(cx, cy, cos(a), sin(a), -sin(a), cos(a))

    def skewx(self, a):
        return self.matrix(1, 0, tan(a), 1, 0, 0)

    def skewy(self, a):
        return self.matrix(1, tan(a), 0, 1, 0, 0)

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def is_degenerate(self) -> bool:
        """True if the transform squashes the plane onto a line or a point."""
        return abs(self.determinant()) <= float_info.epsilon

    def is_mirroring(self) -> bool:
        """True if the transform reverses the winding of shapes."""
        return self.determinant() < 0

    def axis_scales(self) -> Tuple[float, float]:
        """How much unit x and unit y vectors are stretched."""
        return (hypot(self.a, self.b), hypot(self.c, self.d))

    def map_point(self, pt: Tuple[float, float]) -> Point:
        x, y = pt
        return Point(self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def map_vector(self, vec: Tuple[float, float]) -> Vector:
        """Like map_point, but translation doesn't apply to vectors."""
        x, y = vec
        return Vector(self.a * x + self.c * y, self.b * x + self.d * y)

    def map_angle(self, angle: float) -> float:
        """Return the direction, in radians, a vector at angle points in once mapped."""
        if (self.a, self.b, self.c, self.d) == (1, 0, 0, 1):
            return angle
        v = self.map_vector(Vector.from_angle(angle))
        return atan2(v.y, v.x)


_IDENTITY = Affine2D(1, 0, 0, 1, 0, 0)

_TRANSFORM_RE = re.compile(
    r"(?i)(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)"
)
_ARGS_SPLIT_RE = re.compile(r"\s*[,\s]\s*")
# svg gives these in degrees
_ANGLE_OPS = frozenset({"rotate", "skewx", "skewy"})


def parse_svg_transform(raw_transform: str) -> Affine2D:
    transform = Affine2D.identity()
    for match in _TRANSFORM_RE.finditer(raw_transform):
        op = match.group(1).lower()
        args = [float(p) for p in _ARGS_SPLIT_RE.split(match.group(2).strip())]
        if op in _ANGLE_OPS:
            args[0] = radians(args[0])
        transform = getattr(transform, op)(*args)
    return transform
