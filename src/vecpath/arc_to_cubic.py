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

"""Convert SVG Path's circular arcs to Bezier curves.

The endpoint to center conversion is adapted from FontTools
fontTools/svgLib/path/arc.py, which in turn is adapted from Blink's
SVGPathNormalizer::DecomposeArcToCubic:
https://github.com/chromium/chromium/blob/93831f2/third_party/blink/renderer/core/svg/svg_path_parser.cc#L169-L278

Arcs here are always circular: path data with rx != ry is collapsed to a
single radius before it gets this far.
"""
from math import atan2, ceil, fabs, isfinite, pi, sqrt, tan
from typing import Iterator, NamedTuple, Tuple
from vecpath.geometric_types import Point, Vector


TWO_PI = 2 * pi
PI_OVER_TWO = 0.5 * pi
_SEGMENT_TOLERANCE = 1e-9


class CenterParametrization(NamedTuple):
    theta1: float
    theta_arc: float
    center_point: Point


class CircularArc(NamedTuple):
    start_point: Point
    radius: float
    large: int
    sweep: int
    end_point: Point

    def is_straight_line(self) -> bool:
        # If r = 0 then this arc is treated as a straight line segment (a
        # "lineto") joining the endpoints.
        # http://www.w3.org/TR/SVG/implnote.html#ArcOutOfRangeParameters
        return not fabs(self.radius)

    def is_zero_length(self) -> bool:
        return self.end_point == self.start_point

    def correct_out_of_range_radius(self) -> "CircularArc":
        # Check if the radius is big enough to draw the arc, scale it if not.
        # http://www.w3.org/TR/SVG/implnote.html#ArcCorrectionOutOfRangeRadii
        if self.is_straight_line() or self.is_zero_length():
            return self

        half_chord = (self.start_point - self.end_point).norm() * 0.5
        radius = fabs(self.radius)
        if half_chord > radius:
            radius = half_chord
        return self._replace(radius=radius)

    # https://www.w3.org/TR/SVG/implnote.html#ArcConversionEndpointToCenter
    def end_to_center_parametrization(self) -> CenterParametrization:
        if self.is_straight_line() or self.is_zero_length():
            raise ValueError(f"Can't compute center parametrization for {self}")

        # work on the unit circle, rotation is meaningless for circles
        point1 = Point(self.start_point.x / self.radius, self.start_point.y / self.radius)
        point2 = Point(self.end_point.x / self.radius, self.end_point.y / self.radius)
        delta = point2 - point1

        d = delta.x * delta.x + delta.y * delta.y
        scale_factor_squared = max(1 / d - 0.25, 0.0)

        scale_factor = sqrt(scale_factor_squared)
        if self.sweep == self.large:
            scale_factor = -scale_factor

        delta *= scale_factor
        center_point = point1 + (point2 - point1) * 0.5 + delta.perpendicular()
        v1 = point1 - center_point
        v2 = point2 - center_point

        theta1 = atan2(v1.y, v1.x)
        theta2 = atan2(v2.y, v2.x)

        theta_arc = theta2 - theta1
        if theta_arc < 0 and self.sweep:
            theta_arc += TWO_PI
        elif theta_arc > 0 and not self.sweep:
            theta_arc -= TWO_PI

        center_point = Point(center_point.x * self.radius, center_point.y * self.radius)

        return CenterParametrization(theta1, theta_arc, center_point)


def _point_on_circle(center: Point, radius: float, theta: float) -> Point:
    return center + Vector.from_angle(theta, radius)


def arc_to_cubic(
    center: Tuple[float, float],
    radius: float,
    start_angle: float,
    sweep_angle: float,
) -> Iterator[Tuple[Point, Point, Point]]:
    """Convert a circular arc to cubic(s).

    Angles are in radians; a positive sweep turns from +x toward +y, which is
    clockwise on a y-down canvas. Each cubic spans at most 90 degrees.

    Yields 3-tuples of Points for each Cubic bezier, i.e. two off-curve points and
    one on-curve end point.

    Yields empty iterator if the arc has no sweep or no radius.
    """
    if not isinstance(center, Point):
        center = Point(*center)
    if not sweep_angle or not radius:
        return

    # absorb atan2 rounding so a quarter turn stays one segment
    num_segments = int(ceil(fabs(sweep_angle) / (PI_OVER_TWO + _SEGMENT_TOLERANCE)))
    for i in range(num_segments):
        start_theta = start_angle + i * sweep_angle / num_segments
        end_theta = start_angle + (i + 1) * sweep_angle / num_segments

        t = (4 / 3) * tan(0.25 * (end_theta - start_theta))
        if not isfinite(t):
            return

        start_point = _point_on_circle(center, radius, start_theta)
        end_point = _point_on_circle(center, radius, end_theta)

        # tangents at either end, scaled by the bezier coefficient
        point1 = start_point + Vector.from_angle(start_theta, t * radius).perpendicular()
        point2 = end_point + Vector.from_angle(end_theta, t * radius).perpendicular(
            clockwise=True
        )

        yield point1, point2, end_point
