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

"""Geometric edits on Paths.

Every operation returns a new Path with the same number and kinds of
commands; the input is never modified.
"""
import dataclasses
import itertools
from math import pi
from typing import Iterable, Optional, Tuple
from vecpath.arc_to_cubic import arc_to_cubic
from vecpath.geometric_types import MinMax, Point, Rect, almost_equal
from vecpath.path_commands import ArcTo, Path, PathCommand
from vecpath.path_transform import Affine2D


def _transform_arc(arc: ArcTo, affine: Affine2D) -> ArcTo:
    # Arcs stay circular, so a non-uniform scale can only be approximated:
    # the radius takes the mean of the two axis scales.
    sx, sy = affine.axis_scales()
    clockwise = arc.clockwise
    if affine.is_mirroring():
        clockwise = not clockwise
    result = dataclasses.replace(
        arc.map_points(affine.map_point),
        start_angle=affine.map_angle(arc.start_angle),
        end_angle=affine.map_angle(arc.end_angle),
        radius=arc.radius * (sx + sy) / 2,
        clockwise=clockwise,
    )
    if not almost_equal(sx, sy):
        result = dataclasses.replace(result, large_arc=abs(result.sweep_angle()) > pi)
    return result


def _transform_command(cmd: PathCommand, affine: Affine2D) -> PathCommand:
    if isinstance(cmd, ArcTo):
        return _transform_arc(cmd, affine)
    return cmd.map_points(affine.map_point)


def apply_transform(path: Path, affine: Affine2D) -> Path:
    """Map every point of path through affine."""
    return dataclasses.replace(
        path, commands=tuple(_transform_command(cmd, affine) for cmd in path)
    )


def translate(path: Path, dx: float, dy: float) -> Path:
    return apply_transform(path, Affine2D.identity().translate(dx, dy))


def scale(
    path: Path, sx: float, sy: float, origin: Tuple[float, float] = (0.0, 0.0)
) -> Path:
    """Scale path by (sx, sy) keeping origin fixed.

    Arcs are scaled by the mean of sx and sy, which is exact only when the
    two are equal.
    """
    ox, oy = origin
    return apply_transform(path, Affine2D.identity().scale(sx, sy, ox, oy))


def flip_horizontal(path: Path, bounds: Rect) -> Path:
    """Mirror path left to right across the vertical center line of bounds."""
    return scale(path, -1, 1, bounds.center())


def flip_vertical(path: Path, bounds: Rect) -> Path:
    """Mirror path top to bottom across the horizontal center line of bounds."""
    return scale(path, 1, -1, bounds.center())


def _extent_points(cmd: PathCommand) -> Iterable[Point]:
    yield from cmd.points()
    if isinstance(cmd, ArcTo):
        # the cubics' hull bounds what gets drawn for the arc
        yield cmd.start_point()
        for control1, control2, end in arc_to_cubic(
            cmd.center, cmd.radius, cmd.start_angle, cmd.sweep_angle()
        ):
            yield control1
            yield control2
            yield end


def bounding_extent(path: Path) -> Optional[MinMax]:
    """Return (min, max) corners around every point of path, or None if empty.

    Control points are included, so this is a cheap superset of the area the
    path covers rather than its tight bounds.
    """
    return MinMax.of_points(
        itertools.chain.from_iterable(_extent_points(cmd) for cmd in path)
    )


def bounding_rect(path: Path) -> Optional[Rect]:
    extent = bounding_extent(path)
    if extent is None:
        return None
    return extent.rect()
