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

"""Exchange Paths with pens, as in the FontTools Pens API.

emit() draws a Path onto any object with moveTo, lineTo and curveTo;
PathPen goes the other way and records drawing into a Path.
"""
from typing import List
from fontTools.pens.basePen import BasePen
from vecpath.arc_to_cubic import arc_to_cubic
from vecpath.geometric_types import Point
from vecpath.path_commands import (
    ArcTo,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    QuadraticTo,
)


# NOTE: the FontTools Pens API uses camelCase for the method names


def _emit_quadratic(pen, curr_pos: Point, cmd: QuadraticTo):
    # degree elevation, the cubic that traces the same curve
    control1 = curr_pos + (cmd.control - curr_pos) * (2 / 3)
    control2 = cmd.point + (cmd.control - cmd.point) * (2 / 3)
    pen.curveTo(control1, control2, cmd.point)


def _emit_arc(pen, cmd: ArcTo):
    cubics = list(
        arc_to_cubic(cmd.center, cmd.radius, cmd.start_angle, cmd.sweep_angle())
    )
    if not cubics:
        pen.lineTo(cmd.point)
        return
    for control1, control2, end in cubics[:-1]:
        pen.curveTo(control1, control2, end)
    # land exactly on the end point rather than where the trig put it
    control1, control2, _ = cubics[-1]
    pen.curveTo(control1, control2, cmd.point)


def emit(path: Path, pen):
    """Replay path as moveTo/lineTo/curveTo calls on pen.

    Quadratics and arcs are drawn as cubics. A closed path finishes with a
    lineTo back to its first point.
    """
    curr_pos = None
    for cmd in path:
        if isinstance(cmd, MoveTo):
            pen.moveTo(cmd.point)
        elif isinstance(cmd, LineTo):
            pen.lineTo(cmd.point)
        elif isinstance(cmd, CubicTo):
            pen.curveTo(cmd.control1, cmd.control2, cmd.point)
        elif isinstance(cmd, QuadraticTo):
            _emit_quadratic(pen, curr_pos, cmd)
        elif isinstance(cmd, ArcTo):
            _emit_arc(pen, cmd)
        else:
            raise ValueError(f"No way to draw {cmd!r}")
        curr_pos = cmd.point
    if path.closed:
        pen.lineTo(path.first_point())


class PathPen(BasePen):
    """A FontTools Pen that records drawing as a vecpath Path.

    Quadratic splines with implicit on-curve points are split up by BasePen.
    A Path holds one closed contour at most, so drawing after closePath is
    an error. The result is available from the `path` attribute.
    """

    def __init__(self, glyphSet=None):
        super().__init__(glyphSet)
        self._commands: List[PathCommand] = []
        self._closed = False

    @property
    def path(self) -> Path:
        return Path(tuple(self._commands), closed=self._closed)

    def _add(self, command: PathCommand):
        if self._closed:
            raise ValueError(f"Can't draw {command} after closePath")
        self._commands.append(command)

    def _moveTo(self, pt):
        self._add(MoveTo(Point(*pt)))

    def _lineTo(self, pt):
        self._add(LineTo(Point(*pt)))

    def _curveToOne(self, pt1, pt2, pt3):
        self._add(CubicTo(Point(*pt3), Point(*pt1), Point(*pt2)))

    def _qCurveToOne(self, pt1, pt2):
        self._add(QuadraticTo(Point(*pt2), Point(*pt1)))

    def _closePath(self):
        self._closed = True

    def _endPath(self):
        pass
