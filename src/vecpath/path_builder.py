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

"""Turns scanned path data into a Path of absolute commands."""
from math import atan2, fabs
from typing import List, Optional, Tuple
from absl import logging
from vecpath import path_meta
from vecpath.arc_to_cubic import CircularArc
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
from vecpath.path_meta import MalformedPath, Reason
from vecpath.path_scanner import PathScanner, ScanToken


def _relative_to_absolute(curr_pos: Point, cmd: str, args: Tuple[float, ...]):
    if cmd.isupper():
        return cmd, args
    x_coord_idxs, y_coord_idxs = path_meta.cmd_coords(cmd)
    args = list(args)  # we'd like to mutate 'em
    for x_coord_idx in x_coord_idxs:
        args[x_coord_idx] += curr_pos.x
    for y_coord_idx in y_coord_idxs:
        args[y_coord_idx] += curr_pos.y
    return cmd.upper(), tuple(args)


class CommandBuilder:
    """Accumulates tokens into commands, tracking the pen as it goes.

    Relative coordinates are made absolute, shorthand (H, V, S, T) is
    expanded and a closepath becomes the closed flag of the result.
    """

    def __init__(self):
        self._commands: List[PathCommand] = []
        self._curr_pos = Point()
        # only valid right after a C/S or Q/T respectively
        self._last_cubic_control: Optional[Point] = None
        self._last_quad_control: Optional[Point] = None
        self._closed = False
        self._token_count = 0
        self._handlers = {
            "M": self._moveto,
            "L": self._lineto,
            "H": self._horizontal,
            "V": self._vertical,
            "C": self._cubic,
            "S": self._smooth_cubic,
            "Q": self._quadratic,
            "T": self._smooth_quadratic,
            "A": self._arc,
            "Z": self._close,
        }

    def _fail(self, reason: Reason, token: ScanToken, detail=""):
        raise MalformedPath(reason, token.offset, self._token_count, detail)

    def add(self, token: ScanToken):
        if not self._commands and token.verb.upper() != "M":
            self._fail(Reason.MISSING_INITIAL_MOVETO, token)
        if self._closed and token.verb.upper() != "Z":
            self._fail(
                Reason.COMMAND_AFTER_CLOSE,
                token,
                "a path holds a single closed subpath",
            )
        if token.arg_count != path_meta.num_args(token.verb):
            self._fail(Reason.WRONG_ARGUMENT_COUNT, token)

        cmd, args = _relative_to_absolute(self._curr_pos, token.verb, token.args)
        last_cubic_control = self._last_cubic_control
        last_quad_control = self._last_quad_control
        self._last_cubic_control = self._last_quad_control = None

        self._handlers[cmd](args, last_cubic_control, last_quad_control)
        self._token_count += 1

    def _append(self, command: PathCommand):
        self._commands.append(command)
        self._curr_pos = command.point

    def _straight_line(self, end: Point, why: str):
        logging.debug("Degenerate %s to %s drawn as a line", why, end)
        self._append(LineTo(end))

    def _moveto(self, args, *_):
        self._append(MoveTo(Point(*args)))

    def _lineto(self, args, *_):
        self._append(LineTo(Point(*args)))

    def _horizontal(self, args, *_):
        self._append(LineTo(Point(args[0], self._curr_pos.y)))

    def _vertical(self, args, *_):
        self._append(LineTo(Point(self._curr_pos.x, args[0])))

    def _add_cubic(self, control1: Point, control2: Point, end: Point):
        """Append a cubic, or a LineTo if it is degenerate.

        Degenerate means control1 sits on the start and control2 on the end.
        Controls that merely coincide with each other still bend the curve.
        """
        self._last_cubic_control = control2
        if control1 == self._curr_pos and control2 == end:
            self._straight_line(end, "cubic")
        else:
            self._append(CubicTo(end, control1, control2))

    def _cubic(self, args, *_):
        x1, y1, x2, y2, x, y = args
        self._add_cubic(Point(x1, y1), Point(x2, y2), Point(x, y))

    def _smooth_cubic(self, args, last_cubic_control, _):
        x2, y2, x, y = args
        control1 = self._curr_pos
        if last_cubic_control is not None:
            control1 = last_cubic_control.reflect(self._curr_pos)
        self._add_cubic(control1, Point(x2, y2), Point(x, y))

    def _add_quadratic(self, control: Point, end: Point):
        self._last_quad_control = control
        if control == self._curr_pos or control == end:
            self._straight_line(end, "quadratic")
        else:
            self._append(QuadraticTo(end, control))

    def _quadratic(self, args, *_):
        x1, y1, x, y = args
        self._add_quadratic(Point(x1, y1), Point(x, y))

    def _smooth_quadratic(self, args, _, last_quad_control):
        control = self._curr_pos
        if last_quad_control is not None:
            control = last_quad_control.reflect(self._curr_pos)
        self._add_quadratic(control, Point(*args))

    def _arc(self, args, *_):
        rx, ry, _rotation, large, sweep, x, y = args
        end = Point(x, y)
        # circles only; an ellipse becomes the circle of its mean radius
        arc = CircularArc(
            self._curr_pos, (fabs(rx) + fabs(ry)) / 2, int(large), int(sweep), end
        )
        if arc.is_straight_line() or arc.is_zero_length():
            self._straight_line(end, "arc")
            return

        arc = arc.correct_out_of_range_radius()
        params = arc.end_to_center_parametrization()
        center = params.center_point
        end_angle = atan2(end.y - center.y, end.x - center.x)
        self._append(
            ArcTo(
                end,
                center,
                params.theta1,
                end_angle,
                arc.radius,
                bool(sweep),
                bool(large),
            )
        )

    def _close(self, *_):
        self._closed = True

    def build(self) -> Path:
        if not self._commands:
            raise MalformedPath(Reason.MISSING_INITIAL_MOVETO, 0)
        return Path(tuple(self._commands), closed=self._closed)


def parse(d: str) -> Path:
    """Parse svg path data into a Path.

    Raises MalformedPath on the first problem; nothing is returned for
    partially valid input.
    """
    builder = CommandBuilder()
    for token in PathScanner(d):
        builder.add(token)
    return builder.build()
