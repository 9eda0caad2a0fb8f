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

"""Path commands with absolute coordinates, and the Path that holds them.

Commands are immutable values; edits produce new commands and new Paths.
"""
import dataclasses
from itertools import zip_longest
from math import pi
from typing import Iterator, Optional, Sequence, Tuple
from vecpath.geometric_types import (
    DEFAULT_ALMOST_EQUAL_TOLERANCE,
    Point,
    Vector,
    almost_equal,
    almost_equal_angle,
)


TWO_PI = 2 * pi


@dataclasses.dataclass(frozen=True)
class PathCommand:
    def __post_init__(self):
        # point fields only ever hold Points, so geometry can't miss one
        for field in self._point_fields():
            value = getattr(self, field.name)
            if isinstance(value, Point):
                continue
            try:
                x, y = value
                value = Point(float(x), float(y))
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"{type(self).__name__}.{field.name} must be an (x, y) pair, "
                    f"not {value!r}"
                ) from e
            object.__setattr__(self, field.name, value)

    @classmethod
    def _point_fields(cls) -> Tuple[dataclasses.Field, ...]:
        return tuple(f for f in dataclasses.fields(cls) if f.type is Point)

    @property
    def has_point_value(self) -> bool:
        return True

    def points(self) -> Tuple[Point, ...]:
        """Every point-valued field, end point first."""
        return tuple(getattr(self, f.name) for f in self._point_fields())

    def map_points(self, fn) -> "PathCommand":
        """Return a copy with fn applied to every point-valued field."""
        return dataclasses.replace(
            self,
            **{f.name: Point(*fn(getattr(self, f.name))) for f in self._point_fields()},
        )

    def almost_equals(
        self, other: "PathCommand", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE
    ) -> bool:
        if type(self) is not type(other):
            return False
        for field in dataclasses.fields(self):
            l_value = getattr(self, field.name)
            r_value = getattr(other, field.name)
            if isinstance(l_value, Point):
                if not l_value.almost_equals(r_value, tolerance):
                    return False
            elif isinstance(l_value, bool):
                if l_value != r_value:
                    return False
            elif field.name.endswith("_angle"):
                if not almost_equal_angle(l_value, r_value, tolerance):
                    return False
            elif not almost_equal(l_value, r_value, tolerance):
                return False
        return True


# Sets the current position; first command of every Path
@dataclasses.dataclass(frozen=True)
class MoveTo(PathCommand):
    point: Point = Point()


# Straight segment from the current position
@dataclasses.dataclass(frozen=True)
class LineTo(PathCommand):
    point: Point = Point()


@dataclasses.dataclass(frozen=True)
class ArcTo(PathCommand):
    """Circular arc from the current position to point.

    Angles are in radians, measured from +x toward +y. Clockwise refers to
    a y-down canvas, matching the svg sweep-flag.
    """

    point: Point = Point()
    center: Point = Point()
    start_angle: float = 0.0
    end_angle: float = 0.0
    radius: float = 0.0
    clockwise: bool = False
    large_arc: bool = False

    def start_point(self) -> Point:
        return self.center + Vector.from_angle(self.start_angle, self.radius)

    def sweep_angle(self) -> float:
        """Signed angle swept, positive when clockwise."""
        delta = (self.end_angle - self.start_angle) % TWO_PI
        if self.clockwise:
            return delta
        return delta - TWO_PI if delta else 0.0


# Quadratic bezier from the current position
@dataclasses.dataclass(frozen=True)
class QuadraticTo(PathCommand):
    point: Point = Point()
    control: Point = Point()


# Cubic bezier from the current position
@dataclasses.dataclass(frozen=True)
class CubicTo(PathCommand):
    point: Point = Point()
    control1: Point = Point()
    control2: Point = Point()


# Marks closure while parsing; a Path records it as closed=True instead
@dataclasses.dataclass(frozen=True)
class ClosePath(PathCommand):
    @property
    def has_point_value(self) -> bool:
        return False


@dataclasses.dataclass(frozen=True)
class Path(Sequence[PathCommand]):
    """An ordered run of commands that starts with a MoveTo.

    closed means the path ends with a segment back to its first point.
    """

    commands: Tuple[PathCommand, ...] = ()
    closed: bool = False

    def __post_init__(self):
        commands = tuple(self.commands)
        object.__setattr__(self, "commands", commands)
        if commands and not isinstance(commands[0], MoveTo):
            raise ValueError(f"Path must start with MoveTo, not {commands[0]}")
        for cmd in commands:
            if not isinstance(cmd, PathCommand) or isinstance(cmd, ClosePath):
                raise ValueError(f"{cmd!r} can't be stored in a Path")

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index):
        return self.commands[index]

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def first_point(self) -> Optional[Point]:
        if not self.commands:
            return None
        return self.commands[0].point

    def _with_commands(self, commands) -> "Path":
        return dataclasses.replace(self, commands=tuple(commands))

    def insert(self, index: int, *commands: PathCommand) -> "Path":
        """Return a new Path with commands inserted before index."""
        new_commands = list(self.commands)
        new_commands[index:index] = commands
        return self._with_commands(new_commands)

    def remove(self, index: int) -> "Path":
        """Return a new Path without the command at index."""
        new_commands = list(self.commands)
        del new_commands[index]
        return self._with_commands(new_commands)

    def replace(self, index: int, command: PathCommand) -> "Path":
        """Return a new Path with the command at index swapped for command."""
        new_commands = list(self.commands)
        new_commands[index] = command
        return self._with_commands(new_commands)

    def almost_equals(self, other: "Path", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE):
        if self.closed != other.closed:
            return False
        for l_cmd, r_cmd in zip_longest(self, other):
            if l_cmd is None or r_cmd is None:
                return False
            if not l_cmd.almost_equals(r_cmd, tolerance):
                return False
        return True
