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

"""Write Paths as canonical svg path data.

Canonical means absolute coordinates, a command letter in front of every
command and single spaces between arguments, e.g. "M0 0 L10 10 Z".
"""
from vecpath.path_commands import (
    ArcTo,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    QuadraticTo,
)
from vecpath.path_meta import ntos


def _segment(cmd: str, *args) -> str:
    return cmd + " ".join(ntos(a) for a in args)


def _arc_segment(arc: ArcTo) -> str:
    # circles have no x-axis-rotation worth writing
    return _segment(
        "A",
        arc.radius,
        arc.radius,
        0,
        int(arc.large_arc),
        int(arc.clockwise),
        *arc.point,
    )


_SEGMENT_WRITERS = {
    MoveTo: lambda cmd: _segment("M", *cmd.point),
    LineTo: lambda cmd: _segment("L", *cmd.point),
    QuadraticTo: lambda cmd: _segment("Q", *cmd.control, *cmd.point),
    CubicTo: lambda cmd: _segment("C", *cmd.control1, *cmd.control2, *cmd.point),
    ArcTo: _arc_segment,
}


def command_string(cmd: PathCommand) -> str:
    """The path data for a single command."""
    writer = _SEGMENT_WRITERS.get(type(cmd))
    if writer is None:
        raise ValueError(f"No path data for {cmd!r}")
    return writer(cmd)


def serialize(path: Path) -> str:
    parts = [command_string(cmd) for cmd in path]
    if path.closed:
        parts.append("Z")
    return " ".join(parts)
