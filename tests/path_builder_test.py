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

from math import pi
import pytest
from vecpath.geometric_types import Point
from vecpath.path_builder import CommandBuilder, parse
from vecpath.path_commands import (
    ArcTo,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    QuadraticTo,
)
from vecpath.path_meta import MalformedPath, Reason
from vecpath.path_scanner import ScanToken


@pytest.mark.parametrize(
    "d, expected_commands, expected_closed",
    [
        (
            "M0,0 L10,10 Z",
            (MoveTo(Point(0, 0)), LineTo(Point(10, 10))),
            True,
        ),
        # bare pairs after a moveto are linetos
        (
            "M0,0 10,10 20,20",
            (MoveTo(Point(0, 0)), LineTo(Point(10, 10)), LineTo(Point(20, 20))),
            False,
        ),
        # relative moveto is from the origin, repeats are relative linetos
        (
            "m1,1 2,0 1,3",
            (MoveTo(Point(1, 1)), LineTo(Point(3, 1)), LineTo(Point(4, 4))),
            False,
        ),
        # H and V copy the other coordinate from the current point
        ("M0,0 H5", (MoveTo(Point(0, 0)), LineTo(Point(5, 0))), False),
        (
            "m2,2 h2 v2 h-1 v-1 H8 V8",
            (
                MoveTo(Point(2, 2)),
                LineTo(Point(4, 2)),
                LineTo(Point(4, 4)),
                LineTo(Point(3, 4)),
                LineTo(Point(3, 3)),
                LineTo(Point(8, 3)),
                LineTo(Point(8, 8)),
            ),
            False,
        ),
        (
            "m2,2 c1,-1 2,4 3,3 C4 4 5 5 6 6",
            (
                MoveTo(Point(2, 2)),
                CubicTo(Point(5, 5), Point(3, 1), Point(4, 6)),
                CubicTo(Point(6, 6), Point(4, 4), Point(5, 5)),
            ),
            False,
        ),
        (
            "m2,2 q1,1 2,0 Q5,5 6,6",
            (
                MoveTo(Point(2, 2)),
                QuadraticTo(Point(4, 2), Point(3, 3)),
                QuadraticTo(Point(6, 6), Point(5, 5)),
            ),
            False,
        ),
        # smooth cubic with nothing to reflect starts with no tangent
        (
            "M0,0 S5,5 10,0",
            (MoveTo(Point(0, 0)), CubicTo(Point(10, 0), Point(0, 0), Point(5, 5))),
            False,
        ),
        # smooth cubic reflects the previous second control point
        (
            "M0,0 C0,5 5,5 5,0 s5,-5 5,0",
            (
                MoveTo(Point(0, 0)),
                CubicTo(Point(5, 0), Point(0, 5), Point(5, 5)),
                CubicTo(Point(10, 0), Point(5, -5), Point(10, -5)),
            ),
            False,
        ),
        # reflection only follows a cubic; after a line it's the current point
        (
            "M0,0 C0,5 5,5 5,0 L10,0 S15,5 20,0",
            (
                MoveTo(Point(0, 0)),
                CubicTo(Point(5, 0), Point(0, 5), Point(5, 5)),
                LineTo(Point(10, 0)),
                CubicTo(Point(20, 0), Point(10, 0), Point(15, 5)),
            ),
            False,
        ),
        # smooth quadratic reflects the previous control point
        (
            "M0,0 Q5,5 10,0 T20,0",
            (
                MoveTo(Point(0, 0)),
                QuadraticTo(Point(10, 0), Point(5, 5)),
                QuadraticTo(Point(20, 0), Point(15, -5)),
            ),
            False,
        ),
        # chained T keeps reflecting
        (
            "M0,0 Q5,5 10,0 t10,0 10,0",
            (
                MoveTo(Point(0, 0)),
                QuadraticTo(Point(10, 0), Point(5, 5)),
                QuadraticTo(Point(20, 0), Point(15, -5)),
                QuadraticTo(Point(30, 0), Point(25, 5)),
            ),
            False,
        ),
        # T with no quadratic before it has its control on the current point,
        # which makes it a line
        (
            "M0,0 T10,0",
            (MoveTo(Point(0, 0)), LineTo(Point(10, 0))),
            False,
        ),
        # a cubic with each control on its end point is a line
        (
            "M0,0 C0,0 10,10 10,10",
            (MoveTo(Point(0, 0)), LineTo(Point(10, 10))),
            False,
        ),
        # controls on top of each other still bend the curve
        (
            "M0,0 C5,5 5,5 10,0",
            (MoveTo(Point(0, 0)), CubicTo(Point(10, 0), Point(5, 5), Point(5, 5))),
            False,
        ),
        # zero radius arc is a line
        (
            "M0,0 A0,0 0 0 1 10,10",
            (MoveTo(Point(0, 0)), LineTo(Point(10, 10))),
            False,
        ),
        # arc that ends where it starts is a line too
        (
            "M0,0 A5,5 0 1100,0",
            (MoveTo(Point(0, 0)), LineTo(Point(0, 0))),
            False,
        ),
        # repeated closepath is harmless
        ("M0,0 L1,1 z Z", (MoveTo(Point(0, 0)), LineTo(Point(1, 1))), True),
        # another moveto without closing keeps going
        (
            "M0,0 L1,1 M5,5 L6,6",
            (
                MoveTo(Point(0, 0)),
                LineTo(Point(1, 1)),
                MoveTo(Point(5, 5)),
                LineTo(Point(6, 6)),
            ),
            False,
        ),
    ],
)
def test_parse(d, expected_commands, expected_closed):
    path = parse(d)

    assert path.commands == expected_commands
    assert path.closed == expected_closed


@pytest.mark.parametrize(
    "d, expected",
    [
        # quarter circle about the origin, counter-clockwise on screen
        (
            "M-1,0 A1,1 0 0 0 0,1",
            ArcTo(Point(0, 1), Point(0, 0), pi, pi / 2, 1.0, False, False),
        ),
        # three quarters about (-1, 1)
        (
            "M-1,0 A1,1 0 1 0 0,1",
            ArcTo(Point(0, 1), Point(-1, 1), -pi / 2, 0.0, 1.0, False, True),
        ),
        # relative, with flags packed against the coordinates
        (
            "M-1,0 a1,1 0 011,-1",
            ArcTo(Point(0, -1), Point(0, 0), pi, -pi / 2, 1.0, True, False),
        ),
        # radius too small for the endpoints grows to half their distance
        (
            "M0,0 A1,1 0 0 1 10,0",
            ArcTo(Point(10, 0), Point(5, 0), pi, 0.0, 5.0, True, False),
        ),
        # x and y radii collapse to their mean
        (
            "M0,0 A4,6 30 0 1 10,0",
            ArcTo(Point(10, 0), Point(5, 0), pi, 0.0, 5.0, True, False),
        ),
    ],
)
def test_parse_arc(d, expected):
    path = parse(d)

    assert len(path) == 2
    arc = path[1]
    assert isinstance(arc, ArcTo)
    assert arc.almost_equals(expected), f"{arc} != {expected}"


def test_packed_arc_flags():
    arc = parse("M0,0 A5,5 0 1110,0")[1]

    assert isinstance(arc, ArcTo)
    assert arc.large_arc
    assert arc.clockwise
    assert arc.point == Point(10, 0)


def test_arc_sweep_matches_flags():
    # all four choices of the same endpoints and radius
    for large in (0, 1):
        for sweep in (0, 1):
            arc = parse(f"M0,0 A10,10 0 {large} {sweep} 10,0")[1]
            sweep_angle = arc.sweep_angle()
            assert (sweep_angle > 0) == bool(sweep)
            assert (abs(sweep_angle) > pi) == bool(large)
            assert arc.start_point().almost_equals(Point(0, 0))


@pytest.mark.parametrize(
    "d, reason, token_index",
    [
        ("L10,10", Reason.MISSING_INITIAL_MOVETO, 0),
        ("A3.996 3.996 0 0016 9", Reason.MISSING_INITIAL_MOVETO, 0),
        ("", Reason.MISSING_INITIAL_MOVETO, None),
        ("M0,0 L1,1 Z L2,2", Reason.COMMAND_AFTER_CLOSE, 3),
        ("M0,0 L1,1 Z M2,2", Reason.COMMAND_AFTER_CLOSE, 3),
    ],
)
def test_parse_errors(d, reason, token_index):
    with pytest.raises(MalformedPath) as e:
        parse(d)

    assert e.value.reason == reason
    assert e.value.token_index == token_index


def test_missing_moveto_message():
    with pytest.raises(MalformedPath, match="missing initial moveto"):
        parse("L1,1")


def test_parse_is_all_or_nothing():
    with pytest.raises(MalformedPath) as e:
        parse("M0,0 L1,1 L2,2 L3")

    assert e.value.reason == Reason.WRONG_ARGUMENT_COUNT


def test_builder_rejects_short_token():
    builder = CommandBuilder()
    builder.add(ScanToken("M", (0, 0), 0))

    with pytest.raises(MalformedPath) as e:
        builder.add(ScanToken("L", (1,), 5))

    assert e.value.reason == Reason.WRONG_ARGUMENT_COUNT
    assert e.value.offset == 5
    assert e.value.token_index == 1


def test_close_never_stored():
    path = parse("M0,0 L10,0 L10,10 z")

    assert not any(isinstance(cmd, ClosePath) for cmd in path)
    assert path == Path(
        (MoveTo(Point(0, 0)), LineTo(Point(10, 0)), LineTo(Point(10, 10))),
        closed=True,
    )
