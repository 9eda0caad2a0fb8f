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

import pytest
from vecpath import path_pathops
from vecpath.path_builder import parse
from vecpath.path_geometry import bounding_rect


def _round(pt, digits):
    return tuple(round(v, digits) for v in pt)


@pytest.mark.parametrize(
    "d, expected_segments",
    [
        (
            "M1,1 2,2",
            (
                ("moveTo", ((1.0, 1.0),)),
                ("lineTo", ((2.0, 2.0),)),
                ("endPath", ()),
            ),
        ),
        (
            "M0,15 C0,20 10,20 10,15",
            (
                ("moveTo", ((0.0, 15.0),)),
                ("curveTo", ((0.0, 20.0), (10.0, 20.0), (10.0, 15.0))),
                ("endPath", ()),
            ),
        ),
        (
            "M-1,0 A1,1 0 0 0 0,1",
            (
                ("moveTo", ((-1.0, 0.0),)),
                ("curveTo", ((-1.0, 0.5523), (-0.5523, 1.0), (0.0, 1.0))),
                ("endPath", ()),
            ),
        ),
    ],
)
def test_skia_path(d, expected_segments):
    segments = tuple(
        (cmd, tuple(_round(pt, 4) for pt in points))
        for cmd, points in path_pathops.skia_path(parse(d)).segments
    )
    assert segments == expected_segments


def test_skia_path_closes():
    segments = list(path_pathops.skia_path(parse("M0,0 L10,0 L10,10 Z")).segments)

    assert segments[0] == ("moveTo", ((0.0, 0.0),))
    assert segments[-1] == ("closePath", ())


def test_from_skia_path():
    path = parse("M0,0 L10,0 C10,5 5,10 0,10")

    assert path_pathops.from_skia_path(path_pathops.skia_path(path)) == path


def test_from_skia_path_keeps_closed():
    path = parse("M0,0 L10,0 L10,10 Z")

    assert path_pathops.from_skia_path(path_pathops.skia_path(path)).closed


@pytest.mark.parametrize(
    "d",
    [
        "M0,0 L10,10 Z",
        "M0,0 Q5,5 10,0 t10,0 10,0",
        "M-1,0 A1,1 0 1 0 0,1 a2,2 0 0,1 4,0 L4,-3 z",
        "M10,10 A5,5 0 1110,20 A5,5 0 0 1 10,10 Z",
    ],
)
def test_skia_bounds_within_bounding_rect(d):
    path = parse(d)
    ours = bounding_rect(path)
    skias = path_pathops.skia_bounds(path)

    # skia works in float32
    assert ours.contains((skias.x, skias.y), tolerance=1e-4)
    assert ours.contains((skias.x + skias.w, skias.y + skias.h), tolerance=1e-4)
