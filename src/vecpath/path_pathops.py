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

"""Path <=> skia-pathops constructs."""
import pathops  # pytype: disable=import-error
from vecpath.geometric_types import Rect
from vecpath.path_commands import Path
from vecpath.path_pen import PathPen, emit


class _SkiaSink:
    """Receives emitted curves and draws them with skia's own verbs."""

    def __init__(self, sk_path: pathops.Path):
        self.sk_path = sk_path

    def moveTo(self, pt):
        self.sk_path.moveTo(*pt)

    def lineTo(self, pt):
        self.sk_path.lineTo(*pt)

    def curveTo(self, pt1, pt2, pt3):
        self.sk_path.cubicTo(*pt1, *pt2, *pt3)


def skia_path(path: Path) -> pathops.Path:
    sk_path = pathops.Path()
    emit(path, _SkiaSink(sk_path))
    if path.closed:
        sk_path.close()
    return sk_path


def from_skia_path(sk_path: pathops.Path) -> Path:
    """Read a single-contour skia path back as a Path of lines and curves."""
    pen = PathPen()
    sk_path.draw(pen)
    return pen.path


def skia_bounds(path: Path) -> Rect:
    """Bounds skia computes over every point it was given, controls included."""
    x1, y1, x2, y2 = skia_path(path).bounds
    return Rect(x1, y1, x2 - x1, y2 - y1)
