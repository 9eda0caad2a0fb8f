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

from vecpath.geometric_types import MinMax, Point, Rect, Vector
from vecpath.path_builder import parse
from vecpath.path_commands import (
    ArcTo,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    QuadraticTo,
)
from vecpath.path_geometry import (
    apply_transform,
    bounding_extent,
    bounding_rect,
    flip_horizontal,
    flip_vertical,
    scale,
    translate,
)
from vecpath.path_meta import MalformedPath, Reason
from vecpath.path_pen import PathPen, emit
from vecpath.path_serializer import serialize
