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

"""Edit svg path data.

Usage:
vecpath --flip=horizontal --translate=10,0 icon.svg
<svg with every path rewritten dumped to stdout>

echo "m1,1 2,0 1,3z" | vecpath --scale=2,2
<canonical path data dumped to stdout>
"""
from absl import app
from absl import flags
from absl import logging
from lxml import etree  # pytype: disable=import-error
from typing import NamedTuple, Optional, Tuple
from vecpath.path_builder import parse
from vecpath.path_commands import Path
from vecpath import path_geometry
from vecpath.path_meta import MalformedPath, ntos
from vecpath.path_serializer import serialize
from vecpath.path_transform import Affine2D
import sys


FLAGS = flags.FLAGS


flags.DEFINE_string("translate", None, "Offset to move paths by, as dx,dy")
flags.DEFINE_string("scale", None, "Factors to scale paths by, as sx,sy")
flags.DEFINE_string("scale_origin", "0,0", "Point that stays put when scaling, x,y")
flags.DEFINE_enum(
    "flip", None, ["horizontal", "vertical"], "Mirror each path within its bounds"
)
flags.DEFINE_string("transform", None, "svg transform list to apply, e.g. rotate(90)")
flags.DEFINE_bool("bounds", False, "Print bounding extent instead of path data")
flags.DEFINE_string("output_file", "-", "Output file ('-' means stdout)")


class EditOptions(NamedTuple):
    translate: Optional[Tuple[float, float]] = None
    scale: Optional[Tuple[float, float]] = None
    scale_origin: Tuple[float, float] = (0.0, 0.0)
    flip: Optional[str] = None
    transform: Optional[Affine2D] = None


def _pair(flag_name: str, raw: Optional[str]) -> Optional[Tuple[float, float]]:
    if raw is None:
        return None
    parts = [p for p in raw.replace(",", " ").split() if p]
    if len(parts) != 2:
        raise app.UsageError(f"--{flag_name} wants two numbers, got {raw!r}")
    return float(parts[0]), float(parts[1])


def _transform(raw: Optional[str]) -> Optional[Affine2D]:
    if not raw:
        return None
    transform = Affine2D.fromstring(raw)
    if transform.is_degenerate():
        raise app.UsageError(f"--transform {raw!r} collapses paths to a line")
    logging.info("Applying %s", transform)
    return transform


def _options_from_flags() -> EditOptions:
    return EditOptions(
        translate=_pair("translate", FLAGS.translate),
        scale=_pair("scale", FLAGS.scale),
        scale_origin=_pair("scale_origin", FLAGS.scale_origin),
        flip=FLAGS.flip,
        transform=_transform(FLAGS.transform),
    )


def edit_path(path: Path, options: EditOptions) -> Path:
    if options.transform is not None:
        path = path_geometry.apply_transform(path, options.transform)
    if options.scale is not None:
        path = path_geometry.scale(path, *options.scale, origin=options.scale_origin)
    if options.translate is not None:
        path = path_geometry.translate(path, *options.translate)
    if options.flip is not None:
        bounds = path_geometry.bounding_rect(path)
        if options.flip == "horizontal":
            path = path_geometry.flip_horizontal(path, bounds)
        else:
            path = path_geometry.flip_vertical(path, bounds)
    return path


def describe_extent(path: Path) -> str:
    extent = path_geometry.bounding_extent(path)
    return " ".join(ntos(v) for pt in extent for v in pt)


def edit_path_data(d: str, options: EditOptions, bounds: bool = False) -> str:
    path = edit_path(parse(d), options)
    if bounds:
        return describe_extent(path)
    return serialize(path)


def edit_svg(tree: etree._ElementTree, options: EditOptions) -> int:
    """Rewrite the d of every <path> in tree; returns how many were rewritten."""
    count = 0
    for el in tree.iter("{*}path"):
        d = el.attrib.get("d")
        if not d:
            continue
        try:
            el.attrib["d"] = edit_path_data(d, options)
        except MalformedPath as e:
            logging.warning("Leaving path %s as is: %s", el.attrib.get("id", ""), e)
            continue
        count += 1
    return count


def _reduce_text(text):
    text = text.strip() if text else None
    return text if text else None


def _svg_output(tree, options) -> str:
    count = edit_svg(tree, options)
    logging.info("Rewrote %d path(s)", count)

    # lxml really likes to retain whitespace
    for e in tree.iter("*"):
        e.text = _reduce_text(e.text)
        e.tail = _reduce_text(e.tail)

    return etree.tostring(tree, pretty_print=True).decode("utf-8")


def _run(argv):
    try:
        input_file = argv[1]
    except IndexError:
        input_file = None

    options = _options_from_flags()

    if input_file and input_file.endswith(".svg"):
        if FLAGS.bounds:
            raise app.UsageError("--bounds needs path data, not an svg file")
        output = _svg_output(etree.parse(input_file), options)
    else:
        if input_file:
            with open(input_file) as f:
                d = f.read()
        else:
            d = sys.stdin.read()
        output = edit_path_data(d.strip(), options, bounds=FLAGS.bounds)

    if FLAGS.output_file == "-":
        print(output)
    else:
        with open(FLAGS.output_file, "w") as f:
            f.write(output)


def main(argv=None):
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run, argv=argv)


if __name__ == "__main__":
    main()
