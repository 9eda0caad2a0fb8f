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

"""Tables describing the path data grammar, and its error type.

https://www.w3.org/TR/SVG11/paths.html#PathData
"""
import enum
from typing import Optional, Tuple


# Sized for the arc command, the longest
MAX_ARG_COUNT = 7

_CMD_ARGS = {
    "m": 2,
    "z": 0,
    "l": 2,
    "h": 1,
    "v": 1,
    "c": 6,
    "s": 4,
    "q": 4,
    "t": 2,
    "a": 7,
}
_CMD_ARGS.update({k.upper(): v for k, v in _CMD_ARGS.items()})

# For each command iterable of x-coords and iterable of y-coords
# Helpful if you want to adjust them
_CMD_COORDS = {
    "m": ((0,), (1,)),
    "z": ((), ()),
    "l": ((0,), (1,)),
    "h": ((0,), ()),
    "v": ((), (0,)),
    "c": ((0, 2, 4), (1, 3, 5)),
    "s": ((0, 2), (1, 3)),
    "q": ((0, 2), (1, 3)),
    "t": ((0,), (1,)),
    "a": ((5,), (6,)),
}
_CMD_COORDS.update({k.upper(): v for k, v in _CMD_COORDS.items()})

# Argument positions of the arc's large-arc-flag and sweep-flag, which
# are single characters and need no separator after them.
ARC_FLAG_INDICES = (3, 4)

# https://www.w3.org/TR/SVG11/paths.html#PathDataMovetoCommands
# If a moveto is followed by multiple pairs of coordinates,
# the subsequent pairs are treated as implicit lineto commands
_IMPLICIT_REPEAT_CMD = {"m": "l", "M": "L"}


class Reason(enum.Enum):
    UNEXPECTED_CHARACTER = "unexpected character"
    WRONG_ARGUMENT_COUNT = "wrong argument count"
    MISSING_INITIAL_MOVETO = "missing initial moveto"
    UNTERMINATED_NUMBER = "unterminated number"
    COMMAND_AFTER_CLOSE = "command after closepath"


class MalformedPath(ValueError):
    """Path data that can't be parsed.

    Attributes:
        reason: a Reason tag.
        offset: character offset into the path data where the problem was found.
        token_index: index of the offending command token, when the problem was
            found after scanning it.
    """

    def __init__(
        self,
        reason: Reason,
        offset: int,
        token_index: Optional[int] = None,
        detail: str = "",
    ):
        self.reason = reason
        self.offset = offset
        self.token_index = token_index
        message = f"{reason.value} at offset {offset}"
        if token_index is not None:
            message += f" (command #{token_index})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


def is_cmd(c: str) -> bool:
    return c in _CMD_ARGS


def num_args(cmd: str) -> int:
    if not cmd in _CMD_ARGS:
        raise ValueError(f'Invalid svg command "{cmd}"')
    return _CMD_ARGS[cmd]


def cmd_coords(cmd: str) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    if not cmd in _CMD_ARGS:
        raise ValueError(f'Invalid svg command "{cmd}"')
    return _CMD_COORDS[cmd]


def implicit_repeat(cmd: str) -> str:
    return _IMPLICIT_REPEAT_CMD.get(cmd, cmd)


def ntos(n: float) -> str:
    # strip superflous .0 decimals
    return str(int(n)) if isinstance(n, float) and n.is_integer() else str(n)
