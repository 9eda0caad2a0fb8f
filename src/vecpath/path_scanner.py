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

"""Lexer for svg path data, e.g. the d attribute of a <path>."""
import re
from typing import Generator, NamedTuple, Optional, Tuple
from vecpath import path_meta
from vecpath.path_meta import MalformedPath, Reason


_SEPARATORS = frozenset(" \t\r\n\f,")
_FLOAT_RE = re.compile(
    r"[-+]?"  # optional sign
    r"(?:"
    r"[0-9]+(?:\.[0-9]*)?"  # int or float, trailing dot allowed
    r"|"
    r"\.[0-9]+"  # float with leading dot (e.g. '.42')
    r")"
    r"(?:[eE][-+]?[0-9]+)?"  # optional scientific notiation
)
_NUMBER_START = frozenset("+-.0123456789")
_FLAG_CHARS = {"0": 0, "1": 1}


class ScanToken(NamedTuple):
    verb: str
    args: Tuple[float, ...]
    offset: int

    @property
    def arg_count(self) -> int:
        return len(self.args)

    @property
    def relative(self) -> bool:
        return self.verb.islower()


class PathScanner:
    """Reads one command at a time from path data.

    A numeral where a command letter is expected repeats the previous
    command (moveto repeats as lineto). The scanner can't be rewound;
    make a new one to start over.
    """

    def __init__(self, d: str):
        self.d = d
        self._pos = 0
        self._last_verb: Optional[str] = None

    @property
    def position(self) -> int:
        return self._pos

    def _skip_separators(self):
        d = self.d
        while self._pos < len(d) and d[self._pos] in _SEPARATORS:
            self._pos += 1

    def _at_end(self) -> bool:
        return self._pos >= len(self.d)

    def _check_more_args(self, verb: str, i: int):
        # running into the end or the next command means we came up short
        if self._at_end() or path_meta.is_cmd(self.d[self._pos]):
            raise MalformedPath(
                Reason.WRONG_ARGUMENT_COUNT,
                self._pos,
                detail=f"'{verb}' needs {path_meta.num_args(verb)} args, got {i}",
            )

    def _read_flag(self, verb: str, i: int) -> int:
        self._skip_separators()
        self._check_more_args(verb, i)
        c = self.d[self._pos]
        if c not in _FLAG_CHARS:
            raise MalformedPath(
                Reason.UNEXPECTED_CHARACTER,
                self._pos,
                detail=f"arc flag must be 0 or 1, not {c!r}",
            )
        self._pos += 1
        return _FLAG_CHARS[c]

    def _read_number(self, verb: str, i: int) -> float:
        self._skip_separators()
        self._check_more_args(verb, i)
        start = self._pos
        m = _FLOAT_RE.match(self.d, start)
        if not m:
            reason = Reason.UNEXPECTED_CHARACTER
            if self.d[start] in _NUMBER_START:
                reason = Reason.UNTERMINATED_NUMBER
            raise MalformedPath(
                reason, start, detail=f"invalid argument #{i} for '{verb}'"
            )
        end = m.end()
        # '1e' or '2E+' is a number whose exponent never arrived
        if end < len(self.d) and self.d[end] in "eE":
            raise MalformedPath(Reason.UNTERMINATED_NUMBER, start)
        self._pos = end
        return float(m.group())

    def _read_args(self, verb: str) -> Tuple[float, ...]:
        args = []
        for i in range(path_meta.num_args(verb)):
            if verb in "aA" and i in path_meta.ARC_FLAG_INDICES:
                args.append(self._read_flag(verb, i))
            else:
                args.append(self._read_number(verb, i))
        assert len(args) <= path_meta.MAX_ARG_COUNT
        return tuple(args)

    def next_token(self) -> Optional[ScanToken]:
        """Return the next token, or None at the end of the path data.

        Raises MalformedPath when the path data can't be read.
        """
        self._skip_separators()
        if self._at_end():
            return None

        offset = self._pos
        c = self.d[offset]
        if path_meta.is_cmd(c):
            verb = c
            self._pos += 1
        elif c in _NUMBER_START:
            if self._last_verb is None:
                raise MalformedPath(Reason.MISSING_INITIAL_MOVETO, offset)
            if path_meta.num_args(self._last_verb) == 0:
                raise MalformedPath(
                    Reason.UNEXPECTED_CHARACTER,
                    offset,
                    detail=f"'{self._last_verb}' takes no arguments",
                )
            verb = path_meta.implicit_repeat(self._last_verb)
        else:
            raise MalformedPath(Reason.UNEXPECTED_CHARACTER, offset, detail=repr(c))

        args = self._read_args(verb)
        # the next bare set of args after a moveto is a lineto
        self._last_verb = path_meta.implicit_repeat(verb)
        return ScanToken(verb, args, offset)

    def __iter__(self) -> Generator[ScanToken, None, None]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def scan_path(d: str) -> Generator[ScanToken, None, None]:
    """Yields ScanTokens for svg path data.

    Repeated args are reported as separate tokens, so "M1,1 2,2 3,3"
    yields M, L and L.
    """
    yield from PathScanner(d)
