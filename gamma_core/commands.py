from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .errors import CommandError
from .state import UINT32_MAX

WHITESPACE = ' \t\v\f\r'
DIGITS = '0123456789'

# Number of numeric arguments each command takes.
ARITY: Dict[str, int] = {
    'B': 4,
    'I': 4,
    'm': 3,
    'g': 3,
    'b': 1,
    'f': 1,
    'q': 1,
    'p': 0,
}


class Mode(enum.Enum):
    """Which command names a line may start with."""
    FIRST = 'BI'
    BATCH = 'mgbfqp'

    def accepts(self, name: str) -> bool:
        return name in self.value


@dataclass(frozen=True)
class RawLine:
    number: int  # 1-based, counts every physical line of the input
    text: str  # without the trailing newline
    terminated: bool  # False for a final line cut off by EOF


@dataclass(frozen=True)
class Command:
    name: str
    args: Tuple[int, ...]
    line: int


def read_lines(stream: Iterable[str], start: int = 0) -> Iterator[RawLine]:
    """Splits a text stream into numbered lines; `start` is the number of lines already consumed."""
    number = start
    for chunk in stream:
        number += 1
        terminated = chunk.endswith('\n')
        yield RawLine(number=number, text=chunk[:-1] if terminated else chunk, terminated=terminated)


def _is_skippable(text: str) -> bool:
    return text == '' or text.startswith('#')


def parse_line(raw: RawLine, mode: Mode) -> Optional[Command]:
    """
    Parses one input line. Returns None for blank lines and comments.

    Raises CommandError when the line is cut off by EOF, starts with a name
    the mode does not accept, is not `<name>[<ws><number>...]`, holds a
    number above 2**32 - 1 or has the wrong number of arguments.
    """
    text = raw.text
    if _is_skippable(text):
        return None
    if not raw.terminated:
        raise CommandError(raw.number, 'unexpected end of input')
    name = text[0]
    if not mode.accepts(name):
        raise CommandError(raw.number, f'unknown command {name!r}')
    rest = text[1:]
    if rest and rest[0] not in WHITESPACE:
        raise CommandError(raw.number, 'command name must be followed by whitespace')
    if any(ch not in DIGITS and ch not in WHITESPACE for ch in rest):
        raise CommandError(raw.number, 'arguments must be unsigned decimal numbers')
    args = tuple(int(tok) for tok in rest.split())
    if any(a > UINT32_MAX for a in args):
        raise CommandError(raw.number, 'argument out of range')
    if len(args) != ARITY[name]:
        raise CommandError(raw.number, f'{name} takes {ARITY[name]} arguments')
    return Command(name=name, args=args, line=raw.number)
