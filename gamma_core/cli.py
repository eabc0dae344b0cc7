from __future__ import annotations

import argparse
import io
import sys
from typing import BinaryIO, Iterator, List, Optional, TextIO, Tuple

from .batch import run_batch
from .commands import Command, Mode, RawLine, parse_line, read_lines
from .errors import CommandError
from .interactive import run_interactive
from .state import GameState, create, destroy


def start_game(lines: Iterator[RawLine], err: TextIO) -> Optional[Tuple[Command, GameState]]:
    """Consumes lines until a B/I command creates a game. Returns None at end of input."""
    for raw in lines:
        try:
            command = parse_line(raw, Mode.FIRST)
        except CommandError as exc:
            print(exc.report(), file=err)
            continue
        if command is None:
            continue
        state = create(*command.args)
        if state is None:
            print(f'ERROR {command.line}', file=err)
            continue
        return command, state
    return None


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    lines = read_lines(stdin)
    started = start_game(lines, stderr)
    if started is None:
        return 0
    command, state = started
    try:
        if command.name == 'B':
            print(f'OK {command.line}', file=stdout)
            return run_batch(state, lines, stdout, stderr)
        return run_interactive(state, lines, stdout)
    finally:
        destroy(state)


def text_input(binary: BinaryIO) -> TextIO:
    """Decodes a byte stream leniently; undecodable bytes become U+FFFD and fail parsing as non-digits."""
    return io.TextIOWrapper(binary, encoding='utf-8', errors='replace')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Gamma territory game: batch and interactive modes')
    parser.add_argument('--input', default=None, help='Read commands from this file instead of stdin')
    args = parser.parse_args(argv)

    if args.input is None:
        code = run(text_input(sys.stdin.buffer), sys.stdout, sys.stderr)
    else:
        with open(args.input, 'rb') as fh:
            code = run(text_input(fh), sys.stdout, sys.stderr)
    sys.exit(code)
