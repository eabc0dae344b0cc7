from __future__ import annotations

from typing import Iterable, TextIO

from .commands import Command, Mode, RawLine, parse_line
from .errors import CommandError
from .moves import golden_move, move
from .queries import busy_fields, free_fields, golden_possible
from .render import render
from .state import GameState


def execute(state: GameState, command: Command) -> str:
    """Runs one batch command and returns its answer text (newline-terminated)."""
    name, args = command.name, command.args
    if name == 'p':
        board = render(state)
        return board if board is not None else '0\n'
    if name == 'm':
        answer = int(move(state, *args))
    elif name == 'g':
        answer = int(golden_move(state, *args))
    elif name == 'b':
        answer = busy_fields(state, args[0])
    elif name == 'f':
        answer = free_fields(state, args[0])
    elif name == 'q':
        answer = int(golden_possible(state, args[0]))
    else:
        raise CommandError(command.line, f'{name} is not a batch command')
    return f'{answer}\n'


def run_batch(state: GameState, lines: Iterable[RawLine], out: TextIO, err: TextIO) -> int:
    """Answers every command on `out`; malformed lines are reported as ERROR <line> on `err`."""
    for raw in lines:
        try:
            command = parse_line(raw, Mode.BATCH)
        except CommandError as exc:
            print(exc.report(), file=err)
            continue
        if command is None:
            continue
        out.write(execute(state, command))
    return 0
