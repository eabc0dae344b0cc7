from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, TextIO

from .commands import DIGITS, RawLine
from .moves import golden_move, move
from .queries import busy_fields, free_fields, golden_possible
from .render import render
from .state import GameState, players

PROMPT_HELP = "Enter 'x y' to move, 'g x y' for the golden move, 'c' to pass, 'q' to quit."


def _status_line(state: GameState, player: int) -> str:
    line = f'PLAYER {player} BUSY_FIELDS {busy_fields(state, player)} FREE_FIELDS {free_fields(state, player)}'
    if golden_possible(state, player):
        line += ' GOLDEN_MOVE_AVAILABLE'
    return line


def _parse_coords(tokens: List[str]) -> Optional[List[int]]:
    if len(tokens) != 2 or not all(t and all(ch in DIGITS for ch in t) for t in tokens):
        return None
    return [int(t) for t in tokens]


def _next_entry(lines: Iterator[RawLine]) -> Optional[str]:
    try:
        return next(lines).text
    except StopIteration:
        return None


def play_turn(state: GameState, player: int, lines: Iterator[RawLine], out: TextIO) -> bool:
    """Prompts `player` until a legal move or a pass. Returns False when the game should end."""
    out.write(render(state) or '')
    print(_status_line(state, player), file=out)
    while True:
        print(PROMPT_HELP, file=out)
        text = _next_entry(lines)
        if text is None:
            return False
        tokens = text.split()
        if not tokens or tokens == ['c'] or tokens == ['C']:
            return True
        if tokens in (['q'], ['Q']):
            return False
        if tokens[0] in ('g', 'G'):
            coords = _parse_coords(tokens[1:])
            action = golden_move
        else:
            coords = _parse_coords(tokens)
            action = move
        if coords is None:
            print('Could not parse. Try again.', file=out)
            continue
        if action(state, player, coords[0], coords[1]):
            return True
        print('Illegal move. Try again.', file=out)


def print_summary(state: GameState, out: TextIO) -> None:
    out.write(render(state) or '')
    for player in range(1, players(state) + 1):
        print(f'PLAYER {player} OWNED_FIELDS {busy_fields(state, player)}', file=out)


def run_interactive(state: GameState, lines: Iterable[RawLine], out: TextIO) -> int:
    """
    Round-robin play driven by prompt lines.

    A player with no free field and no golden move is skipped; the game ends
    when a whole round skips everybody, on 'q', or at end of input.
    """
    source = iter(lines)
    running = True
    while running:
        someone_moved = False
        for player in range(1, players(state) + 1):
            if free_fields(state, player) == 0 and not golden_possible(state, player):
                continue
            someone_moved = True
            if not play_turn(state, player, source, out):
                running = False
                break
        if not someone_moved:
            running = False
    print_summary(state, out)
    return 0
