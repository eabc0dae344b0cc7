from __future__ import annotations

from typing import List, Optional

from .board import EMPTY, Board
from .state import GameState


def number_of_digits(value: int) -> int:
    return len(str(value))


def _cell_token(owner: int) -> str:
    return '.' if owner == EMPTY else str(owner)


def standard_board(board: Board) -> str:
    """One character per cell; valid while every player id is a single digit."""
    lines: List[str] = []
    for y in range(board.height - 1, -1, -1):
        lines.append(''.join(_cell_token(board.at(x, y)) for x in range(board.width)))
    return ''.join(line + '\n' for line in lines)


def wide_board(board: Board, digits: int) -> str:
    """Fixed-width columns: each token left-aligned in `digits + 1` characters."""
    column = digits + 1
    lines: List[str] = []
    for y in range(board.height - 1, -1, -1):
        lines.append(''.join(_cell_token(board.at(x, y)).ljust(column) for x in range(board.width)))
    return ''.join(line + '\n' for line in lines)


def render(state: GameState) -> Optional[str]:
    """
    Text snapshot of the board, top row (highest y) first, '.' for empty cells.
    Returns None if the buffer cannot be allocated.
    """
    digits = number_of_digits(state.num_players)
    try:
        if digits == 1:
            return standard_board(state.board)
        return wide_board(state.board, digits)
    except MemoryError:
        return None
