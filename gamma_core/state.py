from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, Owner

UINT32_MAX = 2 ** 32 - 1
MAX_FIELDS = UINT32_MAX  # hard cap on width * height


@dataclass
class PlayerStats:
    """Per-player aggregates kept in step with the board by the move engine."""
    busy_fields: int = 0
    areas: int = 0
    golden_move_used: bool = False


@dataclass
class GameState:
    """
    Mutable game state: the board, one PlayerStats per player and the global free-field tally.

    `stats` is indexed by player id; slot 0 is an unused placeholder so that
    stats[p] is player p for p in 1..num_players.
    """
    board: Board
    num_players: int
    max_areas: int
    all_free_fields: int
    stats: List[PlayerStats] = field(default_factory=list)

    def valid_player(self, player: int) -> bool:
        return isinstance(player, int) and 1 <= player <= self.num_players

    def valid_cell(self, x: int, y: int) -> bool:
        return isinstance(x, int) and isinstance(y, int) and self.board.in_bounds(x, y)

    def player(self, player: int) -> PlayerStats:
        return self.stats[player]

    def owner_at(self, x: int, y: int) -> Owner:
        """Owner of (x, y), 0 when empty or out of bounds."""
        if not self.valid_cell(x, y):
            return 0
        return self.board.at(x, y)

    def areas(self, player: int) -> int:
        if not self.valid_player(player):
            return 0
        return self.stats[player].areas


def _is_uint32(value: int) -> bool:
    return isinstance(value, int) and 0 <= value <= UINT32_MAX


def create(width: int, height: int, players: int, max_areas: int) -> Optional[GameState]:
    """Creates an empty game, or None for zero/out-of-range parameters, oversized boards or MemoryError."""
    params = (width, height, players, max_areas)
    if not all(_is_uint32(v) and v > 0 for v in params):
        return None
    if width * height > MAX_FIELDS:
        return None
    try:
        board = Board.empty(width, height)
        stats = [PlayerStats() for _ in range(players + 1)]
    except MemoryError:
        return None
    return GameState(
        board=board,
        num_players=players,
        max_areas=max_areas,
        all_free_fields=width * height,
        stats=stats,
    )


def destroy(state: Optional[GameState]) -> None:
    """Releases the board and per-player tables; safe on None and on an already destroyed state."""
    if state is None:
        return
    state.board = Board(width=0, height=0, cells=[])
    state.stats = []
    state.num_players = 0
    state.all_free_fields = 0


def players(state: GameState) -> int:
    return state.num_players


def width(state: GameState) -> int:
    return state.board.width


def height(state: GameState) -> int:
    return state.board.height
