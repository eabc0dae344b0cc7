from __future__ import annotations

from .board import EMPTY
from .moves import player_fields_around
from .state import GameState


def busy_fields(state: GameState, player: int) -> int:
    if not state.valid_player(player):
        return 0
    return state.player(player).busy_fields


def count_reachable_free_fields(state: GameState, player: int) -> int:
    """Empty cells touching at least one cell of `player`; full board scan."""
    board = state.board
    counter = 0
    for x, y in board.coords():
        if board.at(x, y) == EMPTY and player_fields_around(state, player, x, y):
            counter += 1
    return counter


def free_fields(state: GameState, player: int) -> int:
    """Cells available to the player's next normal move."""
    if not state.valid_player(player):
        return 0
    if state.player(player).areas < state.max_areas:
        return state.all_free_fields
    # At the area limit only cells extending an existing area are playable.
    return count_reachable_free_fields(state, player)


def golden_possible(state: GameState, player: int) -> bool:
    """True while the golden move is unused and some other player owns a cell."""
    if not state.valid_player(player):
        return False
    if state.player(player).golden_move_used:
        return False
    return any(
        state.stats[other].busy_fields > 0
        for other in range(1, state.num_players + 1)
        if other != player
    )
