from __future__ import annotations

from .board import EMPTY, Owner
from .state import GameState
from .traversal import count_adjacent_new_areas, new_visited_mask


def player_fields_around(state: GameState, player: Owner, x: int, y: int) -> bool:
    """True when (x, y) touches at least one cell owned by `player`."""
    board = state.board
    return any(board.at(nx, ny) == player for nx, ny in board.neighbors(x, y))


def connected_areas(state: GameState, player: Owner, x: int, y: int) -> int:
    """Number of distinct areas of `player` that a token at (x, y) would join."""
    return count_adjacent_new_areas(state.board, player, x, y, new_visited_mask(state.board))


def split_area_count(state: GameState, owner: Owner, x: int, y: int) -> int:
    """
    Number of areas of `owner` left around (x, y) once the cell is taken away.
    The cell is emptied for the count and restored before returning.
    Returns 0 for out-of-bounds coordinates.
    """
    if not state.valid_cell(x, y):
        return 0
    board = state.board
    previous = board.at(x, y)
    board.put(x, y, EMPTY)
    try:
        return connected_areas(state, owner, x, y)
    finally:
        board.put(x, y, previous)


def _would_exceed_limit(state: GameState, player: Owner, x: int, y: int) -> bool:
    # Founding a new area is the only way a placement can raise the area count.
    return (not player_fields_around(state, player, x, y)
            and state.player(player).areas == state.max_areas)


def _claim(state: GameState, player: Owner, x: int, y: int) -> None:
    """Area and busy-field accounting for `player` taking (x, y); writes the cell last."""
    stats = state.player(player)
    if not player_fields_around(state, player, x, y):
        stats.areas += 1
    else:
        stats.areas += 1 - connected_areas(state, player, x, y)
    stats.busy_fields += 1
    state.board.put(x, y, player)


def move(state: GameState, player: int, x: int, y: int) -> bool:
    """Places a token of `player` on the empty cell (x, y). Returns False and leaves the state untouched if illegal."""
    if not state.valid_player(player) or not state.valid_cell(x, y):
        return False
    if state.board.at(x, y) != EMPTY:
        return False
    if _would_exceed_limit(state, player, x, y):
        return False
    _claim(state, player, x, y)
    state.all_free_fields -= 1
    return True


def golden_move(state: GameState, player: int, x: int, y: int) -> bool:
    """
    Takes over the opponent cell (x, y) for `player`, once per game.

    Rejected when the golden move is spent, the cell is empty or already the
    player's, the player would found an area beyond the limit, or the
    dispossessed owner would be split into more than max_areas areas.
    """
    if not state.valid_player(player) or not state.valid_cell(x, y):
        return False
    owner = state.board.at(x, y)
    if state.player(player).golden_move_used:
        return False
    if owner == EMPTY or owner == player:
        return False
    if _would_exceed_limit(state, player, x, y):
        return False
    split = split_area_count(state, owner, x, y)
    owner_stats = state.player(owner)
    if owner_stats.areas + split - 1 > state.max_areas:
        return False

    _claim(state, player, x, y)
    # split == 0 means the cell was a whole area by itself, which now disappears.
    owner_stats.areas += split - 1
    owner_stats.busy_fields -= 1
    state.player(player).golden_move_used = True
    return True
