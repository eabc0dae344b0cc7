from __future__ import annotations

# Facade module that re-exports the gamma engine API.
# Front ends and tests import from here; single-responsibility modules live under gamma_core/*.

from gamma_core.board import Board, Cell, Owner, EMPTY
from gamma_core.state import (
    GameState,
    PlayerStats,
    MAX_FIELDS,
    UINT32_MAX,
    create,
    destroy,
    players,
    width,
    height,
)
from gamma_core.traversal import (
    new_visited_mask,
    flood_mark,
    count_adjacent_new_areas,
    count_components,
)
from gamma_core.moves import (
    player_fields_around,
    connected_areas,
    split_area_count,
    move,
    golden_move,
)
from gamma_core.queries import (
    busy_fields,
    free_fields,
    golden_possible,
    count_reachable_free_fields,
)
from gamma_core.render import render
from gamma_core.commands import Command, Mode, RawLine, parse_line, read_lines
from gamma_core.errors import CommandError
from gamma_core.batch import run_batch
from gamma_core.interactive import run_interactive
from gamma_core.cli import main, run, text_input


if __name__ == '__main__':
    main()
