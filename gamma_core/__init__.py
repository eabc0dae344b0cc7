"""
Gamma core Python package.

Engine for the gamma territory game plus its thin text front ends.
Modules:
- board.py: Board, Cell, Owner
- traversal.py: breadth-first area discovery shared by merge and split counting
- state.py: GameState, PlayerStats, create/destroy
- moves.py: move, golden_move
- queries.py, render.py: read-only views
- commands.py, batch.py, interactive.py, cli.py: line-based front ends
"""
from .board import Board, Cell, Owner
from .moves import golden_move, move, split_area_count
from .queries import busy_fields, free_fields, golden_possible
from .render import render
from .state import GameState, PlayerStats, create, destroy, height, players, width

__all__ = [
    'Board',
    'Cell',
    'Owner',
    'GameState',
    'PlayerStats',
    'create',
    'destroy',
    'move',
    'golden_move',
    'split_area_count',
    'busy_fields',
    'free_fields',
    'golden_possible',
    'render',
    'players',
    'width',
    'height',
]
