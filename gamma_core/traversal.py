from __future__ import annotations

from collections import deque
from typing import Deque

from .board import Board, Cell, Owner


def new_visited_mask(board: Board) -> bytearray:
    """Fresh board-sized mask, one byte per cell, indexed like Board.cells."""
    return bytearray(board.width * board.height)


def flood_mark(board: Board, owner: Owner, start: Cell, visited: bytearray) -> None:
    """
    Marks every cell of the area containing `start` in `visited`.
    Breadth-first over 4-neighbours owned by `owner`; the start cell is marked unconditionally.
    """
    queue: Deque[Cell] = deque([start])
    visited[board.index(*start)] = 1
    while queue:
        x, y = queue.popleft()
        for nx, ny in board.neighbors(x, y):
            idx = board.index(nx, ny)
            if not visited[idx] and board.cells[idx] == owner:
                visited[idx] = 1
                queue.append((nx, ny))


def count_adjacent_new_areas(board: Board, owner: Owner, x: int, y: int, visited: bytearray) -> int:
    """
    Counts the distinct areas of `owner` touching (x, y).
    Each unvisited neighbour owned by `owner` opens a new area and is flooded at once,
    so later neighbours in the same area are not counted twice. Returns 0..4.
    """
    counter = 0
    for nx, ny in board.neighbors(x, y):
        idx = board.index(nx, ny)
        if not visited[idx] and board.cells[idx] == owner:
            flood_mark(board, owner, (nx, ny), visited)
            counter += 1
    return counter


def count_components(board: Board, owner: Owner) -> int:
    """Full-board recount of the areas of `owner`; O(width * height)."""
    visited = new_visited_mask(board)
    components = 0
    for x, y in board.coords():
        idx = board.index(x, y)
        if not visited[idx] and board.cells[idx] == owner:
            flood_mark(board, owner, (x, y), visited)
            components += 1
    return components
