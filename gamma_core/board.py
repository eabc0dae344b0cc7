from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

Owner = int  # 0 == empty, else player id
Cell = Tuple[int, int]  # (x, y)

EMPTY: Owner = 0


@dataclass
class Board:
    """Rectangular grid of cell owners stored as one flat row-major buffer."""
    width: int
    height: int
    cells: List[Owner] = field(default_factory=list)  # length == width * height

    @classmethod
    def empty(cls, width: int, height: int) -> 'Board':
        return cls(width=width, height=height, cells=[EMPTY] * (width * height))

    def index(self, x: int, y: int) -> int:
        """Calculates the flat index for a given column and row."""
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Owner:
        return self.cells[self.index(x, y)]

    def put(self, x: int, y: int, owner: Owner) -> None:
        self.cells[self.index(x, y)] = owner

    def coords(self) -> Iterable[Cell]:
        """Iterates over all coordinates on the board, column-major like the original x/y loops."""
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y)

    def neighbors(self, x: int, y: int) -> List[Cell]:
        """In-bounds orthogonal neighbours in left, right, down, up order (no wrap-around)."""
        out: List[Cell] = []
        if x > 0:
            out.append((x - 1, y))
        if x + 1 < self.width:
            out.append((x + 1, y))
        if y > 0:
            out.append((x, y - 1))
        if y + 1 < self.height:
            out.append((x, y + 1))
        return out
