from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


Coord = Tuple[int, int]  # row, col indexes


class CellKind(Enum):
    """Closed set of cell kinds; each value is the symbol used in text."""

    MINE = "*"
    EMPTY = "."
    NEWLINE = "\n"
    # only ever written to rendered output, never stored in a grid
    ERROR = "E"

    def __str__(self) -> str:
        return self.value


Row = Tuple[CellKind, ...]


@dataclass(frozen=True)
class Board:
    """Parsed minesweeper board.

    ``width`` and ``height`` are cached at construction time.  Boards built in
    strict mode always satisfy ``len(grid) == height`` and
    ``len(row) == width`` for every row; legacy boards only promise what the
    input happened to contain.
    """

    grid: Tuple[Row, ...]
    width: int
    height: int

    def cell(self, row: int, column: int) -> CellKind:
        return self.grid[row][column]

    def is_mine(self, row: int, column: int) -> bool:
        return self.cell(row, column) is CellKind.MINE

    def coords(self) -> Iterator[Coord]:
        """Yield every ``(row, col)`` in row-major order."""
        for r in range(self.height):
            for c in range(self.width):
                yield r, c
