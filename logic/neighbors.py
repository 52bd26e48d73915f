from __future__ import annotations
from typing import Tuple

from models import Board


def get_bounds(axis_length: int, position: int) -> Tuple[int, int]:
    """Return the ``(low, high)`` offsets of the 3x3 window on one axis.

    The span is ``(-1, 1)`` in the interior and is clamped to ``0`` on the
    side that touches the first or last index.  A single-cell axis clamps both
    sides.
    """
    low = 0 if position == 0 else -1
    high = 0 if position == axis_length - 1 else 1
    return low, high


def axis_bounds(board: Board, vertical: bool, position: int) -> Tuple[int, int]:
    size = board.height if vertical else board.width
    return get_bounds(size, position)


def count_surrounding_mines(board: Board, row: int, column: int) -> int:
    """Count mines among the up to 8 neighbours of ``(row, column)``."""
    top, bottom = axis_bounds(board, True, row)
    left, right = axis_bounds(board, False, column)
    mines = 0
    for dr in range(top, bottom + 1):
        for dc in range(left, right + 1):
            if dr == 0 and dc == 0:
                continue
            if board.is_mine(row + dr, column + dc):
                mines += 1
    return mines
