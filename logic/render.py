from __future__ import annotations
import sys
from typing import List, Optional, TextIO, Union

from models import Board, CellKind
from logic.neighbors import count_surrounding_mines
from logic.parser import parse_board

# text symbols for board rendering
MINE_SYMBOL = CellKind.MINE.value
EMPTY_SYMBOL = CellKind.EMPTY.value
ERROR_SYMBOL = CellKind.ERROR.value
ROW_END = CellKind.NEWLINE.value


def count_symbol(count: int) -> str:
    """Render a neighbour count as a single character.

    Zero is shown as the empty symbol.  Counts that do not fit in one decimal
    digit cannot come from an 8-cell neighbourhood, but are rendered as
    ``ERROR_SYMBOL`` rather than breaking the grid alignment.
    """
    if count == 0:
        return EMPTY_SYMBOL
    if 0 < count <= 9:
        return str(count)
    return ERROR_SYMBOL


def _render_line(cells: List[str]) -> str:
    return ''.join(cells) + ROW_END


def render_cell(board: Board, row: int, column: int) -> str:
    if board.is_mine(row, column):
        return MINE_SYMBOL
    return count_symbol(count_surrounding_mines(board, row, column))


def render_mine_count(board: Board) -> str:
    """Return the board with every non-mine cell replaced by its mine count.

    >>> from logic.parser import parse_board
    >>> render_mine_count(parse_board("..*..\\n..***\\n*...*\\n.*...\\n"))
    '.2*42\\n13***\\n*334*\\n2*111\\n'
    """
    lines = []
    for r in range(board.height):
        cells = [render_cell(board, r, c) for c in range(board.width)]
        lines.append(_render_line(cells))
    return ''.join(lines)


def print_mine_count(board: Board, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(render_mine_count(board))


def annotate(
    data: Union[str, bytes],
    *,
    strict: bool = True,
    reject_unknown: bool = False,
) -> str:
    """Parse ``data`` and return its annotated rendering."""
    board = parse_board(data, strict=strict, reject_unknown=reject_unknown)
    return render_mine_count(board)
