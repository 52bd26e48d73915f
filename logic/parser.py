from __future__ import annotations
import logging
from typing import List, Union

from models import Board, CellKind, Row
from logic.classifier import classify, classify_permissive, find_invalid_cells


logger = logging.getLogger(__name__)

DELIMITER = CellKind.NEWLINE.value


class MalformedInputError(ValueError):
    """Raised when board text does not describe a rectangular grid."""


def _as_text(data: Union[str, bytes]) -> str:
    # latin-1 keeps one character per input byte
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("latin-1")
    return data


def _first_row_width(text: str) -> int:
    width = 0
    while width < len(text) and classify(text[width]) is not CellKind.NEWLINE:
        width += 1
    if width == len(text):
        raise MalformedInputError("board has no row delimiter")
    return width


def validate_board_text(text: str, *, reject_unknown: bool = False) -> None:
    """Check that ``text`` is a non-empty grid of equal rows ending in a newline.

    Raises :class:`MalformedInputError` describing the first problem found.
    """
    if not text:
        raise MalformedInputError("board is empty")
    width = _first_row_width(text)
    if width == 0:
        raise MalformedInputError("row 1 is empty")
    if not text.endswith(DELIMITER):
        raise MalformedInputError("board must end with a row delimiter")
    for idx, line in enumerate(text[:-1].split(DELIMITER)):
        if len(line) != width:
            raise MalformedInputError(
                f"row {idx + 1} has {len(line)} cells, expected {width}"
            )
    if reject_unknown:
        invalid = find_invalid_cells(text)
        if invalid:
            r, c, ch = invalid[0]
            raise MalformedInputError(
                f"unexpected character {ch!r} at row {r + 1}, column {c + 1}"
            )


def parse_board(
    data: Union[str, bytes],
    *,
    strict: bool = True,
    reject_unknown: bool = False,
) -> Board:
    """Build a :class:`Board` from raw board text.

    ``width`` is the length of the first row and ``height`` is the text length
    divided by ``width + 1``.  With ``strict`` disabled the text is trusted to
    be uniform; a board whose rows disagree then fails only when it is
    rendered.
    """
    text = _as_text(data)
    if strict:
        validate_board_text(text, reject_unknown=reject_unknown)
    width = _first_row_width(text)
    height = len(text) // (width + 1)

    grid: List[Row] = []
    row: List[CellKind] = []
    for ch in text:
        kind = classify_permissive(ch)
        if kind is CellKind.NEWLINE:
            grid.append(tuple(row))
            row = []
        else:
            row.append(kind)

    if not strict and (len(grid) != height or row):
        logger.warning(
            "Board shape is inconsistent: width=%d height=%d rows=%d trailing=%d",
            width,
            height,
            len(grid),
            len(row),
        )
    return Board(grid=tuple(grid), width=width, height=height)
