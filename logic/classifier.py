from __future__ import annotations
from typing import List, Tuple, Union

from models import CellKind


# ``bytes`` iterate as ints, so both forms of a single cell are accepted.
CellChar = Union[str, int]

_STRICT = {
    CellKind.NEWLINE.value: CellKind.NEWLINE,
    CellKind.MINE.value: CellKind.MINE,
    CellKind.EMPTY.value: CellKind.EMPTY,
}


def _as_char(char: CellChar) -> str:
    if isinstance(char, int):
        return chr(char)
    return char


def classify(char: CellChar) -> CellKind:
    """Map a raw cell character to its kind, ``ERROR`` when unrecognised."""
    return _STRICT.get(_as_char(char), CellKind.ERROR)


def classify_permissive(char: CellChar) -> CellKind:
    """Construction policy: anything that is not a delimiter or mine is empty."""
    kind = classify(char)
    if kind is CellKind.NEWLINE or kind is CellKind.MINE:
        return kind
    return CellKind.EMPTY


def find_invalid_cells(text: str) -> List[Tuple[int, int, str]]:
    """Return ``(row, col, char)`` for every character ``classify`` rejects."""
    invalid: List[Tuple[int, int, str]] = []
    row = col = 0
    for ch in text:
        kind = classify(ch)
        if kind is CellKind.NEWLINE:
            row += 1
            col = 0
            continue
        if kind is CellKind.ERROR:
            invalid.append((row, col, ch))
        col += 1
    return invalid
