import logging

import pytest

from logic.parser import MalformedInputError, parse_board, validate_board_text
from models import CellKind
from tests.utils import board_text

E, M = CellKind.EMPTY, CellKind.MINE


def test_board_initializes_correctly():
    board = parse_board(".*...\n..**.\n..*..\n....*\n")

    assert board.height == 4
    assert board.width == 5
    assert board.grid == (
        (E, M, E, E, E),
        (E, E, M, M, E),
        (E, E, M, E, E),
        (E, E, E, E, M),
    )


def test_parse_board_accepts_bytes():
    text = "..*\n*..\n"
    assert parse_board(text.encode("ascii")) == parse_board(text)


def test_unknown_characters_become_empty():
    board = parse_board("x*?\n#.E\n")
    assert board.grid == ((E, M, E), (E, E, E))


def test_grid_never_stores_delimiters_or_errors():
    board = parse_board("a*b\n\t..\n")
    kinds = {cell for row in board.grid for cell in row}
    assert kinds <= {E, M}


def test_single_cell_board():
    board = parse_board("*\n")
    assert (board.width, board.height) == (1, 1)
    assert board.cell(0, 0) is M
    assert board.is_mine(0, 0)


@pytest.mark.parametrize(
    "text,message",
    [
        ("", "empty"),
        ("\n", "row 1 is empty"),
        ("...", "no row delimiter"),
        ("...\n...", "end with a row delimiter"),
        ("...\n..\n", "row 2 has 2 cells, expected 3"),
        ("..\n...\n", "row 2 has 3 cells, expected 2"),
        ("..\n..\n\n", "row 3 has 0 cells"),
    ],
)
def test_strict_parse_rejects_malformed_text(text, message):
    with pytest.raises(MalformedInputError) as exc:
        parse_board(text)
    assert message in str(exc.value)


def test_reject_unknown_names_position():
    with pytest.raises(MalformedInputError) as exc:
        parse_board("..*\n.x.\n", reject_unknown=True)
    assert "'x'" in str(exc.value)
    assert "row 2, column 2" in str(exc.value)


def test_reject_unknown_accepts_clean_board():
    validate_board_text(board_text("*.", ".*"), reject_unknown=True)


def test_malformed_input_is_value_error():
    with pytest.raises(ValueError):
        parse_board("")


def test_legacy_parse_still_requires_a_delimiter():
    with pytest.raises(MalformedInputError):
        parse_board("*..", strict=False)


def test_legacy_parse_keeps_computed_dimensions(caplog):
    # first row decides the width, total length decides the height
    with caplog.at_level(logging.WARNING):
        board = parse_board("..\n......\n", strict=False)
    assert board.width == 2
    assert board.height == 3
    assert len(board.grid) == 2
    assert "inconsistent" in caplog.text.lower()


def test_legacy_parse_drops_unterminated_row():
    board = parse_board("*.\n.*", strict=False)
    assert board.width == 2
    assert board.height == 1
    assert board.grid == ((M, E),)


def test_board_is_immutable():
    board = parse_board("..\n..\n")
    with pytest.raises(AttributeError):
        board.width = 3


def test_cell_lookup_by_row_and_column():
    board = parse_board("*..\n..*\n")
    assert board.cell(0, 0) is M
    assert board.cell(1, 0) is E
    assert board.cell(1, 2) is M
    assert list(board.coords())[:4] == [(0, 0), (0, 1), (0, 2), (1, 0)]
