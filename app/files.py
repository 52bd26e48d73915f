"""Reading board files from disk."""
from __future__ import annotations

from pathlib import Path
from typing import Union


class BoardFileError(ValueError):
    """Raised when a board file can be read but holds no board."""


def read_board_file(path: Union[str, Path]) -> str:
    """Return the full contents of the board file at ``path``.

    Bytes are decoded one per character and line endings are left as they
    are, so a ``\\r`` stays a cell.  ``OSError`` from opening the file
    (missing path, permissions) propagates unchanged.  An empty file raises
    :class:`BoardFileError`.
    """
    path = Path(path)
    data = path.read_bytes().decode("latin-1")
    if not data:
        raise BoardFileError(f"{path} is empty")
    return data
