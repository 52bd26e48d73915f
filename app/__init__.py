"""Entry points around the mine counting core: CLI and HTTP service."""
from __future__ import annotations

from app.files import BoardFileError, read_board_file

__all__ = ["BoardFileError", "read_board_file"]
