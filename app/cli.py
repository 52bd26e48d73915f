"""Command-line entry point: annotate a board file and print it."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from app import config
from app.files import BoardFileError, read_board_file
from logic.parser import MalformedInputError, parse_board
from logic.render import render_mine_count
from logic.renderer import render_board_image


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mine-count",
        description="Print a minesweeper board with neighbouring mine counts.",
    )
    parser.add_argument("path", type=Path, help="board file to annotate")
    parser.add_argument(
        "--png",
        type=Path,
        default=None,
        help="also save the annotated board as a PNG image at this path",
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="skip board shape validation",
    )
    parser.add_argument(
        "--reject-unknown",
        action="store_true",
        default=config.REJECT_UNKNOWN,
        help="fail on cell characters other than '*' and '.'",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        data = read_board_file(args.path)
    except (OSError, BoardFileError) as exc:
        logger.error("Could not read board file %s: %s", args.path, exc)
        return 1

    strict = config.STRICT_PARSING and not args.legacy
    try:
        board = parse_board(data, strict=strict, reject_unknown=args.reject_unknown)
        annotated = render_mine_count(board)
    except MalformedInputError as exc:
        logger.error("Malformed board in %s: %s", args.path, exc)
        return 1
    except IndexError:
        # only reachable without shape validation
        logger.error("Board rows in %s have inconsistent lengths", args.path)
        return 1

    sys.stdout.write(annotated)

    if args.png is not None:
        buffer = render_board_image(board, annotated)
        try:
            args.png.parent.mkdir(parents=True, exist_ok=True)
            args.png.write_bytes(buffer.getvalue())
        except OSError as exc:
            logger.error("Could not save board image to %s: %s", args.png, exc)
            return 1
        logger.info("Board image saved to %s", args.png)
    return 0


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())


if __name__ == "__main__":
    run()
