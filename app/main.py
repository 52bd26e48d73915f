from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from app import config
from logic.parser import MalformedInputError, parse_board
from logic.render import render_mine_count
from logic.renderer import render_board_image
from models import Board


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


app = FastAPI()


async def _board_from_request(request: Request) -> Board:
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Request body is empty")
    if len(body) > config.MAX_BOARD_BYTES:
        raise HTTPException(status_code=413, detail="Board is too large")
    try:
        board = parse_board(
            body,
            strict=config.STRICT_PARSING,
            reject_unknown=config.REJECT_UNKNOWN,
        )
    except MalformedInputError as exc:
        logger.info("Rejected malformed board: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return board


def _render_or_422(board: Board) -> str:
    try:
        return render_mine_count(board)
    except IndexError as exc:
        logger.warning("Board rows have inconsistent lengths")
        raise HTTPException(
            status_code=422, detail="Board rows have inconsistent lengths"
        ) from exc


@app.post("/annotate", response_class=PlainTextResponse)
async def annotate_board(request: Request) -> str:
    board = await _board_from_request(request)
    result = _render_or_422(board)
    logger.info("Annotated %dx%d board", board.width, board.height)
    return result


@app.post("/annotate.png")
async def annotate_board_png(request: Request) -> Response:
    board = await _board_from_request(request)
    annotated = _render_or_422(board)
    buffer = render_board_image(board, annotated)
    return Response(content=buffer.getvalue(), media_type="image/png")


@app.api_route("/", methods=["GET", "HEAD"])
async def root() -> dict[str, str]:
    return {"status": "running"}


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    """Simple health-check endpoint.

    Returns a JSON response indicating the application is up.
    """
    return {"status": "ok"}
