"""API routes."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from mindi.api.match_handler import MatchHandler
from mindi.api.responses import (
    CreateMatchRequest,
    CreateMatchResponse,
    ErrorResponse,
    LogResponse,
    MatchSnapshot,
    PlayCardRequest,
)
from mindi.api.session import session_manager
from mindi.models.errors import (
    ActionAfterTerminationError,
    IllegalMoveError,
    InvalidTableSizeError,
    MatchNotFoundError,
    MindiError,
)

router = APIRouter()

# Same status FastAPI uses for request validation errors
HTTP_422_UNPROCESSABLE = 422


def _http_error(status_code: int, error: MindiError) -> HTTPException:
    """Wrap an engine error in an HTTPException with a {code, message} body."""
    detail = ErrorResponse(code=error.code, message=error.message).model_dump(mode="json")
    return HTTPException(status_code=status_code, detail=detail)


def _get_handler(session_id: str) -> MatchHandler:
    try:
        return session_manager.get(session_id)
    except MatchNotFoundError as e:
        raise _http_error(status.HTTP_404_NOT_FOUND, e) from e


def _table_size(request: CreateMatchRequest) -> int:
    if request.table_size is None:
        return session_manager.settings.default_table_size
    return request.table_size


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check."""
    return {"status": "healthy"}


@router.post("/matches")
async def create_match(request: CreateMatchRequest) -> CreateMatchResponse:
    """Start a match in a new session.

    The primary seat (0) is driven through this API; every other seat is a bot.
    """
    try:
        session_id, handler = await session_manager.create(_table_size(request))
    except InvalidTableSizeError as e:
        raise _http_error(HTTP_422_UNPROCESSABLE, e) from e
    except MindiError as e:
        raise _http_error(status.HTTP_503_SERVICE_UNAVAILABLE, e) from e

    return CreateMatchResponse(session_id=session_id, snapshot=handler.snapshot())


@router.post("/matches/{session_id}/restart")
async def restart_match(session_id: str, request: CreateMatchRequest) -> MatchSnapshot:
    """Start a new match in an existing session, cancelling the old one's pending actions."""
    handler = _get_handler(session_id)
    try:
        return await handler.start_match(_table_size(request))
    except InvalidTableSizeError as e:
        raise _http_error(HTTP_422_UNPROCESSABLE, e) from e


@router.get("/matches/{session_id}")
async def get_match(session_id: str) -> MatchSnapshot:
    """Current snapshot from the primary seat's point of view."""
    return _get_handler(session_id).snapshot()


@router.post("/matches/{session_id}/play")
async def play_card(session_id: str, request: PlayCardRequest) -> MatchSnapshot:
    """Play a card from the primary seat."""
    handler = _get_handler(session_id)
    try:
        return await handler.play_card(request.card_id)
    except ActionAfterTerminationError as e:
        raise _http_error(status.HTTP_409_CONFLICT, e) from e
    except IllegalMoveError as e:
        raise _http_error(status.HTTP_400_BAD_REQUEST, e) from e


@router.get("/matches/{session_id}/log")
async def get_log(
    session_id: str,
    since: Annotated[int, Query(ge=0, description="Index of the first line to return")] = 0,
) -> LogResponse:
    """Incremental read of the match log."""
    lines, next_index = _get_handler(session_id).log_since(since)
    return LogResponse(lines=lines, next=next_index)


@router.delete("/matches/{session_id}")
async def close_match(session_id: str) -> dict[str, str]:
    """Cancel pending actions and drop the session."""
    _get_handler(session_id)
    await session_manager.remove(session_id)
    return {"status": "closed"}
