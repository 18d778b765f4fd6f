"""Response models and DTOs."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from mindi.models.enums import Command, ErrorCode
from mindi.models.snapshot import MatchSnapshot

__all__ = [
    "Command",
    "CreateMatchRequest",
    "CreateMatchResponse",
    "ErrorCode",
    "ErrorResponse",
    "LogResponse",
    "MatchSnapshot",
    "PlayCardRequest",
    "ServerMessage",
]


@dataclass
class ServerMessage:
    """Message pushed from the engine to the presentation layer.

    Attributes:
        command: Command type
        match_id: Match identifier
        content: Message payload (varies by command)

    """

    command: Command
    match_id: str
    content: Any


class CreateMatchRequest(BaseModel):
    """Request to start a match. Table size defaults to the configured one."""

    table_size: int | None = None


class CreateMatchResponse(BaseModel):
    """Response for match creation."""

    session_id: str
    snapshot: MatchSnapshot
    message: str = "Match started"


class PlayCardRequest(BaseModel):
    """Request to play a card from the primary seat."""

    card_id: str = Field(min_length=1, description="Card identity, e.g. 10S-0")


class LogResponse(BaseModel):
    """Incremental read of the log-line stream."""

    lines: list[str]
    next: int


class ErrorResponse(BaseModel):
    """Error response."""

    code: ErrorCode
    message: str
