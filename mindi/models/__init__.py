"""Game domain models."""

from mindi.models.captures import CapturedTens, MatchResult
from mindi.models.card import Card, determine_winner
from mindi.models.deck import Deck
from mindi.models.enums import Command, ErrorCode, GamePhase, Rank, Suit, Team
from mindi.models.errors import (
    ActionAfterTerminationError,
    IllegalMoveError,
    InvalidTableSizeError,
    MatchNotFoundError,
    MindiError,
)
from mindi.models.match import Match
from mindi.models.match_event import MatchEvent, MatchEventType
from mindi.models.snapshot import MatchSnapshot
from mindi.models.trick import CompletedTrick, PlayedCard, Trick, get_valid_cards
from mindi.models.trump import TrumpState

__all__ = [
    "ActionAfterTerminationError",
    "CapturedTens",
    "Card",
    "Command",
    "CompletedTrick",
    "Deck",
    "ErrorCode",
    "GamePhase",
    "IllegalMoveError",
    "InvalidTableSizeError",
    "Match",
    "MatchEvent",
    "MatchEventType",
    "MatchNotFoundError",
    "MatchResult",
    "MatchSnapshot",
    "MindiError",
    "PlayedCard",
    "Rank",
    "Suit",
    "Team",
    "Trick",
    "TrumpState",
    "determine_winner",
    "get_valid_cards",
]
