"""Match event model backing the log-line stream."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class MatchEventType(str, Enum):
    """Types of match events that can be recorded."""

    MATCH_STARTED = "MATCH_STARTED"
    CARD_PLAYED = "CARD_PLAYED"
    TRUMP_REVEALED = "TRUMP_REVEALED"
    TRICK_WON = "TRICK_WON"
    MATCH_ENDED = "MATCH_ENDED"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"


# Events shown in the human-readable log
DISPLAYED_EVENTS = frozenset(
    {
        MatchEventType.MATCH_STARTED,
        MatchEventType.TRUMP_REVEALED,
        MatchEventType.TRICK_WON,
        MatchEventType.MATCH_ENDED,
        MatchEventType.ILLEGAL_MOVE,
    }
)


@dataclass(frozen=True)
class MatchEvent:
    """Represents a single match event."""

    match_id: str
    event_type: MatchEventType
    message: str
    timestamp: datetime = field(default_factory=_utc_now)
    trick_number: int | None = None
    player_id: int | None = None
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_displayed(self) -> bool:
        """Check if this event belongs to the log-line stream."""
        return self.event_type in DISPLAYED_EVENTS
