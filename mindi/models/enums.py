"""Enums and constants for the game."""

from enum import Enum, IntEnum, StrEnum


class Suit(str, Enum):
    """Card suits."""

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    @property
    def icon(self) -> str:
        """Return the suit symbol."""
        return _SUIT_ICONS[self]

    def __str__(self) -> str:
        """Return the suit symbol."""
        return self.icon


_SUIT_ICONS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


class Rank(IntEnum):
    """Card ranks; the value doubles as the trick-taking strength."""

    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        """Short label used in card identities ("6".."10", "J", "Q", "K", "A")."""
        if self.value <= Rank.TEN:
            return str(self.value)
        return self.name[0]

    @classmethod
    def from_label(cls, label: str) -> "Rank":
        """Parse a short rank label."""
        for rank in cls:
            if rank.label == label.upper():
                return rank
        msg = f"Unknown rank label: {label!r}"
        raise ValueError(msg)


class GamePhase(str, Enum):
    """Match phases during the lifecycle."""

    SETUP = "SETUP"
    PLAY = "PLAY"
    TRICK_END = "TRICK_END"
    GAME_OVER = "GAME_OVER"


class Team(str, Enum):
    """Partnerships; even seats play for A, odd seats for B."""

    A = "A"
    B = "B"

    @classmethod
    def for_player(cls, player_id: int) -> "Team":
        """Return the team a seat belongs to."""
        return cls.A if player_id % 2 == 0 else cls.B

    @property
    def display_name(self) -> str:
        """Name shown in the log-line stream."""
        return "TEAM BLUE (YOU)" if self is Team.A else "TEAM RED"


class Command(str, Enum):
    """Messages pushed to the presentation layer."""

    STARTED = "STARTED"
    PICKED = "PICKED"
    TRUMP_REVEALED = "TRUMP_REVEALED"
    ANNOUNCE_TRICK_WINNER = "ANNOUNCE_TRICK_WINNER"
    END_GAME = "END_GAME"


class ErrorCode(StrEnum):
    """Error codes for i18n translation on the frontend."""

    INVALID_TABLE_SIZE = "error.invalidTableSize"
    NOT_IN_PLAY_PHASE = "error.notInPlayPhase"
    NO_COMPLETED_TRICK = "error.noCompletedTrick"
    NOT_YOUR_TURN = "error.notYourTurn"
    INVALID_PLAYER = "error.invalidPlayer"
    INVALID_CARD = "error.invalidCard"
    CARD_NOT_IN_HAND = "error.cardNotInHand"
    MUST_FOLLOW_SUIT = "error.mustFollowSuit"
    GAME_OVER = "error.gameOver"
    MATCH_NOT_FOUND = "error.matchNotFound"
    TOO_MANY_SESSIONS = "error.tooManySessions"
