"""Read-only match snapshots handed to the presentation layer."""

from pydantic import BaseModel, ConfigDict

from mindi.models.card import Card
from mindi.models.enums import GamePhase, Suit, Team


class CardInfo(BaseModel):
    """Card as seen by clients."""

    model_config = ConfigDict(frozen=True)

    id: str
    suit: Suit
    rank: str
    value: int
    deck_index: int

    @classmethod
    def from_card(cls, card: Card) -> "CardInfo":
        """Build from a domain card."""
        return cls(**card.to_dict())


class TableCard(BaseModel):
    """Card on the table with player info."""

    model_config = ConfigDict(frozen=True)

    player_id: int
    card: CardInfo


class TrumpInfo(BaseModel):
    """Trump as seen by clients; the suit stays hidden until revealed."""

    model_config = ConfigDict(frozen=True)

    suit: Suit | None
    revealed: bool


class CapturedTensInfo(BaseModel):
    """Tens captured by each team."""

    model_config = ConfigDict(frozen=True)

    team_a: list[CardInfo]
    team_b: list[CardInfo]


class ResultInfo(BaseModel):
    """Final match outcome."""

    model_config = ConfigDict(frozen=True)

    winner: Team | None
    team_a: int
    team_b: int
    is_draw: bool


class MatchSnapshot(BaseModel):
    """State of a match from one seat's point of view.

    Only the viewer's own hand is included; other seats are reduced to
    hand sizes.
    """

    model_config = ConfigDict(frozen=True)

    match_id: str
    table_size: int
    phase: GamePhase
    turn: int
    viewer: int
    hand: list[CardInfo]
    hand_sizes: list[int]
    valid_cards: list[str]
    trick: list[TableCard]
    lead_suit: Suit | None
    trump: TrumpInfo
    captured_tens: CapturedTensInfo
    tricks_played: int
    result: ResultInfo | None = None
