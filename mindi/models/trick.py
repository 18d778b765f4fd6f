"""Trick model and the follow-suit rule."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from mindi.models.card import Card, determine_winner
from mindi.models.enums import Suit


@dataclass(frozen=True)
class PlayedCard:
    """Represents a card played by a player in a trick."""

    player_id: int
    card: Card


@dataclass
class Trick:
    """Represents the trick in progress.

    Plays are append-only until the trick is resolved. The first card played
    sets the lead suit.

    Attributes:
        number: Trick number within the match (1-indexed)
        table_size: Number of seats; the trick is complete at this many plays
        plays: Cards played so far, in order

    """

    number: int
    table_size: int
    plays: list[PlayedCard] = field(default_factory=list)

    @property
    def lead_suit(self) -> Suit | None:
        """Suit of the first card played, None while the trick is empty."""
        if not self.plays:
            return None
        return self.plays[0].card.suit

    def is_empty(self) -> bool:
        """Check if nobody has played yet."""
        return not self.plays

    def is_complete(self) -> bool:
        """Check if every seat has played."""
        return len(self.plays) == self.table_size

    def add_card(self, player_id: int, card: Card) -> None:
        """Append a play to the trick."""
        if self.is_complete():
            msg = f"Trick already has {self.table_size} cards"
            raise ValueError(msg)
        self.plays.append(PlayedCard(player_id, card))

    def cards(self) -> list[Card]:
        """Get all cards played in this trick."""
        return [pc.card for pc in self.plays]

    def tens(self) -> list[Card]:
        """Get the ten-rank cards played in this trick, in play order."""
        return [card for card in self.cards() if card.is_ten()]

    def determine_winner(self, trump: Suit | None) -> int | None:
        """Determine the winning player under the effective trump suit."""
        return determine_winner([(pc.player_id, pc.card) for pc in self.plays], trump)

    def __str__(self) -> str:
        """Return string representation of the trick."""
        cards_str = ", ".join(f"P{pc.player_id}: {pc.card}" for pc in self.plays)
        return f"Trick {self.number}: [{cards_str}]"


@dataclass(frozen=True)
class CompletedTrick:
    """A resolved trick, kept for history and card accounting."""

    number: int
    plays: tuple[PlayedCard, ...]
    winner_id: int
    captured_tens: tuple[Card, ...]

    def cards(self) -> list[Card]:
        """Get all cards swept with this trick."""
        return [pc.card for pc in self.plays]


def must_follow(hand: Sequence[Card], lead_suit: Suit | None) -> bool:
    """Check if a hand holds at least one card of the lead suit."""
    return lead_suit is not None and any(card.suit == lead_suit for card in hand)


def get_valid_cards(hand: Sequence[Card], trick: Trick) -> list[Card]:
    """Get valid cards that can be played from the hand.

    - If leading, any card can be played
    - If following, must follow the lead suit if possible
    - Otherwise any card can be played
    """
    lead_suit = trick.lead_suit
    if lead_suit is None:
        return list(hand)

    suit_cards = [card for card in hand if card.suit == lead_suit]
    if suit_cards:
        return suit_cards
    return list(hand)
