"""Card model and trick-winner resolution."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from mindi.models.enums import Rank, Suit


@dataclass(frozen=True)
class Card:
    """Represents a single physical card.

    Attributes:
        suit: Card suit
        rank: Card rank (value 6-14)
        deck_index: Which physical deck copy the card comes from (0 or 1)

    """

    suit: Suit
    rank: Rank
    deck_index: int = 0

    @property
    def value(self) -> int:
        """Numeric strength (10=10, J=11, Q=12, K=13, A=14)."""
        return int(self.rank)

    @property
    def id(self) -> str:
        """Stable identity, e.g. ``10S-0``."""
        return f"{self.rank.label}{self.suit.value}-{self.deck_index}"

    def is_ten(self) -> bool:
        """Check if card is a ten (a Mindi)."""
        return self.rank == Rank.TEN

    def is_trump(self, trump: Suit | None) -> bool:
        """Check if card belongs to the given trump suit."""
        return trump is not None and self.suit == trump

    def to_dict(self) -> dict[str, Any]:
        """Convert card to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "suit": self.suit.value,
            "rank": self.rank.label,
            "value": self.value,
            "deck_index": self.deck_index,
        }

    @classmethod
    def from_id(cls, card_id: str) -> "Card":
        """Create a Card from its identity string like ``10S-0`` or ``AH-1``."""
        face, sep, index = card_id.partition("-")
        if not sep or len(face) < 2:  # noqa: PLR2004
            msg = f"Invalid card id: {card_id!r}"
            raise ValueError(msg)
        try:
            return cls(Suit(face[-1].upper()), Rank.from_label(face[:-1]), int(index))
        except ValueError as e:
            msg = f"Invalid card id: {card_id!r}"
            raise ValueError(msg) from e

    def __str__(self) -> str:
        """Return string representation of card."""
        return f"{self.rank.label}{self.suit.icon}"


def sort_key(card: Card) -> tuple[str, int, int]:
    """Display order for hands: by suit letter, then ascending value."""
    return (card.suit.value, card.value, card.deck_index)


def determine_winner(plays: Sequence[tuple[int, Card]], trump: Suit | None) -> int | None:
    """Determine the winner of a completed trick.

    Args:
        plays: (player_id, card) pairs in the order they were played
        trump: Effective trump suit, or None while trump is still hidden

    Returns:
        player_id of the winning play, or None for an empty trick

    Rules:
        1. The first card sets the lead suit and starts as the winner
        2. A trump beats any non-trump
        3. Between two trumps or two non-trumps of the same suit, strictly higher value wins
        4. A lead-suit card beats an off-suit, non-trump winner
        5. Anything else never changes the winner (ties keep the earlier card)

    """
    if not plays:
        return None

    winner_id, high = plays[0]
    lead_suit = high.suit

    for player_id, card in plays[1:]:
        is_trump = card.is_trump(trump)
        high_is_trump = high.is_trump(trump)

        if is_trump and not high_is_trump:
            winner_id, high = player_id, card
        elif is_trump == high_is_trump:
            if card.suit == high.suit:
                if card.value > high.value:
                    winner_id, high = player_id, card
            elif card.suit == lead_suit and high.suit != lead_suit and not high_is_trump:
                winner_id, high = player_id, card

    return winner_id
