"""Concealed trump state."""

import random
from collections.abc import Sequence
from dataclasses import dataclass

from mindi.models.card import Card
from mindi.models.enums import Suit
from mindi.models.trick import Trick, must_follow


@dataclass
class TrumpState:
    """The trump suit, chosen secretly at match start.

    The suit never changes during a match. ``revealed`` only ever goes from
    False to True, the first time a player cannot follow the lead suit.

    Attributes:
        suit: The trump suit
        revealed: Whether the table has seen the trump suit

    """

    suit: Suit
    revealed: bool = False

    @classmethod
    def choose(cls, rng: random.Random | None = None) -> "TrumpState":
        """Pick a uniformly random hidden trump."""
        chooser = rng or random
        return cls(suit=chooser.choice(list(Suit)))

    @property
    def effective_suit(self) -> Suit | None:
        """Trump suit used for trick resolution; a hidden trump does not count."""
        return self.suit if self.revealed else None

    def triggers_reveal(self, hand: Sequence[Card], trick: Trick) -> bool:
        """Check if the acting player's turn reveals the trump.

        True when the trick has a lead suit, the player holds none of it and
        trump is still hidden. The card actually chosen does not matter.
        """
        if self.revealed or trick.is_empty():
            return False
        return not must_follow(hand, trick.lead_suit)

    def reveal(self) -> bool:
        """Reveal the trump. Returns True only on the first call."""
        if self.revealed:
            return False
        self.revealed = True
        return True
